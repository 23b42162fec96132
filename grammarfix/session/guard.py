from typing import Literal

from grammarfix.session.store import SessionStore

Destination = Literal["home", "login"]

HOME: Destination = "home"
LOGIN: Destination = "login"


def route(store: SessionStore) -> Destination:
    """Pick the view to show when the root view mounts.

    Args:
        store: Session store holding the logged-in user record.

    Returns:
        "home" if a user record exists, "login" otherwise.
    """
    return HOME if store.is_authenticated() else LOGIN
