from grammarfix.errors import ValidationError
from grammarfix.session import HOME, LOGIN, SessionStore
from grammarfix.session.guard import Destination


def login(store: SessionStore, username: str, password: str) -> Destination:
    """Log `username` in and return the view to go to.

    The password is only required to be non-blank. It is never stored.

    Raises:
        ValidationError: If username or password is blank.
    """
    if not (username.strip() and password.strip()):
        raise ValidationError("Please enter both username and password")
    store.set_authenticated(username)
    return HOME


def logout(store: SessionStore) -> Destination:
    """Forget the logged-in user and return the view to go to."""
    store.clear_authenticated()
    return LOGIN
