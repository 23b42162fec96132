"""The persisted "current user" record.

Presence of the record means the user is logged in. No credential is ever
checked or stored; this is a convenience flag, not access control.
"""

from pathlib import Path

from grammarfix.errors import ValidationError
from grammarfix.util.io import DEFAULT_SESSION_FILE, read_json, write_json
from grammarfix.util.logs import get_logger

logger = get_logger(__name__)


class SessionStore:
    """Reads and writes the logged-in user record in a JSON file."""

    def __init__(self, path: str | Path = DEFAULT_SESSION_FILE):
        self.path = Path(path)

    def current_user(self) -> str | None:
        """Return the stored username, or None if nobody is logged in.

        An unreadable or malformed record counts as logged out.
        """
        if not self.path.exists():
            return None
        try:
            record = read_json(self.path)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return None
        if not isinstance(record, dict) or not isinstance(record.get("username"), str):
            logger.warning(f"Ignoring malformed session file {self.path}")
            return None
        return record["username"]

    def is_authenticated(self) -> bool:
        return self.current_user() is not None

    def set_authenticated(self, username: str) -> None:
        """Replace the stored record with one for `username`.

        Raises:
            ValidationError: If `username` is blank.
        """
        if not username.strip():
            raise ValidationError("Please enter both username and password")
        write_json({"username": username}, self.path)
        logger.info(f"Logged in as {username}")

    def clear_authenticated(self) -> None:
        self.path.unlink(missing_ok=True)
        logger.info("Logged out")
