from grammarfix.session.guard import HOME, LOGIN, route
from grammarfix.session.store import SessionStore

__all__ = ["HOME", "LOGIN", "SessionStore", "route"]
