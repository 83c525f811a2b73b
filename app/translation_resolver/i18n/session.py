"""Session-backed storage of the active locale."""

from abc import ABC, abstractmethod
from typing import MutableMapping, Optional


class SessionLocale(ABC):
    """Holds the active locale code for the current user session."""

    @abstractmethod
    def get(self) -> Optional[str]:
        """Return the session's locale code, or None if none is set."""

    @abstractmethod
    def set(self, code: str) -> None:
        """Store a locale code in the session."""


class InMemorySessionLocale(SessionLocale):
    """Session locale held on the instance (scripts, workers, tests)."""

    def __init__(self, code: Optional[str] = None):
        self._code = code

    def get(self) -> Optional[str]:
        return self._code

    def set(self, code: str) -> None:
        self._code = code


class MappingSessionLocale(SessionLocale):
    """Session locale stored in a mutable mapping.

    Adapts any dict-like session (e.g. Starlette's ``request.session`` or a
    Flask session) so the locale survives across requests.

    Usage:
        session_locale = MappingSessionLocale(request.session)
        resolver = create_resolver(session_locale)
    """

    def __init__(self, session: MutableMapping, key: str = "locale"):
        self._session = session
        self.key = key

    def get(self) -> Optional[str]:
        return self._session.get(self.key) or None

    def set(self, code: str) -> None:
        self._session[self.key] = code
