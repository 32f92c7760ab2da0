"""SessionRegistry abstract interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from evalconsole.console.errors import SessionNotFoundError

if TYPE_CHECKING:
    from evalconsole.console.session import Session


class SessionRegistry(ABC):
    """Abstract interface for live session storage.

    Sessions hold live evaluators and frame references, so registries keep
    the objects themselves rather than serialized state. Insertion is the
    only mutation; eviction, if any, belongs to the host application.
    """

    @abstractmethod
    def register(self, session: "Session") -> None:
        """Store a session under its id."""
        pass

    @abstractmethod
    def get(self, session_id: str) -> "Session | None":
        """Get a session by ID, or None if unknown."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def find(self, session_id: str) -> "Session":
        """Get a session by ID.

        Raises:
            SessionNotFoundError: If no session is registered under session_id
        """
        session = self.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def __contains__(self, session_id: object) -> bool:
        return isinstance(session_id, str) and self.get(session_id) is not None
