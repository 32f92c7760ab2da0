"""In-memory implementation of SessionRegistry."""

import threading
from typing import TYPE_CHECKING

from evalconsole.console.registry import SessionRegistry
from evalconsole.observability.logging import get_logger
from evalconsole.observability.metrics import LIVE_SESSIONS

if TYPE_CHECKING:
    from evalconsole.console.session import Session

logger = get_logger(__name__)


class InMemorySessionRegistry(SessionRegistry):
    """Process-local registry guarded by a single lock.

    Construct one per process and hand it to the SessionFactory and to
    whatever request handler resolves session ids.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def register(self, session: "Session") -> None:
        with self._lock:
            self._sessions[session.id] = session
            size = len(self._sessions)
        LIVE_SESSIONS.set(size)

    def get(self, session_id: str) -> "Session | None":
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            logger.debug("session_not_found", session_id=session_id)
        return session

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
