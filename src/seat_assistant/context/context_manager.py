"""
Session context manager.

Manages SeatAssistantSession instances per session ID.
"""
import threading
from typing import Callable, Dict, List

from .session_context import SeatAssistantSession


class SessionContextManager:
    """
    Manages session context per session ID.

    Purpose:
    - Isolate weights, seats and debounce state per user/session
    - Keep interpreter sessions independent of each other
    """

    def __init__(self, session_factory: Callable[[], SeatAssistantSession]):
        """
        :param session_factory: Creates a new session for an unseen ID
        """
        self._factory = session_factory
        self._contexts: Dict[str, SeatAssistantSession] = {}
        self._lock = threading.Lock()

    def get_context(self, session_id: str) -> SeatAssistantSession:
        """
        Get or create context for a session.

        :param session_id: Session identifier
        :return: SeatAssistantSession instance
        """
        with self._lock:
            if session_id not in self._contexts:
                self._contexts[session_id] = self._factory()
            return self._contexts[session_id]

    def has_context(self, session_id: str) -> bool:
        return session_id in self._contexts

    def session_ids(self) -> List[str]:
        return list(self._contexts)

    def clear_context(self, session_id: str) -> None:
        """Drop a session entirely."""
        with self._lock:
            self._contexts.pop(session_id, None)

    def clear_all(self) -> None:
        """Clear all contexts."""
        with self._lock:
            self._contexts.clear()
