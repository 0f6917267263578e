"""
Session context domain objects.

Pure domain models with no external dependencies.
"""
from .session_context import SeatAssistantSession
from .context_manager import SessionContextManager

__all__ = ["SeatAssistantSession", "SessionContextManager"]
