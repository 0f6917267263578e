class SeatAssistantError(Exception):
    """Base exception for seat assistant service."""


class ConfigurationError(SeatAssistantError):
    """Raised when configuration values are missing or invalid."""


class SeatDataError(SeatAssistantError):
    """Raised when a seat payload or seat file cannot be read."""
