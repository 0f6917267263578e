"""
Configuration validation utilities.

Reads and checks environment values before they reach SeatAssistantConfig.
"""
import os
import warnings
from typing import Optional

from .config import SeatAssistantConfig
from .exceptions import ConfigurationError

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default.",
            UserWarning
        )
        return default

    return value


def parse_float(value: Optional[str], key: str) -> float:
    """
    Parse a float setting.

    :raises: ConfigurationError if the value is not a number
    """
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got {value!r}.")


def parse_int(value: Optional[str], key: str) -> int:
    """
    Parse an integer setting.

    :raises: ConfigurationError if the value is not an integer
    """
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}.")


def parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def validate_config(config: SeatAssistantConfig) -> SeatAssistantConfig:
    """
    Validate a configuration instance.

    :param config: Configuration to check
    :return: The same config
    :raises: ConfigurationError describing the first invalid value
    """
    if config.debounce_seconds < 0:
        raise ConfigurationError(
            f"debounce_seconds must be >= 0, got {config.debounce_seconds}."
        )

    if config.min_utterance_length < 0:
        raise ConfigurationError(
            f"min_utterance_length must be >= 0, got {config.min_utterance_length}."
        )

    if config.negation_window < 0:
        raise ConfigurationError(
            f"negation_window must be >= 0, got {config.negation_window}."
        )

    if not 0.0 <= config.low_confidence_threshold <= 1.0:
        raise ConfigurationError(
            f"low_confidence_threshold must be between 0.0 and 1.0, "
            f"got {config.low_confidence_threshold}."
        )

    if config.top_n < 1:
        raise ConfigurationError(f"top_n must be at least 1, got {config.top_n}.")

    if config.log_level.upper() not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {config.log_level!r}."
        )

    return config


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "example",
        "xxx",
        "replace",
        "todo",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)
