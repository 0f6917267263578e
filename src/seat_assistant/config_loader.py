"""
Configuration loader with validation.

Builds SeatAssistantConfig from SEAT_ASSISTANT_* environment variables.
"""
from dotenv import load_dotenv

from .config import SeatAssistantConfig
from .config_validator import get_optional_env, parse_bool, parse_float, parse_int, validate_config

ENV_PREFIX = "SEAT_ASSISTANT_"


def _env(name: str, default: str) -> str:
    return get_optional_env(f"{ENV_PREFIX}{name}", default=default)


def load_config_from_env(load_env_file: bool = True) -> SeatAssistantConfig:
    """
    Load configuration from environment variables with validation.

    This is the recommended way to create SeatAssistantConfig.

    Usage:
        config = load_config_from_env()
        service = SeatAssistantService(config)

    :param load_env_file: Load a local .env file first (disable in production)
    :return: Validated SeatAssistantConfig instance
    :raises: ConfigurationError if a value is malformed or out of range
    """
    if load_env_file:
        # Load .env file if it exists (for local development)
        load_dotenv()

    defaults = SeatAssistantConfig()

    config = SeatAssistantConfig(
        debounce_seconds=parse_float(
            _env("DEBOUNCE_SECONDS", str(defaults.debounce_seconds)),
            f"{ENV_PREFIX}DEBOUNCE_SECONDS",
        ),
        min_utterance_length=parse_int(
            _env("MIN_UTTERANCE_LENGTH", str(defaults.min_utterance_length)),
            f"{ENV_PREFIX}MIN_UTTERANCE_LENGTH",
        ),
        negation_window=parse_int(
            _env("NEGATION_WINDOW", str(defaults.negation_window)),
            f"{ENV_PREFIX}NEGATION_WINDOW",
        ),
        refresh_debounce_on_reject=parse_bool(
            _env("REFRESH_DEBOUNCE_ON_REJECT", str(defaults.refresh_debounce_on_reject))
        ),
        low_confidence_threshold=parse_float(
            _env("LOW_CONFIDENCE_THRESHOLD", str(defaults.low_confidence_threshold)),
            f"{ENV_PREFIX}LOW_CONFIDENCE_THRESHOLD",
        ),
        top_n=parse_int(_env("TOP_N", str(defaults.top_n)), f"{ENV_PREFIX}TOP_N"),
        stage_x=parse_float(_env("STAGE_X", str(defaults.stage_x)), f"{ENV_PREFIX}STAGE_X"),
        stage_y=parse_float(_env("STAGE_Y", str(defaults.stage_y)), f"{ENV_PREFIX}STAGE_Y"),
        log_level=_env("LOG_LEVEL", defaults.log_level).upper(),
    )

    return validate_config(config)
