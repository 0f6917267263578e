from dataclasses import dataclass

from .models import ReferencePoint


@dataclass
class SeatAssistantConfig:
    # Interpreter
    debounce_seconds: float = 1.2
    min_utterance_length: int = 4
    negation_window: int = 12
    refresh_debounce_on_reject: bool = True

    # Speech capture
    low_confidence_threshold: float = 0.6

    # Ranking
    top_n: int = 3
    stage_x: float = 500.0
    stage_y: float = 65.0

    # Logging
    log_level: str = "INFO"

    @property
    def default_reference(self) -> ReferencePoint:
        """Fallback stage anchor used when the layout does not provide one."""
        return ReferencePoint(self.stage_x, self.stage_y)
