"""
Seat assistant: deterministic seat ranking plus a rule-based preference interpreter.

Public API:
    service = SeatAssistantService(load_config_from_env())
    service.load_seats("session-1", raw_seats)
    service.handle_utterance("session-1", "closer to the stage please")
"""
from .config import SeatAssistantConfig
from .config_loader import load_config_from_env
from .exceptions import ConfigurationError, SeatAssistantError, SeatDataError
from .interaction import LOW_CONFIDENCE_TOKEN, IntentInterpreter
from .models import RankedSeat, ReferencePoint, ScoreBreakdown, Seat, WeightVector
from .ranking import rank_seats, top_n_seats
from .schemas import (
    AssistantResponse,
    InterpretationResult,
    Message,
    MessageKind,
    SeatSelection,
    SelectCommand,
    WeightUpdate,
)
from .seat_parser import SeatParser
from .service import SeatAssistantService

__all__ = [
    "SeatAssistantConfig",
    "load_config_from_env",
    "ConfigurationError",
    "SeatAssistantError",
    "SeatDataError",
    "LOW_CONFIDENCE_TOKEN",
    "IntentInterpreter",
    "RankedSeat",
    "ReferencePoint",
    "ScoreBreakdown",
    "Seat",
    "WeightVector",
    "rank_seats",
    "top_n_seats",
    "AssistantResponse",
    "InterpretationResult",
    "Message",
    "MessageKind",
    "SeatSelection",
    "SelectCommand",
    "WeightUpdate",
    "SeatParser",
    "SeatAssistantService",
]
