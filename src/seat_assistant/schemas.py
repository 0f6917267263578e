from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .models import RankedSeat, WeightVector


class MessageKind(str, Enum):
    """Why the assistant is answering with text instead of an action."""
    REPEAT = "repeat"
    ACKNOWLEDGE = "acknowledge"
    LISTENING = "listening"
    CLARIFY = "clarify"
    FALLBACK = "fallback"
    STATUS = "status"


@dataclass(frozen=True)
class WeightUpdate:
    weights: WeightVector


@dataclass(frozen=True)
class SelectCommand:
    index: int


@dataclass(frozen=True)
class Message:
    text: str
    kind: MessageKind = MessageKind.STATUS


InterpretationResult = Union[WeightUpdate, SelectCommand, Message]


@dataclass(frozen=True)
class SeatSelection:
    """A resolved "option N" command, identified by seat id only."""
    option_index: int
    seat_id: str


@dataclass
class AssistantResponse:
    weights: WeightVector
    message: Optional[str] = None
    recommendations: Optional[List[RankedSeat]] = None
    selection: Optional[SeatSelection] = None
    announcements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "message": self.message,
            "weights": self.weights.to_dict(),
        }
        if self.recommendations is not None:
            result["recommendations"] = [r.to_dict() for r in self.recommendations]
        if self.selection is not None:
            result["selection"] = {
                "option": self.selection.option_index,
                "seat_id": self.selection.seat_id,
            }
        if self.announcements:
            result["announcements"] = list(self.announcements)
        return result
