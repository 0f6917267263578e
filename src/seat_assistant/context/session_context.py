"""
Session context domain objects.

Per-user state threaded through every interpreter and ranking call.
No Flask, no scraping - plain domain state.
"""
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from ..interaction import IntentInterpreter
from ..models import RankedSeat, ReferencePoint, Seat, WeightVector


@dataclass
class SeatAssistantSession:
    """Session context - single source of truth for one user's seat search."""
    interpreter: IntentInterpreter
    weights: WeightVector = field(default_factory=WeightVector.default)
    seats: List[Seat] = field(default_factory=list)
    reference: Optional[ReferencePoint] = None
    last_recommendations: List[RankedSeat] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def has_seats(self) -> bool:
        return bool(self.seats)

    def recommendation_at(self, option_index: int) -> Optional[RankedSeat]:
        """Look up a rendered option by its 1-based position."""
        if 1 <= option_index <= len(self.last_recommendations):
            return self.last_recommendations[option_index - 1]
        return None

    def replace_seats(self, seats: List[Seat], reference: Optional[ReferencePoint]) -> None:
        """Swap in a fresh scrape; previously rendered options no longer apply."""
        self.seats = list(seats)
        self.reference = reference
        self.last_recommendations = []

    def reset(self) -> None:
        """Back to default weights with a fresh debounce clock."""
        self.weights = WeightVector.default()
        self.last_recommendations = []
        self.interpreter.reset()
