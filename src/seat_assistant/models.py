"""
Domain models for seats, weights and ranking output.

Pure value objects - no I/O, no Flask, no scraping logic.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple


CRITERIA: Tuple[str, ...] = ("distance", "centrality", "aisle", "price", "avoid_obstructed")

# dict/JSON spelling, where it differs from the field name
CRITERION_KEYS: Dict[str, str] = {"avoid_obstructed": "avoidObstructed"}


def _key(criterion: str) -> str:
    return CRITERION_KEYS.get(criterion, criterion)


def _is_real(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _finite_or_zero(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


@dataclass(frozen=True)
class Seat:
    section: str
    row: str
    seat_number: str
    price: Optional[float]
    x: float
    y: float
    tags: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def id(self) -> str:
        """Seat identity, derived from section/row/seat number."""
        return f"{self.section}-{self.row}-{self.seat_number}"

    @property
    def sort_key(self) -> str:
        return f"{self.section}|{self.row}|{self.seat_number}"

    @property
    def has_known_price(self) -> bool:
        return _is_real(self.price)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "section": self.section,
            "row": self.row,
            "seat": self.seat_number,
            "price": self.price if self.has_known_price else None,
            "x": self.x if _is_real(self.x) else None,
            "y": self.y if _is_real(self.y) else None,
            "tags": sorted(self.tags),
        }


@dataclass(frozen=True)
class ReferencePoint:
    """Stage / focal anchor on the seat map."""
    x: float
    y: float

    def is_finite(self) -> bool:
        return _is_real(self.x) and _is_real(self.y)


@dataclass(frozen=True)
class WeightVector:
    """
    Relative importance of each ranking criterion.

    Raw vectors may hold any values (interpreter deltas can push an entry
    below zero); call normalized() before scoring.
    """
    distance: float = 0.25
    centrality: float = 0.20
    aisle: float = 0.20
    price: float = 0.20
    avoid_obstructed: float = 0.15

    @classmethod
    def default(cls) -> "WeightVector":
        return cls()

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "WeightVector":
        """
        Build a vector from a mapping keyed by criterion name.

        Accepts both "avoid_obstructed" and "avoidObstructed". Missing or
        unparseable entries count as 0, so an empty mapping normalizes to
        the default vector.
        """
        data = data or {}
        values = {}
        for name in CRITERIA:
            raw = data.get(name, data.get(_key(name), 0.0))
            try:
                values[name] = float(raw)
            except (TypeError, ValueError):
                values[name] = 0.0
        return cls(**values)

    def get(self, criterion: str) -> float:
        return getattr(self, criterion)

    def with_delta(self, criterion: str, delta: float) -> "WeightVector":
        """Return a copy with delta added to one criterion."""
        values = self.field_values()
        values[criterion] = values[criterion] + delta
        return WeightVector(**values)

    def total(self) -> float:
        return sum(_finite_or_zero(self.get(name)) for name in CRITERIA)

    def normalized(self) -> "WeightVector":
        """
        Clamp negative/non-finite entries to 0 and scale to sum 1.

        Falls back to the default vector when nothing positive remains.
        """
        clamped = {name: _finite_or_zero(self.get(name)) for name in CRITERIA}
        total = sum(clamped.values())
        if total <= 0:
            return WeightVector.default()
        return WeightVector(**{name: value / total for name, value in clamped.items()})

    def field_values(self) -> Dict[str, float]:
        return {name: self.get(name) for name in CRITERIA}

    def to_dict(self) -> Dict[str, float]:
        return {_key(name): self.get(name) for name in CRITERIA}


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-criterion normalized sub-scores, each in [0, 1]."""
    distance: float
    centrality: float
    aisle: float
    price: float
    obstructed: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "distance": self.distance,
            "centrality": self.centrality,
            "aisle": self.aisle,
            "price": self.price,
            "obstructed": self.obstructed,
        }


@dataclass(frozen=True)
class RankedSeat:
    seat: Seat
    score: float
    breakdown: ScoreBreakdown

    @property
    def id(self) -> str:
        return self.seat.id

    def to_dict(self) -> Dict[str, Any]:
        data = self.seat.to_dict()
        data["score"] = self.score
        data["breakdown"] = self.breakdown.to_dict()
        return data
