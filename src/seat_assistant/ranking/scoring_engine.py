"""Scoring engine - ranks seats with configurable multi-criteria weights."""
import logging
import math
from typing import List, Optional, Sequence

from ..models import RankedSeat, ReferencePoint, ScoreBreakdown, Seat, WeightVector
from .normalization import clamp01, inverted_score, is_finite_number, observed_bounds, score_range

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE = ReferencePoint(500.0, 65.0)

AISLE_TAG = "aisle"
OBSTRUCTED_TAG = "obstructed"


def resolve_reference(
    reference: Optional[ReferencePoint],
    fallback: ReferencePoint = DEFAULT_REFERENCE,
) -> ReferencePoint:
    """Use the supplied anchor unless it is missing or non-finite."""
    if reference is not None and reference.is_finite():
        return reference
    return fallback


def _distance(seat: Seat, reference: ReferencePoint) -> float:
    if not (is_finite_number(seat.x) and is_finite_number(seat.y)):
        return math.nan
    return math.hypot(seat.x - reference.x, seat.y - reference.y)


def rank_seats(
    seats: Sequence[Seat],
    weights: Optional[WeightVector] = None,
    reference: Optional[ReferencePoint] = None,
    default_reference: ReferencePoint = DEFAULT_REFERENCE,
) -> List[RankedSeat]:
    """
    Score and rank seats best-first.

    Each sub-score is normalized into [0, 1] over the given seat set so the
    weights behave predictably:
    - distance: closer to the reference point is better
    - centrality: closer to the horizontal middle of the map is better
    - aisle: 1 for seats tagged "aisle"
    - price: cheaper is better; unknown prices count as the most expensive
    - obstructed: 0 for seats tagged "obstructed"

    Ties are broken by section|row|seat so the order never depends on input order.
    """
    if not seats:
        return []

    w = (weights or WeightVector.default()).normalized()
    anchor = resolve_reference(reference, default_reference)

    # Ranges for normalization
    dists = [_distance(seat, anchor) for seat in seats]
    min_d, max_d = score_range(dists)
    min_p, max_p = score_range(seat.price for seat in seats if seat.price is not None)

    # Horizontal center of the observed map
    x_bounds = observed_bounds(seat.x for seat in seats)
    min_x, max_x = x_bounds if x_bounds else (0.0, 0.0)
    center_x = (min_x + max_x) / 2
    max_dx = max(abs(min_x - center_x), abs(max_x - center_x)) or 1.0

    ranked: List[RankedSeat] = []
    for seat, dist in zip(seats, dists):
        price = seat.price if seat.has_known_price else max_p

        centrality = 0.0
        if is_finite_number(seat.x):
            centrality = clamp01(1.0 - abs(seat.x - center_x) / max_dx)

        breakdown = ScoreBreakdown(
            distance=inverted_score(dist, min_d, max_d),
            centrality=centrality,
            aisle=1.0 if seat.has_tag(AISLE_TAG) else 0.0,
            price=inverted_score(price, min_p, max_p),
            obstructed=0.0 if seat.has_tag(OBSTRUCTED_TAG) else 1.0,
        )

        score = clamp01(
            w.distance * breakdown.distance
            + w.centrality * breakdown.centrality
            + w.aisle * breakdown.aisle
            + w.price * breakdown.price
            + w.avoid_obstructed * breakdown.obstructed
        )
        ranked.append(RankedSeat(seat=seat, score=score, breakdown=breakdown))

    ranked.sort(key=lambda r: (-r.score, r.seat.sort_key))

    logger.debug(
        f"Ranked {len(ranked)} seats - weights={w.to_dict()}, "
        f"reference=({anchor.x}, {anchor.y})"
    )
    return ranked


def top_n_seats(
    seats: Sequence[Seat],
    weights: Optional[WeightVector] = None,
    reference: Optional[ReferencePoint] = None,
    n: int = 3,
    default_reference: ReferencePoint = DEFAULT_REFERENCE,
) -> List[RankedSeat]:
    """Convenience helper returning only the best n seats."""
    if n <= 0:
        return []
    return rank_seats(seats, weights, reference, default_reference)[:n]
