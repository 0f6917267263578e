"""
Numeric helpers shared by the scoring engine.

Every helper is total: non-finite input degrades to a safe value instead of raising.
"""
import math
from typing import Iterable, Optional, Tuple


def is_finite_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def clamp01(value: float) -> float:
    """Clamp to [0, 1]; non-finite values map to 0."""
    if not is_finite_number(value):
        return 0.0
    if value < 0:
        return 0.0
    if value > 1:
        return 1.0
    return float(value)


def observed_bounds(values: Iterable[float]) -> Optional[Tuple[float, float]]:
    """Min/max over the finite values, or None when there are none."""
    finite = [v for v in values if is_finite_number(v)]
    if not finite:
        return None
    return min(finite), max(finite)


def score_range(values: Iterable[float]) -> Tuple[float, float]:
    """
    Min/max suitable as a normalization range.

    A single-valued set widens to [min, min + 1] so every member scores 1
    on an inverted scale; an empty/non-finite set yields [0, 1].
    """
    bounds = observed_bounds(values)
    if bounds is None:
        return 0.0, 1.0
    low, high = bounds
    if low == high:
        return low, low + 1.0
    return low, high


def inverted_score(value: float, low: float, high: float) -> float:
    """1 at the low end of the range, 0 at the high end."""
    if not is_finite_number(value):
        return 0.0
    return clamp01(1.0 - (value - low) / (high - low))
