"""
Ranking layer: deterministic multi-criteria seat scoring.

Pure functions over their explicit inputs - no I/O, no shared state.
"""
from .scoring_engine import (
    DEFAULT_REFERENCE,
    rank_seats,
    resolve_reference,
    top_n_seats,
)

__all__ = ["DEFAULT_REFERENCE", "rank_seats", "resolve_reference", "top_n_seats"]
