"""Text the voice layer speaks back to the user."""
from typing import List, Sequence

from .models import RankedSeat

RECOMMENDATIONS_UPDATED = "Recommendations updated."
NO_RESULTS = "No results found."


def _format_price(ranked: RankedSeat) -> str:
    if not ranked.seat.has_known_price:
        return "price unavailable"
    price = ranked.seat.price
    if float(price).is_integer():
        return f"{int(price)} dollars"
    return f"{price:.2f} dollars"


def describe_option(index: int, ranked: RankedSeat) -> str:
    """e.g. "Option 1: Section A, Row 1, Seat 1, 50 dollars" (index is 1-based)."""
    seat = ranked.seat
    return (
        f"Option {index}: Section {seat.section}, Row {seat.row}, "
        f"Seat {seat.seat_number}, {_format_price(ranked)}"
    )


def describe_recommendations(recommendations: Sequence[RankedSeat]) -> List[str]:
    return [describe_option(i, r) for i, r in enumerate(recommendations, start=1)]


def scan_summary(count: int) -> str:
    return f"Scan complete. Found {count} available seats."


def option_selected(index: int) -> str:
    return f"Option {index} selected."


def option_unavailable(index: int) -> str:
    return f"Option {index} is not available."
