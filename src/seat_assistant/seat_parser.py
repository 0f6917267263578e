"""
Parses raw seat records handed over by the page scraper.

The scraper reads seat markup attributes as strings; this module turns them
into immutable Seat values and drops records that cannot be offered.
"""
import json
import logging
import math
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import SeatDataError
from .models import ReferencePoint, Seat

logger = logging.getLogger(__name__)

AVAILABLE_STATUS = "available"


def _parse_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace("$", "").replace(",", "")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class SeatRecord(BaseModel):
    """One raw seat as reported by the scraper."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    section: str = Field(default="", description="Section label")
    row: str = Field(default="", description="Row label")
    seat: str = Field(
        default="",
        description="Seat number within the row",
        validation_alias=AliasChoices("seat", "seat_number", "seatNumber"),
    )
    price: Optional[float] = Field(default=None, description="Ticket price; None when unknown")
    x: float = Field(default=math.nan, description="Horizontal map coordinate")
    y: float = Field(default=math.nan, description="Vertical map coordinate")
    tags: List[str] = Field(default_factory=list, description="Seat tags, e.g. aisle or obstructed")
    status: Optional[str] = Field(default=None, description="Availability status, if reported")

    @field_validator("section", "row", "seat", mode="before")
    @classmethod
    def _clean_label(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("price", mode="before")
    @classmethod
    def _clean_price(cls, value: Any) -> Optional[float]:
        return _parse_number(value)

    @field_validator("x", "y", mode="before")
    @classmethod
    def _clean_coordinate(cls, value: Any) -> float:
        number = _parse_number(value)
        return math.nan if number is None else number

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> List[str]:
        if not value or not isinstance(value, (str, list, tuple, set, frozenset)):
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [str(tag).strip() for tag in value if str(tag).strip()]

    @field_validator("status", mode="before")
    @classmethod
    def _clean_status(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value).strip().lower() or None

    def is_available(self) -> bool:
        return self.status is None or self.status == AVAILABLE_STATUS

    def has_identity(self) -> bool:
        return bool(self.section and self.row and self.seat)

    def to_seat(self) -> Seat:
        return Seat(
            section=self.section,
            row=self.row,
            seat_number=self.seat,
            price=self.price,
            x=self.x,
            y=self.y,
            tags=frozenset(self.tags),
        )


class SeatParser:
    """
    Converts scraper output into Seat values.

    Skips unavailable seats, seats without section/row/seat and duplicate ids
    (first one wins). Never raises for individual bad records.
    """

    def parse(self, records: Iterable[Any]) -> List[Seat]:
        seats: List[Seat] = []
        seen_ids = set()

        for position, raw in enumerate(records or []):
            try:
                record = SeatRecord.model_validate(raw)
            except ValidationError as e:
                logger.warning(f"Skipping seat record {position}: {e.error_count()} validation error(s)")
                continue

            if not record.is_available():
                logger.debug(f"Skipping seat record {position}: status '{record.status}'")
                continue

            if not record.has_identity():
                logger.warning(f"Skipping seat record {position}: missing section, row or seat")
                continue

            seat = record.to_seat()
            if seat.id in seen_ids:
                logger.warning(f"Skipping duplicate seat id '{seat.id}'")
                continue

            seen_ids.add(seat.id)
            seats.append(seat)

        logger.info(f"Parsed {len(seats)} available seats")
        return seats

    def parse_payload(self, payload: Any) -> Tuple[List[Seat], Optional[ReferencePoint]]:
        """
        Parse a venue payload: either a list of seat records or a mapping
        with "seats" and an optional "stage"/"reference" point.

        :raises SeatDataError: If the payload has neither shape
        """
        if isinstance(payload, list):
            return self.parse(payload), None

        if isinstance(payload, Mapping) and isinstance(payload.get("seats"), list):
            reference = parse_reference(payload.get("reference") or payload.get("stage"))
            return self.parse(payload["seats"]), reference

        raise SeatDataError("Seat payload must be a list of seats or an object with a 'seats' list.")

    def load_venue(self, path: Union[str, Path]) -> Tuple[List[Seat], Optional[ReferencePoint]]:
        """
        Load seats (and the stage anchor, if present) from a JSON file.

        :raises SeatDataError: If the file cannot be read or parsed
        """
        try:
            with open(path, encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as e:
            raise SeatDataError(f"Could not read seat file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SeatDataError(f"Seat file {path} is not valid JSON: {e}") from e

        return self.parse_payload(payload)


def parse_reference(data: Any) -> Optional[ReferencePoint]:
    """Read an {"x": .., "y": ..} mapping; None when missing or non-numeric."""
    if not isinstance(data, Mapping):
        return None
    x = _parse_number(data.get("x"))
    y = _parse_number(data.get("y"))
    if x is None or y is None:
        return None
    return ReferencePoint(x, y)
