"""
Preference intents recognized by the interpreter.

Each intent maps a set of trigger phrases onto one ranking criterion.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PreferenceIntent:
    criterion: str
    phrases: Tuple[str, ...]
    base_delta: float


# Order matters: intents are scanned top to bottom, phrases left to right.
PREFERENCE_INTENTS: Tuple[PreferenceIntent, ...] = (
    PreferenceIntent("distance", ("closer", "near", "front", "close to stage"), 0.20),
    PreferenceIntent("centrality", ("center", "central", "middle"), 0.20),
    PreferenceIntent("aisle", ("aisle", "side seat", "easy access"), 0.20),
    PreferenceIntent("price", ("cheap", "under", "affordable"), 0.20),
    PreferenceIntent("avoid_obstructed", ("clear view", "avoid obstructed", "unblocked"), 0.30),
)

OPTION_NUMBERS = {"one": 1, "two": 2, "three": 3}

LOW_CONFIDENCE_TOKEN = "__LOW_CONFIDENCE__"
