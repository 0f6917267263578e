"""
Utterance normalization.

Maps spoken synonyms onto the fixed vocabulary the intent table matches.
"""
import re
from typing import List, Tuple

# Longest phrases first so "cheaper" is not rewritten as "cheap" + "er".
SYNONYMS: Tuple[Tuple[str, str], ...] = (
    ("close to the stage", "close to stage"),
    ("close by", "closer"),
    ("closest", "closer"),
    ("nearby", "closer"),
    ("nearest", "closer"),
    ("nearer", "closer"),
    ("centered", "center"),
    ("centred", "center"),
    ("centre", "center"),
    ("less expensive", "under"),
    ("cheapest", "under"),
    ("cheaper", "under"),
    ("cheap", "under"),
    ("side seat", "aisle"),
    ("walkway", "aisle"),
    ("blocked view", "obstructed"),
    ("blocked", "obstructed"),
)

_SYNONYM_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(rf"\b{re.escape(phrase)}\b"), replacement)
    for phrase, replacement in SYNONYMS
]

_OPTION_DIGIT = re.compile(r"\boption\s+([123])\b")
_DIGIT_WORDS = {"1": "one", "2": "two", "3": "three"}
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text) -> str:
    """
    Lower-case, canonicalize synonyms and collapse whitespace.

    :param text: Raw utterance (non-strings are treated as empty)
    :return: Normalized utterance
    """
    if not isinstance(text, str):
        return ""

    normalized = text.lower()
    for pattern, replacement in _SYNONYM_PATTERNS:
        normalized = pattern.sub(replacement, normalized)

    normalized = _OPTION_DIGIT.sub(lambda m: f"option {_DIGIT_WORDS[m.group(1)]}", normalized)
    return _WHITESPACE.sub(" ", normalized).strip()
