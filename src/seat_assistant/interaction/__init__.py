"""
Interaction layer for spoken/typed seat preferences.

Deterministic phrase matching only - turns utterances into weight updates,
selection commands or messages without calling the ranking engine.
"""
from .intent_types import LOW_CONFIDENCE_TOKEN, PREFERENCE_INTENTS, PreferenceIntent
from .interpreter import IntentInterpreter
from .text_normalizer import normalize_text

__all__ = [
    "LOW_CONFIDENCE_TOKEN",
    "PREFERENCE_INTENTS",
    "PreferenceIntent",
    "IntentInterpreter",
    "normalize_text",
]
