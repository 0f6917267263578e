"""
Deterministic interpreter for spoken seat preferences.

Turns an utterance into a weight update, a selection command or a message.
No LLM, no statistics - fixed phrase tables and simple rules only.
"""
import logging
import re
from time import monotonic
from typing import Callable, List, Optional, Tuple

from ..config import SeatAssistantConfig
from ..models import WeightVector
from ..schemas import InterpretationResult, Message, MessageKind, SelectCommand, WeightUpdate
from .intent_types import LOW_CONFIDENCE_TOKEN, OPTION_NUMBERS, PREFERENCE_INTENTS, PreferenceIntent
from .text_normalizer import normalize_text

logger = logging.getLogger(__name__)

REPEAT_TEXT = "I didn't quite catch that. Please repeat."
ACKNOWLEDGE_TEXT = "Okay."
LISTENING_TEXT = "Listening."
CLARIFY_TEXT = "I heard a few preferences. What matters more: price or being closer to the stage?"
FALLBACK_TEXT = (
    "Sorry, I didn't understand that. "
    "You can say things like under one twenty, aisle, or option two."
)

_OPTION_COMMAND = re.compile(r"\boption (one|two|three)\b")
_NEGATION = re.compile(r"\b(not|no|avoid)\b")
_GENERIC_QUALITY = re.compile(r"\b(better|best|good|nice|ideal)\b")


def _phrase_pattern(phrase: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(phrase)}\b")


_INTENT_PATTERNS: List[Tuple[PreferenceIntent, List[re.Pattern]]] = [
    (intent, [_phrase_pattern(p) for p in intent.phrases]) for intent in PREFERENCE_INTENTS
]


def intensity_multiplier(text: str) -> float:
    """Scale factor for a preference, read from intensity words in the utterance."""
    if re.search(r"\bvery\b", text):
        return 1.5
    if re.search(r"\b(slightly|a bit)\b", text):
        return 0.7
    if re.search(r"\bnot too\b", text):
        return 0.5
    return 1.0


def is_negated(text: str, phrase_start: int, window: int = 12) -> bool:
    """Check for a negation word in the characters just before a phrase."""
    preceding = text[max(0, phrase_start - window):phrase_start]
    return _NEGATION.search(preceding) is not None


class IntentInterpreter:
    """
    Interprets utterances against the current weight vector.

    The only state is the time of the last accepted call, used to debounce
    echoed or rapid-fire transcripts. Keep one interpreter per session.
    """

    def __init__(
        self,
        config: Optional[SeatAssistantConfig] = None,
        clock: Callable[[], float] = monotonic,
    ):
        """
        :param config: Interpreter thresholds (defaults if omitted)
        :param clock: Monotonic time source in seconds (injectable for tests)
        """
        self.config = config or SeatAssistantConfig()
        self._clock = clock
        self.last_accepted_at: Optional[float] = None

    def reset(self) -> None:
        """Forget the debounce timestamp."""
        self.last_accepted_at = None

    def interpret(self, raw_text: str, current_weights: Optional[WeightVector] = None) -> InterpretationResult:
        """
        Interpret one utterance.

        :param raw_text: Transcript, or LOW_CONFIDENCE_TOKEN when recognition was unsure
        :param current_weights: Session weights the update is applied to
        :return: WeightUpdate, SelectCommand or Message
        """
        if raw_text == LOW_CONFIDENCE_TOKEN:
            logger.debug("Low-confidence transcript, asking user to repeat")
            return Message(REPEAT_TEXT, MessageKind.REPEAT)

        text = normalize_text(raw_text)

        if self._debounced():
            logger.debug(f"Debounced utterance: '{text}'")
            return Message(ACKNOWLEDGE_TEXT, MessageKind.ACKNOWLEDGE)

        if len(text) < self.config.min_utterance_length:
            return Message(LISTENING_TEXT, MessageKind.LISTENING)

        command = self._match_command(text)
        if command is not None:
            logger.info(f"Selection command recognized: option {command.index}")
            return command

        weights = current_weights or WeightVector.default()
        updated, matched = self._apply_intents(text, weights)

        if matched and self._needs_clarification(text, matched):
            logger.info(f"Asking for clarification - matched intents: {matched}")
            return Message(CLARIFY_TEXT, MessageKind.CLARIFY)

        if matched:
            normalized = updated.normalized()
            logger.info(f"Preference update - intents: {matched}, weights: {normalized.to_dict()}")
            return WeightUpdate(normalized)

        logger.debug(f"No intent matched: '{text}'")
        return Message(FALLBACK_TEXT, MessageKind.FALLBACK)

    def _debounced(self) -> bool:
        now = self._clock()
        last = self.last_accepted_at
        within_window = last is not None and now - last < self.config.debounce_seconds

        if not within_window or self.config.refresh_debounce_on_reject:
            self.last_accepted_at = now
        return within_window

    @staticmethod
    def _match_command(text: str) -> Optional[SelectCommand]:
        match = _OPTION_COMMAND.search(text)
        if not match:
            return None
        return SelectCommand(OPTION_NUMBERS[match.group(1)])

    def _apply_intents(self, text: str, weights: WeightVector) -> Tuple[WeightVector, List[str]]:
        factor = intensity_multiplier(text)
        updated = weights
        matched: List[str] = []

        for intent, patterns in _INTENT_PATTERNS:
            for pattern in patterns:
                hit = pattern.search(text)
                if not hit:
                    continue
                delta = intent.base_delta * factor
                if is_negated(text, hit.start(), self.config.negation_window):
                    delta = -delta * 0.5
                updated = updated.with_delta(intent.criterion, delta)
                matched.append(intent.criterion)
                break

        return updated, matched

    @staticmethod
    def _needs_clarification(text: str, matched: List[str]) -> bool:
        if _GENERIC_QUALITY.search(text):
            return True
        if "price" in matched and "distance" in matched:
            return True
        return len(matched) >= 3
