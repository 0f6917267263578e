import logging
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from . import announcements
from .config import SeatAssistantConfig
from .context import SeatAssistantSession, SessionContextManager
from .interaction import LOW_CONFIDENCE_TOKEN, IntentInterpreter
from .interaction.interpreter import LISTENING_TEXT
from .models import RankedSeat, ReferencePoint, Seat, WeightVector
from .ranking import top_n_seats
from .schemas import AssistantResponse, SeatSelection, SelectCommand, WeightUpdate
from .seat_parser import SeatParser

logger = logging.getLogger(__name__)

SeatSelector = Callable[[str], bool]


class SeatAssistantService:
    """
    Facade over the seat assistant subsystem.
    The ONLY entry point for the UI layers (API, CLI demo).
    """

    def __init__(self, config: Optional[SeatAssistantConfig] = None):
        """
        Composition root.
        Parser, interpreter factory and session contexts are created and wired here.
        """
        self.config = config or SeatAssistantConfig()
        self._parser = SeatParser()
        self._contexts = SessionContextManager(self._new_session)
        self._seat_selector: Optional[SeatSelector] = None

    def _new_session(self) -> SeatAssistantSession:
        return SeatAssistantSession(interpreter=IntentInterpreter(self.config))

    def get_session(self, session_id: str) -> SeatAssistantSession:
        return self._contexts.get_context(session_id)

    # ----------------------------
    # Seat data
    # ----------------------------
    def load_seats(
        self,
        session_id: str,
        records: Iterable[Any],
        reference: Optional[ReferencePoint] = None,
    ) -> AssistantResponse:
        """Replace the session's seat set with a fresh scrape."""
        return self._store_seats(session_id, self._parser.parse(records), reference)

    def load_venue(self, session_id: str, path: Union[str, Path]) -> AssistantResponse:
        """
        Load a venue JSON file into a session.

        :raises SeatDataError: If the file cannot be read or parsed
        """
        seats, reference = self._parser.load_venue(path)
        return self._store_seats(session_id, seats, reference)

    def _store_seats(
        self,
        session_id: str,
        seats: List[Seat],
        reference: Optional[ReferencePoint],
    ) -> AssistantResponse:
        session = self.get_session(session_id)
        with session.lock:
            session.replace_seats(seats, reference)
            logger.info(f"Loaded seats - Session: {session_id}, Count: {len(seats)}")
            return AssistantResponse(
                weights=session.weights,
                message=announcements.scan_summary(len(seats)),
            )

    # ----------------------------
    # Ranking
    # ----------------------------
    def recommend(self, session_id: str, n: Optional[int] = None) -> AssistantResponse:
        """Rank the session's seats with its current weights and remember the result."""
        session = self.get_session(session_id)
        with session.lock:
            return self._recommend(session, n)

    def _recommend(self, session: SeatAssistantSession, n: Optional[int] = None) -> AssistantResponse:
        top = top_n_seats(
            session.seats,
            session.weights,
            session.reference,
            n=self.config.top_n if n is None else n,
            default_reference=self.config.default_reference,
        )
        session.last_recommendations = top
        message = announcements.RECOMMENDATIONS_UPDATED if top else announcements.NO_RESULTS
        return AssistantResponse(
            weights=session.weights,
            message=message,
            recommendations=list(top),
            announcements=announcements.describe_recommendations(top),
        )

    # ----------------------------
    # Utterance handling
    # ----------------------------
    def handle_utterance(
        self,
        session_id: str,
        text: Optional[str],
        confidence: Optional[float] = None,
    ) -> AssistantResponse:
        """
        Interpret an utterance and act on the result.

        :param session_id: Session identifier
        :param text: Final transcript from speech capture (or typed text)
        :param confidence: Recognizer confidence in [0, 1], if reported
        :return: AssistantResponse with message, updated weights, re-ranked
                 recommendations or the selected seat
        """
        session = self.get_session(session_id)
        with session.lock:
            if not isinstance(text, str) or not text.strip():
                return AssistantResponse(weights=session.weights, message=LISTENING_TEXT)

            if confidence is not None and confidence < self.config.low_confidence_threshold:
                logger.info(f"Low transcription confidence - Session: {session_id}, Confidence: {confidence}")
                text = LOW_CONFIDENCE_TOKEN

            result = session.interpreter.interpret(text, session.weights)

            if isinstance(result, WeightUpdate):
                session.weights = result.weights
                return self._recommend(session)

            if isinstance(result, SelectCommand):
                return self._select(session_id, session, result.index)

            return AssistantResponse(weights=session.weights, message=result.text)

    def _select(self, session_id: str, session: SeatAssistantSession, option_index: int) -> AssistantResponse:
        ranked = session.recommendation_at(option_index)
        if ranked is None:
            logger.info(f"Option {option_index} not available - Session: {session_id}")
            return AssistantResponse(
                weights=session.weights,
                message=announcements.option_unavailable(option_index),
            )

        if self._seat_selector is not None and not self._seat_selector(ranked.id):
            logger.warning(f"Seat selector rejected '{ranked.id}' - Session: {session_id}")
            return AssistantResponse(
                weights=session.weights,
                message=announcements.option_unavailable(option_index),
            )

        logger.info(f"Seat selected - Session: {session_id}, Option: {option_index}, Seat: {ranked.id}")
        return AssistantResponse(
            weights=session.weights,
            message=announcements.option_selected(option_index),
            selection=SeatSelection(option_index=option_index, seat_id=ranked.id),
        )

    # ----------------------------
    # Session management
    # ----------------------------
    def set_weights(self, session_id: str, weights: Mapping[str, Any]) -> AssistantResponse:
        """Overwrite the session weights (normalized) and re-rank."""
        session = self.get_session(session_id)
        with session.lock:
            session.weights = WeightVector.from_mapping(weights).normalized()
            return self._recommend(session)

    def reset(self, session_id: str) -> None:
        """Restore default weights and clear rendered options for a session."""
        session = self.get_session(session_id)
        with session.lock:
            session.reset()

    def end_session(self, session_id: str) -> None:
        self._contexts.clear_context(session_id)

    def last_recommendations(self, session_id: str) -> List[RankedSeat]:
        return list(self.get_session(session_id).last_recommendations)

    # ----------------------------
    # Dependency injection setters
    # ----------------------------
    def set_seat_selector(self, selector: Optional[SeatSelector]) -> None:
        """Inject the collaborator that performs the actual seat selection."""
        self._seat_selector = selector

    @property
    def parser(self) -> SeatParser:
        return self._parser
