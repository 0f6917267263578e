"""
Tests for the intent interpreter.
"""
import pytest
from seat_assistant.config import SeatAssistantConfig
from seat_assistant.interaction import LOW_CONFIDENCE_TOKEN, IntentInterpreter
from seat_assistant.interaction.interpreter import intensity_multiplier, is_negated
from seat_assistant.models import CRITERIA, WeightVector
from seat_assistant.schemas import Message, MessageKind, SelectCommand, WeightUpdate


class FakeClock:
    """Manually advanced clock (seconds)."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def interpreter(clock):
    return IntentInterpreter(SeatAssistantConfig(), clock=clock)


@pytest.fixture
def defaults():
    return WeightVector.default()


def _total(weights: WeightVector) -> float:
    return sum(weights.get(name) for name in CRITERIA)


class TestPreferenceUpdates:
    """Tests for weight updates."""

    def test_closer_raises_distance(self, interpreter, defaults):
        """Test a plain distance preference."""
        result = interpreter.interpret("closer to the stage", defaults)

        assert isinstance(result, WeightUpdate)
        assert result.weights.distance == pytest.approx(0.45 / 1.2)
        assert _total(result.weights) == pytest.approx(1.0)

    def test_each_intent_applied_once(self, interpreter, defaults):
        """Test repeated phrases of one intent count once."""
        result = interpreter.interpret("closer closer near the front", defaults)

        assert isinstance(result, WeightUpdate)
        assert result.weights.distance == pytest.approx(0.45 / 1.2)

    def test_synonym_maps_to_price(self, interpreter, defaults):
        """Test "less expensive" is understood as a price preference."""
        result = interpreter.interpret("something less expensive", defaults)

        assert isinstance(result, WeightUpdate)
        assert result.weights.price == pytest.approx(0.40 / 1.2)

    @pytest.mark.parametrize("text, criterion", [
        ("the cheapest seats please", "price"),
        ("the cheapest one", "price"),
        ("something nearby", "distance"),
        ("the closest seats", "distance"),
        ("a centered seat", "centrality"),
    ])
    def test_inflected_phrases(self, interpreter, defaults, text, criterion):
        """Test superlatives and spelling variants still map onto their criterion."""
        result = interpreter.interpret(text, defaults)

        assert isinstance(result, WeightUpdate)
        assert result.weights.get(criterion) == pytest.approx((defaults.get(criterion) + 0.20) / 1.2)

    def test_unblocked_raises_avoid_obstructed(self, interpreter, defaults):
        """Test the larger avoid-obstructed delta."""
        result = interpreter.interpret("an unblocked view", defaults)

        assert isinstance(result, WeightUpdate)
        assert result.weights.avoid_obstructed == pytest.approx(0.45 / 1.3)

    def test_two_compatible_intents(self, interpreter, defaults):
        """Test two intents that do not trigger clarification."""
        result = interpreter.interpret("aisle in the middle", defaults)

        assert isinstance(result, WeightUpdate)
        assert result.weights.aisle == pytest.approx(0.40 / 1.4)
        assert result.weights.centrality == pytest.approx(0.40 / 1.4)

    def test_current_weights_not_mutated(self, interpreter):
        """Test that the input vector is left untouched."""
        current = WeightVector(0.1, 0.2, 0.3, 0.2, 0.2)
        interpreter.interpret("aisle please", current)

        assert current == WeightVector(0.1, 0.2, 0.3, 0.2, 0.2)

    def test_missing_weights_use_default(self, interpreter):
        """Test that no current weights means the default vector."""
        result = interpreter.interpret("aisle please", None)

        assert isinstance(result, WeightUpdate)
        assert result.weights.aisle == pytest.approx(0.40 / 1.2)


class TestIntensity:
    """Tests for intensity multipliers."""

    def test_very(self, interpreter, defaults):
        """Test "very" scales the delta by 1.5."""
        result = interpreter.interpret("very cheap", defaults)

        assert result.weights.price == pytest.approx(0.50 / 1.3)

    def test_slightly(self, interpreter, defaults):
        """Test "slightly" scales the delta by 0.7."""
        result = interpreter.interpret("slightly closer", defaults)

        assert result.weights.distance == pytest.approx(0.39 / 1.14)

    @pytest.mark.parametrize("text, expected", [
        ("very close", 1.5),
        ("every seat", 1.0),
        ("a bit closer", 0.7),
        ("not too far", 0.5),
        ("very much not too far", 1.5),
        ("closer", 1.0),
    ])
    def test_multiplier(self, text, expected):
        """Test multiplier precedence and word boundaries."""
        assert intensity_multiplier(text) == expected


class TestNegation:
    """Tests for soft negation."""

    def test_not_too_close_reduces_distance(self, interpreter, defaults):
        """Test "not too close to the stage" lowers the distance weight."""
        result = interpreter.interpret("not too close to the stage", defaults)

        assert isinstance(result, WeightUpdate)
        assert result.weights.distance < defaults.distance
        assert result.weights.distance == pytest.approx(0.20 / 0.95)

    def test_no_aisle(self, interpreter, defaults):
        """Test "no" before a phrase applies half the delta with a sign flip."""
        result = interpreter.interpret("no aisle seats", defaults)

        assert isinstance(result, WeightUpdate)
        assert result.weights.aisle == pytest.approx(0.10 / 0.90)

    def test_negation_outside_window_ignored(self, interpreter, defaults):
        """Test negation words far before the phrase do not count."""
        result = interpreter.interpret("no worries, i would like the aisle", defaults)

        assert isinstance(result, WeightUpdate)
        assert result.weights.aisle > defaults.aisle

    def test_negative_weights_renormalize_to_default(self, interpreter):
        """Test a vector driven to nothing positive falls back to the default."""
        zero = WeightVector(0.0, 0.0, 0.0, 0.0, 0.0)
        result = interpreter.interpret("no aisle seats", zero)

        assert isinstance(result, WeightUpdate)
        assert result.weights == WeightVector.default()

    def test_is_negated_window(self):
        """Test the fixed-width look-behind."""
        text = "not too close to stage"
        assert is_negated(text, text.index("close to stage"))
        assert not is_negated("the stage please", 4)
        assert not is_negated("nothing near", 8)


class TestCommands:
    """Tests for selection commands."""

    @pytest.mark.parametrize("text, index", [
        ("option one", 1),
        ("option two", 2),
        ("Option Three please", 3),
        ("option 2", 2),
    ])
    def test_option_command(self, interpreter, defaults, text, index):
        """Test spelled-out and digit option numbers."""
        assert interpreter.interpret(text, defaults) == SelectCommand(index)

    def test_command_beats_preferences(self, interpreter, defaults):
        """Test command priority over preference phrases."""
        result = interpreter.interpret("option two, the cheap one closer to the aisle", defaults)

        assert result == SelectCommand(2)

    def test_unknown_option_is_not_a_command(self, interpreter, defaults):
        """Test only options one to three are recognized."""
        result = interpreter.interpret("option four", defaults)

        assert isinstance(result, Message)
        assert result.kind == MessageKind.FALLBACK


class TestClarification:
    """Tests for the clarification gate."""

    def test_price_and_distance(self, interpreter, defaults):
        """Test price plus distance asks for clarification."""
        result = interpreter.interpret("cheap and closer", defaults)

        assert isinstance(result, Message)
        assert result.kind == MessageKind.CLARIFY
        assert "price" in result.text

    def test_generic_quality_adjective(self, interpreter, defaults):
        """Test vague adjectives ask for clarification."""
        result = interpreter.interpret("a good aisle seat", defaults)

        assert result.kind == MessageKind.CLARIFY

    def test_three_intents(self, interpreter, defaults):
        """Test three or more intents ask for clarification."""
        result = interpreter.interpret("middle aisle with a clear view", defaults)

        assert result.kind == MessageKind.CLARIFY

    def test_adjective_without_intent_falls_back(self, interpreter, defaults):
        """Test an adjective alone is not a clarification case."""
        result = interpreter.interpret("something nice", defaults)

        assert result.kind == MessageKind.FALLBACK


class TestGuards:
    """Tests for low confidence, debounce and short input."""

    def test_low_confidence(self, interpreter, defaults):
        """Test the sentinel asks the user to repeat without touching state."""
        result = interpreter.interpret(LOW_CONFIDENCE_TOKEN, defaults)

        assert result.kind == MessageKind.REPEAT
        assert interpreter.last_accepted_at is None

    def test_too_short(self, interpreter, defaults, clock):
        """Test fragments under four characters."""
        result = interpreter.interpret("hi", defaults)

        assert result.kind == MessageKind.LISTENING
        assert interpreter.last_accepted_at == clock.now

    def test_debounce(self, interpreter, defaults, clock):
        """Test a second utterance inside the window is only acknowledged."""
        first = interpreter.interpret("aisle please", defaults)
        clock.advance(0.5)
        second = interpreter.interpret("closer please", defaults)

        assert isinstance(first, WeightUpdate)
        assert isinstance(second, Message)
        assert second.kind == MessageKind.ACKNOWLEDGE

    def test_accepted_after_window(self, interpreter, defaults, clock):
        """Test utterances are accepted again once the window passes."""
        interpreter.interpret("aisle please", defaults)
        clock.advance(1.3)

        assert isinstance(interpreter.interpret("closer please", defaults), WeightUpdate)

    def test_burst_keeps_refreshing_window(self, interpreter, defaults, clock):
        """Test rejected calls refresh the window by default."""
        interpreter.interpret("aisle please", defaults)
        clock.advance(1.0)
        interpreter.interpret("closer please", defaults)
        clock.advance(1.0)

        result = interpreter.interpret("middle please", defaults)
        assert result.kind == MessageKind.ACKNOWLEDGE

    def test_burst_without_refresh(self, defaults, clock):
        """Test the lenient reading: only accepted calls move the window."""
        config = SeatAssistantConfig(refresh_debounce_on_reject=False)
        interpreter = IntentInterpreter(config, clock=clock)

        interpreter.interpret("aisle please", defaults)
        clock.advance(1.0)
        interpreter.interpret("closer please", defaults)
        clock.advance(1.0)

        assert isinstance(interpreter.interpret("middle please", defaults), WeightUpdate)

    def test_sessions_do_not_share_debounce(self, defaults, clock):
        """Test independent interpreter instances."""
        a = IntentInterpreter(clock=clock)
        b = IntentInterpreter(clock=clock)

        a.interpret("aisle please", defaults)
        assert isinstance(b.interpret("aisle please", defaults), WeightUpdate)

    def test_reset(self, interpreter, defaults):
        """Test reset forgets the debounce timestamp."""
        interpreter.interpret("aisle please", defaults)
        interpreter.reset()

        assert interpreter.last_accepted_at is None
        assert isinstance(interpreter.interpret("closer please", defaults), WeightUpdate)


class TestFallback:
    """Tests for unrecognized input."""

    def test_gibberish(self, interpreter, defaults):
        """Test gibberish returns example phrasing."""
        result = interpreter.interpret("what time does the show start", defaults)

        assert result.kind == MessageKind.FALLBACK
        assert "option two" in result.text

    @pytest.mark.parametrize("raw", [None, "", 12345, "   "])
    def test_never_raises(self, clock, defaults, raw):
        """Test malformed input maps to a message."""
        interpreter = IntentInterpreter(clock=clock)
        result = interpreter.interpret(raw, defaults)

        assert isinstance(result, Message)
