"""
Tests for the session state machine (guess evaluation).

Tests:
- Start / restart
- Directional feedback and attempt counting
- Invalid input leaves state untouched
- Terminal states
- Optional attempt limit
"""

import random

import pytest

from ..engine_core.drawer import UniqueDrawer
from ..engine_core.outcome import Outcome, OutcomeKind, InvalidReason
from ..engine_core.session import Session
from ..engine_core.state import GameConfig, GameStatus
from .conftest import FixedDrawer


class TestStart:
    """Tests for start and restart."""

    def test_start_resets_counters(self, config):
        """A fresh game is INITIAL with attempts at 1."""
        session = Session(config, rng=random.Random(3))
        prompt = session.start()

        assert session.status == GameStatus.INITIAL
        assert session.attempts == 1
        assert config.min_number <= session.secret <= config.max_number
        assert prompt.min_number == 1
        assert prompt.max_number == 10
        assert prompt.attempts == 1
        assert prompt.status_text == "ready"

    def test_guess_before_start_fails(self, config):
        """The host must start the session before guessing."""
        session = Session(config)
        assert not session.started
        with pytest.raises(RuntimeError):
            session.guess(5)

    def test_restart_from_won(self, session_with_secret_7):
        """Restart after a win returns to INITIAL."""
        session = session_with_secret_7
        session.guess(3)
        session.guess(7)
        assert session.status == GameStatus.WON

        session.restart()
        assert session.status == GameStatus.INITIAL
        assert session.attempts == 1

    def test_restart_from_playing(self, session_with_secret_7):
        """Restart mid-game resets the counters."""
        session = session_with_secret_7
        session.guess(1)
        session.guess(2)
        assert session.attempts == 3

        session.restart()
        assert session.status == GameStatus.INITIAL
        assert session.attempts == 1

    def test_restart_draws_from_same_drawer(self, config):
        """Secrets do not repeat across games until the range is used up."""
        session = Session(config, rng=random.Random(11))
        secrets = []
        for _ in range(config.range_size):
            session.restart()
            secrets.append(session.secret)
        assert sorted(secrets) == list(range(1, 11))

    def test_restart_draws_new_secret(self):
        """Each restart asks the drawer for a secret."""
        drawer = FixedDrawer(4, 9)
        session = Session(GameConfig(), drawer=drawer)
        session.start()
        assert session.secret == 4
        session.restart()
        assert session.secret == 9
        assert drawer.draw_count == 2


class TestGuessing:
    """Tests for guess evaluation."""

    def test_example_sequence(self, session_with_secret_7):
        """Full walk-through with secret 7."""
        session = session_with_secret_7

        outcome = session.guess(20)
        assert outcome == Outcome.invalid(InvalidReason.OUT_OF_RANGE)
        assert session.attempts == 1

        outcome = session.guess(5)
        assert outcome == Outcome.too_low(1)
        assert session.attempts == 2

        outcome = session.guess(9)
        assert outcome == Outcome.too_high(2)
        assert session.attempts == 3

        outcome = session.guess(7)
        assert outcome == Outcome.correct(secret=7, attempts=3)
        assert session.status == GameStatus.WON

        outcome = session.guess(7)
        assert outcome.kind == OutcomeKind.ALREADY_WON

    def test_first_guess_correct(self, session_with_secret_7):
        """Winning on the first attempt goes straight from INITIAL to WON."""
        session = session_with_secret_7
        assert session.status == GameStatus.INITIAL

        outcome = session.guess("7")
        assert outcome.kind == OutcomeKind.CORRECT
        assert outcome.attempts == 1
        assert session.status == GameStatus.WON

    def test_wrong_guess_moves_to_playing(self, session_with_secret_7):
        session = session_with_secret_7
        session.guess(2)
        assert session.status == GameStatus.PLAYING
        assert session.status_text() == "in progress"

    def test_attempts_increment_once_per_wrong_guess(self, session_with_secret_7):
        """attempts counts wrong valid guesses only."""
        session = session_with_secret_7
        for expected, value in enumerate([1, 10, 2, 9, 3], start=1):
            outcome = session.guess(value)
            assert outcome.attempts == expected
        assert session.attempts == 6

        session.guess("abc")
        session.guess(0)
        assert session.attempts == 6

        outcome = session.guess(7)
        assert outcome.attempts == 6
        assert session.attempts == 6

    def test_correct_after_many_wrong(self, session_with_secret_7):
        """The secret always wins, no matter how many misses came before."""
        session = session_with_secret_7
        for _ in range(25):
            session.guess(1)
        outcome = session.guess(7)
        assert outcome.kind == OutcomeKind.CORRECT
        assert outcome.attempts == 26

    def test_string_guess_accepted(self, session_with_secret_7):
        outcome = session_with_secret_7.guess(" 8 ")
        assert outcome.kind == OutcomeKind.TOO_HIGH


class TestInvalidInput:
    """Invalid input never changes state."""

    @pytest.mark.parametrize("raw", ["", "abc", "3.5", "7a", None, [], True, 2.5])
    def test_not_a_number(self, session_with_secret_7, raw):
        session = session_with_secret_7
        outcome = session.guess(raw)

        assert outcome == Outcome.invalid(InvalidReason.NOT_A_NUMBER)
        assert session.attempts == 1
        assert session.status == GameStatus.INITIAL
        assert session.secret == 7

    @pytest.mark.parametrize("raw", [0, 11, -5, "100", 11.0])
    def test_out_of_range(self, session_with_secret_7, raw):
        session = session_with_secret_7
        outcome = session.guess(raw)

        assert outcome == Outcome.invalid(InvalidReason.OUT_OF_RANGE)
        assert session.attempts == 1
        assert session.status == GameStatus.INITIAL

    def test_huge_digit_string(self, session_with_secret_7):
        """A digit string too long to convert is reported, not raised."""
        session = session_with_secret_7
        outcome = session.guess("1" * 5000)

        assert outcome == Outcome.invalid(InvalidReason.NOT_A_NUMBER)
        assert session.attempts == 1
        assert session.status == GameStatus.INITIAL

    def test_invalid_mid_game_keeps_playing(self, session_with_secret_7):
        """An invalid guess during play leaves PLAYING untouched."""
        session = session_with_secret_7
        session.guess(1)
        session.guess("nope")
        assert session.status == GameStatus.PLAYING
        assert session.attempts == 2


class TestWonState:
    """WON is terminal until restart."""

    def test_guesses_after_win_are_ignored(self, session_with_secret_7):
        session = session_with_secret_7
        session.guess(4)
        session.guess(7)

        for raw in [7, 1, "abc", 99]:
            outcome = session.guess(raw)
            assert outcome == Outcome.already_won()
        assert session.attempts == 2
        assert session.status == GameStatus.WON
        assert session.secret == 7
        assert session.status_text() == "won"


class TestAttemptLimit:
    """Optional max_attempts policy."""

    @pytest.fixture
    def limited(self):
        session = Session(GameConfig(max_attempts=3), drawer=FixedDrawer(7))
        session.start()
        return session

    def test_lost_on_last_wrong_guess(self, limited):
        assert limited.guess(1) == Outcome.too_low(1)
        assert limited.guess(9) == Outcome.too_high(2)

        outcome = limited.guess(2)
        assert outcome == Outcome.lost(secret=7, attempts=3)
        assert limited.status == GameStatus.LOST
        assert limited.attempts == 3
        assert limited.status_text() == "try again"

    def test_win_on_last_attempt(self, limited):
        limited.guess(1)
        limited.guess(2)
        outcome = limited.guess(7)
        assert outcome == Outcome.correct(secret=7, attempts=3)
        assert limited.status == GameStatus.WON

    def test_guesses_after_loss_are_ignored(self, limited):
        for value in [1, 2, 3]:
            limited.guess(value)
        assert limited.guess(7) == Outcome.already_lost()
        assert limited.status == GameStatus.LOST

    def test_invalid_input_does_not_use_attempts(self, limited):
        for _ in range(5):
            limited.guess("x")
        assert limited.status == GameStatus.INITIAL
        assert limited.attempts == 1

    def test_restart_after_loss(self, limited):
        for value in [1, 2, 3]:
            limited.guess(value)
        limited.restart()
        assert limited.status == GameStatus.INITIAL
        assert limited.attempts == 1

    def test_single_attempt_limit(self):
        session = Session(GameConfig(max_attempts=1), drawer=FixedDrawer(7))
        session.start()
        assert session.guess(3).kind == OutcomeKind.LOST

    def test_no_limit_never_loses(self, session_with_secret_7):
        for _ in range(100):
            session_with_secret_7.guess(1)
        assert session_with_secret_7.status == GameStatus.PLAYING


class TestGameConfig:
    """Configuration validation."""

    def test_defaults(self):
        config = GameConfig()
        assert config.min_number == 1
        assert config.max_number == 10
        assert config.max_attempts is None
        assert config.range_size == 10

    @pytest.mark.parametrize("bounds", [(5, 5), (10, 1)])
    def test_bad_range(self, bounds):
        with pytest.raises(ValueError):
            GameConfig(min_number=bounds[0], max_number=bounds[1])

    def test_bad_attempt_limit(self):
        with pytest.raises(ValueError):
            GameConfig(max_attempts=0)

    def test_drawer_range_must_match_config(self):
        """A drawer for another range would draw unwinnable secrets."""
        with pytest.raises(ValueError):
            Session(GameConfig(min_number=1, max_number=10), drawer=UniqueDrawer(50, 60))

    def test_matching_drawer_accepted(self):
        drawer = UniqueDrawer(50, 60, rng=random.Random(2))
        session = Session(GameConfig(min_number=50, max_number=60), drawer=drawer)
        session.start()
        assert 50 <= session.secret <= 60
