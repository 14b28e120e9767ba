"""
Session - The game state machine for one play-through at a time.

State machine:
    INITIAL --(wrong guess)--> PLAYING --(wrong guess)--> PLAYING
    INITIAL/PLAYING --(correct guess)--> WON
    INITIAL/PLAYING --(last allowed wrong guess)--> LOST   (max_attempts only)
    any --(restart)--> INITIAL

The session never touches presentation. Every operation returns a value
(Prompt or Outcome) that the host renders however it likes.
"""

from __future__ import annotations
import logging
import random
import threading
from typing import Any

from .drawer import UniqueDrawer
from .outcome import Outcome, InvalidReason
from .state import GameConfig, GameStatus, Prompt, STATUS_TEXT
from .validation import parse_guess


logger = logging.getLogger(__name__)


class Session:
    """
    A guessing game session.

    Owns one drawer for its whole lifetime, so the drawn history carries
    over between games and secrets do not repeat until the range is used up.

    Usage:
        session = Session(GameConfig(min_number=1, max_number=10))
        prompt = session.start()
        outcome = session.guess("5")
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        drawer: UniqueDrawer | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config or GameConfig()
        if drawer is not None and (
            drawer.min_number != self.config.min_number
            or drawer.max_number != self.config.max_number
        ):
            raise ValueError(
                f"Drawer range {drawer.min_number}-{drawer.max_number} does not match "
                f"game range {self.config.min_number}-{self.config.max_number}"
            )
        self._drawer = drawer or UniqueDrawer(
            self.config.min_number, self.config.max_number, rng=rng,
        )
        self._secret: int | None = None
        self._attempts = 1
        self._status = GameStatus.INITIAL
        # attempts/status/secret change as a unit
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def min_number(self) -> int:
        return self.config.min_number

    @property
    def max_number(self) -> int:
        return self.config.max_number

    @property
    def started(self) -> bool:
        return self._secret is not None

    @property
    def secret(self) -> int | None:
        """The current secret. Hosts should only reveal it once the game is over."""
        return self._secret

    def status_text(self) -> str:
        return STATUS_TEXT[self._status]

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def start(self) -> Prompt:
        """Begin a new game: draw a secret and reset the counters."""
        with self._lock:
            self._secret = self._drawer.draw()
            self._attempts = 1
            self._status = GameStatus.INITIAL
            logger.info(
                "New game started (range %d-%d)",
                self.config.min_number, self.config.max_number,
            )
            return self._prompt()

    def restart(self) -> Prompt:
        """Start over. Allowed from any status."""
        return self.start()

    def guess(self, raw: Any) -> Outcome:
        """
        Evaluate a guess.

        Invalid input and guesses after the game is over are reported
        through the Outcome and leave the session untouched.
        """
        with self._lock:
            if self._secret is None:
                raise RuntimeError("Session not started - call start() first")

            if self._status == GameStatus.WON:
                return Outcome.already_won()
            if self._status == GameStatus.LOST:
                return Outcome.already_lost()

            parsed = parse_guess(raw, self.config.min_number, self.config.max_number)
            if isinstance(parsed, InvalidReason):
                return Outcome.invalid(parsed)

            self._status = GameStatus.PLAYING

            if parsed == self._secret:
                self._status = GameStatus.WON
                logger.info("Secret %d found in %d attempt(s)", self._secret, self._attempts)
                return Outcome.correct(self._secret, self._attempts)

            max_attempts = self.config.max_attempts
            if max_attempts is not None and self._attempts >= max_attempts:
                self._status = GameStatus.LOST
                logger.info("Game lost after %d attempt(s)", self._attempts)
                return Outcome.lost(self._secret, self._attempts)

            if parsed > self._secret:
                outcome = Outcome.too_high(self._attempts)
            else:
                outcome = Outcome.too_low(self._attempts)
            self._attempts += 1
            return outcome

    def _prompt(self) -> Prompt:
        return Prompt(
            min_number=self.config.min_number,
            max_number=self.config.max_number,
            attempts=self._attempts,
            status=self._status,
        )

    def prompt(self) -> Prompt:
        """Current state as a Prompt snapshot."""
        with self._lock:
            return self._prompt()
