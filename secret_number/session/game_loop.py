"""
Game Loop - Host-side driver around a Session.

The loop:
1. Host starts the game, observers see the opening prompt
2. Player types; input is debounced and auto-submitted when it looks valid
3. Enter submits immediately
4. Every outcome is published to observers (speech, effects, sockets...)
5. Restart begins a new game

Observers are best-effort. A failing observer is logged and skipped; it can
never change the game state or stop other observers from running.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from ..engine_core.outcome import Outcome
from ..engine_core.session import Session
from ..engine_core.state import Prompt
from ..engine_core.validation import parse_guess
from .debounce import Debouncer


logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Kinds of events published to observers."""
    STARTED = "started"
    RESTARTED = "restarted"
    GUESSED = "guessed"


@dataclass(frozen=True)
class GameEvent:
    """
    Something observers may react to.

    STARTED / RESTARTED carry a prompt; GUESSED carries an outcome.
    """
    kind: EventKind
    prompt: Prompt | None = None
    outcome: Outcome | None = None


Observer = Callable[[GameEvent], Any]


class GameLoop:
    """
    Drives one Session for an interactive host.

    Usage:
        loop = GameLoop(Session())
        loop.subscribe(lambda event: print(event))
        loop.start()
        loop.on_enter("5")
    """

    def __init__(
        self,
        session: Session,
        observers: list[Observer] | None = None,
        debouncer: Debouncer | None = None,
        debounce_seconds: float = 0.8,
    ):
        self.session = session
        self._observers: list[Observer] = list(observers or [])
        self.debouncer = debouncer or Debouncer(debounce_seconds)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, observer: Observer):
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def _publish(self, event: GameEvent):
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception:
                logger.exception("Observer %r failed on %s event", observer, event.kind.value)

    # ------------------------------------------------------------------
    # Game operations
    # ------------------------------------------------------------------

    def start(self) -> Prompt:
        self.debouncer.cancel()
        prompt = self.session.start()
        self._publish(GameEvent(kind=EventKind.STARTED, prompt=prompt))
        return prompt

    def restart(self) -> Prompt:
        self.debouncer.cancel()
        prompt = self.session.restart()
        self._publish(GameEvent(kind=EventKind.RESTARTED, prompt=prompt))
        return prompt

    def submit(self, raw: Any) -> Outcome:
        """Evaluate a guess and publish the outcome."""
        outcome = self.session.guess(raw)
        self._publish(GameEvent(kind=EventKind.GUESSED, outcome=outcome))
        return outcome

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def on_input(self, raw: str):
        """
        Handle a keystroke-level change of the input text.

        Any pending auto-submit is cancelled. Text that already parses as an
        in-range guess is submitted once the player stops typing.
        """
        self.debouncer.cancel()
        if not raw:
            return
        parsed = parse_guess(raw, self.session.min_number, self.session.max_number)
        if isinstance(parsed, int):
            self.debouncer.call(self.submit, raw)

    def on_enter(self, raw: str) -> Outcome:
        """Submit immediately, dropping any pending auto-submit."""
        self.debouncer.cancel()
        return self.submit(raw)

    def clear_input(self):
        self.debouncer.cancel()
