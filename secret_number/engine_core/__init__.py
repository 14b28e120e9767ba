"""
Engine Core - Secret draws, guess evaluation and the session state machine.

The engine is the runtime that:
1. Draws secrets without repeats inside a cycle
2. Validates raw guesses
3. Evaluates guesses and tracks attempts
4. Reports every result as an Outcome value
"""

from .state import GameConfig, GameStatus, Prompt, STATUS_TEXT
from .outcome import Outcome, OutcomeKind, InvalidReason
from .drawer import UniqueDrawer
from .validation import parse_guess, parse_integer
from .session import Session

__all__ = [
    "GameConfig",
    "GameStatus",
    "Prompt",
    "STATUS_TEXT",
    "Outcome",
    "OutcomeKind",
    "InvalidReason",
    "UniqueDrawer",
    "parse_guess",
    "parse_integer",
    "Session",
]
