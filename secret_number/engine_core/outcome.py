"""
Outcome - Result of evaluating a single guess.

Every call to Session.guess() returns exactly one Outcome. Invalid input is
an Outcome too, never an exception: the host surfaces it as feedback and the
session carries on.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class OutcomeKind(Enum):
    """Discriminator for Outcome values."""
    INVALID = "invalid"
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"
    CORRECT = "correct"
    LOST = "lost"
    ALREADY_WON = "already_won"
    ALREADY_LOST = "already_lost"


class InvalidReason(Enum):
    """Why a guess was rejected before evaluation."""
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class Outcome:
    """
    A guess evaluation result.

    Fields are populated per kind:
    - INVALID: reason
    - TOO_HIGH / TOO_LOW: attempts (the attempt number just used)
    - CORRECT / LOST: secret, attempts
    - ALREADY_WON / ALREADY_LOST: nothing
    """
    kind: OutcomeKind
    attempts: int | None = None
    secret: int | None = None
    reason: InvalidReason | None = None

    @classmethod
    def invalid(cls, reason: InvalidReason) -> Outcome:
        return cls(kind=OutcomeKind.INVALID, reason=reason)

    @classmethod
    def too_high(cls, attempts: int) -> Outcome:
        return cls(kind=OutcomeKind.TOO_HIGH, attempts=attempts)

    @classmethod
    def too_low(cls, attempts: int) -> Outcome:
        return cls(kind=OutcomeKind.TOO_LOW, attempts=attempts)

    @classmethod
    def correct(cls, secret: int, attempts: int) -> Outcome:
        return cls(kind=OutcomeKind.CORRECT, secret=secret, attempts=attempts)

    @classmethod
    def lost(cls, secret: int, attempts: int) -> Outcome:
        return cls(kind=OutcomeKind.LOST, secret=secret, attempts=attempts)

    @classmethod
    def already_won(cls) -> Outcome:
        return cls(kind=OutcomeKind.ALREADY_WON)

    @classmethod
    def already_lost(cls) -> Outcome:
        return cls(kind=OutcomeKind.ALREADY_LOST)

    @property
    def is_invalid(self) -> bool:
        return self.kind == OutcomeKind.INVALID

    @property
    def ends_game(self) -> bool:
        """True for the guess that finished the game (win or loss)."""
        return self.kind in {OutcomeKind.CORRECT, OutcomeKind.LOST}
