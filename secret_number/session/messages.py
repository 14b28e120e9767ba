"""
Feedback messages - User-facing text for outcomes and prompts.
"""

from __future__ import annotations

from ..engine_core.outcome import Outcome, OutcomeKind, InvalidReason
from ..engine_core.state import GameConfig


def _attempt_word(attempts: int) -> str:
    return "attempt" if attempts == 1 else "attempts"


def range_hint(config: GameConfig) -> str:
    return f"Enter a number from {config.min_number} to {config.max_number}"


def prompt_message() -> str:
    return "Make your first guess!"


def describe(outcome: Outcome, config: GameConfig) -> str:
    """Render an outcome as a feedback message."""
    kind = outcome.kind

    if kind == OutcomeKind.INVALID:
        if outcome.reason == InvalidReason.OUT_OF_RANGE:
            return f"Enter a number between {config.min_number} and {config.max_number}!"
        return "Please enter a valid number!"

    if kind == OutcomeKind.TOO_HIGH:
        return "The secret number is lower!"

    if kind == OutcomeKind.TOO_LOW:
        return "The secret number is higher!"

    if kind == OutcomeKind.CORRECT:
        return (
            f"Congratulations! You found the secret number {outcome.secret} "
            f"in {outcome.attempts} {_attempt_word(outcome.attempts)}!"
        )

    if kind == OutcomeKind.LOST:
        return (
            f"Out of attempts! The secret number was {outcome.secret}. "
            f"Start a new game to try again."
        )

    if kind == OutcomeKind.ALREADY_WON:
        return "You already won! Start a new game to play again."

    return "This game is over. Start a new game to play again."


def hint(outcome: Outcome) -> str | None:
    """Short follow-up hint for a wrong guess."""
    if outcome.kind == OutcomeKind.TOO_HIGH:
        return "Try a lower number"
    if outcome.kind == OutcomeKind.TOO_LOW:
        return "Try a higher number"
    return None
