"""
Game State - Configuration and status values for one guessing game.

Design principles:
- Configuration is fixed at construction and validated once
- Status is a closed set of values; display text is a pure mapping
- Nothing here knows about rendering
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class GameStatus(Enum):
    """High-level game status."""
    INITIAL = "initial"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"  # Only reachable with a max_attempts policy

    @property
    def is_terminal(self) -> bool:
        return self in {GameStatus.WON, GameStatus.LOST}


# Display keys handed to the host; hosts render or translate them verbatim.
STATUS_TEXT: dict[GameStatus, str] = {
    GameStatus.INITIAL: "ready",
    GameStatus.PLAYING: "in progress",
    GameStatus.WON: "won",
    GameStatus.LOST: "try again",
}


@dataclass(frozen=True)
class GameConfig:
    """
    Game configuration, fixed for the lifetime of a session.

    The range is inclusive on both ends. max_attempts enables the
    optional "Lost" policy; None means guesses are unlimited.
    """
    min_number: int = 1
    max_number: int = 10
    max_attempts: int | None = None

    def __post_init__(self):
        if self.min_number >= self.max_number:
            raise ValueError(
                f"min_number must be lower than max_number "
                f"(got {self.min_number} and {self.max_number})"
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1 (got {self.max_attempts})")

    @property
    def range_size(self) -> int:
        """Number of distinct values in the range."""
        return self.max_number - self.min_number + 1

    def contains(self, value: int) -> bool:
        return self.min_number <= value <= self.max_number


@dataclass(frozen=True)
class Prompt:
    """
    Snapshot handed to the host when a game (re)starts.

    Carries what the host needs to render its opening prompt.
    """
    min_number: int
    max_number: int
    attempts: int
    status: GameStatus

    @property
    def status_text(self) -> str:
        return STATUS_TEXT[self.status]
