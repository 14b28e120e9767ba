"""
Drawer - Draws secret numbers without repeating within a cycle.

A cycle is one full pass through every value of the range. Once every value
has been drawn, the history is cleared and a new cycle begins. The value
that closed a cycle may come up again as the first draw of the next one.
"""

from __future__ import annotations
import logging
import random


logger = logging.getLogger(__name__)


class UniqueDrawer:
    """
    Uniform draws from [min_number, max_number] with per-cycle uniqueness.

    The random source is injectable so draws can be made reproducible:

        drawer = UniqueDrawer(1, 10, rng=random.Random(42))
        secret = drawer.draw()
    """

    def __init__(
        self,
        min_number: int,
        max_number: int,
        rng: random.Random | None = None,
    ):
        if min_number >= max_number:
            raise ValueError(
                f"min_number must be lower than max_number "
                f"(got {min_number} and {max_number})"
            )
        self.min_number = min_number
        self.max_number = max_number
        self._rng = rng or random.Random()
        # Insertion-ordered so history can be reported in draw order
        self._history: dict[int, None] = {}

    @property
    def cycle_size(self) -> int:
        return self.max_number - self.min_number + 1

    @property
    def history(self) -> list[int]:
        """Values drawn in the current cycle, oldest first."""
        return list(self._history)

    @property
    def remaining(self) -> set[int]:
        """Values that can still be drawn before the cycle resets."""
        return {
            value for value in range(self.min_number, self.max_number + 1)
            if value not in self._history
        }

    def draw(self) -> int:
        """Draw the next secret number."""
        candidate = self._sample()

        # Reset before the collision check: a full history always clears first
        if len(self._history) == self.cycle_size:
            logger.debug("Drawer cycle complete, clearing history")
            self._history.clear()

        while candidate in self._history:
            candidate = self._sample()

        self._history[candidate] = None
        logger.debug("Drew %d (cycle history: %s)", candidate, self.history)
        return candidate

    def _sample(self) -> int:
        return self._rng.randint(self.min_number, self.max_number)
