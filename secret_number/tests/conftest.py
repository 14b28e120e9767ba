"""
Pytest fixtures for Secret Number tests.
"""

import random

import pytest

from ..engine_core.drawer import UniqueDrawer
from ..engine_core.session import Session
from ..engine_core.state import GameConfig


class FixedDrawer(UniqueDrawer):
    """Drawer that hands out a scripted sequence of secrets."""

    def __init__(self, *secrets: int, min_number: int = 1, max_number: int = 10):
        super().__init__(min_number, max_number)
        self._secrets = list(secrets)
        self.draw_count = 0

    def draw(self) -> int:
        secret = self._secrets[min(self.draw_count, len(self._secrets) - 1)]
        self.draw_count += 1
        return secret


class ManualScheduler:
    """Scheduler for Debouncer that only fires when told to."""

    class Handle:
        def __init__(self, fn):
            self.fn = fn
            self.cancelled = False

        def cancel(self):
            self.cancelled = True

    def __init__(self):
        self.handles: list[ManualScheduler.Handle] = []
        self.delays: list[float] = []

    def __call__(self, delay, fn):
        handle = self.Handle(fn)
        self.handles.append(handle)
        self.delays.append(delay)
        return handle

    @property
    def live(self) -> list["ManualScheduler.Handle"]:
        return [h for h in self.handles if not h.cancelled]

    def fire_all(self):
        """Run every handle that was not cancelled (like time passing)."""
        for handle in self.live:
            handle.fn()


@pytest.fixture
def config() -> GameConfig:
    return GameConfig(min_number=1, max_number=10)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def session_with_secret_7(config) -> Session:
    """Started session whose secret is 7."""
    session = Session(config, drawer=FixedDrawer(7))
    session.start()
    return session


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()
