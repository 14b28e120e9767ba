"""
Debouncer - Cancellable deferred calls for typed input.

Each new call cancels whatever is still pending and schedules itself; only
the last call inside the quiet window actually runs.
"""

from __future__ import annotations
import threading
from typing import Any, Callable, Protocol


class Cancellable(Protocol):
    def cancel(self) -> Any: ...


Scheduler = Callable[[float, Callable[[], None]], Cancellable]


def thread_scheduler(delay: float, fn: Callable[[], None]) -> Cancellable:
    """Run fn after delay seconds on a daemon timer thread."""
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    timer.start()
    return timer


class Debouncer:
    """
    Usage:
        debouncer = Debouncer(0.8)
        debouncer.call(loop.submit, "7")   # replaces any pending submit
        debouncer.cancel()                 # drop the pending submit
    """

    def __init__(self, delay: float, scheduler: Scheduler | None = None):
        self.delay = delay
        self._scheduler = scheduler or thread_scheduler
        self._handle: Cancellable | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def call(self, fn: Callable[..., Any], *args: Any, **kwargs: Any):
        """Schedule fn(*args, **kwargs), cancelling any pending call."""
        with self._lock:
            self._cancel_locked()
            self._generation += 1
            generation = self._generation

            def fire():
                with self._lock:
                    # A newer call superseded this one after it was already due
                    if generation != self._generation:
                        return
                    self._handle = None
                fn(*args, **kwargs)

            self._handle = self._scheduler(self.delay, fire)

    def cancel(self):
        """Cancel the pending call, if any."""
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            self._generation += 1
