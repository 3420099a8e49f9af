"""Single-slot debounce for render triggers.

Each trigger cancels the pending call and schedules a fresh one, so a burst
of events produces one call ``delay_ms`` after the last event.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol

DEFAULT_DEBOUNCE_DELAY_MS = 200


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def threading_timer(delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
    """Start a daemon ``threading.Timer``."""
    timer = threading.Timer(delay_seconds, callback)
    timer.daemon = True
    timer.start()
    return timer


class Debouncer:
    """Latest-trigger-wins delayed call."""

    def __init__(
        self,
        delay_ms: float = DEFAULT_DEBOUNCE_DELAY_MS,
        start_timer: TimerFactory = threading_timer,
    ) -> None:
        self.delay_ms = delay_ms
        self._start_timer = start_timer
        self._lock = threading.Lock()
        self._pending: TimerHandle | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def trigger(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
            self._generation += 1
            generation = self._generation

            def fire() -> None:
                with self._lock:
                    # A timer cancelled too late to stop still must not run.
                    if generation != self._generation:
                        return
                    self._pending = None
                callback()

            self._pending = self._start_timer(self.delay_ms / 1000.0, fire)

    def cancel(self) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None
            self._generation += 1
