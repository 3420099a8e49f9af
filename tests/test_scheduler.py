from __future__ import annotations

import threading
import unittest

from fake_host import ManualTimers
from git_oil.scheduler import Debouncer


class DebouncerTests(unittest.TestCase):
    def test_burst_of_triggers_fires_once_after_last_event(self) -> None:
        timers = ManualTimers()
        debouncer = Debouncer(delay_ms=200, start_timer=timers)
        calls: list[float] = []

        for _ in range(5):
            debouncer.trigger(lambda: calls.append(timers.now))
            timers.advance(0.1)

        self.assertEqual(calls, [])
        timers.advance(0.05)
        self.assertEqual(calls, [])
        timers.advance(0.05)

        self.assertEqual(len(calls), 1)
        # Last trigger at t=0.4, so the call lands at t=0.6.
        self.assertAlmostEqual(calls[0], 0.6)
        self.assertFalse(debouncer.pending)

    def test_only_one_timer_is_live_at_a_time(self) -> None:
        timers = ManualTimers()
        debouncer = Debouncer(delay_ms=200, start_timer=timers)

        debouncer.trigger(lambda: None)
        debouncer.trigger(lambda: None)
        debouncer.trigger(lambda: None)

        self.assertEqual(len(timers.timers), 3)
        self.assertEqual(len(timers.active), 1)
        self.assertTrue(debouncer.pending)

    def test_separated_triggers_each_fire(self) -> None:
        timers = ManualTimers()
        debouncer = Debouncer(delay_ms=200, start_timer=timers)
        calls: list[str] = []

        debouncer.trigger(lambda: calls.append("first"))
        timers.advance(0.3)
        debouncer.trigger(lambda: calls.append("second"))
        timers.advance(0.3)

        self.assertEqual(calls, ["first", "second"])

    def test_cancel_drops_pending_call(self) -> None:
        timers = ManualTimers()
        debouncer = Debouncer(delay_ms=200, start_timer=timers)
        calls: list[str] = []

        debouncer.trigger(lambda: calls.append("x"))
        debouncer.cancel()
        timers.advance(1.0)

        self.assertEqual(calls, [])
        self.assertFalse(debouncer.pending)

    def test_superseded_callback_does_not_run_if_its_timer_still_fires(self) -> None:
        captured = []
        debouncer = Debouncer(delay_ms=200, start_timer=lambda delay, cb: captured.append(cb) or _NoCancel())
        calls: list[str] = []

        debouncer.trigger(lambda: calls.append("stale"))
        debouncer.trigger(lambda: calls.append("fresh"))
        for fire in captured:
            fire()

        self.assertEqual(calls, ["fresh"])

    def test_delay_change_applies_to_next_trigger(self) -> None:
        timers = ManualTimers()
        debouncer = Debouncer(delay_ms=200, start_timer=timers)
        debouncer.delay_ms = 50

        debouncer.trigger(lambda: None)

        self.assertAlmostEqual(timers.timers[0].fire_at, 0.05)

    def test_default_timer_runs_callback_on_background_thread(self) -> None:
        fired = threading.Event()
        debouncer = Debouncer(delay_ms=1)

        debouncer.trigger(fired.set)

        self.assertTrue(fired.wait(2.0))


class _NoCancel:
    def cancel(self) -> None:
        pass


if __name__ == "__main__":
    unittest.main()
