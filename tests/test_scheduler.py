"""
Tests for timers and schedulers.
"""

import asyncio
import unittest
from unittest.mock import MagicMock

from geosketch.timer import AsyncioScheduler, ManualScheduler, Timer
from geosketch.unit import Millisecond, Second


class TestTimer(unittest.TestCase):
    """Test Timer countdown, firing and cancellation."""

    def test_countdown_and_fire(self):
        """Test that a timer is done after its duration and fires once."""
        callback = MagicMock()
        timer = Timer(Millisecond(100), callback)
        timer._advance(Millisecond(60))
        self.assertFalse(timer.done)
        timer._advance(Millisecond(40))
        self.assertTrue(timer.done)

        timer._fire()
        timer._fire()
        callback.assert_called_once_with()
        self.assertTrue(timer.fired)
        self.assertFalse(timer.active)

    def test_cancel_suppresses_callback(self):
        """Test that a cancelled timer never fires."""
        callback = MagicMock()
        timer = Timer(Second(1), callback)
        timer.cancel()
        timer._fire()
        callback.assert_not_called()
        self.assertTrue(timer.cancelled)

    def test_cancel_cancels_loop_handle(self):
        """Test that cancel forwards to the event-loop handle."""
        timer = Timer(Second(1))
        handle = MagicMock()
        timer._handle = handle
        timer.cancel()
        handle.cancel.assert_called_once_with()


class TestManualScheduler(unittest.TestCase):
    """Test the discrete-time scheduler."""

    def setUp(self):
        self.scheduler = ManualScheduler()
        self.calls = []

    def record(self, name):
        return lambda: self.calls.append((name, float(self.scheduler.now)))

    def test_fires_when_due(self):
        """Test that a timer fires only when its delay has elapsed."""
        self.scheduler.schedule(self.record("a"), Millisecond(1000))
        self.assertEqual(self.scheduler.advance(Millisecond(999)), 0)
        self.assertEqual(self.scheduler.advance(Millisecond(1)), 1)
        self.assertEqual([name for name, _ in self.calls], ["a"])

    def test_deadline_order(self):
        """Test that timers fire by deadline, ties in creation order."""
        self.scheduler.schedule(self.record("late"), Second(2))
        self.scheduler.schedule(self.record("first"), Second(1))
        self.scheduler.schedule(self.record("second"), Millisecond(1000))
        self.scheduler.advance(Second(3))
        self.assertEqual([name for name, _ in self.calls], ["first", "second", "late"])
        self.assertAlmostEqual(self.calls[0][1], 1.0)
        self.assertAlmostEqual(self.calls[2][1], 2.0)

    def test_timers_scheduled_during_advance(self):
        """Test that a callback's own timers fire inside the same advance."""
        def chain():
            self.calls.append(("outer", float(self.scheduler.now)))
            self.scheduler.schedule(self.record("inner"), Millisecond(500))

        self.scheduler.schedule(chain, Second(1))
        fired = self.scheduler.advance(Second(2))
        self.assertEqual(fired, 2)
        self.assertEqual([name for name, _ in self.calls], ["outer", "inner"])
        self.assertAlmostEqual(self.calls[1][1], 1.5)
        self.assertAlmostEqual(float(self.scheduler.now), 2.0)

    def test_zero_delay(self):
        """Test that a zero delay fires on the next advance."""
        self.scheduler.schedule(self.record("now"), Second(0))
        self.assertEqual(self.scheduler.advance(Second(0)), 1)

    def test_cancelled_timer_not_pending(self):
        """Test that cancelled timers are dropped."""
        handle = self.scheduler.schedule(self.record("x"), Second(1))
        handle.cancel()
        self.assertEqual(self.scheduler.pending, [])
        self.assertEqual(self.scheduler.run_until_idle(), 0)
        self.assertEqual(self.calls, [])

    def test_run_until_idle(self):
        """Test draining every timer."""
        self.scheduler.schedule(self.record("a"), Second(5))
        self.scheduler.schedule(self.record("b"), Millisecond(100))
        self.assertEqual(self.scheduler.run_until_idle(), 2)
        self.assertAlmostEqual(float(self.scheduler.now), 5.0)

    def test_run_until_idle_bound(self):
        """Test that endless rescheduling raises RuntimeError."""
        def again():
            self.scheduler.schedule(again, Second(1))

        self.scheduler.schedule(again, Second(1))
        with self.assertRaises(RuntimeError):
            self.scheduler.run_until_idle(max_steps=50)


class TestAsyncioScheduler(unittest.IsolatedAsyncioTestCase):
    """Test the event-loop scheduler."""

    async def test_fires_after_delay(self):
        """Test that the callback runs on the loop."""
        scheduler = AsyncioScheduler()
        done = asyncio.Event()
        timer = scheduler.schedule(done.set, Millisecond(10))
        await asyncio.wait_for(done.wait(), timeout=1.0)
        self.assertTrue(timer.fired)

    async def test_cancel(self):
        """Test that a cancelled timer does not fire."""
        scheduler = AsyncioScheduler()
        callback = MagicMock()
        timer = scheduler.schedule(callback, Millisecond(10))
        timer.cancel()
        await asyncio.sleep(0.05)
        callback.assert_not_called()


if __name__ == '__main__':
    unittest.main()
