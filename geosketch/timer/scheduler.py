"""Schedulers that run callbacks after a delay.

The animation sequencer never sleeps or calls the event loop directly: it
asks an injected ``Scheduler`` to run a callback after a ``Time`` delay and
keeps the returned ``Timer`` as a cancel handle.

Components:
    Scheduler: Protocol the sequencer depends on.
    ManualScheduler: Discrete-time scheduler advanced by hand, used by tests
        and offline replays.
    AsyncioScheduler: Real-time scheduler on an asyncio event loop.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

from geosketch.unit import Second, Time

from .timer import Timer

_LOGGER = logging.getLogger(__name__)

_ZERO_TIME = Second(0.0)


class Scheduler(Protocol):
    """Runs a callback once after a delay."""

    def schedule(self, callback: Callable[[], Any], delay: Time) -> Timer:
        """Schedule ``callback`` to run after ``delay``; return its cancel handle."""
        ...


class ManualScheduler:
    """Discrete-time scheduler whose clock only moves when told to.

    Timers are counted down in steps: each step advances every pending
    timer by the smallest remaining duration and fires the timers that
    reach zero, in creation order. Timers scheduled by a callback during
    ``advance`` take part in the same advance if they fall due within it.

    Example:
        >>> scheduler = ManualScheduler()
        >>> calls = []
        >>> _ = scheduler.schedule(lambda: calls.append("tick"), Millisecond(1000))
        >>> scheduler.advance(Millisecond(999))
        0
        >>> scheduler.advance(Millisecond(1))
        1
        >>> calls
        ['tick']
    """

    def __init__(self) -> None:
        self._now: Time = Second(0.0)
        self._timers: list[Timer] = []

    @property
    def now(self) -> Time:
        """Time elapsed since the scheduler was created."""
        return self._now

    @property
    def pending(self) -> list[Timer]:
        """Timers that have not fired and were not cancelled."""
        return [timer for timer in self._timers if timer.active]

    def schedule(self, callback: Callable[[], Any], delay: Time) -> Timer:
        timer = Timer(delay, callback)
        self._timers.append(timer)
        return timer

    def advance(self, delta: Time) -> int:
        """Move the clock forward by ``delta`` and fire what falls due.

        Returns:
            int: Number of callbacks fired.
        """
        remaining = delta
        fired = 0
        while True:
            self._timers = self.pending
            if not self._timers:
                break
            step = max(min(timer.duration for timer in self._timers), _ZERO_TIME)
            if step > remaining:
                break

            for timer in self._timers:
                timer._advance(step)
            self._now += step
            remaining -= step

            due = [timer for timer in self._timers if timer.done]
            for timer in due:
                if timer.active:
                    timer._fire()
                    fired += 1

        for timer in self._timers:
            timer._advance(remaining)
        self._now += remaining
        return fired

    def run_until_idle(self, max_steps: int = 10_000) -> int:
        """Advance until no timer is pending.

        Args:
            max_steps: Safety bound on the number of advances.

        Returns:
            int: Number of callbacks fired.

        Raises:
            RuntimeError: If timers keep rescheduling beyond ``max_steps``.
        """
        fired = 0
        for _ in range(max_steps):
            pending = self.pending
            if not pending:
                return fired
            fired += self.advance(max(min(timer.duration for timer in pending), _ZERO_TIME))
        msg = f"Scheduler still busy after {max_steps} steps"
        raise RuntimeError(msg)


class AsyncioScheduler:
    """Scheduler backed by ``loop.call_later``.

    Must be created while the event loop is running, or be given the loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()

    def schedule(self, callback: Callable[[], Any], delay: Time) -> Timer:
        timer = Timer(delay, callback)
        timer._handle = self._loop.call_later(max(float(delay), 0.0), timer._fire)
        _LOGGER.debug("Scheduled %s after %s", getattr(callback, "__name__", callback), delay)
        return timer
