"""Timers and schedulers for countdowns, pauses and settle delays.

Components:
    Timer: Countdown with a one-shot callback; also the cancel handle.
    Scheduler: Protocol for ``schedule(callback, delay) -> Timer``.
    ManualScheduler: Deterministic scheduler advanced by hand.
    AsyncioScheduler: Scheduler on a running asyncio loop.

Example:
    >>> from geosketch.timer import ManualScheduler
    >>> from geosketch.unit import Millisecond
    >>> scheduler = ManualScheduler()
    >>> handle = scheduler.schedule(print, Millisecond(2000))
    >>> handle.cancel()
    >>> scheduler.run_until_idle()
    0
"""

from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler
from .timer import Timer

__all__ = ["Timer", "Scheduler", "ManualScheduler", "AsyncioScheduler"]
