"""Countdown timer that doubles as a cancel handle.

A ``Timer`` counts a ``Time`` duration down to zero and then fires its
callback once. Schedulers hand timers back from ``schedule()`` so the
animation sequencer can cancel a pending countdown tick or reveal pause when
a playback run is abandoned.

Lifecycle:
    1. Creation: a scheduler creates the timer with a duration and callback.
    2. Advancement: the scheduler counts it down (``_advance``) or lets the
       event loop do it.
    3. Completion: ``done`` turns true and the scheduler calls ``_fire``.
    4. Cancellation: ``cancel()`` at any point before firing suppresses the
       callback.

Example:
    >>> fired = []
    >>> timer = Timer(Millisecond(100), lambda: fired.append(True))
    >>> timer._advance(Millisecond(100))
    >>> timer.done
    True
    >>> timer._fire()
    >>> fired
    [True]
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from geosketch.unit import Second, Time

_ZERO_TIME = Second(0.0)


class Timer:
    """Countdown timer with a one-shot callback.

    Attributes:
        _duration (Time): Remaining time; zero or less means done.
        _callback (Callable[[], Any] | None): Invoked once when fired.
        _cancelled (bool): Set by ``cancel``; a cancelled timer never fires.
        _fired (bool): Set after the callback ran.
        _handle (Any): Event-loop handle when an event loop owns the countdown.
    """

    _duration: Time

    def __init__(self, duration: Time, callback: Callable[[], Any] | None = None) -> None:
        """Create a timer.

        Args:
            duration (Time): Countdown length. Zero fires on the next advance.
            callback: Function to call when the countdown completes.
        """
        self._duration = duration
        self._callback = callback
        self._cancelled = False
        self._fired = False
        self._handle: Any = None

    @property
    def duration(self) -> Time:
        """Remaining time before the timer fires."""
        return self._duration

    @property
    def done(self) -> bool:
        """True once the countdown reached zero."""
        return self._duration <= _ZERO_TIME

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def active(self) -> bool:
        """True while the timer can still fire."""
        return not (self._cancelled or self._fired)

    def cancel(self) -> None:
        """Prevent the callback from running. Idempotent."""
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _advance(self, delta: Time) -> None:
        """Count down by ``delta``. Used by schedulers."""
        self._duration -= delta

    def _fire(self) -> None:
        """Run the callback once unless cancelled or already fired."""
        if not self.active:
            return
        self._fired = True
        self._handle = None
        if self._callback is not None:
            self._callback()
