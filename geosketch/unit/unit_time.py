"""Time units for scheduler delays and camera flight durations.

Classes:
    Second: SI time unit.
    Millisecond: 1/1000 second; countdown ticks and pauses are set in it.

Type Aliases:
    Time: ``Second | Millisecond``.

Example:
    >>> tick = Millisecond(1000)
    >>> tick == Second(1)
    True
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Second(UnitFloat):
    """Time unit: second (SI root of the time family)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class Millisecond(Second):
    """Time unit: millisecond."""

    SCALE_TO_SI = 0.001
    SYMBOL = "ms"


Time = Second | Millisecond
