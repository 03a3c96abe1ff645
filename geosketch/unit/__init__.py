"""Typed units for the map navigation core.

Families:
    - Angle: Radian (root), Degree
    - Length: Meter (root), Kilometer
    - Time: Second (root), Millisecond

Values are floats stored in SI scale; operations across families raise
``TypeError``.

Example:
    >>> from geosketch.unit import Degree, Kilometer, Millisecond, Second
    >>> Kilometer(1.5).to(Kilometer)
    1.5
    >>> Millisecond(100) < Second(1)
    True
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat
from .unit_time import Millisecond, Second, Time

__all__ = [
    "Unit",
    "UnitFloat",
    "Radian",
    "Degree",
    "Angle",
    "Meter",
    "Kilometer",
    "Length",
    "Second",
    "Millisecond",
    "Time",
]
