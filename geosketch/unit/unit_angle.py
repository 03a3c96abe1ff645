"""Angular units for bearings, azimuths and positions on a circle.

Angles are stored in radians. ``Degree`` converts on construction, so
``float(Degree(90))`` is ``pi / 2`` and can go straight into ``math.sin``.

Classes:
    Radian: SI angle unit.
    Degree: 1/360 of a turn.

Type Aliases:
    Angle: ``Radian | Degree``.

Example:
    >>> heading = Degree(90)
    >>> round(float(heading), 4)
    1.5708
    >>> Radian(3.141592653589793).to(Degree)
    180.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: radian (SI root of the angle family)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: degree.

    Used for everything the user sees: compass bearings clockwise from north,
    line segment azimuths and the navigation cursor's angle on a circle.
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
