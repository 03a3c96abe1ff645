"""Distance units for radii, segment lengths and navigation steps.

Classes:
    Meter: SI length unit.
    Kilometer: 1000 meters; the scale every map element is drawn in.

Type Aliases:
    Length: ``Meter | Kilometer``.

Example:
    >>> radius = Kilometer(2.5)
    >>> float(radius)
    2500.0
    >>> radius.to(Kilometer)
    2.5
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: meter (SI root of the length family)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance unit: kilometer.

    Circle radii, segment distances and the zoom-dependent navigation step
    are all expressed in kilometers.
    """

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
