"""Float-backed units stored in SI scale.

``UnitFloat`` is a ``float`` subclass: the stored value is always the SI
value (radians, meters, seconds), while the constructor takes the value in
the unit's own scale. This lets the geodesy code hand a ``Degree`` straight
to ``math.cos`` and lets the scheduler compare a ``Millisecond`` pause with a
``Second`` countdown tick.

Classes:
    UnitFloat: Base class for all float-based units.

Example:
    >>> pause = Millisecond(2000)
    >>> float(pause)
    2.0
    >>> pause.to(Second)
    2.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Unit value stored in SI scale with family-checked arithmetic.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor from the unit's scale to SI.
        IS_FAMILY_ROOT (ClassVar[bool]): ``UnitFloat`` itself is a root so that
            bare instances still have a family.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a unit value from a number in the unit's own scale.

        Args:
            value: Numeric value, e.g. ``90`` for ``Degree(90)``.
        """
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create a unit value from a number already in SI scale."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the plain value expressed in ``unit_type``'s scale.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-tag the value as ``unit_type`` without changing the quantity."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    def _si_of(self, other: UnitFloat) -> float:
        """SI value of ``other`` after checking it shares this value's family."""
        self._check_same_root(type(other))
        return float(other)

    def _scaled(self, factor: Number) -> UnitFloat:
        if isinstance(factor, Unit) or not isinstance(factor, (int, float)):
            raise TypeError(f"{type(self).__name__} can only be scaled by a plain number, not {type(factor).__name__}")
        return type(self).from_si(float(self) * float(factor))

    # Arithmetic: the result keeps the left operand's unit
    def __add__(self, other: UnitFloat) -> UnitFloat:
        return type(self).from_si(float(self) + self._si_of(other))

    __radd__ = __add__

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        return type(self).from_si(float(self) - self._si_of(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        return type(self).from_si(self._si_of(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If ``k`` is a unit or not a number.
        """
        return self._scaled(k)

    __rmul__ = __mul__

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide by a plain number.

        Raises:
            TypeError: If ``k`` is a unit or not a number.
        """
        if isinstance(k, (int, float)) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"{type(self).__name__} can only be divided by a plain number, not {type(k).__name__}")

    def __neg__(self) -> UnitFloat:
        return self._scaled(-1)

    # Comparison: only inside one family
    def __lt__(self, other: UnitFloat) -> bool:
        return float(self) < self._si_of(other)

    def __le__(self, other: UnitFloat) -> bool:
        return float(self) <= self._si_of(other)

    def __gt__(self, other: UnitFloat) -> bool:
        return float(self) > self._si_of(other)

    def __ge__(self, other: UnitFloat) -> bool:
        return float(self) >= self._si_of(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return float(self) == self._si_of(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return float(self) != self._si_of(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value and symbol in the unit's own scale, e.g. ``"90.0 °"``."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Value in the unit's own scale with its SI equivalent."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
