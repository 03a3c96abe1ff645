"""Unit family foundation for typed map quantities.

Every quantity the navigation core handles (angles on a circle, distances
along a segment, delays between animation steps) is a float tagged with a
unit class. Unit classes are grouped in families: a family is rooted at the
first class in the MRO that sets ``IS_FAMILY_ROOT``. Arithmetic and
comparison are only allowed inside a family, so a bearing can never be added
to a radius by accident.

Classes:
    Unit: Base class that assigns the family ``ROOT`` to every subclass.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Kilometer(Length):
    ...     pass
    >>> Kilometer.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Symbol used in string representations.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the class as a family root.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve ``ROOT`` for a new subclass.

        The root is the class itself when it declares ``IS_FAMILY_ROOT``,
        otherwise the nearest ancestor that does, otherwise the class itself.
        """
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("ROOT") is not None:
            return
        # __mro__ starts with cls itself
        roots = [klass for klass in cls.__mro__ if klass.__dict__.get("IS_FAMILY_ROOT", False)]
        cls.ROOT = roots[0] if roots else cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Ensure ``unit_type`` belongs to the same family as ``cls``.

        Args:
            unit_type: The other operand's type.

        Raises:
            TypeError: If ``unit_type`` is not a unit or belongs to another family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            msg = f"Incompatible units: {cls.ROOT.__name__} and {getattr(other_root, '__name__', unit_type.__name__)}"
            raise TypeError(msg)
