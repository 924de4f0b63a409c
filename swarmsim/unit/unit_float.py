"""Float-backed quantities stored in SI.

A ``UnitFloat`` is a ``float`` holding the SI value of the quantity, so the
engine can hand it to ``math`` and numpy directly, while construction and
display use the unit's own scale::

    >>> speed = KilometersPerHour(72)
    >>> float(speed)
    20.0
    >>> str(speed)
    '72.0 km/h'
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Quantity stored in SI and combined only within its family.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor from the native scale to SI.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Build a quantity from a value that is already in SI."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Express the quantity in the native scale of ``unit_type``.

        Args:
            unit_type: Target unit of the same family.

        Returns:
            float: Value in the target scale.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-tag the quantity as ``unit_type`` without changing its SI value."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    __radd__ = __add__

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __mul__(self, k: Number) -> UnitFloat:
        if isinstance(k, Unit):
            msg = "A quantity can only be scaled by a plain number"
            raise TypeError(msg)
        return type(self).from_si(float(self) * float(k))

    __rmul__ = __mul__

    def __truediv__(self, k: Number) -> UnitFloat | float:
        """Divide by a number, or by a same-family quantity to get a ratio."""
        if isinstance(k, Unit):
            self._check_same_root(type(k))
            return float(self) / float(k)
        return type(self).from_si(float(self) / float(k))

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    # -------------------------------- Comparison --------------------------------
    def __lt__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, int | float):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return float.__hash__(self)

    def __str__(self) -> str:
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
