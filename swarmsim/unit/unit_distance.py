"""Lengths: coordinates, radii, ranges and margins of the operating area."""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length in meters (SI), the unit of every engine coordinate."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length in kilometers. Consumption rates are expressed per kilometer."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
