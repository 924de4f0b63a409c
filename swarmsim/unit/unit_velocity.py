"""Speeds.

The engine integrates in meters per second; performance envelopes may be
declared in either unit::

    >>> float(KilometersPerHour(90))
    25.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class MeterPerSecond(UnitFloat):
    """Speed in meters per second (SI)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m/s"


class KilometersPerHour(MeterPerSecond):
    """Speed in kilometers per hour."""

    SCALE_TO_SI = 1000.0 / 3600.0
    SYMBOL = "km/h"


Velocity = MeterPerSecond | KilometersPerHour
