"""Typed physical quantities used across the fleet engine.

Quantities are floats stored in SI, grouped into families that refuse to be
mixed:

    - Length: Meter (root), Kilometer
    - Time: Second (root), Minute, Hour, ClockTime
    - Velocity: MeterPerSecond (root), KilometersPerHour

Example:
    >>> from swarmsim.unit import Hour, KilometersPerHour, Second
    >>> float(Hour(2))
    7200.0
    >>> Second(30) + Second(15)
    45 s (= 45 SI)
"""

from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat
from .unit_time import ClockTime, Hour, Minute, Second, Time
from .unit_velocity import KilometersPerHour, MeterPerSecond, Velocity

__all__ = [
    "Unit",
    "UnitFloat",
    "Meter",
    "Kilometer",
    "Length",
    "Second",
    "Minute",
    "Hour",
    "ClockTime",
    "Time",
    "MeterPerSecond",
    "KilometersPerHour",
    "Velocity",
]
