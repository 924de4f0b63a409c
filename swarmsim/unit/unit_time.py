"""Durations and simulation clock readings.

Classes:
    Second: Family root, SI duration.
    Minute: 60 seconds.
    Hour: 3600 seconds, used for the informational endurance of a unit.
    ClockTime: Reading of the simulation clock, shown as ``HH:MM:SS.sss``.

Type Aliases:
    Time: Any of the above.
"""

from __future__ import annotations

from math import isfinite

from .unit_float import UnitFloat


class Second(UnitFloat):
    """Duration in seconds (SI)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class Minute(Second):
    """Duration in minutes."""

    SCALE_TO_SI = 60.0
    SYMBOL = "min"


class Hour(Second):
    """Duration in hours."""

    SCALE_TO_SI = 3600.0
    SYMBOL = "h"


class ClockTime(Second):
    """Simulation clock reading, counted in seconds since the clock started.

    Example:
        >>> str(ClockTime(3725.5))
        '01:02:05.500'
    """

    SCALE_TO_SI = 1.0

    @classmethod
    def from_str(cls, time_str: str) -> ClockTime:
        """Parse a ``HH:MM:SS`` string.

        Args:
            time_str: Clock reading such as ``"00:10:30"``.

        Returns:
            ClockTime: The parsed reading.
        """
        h, m, s = map(float, time_str.split(":"))
        return cls(h * 3600 + m * 60 + s)

    def __str__(self) -> str:
        if not isfinite(float(self)):
            return "--:--:--"
        h, r = divmod(float(self), 3600)
        m, s = divmod(r, 60)
        return f"{int(h):02d}:{int(m):02d}:{s:06.3f}"

    def __repr__(self) -> str:
        return f"{self} (= {float(self):g} {self.ROOT.SYMBOL})"


Time = Second | Minute | Hour | ClockTime
