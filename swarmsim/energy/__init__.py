"""Energy bookkeeping of mobile units.

The reserve itself lives here; how much a given move costs depends on the
unit's medium and is computed by :mod:`swarmsim.vehicles.consumption`.
"""

from .autonomy import AutonomyReserve

__all__ = ["AutonomyReserve"]
