"""Autonomy gauge of a mobile unit.

Battery charge and fuel are tracked the same way: a percentage of a full
reserve, always within ``[0, 100]``. The nominal endurance of the unit is kept
alongside for display.
"""

from swarmsim.config import CRITICAL_AUTONOMY, FULL_AUTONOMY
from swarmsim.unit import Time


class AutonomyReserve:
    """Remaining energy or fuel of a unit, as a percentage of a full reserve.

    Attributes:
        _endurance (Time): Nominal endurance with a full reserve.
        _percentage (float): Remaining reserve in percent.
    """

    _endurance: Time
    _percentage: float

    def __init__(self, endurance: Time, percentage: float = FULL_AUTONOMY):
        """Create a reserve.

        Args:
            endurance: Nominal endurance with a full reserve. Must be positive.
            percentage: Initial reserve in percent.

        Raises:
            ValueError: If ``endurance`` is not positive or ``percentage`` is
                outside ``[0, 100]``.
        """
        if float(endurance) <= 0.0:
            msg = f"Endurance must be positive, got {endurance}"
            raise ValueError(msg)
        if not 0.0 <= percentage <= FULL_AUTONOMY:
            msg = f"Autonomy must be within [0, {FULL_AUTONOMY}], got {percentage}"
            raise ValueError(msg)
        self._endurance = endurance
        self._percentage = float(percentage)

    @property
    def percentage(self) -> float:
        return self._percentage

    @property
    def endurance(self) -> Time:
        return self._endurance

    def consume(self, amount: float) -> float:
        """Drain ``amount`` percent, stopping at zero.

        Args:
            amount: Percentage points to drain.

        Returns:
            float: Percentage points actually drained.

        Raises:
            ValueError: If ``amount`` is negative.
        """
        if amount < 0.0:
            msg = f"Consumption cannot be negative, got {amount}"
            raise ValueError(msg)
        drained = min(amount, self._percentage)
        self._percentage -= drained
        return drained

    def drain(self) -> float:
        """Empty the reserve and return what was left."""
        return self.consume(self._percentage)

    def refill(self) -> None:
        self._percentage = FULL_AUTONOMY

    def is_empty(self) -> bool:
        return self._percentage <= 0.0

    def is_critical(self, threshold: float = CRITICAL_AUTONOMY) -> bool:
        return self._percentage < threshold

    def __str__(self) -> str:
        return f"{self._percentage:.1f}%"
