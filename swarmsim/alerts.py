"""Best-effort notification channel for critical unit events.

Critical events (autonomy exhaustion, collisions, containment breaches,
rejected moves) never raise. They are published as :class:`Alert` records on
an :class:`AlertChannel`, logged, kept in a bounded history and handed to
any subscriber. A subscriber that raises is logged and skipped so a faulty
listener cannot abort a simulation tick.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
import logging

from swarmsim.config import ALERT_HISTORY

logger = logging.getLogger(__name__)


class AlertCode(Enum):
    """Kinds of critical events raised by units and groups."""

    CRITICAL_AUTONOMY = auto()
    SYSTEM_FAILURE = auto()
    INVALID_ALTITUDE = auto()
    INVALID_DEPTH = auto()
    RESTRICTED_ZONE = auto()
    VEHICLE_COLLISION = auto()


# Codes raised only by a failure. CRITICAL_AUTONOMY also reports a low reserve,
# so it stays at warning level even when the reserve runs out.
_FATAL = frozenset({AlertCode.SYSTEM_FAILURE, AlertCode.VEHICLE_COLLISION})


@dataclass(frozen=True)
class Alert:
    """A single critical event.

    Attributes:
        code (AlertCode): Kind of event.
        source (str): Identifier of the unit or group raising it.
        message (str): Human readable detail.
    """

    code: AlertCode
    source: str
    message: str

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.source}: {self.message}"


AlertListener = Callable[[Alert], None]


class AlertChannel:
    """Fan-out of alerts to subscribers, with a bounded history.

    Attributes:
        history (deque[Alert]): Most recent alerts, oldest first.
    """

    def __init__(self, maxlen: int = ALERT_HISTORY):
        self.history: deque[Alert] = deque(maxlen=maxlen)
        self._listeners: list[AlertListener] = []

    def subscribe(self, listener: AlertListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: AlertListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, alert: Alert) -> None:
        """Record ``alert`` and deliver it to every subscriber.

        Args:
            alert: The event to publish.
        """
        if alert.code in _FATAL:
            logger.error("%s", alert)
        else:
            logger.warning("%s", alert)
        self.history.append(alert)
        for listener in list(self._listeners):
            try:
                listener(alert)
            except Exception:
                logger.exception("Alert listener %r failed on %s", listener, alert.code.name)

    def codes(self) -> list[AlertCode]:
        return [alert.code for alert in self.history]

    def clear(self) -> None:
        self.history.clear()

    def __len__(self) -> int:
        return len(self.history)
