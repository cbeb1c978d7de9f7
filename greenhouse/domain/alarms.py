"""Active alarm conditions.

The tracker keeps one entry per condition that was true on its most recent
evaluation. Entries are kept in the order they were first raised: an alarm
that stays active has its entry replaced and keeps its position, and clearing
one alarm leaves the order of the others untouched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from ..core.errors import AlarmStorageError

logger = logging.getLogger(__name__)


class AlarmCondition(Enum):
    NONE = 0
    HIGH_TEMPERATURE = 1
    LOW_TEMPERATURE = 2
    HIGH_HUMIDITY = 3
    LOW_HUMIDITY = 4
    HIGH_PRESSURE = 5
    LOW_PRESSURE = 6

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    AlarmCondition.NONE: "No Alarms",
    AlarmCondition.HIGH_TEMPERATURE: "High Temperature",
    AlarmCondition.LOW_TEMPERATURE: "Low Temperature",
    AlarmCondition.HIGH_HUMIDITY: "High Humidity",
    AlarmCondition.LOW_HUMIDITY: "Low Humidity",
    AlarmCondition.HIGH_PRESSURE: "High Pressure",
    AlarmCondition.LOW_PRESSURE: "Low Pressure",
}

# Order in which conditions are evaluated and applied each tick
CANONICAL_ORDER: Tuple[AlarmCondition, ...] = (
    AlarmCondition.HIGH_TEMPERATURE,
    AlarmCondition.LOW_TEMPERATURE,
    AlarmCondition.HIGH_HUMIDITY,
    AlarmCondition.LOW_HUMIDITY,
    AlarmCondition.HIGH_PRESSURE,
    AlarmCondition.LOW_PRESSURE,
)


@dataclass(frozen=True)
class ActiveAlarm:
    condition: AlarmCondition
    observed_at: datetime
    value: float


class AlarmTracker:
    def __init__(self) -> None:
        self._active: Dict[AlarmCondition, ActiveAlarm] = {}

    def apply(
        self,
        condition: AlarmCondition,
        is_active: bool,
        observed_at: datetime,
        value: float,
    ) -> None:
        """Upsert ``condition`` when active, remove it when not.

        Raises ``AlarmStorageError`` if a new alarm cannot be stored; the
        tracker is left exactly as it was.
        """
        if condition is AlarmCondition.NONE:
            raise ValueError("AlarmCondition.NONE cannot be tracked")

        current = self._active.get(condition)

        if not is_active:
            if current is not None:
                del self._active[condition]
                logger.info("alarm cleared: %s", condition.label)
            return

        if current is not None:
            # Reassigning an existing key keeps its position
            self._active[condition] = replace(current, observed_at=observed_at, value=value)
            return

        try:
            self._active[condition] = ActiveAlarm(condition, observed_at, value)
        except MemoryError as e:
            raise AlarmStorageError(f"Cannot store alarm {condition.label}") from e
        logger.info("alarm raised: %s value=%.1f", condition.label, value)

    def get(self, condition: AlarmCondition) -> Optional[ActiveAlarm]:
        return self._active.get(condition)

    def conditions(self) -> List[AlarmCondition]:
        return list(self._active)

    def snapshot(self) -> List[Tuple[AlarmCondition, datetime, float]]:
        return [(a.condition, a.observed_at, a.value) for a in self._active.values()]

    def __iter__(self) -> Iterator[ActiveAlarm]:
        return iter(list(self._active.values()))

    def __len__(self) -> int:
        return len(self._active)

    def __contains__(self, condition: object) -> bool:
        return condition in self._active

    def __bool__(self) -> bool:
        return bool(self._active)
