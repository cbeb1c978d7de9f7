from __future__ import annotations
import logging
import operator
from typing import Callable, Dict, Tuple

from ..core.errors import AlarmStorageError
from .alarms import CANONICAL_ORDER, AlarmCondition, AlarmTracker
from .models import AlarmLimits, Reading

logger = logging.getLogger(__name__)


# condition -> (reading field, limit field, comparison); boundaries are inclusive
_RULES: Dict[AlarmCondition, Tuple[str, str, Callable[[float, float], bool]]] = {
    AlarmCondition.HIGH_TEMPERATURE: ("temperature", "high_temp", operator.ge),
    AlarmCondition.LOW_TEMPERATURE: ("temperature", "low_temp", operator.le),
    AlarmCondition.HIGH_HUMIDITY: ("humidity", "high_humidity", operator.ge),
    AlarmCondition.LOW_HUMIDITY: ("humidity", "low_humidity", operator.le),
    AlarmCondition.HIGH_PRESSURE: ("pressure", "high_pressure", operator.ge),
    AlarmCondition.LOW_PRESSURE: ("pressure", "low_pressure", operator.le),
}


def measured_value(reading: Reading, condition: AlarmCondition) -> float:
    field, _, _ = _RULES[condition]
    return getattr(reading, field)


def evaluate(reading: Reading, limits: AlarmLimits) -> Dict[AlarmCondition, float]:
    """Conditions currently true for ``reading``, with the offending value, in canonical order."""
    verdicts: Dict[AlarmCondition, float] = {}
    for condition in CANONICAL_ORDER:
        field, limit_field, compare = _RULES[condition]
        value = getattr(reading, field)
        if compare(value, getattr(limits, limit_field)):
            verdicts[condition] = value
    return verdicts


def apply_reading(
    tracker: AlarmTracker, reading: Reading, limits: AlarmLimits
) -> Dict[AlarmCondition, float]:
    verdicts = evaluate(reading, limits)
    for condition in CANONICAL_ORDER:
        try:
            tracker.apply(
                condition,
                condition in verdicts,
                reading.ts_utc,
                verdicts.get(condition, measured_value(reading, condition)),
            )
        except AlarmStorageError as e:
            # Retried on the next tick
            logger.warning("Skipping alarm update for %s: %s", condition.label, e)
    return verdicts
