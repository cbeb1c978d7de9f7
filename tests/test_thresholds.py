"""Threshold evaluation and the per-tick alarm update."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

import greenhouse.domain.alarms as alarms_module
from greenhouse.domain.alarms import AlarmCondition, AlarmTracker
from greenhouse.domain.models import AlarmLimits, Reading
from greenhouse.domain.thresholds import apply_reading, evaluate

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

LIMITS = AlarmLimits(
    high_temp=30,
    low_temp=10,
    high_humidity=70,
    low_humidity=25,
    high_pressure=1016,
    low_pressure=985,
)


def _reading(temperature: float, humidity: float, pressure: float, seconds: int = 0) -> Reading:
    return Reading(
        ts_utc=T0 + timedelta(seconds=seconds),
        temperature=temperature,
        humidity=humidity,
        pressure=pressure,
    )


def test_nominal_reading_triggers_nothing() -> None:
    assert evaluate(_reading(20, 50, 1000), LIMITS) == {}


def test_scenario_a_high_temperature_only() -> None:
    tracker = AlarmTracker()

    apply_reading(tracker, _reading(32, 50, 1000), LIMITS)

    assert tracker.conditions() == [AlarmCondition.HIGH_TEMPERATURE]
    assert tracker.get(AlarmCondition.HIGH_TEMPERATURE).value == 32


def test_scenario_b_multiple_simultaneous_alarms() -> None:
    tracker = AlarmTracker()

    apply_reading(tracker, _reading(5, 80, 1020), LIMITS)

    assert tracker.conditions() == [
        AlarmCondition.LOW_TEMPERATURE,
        AlarmCondition.HIGH_HUMIDITY,
        AlarmCondition.HIGH_PRESSURE,
    ]
    assert [a.value for a in tracker] == [5, 80, 1020]


def test_scenario_c_all_alarms_clear() -> None:
    tracker = AlarmTracker()
    apply_reading(tracker, _reading(5, 80, 1020), LIMITS)

    apply_reading(tracker, _reading(20, 50, 1000, seconds=2), LIMITS)

    assert len(tracker) == 0


@pytest.mark.parametrize(
    "reading, expected",
    [
        (_reading(30, 50, 1000), AlarmCondition.HIGH_TEMPERATURE),
        (_reading(10, 50, 1000), AlarmCondition.LOW_TEMPERATURE),
        (_reading(20, 70, 1000), AlarmCondition.HIGH_HUMIDITY),
        (_reading(20, 25, 1000), AlarmCondition.LOW_HUMIDITY),
        (_reading(20, 50, 1016), AlarmCondition.HIGH_PRESSURE),
        (_reading(20, 50, 985), AlarmCondition.LOW_PRESSURE),
    ],
)
def test_scenario_d_boundaries_are_inclusive(reading: Reading, expected: AlarmCondition) -> None:
    assert list(evaluate(reading, LIMITS)) == [expected]


def test_verdicts_follow_canonical_order() -> None:
    limits = AlarmLimits(
        high_temp=20, low_temp=20, high_humidity=50, low_humidity=50, high_pressure=1000, low_pressure=1000
    )

    verdicts = evaluate(_reading(20, 50, 1000), limits)

    assert list(verdicts) == [
        AlarmCondition.HIGH_TEMPERATURE,
        AlarmCondition.LOW_TEMPERATURE,
        AlarmCondition.HIGH_HUMIDITY,
        AlarmCondition.LOW_HUMIDITY,
        AlarmCondition.HIGH_PRESSURE,
        AlarmCondition.LOW_PRESSURE,
    ]


def test_unchanged_reading_is_a_fixed_point() -> None:
    tracker = AlarmTracker()
    reading = _reading(5, 80, 1020)

    first = apply_reading(tracker, reading, LIMITS)
    before = tracker.snapshot()
    second = apply_reading(tracker, reading, LIMITS)

    assert first == second
    assert tracker.snapshot() == before


def test_still_active_alarm_takes_latest_reading() -> None:
    tracker = AlarmTracker()

    apply_reading(tracker, _reading(31, 50, 1000), LIMITS)
    apply_reading(tracker, _reading(34, 50, 1000, seconds=2), LIMITS)

    assert tracker.snapshot() == [
        (AlarmCondition.HIGH_TEMPERATURE, T0 + timedelta(seconds=2), 34),
    ]


def test_storage_failure_skips_only_new_conditions(monkeypatch) -> None:
    tracker = AlarmTracker()
    apply_reading(tracker, _reading(32, 50, 1000), LIMITS)

    def _exhausted(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(alarms_module, "ActiveAlarm", _exhausted)
    apply_reading(tracker, _reading(33, 10, 1000, seconds=2), LIMITS)

    assert tracker.snapshot() == [
        (AlarmCondition.HIGH_TEMPERATURE, T0 + timedelta(seconds=2), 33),
    ]

    monkeypatch.undo()
    apply_reading(tracker, _reading(33, 10, 1000, seconds=4), LIMITS)

    assert tracker.conditions() == [AlarmCondition.HIGH_TEMPERATURE, AlarmCondition.LOW_HUMIDITY]
