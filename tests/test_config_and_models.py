from __future__ import annotations

import pytest
from pydantic import ValidationError

from greenhouse.core.config import Settings
from greenhouse.core.errors import ConfigurationError
from greenhouse.domain.models import AlarmLimits, SensorRange


def _limits(**overrides: float) -> AlarmLimits:
    values = dict(
        high_temp=30,
        low_temp=10,
        high_humidity=70,
        low_humidity=25,
        high_pressure=1016,
        low_pressure=985,
    )
    values.update(overrides)
    return AlarmLimits(**values)


def test_defaults_match_controller_constants() -> None:
    cfg = Settings(_env_file=None)

    assert cfg.alarm_limits() == _limits()
    assert cfg.default_setpoints().temperature == 25.0
    assert cfg.default_setpoints().humidity == 55.0
    assert cfg.sample_seconds == 2.0
    assert (cfg.pressure_range().lower, cfg.pressure_range().upper) == (975.0, 1016.0)


@pytest.mark.parametrize(
    "overrides",
    [
        {"low_temp": 31},
        {"low_humidity": 80},
        {"low_pressure": 1020},
    ],
)
def test_low_limit_above_high_limit_is_rejected(overrides: dict) -> None:
    with pytest.raises(ConfigurationError):
        _limits(**overrides)


def test_equal_limits_are_accepted() -> None:
    limits = _limits(low_temp=30)

    assert limits.low_temp == limits.high_temp


def test_inconsistent_settings_fail_at_load(monkeypatch) -> None:
    monkeypatch.setenv("LOW_TEMP", "40")

    with pytest.raises(ValidationError) as excinfo:
        Settings(_env_file=None)

    assert "Low temperature alarm limit" in str(excinfo.value)


def test_environment_overrides_apply(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HIGH_TEMP", "35.5")
    monkeypatch.setenv("SAMPLE_SECONDS", "5")
    monkeypatch.setenv("SETPOINTS_PATH", str(tmp_path / "sp.dat"))
    monkeypatch.setenv("SENSOR_MODE", "rs485")

    cfg = Settings(_env_file=None)

    assert cfg.alarm_limits().high_temp == 35.5
    assert cfg.sample_seconds == 5.0
    assert cfg.setpoints_path == str(tmp_path / "sp.dat")
    assert cfg.sensor_mode == "rs485"


def test_empty_sensor_range_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        SensorRange("humidity", 100, 0)


def test_sensor_range_fraction_and_clamp() -> None:
    r = SensorRange("temperature", -10, 50)

    assert r.fraction(-10) == 0.0
    assert r.fraction(50) == 1.0
    assert r.fraction(20) == 0.5
    assert r.clamp(99) == 50
    assert r.clamp(-99) == -10
