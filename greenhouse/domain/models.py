from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

from ..core.errors import ConfigurationError


@dataclass(frozen=True)
class Reading:
    ts_utc: datetime
    temperature: float  # C
    humidity: float     # %RH
    pressure: float     # mb


@dataclass(frozen=True)
class Setpoints:
    temperature: float
    humidity: float


@dataclass(frozen=True)
class Controls:
    heater: bool
    humidifier: bool


@dataclass(frozen=True)
class AlarmLimits:
    high_temp: float
    low_temp: float
    high_humidity: float
    low_humidity: float
    high_pressure: float
    low_pressure: float

    def __post_init__(self) -> None:
        pairs = (
            ("temperature", self.low_temp, self.high_temp),
            ("humidity", self.low_humidity, self.high_humidity),
            ("pressure", self.low_pressure, self.high_pressure),
        )
        for name, low, high in pairs:
            if low > high:
                raise ConfigurationError(
                    f"Low {name} alarm limit ({low}) is above the high limit ({high})"
                )


@dataclass(frozen=True)
class SensorRange:
    name: str
    lower: float
    upper: float

    def __post_init__(self) -> None:
        if self.lower >= self.upper:
            raise ConfigurationError(
                f"Empty {self.name} range: lower={self.lower} upper={self.upper}"
            )

    def clamp(self, value: float) -> float:
        return min(self.upper, max(self.lower, value))

    def fraction(self, value: float) -> float:
        """Position of ``value`` in the range, 0.0 at ``lower`` and 1.0 at ``upper``."""
        return (value - self.lower) / (self.upper - self.lower)
