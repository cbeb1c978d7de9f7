from __future__ import annotations

from datetime import datetime
from typing import Callable

from .base import Sensor
from ..core.timeutil import now_utc
from ..domain.models import Reading


class EnvironmentSource:
    """Combines the three quantity sensors into one timestamped ``Reading``."""

    def __init__(
        self,
        temperature: Sensor,
        humidity: Sensor,
        pressure: Sensor,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.pressure = pressure
        self._clock = clock

    def get_reading(self) -> Reading:
        return Reading(
            ts_utc=self._clock(),
            temperature=float(self.temperature.read()),
            humidity=float(self.humidity.read()),
            pressure=float(self.pressure.read()),
        )
