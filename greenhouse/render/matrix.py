from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.interfaces import Color, Display
from ..domain.models import Reading, SensorRange, Setpoints
from ..drivers.display_sim import BLACK, GREEN, MAGENTA

logger = logging.getLogger(__name__)

NUM_POINTS = 8
TEMPERATURE_BAR = 7
HUMIDITY_BAR = 5
PRESSURE_BAR = 3


@dataclass(frozen=True)
class GaugeRanges:
    temperature: SensorRange
    humidity: SensorRange
    pressure: SensorRange


def bar_level(value: float, value_range: SensorRange) -> int:
    """Index of the top lit pixel for ``value``; may fall outside 0..7."""
    return int(NUM_POINTS * (value_range.fraction(value) + 0.05) - 1.0)


class MatrixRenderer:
    """Vertical bar gauges for the readings, with the setpoints marked in magenta."""

    def __init__(self, display: Display, ranges: GaugeRanges) -> None:
        self._display = display
        self._ranges = ranges

    def render(self, reading: Reading, setpoints: Optional[Setpoints]) -> None:
        self._display.clear()

        self._bar(TEMPERATURE_BAR, GREEN, bar_level(reading.temperature, self._ranges.temperature))
        self._bar(HUMIDITY_BAR, GREEN, bar_level(reading.humidity, self._ranges.humidity))
        self._bar(PRESSURE_BAR, GREEN, bar_level(reading.pressure, self._ranges.pressure))

        if setpoints is not None:
            self._marker(TEMPERATURE_BAR, bar_level(setpoints.temperature, self._ranges.temperature))
            self._marker(HUMIDITY_BAR, bar_level(setpoints.humidity, self._ranges.humidity))

    def _bar(self, bar: int, color: Color, level: int) -> None:
        level = min(NUM_POINTS - 1, max(0, level))
        for i in range(NUM_POINTS):
            self._display.set_pixel(bar, i, color if i <= level else BLACK)

    def _marker(self, bar: int, level: int) -> None:
        if 0 <= level < NUM_POINTS:
            self._display.set_pixel(bar, level, MAGENTA)
        else:
            logger.debug("setpoint marker off-screen on bar %d (level=%d)", bar, level)
