from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .base import Sensor
from ..domain.models import SensorRange


@dataclass
class PatternConfig:
    type: str = "random"   # random|sine|step|ramp
    period_s: float = 600
    noise: float = 0.0


class SimulatedSensor(Sensor):
    """Pseudo-random or patterned values, always within the configured range."""

    def __init__(
        self,
        sensor_id: str,
        unit: str,
        value_range: SensorRange,
        pattern: Optional[PatternConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ):
        self._sensor_id = sensor_id
        self._unit = unit
        self._range = value_range
        self._pattern = pattern or PatternConfig()
        self._rng = rng or random.Random()
        self._clock = clock
        self._manual_value: Optional[float] = None

    @property
    def sensor_id(self) -> str:
        return self._sensor_id

    @property
    def unit(self) -> str:
        return self._unit

    def set_manual(self, value: Optional[float]) -> None:
        """Pin the output to ``value``; ``None`` returns to the pattern."""
        self._manual_value = None if value is None else float(value)

    def read(self) -> float:
        if self._manual_value is not None:
            return self._manual_value

        cfg = self._pattern
        lo, hi = self._range.lower, self._range.upper
        mid = (lo + hi) / 2.0
        amplitude = (hi - lo) / 2.0
        t = self._clock()

        if cfg.type == "sine":
            phase = (t % cfg.period_s) / cfg.period_s * 2.0 * math.pi
            v = mid + amplitude * math.sin(phase)

        elif cfg.type == "step":
            half = cfg.period_s / 2.0
            v = hi if (t % cfg.period_s) < half else lo

        elif cfg.type == "ramp":
            frac = (t % cfg.period_s) / cfg.period_s
            v = lo + (hi - lo) * frac

        elif cfg.type == "random":
            v = self._rng.uniform(lo, hi)

        else:
            v = mid

        if cfg.noise > 0:
            v += self._rng.uniform(-cfg.noise, cfg.noise)

        return float(self._range.clamp(v))
