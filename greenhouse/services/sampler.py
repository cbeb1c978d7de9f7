from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from ..domain.alarms import AlarmCondition, AlarmTracker
from ..domain.controller import ClimateController
from ..domain.interfaces import Actuator, ReadingLog, ReadingSource
from ..domain.models import AlarmLimits, Controls, Reading, Setpoints
from ..domain.thresholds import apply_reading
from ..render.console import ConsoleRenderer
from ..render.matrix import MatrixRenderer

logger = logging.getLogger(__name__)


@dataclass
class LiveState:
    ticks: int = 0
    last_reading: Optional[Reading] = None
    setpoints: Optional[Setpoints] = None
    controls: Optional[Controls] = None
    heater_on: bool = False
    humidifier_on: bool = False
    logged: Optional[bool] = None
    alarms: List[Tuple[AlarmCondition, datetime, float]] = field(default_factory=list)


class SamplerService:
    """One reading, one evaluation, one tracker update and one render per tick."""

    def __init__(
        self,
        source: ReadingSource,
        heater: Actuator,
        humidifier: Actuator,
        log: ReadingLog,
        controller: ClimateController,
        limits: AlarmLimits,
        setpoints: Setpoints,
        sample_seconds: float,
        console: Optional[ConsoleRenderer] = None,
        matrix: Optional[MatrixRenderer] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._source = source
        self._heater = heater
        self._humidifier = humidifier
        self._log = log
        self._controller = controller
        self._limits = limits
        self._sample_seconds = sample_seconds
        self._console = console
        self._matrix = matrix
        self._sleep = sleep

        self.tracker = AlarmTracker()
        self.live = LiveState(setpoints=setpoints)

    @property
    def setpoints(self) -> Setpoints:
        assert self.live.setpoints is not None
        return self.live.setpoints

    def tick(self) -> LiveState:
        self.live.ticks += 1

        # 1) Read sensors
        try:
            reading = self._source.get_reading()
        except Exception as e:
            logger.exception("Sensor read FAILED, skipping tick: %s", e)
            return self.live
        self.live.last_reading = reading
        logger.info(
            "Reading: T=%.1f H=%.1f P=%.1f",
            reading.temperature, reading.humidity, reading.pressure,
        )

        # 2) Persist reading (failures reported, never retried)
        self.live.logged = self._log.append(reading)

        self.live.controls = None
        try:
            # 3) Decide and switch outputs only on change
            controls = self._controller.decide(reading, self.setpoints)
            self.live.controls = controls
            self.live.heater_on = self._switch(self._heater, controls.heater, reading)
            self.live.humidifier_on = self._switch(self._humidifier, controls.humidifier, reading)
        except Exception as e:
            logger.exception("Control step error: %s", e)

        # 4) Alarms
        apply_reading(self.tracker, reading, self._limits)
        self.live.alarms = self.tracker.snapshot()

        # 5) Render
        try:
            if self._matrix is not None:
                self._matrix.render(reading, self.setpoints)
            if self._console is not None:
                self._console.tick(reading, self.setpoints, self.live.controls, self.tracker)
        except Exception as e:
            logger.exception("Render error: %s", e)

        return self.live

    def _switch(self, actuator: Actuator, desired: bool, reading: Reading) -> bool:
        current = actuator.get_state()
        if desired != current:
            actuator.set_state(desired, f"T={reading.temperature:.1f} H={reading.humidity:.1f}")
        return desired

    def run(self, max_ticks: Optional[int] = None) -> None:
        logger.info("Control loop started (sample_seconds=%s)", self._sample_seconds)

        done = 0
        while max_ticks is None or done < max_ticks:
            self.tick()
            done += 1
            if max_ticks is not None and done >= max_ticks:
                break
            self._sleep(self._sample_seconds)

        logger.info("Control loop stopped after %d ticks", done)

    def switch_off(self) -> None:
        for actuator in (self._heater, self._humidifier):
            if actuator.get_state():
                actuator.set_state(False, "shutdown")
        self.live.heater_on = False
        self.live.humidifier_on = False
