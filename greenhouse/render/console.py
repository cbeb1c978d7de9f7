from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from ..core.timeutil import format_ctime, to_local
from ..domain.alarms import ActiveAlarm, AlarmCondition
from ..domain.models import Controls, Reading, Setpoints


def _on_off(state: bool) -> str:
    return "ON" if state else "OFF"


class ConsoleRenderer:
    def __init__(self, operator_name: str, serial: int = 0, stream: Optional[TextIO] = None) -> None:
        self._operator = operator_name
        self._serial = serial
        self._stream = stream if stream is not None else sys.stdout

    def _line(self, text: str = "") -> None:
        self._stream.write(text + "\n")

    def header(self) -> None:
        self._line(f"{self._operator}'s Greenhouse Controller")

    def readings(self, reading: Reading) -> None:
        self._line()
        self._line(f"Unit: {self._serial:X} {format_ctime(to_local(reading.ts_utc))}")
        self._line(
            f"Readings\tT: {reading.temperature:5.1f}C\t"
            f"H: {reading.humidity:5.1f}%\tP: {reading.pressure:6.1f}mb"
        )

    def targets(self, setpoints: Setpoints) -> None:
        self._line(f"Setpoints\tT: {setpoints.temperature:.1f}C\tH: {setpoints.humidity:.1f}%")

    def controls(self, controls: Controls) -> None:
        self._line(f"Controls\tHeater: {_on_off(controls.heater)}\tHumidifier: {_on_off(controls.humidifier)}")

    def alarms(self, active: Iterable[ActiveAlarm]) -> None:
        self._line()
        self._line("Alarms")
        shown = 0
        for alarm in active:
            self._line(
                f"{alarm.condition.label} {format_ctime(to_local(alarm.observed_at))} {alarm.value:.1f}"
            )
            shown += 1
        if not shown:
            self._line(AlarmCondition.NONE.label)

    def tick(
        self,
        reading: Reading,
        setpoints: Setpoints,
        controls: Optional[Controls],
        active: Iterable[ActiveAlarm],
    ) -> None:
        self.readings(reading)
        self.targets(setpoints)
        if controls is not None:
            self.controls(controls)
        self.alarms(active)
        self._stream.flush()
