from __future__ import annotations
import logging
import struct
from pathlib import Path
from typing import Optional, Union

from ..core.timeutil import format_ctime, to_local
from ..domain.models import Reading, Setpoints

logger = logging.getLogger(__name__)

# Two float32: temperature, humidity
SETPOINT_RECORD = struct.Struct("<ff")

# ctime separators replaced with commas: "Thu,Aug,10,14:22:01,2023"
_CTIME_FIELD_BREAKS = (3, 7, 10, 19)


def format_log_line(reading: Reading) -> str:
    stamp = list(format_ctime(to_local(reading.ts_utc)))
    for i in _CTIME_FIELD_BREAKS:
        stamp[i] = ","
    return (
        f"{''.join(stamp)},{reading.temperature:5.1f},"
        f"{reading.humidity:5.1f},{reading.pressure:6.1f}"
    )


class ReadingLog:
    """Append-only text log of readings, one comma-separated line per tick."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    def append(self, reading: Reading) -> bool:
        try:
            with self._path.open("a", encoding="ascii") as fh:
                fh.write(format_log_line(reading) + "\n")
        except OSError as e:
            logger.warning("Failed to append reading to %s: %s", self._path, e)
            return False
        return True


class SetpointStore:
    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    def save(self, setpoints: Setpoints) -> bool:
        try:
            self._path.write_bytes(SETPOINT_RECORD.pack(setpoints.temperature, setpoints.humidity))
        except OSError as e:
            logger.warning("Failed to save setpoints to %s: %s", self._path, e)
            return False
        return True

    def load(self) -> Optional[Setpoints]:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            logger.info("No setpoints file at %s", self._path)
            return None
        except OSError as e:
            logger.warning("Failed to read setpoints from %s: %s", self._path, e)
            return None

        if len(data) < SETPOINT_RECORD.size:
            logger.warning("Setpoints file %s is truncated (%d bytes)", self._path, len(data))
            return None

        temperature, humidity = SETPOINT_RECORD.unpack_from(data)
        return Setpoints(temperature=temperature, humidity=humidity)

    def load_or_default(self, defaults: Setpoints) -> Setpoints:
        stored = self.load()
        # A zero temperature is the "never configured" record
        if stored is not None and stored.temperature != 0:
            return stored

        logger.info(
            "Using default setpoints T=%.1f H=%.1f", defaults.temperature, defaults.humidity
        )
        self.save(defaults)
        return defaults
