from __future__ import annotations

from abc import ABC, abstractmethod


class Sensor(ABC):
    """Single-quantity sensor (temperature, humidity or pressure)."""

    @property
    @abstractmethod
    def sensor_id(self) -> str:
        ...

    @property
    def unit(self) -> str:
        return ""

    @abstractmethod
    def read(self) -> float:
        """Return a scalar reading. Raise on failure."""
        ...
