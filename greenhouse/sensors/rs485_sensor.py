from __future__ import annotations

from dataclasses import dataclass
import logging

from .base import Sensor
from ..drivers.rs485_modbus import RS485ModbusRTU

logger = logging.getLogger(__name__)


@dataclass
class RegisterSpec:
    functioncode: int = 3  # 3=holding, 4=input
    address: int = 0
    count: int = 1
    scale: float = 0.1     # value = raw * scale
    signed: bool = False   # two's complement over count*16 bits


class RS485RegisterSensor(Sensor):
    def __init__(
        self,
        driver: RS485ModbusRTU,
        spec: RegisterSpec,
        sensor_id: str,
        unit: str = "",
    ):
        self._driver = driver
        self._spec = spec
        self._sensor_id = sensor_id
        self._unit = unit

    @property
    def sensor_id(self) -> str:
        return self._sensor_id

    @property
    def unit(self) -> str:
        return self._unit

    def read(self) -> float:
        regs = self._driver.read_registers(self._spec.functioncode, self._spec.address, self._spec.count)
        if not regs:
            raise RuntimeError(f"No registers returned for {self._sensor_id}")

        # Combine registers into a single value (big-endian, hi word first)
        raw = 0
        for r in regs:
            raw = (raw << 16) | r

        bits = 16 * len(regs)
        if self._spec.signed and raw >= 1 << (bits - 1):
            raw -= 1 << bits

        value = float(raw) * float(self._spec.scale)
        logger.debug("RS485 %s: regs=%s raw=%d value=%.3f", self._sensor_id, regs, raw, value)
        return value
