from __future__ import annotations
import logging

logger = logging.getLogger(__name__)


class SimulatedActuator:
    """Binary output (heater, humidifier) that only records its state."""

    def __init__(self, actuator_id: str) -> None:
        self.actuator_id = actuator_id
        self._state = False

    def get_state(self) -> bool:
        return self._state

    def set_state(self, on: bool, reason: str) -> None:
        self._state = bool(on)
        logger.info("%s set_state=%s reason=%s", self.actuator_id.upper(), "ON" if self._state else "OFF", reason)
