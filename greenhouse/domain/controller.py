from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional
from .models import Controls, Reading, Setpoints

logger = logging.getLogger(__name__)


@dataclass
class ControllerState:
    last_controls: Optional[Controls] = None
    last_setpoints: Optional[Setpoints] = None


class ClimateController:
    def __init__(self) -> None:
        self.state = ControllerState()

    def decide(self, reading: Reading, setpoints: Setpoints) -> Controls:
        self.state.last_setpoints = setpoints

        controls = Controls(
            heater=reading.temperature < setpoints.temperature,
            humidifier=reading.humidity < setpoints.humidity,
        )

        logger.info(
            "decide: T=%.1f/%.1f H=%.1f/%.1f → heater=%s humidifier=%s",
            reading.temperature, setpoints.temperature,
            reading.humidity, setpoints.humidity,
            "ON" if controls.heater else "OFF",
            "ON" if controls.humidifier else "OFF",
        )
        self.state.last_controls = controls
        return controls
