from __future__ import annotations

import logging
from typing import Optional

from .core.config import Settings, settings
from .core.log import configure_logging
from .core.sysinfo import get_serial

from .domain.controller import ClimateController
from .drivers.actuators_sim import SimulatedActuator
from .drivers.display_sim import MatrixDisplay
from .drivers.rs485_modbus import ModbusRtuConfig, RS485ModbusRTU
from .render.console import ConsoleRenderer
from .render.matrix import GaugeRanges, MatrixRenderer
from .sensors.environment import EnvironmentSource
from .sensors.rs485_sensor import RegisterSpec, RS485RegisterSensor
from .sensors.simulated import PatternConfig, SimulatedSensor
from .services.sampler import SamplerService
from .storage.flatfile import ReadingLog, SetpointStore


logger = logging.getLogger(__name__)


def build_sensors(cfg: Settings) -> tuple[EnvironmentSource, Optional[RS485ModbusRTU]]:
    if cfg.sensor_mode.lower() == "rs485":
        driver = RS485ModbusRTU(
            ModbusRtuConfig(
                port=cfg.rs485_port,
                baudrate=cfg.rs485_baudrate,
                slave_id=cfg.rs485_slave_id,
            )
        )
        fc = cfg.register_functioncode
        source = EnvironmentSource(
            temperature=RS485RegisterSensor(
                driver,
                RegisterSpec(
                    functioncode=fc,
                    address=cfg.temperature_register_address,
                    scale=cfg.temperature_register_scale,
                    signed=cfg.temperature_register_signed,
                ),
                sensor_id="temperature_rs485",
                unit="C",
            ),
            humidity=RS485RegisterSensor(
                driver,
                RegisterSpec(functioncode=fc, address=cfg.humidity_register_address, scale=cfg.humidity_register_scale),
                sensor_id="humidity_rs485",
                unit="%",
            ),
            pressure=RS485RegisterSensor(
                driver,
                RegisterSpec(functioncode=fc, address=cfg.pressure_register_address, scale=cfg.pressure_register_scale),
                sensor_id="pressure_rs485",
                unit="mb",
            ),
        )
        return source, driver

    # default to sim
    pattern = cfg.sim_pattern.lower()
    temperature = SimulatedSensor("temperature_sim", "C", cfg.temperature_range(), PatternConfig(type=pattern))
    humidity = SimulatedSensor("humidity_sim", "%", cfg.humidity_range(), PatternConfig(type=pattern))
    pressure = SimulatedSensor("pressure_sim", "mb", cfg.pressure_range(), PatternConfig(type=pattern))
    temperature.set_manual(cfg.sim_temperature)
    humidity.set_manual(cfg.sim_humidity)
    pressure.set_manual(cfg.sim_pressure)
    return EnvironmentSource(temperature, humidity, pressure), None


def build_sampler(cfg: Settings, console: Optional[ConsoleRenderer] = None) -> tuple[SamplerService, Optional[RS485ModbusRTU]]:
    source, driver = build_sensors(cfg)

    setpoints = SetpointStore(cfg.setpoints_path).load_or_default(cfg.default_setpoints())

    matrix = None
    if cfg.led_matrix:
        matrix = MatrixRenderer(
            MatrixDisplay(),
            GaugeRanges(
                temperature=cfg.temperature_range(),
                humidity=cfg.humidity_range(),
                pressure=cfg.pressure_range(),
            ),
        )

    sampler = SamplerService(
        source=source,
        heater=SimulatedActuator("heater"),
        humidifier=SimulatedActuator("humidifier"),
        log=ReadingLog(cfg.readings_log_path),
        controller=ClimateController(),
        limits=cfg.alarm_limits(),
        setpoints=setpoints,
        sample_seconds=cfg.sample_seconds,
        console=console,
        matrix=matrix,
    )
    return sampler, driver


def main() -> None:
    configure_logging()
    logger.info("Starting %s (sensor_mode=%s)", settings.app_name, settings.sensor_mode)

    console = ConsoleRenderer(settings.operator_name, serial=get_serial())
    console.header()

    sampler, driver = build_sampler(settings, console)
    try:
        sampler.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        sampler.switch_off()
        if driver is not None:
            driver.close()
        logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
