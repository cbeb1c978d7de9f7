from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.models import AlarmLimits, SensorRange, Setpoints


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Greenhouse Controller"
    operator_name: str = "Operator"
    timezone: Optional[str] = None  # None = host local time

    # Sampling
    sample_seconds: float = 2.0

    # Logging
    log_level: str = "INFO"
    log_file: str = "greenhouse.log"

    # Storage
    readings_log_path: str = Field(default="ghdata.txt")
    setpoints_path: str = Field(default="setpoints.dat")

    # Used when setpoints.dat is missing or unreadable
    default_target_temperature: float = 25.0
    default_target_humidity: float = 55.0

    # Alarm limits (inclusive)
    high_temp: float = 30.0
    low_temp: float = 10.0
    high_humidity: float = 70.0
    low_humidity: float = 25.0
    high_pressure: float = 1016.0
    low_pressure: float = 985.0

    # Sensor ranges: simulator bounds and gauge scales
    temperature_min: float = -10.0
    temperature_max: float = 50.0
    humidity_min: float = 0.0
    humidity_max: float = 100.0
    pressure_min: float = 975.0
    pressure_max: float = 1016.0

    # Sensor mode: "sim" or "rs485"
    sensor_mode: str = "sim"
    sim_pattern: str = "random"  # random|sine|step|ramp
    # Fixed simulator outputs, e.g. to hold a value past an alarm limit
    sim_temperature: Optional[float] = None
    sim_humidity: Optional[float] = None
    sim_pressure: Optional[float] = None

    # RS485 / Modbus RTU
    rs485_port: str = "/dev/ttyUSB0"      # Windows example: "COM3"
    rs485_baudrate: int = 9600
    rs485_slave_id: int = 1

    # Register map (one register per quantity)
    register_functioncode: int = 3        # 3=holding, 4=input
    temperature_register_address: int = 0
    temperature_register_scale: float = 0.1
    temperature_register_signed: bool = True
    humidity_register_address: int = 1
    humidity_register_scale: float = 0.1
    pressure_register_address: int = 2
    pressure_register_scale: float = 0.1

    # 8x8 bar-gauge view
    led_matrix: bool = True

    @model_validator(mode="after")
    def check_consistency(self) -> "Settings":
        # Raises ConfigurationError (a ValueError) so bad limits fail at load time
        self.alarm_limits()
        self.temperature_range()
        self.humidity_range()
        self.pressure_range()
        return self

    def alarm_limits(self) -> AlarmLimits:
        return AlarmLimits(
            high_temp=self.high_temp,
            low_temp=self.low_temp,
            high_humidity=self.high_humidity,
            low_humidity=self.low_humidity,
            high_pressure=self.high_pressure,
            low_pressure=self.low_pressure,
        )

    def default_setpoints(self) -> Setpoints:
        return Setpoints(
            temperature=self.default_target_temperature,
            humidity=self.default_target_humidity,
        )

    def temperature_range(self) -> SensorRange:
        return SensorRange("temperature", self.temperature_min, self.temperature_max)

    def humidity_range(self) -> SensorRange:
        return SensorRange("humidity", self.humidity_min, self.humidity_max)

    def pressure_range(self) -> SensorRange:
        return SensorRange("pressure", self.pressure_min, self.pressure_max)


settings = Settings()
