from __future__ import annotations
from typing import Protocol, Tuple, runtime_checkable
from .models import Reading

Color = Tuple[int, int, int]


@runtime_checkable
class ReadingSource(Protocol):
    def get_reading(self) -> Reading:
        ...


@runtime_checkable
class Actuator(Protocol):
    actuator_id: str

    def get_state(self) -> bool:
        ...

    def set_state(self, on: bool, reason: str) -> None:
        ...


@runtime_checkable
class Display(Protocol):
    def set_pixel(self, x: int, y: int, color: Color) -> None:
        ...

    def clear(self) -> None:
        ...


@runtime_checkable
class ReadingLog(Protocol):
    def append(self, reading: Reading) -> bool:
        ...

