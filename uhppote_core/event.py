"""Access controller events and event indices."""

from __future__ import annotations

from dataclasses import dataclass

from .date_time import DateTime
from .serial_number import SerialNumber


def _bool(b: bool) -> str:
    return str(bool(b)).lower()


@dataclass
class Event:
    """An event recorded by a controller; index 0 means 'no event'."""

    serial_number: SerialNumber = SerialNumber(0)
    index: int = 0
    event_type: int = 0
    granted: bool = False
    door: int = 0
    direction: int = 0
    card_number: int = 0
    timestamp: DateTime = DateTime()
    reason: int = 0

    def is_zero(self) -> bool:
        return self.index == 0

    def __str__(self) -> str:
        if self.is_zero():
            return ""
        return (
            f"{SerialNumber(self.serial_number)} {self.index:<6} {self.timestamp} "
            f"{self.card_number:<12} {self.door:<1} {_bool(self.granted):<5} {self.reason}"
        )


@dataclass
class EventIndex:
    """A controller's event index."""

    serial_number: SerialNumber = SerialNumber(0)
    index: int = 0

    def __str__(self) -> str:
        return f"{SerialNumber(self.serial_number)} {self.index}"


@dataclass
class EventIndexResult:
    """The outcome of setting a controller's event index."""

    serial_number: SerialNumber = SerialNumber(0)
    index: int = 0
    changed: bool = False

    def __str__(self) -> str:
        return f"{SerialNumber(self.serial_number)} {self.index:<8} {_bool(self.changed)}"