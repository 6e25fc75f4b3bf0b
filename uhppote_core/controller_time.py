"""Controller date/time replies and simple success results."""

from __future__ import annotations

from dataclasses import dataclass

from .date_time import DateTime
from .serial_number import SerialNumber


@dataclass
class ControllerTime:
    """The current date and time of a controller."""

    serial_number: SerialNumber = SerialNumber(0)
    datetime: DateTime = DateTime()

    def __str__(self) -> str:
        return f"{SerialNumber(self.serial_number)} {self.datetime}"


@dataclass
class Result:
    """Whether a request to a controller succeeded."""

    serial_number: SerialNumber = SerialNumber(0)
    succeeded: bool = False

    def __str__(self) -> str:
        return f"{SerialNumber(self.serial_number)} {'true' if self.succeeded else 'false'}"