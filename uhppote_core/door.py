"""Door control modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .serial_number import SerialNumber

_NAMES = ("", "normally open", "normally closed", "controlled")


class ControlState(IntEnum):
    """How a door lock is driven: always open, always closed or by card access."""

    UNKNOWN = 0
    NORMALLY_OPEN = 1
    NORMALLY_CLOSED = 2
    CONTROLLED = 3

    def __str__(self) -> str:
        return _NAMES[self.value]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> ControlState:
        if not isinstance(value, str):
            raise TypeError(f"invalid door control state value ({value!r})")
        for state in (cls.NORMALLY_OPEN, cls.NORMALLY_CLOSED, cls.CONTROLLED):
            if value == str(state):
                return state
        raise ValueError(f"invalid door control state value '{value}'")


@dataclass
class DoorControlState:
    """The control mode and unlock delay of a controller door."""

    serial_number: SerialNumber = SerialNumber(0)
    door: int = 0
    control_state: ControlState = ControlState.UNKNOWN
    delay: int = 0

    def __str__(self) -> str:
        return f"{SerialNumber(self.serial_number)} {self.door} {ControlState(self.control_state)} {self.delay}"