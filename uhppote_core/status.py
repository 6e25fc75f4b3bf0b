"""Controller status: door and button states, system time and the most recent event."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .date_time import DateTime
from .serial_number import SerialNumber


def _bool(b: bool) -> str:
    return str(bool(b)).lower()


def _timestamp(t: DateTime) -> str:
    return "---" if t.is_zero() else str(t)


@dataclass
class StatusEvent:
    """The most recent event in a status report; index 0 means 'no event'."""

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


@dataclass
class Status:
    """A controller status report. Door and button maps are keyed by door 1 to 4."""

    serial_number: SerialNumber = SerialNumber(0)
    door_state: Dict[int, bool] = field(default_factory=dict)
    door_button: Dict[int, bool] = field(default_factory=dict)
    system_error: int = 0
    system_datetime: DateTime = DateTime()
    sequence_id: int = 0
    special_info: int = 0
    relay_state: int = 0
    input_state: int = 0
    event: StatusEvent = field(default_factory=StatusEvent)

    def __str__(self) -> str:
        doors = " ".join(f"{_bool(self.door_state.get(d, False)):<5}" for d in (1, 2, 3, 4))
        buttons = " ".join(f"{_bool(self.door_button.get(d, False)):<5}" for d in (1, 2, 3, 4))
        parts = [
            f"{SerialNumber(self.serial_number)}",
            f" {doors}",
            f" {buttons}",
            f" {self.system_error:<4d}",
            f" {_timestamp(self.system_datetime)}",
            f" {self.sequence_id:<10d}",
            f" {self.special_info:d}",
            f" {self.relay_state:02X}",
            f" {self.input_state:02X}",
        ]

        e = self.event
        if e.index > 0:
            parts += [
                f" | {e.index:<7d}",
                f" {e.event_type:<3d}",
                f" {_bool(e.granted):<5}",
                f" {e.door:d}",
                f" {e.direction:<5}",
                f" {e.card_number:<10d}",
                f" {_timestamp(e.timestamp)}",
                f" {e.reason:d}",
            ]

        return "".join(parts)