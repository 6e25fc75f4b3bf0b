"""Door interlock modes."""

from __future__ import annotations

from enum import IntEnum

_NAMES = {
    0x00: "disabled",
    0x01: "1&2",
    0x02: "3&4",
    0x03: "1&2,3&4",
    0x04: "1&2&3",
    0x08: "1&2&3&4",
}


class Interlock(IntEnum):
    """Sets of doors of which only one may be open at a time."""

    NONE = 0x00
    DOORS_12 = 0x01
    DOORS_34 = 0x02
    DOORS_12_34 = 0x03
    DOORS_123 = 0x04
    DOORS_1234 = 0x08

    def __str__(self) -> str:
        return _NAMES[self.value]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)