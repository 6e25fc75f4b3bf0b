"""Keypad PIN codes."""

from __future__ import annotations

import re

_PIN_JSON = re.compile(r"[0-9]{0,6}")


class PIN(int):
    """A keypad PIN, stored as an unsigned 32-bit value; valid PINs are 1..999999."""

    def __new__(cls, value: int = 0) -> PIN:
        v = int(value)
        if not 0 <= v <= 0xFFFFFFFF:
            raise ValueError(f"PIN out of range ({v})")
        return super().__new__(cls, v)

    def __repr__(self) -> str:
        return f"PIN({int(self)})"

    def encode(self) -> bytes:
        """Encodes as the low three bytes, little endian."""
        return int(self).to_bytes(4, "little")[:3]

    @classmethod
    def decode(cls, data: bytes) -> PIN:
        """Decodes three little endian bytes."""
        if len(data) < 3:
            raise ValueError("PIN requires 3 bytes")
        return cls(int.from_bytes(bytes(data[:3]), "little"))

    def to_json(self) -> str:
        if self == 0 or self > 999999:
            return ""
        return str(int(self))

    @classmethod
    def from_json(cls, value: object) -> PIN:
        if not isinstance(value, str):
            raise TypeError(f"invalid PIN ({value!r})")
        if not _PIN_JSON.fullmatch(value):
            raise ValueError(f"invalid PIN ({value})")
        return cls(int(value) if value else 0)