"""Controller firmware versions."""

from __future__ import annotations

import re

_HEX = re.compile(r"\s*([0-9A-Fa-f]{1,4})")


class Version(int):
    """A 16-bit firmware version: major in the high byte, minor in the low byte."""

    def __new__(cls, value: int = 0) -> Version:
        v = int(value)
        if not 0 <= v <= 0xFFFF:
            raise ValueError(f"version out of range ({v})")
        return super().__new__(cls, v)

    def __str__(self) -> str:
        major = int(self) >> 8
        minor = int(self) & 0x00FF
        return f"v{major:x}.{minor:02x}"

    def __repr__(self) -> str:
        return f"Version(0x{int(self):04x})"

    def encode(self) -> bytes:
        """Encodes as two bytes, big endian."""
        return int(self).to_bytes(2, "big")

    @classmethod
    def decode(cls, data: bytes) -> Version:
        """Decodes the first two bytes of data, big endian."""
        if len(data) < 2:
            raise ValueError("version requires 2 bytes")
        return cls(int.from_bytes(bytes(data[:2]), "big"))

    def to_json(self) -> str:
        return f"{int(self):04x}"

    @classmethod
    def from_json(cls, value: object) -> Version:
        if not isinstance(value, str):
            raise TypeError(f"invalid version ({value!r})")
        match = _HEX.match(value)
        if match is None:
            raise ValueError("unable to extract 'version' from JSON value")
        return cls(int(match.group(1), 16))