"""Ethernet hardware (MAC) addresses."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX2 = re.compile(r"[0-9A-Fa-f]{2}")
_HEX4 = re.compile(r"[0-9A-Fa-f]{4}")
_LENGTHS = (6, 8, 20)


@dataclass(frozen=True)
class MacAddress:
    """A hardware address; formatted as lower case colon separated hex."""

    value: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bytes(self.value))

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self.value)

    def encode(self) -> bytes:
        """Encodes as exactly six bytes, zero padded or truncated."""
        return self.value[:6].ljust(6, b"\x00")

    @classmethod
    def decode(cls, data: bytes) -> MacAddress:
        """Decodes the first six bytes of data."""
        if len(data) < 6:
            raise ValueError("MAC address requires 6 bytes")
        return cls(bytes(data[:6]))

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> MacAddress:
        if not isinstance(value, str):
            raise TypeError(f"invalid MAC address ({value!r})")
        return parse_mac(value)


def parse_mac(s: str) -> MacAddress:
    """Parses 6, 8 or 20 byte addresses separated by ':' or '-', or dotted groups of four."""
    for sep in ":-":
        parts = s.split(sep)
        if len(parts) in _LENGTHS and all(_HEX2.fullmatch(p) for p in parts):
            return MacAddress(bytes.fromhex("".join(parts)))

    parts = s.split(".")
    if len(parts) * 2 in _LENGTHS and all(_HEX4.fullmatch(p) for p in parts):
        return MacAddress(bytes.fromhex("".join(parts)))

    raise ValueError(f"invalid MAC address ({s})")