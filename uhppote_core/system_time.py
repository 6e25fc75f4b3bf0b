"""Controller system times of day, encoded as BCD."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass

from .hhmm import _bcd_decode, _bcd_encode

_TIME = re.compile(r"([0-9]{1,2}):([0-9]{2}):([0-9]{2})")


@dataclass(frozen=True)
class SystemTime:
    """A controller time of day with one second resolution."""

    value: _dt.time = _dt.time(0, 0, 0)

    def format(self, fmt: str) -> str:
        """Formats the time with a strftime format string."""
        return self.value.strftime(fmt)

    def __str__(self) -> str:
        return self.value.strftime("%H:%M:%S")

    def encode(self) -> bytes:
        """Encodes as three BCD bytes (HHmmss)."""
        t = self.value
        return _bcd_encode(f"{t.hour:02d}{t.minute:02d}{t.second:02d}")

    @classmethod
    def decode(cls, data: bytes) -> SystemTime:
        """Decodes three BCD bytes (HHmmss)."""
        if len(data) < 3:
            raise ValueError("system time requires 3 bytes")
        decoded = _bcd_decode(data[:3])
        try:
            return cls(_dt.time(int(decoded[0:2]), int(decoded[2:4]), int(decoded[4:6])))
        except ValueError as err:
            raise ValueError(f"invalid system time ({decoded}): {err}") from err


def time_from_string(s: str) -> SystemTime:
    """Parses an HH:mm:ss time of day."""
    match = _TIME.fullmatch(s)
    if match is None:
        raise ValueError(f"invalid time ({s})")
    hours, minutes, seconds = (int(g) for g in match.groups())
    try:
        return SystemTime(_dt.time(hours, minutes, seconds))
    except ValueError as err:
        raise ValueError(f"invalid time ({s}): {err}") from err