"""Controller system dates, encoded as two digit year BCD."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Optional

from .hhmm import _bcd_decode, _bcd_encode


@dataclass(frozen=True)
class SystemDate:
    """A controller system date; SystemDate() is the zero value (0001-01-01)."""

    value: Optional[_dt.date] = None

    def __post_init__(self) -> None:
        if isinstance(self.value, _dt.datetime):
            object.__setattr__(self, "value", self.value.date())

    def _date(self) -> _dt.date:
        return self.value if self.value is not None else _dt.date.min

    def is_zero(self) -> bool:
        return self.value is None

    def format(self, fmt: str) -> str:
        """Formats the date with a strftime format string."""
        return self._date().strftime(fmt)

    def __str__(self) -> str:
        return self._date().isoformat()

    def encode(self) -> bytes:
        """Encodes as three BCD bytes (YYMMDD)."""
        d = self._date()
        return _bcd_encode(f"{d.year % 100:02d}{d.month:02d}{d.day:02d}")

    @classmethod
    def decode(cls, data: bytes) -> SystemDate:
        """Decodes three BCD bytes; all zero bytes decode as the zero date."""
        if len(data) < 3:
            raise ValueError("system date requires 3 bytes")
        raw = bytes(data[:3])
        if raw == bytes(3):
            return cls()
        decoded = _bcd_decode(raw)
        yy = int(decoded[0:2])
        year = yy + (1900 if yy >= 69 else 2000)
        try:
            return cls(_dt.date(year, int(decoded[2:4]), int(decoded[4:6])))
        except ValueError as err:
            raise ValueError(f"invalid system date ({decoded}): {err}") from err