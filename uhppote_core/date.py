"""Calendar dates with a 'zero' value for unset dates."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass

from .hhmm import _bcd_decode, _bcd_encode

_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def _parse_iso(s: str) -> _dt.date:
    match = _ISO_DATE.fullmatch(s)
    if match is None:
        raise ValueError(f"invalid date ({s})")
    year, month, day = (int(g) for g in match.groups())
    return _dt.date(year, month, day)


@dataclass(frozen=True)
class Date:
    """A calendar date; Date() is the zero (unset) date."""

    value: _dt.date | None = None

    def __post_init__(self) -> None:
        if isinstance(self.value, _dt.datetime):
            object.__setattr__(self, "value", self.value.date())

    def _date(self) -> _dt.date:
        return self.value if self.value is not None else _dt.date.min

    def is_zero(self) -> bool:
        return self.value is None

    def before(self, other: Date) -> bool:
        return self._date() < other._date()

    def after(self, other: Date) -> bool:
        return self._date() > other._date()

    def weekday(self) -> int:
        """Day of the week, Monday is 0."""
        return self._date().weekday()

    def __str__(self) -> str:
        return "" if self.value is None else self.value.isoformat()

    def encode(self) -> bytes:
        """Encodes as four BCD bytes (YYYYMMDD), all zero for the zero date."""
        if self.value is None:
            return bytes(4)
        return _bcd_encode(f"{self.value.year:04d}{self.value.month:02d}{self.value.day:02d}")

    @classmethod
    def decode(cls, data: bytes) -> Date:
        """Decodes four BCD bytes. Invalid dates decode as the zero date."""
        if len(data) < 4:
            raise ValueError("date requires 4 bytes")
        decoded = _bcd_decode(data[:4])
        if decoded in ("00000000", "00010101"):
            return cls()
        try:
            return cls(_dt.date(int(decoded[0:4]), int(decoded[4:6]), int(decoded[6:8])))
        except ValueError:
            return cls()

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> Date:
        if not isinstance(value, str):
            raise TypeError(f"invalid date ({value!r})")
        if value == "":
            return cls()
        return cls(_parse_iso(value))


def parse_date(s: str) -> Date:
    """Parses a YYYY-MM-DD string; blank strings are an error."""
    if s == "":
        raise ValueError("blank date string")
    return Date(_parse_iso(s))


def to_date(year: int, month: int, day: int) -> Date:
    return Date(_dt.date(year, month, day))