"""Date and time values with one second resolution and a 'zero' value."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass

from .hhmm import _bcd_decode, _bcd_encode

_DATETIME = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")
_DATETIME_ZONE = re.compile(r"([0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}) ([A-Za-z]+)")
_FORMAT = "%Y-%m-%d %H:%M:%S"
_ZERO = _dt.datetime(1, 1, 1, tzinfo=_dt.timezone.utc)


def _parse_local(s: str) -> _dt.datetime:
    if not _DATETIME.fullmatch(s):
        raise ValueError(f"invalid date/time ({s})")
    return _dt.datetime.strptime(s, _FORMAT)


def _parse_zoned(s: str) -> _dt.datetime:
    match = _DATETIME_ZONE.fullmatch(s)
    if match is None:
        raise ValueError(f"invalid date/time ({s})")
    naive = _parse_local(match.group(1))
    zone = match.group(2)
    if zone == "UTC":
        return naive.replace(tzinfo=_dt.timezone.utc)
    if naive.astimezone().tzname() == zone:
        return naive
    return naive.replace(tzinfo=_dt.timezone(_dt.timedelta(0), zone))


@dataclass(frozen=True)
class DateTime:
    """A date and time; DateTime() is the zero (unset) value. Naive values are local time."""

    value: _dt.datetime | None = None

    def is_zero(self) -> bool:
        return self.value is None

    def _seconds(self) -> float:
        return float("-inf") if self.value is None else int(self.value.timestamp())

    def before(self, t: _dt.datetime | DateTime) -> bool:
        """Compares with one second resolution, ignoring fractions of a second."""
        other = t if isinstance(t, DateTime) else DateTime(t)
        return self._seconds() < other._seconds()

    def add(self, delta: _dt.timedelta) -> DateTime:
        base = self.value if self.value is not None else _ZERO
        return DateTime((base + delta).replace(microsecond=0))

    def __str__(self) -> str:
        if self.value is None:
            return ""
        return self.value.isoformat(sep=" ", timespec="seconds")[:19]

    def to_json(self) -> str:
        if self.value is None:
            return ""
        aware = self.value if self.value.tzinfo is not None else self.value.astimezone()
        return f"{self} {aware.tzname() or ''}"

    @classmethod
    def from_json(cls, value: object) -> DateTime:
        if not isinstance(value, str):
            raise TypeError(f"invalid date/time ({value!r})")
        if value == "":
            return cls()
        try:
            parsed = _parse_local(value)
        except ValueError:
            parsed = _parse_zoned(value)
        return cls(parsed.replace(microsecond=0))

    def encode(self) -> bytes:
        """Encodes as seven BCD bytes (YYYYMMDDHHmmss)."""
        v = self.value if self.value is not None else _ZERO
        return _bcd_encode(
            f"{v.year:04d}{v.month:02d}{v.day:02d}{v.hour:02d}{v.minute:02d}{v.second:02d}"
        )

    @classmethod
    def decode(cls, data: bytes) -> DateTime:
        """Decodes seven BCD bytes. Invalid or uninitialised values decode as zero."""
        if len(data) < 7:
            raise ValueError("date/time requires 7 bytes")
        raw = bytes(data[:7])
        if raw in (bytes(7), b"\x20" + bytes(6)):
            return cls()
        d = _bcd_decode(raw)
        try:
            return cls(
                _dt.datetime(
                    int(d[0:4]), int(d[4:6]), int(d[6:8]), int(d[8:10]), int(d[10:12]), int(d[12:14])
                )
            )
        except ValueError:
            return cls()


def datetime_now() -> DateTime:
    """The current local time, truncated to the second."""
    return DateTime(_dt.datetime.now().replace(microsecond=0))


def parse_datetime(s: str) -> DateTime:
    """Parses a 'YYYY-MM-DD HH:mm:ss' local time string; blank strings are an error."""
    if s == "":
        raise ValueError("blank date/time string")
    return DateTime(_parse_local(s))