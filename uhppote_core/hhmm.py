"""Hour and minute of day, as used by time profile segments and scheduled tasks."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass

_HHMM = re.compile(r"([0-9]{2}):([0-9]{2})")
_HHMM_BCD = re.compile(r"([0-9]{2})([0-9]{2})")
_DIGITS = re.compile(r"[0-9]*")


def _bcd_encode(digits: str) -> bytes:
    """Packs a string of decimal digits two to a byte, left padding odd lengths with 0."""
    if not _DIGITS.fullmatch(digits):
        raise ValueError(f"invalid BCD string ({digits})")
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


def _bcd_decode(data: bytes) -> str:
    """Unpacks BCD bytes into a string of decimal digits."""
    digits = bytes(data).hex()
    if not _DIGITS.fullmatch(digits):
        raise ValueError(f"invalid BCD value ({digits})")
    return digits


def _check_range(hours: int, minutes: int, s: str) -> None:
    if not 0 <= hours <= 24 or not 0 <= minutes <= 60 or (hours == 24 and minutes != 0):
        raise ValueError(f"invalid HH:mm string ({s}) - valid range is 00:00 to 24:00")


def _parse(s: str, pattern: re.Pattern[str]) -> HHmm:
    match = pattern.fullmatch(s)
    if match is None:
        raise ValueError(f"invalid HH:mm string ({s})")
    hours, minutes = int(match.group(1)), int(match.group(2))
    _check_range(hours, minutes, s)
    return HHmm(hours, minutes)


@dataclass(frozen=True, order=True)
class HHmm:
    """A time of day with minute resolution."""

    hours: int = 0
    minutes: int = 0

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"

    @staticmethod
    def _key(other: object) -> tuple[int, int]:
        if isinstance(other, (HHmm, _dt.time, _dt.datetime)):
            hours = other.hours if isinstance(other, HHmm) else other.hour
            minutes = other.minutes if isinstance(other, HHmm) else other.minute
            return hours, minutes
        raise TypeError("HHmm can only be compared with HHmm, datetime.time or datetime.datetime")

    def before(self, other: HHmm | _dt.time | _dt.datetime) -> bool:
        """True if this time is strictly earlier than other."""
        return (self.hours, self.minutes) < self._key(other)

    def after(self, other: HHmm | _dt.time | _dt.datetime) -> bool:
        """True if this time is strictly later than other."""
        return (self.hours, self.minutes) > self._key(other)

    def encode(self) -> bytes:
        """Encodes as two BCD bytes (HHmm)."""
        try:
            return _bcd_encode(f"{self.hours:02d}{self.minutes:02d}")
        except ValueError as err:
            raise ValueError(f"error encoding HHmm time {self} to BCD: [{err}]") from err

    @classmethod
    def decode(cls, data: bytes) -> HHmm:
        """Decodes the first two BCD bytes of data."""
        if len(data) < 2:
            raise ValueError("HHmm requires 2 bytes")
        return _parse(_bcd_decode(data[:2]), _HHMM_BCD)

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> HHmm:
        if not isinstance(value, str):
            raise TypeError(f"invalid HH:mm value ({value!r})")
        return _parse(value, _HHMM)


def hhmm_from_string(s: str) -> HHmm:
    """Parses an HH:mm string in the range 00:00 to 24:00."""
    return _parse(s, _HHMM)


def hhmm_from_time(t: _dt.time | _dt.datetime) -> HHmm:
    """Takes the hour and minute of a time or datetime."""
    return HHmm(t.hour, t.minute)