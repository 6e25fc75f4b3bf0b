"""Access cards: card number, validity dates, door permissions and keypad PIN."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .date import Date, parse_date
from .pin import PIN

_DOORS = (1, 2, 3, 4)


def _unsigned(value: object, bits: int, name: str) -> int:
    """Validates an optional unsigned JSON integer of the given width; None reads as 0."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"invalid {name} ({value!r})")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"invalid {name} ({value})")
    return value


def _permission(p: int) -> str:
    if p == 1:
        return "Y"
    if 2 <= p <= 254:
        return str(p)
    return "N"


@dataclass
class Card:
    """An access card. Door values are 0 (no access), 1 (access) or 2..254 (time profile)."""

    card_number: int = 0
    from_date: Date = Date()
    to_date: Date = Date()
    doors: Optional[Dict[int, int]] = field(default_factory=dict)
    pin: PIN = PIN(0)

    def __str__(self) -> str:
        doors = self.doors or {}
        start = "-" if self.from_date.is_zero() else str(self.from_date)
        end = "-" if self.to_date.is_zero() else str(self.to_date)
        permissions = " ".join(_permission(doors.get(d, 0)) for d in _DOORS)
        s = f"{self.card_number:<8} {start:<10} {end:<10} {permissions}"
        if 0 < self.pin <= 999999:
            s += f" {int(self.pin)}"
        return s

    def to_json(self) -> dict:
        """JSON object for the card; invalid or zero PINs are omitted."""
        doors = None
        if self.doors is not None:
            doors = {str(k): v for k, v in sorted(self.doors.items(), key=lambda kv: str(kv[0]))}
        data: dict = {
            "card-number": self.card_number,
            "start-date": self.from_date.to_json(),
            "end-date": self.to_date.to_json(),
            "doors": doors,
        }
        pin = int(self.pin) if self.pin <= 999999 else 0
        if pin:
            data["PIN"] = PIN(pin).to_json()
        return data

    @classmethod
    def from_json(cls, value: object) -> Card:
        """Builds a card from a decoded JSON object. Start and end dates are required."""
        if not isinstance(value, Mapping):
            raise TypeError(f"invalid card ({value!r})")

        card_number = _unsigned(value.get("card-number"), 32, "card number")

        start = value.get("start-date", "")
        end = value.get("end-date", "")
        if not isinstance(start, str):
            raise TypeError(f"invalid start-date ({start!r})")
        if not isinstance(end, str):
            raise TypeError(f"invalid end-date ({end!r})")

        try:
            from_date = parse_date(start)
        except ValueError as err:
            raise ValueError(f"invalid start-date '{start}'") from err
        try:
            to_date = parse_date(end)
        except ValueError as err:
            raise ValueError(f"invalid end-date '{end}'") from err

        doors = {d: 0 for d in _DOORS}
        raw = value.get("doors")
        if raw is not None:
            if not isinstance(raw, Mapping):
                raise TypeError(f"invalid doors ({raw!r})")
            for key, permission in raw.items():
                door = int(key)
                if not 0 <= door <= 255:
                    raise ValueError(f"invalid door ({key})")
                if isinstance(permission, bool) or not isinstance(permission, int):
                    raise TypeError(f"invalid door permission ({permission!r})")
                doors[door] = permission

        raw_pin = value.get("PIN")
        pin = PIN(0) if raw_pin is None else PIN.from_json(raw_pin)

        return cls(
            card_number=card_number,
            from_date=from_date,
            to_date=to_date,
            doors={d: doors[d] & 0xFF for d in _DOORS},
            pin=pin,
        )

    def clone(self) -> Card:
        """A copy with its own door map, holding doors 1 to 4."""
        doors = self.doors or {}
        return Card(
            card_number=self.card_number,
            from_date=self.from_date,
            to_date=self.to_date,
            doors={d: doors.get(d, 0) for d in _DOORS},
            pin=self.pin,
        )