"""Sets of weekdays, keyed by weekday number (Monday is 0, Sunday is 6)."""

from __future__ import annotations

_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thurs", "Fri", "Sat", "Sun")
_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class Weekdays(dict):
    """Maps weekday numbers to enabled flags; missing days read as False."""

    def __getitem__(self, key: int) -> bool:
        return bool(super().get(key, False))

    def __str__(self) -> str:
        return ",".join(abbr for day, abbr in enumerate(_ABBREVIATIONS) if self[day])

    def to_json(self) -> str:
        return ",".join(name for day, name in enumerate(_NAMES) if self[day])

    @classmethod
    def from_json(cls, value: object) -> Weekdays:
        if not isinstance(value, str):
            raise TypeError(f"invalid weekdays ({value!r})")
        days = cls({day: False for day in range(7)})
        lookup = {name.lower(): day for day, name in enumerate(_NAMES)}
        for token in value.split(","):
            day = lookup.get(token.lower())
            if day is not None:
                days[day] = True
        return days