"""Time profiles: date range, weekdays and up to three daily time segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .card import _unsigned
from .date import Date
from .segment import Segment, Segments
from .weekdays import Weekdays


def _date_range(from_date: Date, to_date: Date) -> str:
    start, end = str(from_date), str(to_date)
    if start and end:
        return f"{start}:{end}"
    if start:
        return f"{start}:-"
    return f"-:{end}"


def _optional_date(value: Mapping, key: str) -> Date:
    raw = value.get(key)
    return Date() if raw is None else Date.from_json(raw)


def _weekdays(value: Mapping) -> Weekdays:
    if "weekdays" not in value:
        return Weekdays()
    raw = value["weekdays"]
    return Weekdays.from_json("" if raw is None else raw)


@dataclass
class TimeProfile:
    """A controller time profile, optionally linked to another profile."""

    id: int = 0
    linked_profile_id: int = 0
    from_date: Date = Date()
    to_date: Date = Date()
    weekdays: Weekdays = field(default_factory=Weekdays)
    segments: Segments = field(default_factory=Segments)

    def __str__(self) -> str:
        parts = [
            _date_range(self.from_date, self.to_date),
            str(Weekdays(self.weekdays)),
            str(Segments(self.segments)),
            str(self.linked_profile_id),
        ]
        return " ".join([str(self.id)] + [p for p in parts if p])

    def to_json(self) -> dict:
        data: dict = {"id": self.id}
        if self.linked_profile_id:
            data["linked-profile"] = self.linked_profile_id
        data["start-date"] = self.from_date.to_json()
        data["end-date"] = self.to_date.to_json()
        if self.weekdays:
            data["weekdays"] = Weekdays(self.weekdays).to_json()
        if self.segments:
            data["segments"] = Segments(self.segments).to_json()
        return data

    @classmethod
    def from_json(cls, value: object) -> TimeProfile:
        """Builds a profile from a decoded JSON object; missing segments are empty."""
        if not isinstance(value, Mapping):
            raise TypeError(f"invalid time profile ({value!r})")
        segments = Segments({i: Segment() for i in (1, 2, 3)})
        segments.update_from_json(value.get("segments"))
        return cls(
            id=_unsigned(value.get("id"), 8, "profile id"),
            linked_profile_id=_unsigned(value.get("linked-profile"), 8, "linked profile id"),
            from_date=_optional_date(value, "start-date"),
            to_date=_optional_date(value, "end-date"),
            weekdays=_weekdays(value),
            segments=segments,
        )