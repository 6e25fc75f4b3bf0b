"""Time segments of a time profile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .hhmm import HHmm

_IDS = (1, 2, 3)


@dataclass(frozen=True)
class Segment:
    """A start and end time of day."""

    start: HHmm = HHmm()
    end: HHmm = HHmm()

    def __str__(self) -> str:
        if self.start == HHmm() and self.end == HHmm():
            return ""
        return f"{self.start}-{self.end}"

    def to_json(self) -> dict:
        return {"start": self.start.to_json(), "end": self.end.to_json()}

    @classmethod
    def from_json(cls, value: object) -> Segment:
        if not isinstance(value, Mapping):
            raise TypeError(f"invalid segment ({value!r})")
        start = HHmm.from_json(value["start"]) if "start" in value else HHmm()
        end = HHmm.from_json(value["end"]) if "end" in value else HHmm()
        return cls(start, end)


class Segments(dict):
    """Maps segment numbers 1 to 3 to segments; missing segments read as empty."""

    def __missing__(self, key: int) -> Segment:
        return Segment()

    def __str__(self) -> str:
        return ",".join(s for s in (str(self[i]) for i in _IDS) if s)

    def to_json(self) -> list:
        return [self[i].to_json() for i in _IDS if i in self]

    def update_from_json(self, value: object) -> Segments:
        """Sets segments 1 to 3 from a JSON list; extra entries are ignored."""
        if value is None:
            return self
        if not isinstance(value, list):
            raise TypeError(f"invalid segments ({value!r})")
        parsed = [Segment.from_json(v) for v in value]
        for segment_id, segment in zip(_IDS, parsed):
            self[segment_id] = segment
        return self