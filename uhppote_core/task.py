"""Scheduled controller tasks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Mapping

from .card import _unsigned
from .date import Date
from .hhmm import HHmm
from .time_profile import _date_range, _optional_date, _weekdays
from .weekdays import Weekdays

_DESCRIPTIONS = (
    "CONTROL DOOR",
    "UNLOCK DOOR",
    "LOCK DOOR",
    "DISABLE TIME PROFILE",
    "ENABLE TIME PROFILE",
    "ENABLE CARD, NO PASSWORD",
    "ENABLE CARD+IN PASSWORD",
    "ENABLE CARD+PASSWORD",
    "ENABLE MORE CARDS",
    "DISABLE MORE CARDS",
    "TRIGGER ONCE",
    "DISABLE PUSH BUTTON",
    "ENABLE PUSH BUTTON",
)

_NUMERIC = re.compile(r"[0-9]+")
_NON_ALPHA = re.compile(r"[^a-z]+")


def _clean(s: str) -> str:
    return _NON_ALPHA.sub("", s.lower())


class TaskType(IntEnum):
    """Task types as numbered by the controller (0..12)."""

    DOOR_CONTROLLED = 0
    DOOR_NORMALLY_OPEN = 1
    DOOR_NORMALLY_CLOSED = 2
    DISABLE_TIME_PROFILE = 3
    ENABLE_TIME_PROFILE = 4
    CARD_NO_PASSWORD = 5
    CARD_IN_PASSWORD = 6
    CARD_IN_OUT_PASSWORD = 7
    ENABLE_MORE_CARDS = 8
    DISABLE_MORE_CARDS = 9
    TRIGGER_ONCE = 10
    DISABLE_PUSH_BUTTON = 11
    ENABLE_PUSH_BUTTON = 12

    def __str__(self) -> str:
        return _DESCRIPTIONS[self.value]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def _from_description(cls, s: str) -> TaskType:
        task = _clean(s)
        for t in cls:
            if _clean(str(t)) == task:
                return t
        raise ValueError(f"invalid task type ({s})")

    @classmethod
    def from_json(cls, value: object) -> TaskType:
        """Accepts a task number 1..13 or a case and space insensitive description."""
        if isinstance(value, int) and not isinstance(value, bool):
            if 0 < value < 14:
                return cls(value - 1)
            raise ValueError(f"invalid task type ({value})")
        if isinstance(value, str):
            return cls._from_description(value)
        raise ValueError(f"invalid task type ({value!r})")

    @classmethod
    def from_tsv(cls, s: str) -> TaskType:
        """Accepts a task code 1..13 or a case and space insensitive description."""
        if _NUMERIC.fullmatch(s):
            v = int(s)
            if not 1 <= v <= 13:
                raise ValueError(f"invalid task type code ({v})")
            return cls(v - 1)
        return cls._from_description(s)


@dataclass
class Task:
    """A task scheduled for a door, on given weekdays within a date range."""

    task: TaskType = TaskType.DOOR_CONTROLLED
    door: int = 0
    from_date: Date = Date()
    to_date: Date = Date()
    weekdays: Weekdays = field(default_factory=Weekdays)
    start: HHmm = HHmm()
    cards: int = 0

    def __str__(self) -> str:
        cards = str(self.cards) if self.task == TaskType.ENABLE_MORE_CARDS else ""
        parts = [
            f"{str(TaskType(self.task)):>4}",
            str(self.door),
            _date_range(self.from_date, self.to_date),
            str(Weekdays(self.weekdays)),
            str(self.start),
            cards,
        ]
        return " ".join(p for p in parts if p)

    def to_json(self) -> dict:
        data: dict = {"task": TaskType(self.task).to_json()}
        if self.door:
            data["door"] = self.door
        data["start-date"] = self.from_date.to_json()
        data["end-date"] = self.to_date.to_json()
        if self.weekdays:
            data["weekdays"] = Weekdays(self.weekdays).to_json()
        data["start"] = self.start.to_json()
        if self.cards:
            data["cards"] = self.cards
        return data

    @classmethod
    def from_json(cls, value: object) -> Task:
        """Builds a task from a decoded JSON object. Start and end dates are required."""
        if not isinstance(value, Mapping):
            raise TypeError(f"invalid task ({value!r})")
        task = TaskType.from_json(value["task"]) if "task" in value else TaskType.DOOR_CONTROLLED
        start = HHmm.from_json(value["start"]) if "start" in value else HHmm()
        if value.get("start-date") is None:
            raise ValueError("invalid 'from' date")
        if value.get("end-date") is None:
            raise ValueError("invalid 'to' date")
        return cls(
            task=task,
            door=_unsigned(value.get("door"), 8, "door"),
            from_date=_optional_date(value, "start-date"),
            to_date=_optional_date(value, "end-date"),
            weekdays=_weekdays(value),
            start=start,
            cards=_unsigned(value.get("cards"), 8, "cards"),
        )