"""Card formats accepted by the controller card readers."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Mapping

_ANY_FORMAT = re.compile(r"\s*any\s*", re.IGNORECASE)
_WIEGAND_26_FORMAT = re.compile(r"\s*wiegand([ \-])?26\s*", re.IGNORECASE)
_NAMES = ("any", "Wiegand-26")


class CardFormat(IntEnum):
    """Card formats: any format, or Wiegand-26 only."""

    ANY = 0
    WIEGAND_26 = 1

    def __str__(self) -> str:
        return _NAMES[self.value]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def to_conf(self, tag: str) -> bytes:
        """The configuration file representation of this format."""
        return str(self).encode()

    def unmarshal_conf(self, tag: str, values: Mapping[str, str]) -> CardFormat:
        """Returns the format held under tag in values, or this format if tag is absent."""
        if tag in values:
            return card_format_from_string(values[tag])
        return self


def card_format_from_string(v: str) -> CardFormat:
    """Parses a card format description, ignoring case and surrounding spaces."""
    if _ANY_FORMAT.search(v):
        return CardFormat.ANY
    if _WIEGAND_26_FORMAT.search(v):
        return CardFormat.WIEGAND_26
    raise ValueError(f"invalid card format ({v})")