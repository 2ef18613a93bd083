"""Fixed-width layout of the ISD mandatory data section.

Only the fields the temperature pipeline needs are listed. Offsets are
0-based and follow the published ISD format document; they are not
configurable.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

_INTEGER = re.compile(r"[0-9]+")
_SIGNED_INTEGER = re.compile(r"[+-]?[0-9]+")


def decode_unsigned(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not a base-10 integer: {text!r}")
    return int(text, 10)


def decode_signed(text: str) -> int:
    if not _SIGNED_INTEGER.fullmatch(text):
        raise ValueError(f"not a signed base-10 integer: {text!r}")
    return int(text, 10)


def decode_text(text: str) -> str:
    return text


@dataclass(frozen=True)
class FieldSpec:
    """Position and decoder of one fixed-width field."""

    name: str
    start: int
    length: int
    decode: Callable[[str], int | str]

    @property
    def end(self) -> int:
        return self.start + self.length

    def extract(self, line: str) -> str:
        return line[self.start : self.end]


ISD_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec("year", 15, 4, decode_unsigned),
    FieldSpec("month", 19, 2, decode_unsigned),
    FieldSpec("day", 21, 2, decode_unsigned),
    FieldSpec("hour", 23, 2, decode_unsigned),
    FieldSpec("minute", 25, 2, decode_unsigned),
    FieldSpec("quality_version", 56, 3, decode_text),
    FieldSpec("temperature_tenths", 87, 5, decode_signed),
    FieldSpec("quality_flag", 92, 1, decode_text),
)

# Shortest line that still holds every field above
MIN_RECORD_LENGTH: Final = max(spec.end for spec in ISD_FIELDS)
