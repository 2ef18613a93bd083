"""ISD fixed-width record parser."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sweat.errors import MalformedRecord
from sweat.models import ParsedObservation
from sweat.records.schema import ISD_FIELDS, FieldSpec


def extract_fields(
    line: str,
    fields: Sequence[FieldSpec] = ISD_FIELDS,
    line_index: int | None = None,
) -> dict[str, Any]:
    """Decode every field of ``fields`` from one fixed-width line.

    Args:
        line: Raw record text (a trailing newline is ignored)
        fields: Field layout to apply
        line_index: Position of the line in its input, for error context

    Returns:
        Mapping of field name to decoded value

    Raises:
        MalformedRecord: If the line is too short or a field fails to decode
    """
    line = line.rstrip("\r\n")
    required = max(spec.end for spec in fields)
    if len(line) < required:
        raise MalformedRecord(
            f"record is {len(line)} characters long, expected at least {required}",
            line_index,
        )

    values: dict[str, Any] = {}
    for spec in fields:
        try:
            values[spec.name] = spec.decode(spec.extract(line))
        except ValueError as exc:
            raise MalformedRecord(str(exc), line_index, spec.name) from exc
    return values


def parse_line(line: str, line_index: int | None = None) -> ParsedObservation:
    """Parse one ISD line into a complete observation.

    No best-effort parse is attempted: the line either yields every field
    or is rejected.

    Raises:
        MalformedRecord: On short lines, undecodable numbers, or an
            hour/minute outside the clock
    """
    values = extract_fields(line, ISD_FIELDS, line_index)
    if not 0 <= values["hour"] <= 23:
        raise MalformedRecord(f"hour {values['hour']} out of range", line_index, "hour")
    if not 0 <= values["minute"] <= 59:
        raise MalformedRecord(
            f"minute {values['minute']} out of range", line_index, "minute"
        )
    return ParsedObservation(line_index=line_index, **values)
