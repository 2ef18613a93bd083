"""Exception classes for the record-processing core.

This module defines the errors raised while turning ISD records into
temperature statistics. Every error is terminal for the location being
processed; the quality filter is the only mechanism that drops records.
"""

from __future__ import annotations


class SweatError(Exception):
    """Base class for every error raised by the processing core."""


class MalformedRecord(SweatError):
    """A record could not be parsed or breaks the timeline ordering.

    Raised for lines that are too short, numeric fields that are not
    base-10 integers, out-of-range hour/minute values, timestamps that do
    not strictly increase, and inputs that mix more than one year.
    """

    def __init__(
        self, message: str, line_index: int | None = None, field: str | None = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            line_index: 0-based index of the offending input line, if known
            field: Name of the record field that failed, if any
        """
        context = []
        if line_index is not None:
            context.append(f"line {line_index}")
        if field is not None:
            context.append(f"field {field!r}")
        prefix = f"[{', '.join(context)}] " if context else ""
        super().__init__(f"{prefix}{message}")
        self.message: str = message
        self.line_index: int | None = line_index
        self.field: str | None = field


class InvalidDate(SweatError):
    """A month/day pair does not exist in the calendar."""

    def __init__(
        self,
        month: int,
        day: int,
        line_index: int | None = None,
        field: str | None = None,
    ) -> None:
        """Initialize with the rejected date.

        Args:
            month: Month as read from the record
            day: Day of month as read from the record
            line_index: 0-based index of the offending input line, if known
            field: Record field at fault, ``"month"`` or ``"day"``
        """
        context = []
        if line_index is not None:
            context.append(f"line {line_index}")
        if field is not None:
            context.append(f"field {field!r}")
        prefix = f"[{', '.join(context)}] " if context else ""
        super().__init__(f"{prefix}invalid date month={month} day={day}")
        self.month = month
        self.day = day
        self.line_index = line_index
        self.field = field


class InsufficientData(SweatError):
    """No valid day remains to compute location statistics from."""

    def __init__(self, message: str, location: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            location: Label of the location being processed, if known
        """
        super().__init__(f"{location}: {message}" if location else message)
        self.message = message
        self.location = location

    def for_location(self, location: str) -> InsufficientData:
        """Return a copy of this error labelled with ``location``."""
        return InsufficientData(self.message, location)
