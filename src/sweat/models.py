"""Typed value objects flowing through the processing pipeline.

Each stage consumes the previous stage's output and produces a new,
immutable sequence of these models.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────── records ─────────────────────────────────────────


class ParsedObservation(BaseModel):
    """One fully decoded ISD observation."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    temperature_tenths: int
    quality_version: str
    quality_flag: str
    line_index: int | None = None

    @property
    def temperature(self) -> float:
        """Temperature in degrees (unscaled)."""
        return self.temperature_tenths / 10


class TempSample(BaseModel):
    """One point of a location's yearly temperature timeline."""

    model_config = ConfigDict(frozen=True)

    temperature_tenths: int
    minute_of_year: int = Field(..., ge=0)
    duration_minutes: int = Field(..., gt=0)

    @property
    def day_index(self) -> int:
        """0-based day-of-year bucket this sample falls in."""
        return self.minute_of_year // 1440


# ─────────────────────────── statistics ──────────────────────────────────────


class DayStatistics(BaseModel):
    """Duration-weighted temperature summary for one calendar day.

    Both values are NaN when the day has no samples.
    """

    model_config = ConfigDict(frozen=True)

    mean: float
    standard_deviation: float

    @classmethod
    def empty(cls) -> DayStatistics:
        return cls(mean=math.nan, standard_deviation=math.nan)

    @property
    def is_empty(self) -> bool:
        """Check whether this day carried no valid samples."""
        return math.isnan(self.mean)


class Summary(BaseModel):
    """A pooled value together with its spread across days."""

    model_config = ConfigDict(frozen=True)

    mean: float
    standard_deviation: float


class LocationStatistics(BaseModel):
    """Day-to-day behaviour of one location's temperature.

    ``daily_means`` describes how the daily average temperature spreads
    over the year; ``daily_deviations`` describes how the daily
    variability itself spreads.
    """

    model_config = ConfigDict(frozen=True)

    daily_means: Summary
    daily_deviations: Summary
    valid_days: int = Field(..., gt=0)


# ─────────────────────────── report ──────────────────────────────────────────


class LocationReport(BaseModel):
    """Everything produced for one station-year."""

    model_config = ConfigDict(frozen=True)

    location: str
    year: int
    leap_year: bool
    accepted: int
    rejected: int
    days: list[DayStatistics]
    statistics: LocationStatistics

    @property
    def days_with_data(self) -> list[tuple[int, DayStatistics]]:
        """Return (1-based day-of-year, statistics) for every non-empty day."""
        return [(i + 1, d) for i, d in enumerate(self.days) if not d.is_empty]
