"""Per-day, duration-weighted temperature moments."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from sweat.models import DayStatistics, TempSample
from sweat.utils.calendar import days_in_year

# Raw temperatures are stored in tenths of a degree
TENTHS_SCALE = 10


@dataclass
class MomentAccumulator:
    """Running duration-weighted sums for one day.

    Sums are kept as integers so that nothing is rounded before the final
    division.
    """

    weight: int = 0
    first: int = 0
    second: int = 0

    def add(self, temperature_tenths: int, duration: int) -> None:
        self.weight += duration
        self.first += temperature_tenths * duration
        self.second += temperature_tenths * temperature_tenths * duration

    def statistics(self) -> DayStatistics:
        """Weighted mean and standard deviation in degrees.

        A day with no accumulated duration yields NaN for both values.
        """
        if self.weight == 0:
            return DayStatistics.empty()
        mean = self.first / (TENTHS_SCALE * self.weight)
        second_moment = self.second / (TENTHS_SCALE * TENTHS_SCALE * self.weight)
        variance = second_moment - mean * mean
        return DayStatistics(mean=mean, standard_deviation=math.sqrt(max(variance, 0.0)))


def aggregate_days(samples: Iterable[TempSample], leap_year: bool) -> list[DayStatistics]:
    """Bucket samples by day-of-year and summarise each day.

    Every sample is credited in full to the day it starts in, even when its
    duration runs past midnight.

    Args:
        samples: Timeline of one location
        leap_year: Leap-year flag of the station-year

    Returns:
        One entry per day of the year (365 or 366), index 0 being January 1st
    """
    buckets = [MomentAccumulator() for _ in range(days_in_year(leap_year))]
    for sample in samples:
        buckets[sample.day_index].add(
            sample.temperature_tenths, sample.duration_minutes
        )
    return [bucket.statistics() for bucket in buckets]
