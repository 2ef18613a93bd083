"""Pooling of daily statistics into location-level summaries."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from sweat.errors import InsufficientData
from sweat.models import DayStatistics, LocationStatistics, Summary


@dataclass
class PooledMoments:
    """Unweighted running sums of one daily quantity."""

    count: int = 0
    total: float = 0.0
    total_sq: float = 0.0

    def add(self, value: float) -> None:
        self.count += 1
        self.total += value
        self.total_sq += value * value

    def summary(self) -> Summary:
        mean = self.total / self.count
        variance = self.total_sq / self.count - mean * mean
        return Summary(mean=mean, standard_deviation=math.sqrt(max(variance, 0.0)))


def aggregate_location(days: Iterable[DayStatistics]) -> LocationStatistics:
    """Pool daily statistics of one location.

    Days without data are skipped and do not count toward the sample size.
    Each remaining day weighs the same regardless of how many observations
    it held.

    Args:
        days: Daily statistics, typically the output of ``aggregate_days``

    Returns:
        Spread of the daily means and spread of the daily standard deviations

    Raises:
        InsufficientData: If no day carries data
    """
    means = PooledMoments()
    deviations = PooledMoments()
    for day in days:
        if day.is_empty:
            continue
        means.add(day.mean)
        deviations.add(day.standard_deviation)

    if means.count == 0:
        raise InsufficientData("no day with valid observations")

    return LocationStatistics(
        daily_means=means.summary(),
        daily_deviations=deviations.summary(),
        valid_days=means.count,
    )
