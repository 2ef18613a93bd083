"""Text and number formatting utilities."""

from __future__ import annotations

import math

from sweat.models import DayStatistics, Summary


def format_temperature(temp: float, unit: str = "°C", digits: int = 2) -> str:
    """Format temperature value with unit.

    Args:
        temp: Temperature value
        unit: Temperature unit
        digits: Decimal places

    Returns:
        Formatted temperature string, or "n/a" for NaN
    """
    if math.isnan(temp):
        return "n/a"
    return f"{temp:.{digits}f}{unit}"


def format_summary(summary: Summary | DayStatistics, unit: str = "°C") -> str:
    """Format a mean/spread pair as ``mean +- sd``."""
    return (
        f"{format_temperature(summary.mean, unit)} +- "
        f"{format_temperature(summary.standard_deviation, unit)}"
    )
