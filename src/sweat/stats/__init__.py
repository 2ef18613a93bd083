"""Timeline construction and two-level moment aggregation."""

from .daily import MomentAccumulator, aggregate_days
from .location import PooledMoments, aggregate_location
from .timeline import build_timeline, observation_minute

__all__ = [
    "MomentAccumulator",
    "PooledMoments",
    "aggregate_days",
    "aggregate_location",
    "build_timeline",
    "observation_minute",
]
