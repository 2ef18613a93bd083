"""SWEAT - Strange WEather in AusTin.

Duration-weighted temperature statistics from NOAA ISD station records,
for comparing how variable one location's weather is against others.
"""

__version__ = "0.1.0"

from .errors import InsufficientData, InvalidDate, MalformedRecord, SweatError
from .models import (
    DayStatistics,
    LocationReport,
    LocationStatistics,
    ParsedObservation,
    Summary,
    TempSample,
)
from .pipeline import analyze_station, compare_locations, parse_records

__all__ = [
    "DayStatistics",
    "InsufficientData",
    "InvalidDate",
    "LocationReport",
    "LocationStatistics",
    "MalformedRecord",
    "ParsedObservation",
    "Summary",
    "SweatError",
    "TempSample",
    "analyze_station",
    "compare_locations",
    "parse_records",
]
