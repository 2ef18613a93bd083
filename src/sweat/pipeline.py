"""Station-year pipeline: raw ISD lines in, location report out."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Final

from sweat.errors import InsufficientData, MalformedRecord
from sweat.models import LocationReport, ParsedObservation
from sweat.records import QualityFilter, parse_line
from sweat.stats import aggregate_days, aggregate_location, build_timeline
from sweat.utils.calendar import is_leap_year

logger: Final = logging.getLogger(__name__)


def parse_records(lines: Iterable[str]) -> list[ParsedObservation]:
    """Parse every line of one station-year.

    Raises:
        MalformedRecord: On any unparseable line, or when the lines do not
            all belong to the same year
    """
    observations: list[ParsedObservation] = []
    for index, line in enumerate(lines):
        obs = parse_line(line, index)
        if observations and obs.year != observations[0].year:
            raise MalformedRecord(
                f"year {obs.year} differs from {observations[0].year}", index, "year"
            )
        observations.append(obs)
    return observations


def analyze_station(lines: Sequence[str], location: str) -> LocationReport:
    """Run the full pipeline for one station-year.

    Args:
        lines: Decoded ISD lines in chronological order
        location: Label used in the report (WBAN number or file name)

    Returns:
        Per-day and pooled statistics for the station

    Raises:
        MalformedRecord: If a line cannot be parsed or timestamps do not increase
        InvalidDate: If a record carries an impossible date
        InsufficientData: If no observation survives the quality filter
    """
    observations = parse_records(lines)
    if not observations:
        raise InsufficientData("no records", location)

    year = observations[0].year
    leap_year = is_leap_year(year)

    qc = QualityFilter()
    admissible = qc.apply(observations)
    logger.debug(
        "%s: %d records, %d admissible, %d rejected",
        location,
        len(observations),
        qc.accepted,
        qc.rejected,
    )

    timeline = build_timeline(admissible, leap_year)
    days = aggregate_days(timeline, leap_year)
    try:
        statistics = aggregate_location(days)
    except InsufficientData as exc:
        raise exc.for_location(location) from exc

    logger.info(
        "%s %d: %d days with data", location, year, statistics.valid_days
    )
    return LocationReport(
        location=location,
        year=year,
        leap_year=leap_year,
        accepted=qc.accepted,
        rejected=qc.rejected,
        days=days,
        statistics=statistics,
    )


def compare_locations(sources: Mapping[str, Sequence[str]]) -> list[LocationReport]:
    """Analyze several locations independently.

    Each location runs through its own pipeline; results are only combined
    here, in the order of ``sources``.
    """
    return [analyze_station(lines, location) for location, lines in sources.items()]
