"""Conversion of ordered observations into a duration-carrying timeline."""

from __future__ import annotations

from collections.abc import Sequence

from sweat.errors import InvalidDate, MalformedRecord
from sweat.models import ParsedObservation, TempSample
from sweat.utils.calendar import MINUTES_PER_DAY, day_of_year, minute_of_year


def observation_minute(observation: ParsedObservation, leap_year: bool) -> int:
    """Minute-of-year of one observation.

    Raises:
        InvalidDate: If the observation's month/day does not exist
    """
    try:
        doy = day_of_year(observation.month, observation.day, leap_year)
    except InvalidDate as exc:
        raise InvalidDate(exc.month, exc.day, observation.line_index, exc.field) from exc
    return minute_of_year(doy, observation.hour, observation.minute)


def build_timeline(
    observations: Sequence[ParsedObservation], leap_year: bool
) -> list[TempSample]:
    """Build the temperature timeline of one station.

    Each sample stays valid until the next one starts. The final sample
    of the whole sequence is held until the end of its calendar day, i.e.
    ``1440 - minute_of_year % 1440`` minutes; earlier samples that end a
    day keep the plain gap to the following sample even when it crosses
    midnight.

    Args:
        observations: Admissible observations in chronological order
        leap_year: Leap-year flag of the station-year

    Returns:
        Samples in input order

    Raises:
        MalformedRecord: If two consecutive timestamps do not strictly increase
        InvalidDate: If an observation carries an impossible date
    """
    minutes = [observation_minute(obs, leap_year) for obs in observations]

    samples: list[TempSample] = []
    for i, obs in enumerate(observations):
        if i + 1 < len(minutes):
            duration = minutes[i + 1] - minutes[i]
            if duration <= 0:
                nxt = observations[i + 1]
                raise MalformedRecord(
                    f"timestamp does not increase ({minutes[i]} -> {minutes[i + 1]} "
                    "minute of year)",
                    nxt.line_index,
                    "timestamp",
                )
        else:
            duration = MINUTES_PER_DAY - minutes[i] % MINUTES_PER_DAY
        samples.append(
            TempSample(
                temperature_tenths=obs.temperature_tenths,
                minute_of_year=minutes[i],
                duration_minutes=duration,
            )
        )
    return samples
