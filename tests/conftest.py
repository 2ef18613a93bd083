from collections.abc import Callable

import pytest

LineFactory = Callable[..., str]


def isd_line(
    date: str = "20220101",
    time: str = "0000",
    temp: int = 235,
    qc: str = "V020",
    flag: str = "5",
    wban: str = "13904",
) -> str:
    """Build a 105-character ISD record (mandatory section only)."""
    return (
        "0105"  # variable data length
        "722540"  # USAF
        f"{wban}"
        f"{date}"
        f"{time}"
        "4"  # source flag
        "+30183"  # latitude
        "-097680"  # longitude
        "FM-15"  # report type
        "+0151"  # elevation
        "KAUS "  # call letters
        f"{qc}"
        "180"  # wind direction
        "5N00465"  # wind quality, type, speed, speed quality
        "220005"  # ceiling and quality
        "9N"  # ceiling determination, CAVOK
        "016093"  # visibility
        "5N5"  # visibility quality, variability, quality
        f"{temp:+05d}"
        f"{flag}"
        "+01785"  # dew point and quality
        "101325"  # sea level pressure and quality
    )


@pytest.fixture
def make_line() -> LineFactory:
    return isd_line


@pytest.fixture
def two_day_lines() -> list[str]:
    """Jan 1 00:00 at 20.0 and Jan 2 00:00 at 30.0, both passing QC."""
    return [
        isd_line(date="20220101", time="0000", temp=200),
        isd_line(date="20220102", time="0000", temp=300),
    ]
