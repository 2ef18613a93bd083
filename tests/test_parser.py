"""Tests for the ISD fixed-width parser.

These tests verify that:
1. Every field is read from its documented offset
2. Short lines and undecodable numbers are rejected outright
3. Errors name the line and field that failed
"""

from collections.abc import Callable

import pytest

from sweat.errors import MalformedRecord
from sweat.records import ISD_FIELDS, MIN_RECORD_LENGTH, extract_fields, parse_line
from sweat.records.schema import FieldSpec, decode_signed, decode_unsigned

LineFactory = Callable[..., str]


def test_schema_covers_expected_fields() -> None:
    names = [spec.name for spec in ISD_FIELDS]
    assert names == [
        "year",
        "month",
        "day",
        "hour",
        "minute",
        "quality_version",
        "temperature_tenths",
        "quality_flag",
    ]
    assert MIN_RECORD_LENGTH == 93


def test_parse_line_fields(make_line: LineFactory) -> None:
    obs = parse_line(make_line(date="20220315", time="1453", temp=-56, qc="V030"), 4)
    assert obs.year == 2022
    assert obs.month == 3
    assert obs.day == 15
    assert obs.hour == 14
    assert obs.minute == 53
    assert obs.temperature_tenths == -56
    assert obs.temperature == pytest.approx(-5.6)
    assert obs.quality_version == "V03"
    assert obs.quality_flag == "5"
    assert obs.line_index == 4


def test_parse_line_ignores_trailing_newline(make_line: LineFactory) -> None:
    obs = parse_line(make_line(temp=235) + "\n")
    assert obs.temperature_tenths == 235


def test_parse_line_minimum_length_is_enough(make_line: LineFactory) -> None:
    obs = parse_line(make_line(temp=12)[:93])
    assert obs.temperature_tenths == 12


def test_short_line_raises(make_line: LineFactory) -> None:
    with pytest.raises(MalformedRecord) as excinfo:
        parse_line(make_line()[:92], 11)
    assert excinfo.value.line_index == 11
    assert "92 characters" in str(excinfo.value)


def test_empty_line_raises() -> None:
    with pytest.raises(MalformedRecord):
        parse_line("")


@pytest.mark.parametrize(
    "start, replacement, field",
    [
        (15, "20X2", "year"),
        (19, " 1", "month"),
        (23, "1_", "hour"),
        (87, "+02 5", "temperature_tenths"),
        (87, "++235", "temperature_tenths"),
    ],
)
def test_bad_numeric_field_raises(
    make_line: LineFactory, start: int, replacement: str, field: str
) -> None:
    line = make_line()
    line = line[:start] + replacement + line[start + len(replacement) :]
    with pytest.raises(MalformedRecord) as excinfo:
        parse_line(line, 2)
    assert excinfo.value.field == field
    assert excinfo.value.line_index == 2


@pytest.mark.parametrize("time, field", [("2400", "hour"), ("1260", "minute")])
def test_out_of_range_clock_raises(make_line: LineFactory, time: str, field: str) -> None:
    with pytest.raises(MalformedRecord) as excinfo:
        parse_line(make_line(time=time))
    assert excinfo.value.field == field


def test_missing_temperature_sentinel_still_parses(make_line: LineFactory) -> None:
    # +9999 marks a missing reading; it is decoded and left to the quality filter
    obs = parse_line(make_line(temp=9999, flag="9"))
    assert obs.temperature_tenths == 9999
    assert obs.quality_flag == "9"


def test_extract_fields_custom_layout() -> None:
    layout = (FieldSpec("a", 0, 2, decode_unsigned), FieldSpec("b", 2, 3, decode_signed))
    assert extract_fields("07-12", layout) == {"a": 7, "b": -12}
