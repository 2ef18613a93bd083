"""End-to-end tests of the station-year pipeline."""

from collections.abc import Callable

import pytest

from sweat.errors import InsufficientData, InvalidDate, MalformedRecord
from sweat.pipeline import analyze_station, compare_locations, parse_records

LineFactory = Callable[..., str]


def test_two_day_scenario(two_day_lines: list[str]) -> None:
    report = analyze_station(two_day_lines, "13904")

    assert report.location == "13904"
    assert report.year == 2022
    assert report.leap_year is False
    assert len(report.days) == 365
    assert report.days[0].mean == pytest.approx(20.0)
    assert report.days[0].standard_deviation == 0.0
    assert report.days[1].mean == pytest.approx(30.0)
    assert report.days[1].standard_deviation == 0.0
    assert all(day.is_empty for day in report.days[2:])

    stats = report.statistics
    assert stats.valid_days == 2
    assert stats.daily_means.mean == pytest.approx(25.0)
    assert stats.daily_means.standard_deviation == pytest.approx(5.0)
    assert stats.daily_deviations.mean == 0.0
    assert stats.daily_deviations.standard_deviation == 0.0


def test_rejected_records_do_not_contribute(make_line: LineFactory) -> None:
    lines = [
        make_line(time="0000", temp=100),
        make_line(time="0600", temp=9999, flag="9"),
        make_line(time="1200", temp=300, qc="V010"),
        make_line(time="1800", temp=100),
    ]
    report = analyze_station(lines, "KAUS")
    assert report.accepted == 2
    assert report.rejected == 2
    assert report.days[0].mean == pytest.approx(10.0)
    assert report.days_with_data == [(1, report.days[0])]


def test_rejected_records_are_not_checked_for_ordering(make_line: LineFactory) -> None:
    lines = [
        make_line(time="0600", temp=100),
        make_line(time="0600", temp=120, flag="2"),
        make_line(time="1200", temp=100),
    ]
    assert analyze_station(lines, "x").accepted == 2


def test_leap_year_report(make_line: LineFactory) -> None:
    report = analyze_station([make_line(date="20241231", time="1200", temp=50)], "x")
    assert report.leap_year is True
    assert len(report.days) == 366
    assert report.days[365].mean == pytest.approx(5.0)


def test_mixed_years_raise(make_line: LineFactory) -> None:
    lines = [make_line(date="20221231", time="2300"), make_line(date="20230101", time="0000")]
    with pytest.raises(MalformedRecord) as excinfo:
        parse_records(lines)
    assert excinfo.value.line_index == 1
    assert excinfo.value.field == "year"


def test_short_line_aborts_location(make_line: LineFactory) -> None:
    with pytest.raises(MalformedRecord) as excinfo:
        analyze_station([make_line(), make_line(time="0100")[:60]], "x")
    assert excinfo.value.line_index == 1


def test_invalid_date_aborts_location(make_line: LineFactory) -> None:
    with pytest.raises(InvalidDate):
        analyze_station([make_line(date="20220229")], "x")


def test_nothing_admissible_raises(make_line: LineFactory) -> None:
    with pytest.raises(InsufficientData) as excinfo:
        analyze_station([make_line(flag="9"), make_line(time="0100", flag="9")], "12960")
    assert excinfo.value.location == "12960"


def test_empty_input_raises() -> None:
    with pytest.raises(InsufficientData):
        analyze_station([], "x")


def test_compare_locations_is_independent(two_day_lines: list[str], make_line: LineFactory) -> None:
    other = [make_line(date="20220601", time="0000", temp=-40, wban="12960")]
    forward = compare_locations({"13904": two_day_lines, "12960": other})
    backward = compare_locations({"12960": other, "13904": two_day_lines})

    assert [r.location for r in forward] == ["13904", "12960"]
    assert [r.location for r in backward] == ["12960", "13904"]
    assert forward[0].statistics == backward[1].statistics
    assert forward[1].statistics == backward[0].statistics
    assert forward[1].statistics.daily_means.mean == pytest.approx(-4.0)
