from sweat.errors import InsufficientData, InvalidDate, MalformedRecord, SweatError


def test_malformed_record_str_includes_context() -> None:
    err = MalformedRecord("not a base-10 integer", line_index=7, field="hour")
    assert str(err) == "[line 7, field 'hour'] not a base-10 integer"
    assert err.line_index == 7
    assert err.field == "hour"
    assert isinstance(err, SweatError)


def test_malformed_record_without_context() -> None:
    err = MalformedRecord("bad")
    assert str(err) == "bad"
    assert err.line_index is None
    assert err.field is None


def test_invalid_date_carries_date() -> None:
    err = InvalidDate(2, 30, line_index=3, field="day")
    assert err.month == 2
    assert err.day == 30
    assert err.field == "day"
    assert str(err) == "[line 3, field 'day'] invalid date month=2 day=30"


def test_insufficient_data_for_location() -> None:
    err = InsufficientData("no day with valid observations")
    labelled = err.for_location("13904")
    assert str(labelled) == "13904: no day with valid observations"
    assert labelled.location == "13904"
    assert err.location is None
