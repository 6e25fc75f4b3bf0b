import datetime
import json

import pytest

from uhppote_core.date_time import DateTime, datetime_now, parse_datetime


def test_now_has_no_subseconds():
    assert datetime_now().value.microsecond == 0


def test_parse_datetime():
    assert parse_datetime("2024-02-28 23:34:45") == DateTime(datetime.datetime(2024, 2, 28, 23, 34, 45))


@pytest.mark.parametrize("s", ["", "2024-02-28", "2024-02-30 10:00:00", "2024-02-28T23:34:45"])
def test_parse_datetime_invalid(s):
    with pytest.raises(ValueError):
        parse_datetime(s)


def test_before_ignores_subseconds():
    dt = DateTime(datetime.datetime(2021, 2, 28, 12, 34, 56, 345))
    reference = datetime.datetime(2021, 2, 28, 12, 34, 56, 678)
    assert not dt.before(reference)


def test_before():
    dt = DateTime(datetime.datetime(2021, 2, 28, 12, 34, 55))
    assert dt.before(datetime.datetime(2021, 2, 28, 12, 34, 56))
    assert DateTime().before(datetime.datetime(2000, 1, 1))


def test_add():
    dt = DateTime(datetime.datetime(2021, 2, 28, 12, 34, 56, 789))
    assert dt.add(datetime.timedelta(hours=3)) == DateTime(datetime.datetime(2021, 2, 28, 15, 34, 56))


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x20\x21\x02\x28\x12\x34\x56", "2021-02-28 12:34:56"),
        (b"\x00\x00\x00\x00\x00\x00\x00", ""),
        (b"\x20\x00\x00\x00\x00\x00\x00", ""),
        (b"\x20\x21\x02\x35\x12\x34\x56", ""),
    ],
)
def test_decode(data, expected):
    dt = DateTime.decode(data)
    assert str(dt) == expected
    assert dt.is_zero() is (expected == "")


def test_encode_round_trip():
    dt = parse_datetime("2021-02-28 12:34:56")
    assert dt.encode() == b"\x20\x21\x02\x28\x12\x34\x56"
    assert DateTime.decode(dt.encode()) == dt


def test_to_json_utc():
    dt = DateTime(datetime.datetime(2021, 2, 28, 12, 34, 56, 789, tzinfo=datetime.timezone.utc))
    assert json.dumps(dt.to_json()) == '"2021-02-28 12:34:56 UTC"'


def test_to_json_local():
    dt = DateTime(datetime.datetime(2021, 2, 28, 12, 34, 56, 789))
    s = dt.to_json()
    assert s.startswith("2021-02-28 12:34:56 ")
    assert len(s) > len("2021-02-28 12:34:56 ")


def test_to_json_zero():
    assert json.dumps(DateTime().to_json()) == '""'


@pytest.mark.parametrize(
    "text, expected",
    [
        ('"2021-02-28 12:34:56 UTC"', "2021-02-28 12:34:56"),
        ('"2021-02-28 12:34:56"', "2021-02-28 12:34:56"),
        ('""', ""),
    ],
)
def test_from_json(text, expected):
    assert str(DateTime.from_json(json.loads(text))) == expected


def test_from_json_utc_zone():
    dt = DateTime.from_json("2021-02-28 12:34:56 UTC")
    assert dt.value.utcoffset() == datetime.timedelta(0)


def test_from_json_invalid():
    with pytest.raises(ValueError):
        DateTime.from_json("yesterday")


def test_string():
    assert str(DateTime(datetime.datetime(2021, 2, 28, 12, 34, 56, 789))) == "2021-02-28 12:34:56"
    assert str(DateTime()) == ""