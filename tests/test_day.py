from datetime import datetime, timedelta, timezone

import pytest

from everybody_codes.day import Day, DayFromStrError, all_days


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def test_all_days_iterator():
    days = list(all_days())
    assert days == [Day(n) for n in range(1, 26)]
    assert int(days[0]) == 1
    assert int(days[-1]) == 25


def test_all_days_iterator_is_exhausted():
    iterator = all_days()
    for expected in range(1, 26):
        assert next(iterator) == Day(expected)
    assert next(iterator, None) is None


def test_display_is_two_digits():
    assert str(Day(8)) == "08"
    assert str(Day(25)) == "25"


@pytest.mark.parametrize("value", [0, 26, -1, 255])
def test_out_of_range_values_rejected(value):
    with pytest.raises(ValueError):
        Day(value)


@pytest.mark.parametrize("text,expected", [("1", 1), ("08", 8), ("25", 25), ("+3", 3)])
def test_parse_valid(text, expected):
    assert Day.parse(text) == Day(expected)


@pytest.mark.parametrize("text", ["0", "26", "", "abc", " 5", "-1", "1.0", "300"])
def test_parse_invalid(text):
    with pytest.raises(DayFromStrError) as info:
        Day.parse(text)
    assert str(info.value) == "expecting a day number between 1 and 25"


def test_compare_with_int():
    assert Day(5) == 5
    assert Day(5) < 6
    assert Day(5) > 4
    assert Day(5) <= 5


def test_ordering_and_hashing():
    assert sorted([Day(3), Day(1), Day(2)]) == [Day(1), Day(2), Day(3)]
    assert len({Day(1), Day(1), Day(2)}) == 2
    assert Day(4) in {Day(4)}


def test_today_first_release():
    assert Day.today(utc(2024, 11, 4, 23, 0)) == Day(1)


def test_today_before_first_release():
    assert Day.today(utc(2024, 11, 4, 22, 59)) is None


def test_today_end_of_first_week():
    assert Day.today(utc(2024, 11, 8, 23, 0)) == Day(5)


def test_today_weekend_is_none():
    assert Day.today(utc(2024, 11, 9, 23, 0)) is None


def test_today_skips_weekend_in_count():
    assert Day.today(utc(2024, 11, 11, 23, 0)) == Day(6)


def test_today_last_day():
    assert Day.today(utc(2024, 11, 29, 23, 0)) == Day(20)


def test_today_outside_november():
    assert Day.today(utc(2024, 12, 2, 23, 0)) is None
    assert Day.today(utc(2024, 6, 3, 23, 0)) is None


def test_today_converts_other_timezones():
    tz = timezone(timedelta(hours=1))
    assert Day.today(datetime(2024, 11, 5, 0, 0, tzinfo=tz)) == Day(1)