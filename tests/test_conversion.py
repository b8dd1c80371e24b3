# tests/test_conversion.py

import random
from datetime import date, timedelta

import pytest

from parsidate import GregorianConversionError, InvalidDateError, InvalidOrdinalError, ParsiDate
from parsidate.engines import conversion


@pytest.mark.parametrize(
    "gregorian, persian",
    [
        (date(622, 3, 21), (1, 1, 1)),
        (date(1925, 3, 21), (1304, 1, 1)),
        (date(1979, 2, 11), (1357, 11, 22)),
        (date(2000, 1, 1), (1378, 10, 11)),
        (date(2024, 3, 20), (1403, 1, 1)),
        (date(2024, 7, 23), (1403, 5, 2)),
        (date(2025, 3, 20), (1403, 12, 30)),
        (date(2025, 3, 21), (1404, 1, 1)),
        (date(9999, 12, 31), (9378, 10, 10)),
    ],
)
def test_known_conversions(gregorian, persian):
    p = ParsiDate.from_gregorian(gregorian)
    assert (p.year, p.month, p.day) == persian
    assert ParsiDate(*persian).to_gregorian() == gregorian


def test_absolute_day_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jdn_in = random.randint(conversion.MIN_JDN, conversion.MAX_JDN)
        ymd = conversion.from_absolute_day(jdn_in)
        assert conversion.to_absolute_day(*ymd) == jdn_in


def test_gregorian_roundtrip():
    random.seed(7)
    start = date(622, 3, 21)
    span = (date(9999, 12, 31) - start).days
    for _ in range(5000):
        g = start + timedelta(days=random.randint(0, span))
        assert ParsiDate.from_gregorian(g).to_gregorian() == g


def test_consecutive_days_are_contiguous():
    # walk across a leap Esfand and a common one
    jdn = ParsiDate(1403, 12, 28).to_absolute_day()
    labels = [conversion.from_absolute_day(jdn + k) for k in range(4)]
    assert labels == [(1403, 12, 28), (1403, 12, 29), (1403, 12, 30), (1404, 1, 1)]
    jdn = ParsiDate(1404, 12, 29).to_absolute_day()
    assert conversion.from_absolute_day(jdn + 1) == (1405, 1, 1)


def test_range_limits():
    assert ParsiDate(1, 1, 1).to_absolute_day() == conversion.EPOCH_JDN == 1948320
    assert ParsiDate(9999, 12, 29).to_absolute_day() == conversion.MAX_JDN == 5600378
    with pytest.raises(GregorianConversionError):
        conversion.from_absolute_day(conversion.MIN_JDN - 1)
    with pytest.raises(GregorianConversionError):
        conversion.from_absolute_day(conversion.MAX_JDN + 1)


def test_before_epoch_fails():
    with pytest.raises(GregorianConversionError):
        ParsiDate.from_gregorian(date(622, 3, 20))


def test_beyond_gregorian_range_fails():
    # representable in Persian, but after 9999-12-31
    with pytest.raises(GregorianConversionError):
        ParsiDate(9378, 10, 11).to_gregorian()
    with pytest.raises(GregorianConversionError):
        ParsiDate(9999, 12, 29).to_gregorian()


def test_weekday():
    assert ParsiDate(1403, 1, 4).weekday_number() == 0  # Saturday
    assert ParsiDate(1403, 1, 1).weekday_number() == 4  # Wednesday
    assert ParsiDate(1404, 1, 1).weekday_number() == 6  # Friday
    assert ParsiDate(1403, 1, 7).weekday() == "سه‌شنبه"
    assert ParsiDate(1403, 5, 2).weekday() == "سه‌شنبه"


def test_ordinal():
    assert ParsiDate(1403, 1, 1).ordinal() == 1
    assert ParsiDate(1403, 5, 2).ordinal() == 126
    assert ParsiDate(1403, 7, 1).ordinal() == 187
    assert ParsiDate(1403, 12, 30).ordinal() == 366
    assert ParsiDate(1404, 12, 29).ordinal() == 365


def test_from_ordinal():
    assert ParsiDate.from_ordinal(1403, 366) == ParsiDate(1403, 12, 30)
    assert ParsiDate.from_ordinal(1403, 126) == ParsiDate(1403, 5, 2)
    with pytest.raises(InvalidOrdinalError):
        ParsiDate.from_ordinal(1404, 366)
    with pytest.raises(InvalidOrdinalError):
        ParsiDate.from_ordinal(1403, 0)
    with pytest.raises(InvalidDateError):
        ParsiDate.from_ordinal(0, 1)


@pytest.mark.parametrize(
    "ymd, week",
    [
        ((1403, 1, 1), 1),
        ((1403, 1, 3), 1),
        ((1403, 1, 4), 2),
        ((1403, 5, 2), 19),
        ((1403, 12, 30), 53),
        ((1404, 1, 1), 1),
        ((1404, 1, 2), 2),
        ((1404, 12, 28), 53),
    ],
)
def test_week_of_year(ymd, week):
    assert ParsiDate(*ymd).week_of_year() == week
