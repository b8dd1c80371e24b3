# tests/test_leap.py

import pytest

from parsidate.engines import leap


@pytest.mark.parametrize("year", [1399, 1403, 1408, 1375, 1, 5, 30])
def test_leap_years(year):
    assert leap.is_persian_leap(year)


@pytest.mark.parametrize("year", [1400, 1401, 1402, 1404, 9999, 33, 2])
def test_common_years(year):
    assert not leap.is_persian_leap(year)


@pytest.mark.parametrize("year", [0, -1, -33, -32])
def test_non_positive_years_are_never_leap(year):
    assert not leap.is_persian_leap(year)


def test_eight_leaps_per_cycle():
    for start in (1, 34, 1387, 9934):
        leaps = [y for y in range(start, start + 33) if leap.is_persian_leap(y)]
        assert len(leaps) == 8
    assert leap.CYCLE_DAYS == 12053


def test_month_lengths():
    assert [leap.days_in_month(1403, m) for m in range(1, 13)] == [31] * 6 + [30] * 6
    assert leap.days_in_month(1404, 12) == 29
    assert leap.days_in_month(1403, 13) == 0
    assert leap.days_in_month(1403, 0) == 0
    assert sum(leap.month_lengths(1403)) == 366
    assert sum(leap.month_lengths(1404)) == 365


def test_gregorian_leap():
    assert leap.is_gregorian_leap(2024)
    assert leap.is_gregorian_leap(2000)
    assert not leap.is_gregorian_leap(1900)
    assert leap.gregorian_days_in_month(2024, 2) == 29
    assert leap.gregorian_days_in_month(2023, 2) == 28


def test_validity():
    assert leap.is_valid_ymd(1403, 12, 30)
    assert not leap.is_valid_ymd(1404, 12, 30)
    assert not leap.is_valid_ymd(0, 1, 1)
    assert not leap.is_valid_ymd(10000, 1, 1)
    assert not leap.is_valid_ymd(1403, 7, 31)
    assert leap.is_valid_hms(23, 59, 59)
    assert not leap.is_valid_hms(24, 0, 0)
    assert not leap.is_valid_hms(0, 60, 0)


def test_esfand_length_follows_leap_rule():
    for year in range(1, 10000):
        assert (leap.days_in_month(year, 12) == 30) == leap.is_persian_leap(year)
        assert leap.days_in_year(year) == sum(leap.month_lengths(year))
