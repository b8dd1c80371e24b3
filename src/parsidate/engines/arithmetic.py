"""
parsidate.engines.arithmetic
----------------------------
Day, month and year shifts on validated Persian (year, month, day) triples.

Month and year shifts never go through the absolute day count: the
(year, month) label is moved first and the day is clamped afterwards.
"""

from __future__ import annotations

from parsidate.core.errors import ArithmeticOverflowError
from parsidate.engines.conversion import MAX_JDN, MIN_JDN, YMD, from_absolute_day, to_absolute_day
from parsidate.engines.leap import MAX_YEAR, MIN_YEAR, days_in_month, is_persian_leap


def _check_count(n: int) -> None:
    # bool is an int subclass; reject it along with floats
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer count, got {type(n).__name__}")


def _check_year(year: int) -> None:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise ArithmeticOverflowError(f"resulting year {year} outside {MIN_YEAR}..{MAX_YEAR}")


def add_days(year: int, month: int, day: int, n: int) -> YMD:
    _check_count(n)
    target = to_absolute_day(year, month, day) + n
    if not (MIN_JDN <= target <= MAX_JDN):
        raise ArithmeticOverflowError(f"adding {n} days leaves years {MIN_YEAR}..{MAX_YEAR}")
    return from_absolute_day(target)


def sub_days(year: int, month: int, day: int, n: int) -> YMD:
    _check_count(n)
    return add_days(year, month, day, -n)


def add_months(year: int, month: int, day: int, n: int) -> YMD:
    _check_count(n)
    to_absolute_day(year, month, day)  # validates the source
    target_year, month0 = divmod(year * 12 + (month - 1) + n, 12)
    _check_year(target_year)
    target_month = month0 + 1
    return target_year, target_month, min(day, days_in_month(target_year, target_month))


def sub_months(year: int, month: int, day: int, n: int) -> YMD:
    _check_count(n)
    return add_months(year, month, day, -n)


def add_years(year: int, month: int, day: int, n: int) -> YMD:
    _check_count(n)
    to_absolute_day(year, month, day)
    target_year = year + n
    _check_year(target_year)
    if month == 12 and day == 30 and not is_persian_leap(target_year):
        day = 29
    return target_year, month, day


def sub_years(year: int, month: int, day: int, n: int) -> YMD:
    _check_count(n)
    return add_years(year, month, day, -n)


def days_between(a: YMD, b: YMD) -> int:
    """Absolute number of days separating two dates."""
    return abs(to_absolute_day(*a) - to_absolute_day(*b))
