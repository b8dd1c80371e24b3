"""
parsidate.engines.leap
----------------------
Leap-year rules and month lengths for both calendars.

The Persian rule is the fixed 33-year cycle approximation: a year is leap
when its remainder mod 33 falls in LEAP_REMAINDERS. Every cycle therefore
holds exactly 8 leap years (12053 days), which the conversion core uses to
skip whole cycles.
"""

from __future__ import annotations

from typing import Tuple

MIN_YEAR = 1
MAX_YEAR = 9999

CYCLE_YEARS = 33
LEAP_REMAINDERS = frozenset({1, 5, 9, 13, 17, 22, 26, 30})
CYCLE_DAYS = 365 * CYCLE_YEARS + len(LEAP_REMAINDERS)  # 12053

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_persian_leap(year: int) -> bool:
    if year <= 0:
        return False
    return (year % CYCLE_YEARS) in LEAP_REMAINDERS


def is_gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Persian month length: 31 for months 1-6, 30 for 7-11, 29/30 for Esfand; 0 for a bad month."""
    if 1 <= month <= 6:
        return 31
    if 7 <= month <= 11:
        return 30
    if month == 12:
        return 30 if is_persian_leap(year) else 29
    return 0


def gregorian_days_in_month(year: int, month: int) -> int:
    if not (1 <= month <= 12):
        return 0
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def month_lengths(year: int) -> Tuple[int, ...]:
    return (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30 if is_persian_leap(year) else 29)


def days_in_year(year: int) -> int:
    return 366 if is_persian_leap(year) else 365


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        return False
    if not (1 <= month <= 12):
        return False
    return 1 <= day <= days_in_month(year, month)


def is_valid_hms(hour: int, minute: int, second: int) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59
