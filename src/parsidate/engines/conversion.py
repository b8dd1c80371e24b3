"""
parsidate.engines.conversion
----------------------------
Maps Persian (year, month, day) labels to absolute day numbers and back.

The absolute day number is the Julian Day Number (JDN), the same count the
Gregorian helpers in parsidate.core.time use, so both calendars meet on a
single integer line. The anchor correspondence is

    Persian 0001-01-01 == Gregorian 0622-03-21 == JDN 1948320.
"""

from __future__ import annotations

from datetime import date
from typing import Tuple

from parsidate.core.errors import GregorianConversionError, InvalidDateError, InvalidOrdinalError
from parsidate.core.time import from_jdn, to_jdn
from parsidate.engines.leap import (
    CYCLE_DAYS,
    CYCLE_YEARS,
    MAX_YEAR,
    MIN_YEAR,
    days_in_year,
    is_valid_ymd,
    month_lengths,
)

YMD = Tuple[int, int, int]

EPOCH_YEAR = 1
EPOCH_JDN = 1948320
# 1403-01-04, a Saturday
KNOWN_SATURDAY_JDN = 2460393

# _CYCLE_PREFIX[r] = days in years 1..r of a cycle (the pattern repeats every 33 years)
_CYCLE_PREFIX = [0]
for _y in range(1, CYCLE_YEARS + 1):
    _CYCLE_PREFIX.append(_CYCLE_PREFIX[-1] + days_in_year(_y))
del _y


def _days_before_year(year: int) -> int:
    """Signed day count from the start of EPOCH_YEAR to the start of `year`."""
    q, r = divmod(year - EPOCH_YEAR, CYCLE_YEARS)
    return q * CYCLE_DAYS + _CYCLE_PREFIX[r]


def _ordinal_offset(year: int, month: int, day: int) -> int:
    """0-based day index within the year."""
    return sum(month_lengths(year)[: month - 1]) + day - 1


def to_absolute_day(year: int, month: int, day: int) -> int:
    """Absolute day (JDN) of a Persian date. The date must be valid."""
    if not is_valid_ymd(year, month, day):
        raise InvalidDateError(f"invalid Persian date {year:04d}/{month:02d}/{day:02d}")
    return EPOCH_JDN + _days_before_year(year) + _ordinal_offset(year, month, day)


MIN_JDN = EPOCH_JDN
MAX_JDN = EPOCH_JDN + _days_before_year(MAX_YEAR + 1) - 1


def from_absolute_day(jdn: int) -> YMD:
    """
    Inverse of to_absolute_day.

    Whole 33-year cycles are peeled off first, then single years, then months.
    """
    if not (MIN_JDN <= jdn <= MAX_JDN):
        raise GregorianConversionError(
            f"absolute day {jdn} is outside Persian years {MIN_YEAR}..{MAX_YEAR}"
        )
    cycles, rem = divmod(jdn - EPOCH_JDN, CYCLE_DAYS)
    year = EPOCH_YEAR + cycles * CYCLE_YEARS

    while rem >= days_in_year(year):
        rem -= days_in_year(year)
        year += 1

    month = 1
    for length in month_lengths(year):
        if rem < length:
            break
        rem -= length
        month += 1

    return year, month, rem + 1


# ---------------------------------------------------------
# Gregorian bridge
# ---------------------------------------------------------

def gregorian_to_persian(g: date) -> YMD:
    jdn = to_jdn(g)
    if jdn < MIN_JDN:
        raise GregorianConversionError(f"{g.isoformat()} precedes the Persian epoch (0622-03-21)")
    return from_absolute_day(jdn)


def persian_to_gregorian(year: int, month: int, day: int) -> date:
    return from_jdn(to_absolute_day(year, month, day))


# ---------------------------------------------------------
# Derived fields
# ---------------------------------------------------------

def weekday(jdn: int) -> int:
    """Weekday number with Saturday == 0 ... Friday == 6."""
    return (jdn - KNOWN_SATURDAY_JDN) % 7


def ordinal(year: int, month: int, day: int) -> int:
    """1-based day of year (1..366)."""
    return to_absolute_day(year, month, day) - to_absolute_day(year, 1, 1) + 1


def week_of_year(year: int, month: int, day: int) -> int:
    """
    Saturday-to-Friday weeks counted from Farvardin 1st.

    The (possibly partial) week holding Farvardin 1st is week 1, so the
    result runs 1..53.
    """
    first_wd = weekday(to_absolute_day(year, 1, 1))
    return (ordinal(year, month, day) + first_wd - 1) // 7 + 1


def from_ordinal(year: int, ordinal_day: int) -> YMD:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidDateError(f"year {year} outside {MIN_YEAR}..{MAX_YEAR}")
    if not (1 <= ordinal_day <= days_in_year(year)):
        raise InvalidOrdinalError(
            f"ordinal {ordinal_day} outside 1..{days_in_year(year)} for year {year}"
        )
    return from_absolute_day(to_absolute_day(year, 1, 1) + ordinal_day - 1)
