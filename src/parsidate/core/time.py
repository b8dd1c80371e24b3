from __future__ import annotations
from datetime import date

from .errors import GregorianConversionError

# date.min / date.max as Julian Day Numbers
JDN_DATE_MIN = 1721426
JDN_DATE_MAX = 5373484

SECONDS_PER_DAY = 86400


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    if not (JDN_DATE_MIN <= jdn <= JDN_DATE_MAX):
        raise GregorianConversionError(f"JDN {jdn} has no datetime.date counterpart")
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)


def seconds_of_day(t) -> int:
    """Whole seconds since midnight for anything with hour/minute/second (microseconds dropped)."""
    return t.hour * 3600 + t.minute * 60 + t.second


def split_seconds(total: int) -> tuple[int, int, int, int]:
    """
    Split a signed second count into (day_carry, hour, minute, second).

    The day carry uses floor division so a negative total borrows from the
    previous day: -1 -> (-1, 23, 59, 59).
    """
    days, rem = divmod(total, SECONDS_PER_DAY)
    hour, rem = divmod(rem, 3600)
    minute, second = divmod(rem, 60)
    return days, hour, minute, second
