from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from .core.date import ParsiDate
from .core.date_time import ParsiDateTime
from .core.zoned import TzLike, ZonedParsiDateTime
from .engines import conversion, leap


def to_persian(d: date) -> ParsiDate:
    """Gregorian date -> ParsiDate. A datetime argument keeps only its date."""
    if isinstance(d, datetime):
        d = d.date()
    return ParsiDate.from_gregorian(d)


def to_gregorian(year: int, month: int, day: int) -> date:
    return ParsiDate(year, month, day).to_gregorian()


def today() -> ParsiDate:
    return ParsiDate.today()


def now(tz: Optional[TzLike] = None):
    """Local wall-clock ParsiDateTime, or a ZonedParsiDateTime when `tz` is given."""
    if tz is None:
        return ParsiDateTime.now()
    return ZonedParsiDateTime.now(tz)


def format_date(d: ParsiDate, pattern: str = "short") -> str:
    return d.format(pattern)


def parse_date(text: str, pattern: str) -> ParsiDate:
    return ParsiDate.parse(text, pattern)


def parse_datetime(text: str, pattern: str) -> ParsiDateTime:
    return ParsiDateTime.parse(text, pattern)


def is_persian_leap_year(year: int) -> bool:
    return leap.is_persian_leap(year)


def days_in_month(year: int, month: int) -> int:
    return leap.days_in_month(year, month)


def month_calendar(year: int, month: int) -> List[List[Optional[ParsiDate]]]:
    """
    Weeks of one Persian month, Saturday first.

    Each week has seven slots; days that belong to the neighbouring months
    are None.
    """
    first = ParsiDate(year, month, 1)
    pad = conversion.weekday(first.to_absolute_day())
    n_days = leap.days_in_month(year, month)

    weeks: List[List[Optional[ParsiDate]]] = []
    wk: List[Optional[ParsiDate]] = [None] * pad
    for day in range(1, n_days + 1):
        wk.append(ParsiDate.new_unchecked(year, month, day))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        wk.extend([None] * (7 - len(wk)))
        weeks.append(wk)
    return weeks
