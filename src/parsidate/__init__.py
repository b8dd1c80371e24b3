"""parsidate public API.

Keep this surface small: users should mostly interact with the types and
functions re-exported here.
"""

from .api import (
    to_persian,
    to_gregorian,
    today,
    now,
    format_date,
    parse_date,
    parse_datetime,
    is_persian_leap_year,
    days_in_month,
    month_calendar,
)
from .core.date import ParsiDate
from .core.date_time import ParsiDateTime
from .core.zoned import ZonedParsiDateTime
from .core.types import ParseErrorKind, Season
from .core.errors import (
    ParsiDateError,
    InvalidDateError,
    InvalidTimeError,
    GregorianConversionError,
    ArithmeticOverflowError,
    InvalidOrdinalError,
    ParseError,
)

__version__ = "0.1.0"

__all__ = [
    "to_persian",
    "to_gregorian",
    "today",
    "now",
    "format_date",
    "parse_date",
    "parse_datetime",
    "is_persian_leap_year",
    "days_in_month",
    "month_calendar",
    "ParsiDate",
    "ParsiDateTime",
    "ZonedParsiDateTime",
    "ParseErrorKind",
    "Season",
    "ParsiDateError",
    "InvalidDateError",
    "InvalidTimeError",
    "GregorianConversionError",
    "ArithmeticOverflowError",
    "InvalidOrdinalError",
    "ParseError",
]
