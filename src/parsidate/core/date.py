from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from .errors import InvalidDateError, ParseError
from .types import ParseErrorKind, Season
from parsidate.engines import arithmetic, conversion, leap
from parsidate.engines.formatting import format_fields, parse_fields

_STYLES = {
    "short": "%Y/%m/%d",
    "iso": "%Y-%m-%d",
}


@dataclass(frozen=True, order=True)
class ParsiDate:
    """
    A date in the Persian (Jalali) calendar, years 1..9999.

    The constructor validates; ``new_unchecked`` does not and is meant only
    for callers that already know the fields are valid. Every other way of
    producing a ParsiDate (conversion, arithmetic, parsing) returns a
    validated value.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not leap.is_valid_ymd(self.year, self.month, self.day):
            raise InvalidDateError(
                f"invalid Persian date {self.year}/{self.month}/{self.day}"
            )

    @classmethod
    def new_unchecked(cls, year: int, month: int, day: int) -> "ParsiDate":
        """Build without validation. The caller guarantees the fields form a valid date."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "year", year)
        object.__setattr__(obj, "month", month)
        object.__setattr__(obj, "day", day)
        return obj

    def is_valid(self) -> bool:
        return leap.is_valid_ymd(self.year, self.month, self.day)

    def _require_valid(self) -> None:
        if not self.is_valid():
            raise InvalidDateError(f"invalid Persian date {self.year}/{self.month}/{self.day}")

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    @classmethod
    def from_gregorian(cls, g: date) -> "ParsiDate":
        return cls.new_unchecked(*conversion.gregorian_to_persian(g))

    def to_gregorian(self) -> date:
        self._require_valid()
        return conversion.persian_to_gregorian(self.year, self.month, self.day)

    @classmethod
    def from_absolute_day(cls, jdn: int) -> "ParsiDate":
        return cls.new_unchecked(*conversion.from_absolute_day(jdn))

    def to_absolute_day(self) -> int:
        """Julian Day Number of this date."""
        return conversion.to_absolute_day(self.year, self.month, self.day)

    @classmethod
    def from_ordinal(cls, year: int, ordinal: int) -> "ParsiDate":
        return cls.new_unchecked(*conversion.from_ordinal(year, ordinal))

    @classmethod
    def today(cls) -> "ParsiDate":
        return cls.from_gregorian(date.today())

    # ---------------------------------------------------------
    # Calendar facts
    # ---------------------------------------------------------

    @staticmethod
    def is_persian_leap_year(year: int) -> bool:
        return leap.is_persian_leap(year)

    @staticmethod
    def is_gregorian_leap_year(year: int) -> bool:
        return leap.is_gregorian_leap(year)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        return leap.days_in_month(year, month)

    def is_leap_year(self) -> bool:
        return leap.is_persian_leap(self.year)

    def weekday_number(self) -> int:
        """0 (Saturday) .. 6 (Friday)."""
        return conversion.weekday(self.to_absolute_day())

    def weekday(self) -> str:
        return self.format("%A")

    def ordinal(self) -> int:
        return conversion.ordinal(self.year, self.month, self.day)

    def season(self) -> Season:
        self._require_valid()
        return Season.from_month(self.month)

    def week_of_year(self) -> int:
        return conversion.week_of_year(self.year, self.month, self.day)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add_days(self, days: int) -> "ParsiDate":
        return self.new_unchecked(*arithmetic.add_days(self.year, self.month, self.day, days))

    def sub_days(self, days: int) -> "ParsiDate":
        return self.new_unchecked(*arithmetic.sub_days(self.year, self.month, self.day, days))

    def add_months(self, months: int) -> "ParsiDate":
        return self.new_unchecked(*arithmetic.add_months(self.year, self.month, self.day, months))

    def sub_months(self, months: int) -> "ParsiDate":
        return self.new_unchecked(*arithmetic.sub_months(self.year, self.month, self.day, months))

    def add_years(self, years: int) -> "ParsiDate":
        return self.new_unchecked(*arithmetic.add_years(self.year, self.month, self.day, years))

    def sub_years(self, years: int) -> "ParsiDate":
        return self.new_unchecked(*arithmetic.sub_years(self.year, self.month, self.day, years))

    def days_between(self, other: "ParsiDate") -> int:
        return arithmetic.days_between(
            (self.year, self.month, self.day), (other.year, other.month, other.day)
        )

    # ---------------------------------------------------------
    # Field replacement and boundaries
    # ---------------------------------------------------------

    def with_year(self, year: int) -> "ParsiDate":
        self._require_valid()
        day = self.day
        if self.month == 12 and day == 30 and not leap.is_persian_leap(year):
            day = 29
        return ParsiDate(year, self.month, day)

    def with_month(self, month: int) -> "ParsiDate":
        self._require_valid()
        if not (1 <= month <= 12):
            raise InvalidDateError(f"month {month} outside 1..12")
        return ParsiDate(self.year, month, min(self.day, leap.days_in_month(self.year, month)))

    def with_day(self, day: int) -> "ParsiDate":
        self._require_valid()
        return ParsiDate(self.year, self.month, day)

    def first_day_of_month(self) -> "ParsiDate":
        self._require_valid()
        return self.new_unchecked(self.year, self.month, 1)

    def last_day_of_month(self) -> "ParsiDate":
        self._require_valid()
        return self.new_unchecked(self.year, self.month, leap.days_in_month(self.year, self.month))

    def first_day_of_year(self) -> "ParsiDate":
        self._require_valid()
        return self.new_unchecked(self.year, 1, 1)

    def last_day_of_year(self) -> "ParsiDate":
        self._require_valid()
        return self.new_unchecked(self.year, 12, leap.days_in_month(self.year, 12))

    def start_of_season(self) -> "ParsiDate":
        season = self.season()
        return self.new_unchecked(self.year, season.start_month, 1)

    def end_of_season(self) -> "ParsiDate":
        season = self.season()
        end = season.end_month
        return self.new_unchecked(self.year, end, leap.days_in_month(self.year, end))

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def format(self, style_or_pattern: str = "short") -> str:
        """
        Render as one of the named styles ``short`` (1403/05/02), ``long``
        (2 مرداد 1403, day not padded) and ``iso`` (1403-05-02), or through a
        strftime-style pattern. Time specifiers are copied through literally.
        """
        self._require_valid()
        if style_or_pattern == "long":
            return format_fields(f"{self.day} %B %Y", self.year, self.month, self.day)
        pattern = _STYLES.get(style_or_pattern, style_or_pattern)
        return format_fields(pattern, self.year, self.month, self.day)

    @classmethod
    def parse(cls, text: str, pattern: str) -> "ParsiDate":
        """
        Strictly parse `text` with a pattern built from %Y %m %d %B %%.

        >>> ParsiDate.parse("02 مرداد 1403", "%d %B %Y")
        ParsiDate(year=1403, month=5, day=2)
        """
        fields = parse_fields(text, pattern)
        try:
            y, m, d = fields["year"], fields["month"], fields["day"]
        except KeyError as e:
            raise ParseError(ParseErrorKind.FORMAT_MISMATCH, f"pattern has no field for {e.args[0]}") from e
        try:
            return cls(y, m, d)
        except InvalidDateError as e:
            raise ParseError(ParseErrorKind.INVALID_DATE_VALUE, str(e)) from e

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"

    # ---------------------------------------------------------
    # Structured form
    # ---------------------------------------------------------

    def to_dict(self) -> Dict[str, int]:
        return {"year": self.year, "month": self.month, "day": self.day}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsiDate":
        """
        Rebuild from ``{"year", "month", "day"}`` without logical validation.

        Missing keys or non-integer values raise ``ValueError``; call
        ``is_valid()`` before trusting the result.
        """
        return cls.new_unchecked(*_int_fields(data, ("year", "month", "day")))


def _int_fields(data: Dict[str, Any], names) -> tuple:
    values = []
    for name in names:
        if name not in data:
            raise ValueError(f"missing field {name!r}")
        v = data[name]
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"field {name!r} must be an integer, got {type(v).__name__}")
        values.append(v)
    return tuple(values)
