from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Tuple

from .date import ParsiDate, _int_fields
from .errors import InvalidDateError, InvalidTimeError, ParseError
from .time import SECONDS_PER_DAY, seconds_of_day, split_seconds
from .types import ParseErrorKind, Season
from parsidate.engines import leap
from parsidate.engines.formatting import format_fields, parse_fields


def _duration_seconds(duration: timedelta) -> int:
    # timedelta keeps microseconds non-negative, so dropping them floors the value
    if not isinstance(duration, timedelta):
        raise TypeError(f"expected a timedelta, got {type(duration).__name__}")
    return duration.days * SECONDS_PER_DAY + duration.seconds


@dataclass(frozen=True, order=True)
class ParsiDateTime:
    """A Persian date plus a time of day with whole-second resolution."""
    date: ParsiDate
    hour: int
    minute: int
    second: int

    def __post_init__(self) -> None:
        if not isinstance(self.date, ParsiDate):
            raise TypeError("date must be a ParsiDate")
        if not self.date.is_valid():
            raise InvalidDateError(f"invalid Persian date {self.date.year}/{self.date.month}/{self.date.day}")
        if not leap.is_valid_hms(self.hour, self.minute, self.second):
            raise InvalidTimeError(f"invalid time {self.hour}:{self.minute}:{self.second}")

    @classmethod
    def new(cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> "ParsiDateTime":
        return cls(ParsiDate(year, month, day), hour, minute, second)

    @classmethod
    def from_date_and_time(cls, date: ParsiDate, hour: int, minute: int, second: int) -> "ParsiDateTime":
        return cls(date, hour, minute, second)

    @classmethod
    def new_unchecked(
        cls, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> "ParsiDateTime":
        """Build without validation. The caller guarantees every field is in range."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "date", ParsiDate.new_unchecked(year, month, day))
        object.__setattr__(obj, "hour", hour)
        object.__setattr__(obj, "minute", minute)
        object.__setattr__(obj, "second", second)
        return obj

    def _replace_date(self, d: ParsiDate) -> "ParsiDateTime":
        obj = object.__new__(type(self))
        object.__setattr__(obj, "date", d)
        object.__setattr__(obj, "hour", self.hour)
        object.__setattr__(obj, "minute", self.minute)
        object.__setattr__(obj, "second", self.second)
        return obj

    def is_valid(self) -> bool:
        return self.date.is_valid() and leap.is_valid_hms(self.hour, self.minute, self.second)

    def _require_valid(self) -> None:
        self.date._require_valid()
        if not leap.is_valid_hms(self.hour, self.minute, self.second):
            raise InvalidTimeError(f"invalid time {self.hour}:{self.minute}:{self.second}")

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    def time(self) -> Tuple[int, int, int]:
        return self.hour, self.minute, self.second

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    @classmethod
    def from_gregorian(cls, dt: datetime) -> "ParsiDateTime":
        """Convert a naive (or aware, taken at face value) Gregorian datetime."""
        d = ParsiDate.from_gregorian(dt.date())
        return cls.new_unchecked(d.year, d.month, d.day, dt.hour, dt.minute, dt.second)

    def to_gregorian(self) -> datetime:
        self._require_valid()
        g = self.date.to_gregorian()
        return datetime(g.year, g.month, g.day, self.hour, self.minute, self.second)

    @classmethod
    def now(cls) -> "ParsiDateTime":
        return cls.from_gregorian(datetime.now())

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add_duration(self, duration: timedelta) -> "ParsiDateTime":
        """
        Shift by a timedelta (whole seconds; any sub-second part is floored).

        The seconds are added to the time of day first; the whole-day carry
        or borrow is then applied to the date with ParsiDate.add_days.
        """
        self._require_valid()
        total = seconds_of_day(self) + _duration_seconds(duration)
        carry, hour, minute, second = split_seconds(total)
        d = self.date.add_days(carry) if carry else self.date
        return self.new_unchecked(d.year, d.month, d.day, hour, minute, second)

    def sub_duration(self, duration: timedelta) -> "ParsiDateTime":
        return self.add_duration(-duration)

    def difference(self, other: "ParsiDateTime") -> timedelta:
        """Signed ``self - other``."""
        self._require_valid()
        other._require_valid()
        days = self.date.to_absolute_day() - other.date.to_absolute_day()
        return timedelta(days=days, seconds=seconds_of_day(self) - seconds_of_day(other))

    def add_days(self, days: int) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.add_days(days))

    def sub_days(self, days: int) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.sub_days(days))

    def add_months(self, months: int) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.add_months(months))

    def sub_months(self, months: int) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.sub_months(months))

    def add_years(self, years: int) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.add_years(years))

    def sub_years(self, years: int) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.sub_years(years))

    # ---------------------------------------------------------
    # Field replacement
    # ---------------------------------------------------------

    def with_hour(self, hour: int) -> "ParsiDateTime":
        return self.with_time(hour, self.minute, self.second)

    def with_minute(self, minute: int) -> "ParsiDateTime":
        return self.with_time(self.hour, minute, self.second)

    def with_second(self, second: int) -> "ParsiDateTime":
        return self.with_time(self.hour, self.minute, second)

    def with_time(self, hour: int, minute: int, second: int) -> "ParsiDateTime":
        self._require_valid()
        return ParsiDateTime(self.date, hour, minute, second)

    def with_year(self, year: int) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.with_year(year))

    def with_month(self, month: int) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.with_month(month))

    def with_day(self, day: int) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.with_day(day))

    # ---------------------------------------------------------
    # Date derivations
    # ---------------------------------------------------------

    def season(self) -> Season:
        return self.date.season()

    def week_of_year(self) -> int:
        return self.date.week_of_year()

    def start_of_season(self) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.start_of_season())

    def end_of_season(self) -> "ParsiDateTime":
        self._require_valid()
        return self._replace_date(self.date.end_of_season())

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def format(self, pattern: str) -> str:
        self._require_valid()
        return format_fields(pattern, self.year, self.month, self.day, self.time())

    @classmethod
    def parse(cls, text: str, pattern: str) -> "ParsiDateTime":
        fields = parse_fields(text, pattern, allow_time=True)
        names = ("year", "month", "day", "hour", "minute", "second")
        missing = [n for n in names if n not in fields]
        if missing:
            raise ParseError(ParseErrorKind.FORMAT_MISMATCH, f"pattern has no field for {', '.join(missing)}")
        try:
            d = ParsiDate(fields["year"], fields["month"], fields["day"])
        except InvalidDateError as e:
            raise ParseError(ParseErrorKind.INVALID_DATE_VALUE, str(e)) from e
        try:
            return cls(d, fields["hour"], fields["minute"], fields["second"])
        except InvalidTimeError as e:
            raise ParseError(ParseErrorKind.INVALID_TIME_VALUE, str(e)) from e

    def __str__(self) -> str:
        return f"{self.date} {self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    # ---------------------------------------------------------
    # Structured form
    # ---------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.to_dict(),
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsiDateTime":
        """Rebuild without logical validation; check ``is_valid()`` afterwards."""
        if not isinstance(data.get("date"), dict):
            raise ValueError("field 'date' must be a mapping")
        d = ParsiDate.from_dict(data["date"])
        hour, minute, second = _int_fields(data, ("hour", "minute", "second"))
        return cls.new_unchecked(d.year, d.month, d.day, hour, minute, second)
