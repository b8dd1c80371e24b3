"""
Timezone-aware Persian date-times.

A ZonedParsiDateTime is a thin wrapper over an aware ``datetime``: the
absolute instant plus the zone it is viewed in. The Persian civil fields
are derived from the local wall time on demand, and the UTC offset is read
from the zone for that instant every time it is asked for.

Resolving civil fields to an instant follows one fixed policy:

* a wall time inside a DST gap does not exist and raises InvalidTimeError;
* a wall time inside a DST overlap is ambiguous and resolves according to
  ``disambiguate``: ``"earlier"`` (default, the first occurrence),
  ``"later"`` (the second occurrence) or ``"raise"`` (InvalidTimeError).
"""

from __future__ import annotations

import functools
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Literal, Union
from zoneinfo import ZoneInfo

from .date import ParsiDate
from .date_time import ParsiDateTime
from .errors import ArithmeticOverflowError, InvalidTimeError

TzLike = Union[str, tzinfo]
Disambiguate = Literal["earlier", "later", "raise"]


def resolve_zone(tz: TzLike) -> tzinfo:
    """Accept an IANA zone name or any tzinfo instance."""
    if isinstance(tz, str):
        return ZoneInfo(tz)
    if isinstance(tz, tzinfo):
        return tz
    raise TypeError(f"expected a zone name or tzinfo, got {type(tz).__name__}")


def localize(naive: datetime, tz: tzinfo, disambiguate: Disambiguate = "earlier") -> datetime:
    """Attach `tz` to a naive wall time, applying the gap/overlap policy."""
    if disambiguate not in ("earlier", "later", "raise"):
        raise ValueError("disambiguate must be 'earlier', 'later' or 'raise'")
    first = naive.replace(tzinfo=tz, fold=0)
    second = naive.replace(tzinfo=tz, fold=1)
    if first.utcoffset() == second.utcoffset():
        return first

    # the two folds disagree: either the wall time is skipped or it repeats
    round_trip = first.astimezone(timezone.utc).astimezone(tz).replace(tzinfo=None)
    if round_trip != naive:
        raise InvalidTimeError(f"{naive.isoformat()} does not exist in {tz}")
    if disambiguate == "raise":
        raise InvalidTimeError(f"{naive.isoformat()} is ambiguous in {tz}")
    return first if disambiguate == "earlier" else second


def _format_offset(offset: timedelta) -> str:
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, rem = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}:{rem // 60:02d}"


@functools.total_ordering
class ZonedParsiDateTime:
    """A Persian date-time pinned to an instant and a time zone."""

    __slots__ = ("_inner",)

    def __init__(self, inner: datetime):
        if inner.tzinfo is None or inner.utcoffset() is None:
            raise ValueError("ZonedParsiDateTime needs an aware datetime")
        self._inner = inner

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def new(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        tz: TzLike,
        *,
        disambiguate: Disambiguate = "earlier",
    ) -> "ZonedParsiDateTime":
        naive = ParsiDateTime.new(year, month, day, hour, minute, second).to_gregorian()
        return cls(localize(naive, resolve_zone(tz), disambiguate))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "ZonedParsiDateTime":
        return cls(dt)

    @classmethod
    def now(cls, tz: TzLike) -> "ZonedParsiDateTime":
        return cls(datetime.now(resolve_zone(tz)))

    def to_datetime(self) -> datetime:
        """The underlying aware Gregorian datetime."""
        return self._inner

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    def datetime(self) -> ParsiDateTime:
        return ParsiDateTime.from_gregorian(self._inner.replace(tzinfo=None))

    def date(self) -> ParsiDate:
        return self.datetime().date

    @property
    def year(self) -> int:
        return self.date().year

    @property
    def month(self) -> int:
        return self.date().month

    @property
    def day(self) -> int:
        return self.date().day

    @property
    def hour(self) -> int:
        return self._inner.hour

    @property
    def minute(self) -> int:
        return self._inner.minute

    @property
    def second(self) -> int:
        return self._inner.second

    @property
    def timezone(self) -> tzinfo:
        return self._inner.tzinfo

    def offset(self) -> timedelta:
        return self._inner.utcoffset()

    # ---------------------------------------------------------
    # Zone change and arithmetic on the absolute timeline
    # ---------------------------------------------------------

    def with_timezone(self, tz: TzLike) -> "ZonedParsiDateTime":
        return ZonedParsiDateTime(self._inner.astimezone(resolve_zone(tz)))

    def _utc(self) -> datetime:
        return self._inner.astimezone(timezone.utc)

    def add_duration(self, duration: timedelta) -> "ZonedParsiDateTime":
        try:
            shifted = self._utc() + duration
        except OverflowError as e:
            raise ArithmeticOverflowError(str(e)) from e
        return ZonedParsiDateTime(shifted.astimezone(self._inner.tzinfo))

    def sub_duration(self, duration: timedelta) -> "ZonedParsiDateTime":
        return self.add_duration(-duration)

    def difference(self, other: "ZonedParsiDateTime") -> timedelta:
        return self._utc() - other._utc()

    # ---------------------------------------------------------
    # Text and comparison
    # ---------------------------------------------------------

    def format(self, pattern: str) -> str:
        return self.datetime().format(pattern)

    def __str__(self) -> str:
        return f"{self.datetime()} {_format_offset(self.offset())}"

    def __repr__(self) -> str:
        return f"ZonedParsiDateTime({self.datetime()!s}, tz={self._inner.tzinfo!s})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedParsiDateTime):
            return NotImplemented
        return self._utc() == other._utc()

    def __lt__(self, other: "ZonedParsiDateTime") -> bool:
        if not isinstance(other, ZonedParsiDateTime):
            return NotImplemented
        return self._utc() < other._utc()

    def __hash__(self) -> int:
        return hash(self._utc())
