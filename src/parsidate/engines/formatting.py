"""
parsidate.engines.formatting
----------------------------
strftime-style pattern interpreter for Persian dates and times.

Formatting specifiers:

    %Y  year, 4 digits          %H  hour 00-23
    %m  month 01-12             %M  minute 00-59
    %d  day 01-31               %S  second 00-59
    %B  month name              %T  %H:%M:%S
    %A  weekday name            %j  day of year 001-366
    %w  weekday 0-6 (Sat=0)     %W  week of year 01-53
    %K  season name             %%  literal percent

Any other ``%x`` is copied through unchanged when formatting. Parsing is
strict and accepts only %Y %m %d %B %H %M %S %T %%.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

from parsidate.core.constants import MONTH_NAMES_PERSIAN, SEASON_NAMES_PERSIAN, WEEKDAY_NAMES_PERSIAN
from parsidate.core.errors import ParseError
from parsidate.core.types import ParseErrorKind
from parsidate.engines import conversion

TIME_SPECIFIERS = frozenset("HMST")
PARSE_DATE_SPECIFIERS = frozenset("YmdB%")

_WIDTH = {"Y": 4, "m": 2, "d": 2, "H": 2, "M": 2, "S": 2}
_FIELD = {"Y": "year", "m": "month", "d": "day", "H": "hour", "M": "minute", "S": "second"}
_DIGITS = {n: re.compile(r"[0-9]{%d}" % n) for n in set(_WIDTH.values())}

# longest names first so that a name that prefixes another cannot win early
_MONTHS_BY_LENGTH = sorted(
    ((name, idx + 1) for idx, name in enumerate(MONTH_NAMES_PERSIAN)),
    key=lambda item: len(item[0]),
    reverse=True,
)


class _Derived:
    """Lazily computed fields of one date, shared by every specifier in a pattern."""

    def __init__(self, year: int, month: int, day: int):
        self.year, self.month, self.day = year, month, day
        self._jdn: Optional[int] = None

    @property
    def jdn(self) -> int:
        if self._jdn is None:
            self._jdn = conversion.to_absolute_day(self.year, self.month, self.day)
        return self._jdn

    def weekday(self) -> int:
        return conversion.weekday(self.jdn)

    def ordinal(self) -> int:
        return self.jdn - conversion.to_absolute_day(self.year, 1, 1) + 1

    def week(self) -> int:
        return conversion.week_of_year(self.year, self.month, self.day)


def format_fields(
    pattern: str,
    year: int,
    month: int,
    day: int,
    time: Optional[tuple] = None,
) -> str:
    """Render `pattern` for a valid date and, when given, an (hour, minute, second) time."""
    d = _Derived(year, month, day)
    out = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c != "%":
            out.append(c)
            i += 1
            continue
        if i + 1 >= n:
            out.append("%")
            break
        spec = pattern[i + 1]
        i += 2

        if spec == "%":
            out.append("%")
        elif spec == "Y":
            out.append(f"{year:04d}")
        elif spec == "m":
            out.append(f"{month:02d}")
        elif spec == "d":
            out.append(f"{day:02d}")
        elif spec == "B":
            out.append(MONTH_NAMES_PERSIAN[month - 1])
        elif spec == "A":
            out.append(WEEKDAY_NAMES_PERSIAN[d.weekday()])
        elif spec == "w":
            out.append(str(d.weekday()))
        elif spec == "j":
            out.append(f"{d.ordinal():03d}")
        elif spec == "K":
            out.append(SEASON_NAMES_PERSIAN[(month - 1) // 3])
        elif spec == "W":
            out.append(f"{d.week():02d}")
        elif time is not None and spec in TIME_SPECIFIERS:
            hour, minute, second = time
            if spec == "H":
                out.append(f"{hour:02d}")
            elif spec == "M":
                out.append(f"{minute:02d}")
            elif spec == "S":
                out.append(f"{second:02d}")
            else:
                out.append(f"{hour:02d}:{minute:02d}:{second:02d}")
        else:
            out.append("%" + spec)
    return "".join(out)


def _expand(pattern: str) -> str:
    """Replace %T by %H:%M:%S, leaving %%T (a literal '%' then 'T') alone."""
    out = []
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] == "%" and i + 1 < n:
            spec = pattern[i + 1]
            out.append("%H:%M:%S" if spec == "T" else "%" + spec)
            i += 2
        else:
            out.append(pattern[i])
            i += 1
    return "".join(out)


def parse_fields(text: str, pattern: str, *, allow_time: bool = False) -> Dict[str, int]:
    """
    Strictly match `text` against `pattern` and return the extracted fields.

    The result holds whichever of year/month/day/hour/minute/second the
    pattern mentions. No logical validation happens here; callers build the
    entity and translate its errors.
    """
    allowed = PARSE_DATE_SPECIFIERS | (TIME_SPECIFIERS if allow_time else frozenset())
    pattern = _expand(pattern)

    fields: Dict[str, int] = {}
    pos = 0
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c != "%":
            if pos >= len(text) or text[pos] != c:
                raise ParseError(
                    ParseErrorKind.FORMAT_MISMATCH,
                    f"expected {c!r} at position {pos} of {text!r}",
                )
            pos += 1
            i += 1
            continue

        if i + 1 >= n:
            raise ParseError(ParseErrorKind.FORMAT_MISMATCH, "format string ends with a lone '%'")
        spec = pattern[i + 1]
        i += 2
        if spec not in allowed:
            raise ParseError(
                ParseErrorKind.UNSUPPORTED_SPECIFIER,
                f"%{spec} cannot be used for parsing",
            )

        if spec == "%":
            if pos >= len(text) or text[pos] != "%":
                raise ParseError(ParseErrorKind.FORMAT_MISMATCH, f"expected '%' at position {pos}")
            pos += 1
        elif spec == "B":
            for name, number in _MONTHS_BY_LENGTH:
                if text.startswith(name, pos):
                    fields["month"] = number
                    pos += len(name)
                    break
            else:
                raise ParseError(
                    ParseErrorKind.INVALID_MONTH_NAME,
                    f"no Persian month name at position {pos} of {text!r}",
                )
        else:
            width = _WIDTH[spec]
            if not _DIGITS[width].match(text, pos):
                raise ParseError(
                    ParseErrorKind.INVALID_NUMBER,
                    f"%{spec} needs exactly {width} digits at position {pos} of {text!r}",
                )
            fields[_FIELD[spec]] = int(text[pos:pos + width])
            pos += width

    if pos != len(text):
        raise ParseError(
            ParseErrorKind.FORMAT_MISMATCH,
            f"unconsumed input {text[pos:]!r}",
        )
    return fields
