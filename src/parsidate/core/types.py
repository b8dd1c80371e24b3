from __future__ import annotations
from enum import Enum

from .constants import SEASON_NAMES_ENGLISH, SEASON_NAMES_PERSIAN


class ParseErrorKind(Enum):
    FORMAT_MISMATCH = "format_mismatch"
    INVALID_NUMBER = "invalid_number"
    INVALID_MONTH_NAME = "invalid_month_name"
    UNSUPPORTED_SPECIFIER = "unsupported_specifier"
    INVALID_DATE_VALUE = "invalid_date_value"
    INVALID_TIME_VALUE = "invalid_time_value"

    @property
    def description(self) -> str:
        return _PARSE_ERROR_TEXT[self]


_PARSE_ERROR_TEXT = {
    ParseErrorKind.FORMAT_MISMATCH: "input does not match the structure of the format string",
    ParseErrorKind.INVALID_NUMBER: "numeric field has non-digit characters or the wrong digit count",
    ParseErrorKind.INVALID_MONTH_NAME: "no Persian month name at this position",
    ParseErrorKind.UNSUPPORTED_SPECIFIER: "format specifier is not supported for parsing",
    ParseErrorKind.INVALID_DATE_VALUE: "parsed year, month and day form an invalid date",
    ParseErrorKind.INVALID_TIME_VALUE: "parsed hour, minute and second form an invalid time",
}


class Season(Enum):
    """The four Persian seasons; each spans three consecutive months."""
    BAHAR = 0
    TABESTAN = 1
    PAEEZ = 2
    ZEMESTAN = 3

    @classmethod
    def from_month(cls, month: int) -> "Season":
        if not (1 <= month <= 12):
            raise ValueError(f"month must be in 1..12, got {month}")
        return cls((month - 1) // 3)

    @property
    def name_persian(self) -> str:
        return SEASON_NAMES_PERSIAN[self.value]

    @property
    def name_english(self) -> str:
        return SEASON_NAMES_ENGLISH[self.value]

    @property
    def start_month(self) -> int:
        return 3 * self.value + 1

    @property
    def end_month(self) -> int:
        return 3 * self.value + 3

    def __str__(self) -> str:
        return self.name_persian
