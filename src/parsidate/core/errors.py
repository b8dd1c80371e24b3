from __future__ import annotations

from .types import ParseErrorKind


class ParsiDateError(ValueError):
    """Base error."""


class InvalidDateError(ParsiDateError):
    """Year, month and day do not form a valid Persian date (year range 1..9999)."""


class InvalidTimeError(ParsiDateError):
    """Hour, minute or second out of range, or a civil time that does not exist in a zone."""


class GregorianConversionError(ParsiDateError):
    """Conversion target outside the representable range of either calendar."""


class ArithmeticOverflowError(ParsiDateError):
    """Arithmetic result outside years 1..9999."""


class InvalidOrdinalError(ParsiDateError):
    """Ordinal day outside 1..365 (common year) or 1..366 (leap year)."""


class ParseError(ParsiDateError):
    """Strict parsing failed; ``kind`` tells which step rejected the input."""

    def __init__(self, kind: ParseErrorKind, message: str = "") -> None:
        self.kind = kind
        super().__init__(message or kind.description)
