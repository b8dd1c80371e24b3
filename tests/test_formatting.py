# tests/test_formatting.py

import random

import pytest

from parsidate import InvalidDateError, ParsiDate, ParsiDateTime, ParseError, ParseErrorKind
from parsidate.engines import conversion
from parsidate.engines.formatting import format_fields, parse_fields


def test_named_styles(mordad_2):
    assert mordad_2.format() == "1403/05/02"
    assert mordad_2.format("short") == "1403/05/02"
    assert mordad_2.format("iso") == "1403-05-02"
    assert mordad_2.format("long") == "2 مرداد 1403"
    assert str(mordad_2) == "1403/05/02"


def test_specifiers():
    d = ParsiDate(1403, 1, 7)
    assert d.format("%j") == "007"
    assert d.format("%A") == "سه‌شنبه"
    assert d.format("%w") == "3"
    assert d.format("%W") == "02"
    assert d.format("%d %B %Y") == "07 فروردین 1403"
    assert d.format("%K") == "بهار"
    assert d.format("100%%") == "100%"


def test_year_is_zero_padded():
    assert ParsiDate(7, 1, 1).format("%Y/%m/%d") == "0007/01/01"


def test_unknown_specifiers_pass_through():
    d = ParsiDate(1403, 1, 7)
    assert d.format("%Y-%m-%d %x %!") == "1403-01-07 %x %!"
    assert d.format("%H:%M") == "%H:%M"
    assert d.format("trailing %") == "trailing %"


def test_time_specifiers(mordad_2_morning):
    assert mordad_2_morning.format("%Y/%m/%d %H:%M:%S") == "1403/05/02 10:30:15"
    assert mordad_2_morning.format("%T") == "10:30:15"
    assert mordad_2_morning.format("%Y %K %m") == "1403 تابستان 05"


def test_format_invalid_date_raises():
    with pytest.raises(InvalidDateError):
        ParsiDate.new_unchecked(1404, 12, 30).format("%Y")


def test_format_fields_directly():
    assert format_fields("%d/%m", 1403, 12, 30) == "30/12"
    assert format_fields("%H", 1403, 12, 30, (5, 6, 7)) == "05"


def test_parse_numeric():
    assert ParsiDate.parse("1403/05/02", "%Y/%m/%d") == ParsiDate(1403, 5, 2)
    assert ParsiDate.parse("02-05-1403", "%d-%m-%Y") == ParsiDate(1403, 5, 2)


def test_parse_month_name():
    assert ParsiDate.parse("02 مرداد 1403", "%d %B %Y") == ParsiDate(1403, 5, 2)
    assert ParsiDate.parse("10 اردیبهشت 1403", "%d %B %Y") == ParsiDate(1403, 2, 10)
    assert ParsiDate.parse("29 اسفند 1404", "%d %B %Y") == ParsiDate(1404, 12, 29)


def test_parse_literal_percent():
    assert ParsiDate.parse("1403%05%02", "%Y%%%m%%%d") == ParsiDate(1403, 5, 2)


@pytest.mark.parametrize(
    "text, pattern, kind",
    [
        ("2 مرداد 1403", "%d %B %Y", ParseErrorKind.INVALID_NUMBER),
        ("1403/5/02", "%Y/%m/%d", ParseErrorKind.INVALID_NUMBER),
        ("۱۴۰۳/۰۵/۰۲", "%Y/%m/%d", ParseErrorKind.INVALID_NUMBER),
        ("02 فوریه 1403", "%d %B %Y", ParseErrorKind.INVALID_MONTH_NAME),
        ("1403-05-02", "%Y/%m/%d", ParseErrorKind.FORMAT_MISMATCH),
        ("1403/05/02 extra", "%Y/%m/%d", ParseErrorKind.FORMAT_MISMATCH),
        ("1403/05", "%Y/%m/%d", ParseErrorKind.FORMAT_MISMATCH),
        ("1403/05", "%Y/%m", ParseErrorKind.FORMAT_MISMATCH),
        ("1403/05/02", "%Y/%m/%d%", ParseErrorKind.FORMAT_MISMATCH),
        ("سه‌شنبه 1403/05/02", "%A %Y/%m/%d", ParseErrorKind.UNSUPPORTED_SPECIFIER),
        ("1403/05/02 10", "%Y/%m/%d %H", ParseErrorKind.UNSUPPORTED_SPECIFIER),
        ("1403/13/01", "%Y/%m/%d", ParseErrorKind.INVALID_DATE_VALUE),
        ("1404/12/30", "%Y/%m/%d", ParseErrorKind.INVALID_DATE_VALUE),
        ("0000/01/01", "%Y/%m/%d", ParseErrorKind.INVALID_DATE_VALUE),
    ],
)
def test_parse_errors(text, pattern, kind):
    with pytest.raises(ParseError) as exc:
        ParsiDate.parse(text, pattern)
    assert exc.value.kind is kind


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        ParsiDate.parse("nope", "%Y")


def test_parse_datetime():
    dt = ParsiDateTime.parse("1399-12-30T23:59:01", "%Y-%m-%dT%T")
    assert dt == ParsiDateTime.new(1399, 12, 30, 23, 59, 1)
    dt = ParsiDateTime.parse("1403/05/02 15:30:45", "%Y/%m/%d %H:%M:%S")
    assert dt.time() == (15, 30, 45)


@pytest.mark.parametrize(
    "text, kind",
    [
        ("1403/05/02 24:00:00", ParseErrorKind.INVALID_TIME_VALUE),
        ("1403/05/02 12:60:00", ParseErrorKind.INVALID_TIME_VALUE),
        ("1403/05/02 15:30", ParseErrorKind.FORMAT_MISMATCH),
        ("1403/05/02 15-30-45", ParseErrorKind.FORMAT_MISMATCH),
        ("1404/12/30 10:00:00", ParseErrorKind.INVALID_DATE_VALUE),
        ("1403/07/31 10:00:00", ParseErrorKind.INVALID_DATE_VALUE),
    ],
)
def test_parse_datetime_errors(text, kind):
    with pytest.raises(ParseError) as exc:
        ParsiDateTime.parse(text, "%Y/%m/%d %H:%M:%S")
    assert exc.value.kind is kind


def test_parse_datetime_needs_time_fields():
    with pytest.raises(ParseError) as exc:
        ParsiDateTime.parse("1403/05/02", "%Y/%m/%d")
    assert exc.value.kind is ParseErrorKind.FORMAT_MISMATCH


def test_parse_fields_returns_raw_values():
    assert parse_fields("1404/12/30", "%Y/%m/%d") == {"year": 1404, "month": 12, "day": 30}


def test_format_parse_symmetry_sweep():
    random.seed(2024)
    for _ in range(3000):
        d = ParsiDate.from_absolute_day(random.randint(conversion.MIN_JDN, conversion.MAX_JDN))
        assert ParsiDate.parse(d.format("%Y/%m/%d"), "%Y/%m/%d") == d
        assert ParsiDate.parse(d.format("%d %B %Y"), "%d %B %Y") == d
        t = ParsiDateTime.from_date_and_time(
            d, random.randint(0, 23), random.randint(0, 59), random.randint(0, 59)
        )
        assert ParsiDateTime.parse(t.format("%Y-%m-%dT%T"), "%Y-%m-%dT%T") == t
