"""Fixed Persian name tables, indexed from zero."""

from __future__ import annotations

MONTH_NAMES_PERSIAN = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

# Saturday first; index == weekday number
WEEKDAY_NAMES_PERSIAN = (
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنجشنبه",
    "جمعه",
)

SEASON_NAMES_PERSIAN = ("بهار", "تابستان", "پاییز", "زمستان")
SEASON_NAMES_ENGLISH = ("Spring", "Summer", "Autumn", "Winter")
