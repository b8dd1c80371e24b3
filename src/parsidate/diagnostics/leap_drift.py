#!/usr/bin/env python3
"""
Drift of the 33-year leap rule against the mean tropical year.

The calendar year averages 12053/33 = 365.242424... days. Each year the
calendar moves ahead of a tropical year of the given length; this tool
accumulates that difference and reports where it crosses whole days.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from parsidate.engines import leap

MEAN_TROPICAL_YEAR = 365.24219


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "parsidate[diagnostics]"') from e


@dataclass(frozen=True)
class DriftReport:
    first_year: int
    last_year: int
    leap_count: int
    mean_year: float
    final_drift_days: float
    max_drift_days: float
    years_per_day: float


def leap_flags(first_year: int, last_year: int):
    np = _need_numpy()
    years = np.arange(first_year, last_year + 1)
    flags = np.zeros(years.shape, dtype=bool)
    for r in leap.LEAP_REMAINDERS:
        flags |= (years % leap.CYCLE_YEARS) == r
    return years, flags


def cumulative_drift(first_year: int, last_year: int, tropical_year: float = MEAN_TROPICAL_YEAR):
    """Calendar days minus tropical days, summed year by year (positive: calendar is ahead)."""
    np = _need_numpy()
    years, flags = leap_flags(first_year, last_year)
    lengths = 365 + flags.astype(np.int64)
    return years, np.cumsum(lengths - tropical_year)


def drift_report(first_year: int, last_year: int, tropical_year: float = MEAN_TROPICAL_YEAR) -> DriftReport:
    np = _need_numpy()
    if not (leap.MIN_YEAR <= first_year <= last_year):
        raise ValueError("need 1 <= first_year <= last_year")
    years, drift = cumulative_drift(first_year, last_year, tropical_year)
    _, flags = leap_flags(first_year, last_year)
    n = len(years)
    mean_year = 365 + float(flags.sum()) / n
    per_year = mean_year - tropical_year
    return DriftReport(
        first_year=first_year,
        last_year=last_year,
        leap_count=int(flags.sum()),
        mean_year=mean_year,
        final_drift_days=float(drift[-1]),
        max_drift_days=float(np.abs(drift).max()),
        years_per_day=(1.0 / abs(per_year)) if per_year else float("inf"),
    )


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Drift of the 33-year Persian leap rule against the tropical year.")
    p.add_argument("--first", type=int, default=1, help="First Persian year.")
    p.add_argument("--last", type=int, default=leap.MAX_YEAR, help="Last Persian year.")
    p.add_argument("--tropical", type=float, default=MEAN_TROPICAL_YEAR, help="Tropical year length in days.")
    args = p.parse_args(argv)

    r = drift_report(args.first, args.last, args.tropical)
    print(f"years             : {r.first_year} .. {r.last_year}")
    print(f"leap years        : {r.leap_count}")
    print(f"mean calendar year: {r.mean_year:.6f} d")
    print(f"final drift       : {r.final_drift_days:+.4f} d")
    print(f"max |drift|       : {r.max_drift_days:.4f} d")
    print(f"years per 1 d     : {r.years_per_day:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
