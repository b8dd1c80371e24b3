"""Diagnostics package.

- round_trip: random Gregorian <-> Persian and absolute-day round trips
- leap_drift: drift of the 33-year rule against the mean tropical year (needs numpy)
- pretty_month: printed Persian month grids
"""

__all__ = ["round_trip", "leap_drift", "pretty_month"]
