# tests/test_diagnostics.py

from datetime import date

import pytest

from parsidate.diagnostics import pretty_month, round_trip


def test_round_trips_are_clean():
    assert round_trip.gregorian_round_trip(300, date(622, 3, 21), date(9999, 12, 31), 5, max_failures=1) == 0
    assert round_trip.absolute_day_round_trip(300, 5, max_failures=1) == 0


def test_pretty_month_render():
    text = pretty_month.render(1403, 12)
    lines = text.splitlines()
    assert lines[0].startswith("اسفند 1403")
    assert lines[1] == pretty_month.dow_header()
    # Esfand 1403 runs 2025-02-19 .. 2025-03-20
    assert "02-19" in text and "03-20" in text
    assert "30" in lines[-2]


def test_leap_drift_one_cycle():
    pytest.importorskip("numpy")
    from parsidate.diagnostics import leap_drift

    r = leap_drift.drift_report(1, 33)
    assert r.leap_count == 8
    assert r.mean_year == pytest.approx(12053 / 33)
    assert r.final_drift_days == pytest.approx(33 * (12053 / 33 - leap_drift.MEAN_TROPICAL_YEAR))


def test_leap_drift_whole_range():
    pytest.importorskip("numpy")
    from parsidate.diagnostics import leap_drift

    years, drift = leap_drift.cumulative_drift(1, 9999)
    assert len(years) == len(drift) == 9999
    r = leap_drift.drift_report(1, 9999)
    assert r.max_drift_days >= abs(r.final_drift_days)
    assert r.years_per_day > 4000
    with pytest.raises(ValueError):
        leap_drift.drift_report(10, 5)


@pytest.mark.parametrize("month", [0, 13])
def test_pretty_month_rejects_bad_month(month):
    from parsidate import InvalidDateError

    with pytest.raises(InvalidDateError):
        pretty_month.render(1403, month)
