from __future__ import annotations

import argparse

import parsidate
from parsidate.core.constants import MONTH_NAMES_PERSIAN


def dow_header() -> str:
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def month_grid(year: int, month: int, *, gregorian: bool = True) -> list[list[tuple[str, str]]]:
    """Two-line cells: Persian day on top, Gregorian MM-DD below (if `gregorian`)."""
    weeks = []
    for wk in parsidate.month_calendar(year, month):
        row = []
        for d in wk:
            if d is None:
                row.append(cell("", ""))
                continue
            bot = ""
            if gregorian:
                try:
                    g = d.to_gregorian()
                    bot = f"{g.month:02d}-{g.day:02d}"
                except parsidate.GregorianConversionError:
                    bot = "--"
            row.append(cell(f"{d.day:2d}", bot))
        weeks.append(row)
    return weeks


def render(year: int, month: int, *, gregorian: bool = True) -> str:
    # builds through month_calendar, which rejects a bad year or month
    weeks = month_grid(year, month, gregorian=gregorian)
    title = f"{MONTH_NAMES_PERSIAN[month - 1]} {year}  ({year}/{month:02d})"
    lines = [title, dow_header(), "-" * len(dow_header())]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        if gregorian:
            lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a Persian month calendar (Saturday first).")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--no-gregorian", action="store_true", help="Omit the Gregorian row.")
    args = p.parse_args(argv)
    print(render(args.year, args.month, gregorian=not args.no_gregorian))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
