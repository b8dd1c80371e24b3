from __future__ import annotations

import argparse
import functools
import importlib
import inspect
import re
import sys
from datetime import date
from zoneinfo import ZoneInfoNotFoundError

_GREGORIAN_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    if not _GREGORIAN_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    try:
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _parse_persian(s: str):
    import parsidate

    return parsidate.parse_date(s, "%Y/%m/%d")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_to_persian(args, settings) -> int:
    import parsidate

    print(parsidate.to_persian(args.date).format(args.format or settings.date_format))
    return 0


def cmd_to_gregorian(args, settings) -> int:
    d = _parse_persian(args.date)
    print(d.to_gregorian().isoformat())
    return 0


def cmd_today(args, settings) -> int:
    import parsidate

    print(parsidate.today().format(args.format or settings.date_format))
    return 0


def cmd_now(args, settings) -> int:
    import parsidate

    tz = args.tz or settings.timezone
    dt = parsidate.now(tz)
    if args.format:
        print(dt.format(args.format))
    elif tz is None:
        print(dt.format(settings.datetime_format))
    else:
        print(dt)
    return 0


def cmd_format(args, settings) -> int:
    d = _parse_persian(args.date)
    print(d.format(args.pattern))
    return 0


def cmd_parse(args, settings) -> int:
    import parsidate

    if args.time:
        dt = parsidate.parse_datetime(args.text, args.pattern)
        print(dt.format(settings.datetime_format))
    else:
        d = parsidate.parse_date(args.text, args.pattern)
        print(d.format(settings.date_format))
    return 0


def cmd_add(args, settings) -> int:
    d = _parse_persian(args.date)
    if args.years:
        d = d.add_years(args.years)
    if args.months:
        d = d.add_months(args.months)
    if args.days:
        d = d.add_days(args.days)
    print(d.format(settings.date_format))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="parsidate", description="Persian (Jalali) calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr.")
    p.add_argument("--log-json", action="store_true", default=None, help="Emit log lines as JSON.")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("to-persian", help="Gregorian -> Persian")
    s.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    s.add_argument("--format", help="Style (short, long, iso) or pattern")
    s.set_defaults(func=cmd_to_persian)

    s = sub.add_parser("to-gregorian", help="Persian -> Gregorian")
    s.add_argument("date", help="YYYY/MM/DD")
    s.set_defaults(func=cmd_to_gregorian)

    s = sub.add_parser("today", help="Today's Persian date")
    s.add_argument("--format", help="Style (short, long, iso) or pattern")
    s.set_defaults(func=cmd_today)

    s = sub.add_parser("now", help="Current Persian date and time")
    s.add_argument("--tz", help="IANA time zone, e.g. Asia/Tehran")
    s.add_argument("--format", help="Pattern")
    s.set_defaults(func=cmd_now)

    s = sub.add_parser("format", help="Render a Persian date through a pattern")
    s.add_argument("date", help="YYYY/MM/DD")
    s.add_argument("pattern")
    s.set_defaults(func=cmd_format)

    s = sub.add_parser("parse", help="Strictly parse text with a pattern")
    s.add_argument("text")
    s.add_argument("pattern")
    s.add_argument("--time", action="store_true", help="Parse a date and time")
    s.set_defaults(func=cmd_parse)

    s = sub.add_parser("add", help="Shift a Persian date (years, then months, then days)")
    s.add_argument("date", help="YYYY/MM/DD")
    s.add_argument("--days", type=int, default=0)
    s.add_argument("--months", type=int, default=0)
    s.add_argument("--years", type=int, default=0)
    s.set_defaults(func=cmd_add)

    # diagnostics
    sub.add_parser("month", help="Print a Persian month calendar (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip", "leap-drift"], help="Which diagnostic to run")
    return p


def main(argv: list[str] | None = None) -> int:
    from parsidate.config.logging import configure_logging, get_logger
    from parsidate.config.settings import Settings
    from parsidate.core.errors import ParsiDateError

    if argv is None:
        argv = sys.argv[1:]

    p = build_parser()
    args, rest = p.parse_known_args(argv)

    try:
        settings = Settings.from_env()
    except ValueError as e:
        p.error(str(e))

    log_json = settings.log_json if args.log_json is None else args.log_json
    configure_logging(level=settings.log_level, verbose=args.verbose, log_json=log_json)
    log = get_logger("parsidate.cli")

    if args.cmd == "month":
        run = functools.partial(_run_module_main, "parsidate.diagnostics.pretty_month", rest)
    elif args.cmd == "diag":
        tool_map = {
            "round-trip": "parsidate.diagnostics.round_trip",
            "leap-drift": "parsidate.diagnostics.leap_drift",
        }
        run = functools.partial(_run_module_main, tool_map[args.tool], rest)
    else:
        if rest:
            p.error(f"unrecognized arguments: {' '.join(rest)}")
        run = functools.partial(args.func, args, settings)

    log.debug("running command", cmd=args.cmd)
    try:
        return run()
    except ParsiDateError as e:
        log.error("command failed", cmd=args.cmd, error=str(e), error_type=type(e).__name__)
        return 1
    except ZoneInfoNotFoundError as e:
        log.error("unknown time zone", cmd=args.cmd, error=str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
