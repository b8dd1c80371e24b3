from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

from parsidate.config.logging import get_logger
from parsidate.core.date import ParsiDate
from parsidate.engines import conversion

log = get_logger(__name__)


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(rng: random.Random, start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=rng.randint(0, span))


def gregorian_round_trip(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """Gregorian -> ParsiDate -> Gregorian; returns the number of mismatches."""
    rng = random.Random(seed)
    failures = 0
    for _ in range(N):
        g0 = random_date(rng, start, end)
        p = ParsiDate.from_gregorian(g0)
        back = p.to_gregorian()
        if back != g0:
            failures += 1
            log.error("gregorian round trip failed", gregorian=str(g0), persian=str(p), back=str(back))
            if failures >= max_failures:
                break
    return failures


def absolute_day_round_trip(N: int, seed: int, *, max_failures: int) -> int:
    """Absolute day -> (y, m, d) -> absolute day over the whole supported range."""
    rng = random.Random(seed)
    failures = 0
    for _ in range(N):
        jdn = rng.randint(conversion.MIN_JDN, conversion.MAX_JDN)
        ymd = conversion.from_absolute_day(jdn)
        back = conversion.to_absolute_day(*ymd)
        if back != jdn:
            failures += 1
            log.error("absolute day round trip failed", jdn=jdn, persian=ymd, back=back)
            if failures >= max_failures:
                break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> persian -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Trials per check.")
    p.add_argument("--start", type=str, default="0622-03-22", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per check.")
    args = p.parse_args(argv)

    start, end = parse_date(args.start), parse_date(args.end)
    if end < start:
        raise SystemExit("--end must not precede --start")

    g_fail = gregorian_round_trip(args.N, start, end, args.seed, max_failures=args.max_failures)
    print(f"gregorian round trip : {args.N - g_fail}/{args.N} ok")
    a_fail = absolute_day_round_trip(args.N, args.seed, max_failures=args.max_failures)
    print(f"absolute day round trip: {args.N - a_fail}/{args.N} ok")

    log.info("round trip finished", gregorian_failures=g_fail, absolute_failures=a_fail)
    return 0 if g_fail == 0 and a_fail == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
