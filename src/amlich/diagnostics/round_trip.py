from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import amlich


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def check_day(d0: date) -> list[str]:
    """Problems found for one civil day (empty when the round trip holds)."""
    problems = []
    t = amlich.solar_to_lunar(d0)
    back = amlich.lunar_to_solar(t.day, t.month, t.year, t.is_leap_month).to_date()
    if back != d0:
        problems.append(f"round trip: {d0} -> {t} -> {back}")
    return problems


def roundtrip_test(start: date, end: date, *, N: int, seed: int, max_failures: int) -> int:
    """
    N <= 0 walks every day of [start, end]; otherwise N random days.
    Also checks that consecutive days advance the lunar label by one day or
    start a new month on day 1.
    """
    if N <= 0:
        span = (end - start).days
        days = (start + timedelta(days=i) for i in range(span + 1))
    else:
        rng = random.Random(seed)
        span = (end - start).days
        days = (start + timedelta(days=rng.randint(0, span)) for _ in range(N))

    failures = 0
    prev = None
    for d0 in days:
        problems = check_day(d0)
        if N <= 0:
            cur = amlich.solar_to_lunar(d0)
            if prev is not None and not (cur.day == prev.day + 1 or cur.day == 1):
                problems.append(f"monotonicity: {d0 - timedelta(days=1)} {prev} -> {d0} {cur}")
            prev = cur
        for msg in problems:
            failures += 1
            print("FAIL", msg)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip tests: gregorian -> lunar -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Random trials; 0 walks every day in the range.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = roundtrip_test(start, end, N=args.N, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
