from __future__ import annotations

from datetime import date
import argparse

import amlich


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Tet (lunar New Year) dates with year stem-branch and leap month."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in the Tet column (default: mmdd).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=2,
        help="After the table, list the years whose Tet falls in this Gregorian month (default: 2=February).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Tet", "Can-Chi", "Leap"]
    colw = [5, 10, 8, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[date, int]] = []

    for Y in range(Y0, Y1 + 1):
        d = amlich.new_year_day(Y).to_date()
        sb = amlich.year_stem_branch(Y)
        leap = amlich.leap_month(Y)
        row = [
            str(Y),
            fmt(d),
            f"{sb.stem},{sb.branch}",
            str(leap) if leap is not None else "-",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if d.month == args.list_month:
            hits.append((d, Y))

    print(f"\nTet occurrences in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0

    hits.sort()
    for d, Y in hits:
        print(f"{d.isoformat()}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
