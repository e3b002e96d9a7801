from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import amlich


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def special_mark(lunar_day: int) -> str:
    kind = amlich.classify_special_day(lunar_day)
    if kind is amlich.SpecialDayKind.NEW_MONTH:
        return "*"
    if kind is amlich.SpecialDayKind.FULL_MONTH:
        return "o"
    return ""


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def layout_weeks(first: date, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(first.weekday()):  # Monday=0
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def lunar_month_calendar(Y: int, M: int, is_leap: bool) -> None:
    b = amlich.month_bounds(Y, M, is_leap_month=is_leap)
    d0 = b.first_date.to_date()

    days = []
    for i in range(b.length):
        d = d0 + timedelta(days=i)
        top = f"{i + 1:2d}{special_mark(i + 1)}"
        bot = f"{d.month:02d}-{d.day:02d}"
        days.append((top, bot))

    leap_tag = "L" if is_leap else ""
    title = f"Lunar month  Y={Y}  M={M}{leap_tag}   ({b.first_date} .. {b.last_date}, {b.length} days)"
    print_grid(title, layout_weeks(d0, days))


def gregorian_month_calendar(gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last_day = pycal.monthrange(gy, gm)[1]

    days = []
    for i in range(last_day):
        d = first + timedelta(days=i)
        t = amlich.solar_to_lunar(d)
        leap_tag = "L" if t.is_leap_month else ""
        top = f"{d.day:2d}{special_mark(t.day)}"
        bot = f"{t.month:02d}{leap_tag}-{t.day:02d}"
        days.append((top, bot))

    title = f"Gregorian month  {gy}-{gm:02d}"
    print_grid(title, layout_weeks(first, days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2026 1)")
    p.add_argument("--leap", action="store_true",
                   help="If set, lunar month is the leap instance (only valid when the label repeats).")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 2)")
    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        lunar_month_calendar(Y=2026, M=1, is_leap=False)
        gregorian_month_calendar(gy=2026, gm=2)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(Y=Y, M=M, is_leap=args.leap)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy=gy, gm=gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
