from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect
import logging

from .core.errors import AmlichError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def _fmt_sb(sb) -> str:
    return f"({sb.stem}, {sb.branch})"


def cmd_day(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich day", description="Gregorian -> Vietnamese lunar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p.add_argument("--hour", type=int, default=None, help="civil hour 0..23 for the hour stem-branch")
    args = p.parse_args(argv)

    try:
        d = _parse_ymd(args.date)
    except ValueError as e:
        raise amlich.InvalidSolarDate(f"{args.date}: {e}") from e

    try:
        info = amlich.day_info(d, attributes=tuple(args.attr))
    except KeyError as e:
        p.error(e.args[0])
    lunar = info.lunar
    day_sb = amlich.day_stem_branch(d)

    print(f"solar : {info.civil_date}")
    print(f"lunar : {lunar.day}/{lunar.month}{'L' if lunar.is_leap_month else ''}/{lunar.year}")
    print(f"year  : {_fmt_sb(amlich.year_stem_branch(lunar.year))}")
    print(f"day   : {_fmt_sb(day_sb)}")
    if args.hour is not None:
        try:
            hour_sb = amlich.hour_stem_branch(day_sb, args.hour)
        except ValueError as e:
            raise amlich.AmlichError(str(e)) from e
        print(f"hour  : {_fmt_sb(hour_sb)}")
    special = amlich.classify_special_day(lunar.day)
    if special is not amlich.SpecialDayKind.NONE:
        print(f"special: {special.value}")
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"{k}: {v}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich solar", description="Vietnamese lunar date -> Gregorian")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="the leap instance of the month")
    args = p.parse_args(argv)

    d = amlich.lunar_to_solar(args.day, args.month, args.year, args.leap)
    print(d)
    return 0


def cmd_year(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich year", description="List the lunar months of a lunar year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    months = amlich.months_in_year(args.year)
    leap = amlich.leap_month(args.year)
    print(f"Lunar year {args.year}  {_fmt_sb(amlich.year_stem_branch(args.year))}  "
          f"leap month: {leap if leap is not None else '-'}")
    for m in months:
        tag = "L" if m.is_leap_month else " "
        print(f"  {m.month:2d}{tag}  {m.first_date} .. {m.last_date}  ({m.length} days)")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `amlich YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + list(argv)

    p = argparse.ArgumentParser(prog="amlich", description="Vietnamese lunisolar calendar CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunar day label", add_help=False)
    sub.add_parser("solar", help="Lunar date -> Gregorian", add_help=False)
    sub.add_parser("year", help="List the lunar months of a year", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print Tet date table (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-months", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "day":
            return cmd_day(rest)

        if args.cmd == "solar":
            return cmd_solar(rest)

        if args.cmd == "year":
            return cmd_year(rest)

        if args.cmd == "pretty-month":
            return _run_module_main("amlich.diagnostics.pretty_month", rest)

        if args.cmd == "new-years":
            return _run_module_main("amlich.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "leap-months": "amlich.diagnostics.leap_months",
                "round-trip": "amlich.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except AmlichError as e:
        print(f"amlich: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
