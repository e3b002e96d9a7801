"""
amlich.engines.calendar
-----------------------
The orchestrator. Binds the month layer (anchors, leap months) to civil Julian
Day Numbers and exposes solar <-> lunar conversion and month-level queries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..core.errors import InvalidLunarDate, LunarYearOutOfRange, UnsupportedRange
from ..core.time import jdn_to_date
from ..core.types import LunarDate, LunarMonth, SolarDate
from .month import LunisolarMonthEngine, leap_label
from .specs import CalendarParams

LOGGER = logging.getLogger(__name__)


class CalendarEngine:
    """
    Translates civil days (JDN) to lunar date labels and back.
    Stateless apart from the memoized astronomy underneath.
    """
    def __init__(self, params: CalendarParams):
        self.params = params
        self.month = LunisolarMonthEngine(params)

    # ---------------------------------------------------------
    # Range checks
    # ---------------------------------------------------------

    def check_solar_year(self, year: int) -> None:
        p = self.params
        if not (p.min_year <= year <= p.max_year):
            raise UnsupportedRange(f"Solar year {year} outside supported range {p.min_year}..{p.max_year}")

    def check_lunar_year(self, year: int) -> None:
        p = self.params
        if not (p.min_lunar_year <= year <= p.max_lunar_year):
            raise LunarYearOutOfRange(
                f"Lunar year {year} outside supported range {p.min_lunar_year}..{p.max_lunar_year}"
            )

    def check_resolved_jdn(self, jdn: int, what: object) -> None:
        """
        A lunar label is supported only when the civil day it resolves to is.
        Lunar years at the ends of the range are partly outside it.
        """
        p = self.params
        year = jdn_to_date(jdn)[2]
        if not (p.min_year <= year <= p.max_year):
            raise LunarYearOutOfRange(
                f"{what} falls in solar year {year}, outside supported range {p.min_year}..{p.max_year}"
            )

    # ---------------------------------------------------------
    # Inverse: JDN to lunar label
    # ---------------------------------------------------------

    def from_jdn(self, jdn: int) -> LunarDate:
        me = self.month
        _, month_start = me.month_start(jdn)
        year = jdn_to_date(jdn)[2]

        a11 = me.month_11(year)
        b11 = a11
        if a11 >= month_start:
            lunar_year = year
            a11 = me.month_11(year - 1)
        else:
            lunar_year = year + 1
            b11 = me.month_11(year + 1)

        day = jdn - month_start + 1
        diff = (month_start - a11) // 29
        month = diff + 11
        is_leap = False

        if b11 - a11 > 365:
            leap_off = me.leap_offset(a11)
            if diff >= leap_off:
                month = diff + 10
                is_leap = diff == leap_off

        if month > 12:
            month -= 12
        # months 11 and 12 near a11 still belong to the previous lunar year
        if month >= 11 and diff < 4:
            lunar_year -= 1

        LOGGER.debug("jdn %d: month start %d, a11 %d, diff %d -> %d/%d/%d leap=%s",
                     jdn, month_start, a11, diff, day, month, lunar_year, is_leap)
        return LunarDate(day=day, month=month, year=lunar_year, is_leap_month=is_leap)

    # ---------------------------------------------------------
    # Forward: lunar label to JDN
    # ---------------------------------------------------------

    def resolve_month(self, year: int, month: int, is_leap: bool) -> Tuple[int, int]:
        """
        (first_jdn, length) of lunar month `month` of lunar year `year`.
        Raises InvalidLunarDate if the leap instance is requested but does not exist.
        """
        me = self.month
        # months 11 and 12 sit at the start of the span anchored on their own year
        anchor_year = year - 1 if month < 11 else year
        a11, _, leap_off = me.window(anchor_year)

        k = me.lunation_of(a11)
        off = (month - 11) % 12

        if leap_off is None:
            if is_leap:
                raise InvalidLunarDate(f"Lunar year {year} has no leap month {month}")
        else:
            leap_month = leap_label(leap_off)
            if is_leap and month != leap_month:
                raise InvalidLunarDate(
                    f"Month {month} of lunar year {year} is not a leap month (leap month is {leap_month})"
                )
            if is_leap or off >= leap_off:
                off += 1

        start = me.new_moon(k + off)
        length = me.new_moon(k + off + 1) - start
        return start, length

    def to_jdn(self, lunar: LunarDate) -> int:
        self.check_lunar_year(lunar.year)
        start, length = self.resolve_month(lunar.year, lunar.month, lunar.is_leap_month)
        if lunar.day > length:
            raise InvalidLunarDate(f"{lunar} does not exist: that month has {length} days")
        jdn = start + lunar.day - 1
        self.check_resolved_jdn(jdn, f"Lunar date {lunar}")
        return jdn

    # ---------------------------------------------------------
    # Date-level API
    # ---------------------------------------------------------

    def to_lunar(self, d: SolarDate) -> LunarDate:
        self.check_solar_year(d.year)
        return self.from_jdn(d.jdn)

    def to_solar(self, day: int, month: int, year: int, is_leap_month: bool = False) -> SolarDate:
        lunar = LunarDate(day=day, month=month, year=year, is_leap_month=is_leap_month)
        return SolarDate.from_jdn(self.to_jdn(lunar))

    # ---------------------------------------------------------
    # Month-level API
    # ---------------------------------------------------------

    def month_at(self, jdn: int) -> LunarMonth:
        """The lunar month containing civil day jdn."""
        k, start = self.month.month_start(jdn)
        self.check_resolved_jdn(start, "Lunar month")
        label = self.from_jdn(start)
        length = self.month.new_moon(k + 1) - start
        return LunarMonth(
            year=label.year,
            month=label.month,
            is_leap_month=label.is_leap_month,
            first_jdn=start,
            length=length,
        )

    def month_bounds(self, year: int, month: int, is_leap_month: bool = False) -> LunarMonth:
        self.check_lunar_year(year)
        LunarDate(day=1, month=month, year=year, is_leap_month=is_leap_month)  # nominal bounds
        start, length = self.resolve_month(year, month, is_leap_month)
        self.check_resolved_jdn(start, f"Lunar month {year}/{month}{'L' if is_leap_month else ''}")
        return LunarMonth(year=year, month=month, is_leap_month=is_leap_month, first_jdn=start, length=length)

    def months_in_year(self, year: int) -> List[LunarMonth]:
        self.check_lunar_year(year)
        first, _ = self.resolve_month(year, 1, False)
        end, _ = self.resolve_month(year + 1, 1, False)

        out: List[LunarMonth] = []
        jdn = first
        while jdn < end:
            m = self.month_at(jdn)
            out.append(m)
            jdn = m.last_jdn + 1
        return out

    def leap_month(self, year: int) -> Optional[int]:
        self.check_lunar_year(year)
        return self.month.leap_month(year)

    def new_year_jdn(self, year: int) -> int:
        self.check_lunar_year(year)
        start, _ = self.resolve_month(year, 1, False)
        self.check_resolved_jdn(start, f"New year of lunar year {year}")
        return start

    def next_month(self, year: int, month: int, is_leap_month: bool = False) -> LunarMonth:
        b = self.month_bounds(year, month, is_leap_month)
        return self.month_at(b.last_jdn + 1)

    def prev_month(self, year: int, month: int, is_leap_month: bool = False) -> LunarMonth:
        b = self.month_bounds(year, month, is_leap_month)
        return self.month_at(b.first_jdn - 1)

    def info(self) -> Dict[str, Any]:
        return self.params.info()
