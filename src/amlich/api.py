from __future__ import annotations

from dataclasses import replace
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .attributes import standard as _standard  # noqa: F401  (registers attributes)
from .attributes.registry import compute_attributes
from .attributes.special_days import FULL_MONTH_DAY, NEW_MONTH_DAY, classify_special_day
from .attributes.stem_branch import (
    day_hours,
    day_stem_branch,
    hour_stem_branch,
    year_stem_branch,
)
from .core.types import DayInfo, LunarDate, LunarMonth, SolarDate, SolarLike, SpecialDayKind, as_solar
from .engines.calendar import CalendarEngine
from .engines.specs import CalendarParams, VIETNAM

__all__ = [
    "make_engine",
    "engine_info",
    "solar_to_lunar",
    "lunar_to_solar",
    "day_info",
    "leap_month",
    "month_bounds",
    "days_in_month",
    "months_in_year",
    "new_year_day",
    "next_month",
    "prev_month",
    "special_days_in_month",
    "year_stem_branch",
    "day_stem_branch",
    "hour_stem_branch",
    "day_hours",
    "classify_special_day",
    "lunar_age",
]


@lru_cache(maxsize=None)
def _engine_for(params: CalendarParams) -> CalendarEngine:
    return CalendarEngine(params)

def make_engine(params: CalendarParams = VIETNAM) -> CalendarEngine:
    """The shared CalendarEngine for `params` (one per distinct params value)."""
    return _engine_for(params)

def engine_info(*, params: CalendarParams = VIETNAM) -> Dict[str, Any]:
    return make_engine(params).info()

# ============================================================
# Conversion
# ============================================================

def solar_to_lunar(d: SolarLike, *, params: CalendarParams = VIETNAM) -> LunarDate:
    """
    Lunar date of a civil day.

    Raises InvalidSolarDate / UnsupportedRange for bad input.
    """
    return make_engine(params).to_lunar(as_solar(d))

def lunar_to_solar(
    day: int,
    month: int,
    year: int,
    is_leap_month: bool = False,
    *,
    params: CalendarParams = VIETNAM,
) -> SolarDate:
    """
    Civil day of a lunar date.

    Raises InvalidLunarDate when the label does not exist: out-of-range day or
    month, a leap instance of a month that is not doubled that year, or day 30
    of a 29-day month. A lunar year outside the table raises LunarYearOutOfRange.
    """
    return make_engine(params).to_solar(day, month, year, is_leap_month)

def day_info(
    d: SolarLike,
    *,
    attributes: Sequence[str] = (),
    params: CalendarParams = VIETNAM,
) -> DayInfo:
    civil = as_solar(d)
    info = DayInfo(civil_date=civil, lunar=solar_to_lunar(civil, params=params))
    if attributes:
        info = replace(info, attributes=compute_attributes(info.civil_date, info.lunar, attributes))
    return info

# ============================================================
# Month-level API
# ============================================================

def leap_month(year: int, *, params: CalendarParams = VIETNAM) -> Optional[int]:
    """Month number repeated in lunar year `year`, or None for a 12-month year."""
    return make_engine(params).leap_month(year)

def month_bounds(year: int, month: int, *, is_leap_month: bool = False, params: CalendarParams = VIETNAM) -> LunarMonth:
    return make_engine(params).month_bounds(year, month, is_leap_month)

def days_in_month(year: int, month: int, *, is_leap_month: bool = False, params: CalendarParams = VIETNAM) -> int:
    return month_bounds(year, month, is_leap_month=is_leap_month, params=params).length

def months_in_year(year: int, *, params: CalendarParams = VIETNAM) -> List[LunarMonth]:
    return make_engine(params).months_in_year(year)

def new_year_day(year: int, *, params: CalendarParams = VIETNAM) -> SolarDate:
    """Civil date of Tet (day 1 of month 1) of lunar year `year`."""
    return SolarDate.from_jdn(make_engine(params).new_year_jdn(year))

def next_month(year: int, month: int, *, is_leap_month: bool = False, params: CalendarParams = VIETNAM) -> LunarMonth:
    return make_engine(params).next_month(year, month, is_leap_month)

def prev_month(year: int, month: int, *, is_leap_month: bool = False, params: CalendarParams = VIETNAM) -> LunarMonth:
    return make_engine(params).prev_month(year, month, is_leap_month)

def special_days_in_month(
    year: int,
    month: int,
    *,
    is_leap_month: bool = False,
    params: CalendarParams = VIETNAM,
) -> List[Tuple[SolarDate, SpecialDayKind]]:
    """(civil date, SpecialDayKind) of the new-moon and full-moon days of a lunar month."""
    b = month_bounds(year, month, is_leap_month=is_leap_month, params=params)
    out = []
    for lunar_day in (NEW_MONTH_DAY, FULL_MONTH_DAY):
        out.append((SolarDate.from_jdn(b.first_jdn + lunar_day - 1), classify_special_day(lunar_day)))
    return out

def lunar_age(birth: SolarLike, on: SolarLike, *, params: CalendarParams = VIETNAM) -> int:
    """
    Whole lunar years from `birth` to `on`: the lunar-year difference, less one
    if the lunar anniversary (month, day) has not been reached yet. A leap
    month counts as its regular twin.
    """
    b = solar_to_lunar(birth, params=params)
    t = solar_to_lunar(on, params=params)
    if t < b:
        raise ValueError(f"{on} is before {birth}")
    age = t.year - b.year
    if (t.month, t.day) < (b.month, b.day):
        age -= 1
    return age
