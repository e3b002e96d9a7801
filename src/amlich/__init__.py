"""amlich public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    make_engine,
    engine_info,
    solar_to_lunar,
    lunar_to_solar,
    day_info,
    leap_month,
    month_bounds,
    days_in_month,
    months_in_year,
    new_year_day,
    next_month,
    prev_month,
    special_days_in_month,
    year_stem_branch,
    day_stem_branch,
    hour_stem_branch,
    day_hours,
    classify_special_day,
    lunar_age,
)
from .core.errors import (
    AmlichError,
    InvalidLunarDate,
    InvalidSolarDate,
    LunarYearOutOfRange,
    UnsupportedRange,
)
from .core.types import DayInfo, HourSlot, LunarDate, LunarMonth, SolarDate, SpecialDayKind, StemBranch
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
    "AmlichError",
    "InvalidLunarDate",
    "InvalidSolarDate",
    "LunarYearOutOfRange",
    "UnsupportedRange",
    "DayInfo",
    "HourSlot",
    "LunarDate",
    "LunarMonth",
    "SolarDate",
    "SpecialDayKind",
    "StemBranch",
    "CalendarParams",
    "VIETNAM",
]
