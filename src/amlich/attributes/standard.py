from __future__ import annotations
from typing import Any, Dict

from ..core.types import LunarDate, SolarDate
from .registry import register_attribute
from .special_days import classify_special_day
from .stem_branch import day_stem_branch_jdn, year_stem_branch

def weekday(civil: SolarDate, lunar: LunarDate) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun (ISO-like).
    return {"weekday": civil.jdn % 7}

def year_label(civil: SolarDate, lunar: LunarDate) -> Dict[str, Any]:
    # labelled by the lunar year, so days before Tet keep the previous year's label
    return {"year_stem_branch": year_stem_branch(lunar.year)}

def day_label(civil: SolarDate, lunar: LunarDate) -> Dict[str, Any]:
    return {"day_stem_branch": day_stem_branch_jdn(civil.jdn)}

def special_day(civil: SolarDate, lunar: LunarDate) -> Dict[str, Any]:
    return {"special_day": classify_special_day(lunar.day)}

register_attribute("weekday", weekday)
register_attribute("year_stem_branch", year_label)
register_attribute("day_stem_branch", day_label)
register_attribute("special_day", special_day)
