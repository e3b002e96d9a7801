from __future__ import annotations

from ..core.types import SpecialDayKind

NEW_MONTH_DAY = 1
FULL_MONTH_DAY = 15


def classify_special_day(lunar_day: int) -> SpecialDayKind:
    """Day 1 is the new-moon day, day 15 the full-moon day."""
    if lunar_day == NEW_MONTH_DAY:
        return SpecialDayKind.NEW_MONTH
    if lunar_day == FULL_MONTH_DAY:
        return SpecialDayKind.FULL_MONTH
    return SpecialDayKind.NONE
