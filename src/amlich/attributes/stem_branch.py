"""
amlich.attributes.stem_branch
-----------------------------
Sexagenary (stem, branch) labels for years, days and two-hour slots.

All three are the same rule: a fixed anchor plus elapsed units, with the
stem taken mod 10 and the branch mod 12. Python's % is floored, so dates
before an anchor still land in 0..9 / 0..11.
"""

from __future__ import annotations
from typing import List, Tuple

from ..core.time import JDN_J2000
from ..core.types import HourSlot, SolarLike, StemBranch, as_solar

# Year anchor: 1900 is stem 6, branch 0
YEAR_ANCHOR = 1900
YEAR_ANCHOR_STEM = 6
YEAR_ANCHOR_BRANCH = 0

# Day anchor: civil day 2000-01-01 is stem 4, branch 6
DAY_ANCHOR_JDN = JDN_J2000
DAY_ANCHOR_STEM = 4
DAY_ANCHOR_BRANCH = 6


def year_stem_branch(year: int) -> StemBranch:
    n = year - YEAR_ANCHOR
    return StemBranch(stem=(YEAR_ANCHOR_STEM + n) % 10, branch=(YEAR_ANCHOR_BRANCH + n) % 12)


def day_stem_branch_jdn(jdn: int) -> StemBranch:
    n = jdn - DAY_ANCHOR_JDN
    return StemBranch(stem=(DAY_ANCHOR_STEM + n) % 10, branch=(DAY_ANCHOR_BRANCH + n) % 12)


def day_stem_branch(d: SolarLike) -> StemBranch:
    return day_stem_branch_jdn(as_solar(d).jdn)


def hour_slot_index(hour: int) -> int:
    """Slot 0 covers 23:00-00:59, slot 1 01:00-02:59, ..., slot 11 21:00-22:59."""
    if not (0 <= hour <= 23):
        raise ValueError(f"hour must be in 0..23, got {hour}")
    return ((hour + 1) % 24) // 2


HOUR_SLOTS: Tuple[HourSlot, ...] = tuple(
    HourSlot(branch=h, start_hour=(2 * h - 1) % 24, end_hour=2 * h + 1) for h in range(12)
)


def hour_slot(hour: int) -> HourSlot:
    return HOUR_SLOTS[hour_slot_index(hour)]


def hour_stem_branch(day: StemBranch, hour: int) -> StemBranch:
    return day.advance(hour_slot_index(hour))


def day_hours(d: SolarLike) -> List[Tuple[HourSlot, StemBranch]]:
    """The twelve slots of a civil day with their stem-branch labels."""
    day = day_stem_branch(d)
    return [(slot, day.advance(slot.branch)) for slot in HOUR_SLOTS]
