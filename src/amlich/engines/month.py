"""
amlich.engines.month
--------------------
Month layer of the lunisolar calendar: anchors each solar year on the lunar
month containing the winter solstice (month 11) and resolves which lunation,
if any, is the inserted leap month between two consecutive anchors.

Terminology used below:
  a11          civil day (JDN) starting month 11 of a solar year
  b11          the same for the following solar year
  leap offset  number of lunations from a11 to the leap month
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Tuple

from ..core.time import date_to_jdn
from .astro.deltat import DeltaTModel, MEEUS_AFC_DELTA_T
from .astro.new_moon import lunation_index, nearest_lunation_index, new_moon_jdn
from .astro.solar import sun_longitude_sector
from .specs import CalendarParams

LOGGER = logging.getLogger(__name__)

# Sector of the winter solstice (270°)
WINTER_SOLSTICE_SECTOR = 9

# Longest scan for a month without a sector change; a 13-month year always
# has one within this many lunations of a11.
MAX_LEAP_SCAN = 14


def amod12(x: int) -> int:
    """Arithmetic mod giving 1..12."""
    return ((x - 1) % 12) + 1


@lru_cache(maxsize=1024)
def lunar_month_11(
    year: int,
    civil_offset_hours: float = 7.0,
    delta_t: DeltaTModel = MEEUS_AFC_DELTA_T,
) -> int:
    """
    JDN of the new moon starting lunar month 11 of solar year `year`: the last
    new moon before the December solstice.
    """
    k = lunation_index(date_to_jdn(31, 12, year))
    nm = new_moon_jdn(k, civil_offset_hours, delta_t)
    if sun_longitude_sector(nm, civil_offset_hours) >= WINTER_SOLSTICE_SECTOR:
        nm = new_moon_jdn(k - 1, civil_offset_hours, delta_t)
    return nm


@lru_cache(maxsize=1024)
def leap_month_offset(
    a11: int,
    civil_offset_hours: float = 7.0,
    delta_t: DeltaTModel = MEEUS_AFC_DELTA_T,
) -> int:
    """
    Offset (in lunations, counted from a11) of the first month during which the
    sun stays in one sector: both of its bounding new moons share a sector.
    Only meaningful when the span a11..b11 holds 13 lunations.
    """
    k = nearest_lunation_index(a11)
    i = 1
    arc = sun_longitude_sector(new_moon_jdn(k + i, civil_offset_hours, delta_t), civil_offset_hours)
    while True:
        last = arc
        i += 1
        arc = sun_longitude_sector(new_moon_jdn(k + i, civil_offset_hours, delta_t), civil_offset_hours)
        if arc == last or i >= MAX_LEAP_SCAN:
            break
    return i - 1


def leap_label(leap_offset: int) -> int:
    """Month number repeated by the leap month found at `leap_offset` from a11."""
    # offset 0 is month 11; the leap month copies the label of offset - 1
    return amod12((leap_offset - 1) + 11)


class LunisolarMonthEngine:
    """
    Binds the anchor and leap-month computations to one set of calendar params.
    """
    def __init__(self, params: CalendarParams):
        self.p = params

    @property
    def offset(self) -> float:
        return self.p.civil_offset_hours

    # ---------------------------------------------------------
    # Lunations
    # ---------------------------------------------------------

    def new_moon(self, k: int) -> int:
        return new_moon_jdn(k, self.offset, self.p.delta_t)

    def sector(self, jdn: int) -> int:
        return sun_longitude_sector(jdn, self.offset)

    def month_start(self, jdn: int) -> Tuple[int, int]:
        """
        (k, start) of the lunation containing civil day jdn:
        new_moon(k) = start <= jdn < new_moon(k + 1).
        """
        k = lunation_index(jdn)
        start = self.new_moon(k + 1)
        if start > jdn:
            start = self.new_moon(k)
        else:
            k += 1
        # the mean estimate can run a day ahead of a late true new moon
        while start > jdn:
            k -= 1
            start = self.new_moon(k)
        while self.new_moon(k + 1) <= jdn:
            k += 1
            start = self.new_moon(k)
        return k, start

    def lunation_of(self, month_start: int) -> int:
        return nearest_lunation_index(month_start)

    # ---------------------------------------------------------
    # Anchors and leap months
    # ---------------------------------------------------------

    def month_11(self, year: int) -> int:
        return lunar_month_11(year, self.offset, self.p.delta_t)

    def leap_offset(self, a11: int) -> int:
        return leap_month_offset(a11, self.offset, self.p.delta_t)

    def window(self, year: int) -> Tuple[int, int, Optional[int]]:
        """
        (a11, b11, leap_offset) for the span from month 11 of solar year `year`
        to month 11 of `year + 1`. leap_offset is None for a 12-month span.
        """
        a11 = self.month_11(year)
        b11 = self.month_11(year + 1)
        if b11 - a11 > 365:
            off = self.leap_offset(a11)
            LOGGER.debug("span %d..%d has 13 months, leap offset %d", a11, b11, off)
            return a11, b11, off
        return a11, b11, None

    def leap_month(self, lunar_year: int) -> Optional[int]:
        """
        Month number doubled in lunar year `lunar_year`, or None.

        Months 1..10 of a lunar year lie in the span anchored on the previous
        solar year; months 11 and 12 lie in the span anchored on its own.
        """
        _, _, off = self.window(lunar_year - 1)
        if off is not None and leap_label(off) <= 10:
            return leap_label(off)
        _, _, off = self.window(lunar_year)
        if off is not None and leap_label(off) >= 11:
            return leap_label(off)
        return None
