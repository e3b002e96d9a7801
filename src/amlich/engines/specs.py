"""
amlich.engines.specs
--------------------
Pure data describing a lunisolar calendar: civil offset, supported range and
the ΔT model fed to the new-moon series. Engines are built from these.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict

from .astro.deltat import DeltaTModel, MEEUS_AFC_DELTA_T


@dataclass(frozen=True)
class CalendarParams:
    name: str
    civil_offset_hours: float
    min_year: int
    max_year: int
    delta_t: DeltaTModel = MEEUS_AFC_DELTA_T

    def __post_init__(self) -> None:
        if not (-12.0 <= self.civil_offset_hours <= 14.0):
            raise ValueError("civil_offset_hours must be in -12..14")
        if self.min_year > self.max_year:
            raise ValueError("Require min_year <= max_year")

    @property
    def min_lunar_year(self) -> int:
        # the first weeks of min_year belong to the previous lunar year
        return self.min_year - 1

    @property
    def max_lunar_year(self) -> int:
        return self.max_year

    def tweak(self, **kwargs: Any) -> "CalendarParams":
        return replace(self, **kwargs)

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "civil_offset_hours": self.civil_offset_hours,
            "min_year": self.min_year,
            "max_year": self.max_year,
            "delta_t": self.delta_t.info(),
        }


# Vietnamese civil calendar, UTC+7 throughout
VIETNAM = CalendarParams(name="vietnam", civil_offset_hours=7.0, min_year=1900, max_year=2100)
