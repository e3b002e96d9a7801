from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple, Union

from .errors import InvalidLunarDate, InvalidSolarDate
from .time import date_to_jdn, jdn_to_date


@dataclass(frozen=True, order=True)
class SolarDate:
    """A proleptic Gregorian calendar date. Ordered by (year, month, day)."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            date(self.year, self.month, self.day)
        except (TypeError, ValueError) as e:
            raise InvalidSolarDate(f"{self.year:04d}-{self.month:02d}-{self.day:02d} is not a Gregorian date") from e

    @classmethod
    def of(cls, day: int, month: int, year: int) -> "SolarDate":
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_date(cls, d: date) -> "SolarDate":
        return cls(year=d.year, month=d.month, day=d.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "SolarDate":
        day, month, year = jdn_to_date(jdn)
        return cls(year=year, month=month, day=day)

    @property
    def jdn(self) -> int:
        return date_to_jdn(self.day, self.month, self.year)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


SolarLike = Union[SolarDate, date]

def as_solar(d: SolarLike) -> SolarDate:
    if isinstance(d, SolarDate):
        return d
    if isinstance(d, date):
        return SolarDate.from_date(d)
    raise TypeError(f"Expected SolarDate or datetime.date, got {type(d).__name__}")


@total_ordering
@dataclass(frozen=True)
class LunarDate:
    """
    A lunar date label. Ordered chronologically: a leap month follows the
    regular month it repeats.
    """
    day: int
    month: int
    year: int
    is_leap_month: bool = False

    def __post_init__(self) -> None:
        if not (1 <= self.day <= 30):
            raise InvalidLunarDate(f"Lunar day must be in 1..30, got {self.day}")
        if not (1 <= self.month <= 12):
            raise InvalidLunarDate(f"Lunar month must be in 1..12, got {self.month}")

    @property
    def sort_key(self) -> Tuple[int, int, bool, int]:
        return (self.year, self.month, self.is_leap_month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LunarDate):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        leap = "L" if self.is_leap_month else ""
        return f"{self.year:04d}-{self.month:02d}{leap}-{self.day:02d}"


@dataclass(frozen=True)
class LunarMonth:
    """One lunar month: its label and the civil days it covers."""
    year: int
    month: int
    is_leap_month: bool
    first_jdn: int
    length: int  # 29 or 30

    @property
    def last_jdn(self) -> int:
        return self.first_jdn + self.length - 1

    @property
    def first_date(self) -> SolarDate:
        return SolarDate.from_jdn(self.first_jdn)

    @property
    def last_date(self) -> SolarDate:
        return SolarDate.from_jdn(self.last_jdn)


@dataclass(frozen=True)
class StemBranch:
    """
    A sexagenary label. Stem and branch advance together, so only pairs of
    equal parity exist and the combined cycle has 60 entries.
    """
    stem: int    # 0..9
    branch: int  # 0..11

    def __post_init__(self) -> None:
        if not (0 <= self.stem < 10):
            raise ValueError(f"stem must be in 0..9, got {self.stem}")
        if not (0 <= self.branch < 12):
            raise ValueError(f"branch must be in 0..11, got {self.branch}")
        if (self.stem - self.branch) % 2:
            raise ValueError(f"({self.stem}, {self.branch}) is not in the sexagenary cycle")

    @property
    def cycle_index(self) -> int:
        """Position 0..59 in the cycle; 0 is stem 0 with branch 0."""
        # CRT: i = stem (mod 10), i = branch (mod 12)
        return (6 * self.stem - 5 * self.branch) % 60

    @classmethod
    def from_cycle_index(cls, i: int) -> "StemBranch":
        return cls(stem=i % 10, branch=i % 12)

    def advance(self, n: int) -> "StemBranch":
        return StemBranch(stem=(self.stem + n) % 10, branch=(self.branch + n) % 12)


@dataclass(frozen=True)
class HourSlot:
    """
    One two-hour slot of the civil day, [start_hour, end_hour). Slot 0 wraps
    midnight (23:00-01:00). `contains` is the membership test for callers
    that hold a slot rather than an hour.
    """
    branch: int
    start_hour: int
    end_hour: int

    def contains(self, hour: int) -> bool:
        if self.start_hour > self.end_hour:
            return hour >= self.start_hour or hour < self.end_hour
        return self.start_hour <= hour < self.end_hour


class SpecialDayKind(Enum):
    NEW_MONTH = "new_month"
    FULL_MONTH = "full_month"
    NONE = "none"


@dataclass(frozen=True)
class DayInfo:
    civil_date: SolarDate
    lunar: LunarDate
    attributes: Optional[Dict[str, Any]] = None
