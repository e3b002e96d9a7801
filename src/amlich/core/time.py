from __future__ import annotations
from datetime import date
from typing import Tuple

# JDN of the civil date 2000-01-01 (J2000.0 noon falls on it)
JDN_J2000 = 2451545


def date_to_jdn(day: int, month: int, year: int) -> int:
    """Gregorian (day, month, year) -> Julian Day Number, integers only."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_date(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of date_to_jdn. Returns (day, month, year)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return day, month, year

def to_jdn(d: date) -> int:
    """datetime.date -> JDN."""
    return date_to_jdn(d.day, d.month, d.year)

def from_jdn(jdn: int) -> date:
    day, month, year = jdn_to_date(jdn)
    return date(year, month, day)
