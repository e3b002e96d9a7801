"""
amlich.engines.astro.solar
--------------------------
Sun's true ecliptic longitude and the 30-degree sector (solar term) it lies in.
"""

from __future__ import annotations

import math
from math import fmod

J2000 = 2451545.0  # JD at J2000.0


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


def sun_longitude_deg(jd: float) -> float:
    """
    True solar longitude (degrees, [0,360)) at Julian Date jd:
    mean longitude L0 plus the equation of centre.
    """
    T = (jd - J2000) / 36525.0
    T2 = T * T
    M = math.radians(357.52910 + 35999.05030 * T - 0.0001559 * T2 - 0.00000048 * T * T2)
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T2

    C = (
        (1.914600 - 0.004817 * T - 0.000014 * T2) * math.sin(M)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M)
        + 0.000290 * math.sin(3.0 * M)
    )
    return wrap_deg(L0 + C)


def sun_longitude_sector(jdn: int, civil_offset_hours: float = 7.0) -> int:
    """
    Solar term index 0..11 of the sun's longitude at the local midnight
    that starts civil day jdn. Sector 9 begins at the winter solstice (270°).
    """
    jd = jdn - 0.5 - civil_offset_hours / 24.0
    return int(sun_longitude_deg(jd) // 30.0) % 12
