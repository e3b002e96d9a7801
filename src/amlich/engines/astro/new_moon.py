"""
amlich.engines.astro.new_moon
-----------------------------
Time of the k-th new moon after the epoch lunation of 1900 January 0.76 (JDE),
using the truncated series of Meeus' "Astronomical Formulae for Calculators".

Accuracy is a few minutes over 1900-2100, which is enough to place a new moon
on the right civil day except in rare cases close to local midnight. Results
are memoized: for a fixed (k, offset) the answer never changes.
"""

from __future__ import annotations

import math
from functools import lru_cache

from .deltat import DeltaTModel, MEEUS_AFC_DELTA_T

# Mean new moon of lunation k = 0 (JDE) and the mean synodic month (days)
EPOCH_JDE = 2415020.75933
SYNODIC_MONTH = 29.53058868

# Lunations per Julian century, used to turn k into centuries T
LUNATIONS_PER_CENTURY = 1236.85

# Lunation estimate from a civil JDN: epoch expressed as a civil day count
# and the mean month to the precision used for indexing.
EPOCH_JDN_F = 2415021.076998695
SYNODIC_MONTH_INDEX = 29.530588853

DR = math.pi / 180.0

# (m, m', f, amp0, amp1): amplitude (days) = amp0 + amp1 * T,
# argument = m*M + m'*M' + f*F with
#   M  = sun's mean anomaly
#   M' = moon's mean anomaly
#   F  = moon's argument of latitude
NEW_MOON_TERMS = (
    (1, 0, 0, 0.1734, -0.000393),
    (2, 0, 0, 0.0021, 0.0),
    (0, 1, 0, -0.4068, 0.0),
    (0, 2, 0, 0.0161, 0.0),
    (0, 3, 0, -0.0004, 0.0),
    (0, 0, 2, 0.0104, 0.0),
    (1, 1, 0, -0.0051, 0.0),
    (1, -1, 0, -0.0074, 0.0),
    (1, 0, 2, 0.0004, 0.0),
    (-1, 0, 2, -0.0004, 0.0),
    (0, 1, 2, -0.0006, 0.0),
    (0, -1, 2, 0.0010, 0.0),
    (1, 2, 0, 0.0005, 0.0),
)


def mean_new_moon_jde(k: int) -> float:
    """Mean new moon (JDE) of lunation k, including the small secular term."""
    T = k / LUNATIONS_PER_CENTURY
    T2 = T * T
    T3 = T2 * T
    jde = EPOCH_JDE + SYNODIC_MONTH * k + 0.0001178 * T2 - 0.000000155 * T3
    return jde + 0.00033 * math.sin((166.56 + 132.87 * T - 0.009173 * T2) * DR)


def new_moon_jde(k: int, delta_t: DeltaTModel = MEEUS_AFC_DELTA_T) -> float:
    """
    True new moon of lunation k as a Julian Date, with ΔT removed.
    """
    T = k / LUNATIONS_PER_CENTURY
    T2 = T * T
    T3 = T2 * T

    M = 359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3
    Mp = 306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3
    F = 21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3

    c1 = 0.0
    for m, mp, f, amp0, amp1 in NEW_MOON_TERMS:
        arg = (m * M + mp * Mp + f * F) * DR
        c1 += (amp0 + amp1 * T) * math.sin(arg)

    return mean_new_moon_jde(k) + c1 - delta_t.delta_t_days(T)


@lru_cache(maxsize=8192)
def new_moon_jdn(
    k: int,
    civil_offset_hours: float = 7.0,
    delta_t: DeltaTModel = MEEUS_AFC_DELTA_T,
) -> int:
    """Civil day (JDN) on which the k-th new moon falls at the given UTC offset."""
    return math.floor(new_moon_jde(k, delta_t) + 0.5 + civil_offset_hours / 24.0)


def lunation_index(jdn: int) -> int:
    """Index of the last mean lunation starting on or before civil day jdn."""
    return math.floor((jdn - EPOCH_JDN_F) / SYNODIC_MONTH_INDEX)


def nearest_lunation_index(jdn: int) -> int:
    """Index of the mean lunation closest to civil day jdn."""
    return math.floor((jdn - EPOCH_JDN_F) / SYNODIC_MONTH_INDEX + 0.5)
