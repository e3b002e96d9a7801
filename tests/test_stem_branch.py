# tests/test_stem_branch.py

import pytest
from datetime import date, timedelta

from amlich import (
    HourSlot,
    StemBranch,
    day_hours,
    day_stem_branch,
    hour_stem_branch,
    year_stem_branch,
)
from amlich.attributes.stem_branch import HOUR_SLOTS, day_stem_branch_jdn, hour_slot, hour_slot_index

# Published year labels: Canh Ty 1900 .. Nham Ty 1912, Canh Ty 2020 .. Nham Ty 2032
YEAR_TABLE = [
    (1900, 6, 0), (1901, 7, 1), (1902, 8, 2), (1903, 9, 3), (1904, 0, 4),
    (1905, 1, 5), (1906, 2, 6), (1907, 3, 7), (1908, 4, 8), (1909, 5, 9),
    (1910, 6, 10), (1911, 7, 11), (1912, 8, 0),
    (1984, 0, 0),
    (2020, 6, 0), (2021, 7, 1), (2022, 8, 2), (2023, 9, 3), (2024, 0, 4),
    (2025, 1, 5), (2026, 2, 6), (2027, 3, 7), (2028, 4, 8), (2029, 5, 9),
    (2030, 6, 10), (2031, 7, 11), (2032, 8, 0),
]

@pytest.mark.parametrize("year, stem, branch", YEAR_TABLE)
def test_year_stem_branch_table(year, stem, branch):
    assert year_stem_branch(year) == StemBranch(stem, branch)

def test_year_cycle_over_supported_range():
    for year in range(1899, 2101):
        sb = year_stem_branch(year)
        assert year_stem_branch(year + 60) == sb
        assert year_stem_branch(year + 1) == sb.advance(1)
        assert sb.cycle_index == (year - 1984) % 60

def test_day_stem_branch_anchors():
    assert day_stem_branch(date(2000, 1, 1)) == StemBranch(4, 6)
    assert day_stem_branch(date(2024, 2, 10)) == StemBranch(0, 4)
    assert day_stem_branch(date(1900, 1, 31)) == StemBranch(0, 4)

def test_day_cycle():
    d0 = date(1900, 1, 1)
    for i in range(0, 73000, 13):
        d = d0 + timedelta(days=i)
        sb = day_stem_branch(d)
        assert day_stem_branch(d + timedelta(days=1)) == sb.advance(1)
        assert day_stem_branch(d + timedelta(days=60)) == sb

def test_day_cycle_before_anchor():
    # floored modulo keeps labels valid before the anchor day
    for jdn in range(2400000, 2400100):
        sb = day_stem_branch_jdn(jdn)
        assert day_stem_branch_jdn(jdn + 1) == sb.advance(1)

def test_stem_branch_validation():
    with pytest.raises(ValueError):
        StemBranch(10, 0)
    with pytest.raises(ValueError):
        StemBranch(0, 12)
    with pytest.raises(ValueError):
        StemBranch(0, 1)  # mixed parity is not in the cycle

def test_cycle_index_roundtrip():
    seen = set()
    for i in range(60):
        sb = StemBranch.from_cycle_index(i)
        assert sb.cycle_index == i
        seen.add((sb.stem, sb.branch))
    assert len(seen) == 60
    assert StemBranch(9, 11).advance(1) == StemBranch(0, 0)

def test_hour_slot_coverage():
    assert len(HOUR_SLOTS) == 12
    assert HOUR_SLOTS[0] == HourSlot(branch=0, start_hour=23, end_hour=1)
    for hour in range(24):
        owners = [s for s in HOUR_SLOTS if s.contains(hour)]
        assert owners == [hour_slot(hour)]
        assert hour_slot(hour).branch == hour_slot_index(hour)

@pytest.mark.parametrize(
    "hour, index",
    [(23, 0), (0, 0), (1, 1), (2, 1), (3, 2), (11, 6), (12, 6), (21, 11), (22, 11)],
)
def test_hour_slot_index(hour, index):
    assert hour_slot_index(hour) == index

def test_hour_slot_index_rejects_bad_hour():
    with pytest.raises(ValueError):
        hour_slot_index(24)
    with pytest.raises(ValueError):
        hour_slot_index(-1)

def test_hour_stem_branch():
    day = StemBranch(0, 4)
    assert hour_stem_branch(day, 0) == day
    assert hour_stem_branch(day, 23) == day
    assert hour_stem_branch(day, 1) == StemBranch(1, 5)
    assert hour_stem_branch(day, 22) == day.advance(11)

def test_day_hours():
    hours = day_hours(date(2024, 2, 10))
    assert [slot for slot, _ in hours] == list(HOUR_SLOTS)
    day = day_stem_branch(date(2024, 2, 10))
    for slot, sb in hours:
        assert sb == hour_stem_branch(day, slot.start_hour)
