# tests/test_convert.py

import pytest
from datetime import date, timedelta

import amlich
from amlich import (
    InvalidLunarDate,
    InvalidSolarDate,
    LunarDate,
    LunarYearOutOfRange,
    SolarDate,
    UnsupportedRange,
    VIETNAM,
    lunar_to_solar,
    solar_to_lunar,
)

# Tet (1/1) of published Vietnamese calendars
TET = [
    (1968, date(1968, 1, 29)),
    (1985, date(1985, 1, 21)),
    (2000, date(2000, 2, 5)),
    (2007, date(2007, 2, 17)),
    (2020, date(2020, 1, 25)),
    (2023, date(2023, 1, 22)),
    (2024, date(2024, 2, 10)),
    (2025, date(2025, 1, 29)),
    (2026, date(2026, 2, 17)),
]

@pytest.mark.parametrize("year, d", TET)
def test_tet_solar_to_lunar(year, d):
    assert solar_to_lunar(d) == LunarDate(day=1, month=1, year=year)

@pytest.mark.parametrize("year, d", TET)
def test_tet_lunar_to_solar(year, d):
    assert lunar_to_solar(1, 1, year) == SolarDate.from_date(d)
    assert amlich.new_year_day(year) == SolarDate.from_date(d)

def test_tet_2024_scenario():
    assert solar_to_lunar(SolarDate.of(10, 2, 2024)) == LunarDate(1, 1, 2024, False)
    assert lunar_to_solar(1, 1, 2024, False) == SolarDate(2024, 2, 10)
    # the day before is the last day of month 12 of 2023
    assert solar_to_lunar(date(2024, 2, 9)) == LunarDate(30, 12, 2023)

def test_mid_autumn_2024():
    assert lunar_to_solar(15, 8, 2024) == SolarDate(2024, 9, 17)

def test_leap_month_2023():
    assert amlich.leap_month(2023) == 2
    assert lunar_to_solar(1, 2, 2023) == SolarDate(2023, 2, 20)
    assert lunar_to_solar(1, 2, 2023, True) == SolarDate(2023, 3, 22)
    assert lunar_to_solar(1, 3, 2023) == SolarDate(2023, 4, 20)
    assert solar_to_lunar(date(2023, 3, 22)) == LunarDate(1, 2, 2023, True)
    assert solar_to_lunar(date(2023, 3, 21)) == LunarDate(30, 2, 2023, False)

def test_leap_month_2020():
    assert lunar_to_solar(1, 4, 2020) == SolarDate(2020, 4, 23)
    assert lunar_to_solar(1, 4, 2020, True) == SolarDate(2020, 5, 23)
    assert lunar_to_solar(1, 5, 2020) == SolarDate(2020, 6, 21)

@pytest.mark.parametrize(
    "year, leap",
    [
        (2001, 4), (2004, 2), (2006, 7), (2009, 5), (2012, 4),
        (2014, 9), (2017, 6), (2020, 4), (2023, 2), (2025, 6),
        (2024, None), (2022, None), (2026, None),
    ],
)
def test_leap_month_table(year, leap):
    assert amlich.leap_month(year) == leap

def test_other_civil_offset():
    # at UTC+8 the 1985 new year falls a month later
    china = VIETNAM.tweak(name="utc8", civil_offset_hours=8.0)
    assert lunar_to_solar(1, 1, 1985, params=china) == SolarDate(1985, 2, 20)
    assert lunar_to_solar(1, 1, 1985) == SolarDate(1985, 1, 21)

def test_round_trip_full_range():
    start = SolarDate(1900, 1, 1).jdn
    end = SolarDate(2100, 12, 31).jdn
    prev = None
    for jdn in range(start, end + 1):
        d = SolarDate.from_jdn(jdn)
        lunar = solar_to_lunar(d)
        assert lunar_to_solar(lunar.day, lunar.month, lunar.year, lunar.is_leap_month) == d
        if prev is not None:
            assert prev < lunar
            if lunar.day == 1:
                # a new month is the successor of the previous label, across leap months and Tet
                assert prev.day in (29, 30)
                n = amlich.next_month(prev.year, prev.month, is_leap_month=prev.is_leap_month)
                assert (n.year, n.month, n.is_leap_month) == (lunar.year, lunar.month, lunar.is_leap_month)
                assert n.first_jdn == jdn
            else:
                assert lunar.day == prev.day + 1
                assert (lunar.year, lunar.month, lunar.is_leap_month) == (prev.year, prev.month, prev.is_leap_month)
        prev = lunar

def test_range_boundaries():
    first = solar_to_lunar(date(1900, 1, 1))
    assert (first.year, first.month) == (1899, 12)
    assert lunar_to_solar(first.day, first.month, first.year) == SolarDate(1900, 1, 1)
    last = solar_to_lunar(date(2100, 12, 31))
    assert last.year == 2100

def test_unsupported_solar_range():
    with pytest.raises(UnsupportedRange):
        solar_to_lunar(date(1899, 12, 31))
    with pytest.raises(UnsupportedRange):
        solar_to_lunar(date(2101, 1, 1))

def test_unsupported_lunar_range():
    with pytest.raises(LunarYearOutOfRange):
        lunar_to_solar(1, 1, 1898)
    with pytest.raises(UnsupportedRange):
        lunar_to_solar(1, 1, 2101)
    with pytest.raises(InvalidLunarDate):
        lunar_to_solar(1, 1, 2101)

def test_invalid_solar_date():
    with pytest.raises(InvalidSolarDate):
        SolarDate(2023, 2, 29)
    with pytest.raises(InvalidSolarDate):
        SolarDate.of(0, 1, 2024)
    with pytest.raises(TypeError):
        solar_to_lunar("2024-02-10")

def test_invalid_lunar_labels():
    with pytest.raises(InvalidLunarDate):
        lunar_to_solar(31, 1, 2024)
    with pytest.raises(InvalidLunarDate):
        lunar_to_solar(1, 13, 2024)
    with pytest.raises(InvalidLunarDate):
        lunar_to_solar(0, 1, 2024)
    # 2024 has no leap month
    with pytest.raises(InvalidLunarDate):
        lunar_to_solar(1, 1, 2024, True)
    # 2023 doubles month 2, not month 3
    with pytest.raises(InvalidLunarDate):
        lunar_to_solar(1, 3, 2023, True)

def test_day_30_of_short_month():
    short = [m for m in amlich.months_in_year(2024) if m.length == 29]
    assert short
    m = short[0]
    with pytest.raises(InvalidLunarDate):
        lunar_to_solar(30, m.month, m.year, m.is_leap_month)
    assert lunar_to_solar(29, m.month, m.year, m.is_leap_month) == m.last_date

def test_accepts_datetime_date_and_solar_date():
    d = date(2024, 9, 17)
    assert solar_to_lunar(d) == solar_to_lunar(SolarDate.from_date(d)) == LunarDate(15, 8, 2024)
    assert SolarDate.from_date(d).to_date() == d

@pytest.mark.parametrize("d", [date(2054, 5, 7), date(2062, 4, 9)])
def test_late_new_moon_month_start(d):
    # days where the mean lunation estimate runs ahead of the true new moon
    lunar = solar_to_lunar(d)
    assert lunar.day in (29, 30)
    assert lunar_to_solar(lunar.day, lunar.month, lunar.year, lunar.is_leap_month) == SolarDate.from_date(d)
    assert solar_to_lunar(d + timedelta(days=1)).day == 1

def test_late_new_moon_2054():
    assert solar_to_lunar(date(2054, 5, 7)) == LunarDate(30, 3, 2054)
    p = amlich.prev_month(2054, 4)
    assert (p.year, p.month, p.is_leap_month) == (2054, 3, False)
    assert p.last_date == SolarDate(2054, 5, 7)

def test_lunar_labels_outside_solar_range():
    # lunar 1899 is supported only from month 12, which starts on 1900-01-01
    with pytest.raises(LunarYearOutOfRange):
        lunar_to_solar(1, 1, 1899)
    with pytest.raises(LunarYearOutOfRange):
        amlich.new_year_day(1899)
    with pytest.raises(LunarYearOutOfRange):
        amlich.month_bounds(1899, 11)
    with pytest.raises(LunarYearOutOfRange):
        amlich.prev_month(1899, 12)
    assert amlich.month_bounds(1899, 12).first_date == SolarDate(1900, 1, 1)

def test_lunar_labels_past_solar_range():
    m = amlich.month_bounds(2100, 12)
    assert m.first_date.year == 2100
    with pytest.raises(LunarYearOutOfRange):
        amlich.next_month(2100, 12)
    with pytest.raises(UnsupportedRange):
        lunar_to_solar(m.length, 12, 2100)
    assert lunar_to_solar(1, 12, 2100) == m.first_date

def test_lunar_date_ordering():
    assert LunarDate(30, 12, 2023) < LunarDate(1, 1, 2024)
    assert LunarDate(29, 2, 2023) < LunarDate(30, 2, 2023)
    # the leap month follows its regular twin, whatever the day
    assert LunarDate(30, 2, 2023) < LunarDate(1, 2, 2023, True)
    assert LunarDate(29, 2, 2023, True) < LunarDate(1, 3, 2023)
    assert LunarDate(5, 6, 2025) <= LunarDate(5, 6, 2025)
    assert max(LunarDate(1, 2, 2023, True), LunarDate(15, 2, 2023)) == LunarDate(1, 2, 2023, True)
    labels = [solar_to_lunar(date(2023, 1, 1) + timedelta(days=i)) for i in range(0, 400, 9)]
    assert labels == sorted(labels)

def test_lunar_age():
    birth = date(2000, 2, 5)  # Tet 2000
    assert amlich.lunar_age(birth, birth) == 0
    assert amlich.lunar_age(birth, date(2024, 2, 9)) == 23   # 30/12/2023
    assert amlich.lunar_age(birth, date(2024, 2, 10)) == 24  # Tet 2024
    # born mid-year: the Gregorian birthday is not the anniversary
    mid = lunar_to_solar(15, 8, 2000)
    assert amlich.lunar_age(mid, lunar_to_solar(14, 8, 2024)) == 23
    assert amlich.lunar_age(mid, lunar_to_solar(15, 8, 2024)) == 24
    with pytest.raises(ValueError):
        amlich.lunar_age(date(2024, 1, 1), date(2023, 1, 1))
