# tests/test_time.py

import random
from datetime import date

from amlich.core.time import JDN_J2000, date_to_jdn, from_jdn, jdn_to_date, to_jdn

def test_jdn_date_roundtrip():
    random.seed(42)
    # years 1..9999 so the datetime cross-check stays in range
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        d, m, y = jdn_to_date(jdn_in)
        assert date_to_jdn(d, m, y) == jdn_in
        assert from_jdn(jdn_in) == date(y, m, d)

def test_matches_proleptic_ordinal():
    random.seed(7)
    for _ in range(2000):
        d = date.fromordinal(random.randint(1, 3652059))
        assert to_jdn(d) == d.toordinal() + 1721425

def test_known_epochs():
    assert date_to_jdn(1, 1, 2000) == JDN_J2000 == 2451545
    assert date_to_jdn(1, 1, 1900) == 2415021
    assert date_to_jdn(1, 1, 1970) == 2440588
    assert jdn_to_date(2451545) == (1, 1, 2000)

def test_leap_days():
    assert date_to_jdn(1, 3, 2000) - date_to_jdn(28, 2, 2000) == 2
    assert date_to_jdn(1, 3, 1900) - date_to_jdn(28, 2, 1900) == 1
    assert jdn_to_date(date_to_jdn(29, 2, 2024)) == (29, 2, 2024)
