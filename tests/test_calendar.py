#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Jan 11 22:26:04 2025

@author: Marcel Hesselberth
"""


from civdate.calendar import *
from civdate.constants import ENGLAND
from civdate.errors import InvalidDate
import logging
import pytest


def test_is_gregorian():
    cal = Calendar()
    assert(cal.is_gregorian(-5000, 1, 1) is False)
    assert(cal.is_gregorian(-4712, 1, 1) is False)
    assert(cal.is_gregorian(0, 12, 25) is False)
    assert(cal.is_gregorian(1000, 12, 31) is False)
    assert(cal.is_gregorian(1582, 1, 1) is False)
    assert(cal.is_gregorian(1582, 10, 4) is False)
    assert(cal.is_gregorian(1582, 10, 15) is True)
    assert(cal.is_gregorian(1582, 12, 31) is True)
    assert(cal.is_gregorian(2025, 1, 11) is True)

def test_JD():
    cal = Calendar()
    assert(cal.JD(2025,   1, 11) == 2460687)
    assert(cal.JD(2000,   1,  1) == 2451545)
    assert(cal.JD(1999,   1,  1) == 2451180)
    assert(cal.JD(1987,   6, 19) == 2446966)
    assert(cal.JD(1900,   1,  1) == 2415021)
    assert(cal.JD(1600,  12, 31) == 2305813)
    assert(cal.JD(837,    4, 10) == 2026872)
    assert(cal.JD(-123,  12, 31) == 1676497)
    assert(cal.JD(-122,   1,  1) == 1676498)
    assert(cal.JD(-1000,  7, 12) == 1356001)
    assert(cal.JD(-1000,  2, 29) == 1355867)
    assert(cal.JD(-4712,  1,  1) == 0)

def test_MJD():
    cal = Calendar()
    assert(cal.MJD(1858, 11, 17) == 0)
    assert(cal.RMJD(0) == (1858, 11, 17))
    with pytest.raises(ValueError) as excinfo:
        skip = cal.JD(1582, 10, 10)

def test_JD_RJD_invariant():
    cal = Calendar()
    for jd in range(1721057, 2634166, 97):  # year 0 until 2500
        year, month, day = cal.RJD(jd)
        assert(cal.JD(year, month, day) == jd)

def test_calendar_reform():
    cal = Calendar()
    assert(cal.JD(1582, 10, 15) - cal.JD(1582, 10, 4) == 1)
    for DD in range(5, 15):
        with pytest.raises(InvalidDate) as excinfo:
            skip = cal.JD(1582, 10, DD)

def test_calendars():
    cal = Calendar()
    cal.setJulian()
    assert(cal.JD(1582, 10, 10) == 2299166)
    assert(cal.is_leapyear(1900) is True)
    cal.setGregorian()
    assert(cal.JD(1582, 10, 10) == 2299156)
    assert(cal.is_leapyear(1900) is False)
    cal.setMixed(1752, 9, 14)
    assert(cal.start == ENGLAND)
    assert(cal.JD(1752, 9, 14) - cal.JD(1752, 9, 2) == 1)
    assert(cal.is_gregorian(1700, 1, 1) is False)
    with pytest.raises(InvalidDate) as excinfo:
        cal.setMixed(1500, 1, 1)
    cal.setDefault()
    assert(cal.start == ITALY)

def test_weekday():
    cal = Calendar()
    jd = cal.JD(2025, 1, 12)
    assert(cal.weekday(jd) == 0)
    assert(cal.isoweekday(jd) == 7)
    assert(cal.weekday_str(jd - 1) == "Saturday")

def test_iso_weeks():
    cal = Calendar()
    assert(cal.G2I(2001, 2, 3) == (2001, 5, 6))
    assert(cal.G2I(2008, 12, 29) == (2009, 1, 1))
    assert(cal.I2G(2009, 1, 1) == (2008, 12, 29))
    assert(cal.I2G(2004, 53, 7) == (2005, 1, 2))
    with pytest.raises(InvalidDate) as excinfo:
        cal.I2G(2005, 53, 1)

def test_leapyears():
    assert(is_julian_leapyear(1900) is True)
    assert(is_gregorian_leapyear(1900) is False)
    assert(is_gregorian_leapyear(2000) is True)
    assert(is_gregorian_leapyear(-4) is True)
    assert(is_julian_leapyear(10**30) is True)
    with pytest.raises(TypeError) as excinfo:
        is_julian_leapyear("2000")

def test_civil():
    assert(civil_to_jd(2001, 2, 3) == 2451944)
    assert(jd_to_civil(2451944) == (2001, 2, 3))
    assert(civil_to_jd(2001, 2, 3, JULIAN) == 2451957)
    assert(jd_to_civil(2451957, JULIAN) == (2001, 2, 3))
    with pytest.raises(ValueError) as excinfo:
        civil_to_jd(2001, 2, 3, ITALY)

def test_civil_negative():
    assert(civil_to_jd_reform(2001, -1, -1) == 2452275)
    assert(civil_to_jd_reform(2001, 2, -1) == civil_to_jd_reform(2001, 2, 28))
    assert(civil_to_jd_reform(2000, 2, -1) == civil_to_jd_reform(2000, 2, 29))
    assert(civil_to_jd_reform(1582, 10, -1) == 2299177)
    with pytest.raises(InvalidDate) as excinfo:
        civil_to_jd_reform(2001, 13, 1)
    with pytest.raises(InvalidDate) as excinfo:
        civil_to_jd_reform(2001, 2, -29)

def test_civil_reform():
    assert(civil_to_jd_reform(1582, 10, 4) == 2299160)
    assert(civil_to_jd_reform(1582, 10, 15) == 2299161)
    assert(jd_to_civil_reform(2299160) == (1582, 10, 4))
    assert(jd_to_civil_reform(2299161) == (1582, 10, 15))
    assert(civil_to_jd_reform(1752, 9, 2, ENGLAND) == 2361221)
    assert(civil_to_jd_reform(1752, 9, 14, ENGLAND) == 2361222)
    for day in range(3, 14):
        assert(valid_civil(1752, 9, day, ENGLAND) is False)
        assert(valid_civil(1752, 9, day) is True)

def test_civil_types():
    with pytest.raises(TypeError) as excinfo:
        civil_to_jd_reform("2001", 2, 3)
    with pytest.raises(TypeError) as excinfo:
        civil_to_jd_reform(2001, None, 3)
    with pytest.raises(InvalidDate) as excinfo:
        civil_to_jd_reform(2001.5, 2, 3)
    assert(civil_to_jd_reform(2001.0, 2, 3) == 2451944)
    assert(civil_to_jd_reform(np.int64(2001), np.int32(2), 3) == 2451944)
    assert(valid_civil("2001", 2, 3) is False)

def test_huge_years():
    for year in (5000000, -5000000, 10**20, -10**20):
        for sg in (ITALY, ENGLAND, JULIAN, GREGORIAN):
            jd = civil_to_jd_reform(year, 3, 1, sg)
            assert(jd_to_civil_reform(jd, sg) == (year, 3, 1))
            assert(jd_to_civil_reform(jd - 1, sg).month == 2)
    jd = civil_to_jd(5000000, 1, 1)
    assert(jd_to_wday(jd) == jd_to_wday(jd + 7 * CM_PERIOD))
    assert(jd_to_civil(jd + CM_PERIOD) == (5000000 + CM_PERIOD_GCY, 1, 1))

def test_folding():
    assert(decode_jd(-1) == (-1, CM_PERIOD - 1))
    assert(encode_jd(*decode_jd(123456789)) == 123456789)
    assert(decode_year(-4712, GREGORIAN) == (0, -4712))
    nth, ry = decode_year(200000, JULIAN)
    assert(nth == 1 and encode_year(nth, ry, JULIAN) == 200000)
    assert(guess_style(1000, ITALY) == JULIAN)
    assert(guess_style(2000, ITALY) == GREGORIAN)
    assert(guess_style(1600, ITALY) == 0)
    assert(guess_style(1600, JULIAN) == JULIAN)

def test_ordinal():
    assert(ordinal_to_jd(2001, 34) == 2451944)
    assert(ordinal_to_jd(2001, -1) == 2452275)
    assert(jd_to_ordinal(2451944) == (2001, 34))
    assert(jd_to_ordinal(2299161) == (1582, 278))
    assert(valid_ordinal(2001, 366) is False)
    assert(valid_ordinal(2000, 366) is True)
    assert(valid_ordinal(1582, 355) is True)
    assert(valid_ordinal(1582, 356) is False)

def test_commercial():
    assert(commercial_to_jd(2001, 5, 6) == 2451944)
    assert(jd_to_commercial(2451944) == (2001, 5, 6))
    assert(commercial_to_jd(1998, -1, -1) == civil_to_jd_reform(1999, 1, 3))
    assert(valid_commercial(2004, 53, 1) is True)
    assert(valid_commercial(2005, 53, 1) is False)
    assert(valid_commercial(2001, 5, 8) is False)

def test_weeknum():
    assert(weeknum_to_jd(2002, 11, 4, 0) == 2452355)
    assert(jd_to_weeknum(2451944, 0) == (2001, 4, 6))
    assert(jd_to_weeknum(2451944, 1) == (2001, 5, 5))
    assert(weeknum_to_jd(2001, 5, 5, 1) == 2451944)
    assert(valid_weeknum(2001, 0, 0, 0) is False)
    assert(valid_weeknum(2001, 0, 6, 0) is True)

def test_nth_kday():
    assert(nth_kday_to_jd(1992, 2, 5, 6) == 2448682)
    assert(jd_to_nth_kday(2448682) == (1992, 2, 5, 6))
    assert(nth_kday_to_jd(2001, 2, -1, 6) == civil_to_jd_reform(2001, 2, 24))
    assert(valid_nth_kday(2006, 5, 5, 0) is False)
    assert(valid_nth_kday(2006, 5, -5, 0) is False)
    assert(valid_nth_kday(2006, 4, 5, 0) is True)

def test_wday():
    assert(jd_to_wday(0) == 1)
    assert(jd_to_wday(2451944) == 6)
    assert(jd_to_wday(-1) == 0)

def test_local_utc():
    assert(jd_local_to_utc(2451944, 3600, 7200) == (2451943, 82800))
    assert(jd_local_to_utc(2451944, 82800, -7200) == (2451945, 3600))
    assert(jd_utc_to_local(2451943, 82800, 7200) == (2451944, 3600))

def test_valid_start(caplog):
    assert(valid_start(ITALY) == ITALY)
    assert(valid_start(float("inf")) == JULIAN)
    assert(valid_start(float("-inf")) == GREGORIAN)
    assert(valid_start(2361222.0) == ENGLAND)
    with caplog.at_level(logging.WARNING):
        assert(valid_start(0) == ITALY)
    assert("invalid start" in caplog.text)
    with pytest.raises(TypeError) as excinfo:
        valid_start("ITALY")

def test_epoch():
    assert(civil_to_jd_reform(-4713, 11, 24, GREGORIAN) == 0)
    assert(civil_to_jd_reform(-4712, 1, 1, JULIAN) == 0)
    assert(jd_to_civil_reform(0, GREGORIAN) == (-4713, 11, 24))
    assert(jd_to_civil_reform(0) == (-4712, 1, 1))

def test_reform_roundtrip():
    for sg in (ITALY, ENGLAND):
        for jd in range(sg - 400, sg + 400):
            year, month, day = jd_to_civil_reform(jd, sg)
            assert(civil_to_jd_reform(year, month, day, sg) == jd)
            assert(jd_to_civil_reform(civil_to_jd_reform(year, month, day,
                                                         sg), sg)
                   == (year, month, day))

def test_big_nth_roundtrip():
    for nth in (2**64 + 1, -2**64 - 3, 2**100):
        for rjd in (0, 2299160, 2361222, CM_PERIOD - 1):
            jd = encode_jd(nth, rjd)
            assert(decode_jd(jd) == (nth, rjd))
            for sg in (ITALY, ENGLAND, JULIAN, GREGORIAN):
                year, month, day = jd_to_civil_reform(jd, sg)
                assert(civil_to_jd_reform(year, month, day, sg) == jd)
            assert(jd_to_wday(jd) == jd_to_wday(rjd))
