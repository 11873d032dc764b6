#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Feb  9 12:03:47 2025

@author: Marcel Hesselberth
"""


from civdate.parse import *
from civdate.errors import InvalidDate, ParseLimitError
from fractions import Fraction
import logging
import pytest


def test_iso_date():
    assert(fragments("2001-02-03") == {"year": 2001, "mon": 2, "mday": 3})
    assert(fragments("-0001-02-03")["year"] == -1)

def test_iso_datetime():
    f = fragments("2001-02-03T04:05:06+07:00")
    assert(f == {"year": 2001, "mon": 2, "mday": 3, "hour": 4, "min": 5,
                 "sec": 6, "zone": "+07:00", "offset": 25200})

def test_ctime():
    f = fragments("Sat Aug 28 02:55:50 1999")
    assert(f == {"wday": 6, "year": 1999, "mon": 8, "mday": 28, "hour": 2,
                 "min": 55, "sec": 50})

def test_named_zone():
    f = fragments("Sat Aug 28 02:29:34 JST 1999")
    assert(f["zone"] == "JST")
    assert(f["offset"] == 32400)
    assert(f["year"] == 1999)

def test_eu():
    f = fragments("3rd Feb 2001 04:05:06 PM")
    assert(f == {"year": 2001, "mon": 2, "mday": 3, "hour": 16, "min": 5,
                 "sec": 6})
    assert(fragments("3 February 2001")["mon"] == 2)

def test_us():
    f = fragments("February 3, 2001")
    assert(f == {"year": 2001, "mon": 2, "mday": 3})

def test_ampm():
    assert(fragments("12am")["hour"] == 0)
    assert(fragments("12pm")["hour"] == 12)
    assert(fragments("1 p.m.")["hour"] == 13)
    assert(fragments("11:30 AM")["hour"] == 11)

def test_time_only():
    assert(fragments("10:00") == {"hour": 10, "min": 0})
    f = fragments("04:05:06.25")
    assert(f["sec_fraction"] == Fraction(1, 4))
    assert(fragments("4h30m")["min"] == 30)

def test_jis():
    assert(fragments("H13.02.03") == {"year": 2001, "mon": 2, "mday": 3})
    assert(fragments("R01.05.01")["year"] == 2019)
    assert(fragments("M06.01.01")["year"] == 1873)

def test_slash():
    assert(fragments("02/03/2001") == {"year": 2001, "mon": 3, "mday": 2})
    assert(fragments("2001/02/03") == {"year": 2001, "mon": 2, "mday": 3})

def test_dot():
    assert(fragments("2001.02.03") == {"year": 2001, "mon": 2, "mday": 3})

def test_vms():
    assert(fragments("03-FEB-2001") == {"year": 2001, "mon": 2, "mday": 3})

def test_iso_week():
    assert(fragments("2001-W05-6") == {"cwyear": 2001, "cweek": 5,
                                       "cwday": 6})
    assert(fragments("-W-6") == {"cwday": 6})

def test_iso_elliptic():
    assert(fragments("--02-03") == {"mon": 2, "mday": 3})

def test_iso_ordinal():
    assert(fragments("2001-034") == {"year": 2001, "yday": 34})

def test_ddd():
    assert(fragments("20010203") == {"year": 2001, "mon": 2, "mday": 3})
    f = fragments("20010203T040506Z")
    assert(f == {"year": 2001, "mon": 2, "mday": 3, "hour": 4, "min": 5,
                 "sec": 6, "zone": "Z", "offset": 0})
    assert(fragments("010203") == {"year": 2001, "mon": 2, "mday": 3})
    assert(fragments("2001034") == {"year": 2001, "yday": 34})

def test_century():
    assert(fragments("010203")["year"] == 2001)
    assert(fragments("690203")["year"] == 1969)
    assert(fragments("010203", comp=False)["year"] == 1)
    assert(fragments("'99")["year"] == 1999)

def test_era():
    assert(fragments("3 Feb 44 BC")["year"] == -43)
    assert(fragments("3 Feb 44 B.C.")["year"] == -43)
    assert(fragments("3 Feb 2001 AD")["year"] == 2001)

def test_frag():
    f = fragments("10:00 3")
    assert(f["mday"] == 3)
    assert(f["hour"] == 10)

def test_first_wins():
    f = fragments("2001-02-03 2002-03-04")
    assert(f["year"] == 2001)

def test_weekday():
    assert(fragments("Sat") == {"wday": 6})
    assert(fragments("monday") == {"wday": 1})

def test_empty():
    assert(fragments("") == {})
    assert(fragments("nothing here") == {})

def test_limit():
    with pytest.raises(ParseLimitError) as excinfo:
        fragments("2001-02-03" + " " * 200)
    assert(excinfo.value.limit == 128)
    f = fragments("2001-02-03" + " " * 200, limit=None)
    assert(f["year"] == 2001)
    with pytest.raises(TypeError) as excinfo:
        fragments(20010203)

def test_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="civdate.parse"):
        fragments("2001-02-03")
    assert("iso matched" in caplog.text)

def test_zone_to_diff():
    assert(zone_to_diff("JST") == 32400)
    assert(zone_to_diff("z") == 0)
    assert(zone_to_diff("EST") == -18000)
    assert(zone_to_diff("EST dst") == -14400)
    assert(zone_to_diff("  eastern   Standard TIME ") == -18000)
    assert(zone_to_diff("Eastern daylight time") == -14400)
    assert(zone_to_diff("+09:00") == 32400)
    assert(zone_to_diff("-0330") == -12600)
    assert(zone_to_diff("+9") == 32400)
    assert(zone_to_diff("+093015") == 34215)
    assert(zone_to_diff("+93015") == 34215)
    assert(zone_to_diff("+5.5") == 19800)
    assert(zone_to_diff("+5.25") == 18900)
    assert(zone_to_diff("utc-5") == -18000)
    assert(zone_to_diff("GMT+09:00") == 32400)
    assert(zone_to_diff("+25:00") is None)
    assert(zone_to_diff("bogus") is None)

def test_complete_civil():
    today = 2451944  # 2001-02-03
    f = complete_fragments({"mday": 10}, today=today)
    assert((f["year"], f["mon"], f["mday"]) == (2001, 2, 10))
    f = complete_fragments({"mon": 5}, today=today)
    assert((f["year"], f["mon"], f["mday"]) == (2001, 5, 1))
    f = complete_fragments({"year": 2005, "mday": 7}, today=today)
    assert((f["year"], f["mon"], f["mday"]) == (2005, 1, 7))
    assert((f["hour"], f["min"], f["sec"]) == (0, 0, 0))

def test_complete_other():
    today = 2451944  # Saturday
    f = complete_fragments({"wday": 1}, today=today)
    assert(f["jd"] == 2451939)
    f = complete_fragments({"year": 2001}, today=today)
    assert(f["yday"] == 1)
    assert(fragments_to_jd(f) == 2451911)
    f = complete_fragments({"cweek": 5}, today=today)
    assert((f["cwyear"], f["cweek"], f["cwday"]) == (2001, 5, 1))
    assert(fragments_to_jd(f) == 2451939)
    f = complete_fragments({"yday": 34}, today=today)
    assert(fragments_to_jd(f) == 2451944)

def test_complete_time():
    f = complete_fragments({"hour": 23, "min": 59, "sec": 60})
    assert(f["sec"] == 59)
    with pytest.raises(InvalidDate) as excinfo:
        fragments_to_jd(f)

def test_fragments_to_jd():
    assert(fragments_to_jd({"jd": 2451944}) == 2451944)
    assert(fragments_to_jd({"year": 2001, "mon": 2, "mday": 3}) == 2451944)
    assert(fragments_to_jd({"cwyear": 2001, "cweek": 5, "wday": 6})
           == 2451944)
    assert(fragments_to_jd({"year": 2001, "wnum0": 4, "wday": 6})
           == 2451944)
    assert(fragments_to_jd({"year": 2001, "wnum1": 5, "wday": 6})
           == 2451944)
    with pytest.raises(InvalidDate) as excinfo:
        fragments_to_jd({"year": 2001, "mon": 2, "mday": 29})
    with pytest.raises(InvalidDate) as excinfo:
        fragments_to_jd({})

def test_fragments_to_jd_weekdays():
    # cwday counts 1..7 from Monday, wday 0..6 from Sunday
    assert(fragments_to_jd({"cwyear": 2001, "cweek": 5, "cwday": 7})
           == 2451945)
    assert(fragments_to_jd({"cwyear": 2001, "cweek": 5, "wday": 0})
           == 2451945)
    with pytest.raises(InvalidDate) as excinfo:
        fragments_to_jd({"cwyear": 2001, "cweek": 5, "cwday": 0})
    with pytest.raises(InvalidDate) as excinfo:
        fragments_to_jd({"cwyear": 2001, "cweek": 5, "cwday": 8})
    assert(fragments_to_jd({"year": 2001, "wnum0": 5, "cwday": 7})
           == 2451945)
    assert(fragments_to_jd({"year": 2001, "wnum1": 5, "cwday": 6})
           == 2451944)
    with pytest.raises(InvalidDate) as excinfo:
        fragments_to_jd({"year": 2001, "wnum0": 5, "wday": 7})

def test_no_yday_after_fraction():
    assert("yday" not in fragments("1.2001-123"))

def test_half_hour_offset():
    f = fragments("3rd Feb 2001 04:05:06+03:30")
    assert((f["year"], f["mon"], f["mday"]) == (2001, 2, 3))
    assert(f["zone"] == "+03:30")
    assert(f["offset"] == 12600)
