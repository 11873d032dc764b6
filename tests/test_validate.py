#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Feb  4 22:15:31 2025

@author: Marcel Hesselberth
"""


from civdate.validate import *
from civdate.rational import to_number
from civdate.errors import InvalidDate
from civdate import config
from decimal import Decimal
import logging
import pytest


def test_is_numeric():
    assert(is_numeric(1) is True)
    assert(is_numeric(0.5) is True)
    assert(is_numeric(Fraction(1, 3)) is True)
    assert(is_numeric(Decimal("1.5")) is True)
    assert(is_numeric(np.float32(1.5)) is True)
    assert(is_numeric(np.int16(3)) is True)
    assert(is_numeric(True) is False)
    assert(is_numeric("1") is False)
    assert(is_numeric(None) is False)
    assert(is_numeric(1j) is False)

def test_to_fraction():
    assert(to_fraction(3) == 3)
    assert(to_fraction(0.5) == Fraction(1, 2))
    assert(to_fraction(Decimal("0.1")) == Fraction(1, 10))
    assert(to_fraction(np.float64(0.25)) == Fraction(1, 4))
    assert(to_fraction(np.longdouble(0.75)) == Fraction(3, 4))
    with pytest.raises(TypeError) as excinfo:
        to_fraction("1")
    with pytest.raises(InvalidDate) as excinfo:
        to_fraction(float("nan"))
    with pytest.raises(InvalidDate) as excinfo:
        to_fraction(float("inf"))

def test_to_number():
    assert(type(to_number(2.0)) is int)
    assert(to_number(2.5) == Fraction(5, 2))

def test_split_fraction():
    assert(split_fraction(7) == (7, 0))
    assert(split_fraction(Fraction(7, 2)) == (3, Fraction(1, 2)))
    assert(split_fraction(-0.5) == (-1, Fraction(1, 2)))
    assert(split_fraction(np.float64(2.25)) == (2, Fraction(1, 4)))

def test_is_integral():
    assert(is_integral(2.0) is True)
    assert(is_integral(Fraction(4, 2)) is True)
    assert(is_integral(2.5) is False)
    assert(is_integral(float("inf")) is False)

def test_check_numeric():
    assert(check_numeric(5, "day") == 5)
    with pytest.raises(TypeError) as excinfo:
        check_numeric("5", "day")
    assert("day" in str(excinfo.value))

def test_whole():
    assert(whole(2, "year") == 2)
    assert(whole(2.0, "year") == 2)
    assert(whole(np.int64(2), "year") == 2)
    with pytest.raises(InvalidDate) as excinfo:
        whole(2.5, "year")
    assert("fraction" in str(excinfo.value))

def test_validate_time():
    assert(validate_time(4, 5, 6) == (4, 5, 6))
    assert(validate_time(-1, -1, -1) == (23, 59, 59))
    assert(validate_time(24, 0, 0) == (24, 0, 0))
    for hms in ((24, 0, 1), (24, 1, 0), (25, 0, 0), (0, 60, 0),
                (0, 0, 60), (-25, 0, 0), (0, -61, 0)):
        with pytest.raises(InvalidDate) as excinfo:
            validate_time(*hms)

def test_canon24oc():
    assert(canon24oc(24) == (0, 1))
    assert(canon24oc(23) == (23, 0))

def test_time_to_df():
    assert(time_to_df(4, 5, 6) == 14706)
    assert(time_to_df(0, 0, 0) == 0)

def test_trunc_fields():
    assert(trunc_fields(3) == (3, 0, 0, 0, 0))
    d, h, m, s, f = trunc_fields(Fraction(7, 2), 0.5, 0, 1.5)
    assert((d, h, m, s) == (3, 0, 0, 1))
    assert(f == Fraction(1, 2) + Fraction(1, 48) + Fraction(1, 172800))
    with pytest.raises(TypeError) as excinfo:
        trunc_fields(3, "4")

def test_offset_to_sec():
    assert(offset_to_sec(0) == 0)
    assert(offset_to_sec(3600) == 3600)
    assert(offset_to_sec(np.int32(-3600)) == -3600)
    assert(offset_to_sec(Fraction(7, 24)) == 25200)
    assert(offset_to_sec(0.25) == 21600)
    assert(offset_to_sec("+07:00") == 25200)
    assert(offset_to_sec("-0330") == -12600)
    assert(offset_to_sec("+09") == 32400)
    assert(offset_to_sec("+05:30:15") == 19815)
    assert(offset_to_sec("Z") == 0)
    assert(offset_to_sec(None) == 0)

def test_offset_to_sec_invalid(caplog):
    with caplog.at_level(logging.WARNING):
        assert(offset_to_sec("bogus") == 0)
        assert(offset_to_sec(86400) == 0)
        assert(offset_to_sec(Fraction(-3, 2)) == 0)
        assert(offset_to_sec(Fraction(1, 86400 * 2)) == 0)
    assert("invalid offset" in caplog.text)
    assert("fraction of offset" in caplog.text)

def test_config():
    assert(config.DEFAULT_START == 2299161)
    assert(config.PARSE_LIMIT == 128)
    assert(config.CENTURY_PIVOT == 69)
    assert(config.STRFTIME_BUFSIZE == 1024)
