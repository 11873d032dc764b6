#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Feb  4 21:37:08 2025

@author: Marcel Hesselberth
"""

import re
import logging
import numpy as np
from fractions import Fraction
from civdate.constants import SPD
from civdate.errors import InvalidDate
from civdate.rational import (is_numeric, is_integral, to_fraction,
                              split_fraction)


log = logging.getLogger(__name__)

_offset_pattern = re.compile(r"\A\s*([-+])(\d{1,2})(?::?(\d{2})(?::?(\d{2}))?)?\s*\Z")


def check_numeric(value, field):
    """Raise TypeError if value is not a real number, else return value."""
    if not is_numeric(value):
        raise TypeError(f"invalid {field} (not numeric)")
    return value


def whole(value, field):
    """
    Integer value of a field that must not have a fraction.

    Raises
    ------
    InvalidDate
        value has a fractional part.
    """
    if isinstance(value, int):
        return value
    if not is_integral(value):
        raise InvalidDate(f"invalid fraction in {field} ({value})")
    return int(to_fraction(value))


def validate_time(hour, minute, second):
    """
    Check a time of day.

    Negative values are counted back from the end of the day, the hour and
    the minute (one wrap only). 24:00:00 is allowed.

    Raises
    ------
    InvalidDate
        The time does not exist.

    Returns
    -------
    hour, minute, second
    """
    if hour < 0:
        hour += 24
    if minute < 0:
        minute += 60
    if second < 0:
        second += 60
    if (hour < 0 or hour > 24 or minute < 0 or minute > 59 or
            second < 0 or second > 59 or
            (hour == 24 and (minute > 0 or second > 0))):
        raise InvalidDate(f"invalid time ({hour}:{minute}:{second})")
    return hour, minute, second


def canon24oc(hour):
    """24 o'clock is hour 0 of the next day: (hour, extra days)."""
    if hour == 24:
        return 0, 1
    return hour, 0


def time_to_df(hour, minute, second):
    return hour * 3600 + minute * 60 + second


def trunc_fields(day, hour=0, minute=0, second=0):
    """
    Split day and time fields in integers and one day fraction.

    The fractional part of every field is converted to days (hour / 24,
    minute / 1440, second / 86400) and summed, so that the constructor can
    add it in one step.

    Returns
    -------
    day, hour, minute, second : int

    fraction : Fraction
        Sum of the fractional parts in days.
    """
    fields = []
    fraction = Fraction(0)
    for name, value, unit in (("day", day, 1), ("hour", hour, 24),
                              ("minute", minute, 1440),
                              ("second", second, SPD)):
        check_numeric(value, name)
        i, f = split_fraction(value)
        fields.append(i)
        fraction += f / unit
    return (*fields, fraction)


def offset_to_sec(offset):
    """
    Normalize a UTC offset to integer seconds.

    Parameters
    ----------
    offset : int, Fraction, float or str
        int: seconds east of UTC. Fraction, float, Decimal: fraction of a
        day. str: "Z", "+HH:MM", "+HHMM" or "+HH" (and "-").
        Anything else means UTC.

    Returns
    -------
    int
        Offset in seconds, -86400 < offset < 86400.
    """
    if isinstance(offset, str):
        if offset.strip().upper() == "Z":
            return 0
        m = _offset_pattern.match(offset)
        if not m:
            log.warning("invalid offset %r is ignored", offset)
            return 0
        sign, hh, mm, ss = m.groups()
        seconds = int(hh) * 3600 + int(mm or 0) * 60 + int(ss or 0)
        seconds = -seconds if sign == "-" else seconds
    elif is_numeric(offset) and isinstance(offset, (int, np.integer)):
        seconds = int(offset)
    elif is_numeric(offset):
        days = to_fraction(offset)
        exact = days * SPD
        seconds = int(exact)
        if seconds != exact:
            log.warning("fraction of offset %s is ignored", offset)
    else:
        return 0
    if not -SPD < seconds < SPD:
        log.warning("invalid offset %s is ignored", offset)
        return 0
    return seconds
