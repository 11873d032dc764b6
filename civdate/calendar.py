#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Jan 11 20:57:17 2025

@author: Marcel Hesselberth
"""

import logging
import numpy as np
from math import isinf, isnan
from collections import namedtuple
from civdate.constants import (ITALY, JULIAN, GREGORIAN, CM_PERIOD,
                               CM_PERIOD_JCY, CM_PERIOD_GCY, MJD0, wdays,
                               REFORM_BEGIN_YEAR, REFORM_END_YEAR,
                               REFORM_BEGIN_JD, REFORM_END_JD)
from civdate.config import DEFAULT_START
from civdate.errors import InvalidDate
from civdate.rational import is_numeric, to_number
from civdate.validate import check_numeric, whole


log = logging.getLogger(__name__)

DateTuple = namedtuple("datetuple", ["year", "month", "day"])
OrdinalTuple = namedtuple("ordinaltuple", ["year", "yday"])
IsoCalendarDate = namedtuple("IsoCalendarDate", ["year", "week", "weekday"])
WeeknumTuple = namedtuple("weeknumtuple", ["year", "week", "wday"])
NthKdayTuple = namedtuple("nthkdaytuple", ["year", "month", "n", "k"])

"""
Calendar conversion engine.

The calendar is selected by the start value sg, the julian day number of
the first Gregorian day:
    - JULIAN (+inf): proleptic Julian, quadrennial leap years.
    - GREGORIAN (-inf): proleptic Gregorian, centennial rule added.
    - A day number between REFORM_BEGIN_JD and REFORM_END_JD: Julian before
      sg and Gregorian from sg on. ITALY (1582-10-15) is the default,
      ENGLAND (1752-09-14) the British reform. The days skipped by the
      reform do not exist.
Julian day 0 is -4712-01-01 in the Julian calendar (4713 BC, the year
before 1 AD is year 0). There is no limit on the year: years and day
numbers are folded into a CM_PERIOD day cycle (a whole number of weeks,
Julian and Gregorian years) and the cycle index nth is carried separately.
All arithmetic is exact integer arithmetic.
"""


def is_julian_leapyear(year):
    """True if year is a leap year in the Julian calendar."""
    year = whole(check_numeric(year, "year"), "year")
    return year % 4 == 0


def is_gregorian_leapyear(year):
    """True if year is a leap year in the Gregorian calendar."""
    year = whole(check_numeric(year, "year"), "year")
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def valid_start(sg):
    """
    Check a calendar start (reform) value.

    Infinite values select the proleptic calendars. A finite value must be
    a day number inside the historical reform window; anything else is
    ignored and replaced by ITALY.

    Raises
    ------
    TypeError
        sg is not a number.
    """
    check_numeric(sg, "start")
    if isinstance(sg, (float, np.floating)):
        if isnan(sg):
            log.warning("invalid start %s is ignored", sg)
            return ITALY
        if isinf(sg):
            return JULIAN if sg > 0 else GREGORIAN
    sg = to_number(sg)
    if not REFORM_BEGIN_JD <= sg <= REFORM_END_JD:
        log.warning("invalid start %s is ignored", sg)
        return ITALY
    return sg


def guess_style(year, sg):
    """
    Calendar to use for a year.

    Returns sg itself for the proleptic calendars, JULIAN or GREGORIAN for
    years that cannot be affected by any reform, and 0 for the years of
    the reform window, which need the exact reform computation.
    """
    if isinf(sg):
        return sg
    if year < REFORM_BEGIN_YEAR:
        return JULIAN
    if year > REFORM_END_YEAR:
        return GREGORIAN
    return 0


def _period(style):
    return CM_PERIOD_GCY if style < 0 else CM_PERIOD_JCY


def decode_year(year, style):
    """Fold year into (nth, ry) with ry in [-4712, -4712 + period)."""
    nth, it = divmod(year + 4712, _period(style))
    return nth, it - 4712


def encode_year(nth, ry, style):
    return nth * _period(style) + ry


def decode_jd(jd):
    """Fold a julian day into (nth, rjd) with rjd in [0, CM_PERIOD)."""
    return divmod(jd, CM_PERIOD)


def encode_jd(nth, rjd):
    return nth * CM_PERIOD + rjd


def _fold(year, sg):
    style = guess_style(year, sg)
    if style == 0:
        return 0, year, sg
    nth, ry = decode_year(year, style)
    return nth, ry, style


def _unfold(jd, sg):
    nth, rjd = decode_jd(jd)
    if isinf(sg) or nth == 0:
        return nth, rjd, sg
    return nth, rjd, JULIAN if nth < 0 else GREGORIAN


def _civil_to_jd(y, m, d, sg):
    if m <= 2:
        y -= 1
        m += 12
    a = y // 100
    b = 2 - a + a // 4
    jd = (1461 * (y + 4716)) // 4 + (306001 * (m + 1)) // 10000 + d + b - 1524
    if jd < sg:
        jd -= b
    return jd


def _jd_to_civil(jd, sg):
    if jd < sg:
        a = jd
    else:
        x = (4 * jd - 7468865) // 146097
        a = jd + 1 + x - x // 4
    b = a + 1524
    c = (20 * b - 2442) // 7305
    d = (1461 * c) // 4
    e = (10000 * (b - d)) // 306001
    dom = b - d - (306001 * e) // 10000
    if e <= 13:
        return c - 4716, e - 1, dom
    return c - 4715, e - 13, dom


def _valid_civil(y, m, d, sg):
    if m < 0:
        m += 13
    if m < 1 or m > 12:
        return None
    if d < 0:
        ldom = _find_ldom(y, m, sg)
        if ldom is None:
            return None
        ry, rm, rd = _jd_to_civil(ldom + d + 1, sg)
        if ry != y or rm != m:
            return None
        d = rd
    jd = _civil_to_jd(y, m, d, sg)
    if _jd_to_civil(jd, sg) != (y, m, d):
        return None
    return jd, m, d


def _find_fdom(y, m, sg):
    for d in range(1, 31):
        r = _valid_civil(y, m, d, sg)
        if r:
            return r[0]


def _find_ldom(y, m, sg):
    for d in range(31, 1, -1):
        r = _valid_civil(y, m, d, sg)
        if r:
            return r[0]


def _find_fdoy(y, sg):
    return _find_fdom(y, 1, sg)


def _find_ldoy(y, sg):
    return _find_ldom(y, 12, sg)


def _jd_to_ordinal(jd, sg):
    y = _jd_to_civil(jd, sg)[0]
    return y, jd - _find_fdoy(y, sg) + 1


def _valid_ordinal(y, d, sg):
    if d < 0:
        ldoy = _find_ldoy(y, sg)
        if ldoy is None:
            return None
        ry, rd = _jd_to_ordinal(ldoy + d + 1, sg)
        if ry != y:
            return None
        d = rd
    fdoy = _find_fdoy(y, sg)
    if fdoy is None:
        return None
    jd = fdoy + d - 1
    if _jd_to_ordinal(jd, sg) != (y, d):
        return None
    return jd


def _commercial_to_jd(y, w, d, sg):
    rjd2 = _find_fdoy(y, sg) + 3
    return (rjd2 - rjd2 % 7) + 7 * (w - 1) + (d - 1)


def _jd_to_commercial(jd, sg):
    a = _jd_to_civil(jd - 3, sg)[0]
    j = _commercial_to_jd(a + 1, 1, 1, sg)
    if jd >= j:
        ry = a + 1
    else:
        j = _commercial_to_jd(a, 1, 1, sg)
        ry = a
    return ry, 1 + (jd - j) // 7, (jd + 1) % 7 or 7


def _valid_commercial(y, w, d, sg):
    if d < 0:
        d += 8
    if w < 0:
        rjd2 = _commercial_to_jd(y + 1, 1, 1, sg)
        ry, rw, rd = _jd_to_commercial(rjd2 + w * 7, sg)
        if ry != y:
            return None
        w = rw
    jd = _commercial_to_jd(y, w, d, sg)
    if _jd_to_commercial(jd, sg) != (y, w, d):
        return None
    return jd


def _weeknum_to_jd(y, w, d, f, sg):
    rjd2 = _find_fdoy(y, sg) + 6
    return (rjd2 - (rjd2 - f + 1) % 7 - 7) + 7 * w + d


def _jd_to_weeknum(jd, f, sg):
    ry = _jd_to_civil(jd, sg)[0]
    rjd = _find_fdoy(ry, sg) + 6
    j = jd - (rjd - (rjd - f + 1) % 7) + 7
    return ry, j // 7, j % 7


def _valid_weeknum(y, w, d, f, sg):
    if d < 0:
        d += 7
    if w < 0:
        rjd2 = _weeknum_to_jd(y + 1, 1, f, f, sg)
        ry, rw, rd = _jd_to_weeknum(rjd2 + w * 7, f, sg)
        if ry != y:
            return None
        w = rw
    jd = _weeknum_to_jd(y, w, d, f, sg)
    if _jd_to_weeknum(jd, f, sg) != (y, w, d):
        return None
    return jd


def _nth_kday_to_jd(y, m, n, k, sg):
    if n > 0:
        rjd2 = _find_fdom(y, m, sg) - 1
    else:
        rjd2 = _find_ldom(y, m, sg) + 7
    return (rjd2 - (rjd2 - k + 1) % 7) + 7 * n


def _jd_to_nth_kday(jd, sg):
    y, m, d = _jd_to_civil(jd, sg)
    return y, m, (jd - _find_fdom(y, m, sg)) // 7 + 1, (jd + 1) % 7


def _valid_nth_kday(y, m, n, k, sg):
    if k < 0:
        k += 7
    if m < 1 or m > 12:
        return None
    if n < 0:
        ny, nm = divmod(y * 12 + m, 12)
        rjd2 = _nth_kday_to_jd(ny, nm + 1, 1, k, sg)
        ry, rm, rn, rk = _jd_to_nth_kday(rjd2 + n * 7, sg)
        if ry != y or rm != m:
            return None
        n = rn
    jd = _nth_kday_to_jd(y, m, n, k, sg)
    if _jd_to_nth_kday(jd, sg) != (y, m, n, k):
        return None
    return jd


def _ints(fields):
    return [whole(check_numeric(value, name), name) for name, value in fields]


def _resolve_civil(year, month, day, sg):
    """jd and resolved (year, month, day), or None if the date is invalid."""
    nth, ry, style = _fold(year, sg)
    r = _valid_civil(ry, month, day, style)
    if r is None:
        return None
    rjd, rm, rd = r
    return encode_jd(nth, rjd), DateTuple(year, rm, rd)


def civil_to_jd_reform(year, month, day, sg=ITALY):
    """
    Julian day of a civil date under the calendar reform sg.

    Negative months and days count from the end of the year and the month
    (-1 is the last). Dates skipped by the reform do not exist.

    Parameters
    ----------
    year : int

    month : int

    day : int

    sg : number
        Calendar start, ITALY by default.

    Raises
    ------
    TypeError
        Argument is not a number.
    InvalidDate
        The date does not exist.

    Returns
    -------
    int
        The julian day number.
    """
    year, month, day = _ints((("year", year), ("month", month), ("day", day)))
    r = _resolve_civil(year, month, day, valid_start(sg))
    if r is None:
        raise InvalidDate(f"invalid date ({year}-{month}-{day})")
    return r[0]


def civil_to_jd(year, month, day, calendar=GREGORIAN):
    """Julian day of a date in the proleptic Julian or Gregorian calendar."""
    if not isinf(calendar):
        raise ValueError("calendar must be JULIAN or GREGORIAN")
    return civil_to_jd_reform(year, month, day, calendar)


def jd_to_civil_reform(jd, sg=ITALY):
    """
    Civil date of julian day jd under the calendar reform sg.

    Returns
    -------
    DateTuple
        year, month, day
    """
    jd = whole(check_numeric(jd, "jd"), "jd")
    nth, rjd, style = _unfold(jd, valid_start(sg))
    ry, m, d = _jd_to_civil(rjd, style)
    return DateTuple(encode_year(nth, ry, JULIAN if rjd < style
                                 else GREGORIAN), m, d)


def jd_to_civil(jd, calendar=GREGORIAN):
    if not isinf(calendar):
        raise ValueError("calendar must be JULIAN or GREGORIAN")
    return jd_to_civil_reform(jd, calendar)


def jd_to_wday(jd):
    """Day of the week, 0 is Sunday."""
    return (jd + 1) % 7


def _year_value(jd, sg, convert):
    nth, rjd, style = _unfold(jd, sg)
    result = convert(rjd, style)
    year = encode_year(nth, result[0], JULIAN if rjd < style else GREGORIAN)
    return (year,) + tuple(result[1:])


def ordinal_to_jd(year, yday, sg=ITALY):
    """Julian day of day yday (1-based, negative from the end) of year."""
    year, yday = _ints((("year", year), ("yday", yday)))
    nth, ry, style = _fold(year, valid_start(sg))
    rjd = _valid_ordinal(ry, yday, style)
    if rjd is None:
        raise InvalidDate(f"invalid date ({year}, yday {yday})")
    return encode_jd(nth, rjd)


def jd_to_ordinal(jd, sg=ITALY):
    jd = whole(check_numeric(jd, "jd"), "jd")
    return OrdinalTuple(*_year_value(jd, valid_start(sg), _jd_to_ordinal))


def commercial_to_jd(cwyear, cweek, cwday, sg=ITALY):
    """
    Julian day of an ISO 8601 week date.

    Parameters
    ----------
    cwyear : int
        Commercial (week based) year.
    cweek : int
        Week 1..53, negative from the last week of the year.
    cwday : int
        1: Monday .. 7: Sunday, negative from Sunday (-1).

    Raises
    ------
    InvalidDate
        The week date does not exist.
    """
    cwyear, cweek, cwday = _ints((("cwyear", cwyear), ("cweek", cweek),
                                  ("cwday", cwday)))
    nth, ry, style = _fold(cwyear, valid_start(sg))
    rjd = _valid_commercial(ry, cweek, cwday, style)
    if rjd is None:
        raise InvalidDate(f"invalid date ({cwyear}-W{cweek}-{cwday})")
    return encode_jd(nth, rjd)


def jd_to_commercial(jd, sg=ITALY):
    jd = whole(check_numeric(jd, "jd"), "jd")
    return IsoCalendarDate(*_year_value(jd, valid_start(sg),
                                        _jd_to_commercial))


def weeknum_to_jd(year, week, wday, f=0, sg=ITALY):
    """
    Julian day of a week number date (strftime %U for f=0, %W for f=1).

    Week 1 starts on the first weekday f of the year; days before it are
    in week 0.
    """
    year, week, wday, f = _ints((("year", year), ("week", week),
                                 ("wday", wday), ("f", f)))
    nth, ry, style = _fold(year, valid_start(sg))
    rjd = _valid_weeknum(ry, week, wday, f, style)
    if rjd is None:
        raise InvalidDate(f"invalid date ({year}, week {week}, day {wday})")
    return encode_jd(nth, rjd)


def jd_to_weeknum(jd, f=0, sg=ITALY):
    jd = whole(check_numeric(jd, "jd"), "jd")
    return WeeknumTuple(*_year_value(
        jd, valid_start(sg), lambda rjd, style: _jd_to_weeknum(rjd, f, style)))


def nth_kday_to_jd(year, month, n, k, sg=ITALY):
    """
    Julian day of the n-th weekday k in a month.

    k is 0 (Sunday) .. 6, n counts from 1, negative n from the end of the
    month (-1 is the last).
    """
    year, month, n, k = _ints((("year", year), ("month", month), ("n", n),
                               ("k", k)))
    nth, ry, style = _fold(year, valid_start(sg))
    rjd = _valid_nth_kday(ry, month, n, k, style)
    if rjd is None:
        raise InvalidDate(f"invalid date ({year}-{month}, {n}th day {k})")
    return encode_jd(nth, rjd)


def jd_to_nth_kday(jd, sg=ITALY):
    jd = whole(check_numeric(jd, "jd"), "jd")
    return NthKdayTuple(*_year_value(jd, valid_start(sg), _jd_to_nth_kday))


def _valid(func, *args):
    if not all(is_numeric(a) for a in args):
        return False
    try:
        func(*args)
    except InvalidDate:
        return False
    return True


def valid_civil(year, month, day, sg=ITALY):
    """True if the civil date exists."""
    return _valid(civil_to_jd_reform, year, month, day, sg)


def valid_ordinal(year, yday, sg=ITALY):
    return _valid(ordinal_to_jd, year, yday, sg)


def valid_commercial(cwyear, cweek, cwday, sg=ITALY):
    return _valid(commercial_to_jd, cwyear, cweek, cwday, sg)


def valid_weeknum(year, week, wday, f=0, sg=ITALY):
    return _valid(weeknum_to_jd, year, week, wday, f, sg)


def valid_nth_kday(year, month, n, k, sg=ITALY):
    return _valid(nth_kday_to_jd, year, month, n, k, sg)


def jd_local_to_utc(jd, df, of):
    """Move local (jd, df) to UTC given offset of in seconds."""
    df -= of
    if df < 0:
        return jd - 1, df + 86400
    if df >= 86400:
        return jd + 1, df - 86400
    return jd, df


def jd_utc_to_local(jd, df, of):
    """Move UTC (jd, df) to local time given offset of in seconds."""
    return jd_local_to_utc(jd, df, -of)


class Calendar:
    """
    A calendar with a fixed reform policy.

    There are 4 kinds of calendars:
        - Proleptic Julian: Quadrennial leap years, counts days from -4712
          (=4713BC).
        - Proleptic Gregorian: Similar to Julian plus a centennial leap year
          rule.
        - Mixed: A Julian calendar that switches to Gregorian at a given
          (Gregorian) date inside the reform window 1582..1930.
        - Default: The mixed calendar of the package configuration,
          normally the Italian reform of October 15, 1582.
    The ISO week calendar is an overlay over any of these.
    """

    def __init__(self, start=DEFAULT_START):
        self.start = valid_start(start)

    def setDefault(self):
        """Set the Default calendar (the configured reform, ITALY)."""
        self.start = valid_start(DEFAULT_START)

    def setJulian(self):
        """Set the proleptic Julian calendar."""
        self.start = JULIAN

    def setGregorian(self):
        """Set the proleptic Gregorian calendar."""
        self.start = GREGORIAN

    def setMixed(self, gr_year, gr_month, gr_day):
        """
        Set a mixed Julian-Gregorian calendar.

        In some countries the calendar reform was implemented (much) after
        1582. A historically correct calendar can be set by calling
        setMixed with the Gregorian reform date.

        Parameters
        ----------
        gr_year : int
            (Gregorian) year of the calendar reform.
        gr_month : int
            (Gregorian) month of the calendar reform.
        gr_day : int
            (Gregorian) day of the calendar reform.

        Raises
        ------
        InvalidDate
            The date is not a Gregorian date or outside the reform window.
        """
        jd = civil_to_jd(gr_year, gr_month, gr_day, GREGORIAN)
        if not REFORM_BEGIN_JD <= jd <= REFORM_END_JD:
            raise InvalidDate(
                f"reform date {gr_year}-{gr_month}-{gr_day} out of range")
        self.start = jd

    def JD(self, year, month, day):
        """
        Julian day number of the given date according to the
        currently set calendar.

        Raises
        ------
        InvalidDate
            If the date is not valid.

        Returns
        -------
        int
            The integer julian day.
        """
        return civil_to_jd_reform(year, month, day, self.start)

    def RJD(self, jd):
        """
        Reverse Julian Day.

        Given a JD, compute the date according to the currently set calendar.
        """
        return jd_to_civil_reform(jd, self.start)

    def MJD(self, year, month, day):
        return self.JD(year, month, day) - MJD0

    def RMJD(self, mjd):
        return self.RJD(mjd + MJD0)

    def is_gregorian(self, year, month, day):
        """
        Check if the date is in the Gregorian calendar.

        This function takes into account the currently set calendar reform
        date.
        """
        return civil_to_jd(year, month, day, GREGORIAN) >= self.start

    def is_leapyear(self, year):
        """True if February of year has 29 days in this calendar."""
        return valid_civil(year, 2, 29, self.start)

    def weekday(self, jd):
        """
        The weekday number of Julian day jd.

        Returns
        -------
        int
            0: Sunday
            1: Monday
            ...
            6: Saturday
        """
        return jd_to_wday(jd)

    def weekday_str(self, jd):
        return wdays[self.weekday(jd)]

    def isoweekday(self, jd):
        """The ISO weekday number of Julian day jd, 1: Monday .. 7: Sunday"""
        return jd % 7 + 1

    def I2G(self, year, week, day):
        """
        Convert an ISO week date to a civil date.

        Raises
        ------
        TypeError
            Argument is not a number.
        InvalidDate
            Not a valid ISO week date.
        """
        return self.RJD(commercial_to_jd(year, week, day, self.start))

    def G2I(self, year, month, day):
        """Convert a civil date to an ISO week date (year, week, weekday)."""
        return jd_to_commercial(self.JD(year, month, day), self.start)
