#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Jan 14 13:13:23 2025

@author: Marcel Hesselberth

Date and DateTime.

A Date is a julian day number with a calendar reform policy (start). A
DateTime adds a time of day, kept in UTC as seconds (df) and nanoseconds
(sf) since midnight, and the UTC offset (of) in seconds. A Date that gets
a fractional number of days added carries a time of day as well, but
still prints as a date.

Values are immutable. Derived fields are cached on first use.
"""

import time
import operator
import datetime
import logging
from fractions import Fraction
from collections import namedtuple
from functools import cached_property
from datetime import timezone, timedelta
from civdate import parse
from civdate.config import DEFAULT_START, PARSE_LIMIT
from civdate.constants import (ITALY, ENGLAND, JULIAN, GREGORIAN, MJD0, LD0,
                               AMJD0, SPD, NS, UNIX_EPOCH_JD, ORD0,
                               jisx0301_eras)
from civdate.errors import InvalidDate
from civdate.rational import (is_numeric, to_fraction, to_number,
                              split_fraction)
from civdate.validate import (validate_time, canon24oc, time_to_df,
                              trunc_fields, offset_to_sec)
from civdate.calendar import (valid_start, civil_to_jd_reform,
                              jd_to_civil_reform, ordinal_to_jd,
                              jd_to_ordinal, commercial_to_jd,
                              jd_to_commercial, weeknum_to_jd, jd_to_weeknum,
                              nth_kday_to_jd, jd_to_wday, jd_local_to_utc,
                              jd_utc_to_local, is_julian_leapyear,
                              is_gregorian_leapyear)
from civdate.strftime import strftime


log = logging.getLogger(__name__)

TimeOfDay = namedtuple("TimeOfDay", ["df", "sf", "of"])

_MIDNIGHT = TimeOfDay(0, 0, 0)


class DTMeta(type):
    def __init__(cls, name, bases, dct):
        cls.cname = name
        super().__init__(name, bases, dct)


class Date(metaclass=DTMeta):
    """
    A calendar date.

    Parameters
    ----------
    year : int
        Astronomical year, 0 is 1 BC.
    month : int
        1..12, negative from the end of the year.
    day : number
        Day of the month, negative from the end of the month. A fraction
        is added as a time of day.
    start : number, optional
        Julian day of the calendar reform, ITALY by default. JULIAN and
        GREGORIAN select a proleptic calendar.

    Raises
    ------
    TypeError
        An argument is not a number.
    InvalidDate
        The date does not exist or year or month have a fraction.
    """

    _time = False

    def __init__(self, year=-4712, month=1, day=1, start=DEFAULT_START):
        self._init(*self._parts(
            lambda d, sg: civil_to_jd_reform(year, month, d, sg), day,
            start=start))

    def _init(self, jd, sg, tod):
        self._jd = jd  # UTC
        self._sg = sg
        self._tod = tod

    @classmethod
    def _new(cls, jd, sg, tod=None):
        if tod is None and cls._time:
            tod = _MIDNIGHT
        obj = cls.__new__(cls)
        obj._init(jd, sg, tod)
        return obj

    @classmethod
    def _utc(cls, jd, sg, fraction, hms=(0, 0, 0), of=0):
        """(jd, sg, tod) of a local day, time of day and day fraction."""
        hour, minute, second = hms
        hour, extra = canon24oc(hour)
        seconds = time_to_df(hour, minute, second) + fraction * SPD
        days, seconds = divmod(seconds, SPD)
        jd += extra + int(days)
        df = int(seconds)
        sf = to_number((seconds - df) * NS)
        if not cls._time and df == 0 and sf == 0 and of == 0:
            return jd, sg, None
        jd, df = jd_local_to_utc(jd, df, of)
        return jd, sg, TimeOfDay(df, sf, of)

    @classmethod
    def _parts(cls, to_jd, day, hour=0, minute=0, second=0, offset=0,
               start=DEFAULT_START):
        d, h, mi, s, fraction = trunc_fields(day, hour, minute, second)
        sg = valid_start(start)
        jd = to_jd(d, sg)
        h, mi, s = validate_time(h, mi, s)
        of = offset_to_sec(offset)
        return cls._utc(jd, sg, fraction, (h, mi, s), of)

    @classmethod
    def _construct(cls, *args, **kwargs):
        return cls._new(*cls._parts(*args, **kwargs))

    @classmethod
    def _from_fragments(cls, frags, start):
        sg = valid_start(start)
        frags = parse.complete_fragments(frags, sg)
        jd = parse.fragments_to_jd(frags, sg)
        if not cls._time:
            return cls._new(jd, sg)
        hms = validate_time(frags["hour"], frags["min"], frags["sec"])
        fraction = Fraction(frags.get("sec_fraction", 0)) / SPD
        of = frags.get("offset") or 0
        if of != int(of):
            log.warning("fraction of offset %s is ignored", of)
        of = offset_to_sec(int(of))
        return cls._new(*cls._utc(jd, sg, fraction, hms, of))

    # constructors

    @classmethod
    def civil(cls, *args, **kwargs):
        """Same as the constructor."""
        return cls(*args, **kwargs)

    @classmethod
    def fromjd(cls, jd=0, start=DEFAULT_START):
        """Date of a (local) julian day number, a fraction is a time."""
        return cls._construct(lambda d, sg: d, jd, start=start)

    @classmethod
    def frommjd(cls, mjd=0, start=DEFAULT_START):
        return cls._construct(lambda d, sg: d + MJD0, mjd, start=start)

    @classmethod
    def ordinal(cls, year=-4712, yday=1, start=DEFAULT_START):
        """Date of day yday of year, negative yday counts from the end."""
        return cls._construct(lambda d, sg: ordinal_to_jd(year, d, sg), yday,
                              start=start)

    @classmethod
    def commercial(cls, cwyear=-4712, cweek=1, cwday=1, start=DEFAULT_START):
        """Date of an ISO 8601 week date (cwday 1 is Monday)."""
        return cls._construct(
            lambda d, sg: commercial_to_jd(cwyear, cweek, d, sg), cwday,
            start=start)

    @classmethod
    def fromisocalendar(cls, year, week, day):
        return cls.commercial(year, week, day)

    @classmethod
    def weeknum(cls, year=-4712, week=0, wday=1, f=0, start=DEFAULT_START):
        """Date of a week number date, weeks start on Sunday (f=0) or
        Monday (f=1)."""
        return cls._construct(
            lambda d, sg: weeknum_to_jd(year, week, d, f, sg), wday,
            start=start)

    @classmethod
    def nth_kday(cls, year=-4712, month=1, n=1, k=1, start=DEFAULT_START):
        """Date of the n-th weekday k (0 is Sunday) of a month."""
        return cls._construct(
            lambda d, sg: nth_kday_to_jd(year, month, n, d, sg), k,
            start=start)

    @classmethod
    def today(cls, start=DEFAULT_START):
        t = time.localtime()
        sg = valid_start(start)
        return cls._new(civil_to_jd_reform(t.tm_year, t.tm_mon, t.tm_mday,
                                           sg), sg)

    @classmethod
    def fromtimestamp(cls, timestamp, start=DEFAULT_START):
        """
        Date or DateTime (UTC) of a Unix timestamp.

        Parameters
        ----------
        timestamp : number
            Seconds since 1970-01-01T00:00:00 UTC. Fractions are kept
            exactly by a DateTime and dropped by a Date.
        start : number, optional
            Calendar reform.
        """
        days, fraction = split_fraction(to_fraction(timestamp) / SPD)
        sg = valid_start(start)
        jd = UNIX_EPOCH_JD + days
        if not cls._time:
            return cls._new(jd, sg)
        return cls._new(*cls._utc(jd, sg, fraction))

    @classmethod
    def fromdatetime(cls, value, start=DEFAULT_START):
        """
        Date or DateTime of a datetime.date or datetime.datetime.

        The time of day and the UTC offset of a datetime are kept by a
        DateTime, a naive datetime is taken as UTC. A Date keeps the
        (local) day only.
        """
        if not isinstance(value, datetime.date):
            raise TypeError(f"expected date or datetime, got "
                            f"{type(value).__name__}")
        jd = value.toordinal() + ORD0
        if not cls._time or not isinstance(value, datetime.datetime):
            return cls._new(jd, valid_start(start))
        of = value.utcoffset()
        of = 0 if of is None else of // timedelta(seconds=1)
        second = value.second + Fraction(value.microsecond, 10 ** 6)
        return cls._construct(lambda d, sg: d, jd, value.hour, value.minute,
                              second, of, start)

    @classmethod
    def parse(cls, string="-4712-01-01", comp=True, start=DEFAULT_START,
              limit=PARSE_LIMIT):
        """
        Date from free text.

        Parameters
        ----------
        string : str
            e.g. "2001-02-03", "3rd Feb 2001", "Sat Feb  3 2001",
            "H13.02.03", "20010203".
        comp : bool, optional
            Complete two digit years to 1969..2068.
        start : number, optional
            Calendar reform.
        limit : int or None, optional
            Maximum length of string.

        Raises
        ------
        InvalidDate
            string contains no (valid) date.
        ParseLimitError
            string is too long.
        """
        return cls._from_fragments(parse.fragments(string, comp, limit),
                                   start)

    @classmethod
    def fromiso8601(cls, string="-4712-01-01", start=DEFAULT_START,
                    limit=PARSE_LIMIT):
        return cls._from_fragments(parse.iso8601(string, limit), start)

    @classmethod
    def fromisoformat(cls, string):
        return cls.fromiso8601(string)

    @classmethod
    def fromrfc3339(cls, string="-4712-01-01T00:00:00+00:00",
                    start=DEFAULT_START, limit=PARSE_LIMIT):
        return cls._from_fragments(parse.rfc3339(string, limit), start)

    @classmethod
    def fromxmlschema(cls, string="-4712-01-01", start=DEFAULT_START,
                      limit=PARSE_LIMIT):
        return cls._from_fragments(parse.xmlschema(string, limit), start)

    @classmethod
    def fromrfc2822(cls, string="Mon, 1 Jan -4712 00:00:00 +0000",
                    start=DEFAULT_START, limit=PARSE_LIMIT):
        return cls._from_fragments(parse.rfc2822(string, limit), start)

    @classmethod
    def fromhttpdate(cls, string="Mon, 01 Jan -4712 00:00:00 GMT",
                     start=DEFAULT_START, limit=PARSE_LIMIT):
        return cls._from_fragments(parse.httpdate(string, limit), start)

    @classmethod
    def fromjisx0301(cls, string="-4712-01-01", start=DEFAULT_START,
                     limit=PARSE_LIMIT):
        return cls._from_fragments(parse.jisx0301(string, limit), start)

    # fields

    @cached_property
    def jd(self):
        """Local (chronological) julian day number."""
        if self._tod is None:
            return self._jd
        return jd_utc_to_local(self._jd, self._tod.df, self._tod.of)[0]

    @cached_property
    def _civil(self):
        return jd_to_civil_reform(self.jd, self._sg)

    @property
    def year(self):
        return self._civil.year

    @property
    def mon(self):
        return self._civil.month

    month = mon

    @property
    def mday(self):
        return self._civil.day

    day = mday

    @cached_property
    def yday(self):
        return jd_to_ordinal(self.jd, self._sg).yday

    @property
    def wday(self):
        """Day of the week, 0 is Sunday."""
        return jd_to_wday(self.jd)

    @cached_property
    def _commercial(self):
        return jd_to_commercial(self.jd, self._sg)

    @property
    def cwyear(self):
        return self._commercial.year

    @property
    def cweek(self):
        return self._commercial.week

    @property
    def cwday(self):
        """Day of the commercial week, 1 is Monday, 7 is Sunday."""
        return self._commercial.weekday

    @property
    def wnum0(self):
        """Week number, weeks start on Sunday (%U)."""
        return jd_to_weeknum(self.jd, 0, self._sg).week

    @property
    def wnum1(self):
        """Week number, weeks start on Monday (%W)."""
        return jd_to_weeknum(self.jd, 1, self._sg).week

    @property
    def mjd(self):
        return self.jd - MJD0

    @property
    def ld(self):
        """Lilian day number, 1 is 1582-10-15."""
        return self.jd - LD0

    @cached_property
    def ajd(self):
        """Astronomical julian day, a Fraction counted from noon UTC."""
        ajd = Fraction(2 * self._jd - 1, 2)
        if self._tod is not None:
            ajd += Fraction(self._tod.df, SPD) + \
                Fraction(self._tod.sf, NS * SPD)
        return ajd

    @property
    def amjd(self):
        return self.ajd - Fraction(AMJD0, 2)

    @property
    def day_fraction(self):
        if self._tod is None:
            return Fraction(0)
        return Fraction(self._local_df, SPD) + \
            Fraction(self._tod.sf, NS * SPD)

    @property
    def start(self):
        return self._sg

    @property
    def is_julian(self):
        return self.jd < self._sg

    @property
    def is_gregorian(self):
        return not self.is_julian

    @property
    def is_leap(self):
        if self.is_julian:
            return is_julian_leapyear(self.year)
        return is_gregorian_leapyear(self.year)

    # time of day

    @property
    def _local_df(self):
        if self._tod is None:
            return 0
        return (self._tod.df + self._tod.of) % SPD

    @property
    def hour(self):
        return self._local_df // 3600

    @property
    def min(self):
        return self._local_df // 60 % 60

    minute = min

    @property
    def sec(self):
        return self._local_df % 60

    second = sec

    @property
    def sec_fraction(self):
        """Fraction of the second as a Fraction."""
        if self._tod is None:
            return Fraction(0)
        return Fraction(self._tod.sf, NS)

    @property
    def df(self):
        """Seconds since midnight UTC."""
        return 0 if self._tod is None else self._tod.df

    @property
    def sf(self):
        """Nanoseconds of the second."""
        return 0 if self._tod is None else self._tod.sf

    @property
    def utc_offset(self):
        """Offset from UTC in seconds."""
        return 0 if self._tod is None else self._tod.of

    @property
    def offset(self):
        """Offset from UTC as a fraction of a day."""
        return Fraction(self.utc_offset, SPD)

    @property
    def zone(self):
        of = self.utc_offset
        sign = "-" if of < 0 else "+"
        h, m = divmod(abs(of) // 60, 60)
        return f"{sign}{h:02d}:{m:02d}"

    # arithmetic

    def __add__(self, n):
        if not is_numeric(n):
            return NotImplemented
        n = to_fraction(n)
        if self._tod is None and n.denominator == 1:
            return self._new(self._jd + n.numerator, self._sg)
        tod = self._tod or _MIDNIGHT
        seconds = tod.df + Fraction(tod.sf, NS) + n * SPD
        days, seconds = divmod(seconds, SPD)
        df = int(seconds)
        sf = to_number((seconds - df) * NS)
        jd = self._jd + int(days)
        if not self._time and df == 0 and sf == 0 and tod.of == 0:
            return self._new(jd, self._sg)
        return self._new(jd, self._sg, TimeOfDay(df, sf, tod.of))

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Date):
            return self.ajd - other.ajd
        if is_numeric(other):
            return self + -to_fraction(other)
        return NotImplemented

    def next_day(self, n=1):
        return self + n

    def prev_day(self, n=1):
        return self - n

    # comparison

    def _ajd_of(self, other):
        """ajd of other; a float for inf and nan, None if not comparable."""
        if isinstance(other, Date):
            return other.ajd
        if not is_numeric(other):
            return None
        try:
            return to_fraction(other)
        except InvalidDate:
            # nan compares false and inf beyond every Fraction
            return float(other)

    def _compare(self, other, op):
        ajd = self._ajd_of(other)
        if ajd is None:
            return NotImplemented
        return op(self.ajd, ajd)

    def __eq__(self, other):
        return self._compare(other, operator.eq)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __hash__(self):
        return hash(self.ajd)

    def same_day(self, other):
        """True if other falls on the same local julian day."""
        if isinstance(other, Date):
            return self.jd == other.jd
        return self.jd == to_number(other)

    # calendar and offset

    def new_start(self, start=ITALY):
        """The same day under another calendar reform."""
        return self._new(self._jd, valid_start(start), self._tod)

    def julian(self):
        return self.new_start(JULIAN)

    def gregorian(self):
        return self.new_start(GREGORIAN)

    def italy(self):
        return self.new_start(ITALY)

    def england(self):
        return self.new_start(ENGLAND)

    def new_offset(self, offset=0):
        """The same moment with another UTC offset."""
        of = offset_to_sec(offset)
        tod = self._tod or _MIDNIGHT
        return self._new(self._jd, self._sg, tod._replace(of=of))

    def todate(self):
        """The local day as a (proleptic Gregorian) datetime.date."""
        return datetime.date.fromordinal(self.jd - ORD0)

    def todatetime(self):
        """
        The local time as an aware datetime.datetime.

        Nanoseconds are truncated to microseconds. ValueError outside the
        years 1..9999.
        """
        tz = timezone(timedelta(seconds=self.utc_offset))
        t = datetime.time(self.hour, self.min, self.sec, int(self.sf) // 1000,
                          tzinfo=tz)
        return datetime.datetime.combine(self.todate(), t)

    # output

    _date_keys = ("year", "month", "day", "yday", "wday")
    _time_keys = ("hour", "min", "sec", "sec_fraction", "zone")

    def deconstruct_keys(self, keys=None):
        """
        Fields as a dict.

        Parameters
        ----------
        keys : list or tuple of str, optional
            The fields to return, all fields if None. Unknown names are
            ignored.

        Raises
        ------
        TypeError
            keys is not None, a list or a tuple.
        """
        names = self._date_keys + (self._time_keys if self._time else ())
        if keys is None:
            keys = names
        elif not isinstance(keys, (list, tuple)):
            raise TypeError(f"wrong argument type {type(keys).__name__} "
                            "(expected list, tuple or None)")
        return {k: getattr(self, k) for k in keys if k in names}

    def strftime(self, fmt=None):
        if fmt is None:
            fmt = "%Y-%m-%dT%H:%M:%S%:z" if self._time else "%F"
        return strftime(self, fmt)

    def _time_format(self, n):
        fraction = f".%{n}N" if n > 0 else ""
        return f"T%H:%M:%S{fraction}%:z"

    def iso8601(self, n=0):
        if not self._time:
            return self.strftime("%Y-%m-%d")
        return self.strftime("%Y-%m-%d" + self._time_format(n))

    isoformat = iso8601
    xmlschema = iso8601

    def rfc3339(self, n=0):
        return self.strftime("%Y-%m-%d" + self._time_format(n))

    def rfc2822(self):
        return self.strftime("%a, %-d %b %Y %T %z")

    def httpdate(self):
        return self.new_offset(0).strftime("%a, %d %b %Y %T GMT")

    def jisx0301(self, n=0):
        jd = self.jd
        if jd < jisx0301_eras[0][2]:
            date = self.strftime("%Y-%m-%d")
        else:
            for era, offset, first in reversed(jisx0301_eras):
                if jd >= first:
                    break
            date = f"{era}{self.year - offset:02d}" + self.strftime(".%m.%d")
        if self._time:
            date += self.strftime(self._time_format(n))
        return date

    def ctime(self):
        return self.strftime("%a %b %e %H:%M:%S %Y")

    asctime = ctime

    def __format__(self, fmt):
        if not isinstance(fmt, str):
            raise TypeError(f"must be str, not {type(fmt).__name__}")
        if len(fmt) != 0:
            return self.strftime(fmt)
        return str(self)

    def __str__(self):
        return self.strftime()

    def __repr__(self):
        fields = [self.year, self.mon, self.mday]
        if self._time:
            second = self.sec + self.sec_fraction if self.sf else self.sec
            fields += [self.hour, self.min, second, self.utc_offset]
        args = ", ".join(repr(f) for f in fields)
        if self._sg != ITALY:
            args += f", start={self._sg!r}"
        return f"{self.cname}({args})"


class DateTime(Date):
    """
    A date and a time of day with a UTC offset.

    Parameters
    ----------
    year, month, day : number
        As for Date.
    hour, minute, second : number, optional
        Negative values count back from the end of the day, hour or
        minute. 24:00:00 is 00:00:00 of the next day. Fractions of any
        field are allowed.
    offset : int, Fraction, float or str, optional
        Seconds east of UTC (int), a fraction of a day, or "+HH:MM".
    start : number, optional
        Calendar reform.
    """

    _time = True

    def __init__(self, year=-4712, month=1, day=1, hour=0, minute=0,
                 second=0, offset=0, start=DEFAULT_START):
        self._init(*self._parts(
            lambda d, sg: civil_to_jd_reform(year, month, d, sg), day, hour,
            minute, second, offset, start))

    @classmethod
    def fromjd(cls, jd=0, hour=0, minute=0, second=0, offset=0,
               start=DEFAULT_START):
        return cls._construct(lambda d, sg: d, jd, hour, minute, second,
                              offset, start)

    @classmethod
    def frommjd(cls, mjd=0, hour=0, minute=0, second=0, offset=0,
                start=DEFAULT_START):
        return cls._construct(lambda d, sg: d + MJD0, mjd, hour, minute,
                              second, offset, start)

    @classmethod
    def ordinal(cls, year=-4712, yday=1, hour=0, minute=0, second=0,
                offset=0, start=DEFAULT_START):
        return cls._construct(lambda d, sg: ordinal_to_jd(year, d, sg), yday,
                              hour, minute, second, offset, start)

    @classmethod
    def commercial(cls, cwyear=-4712, cweek=1, cwday=1, hour=0, minute=0,
                   second=0, offset=0, start=DEFAULT_START):
        return cls._construct(
            lambda d, sg: commercial_to_jd(cwyear, cweek, d, sg), cwday,
            hour, minute, second, offset, start)

    @classmethod
    def weeknum(cls, year=-4712, week=0, wday=1, f=0, hour=0, minute=0,
                second=0, offset=0, start=DEFAULT_START):
        return cls._construct(
            lambda d, sg: weeknum_to_jd(year, week, d, f, sg), wday, hour,
            minute, second, offset, start)

    @classmethod
    def nth_kday(cls, year=-4712, month=1, n=1, k=1, hour=0, minute=0,
                 second=0, offset=0, start=DEFAULT_START):
        return cls._construct(
            lambda d, sg: nth_kday_to_jd(year, month, n, d, sg), k, hour,
            minute, second, offset, start)

    @classmethod
    def now(cls, start=DEFAULT_START):
        """The current local time."""
        ns = time.time_ns()
        t = time.localtime(ns // NS)
        sg = valid_start(start)
        jd = civil_to_jd_reform(t.tm_year, t.tm_mon, t.tm_mday, sg)
        hms = (t.tm_hour, t.tm_min, min(t.tm_sec, 59))
        fraction = Fraction(ns % NS, NS * SPD)
        return cls._new(*cls._utc(jd, sg, fraction, hms, t.tm_gmtoff))
