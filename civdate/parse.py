#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Feb  8 15:10:31 2025

@author: Marcel Hesselberth

Date parsers.

fragments() reads free text: an ordered cascade of grammars is searched in
the input. Every grammar that matches blanks out the text it used and
stores the fields it found, the first value stored for a field is kept.
Only the first matching date grammar is used. The result is a dict of
fragments (year, mon, mday, hour, min, sec, sec_fraction, zone, offset,
yday, cwyear, cweek, cwday, wday, ...), which complete_fragments() and
fragments_to_jd() turn into a day.

iso8601(), rfc3339(), xmlschema(), rfc2822(), httpdate() and jisx0301()
accept only their own format.
"""

import time
import logging
from fractions import Fraction
from civdate import patterns as p
from civdate.config import PARSE_LIMIT, CENTURY_PIVOT
from civdate.constants import (ITALY, abbr_days, abbr_months, zones,
                               jisx0301_eras)
from civdate.errors import InvalidDate, ParseLimitError
from civdate.calendar import (civil_to_jd_reform, jd_to_civil_reform,
                              ordinal_to_jd, commercial_to_jd,
                              jd_to_commercial, weeknum_to_jd, jd_to_weeknum,
                              jd_to_wday)


log = logging.getLogger(__name__)

_gengo = {era: offset for era, offset, jd in jisx0301_eras}


def _check_limit(string, limit):
    if not isinstance(string, str):
        raise TypeError(f"expected str, got {type(string).__name__}")
    if limit is None:
        return
    if not isinstance(limit, int):
        raise TypeError(f"limit must be int or None, not {type(limit).__name__}")
    if len(string) > limit:
        raise ParseLimitError(len(string), limit)


def day_num(name):
    return abbr_days.index(name[:3].lower())


def mon_num(name):
    return abbr_months.index(name[:3].lower()) + 1


def sec_fraction(digits):
    return Fraction(int(digits or 0), 10 ** len(digits))


def comp_year69(year):
    if year >= CENTURY_PIVOT:
        return year + 1900
    return year + 2000


def comp_year50(year):
    if year >= 50:
        return year + 1900
    return year + 2000


def zone_to_diff(zone):
    """
    Offset in seconds of a zone name or numeric zone.

    Parameters
    ----------
    zone : str
        A zone abbreviation ("JST", "EST dst", "Eastern standard time"),
        "Z", or a numeric offset with an optional gmt/utc prefix: "+9",
        "+09", "-0330", "+093015", "+09:00", "utc-5", "+5.5".

    Returns
    -------
    int, Fraction or None
        The offset east of UTC in seconds, None if the zone is unknown.
    """
    s = " ".join(zone.lower().split())
    dst = False
    for suffix, is_dst in ((" standard time", False),
                           (" daylight time", True), (" dst", True)):
        if s.endswith(suffix):
            s = s[:-len(suffix)]
            dst = is_dst
            break
    if s in zones:
        return zones[s] + 3600 if dst else zones[s]
    if len(s) > 3 and s[:3] in ("gmt", "utc"):
        s = s[3:]
    m = p.ZONE_NUMERIC.match(s)
    if not m:
        return None
    sign, digits, minutes, seconds, fraction = m.groups()
    if minutes is not None:
        hour, minute, second = int(digits), int(minutes or 0), \
            int(seconds or 0)
        if hour > 23 or minute > 59 or second > 59:
            return None
        offset = hour * 3600 + minute * 60 + second
    elif fraction is not None:
        hour = int(digits)
        if hour > 23:
            return None
        offset = hour * 3600 + sec_fraction(fraction) * 3600
        if offset.denominator == 1:
            offset = offset.numerator
    elif len(digits) > 2:
        h = 2 - len(digits) % 2
        offset = int(digits[:h]) * 3600 + int(digits[h:h + 2]) * 60
        if len(digits) >= 5:
            offset += int(digits[h + 2:h + 4])
    else:
        offset = int(digits) * 3600
    return -offset if sign == "-" else offset


class _Cascade:
    """Free text parser state: the residual string and the fragments."""

    def __init__(self, string, comp):
        self.string = string
        self.frags = {}
        self.comp = comp
        self.bc = False

    def set(self, key, value):
        if key not in self.frags:
            self.frags[key] = value

    def subs(self, pattern, callback):
        m = pattern.search(self.string)
        if m is None:
            return False
        self.string = self.string[:m.start()] + " " + self.string[m.end():]
        callback(m)
        log.debug("%s matched %r", callback.__name__, m.group(0))
        return True

    def s3e(self, y, m, d, bc):
        """Assign year, month and day from three strings in unknown order."""
        if m is not None:
            m = str(m)
        if y is not None and m is not None and d is None:
            y, m, d = d, y, m
        if y is None:
            if d is not None and len(d) > 2:
                y, d = d, None
            if d is not None and d.startswith("'"):
                y, d = d, None
        if y is not None:
            s = y.lstrip("'")
            i = 0
            while i < len(s) and not (s[i] in "+-" or s[i].isdigit()):
                i += 1
            if i < len(s):
                j = i + 1 if s[i] in "+-" else i
                while j < len(s) and s[j].isdigit():
                    j += 1
                if j < len(s):
                    y, d = d, s[i:]
        if m is not None and (m.startswith("'") or len(m) > 2):
            y, m, d = m, d, y
        if d is not None and (d.startswith("'") or len(d) > 2):
            y, d = d, y
        if y is not None:
            s = y
            i = 0
            while i < len(s) and not (s[i] in "+-" or s[i].isdigit()):
                i += 1
            if i < len(s):
                sign = s[i] if s[i] in "+-" else ""
                j = i + len(sign)
                k = j
                while k < len(s) and s[k].isdigit():
                    k += 1
                if sign or k - j > 2:
                    self.comp = False
                if k > j:
                    year = int(s[j:k])
                    self.set("year", -year if sign == "-" else year)
        if bc:
            self.bc = True
        for key, value in (("mon", m), ("mday", d)):
            if value is None:
                continue
            digits = ""
            for c in value:
                if c.isdigit():
                    digits += c
                elif digits:
                    break
            if digits:
                self.set(key, int(digits))

    # free text grammars

    def day(self, m):
        self.set("wday", day_num(m.group(1)))

    def time(self, m):
        if m.group(2):
            self.set("zone", m.group(2))
        t = p.TIME_DETAIL.match(m.group(1))
        hour, minute, second, fraction, hmin, hsec, merid = t.groups()
        hour = int(hour)
        if merid:
            hour %= 12
            if merid.lower() == "p":
                hour += 12
        self.set("hour", hour)
        minute = minute or hmin
        second = second or hsec
        if minute:
            self.set("min", int(minute))
        if second:
            self.set("sec", int(second))
        if fraction:
            self.set("sec_fraction", sec_fraction(fraction[1:]))

    def eu(self, m):
        d, mon, era, y = m.groups()
        self.s3e(y, mon_num(mon), d, era is not None and era[0] in "bB")

    def us(self, m):
        mon, d, era, y = m.groups()
        self.s3e(y, mon_num(mon), d, era is not None and era[0] in "bB")

    def iso(self, m):
        y, mon, d = m.groups()
        self.s3e(y, mon, d, False)

    def jis(self, m):
        era, y, mon, d = m.groups()
        self.set("year", int(y) + _gengo.get(era.upper(), 0))
        self.set("mon", int(mon))
        self.set("mday", int(d))

    def vms11(self, m):
        d, mon, y = m.groups()
        self.s3e(y, mon_num(mon), d, False)

    def vms12(self, m):
        mon, d, y = m.groups()
        self.s3e(y, mon_num(mon), d, False)

    def sla(self, m):
        y, mon, d = m.groups()
        self.s3e(y, mon, d, False)

    def dot(self, m):
        y, mon, d = m.groups()
        self.s3e(y, mon, d, False)

    def iso21(self, m):
        y, w, d = m.groups()
        if y:
            self.set("cwyear", int(y))
        self.set("cweek", int(w))
        if d:
            self.set("cwday", int(d))

    def iso22(self, m):
        self.set("cwday", int(m.group(1)))

    def iso23(self, m):
        mon, d = m.groups()
        if mon:
            self.set("mon", int(mon))
        self.set("mday", int(d))

    def iso24(self, m):
        mon, d = m.groups()
        self.set("mon", int(mon))
        if d:
            self.set("mday", int(d))

    def iso25(self, m):
        y, d = m.groups()
        self.set("year", int(y))
        self.set("yday", int(d))

    def iso26(self, m):
        self.set("yday", int(m.group(1)))

    def iso2(self):
        if self.subs(p.ISO21, self.iso21):
            return True
        if self.subs(p.ISO22, self.iso22):
            return True
        if self.subs(p.ISO23, self.iso23):
            return True
        if self.subs(p.ISO24, self.iso24):
            return True
        if not p.ISO25_0.search(self.string) and \
                self.subs(p.ISO25, self.iso25):
            return True
        if not p.ISO26_0.search(self.string) and \
                self.subs(p.ISO26, self.iso26):
            return True
        return False

    def year(self, m):
        self.set("year", int(m.group(1)))

    def mon(self, m):
        self.set("mon", mon_num(m.group(1)))

    def mday(self, m):
        self.set("mday", int(m.group(1)))

    def ddd(self, m):
        sign, s2, s3, s4, s5 = m.groups()
        n = len(s2)

        def num(start, length, signed=False):
            value = int(s2[start:start + length])
            return -value if signed and sign == "-" else value

        # digits are a time when only a fraction follows
        as_time = s3 is None and s4 is not None
        if n == 2:
            self.set("sec" if as_time else "mday", num(0, 2))
        elif n == 4:
            if as_time:
                self.set("sec", num(2, 2))
                self.set("min", num(0, 2))
            else:
                self.set("mon", num(0, 2))
                self.set("mday", num(2, 2))
        elif n == 6:
            if as_time:
                self.set("sec", num(4, 2))
                self.set("min", num(2, 2))
                self.set("hour", num(0, 2))
            else:
                self.set("year", num(0, 2, True))
                self.set("mon", num(2, 2))
                self.set("mday", num(4, 2))
        elif n in (8, 10, 12, 14):
            if as_time:
                self.set("sec", num(n - 2, 2))
                self.set("min", num(n - 4, 2))
                self.set("hour", num(n - 6, 2))
                self.set("mday", num(n - 8, 2))
                if n >= 10:
                    self.set("mon", num(n - 10, 2))
                if n == 12:
                    self.set("year", num(0, 2, True))
                if n == 14:
                    self.set("year", num(0, 4, True))
                    self.comp = False
            else:
                self.set("year", num(0, 4, True))
                self.set("mon", num(4, 2))
                self.set("mday", num(6, 2))
                if n >= 10:
                    self.set("hour", num(8, 2))
                if n >= 12:
                    self.set("min", num(10, 2))
                if n >= 14:
                    self.set("sec", num(12, 2))
                self.comp = False
        elif n == 3:
            if as_time:
                self.set("sec", num(1, 2))
                self.set("min", num(0, 1))
            else:
                self.set("yday", num(0, 3))
        elif n == 5:
            if as_time:
                self.set("sec", num(3, 2))
                self.set("min", num(1, 2))
                self.set("hour", num(0, 1))
            else:
                self.set("year", num(0, 2, True))
                self.set("yday", num(2, 3))
        elif n == 7:
            if as_time:
                self.set("sec", num(5, 2))
                self.set("min", num(3, 2))
                self.set("hour", num(1, 2))
                self.set("mday", num(0, 1))
            else:
                self.set("year", num(0, 4, True))
                self.set("yday", num(4, 3))
                self.comp = False
        if s3 is not None and len(s3) in (2, 4, 6):
            l3 = len(s3)
            if s4 is not None:
                self.set("sec", int(s3[l3 - 2:]))
                if l3 >= 4:
                    self.set("min", int(s3[l3 - 4:l3 - 2]))
                if l3 >= 6:
                    self.set("hour", int(s3[:2]))
            else:
                self.set("hour", int(s3[:2]))
                if l3 >= 4:
                    self.set("min", int(s3[2:4]))
                if l3 >= 6:
                    self.set("sec", int(s3[4:6]))
        if s4 is not None:
            self.set("sec_fraction", sec_fraction(s4))
        if s5 is not None:
            if s5.startswith("["):
                body = s5[1:-1]
                offset, colon, name = body.partition(":")
                if colon:
                    zone = name
                else:
                    zone = offset
                    if offset[:1].isdigit():
                        offset = "+" + offset
                self.set("zone", zone)
                self.set("offset", zone_to_diff(offset))
            else:
                self.set("zone", s5)

    def bc_era(self, m):
        if m.group(1)[0] in "bB":
            self.bc = True

    def ad_era(self, m):
        """AD/CE: the text is consumed, bc stays unset."""

    def frag(self):
        m = p.FRAG.match(self.string)
        if not m:
            return
        n = int(m.group(1))
        if "hour" in self.frags and "mday" not in self.frags:
            if 1 <= n <= 31:
                self.set("mday", n)
        if "mday" in self.frags and "hour" not in self.frags:
            if 0 <= n <= 24:
                self.set("hour", n)

    def run(self):
        self.subs(p.DAY, self.day)
        self.subs(p.TIME, self.time)
        self.subs(p.EU, self.eu) or \
            self.subs(p.US, self.us) or \
            self.subs(p.ISO, self.iso) or \
            self.subs(p.JIS, self.jis) or \
            self.subs(p.VMS11, self.vms11) or \
            self.subs(p.VMS12, self.vms12) or \
            self.subs(p.SLA, self.sla) or \
            self.subs(p.DOT, self.dot) or \
            self.iso2() or \
            self.subs(p.YEAR, self.year) or \
            self.subs(p.MON, self.mon) or \
            self.subs(p.MDAY, self.mday) or \
            self.subs(p.DDD, self.ddd)
        self.subs(p.ERA1, self.ad_era)
        self.subs(p.ERA2, self.bc_era)
        self.frag()
        return self.finish()

    def finish(self):
        frags = self.frags
        if self.bc:
            for key in ("year", "cwyear"):
                if key in frags:
                    frags[key] = 1 - frags[key]
        if self.comp:
            for key in ("year", "cwyear"):
                if key in frags and 0 <= frags[key] <= 99:
                    frags[key] = comp_year69(frags[key])
        if "zone" in frags and frags.get("offset") is None:
            offset = zone_to_diff(frags["zone"])
            if offset is None:
                frags.pop("offset", None)
            else:
                frags["offset"] = offset
        return frags


def fragments(string, comp=True, limit=PARSE_LIMIT):
    """
    Parse free text into date fragments.

    Parameters
    ----------
    string : str
        Text containing a date and/or a time, e.g. "3rd Feb 2001 04:05:06
        PM +07:00", "Sat Aug 28 02:55:50 1999", "H13.02.03", "20010203".
    comp : bool, optional
        Complete two digit years (69..99 -> 19xx, 0..68 -> 20xx).
    limit : int or None, optional
        Maximum length of string, None for no limit.

    Raises
    ------
    TypeError
        string is not a str.
    ParseLimitError
        string is longer than limit.

    Returns
    -------
    dict
        The fields found, possibly empty.
    """
    _check_limit(string, limit)
    string = p.NOISE.sub(" ", string)
    return _Cascade(string, comp).run()


def _zone(frags, zone):
    if zone:
        frags["zone"] = zone
        frags["offset"] = zone_to_diff(zone)


def _time(frags, hour, minute, second, fraction):
    if hour is not None:
        frags["hour"] = int(hour)
    if minute is not None:
        frags["min"] = int(minute)
    if second is not None:
        frags["sec"] = int(second)
    if fraction is not None:
        frags["sec_fraction"] = sec_fraction(fraction)


def _iso8601_ext_datetime(m):
    g = m.groups()
    frags = {}
    if g[0] is not None:
        if g[2] is not None:
            frags["mday"] = int(g[2])
        if g[0] != "-":
            y = int(g[0])
            frags["year"] = comp_year69(y) if len(g[0]) < 4 else y
        if g[1] is None:
            if g[0] != "-":
                return None
        else:
            frags["mon"] = int(g[1])
    elif g[4] is not None:
        frags["yday"] = int(g[4])
        if g[3] is not None:
            y = int(g[3])
            frags["year"] = comp_year69(y) if len(g[3]) < 4 else y
    elif g[7] is not None:
        frags["cweek"] = int(g[6])
        frags["cwday"] = int(g[7])
        if g[5] is not None:
            y = int(g[5])
            frags["cwyear"] = comp_year69(y) if len(g[5]) < 4 else y
    elif g[8] is not None:
        frags["cwday"] = int(g[8])
    _time(frags, *g[9:13])
    _zone(frags, g[13])
    return frags


def _iso8601_bas_datetime(m):
    g = m.groups()
    frags = {}
    if g[2] is not None:
        frags["mday"] = int(g[2])
        if g[0] != "--":
            y = int(g[0])
            frags["year"] = comp_year69(y) if len(g[0]) < 4 else y
        if g[1] == "-":
            if g[0] != "--":
                return None
        else:
            frags["mon"] = int(g[1])
    elif g[4] is not None:
        frags["yday"] = int(g[4])
        y = int(g[3])
        frags["year"] = comp_year69(y) if len(g[3]) < 4 else y
    elif g[5] is not None:
        frags["yday"] = int(g[5])
    elif g[8] is not None:
        frags["cweek"] = int(g[7])
        frags["cwday"] = int(g[8])
        y = int(g[6])
        frags["cwyear"] = comp_year69(y) if len(g[6]) < 4 else y
    elif g[10] is not None:
        frags["cweek"] = int(g[9])
        frags["cwday"] = int(g[10])
    elif g[11] is not None:
        frags["cwday"] = int(g[11])
    _time(frags, *g[12:16])
    _zone(frags, g[16])
    return frags


def _time_only(m):
    hour, minute, second, fraction, zone = m.groups()
    frags = {}
    _time(frags, hour, minute, second, fraction)
    _zone(frags, zone)
    return frags


def iso8601(string, limit=PARSE_LIMIT):
    """
    Fragments of an ISO 8601 date, time or date and time.

    Extended ("2001-02-03T04:05:06+07:00", "2001-034", "2001-W05-6") and
    basic ("20010203T040506+0700", "2001034", "2001W056") formats and
    reduced forms ("--02-03", "-W-6") are accepted. Returns an empty dict
    if string is not ISO 8601.
    """
    _check_limit(string, limit)
    for pattern, callback in ((p.ISO8601_EXT_DATETIME, _iso8601_ext_datetime),
                              (p.ISO8601_BAS_DATETIME, _iso8601_bas_datetime),
                              (p.ISO8601_EXT_TIME, _time_only),
                              (p.ISO8601_BAS_TIME, _time_only)):
        m = pattern.match(string)
        if m:
            frags = callback(m)
            if frags is not None:
                return frags
    return {}


def rfc3339(string, limit=PARSE_LIMIT):
    """Fragments of an RFC 3339 date-time ("2001-02-03T04:05:06+07:00")."""
    _check_limit(string, limit)
    m = p.RFC3339.match(string)
    if not m:
        return {}
    y, mon, d, hour, minute, second, fraction, zone = m.groups()
    frags = {"year": int(y), "mon": int(mon), "mday": int(d)}
    _time(frags, hour, minute, second, fraction)
    _zone(frags, zone)
    return frags


def xmlschema(string, limit=PARSE_LIMIT):
    """Fragments of an XML Schema date, time or truncated date."""
    _check_limit(string, limit)
    frags = {}
    m = p.XMLSCHEMA_DATETIME.match(string)
    if m:
        y, mon, d, hour, minute, second, fraction, zone = m.groups()
        frags["year"] = int(y)
        if mon is not None:
            frags["mon"] = int(mon)
        if d is not None:
            frags["mday"] = int(d)
        _time(frags, hour, minute, second, fraction)
        _zone(frags, zone)
        return frags
    m = p.XMLSCHEMA_TIME.match(string)
    if m:
        return _time_only(m)
    m = p.XMLSCHEMA_TRUNC.match(string)
    if m:
        mon, d, d3, zone = m.groups()
        if mon is not None:
            frags["mon"] = int(mon)
        if d is not None:
            frags["mday"] = int(d)
        if d3 is not None:
            frags["mday"] = int(d3)
        _zone(frags, zone)
    return frags


def rfc2822(string, limit=PARSE_LIMIT):
    """Fragments of an RFC 2822 date ("Sat, 3 Feb 2001 04:05:06 +0700")."""
    _check_limit(string, limit)
    m = p.RFC2822.match(string)
    if not m:
        return {}
    wday, d, mon, y, hour, minute, second, zone = m.groups()
    frags = {}
    if wday is not None:
        frags["wday"] = day_num(wday)
    frags["mday"] = int(d)
    frags["mon"] = mon_num(mon)
    year = int(y)
    frags["year"] = comp_year50(year) if len(y) < 4 else year
    _time(frags, hour, minute, second, None)
    _zone(frags, zone)
    return frags


def httpdate(string, limit=PARSE_LIMIT):
    """
    Fragments of an HTTP-date.

    The preferred format "Sat, 03 Feb 2001 04:05:06 GMT", the RFC 850
    format "Saturday, 03-Feb-01 04:05:06 GMT" and the asctime format
    "Sat Feb  3 04:05:06 2001" are accepted.
    """
    _check_limit(string, limit)
    m = p.HTTPDATE_TYPE1.match(string)
    if m:
        wday, d, mon, y, hour, minute, second, zone = m.groups()
        frags = {"wday": day_num(wday), "mday": int(d), "mon": mon_num(mon),
                 "year": int(y)}
        _time(frags, hour, minute, second, None)
        _zone(frags, zone)
        return frags
    m = p.HTTPDATE_TYPE2.match(string)
    if m:
        wday, d, mon, y, hour, minute, second, zone = m.groups()
        year = int(y)
        frags = {"wday": day_num(wday), "mday": int(d), "mon": mon_num(mon),
                 "year": comp_year69(year) if 0 <= year <= 99 else year}
        _time(frags, hour, minute, second, None)
        _zone(frags, zone)
        return frags
    m = p.HTTPDATE_TYPE3.match(string)
    if m:
        wday, mon, d, hour, minute, second, y = m.groups()
        frags = {"wday": day_num(wday), "mon": mon_num(mon), "mday": int(d),
                 "year": int(y)}
        _time(frags, hour, minute, second, None)
        return frags
    return {}


def jisx0301(string, limit=PARSE_LIMIT):
    """
    Fragments of a JIS X 0301 date ("H13.02.03", "R01.05.01T04:05:06Z").

    Without an era initial the Heisei era is assumed. Anything else is
    parsed as ISO 8601.
    """
    _check_limit(string, limit)
    m = p.JISX0301.match(string)
    if not m:
        return iso8601(string, limit)
    era, y, mon, d, hour, minute, second, fraction, zone = m.groups()
    frags = {"year": int(y) + _gengo[(era or "H").upper()],
             "mon": int(mon), "mday": int(d)}
    _time(frags, hour, minute, second, fraction or None)
    _zone(frags, zone)
    return frags


_tables = (
    ("time", ("hour", "min", "sec")),
    (None, ("jd",)),
    ("ordinal", ("year", "yday", "hour", "min", "sec")),
    ("civil", ("year", "mon", "mday", "hour", "min", "sec")),
    ("commercial", ("cwyear", "cweek", "cwday", "hour", "min", "sec")),
    ("wday", ("wday", "hour", "min", "sec")),
    ("wnum0", ("year", "wnum0", "wday", "hour", "min", "sec")),
    ("wnum1", ("year", "wnum1", "wday", "hour", "min", "sec")),
    (None, ("cwyear", "cweek", "wday", "hour", "min", "sec")),
    (None, ("year", "wnum0", "cwday", "hour", "min", "sec")),
    (None, ("year", "wnum1", "cwday", "hour", "min", "sec")),
)

_date_keys = ("jd", "year", "mon", "mday", "yday", "cwyear", "cweek", "cwday",
              "wday", "wnum0", "wnum1")


def _today_jd(sg):
    t = time.localtime()
    return civil_to_jd_reform(t.tm_year, t.tm_mon, t.tm_mday, sg)


class _Today:
    """Fields of today's date, computed on first use."""

    def __init__(self, sg, jd):
        self.sg = sg
        self._jd = jd

    @property
    def jd(self):
        if self._jd is None:
            self._jd = _today_jd(self.sg)
        return self._jd

    def __getitem__(self, key):
        if key in ("year", "mon", "mday"):
            civil = jd_to_civil_reform(self.jd, self.sg)
            return civil[("year", "mon", "mday").index(key)]
        if key in ("cwyear", "cweek", "cwday"):
            commercial = jd_to_commercial(self.jd, self.sg)
            return commercial[("cwyear", "cweek", "cwday").index(key)]
        if key == "wday":
            return jd_to_wday(self.jd)
        if key == "wnum0":
            return jd_to_weeknum(self.jd, 0, self.sg).week
        if key == "wnum1":
            return jd_to_weeknum(self.jd, 1, self.sg).week
        raise KeyError(key)


def complete_fragments(frags, sg=ITALY, today=None):
    """
    Fill in the date fields that a partial date leaves implicit.

    The layout (ordinal, civil, commercial, week number) that shares the
    most fields with frags is completed: leading fields that are missing
    are taken from today's date, trailing ones default to the start of the
    period (mon 1, mday 1, yday 1, cweek 1, cwday 1). A lone weekday means
    that day in the current week. Missing time fields are 0 and a leap
    second is clamped to 59.

    Parameters
    ----------
    frags : dict
        Fragments, not modified.
    sg : number, optional
        Calendar start.
    today : int, optional
        Julian day of today, the local date by default.

    Returns
    -------
    dict
        The completed fragments.
    """
    frags = dict(frags)
    today = _Today(sg, today)
    best, count = None, 0
    for table in _tables:
        n = sum(1 for key in table[1] if frags.get(key) is not None)
        if n > count:
            best, count = table, n
    if best is not None and best[0] not in (None, "time"):
        kind, keys = best
        if kind == "ordinal":
            frags.setdefault("year", today["year"])
            frags.setdefault("yday", 1)
        elif kind == "wday":
            frags["jd"] = today.jd - today["wday"] + frags["wday"]
        else:
            for key in keys:
                if frags.get(key) is not None:
                    break
                frags[key] = today[key]
            defaults = {"civil": (("mon", 1), ("mday", 1)),
                        "commercial": (("cweek", 1), ("cwday", 1)),
                        "wnum0": (("wnum0", 0), ("wday", 0)),
                        "wnum1": (("wnum1", 0), ("wday", 1))}[kind]
            for key, value in defaults:
                if frags.get(key) is None:
                    frags[key] = value
    for key in ("hour", "min", "sec"):
        if frags.get(key) is None:
            frags[key] = 0
    if frags["sec"] > 59:
        frags["sec"] = 59
    return frags


def fragments_to_jd(frags, sg=ITALY):
    """
    Julian day of completed fragments.

    The layouts are tried in the order jd, ordinal, civil, commercial,
    Sunday based week number, Monday based week number.

    Raises
    ------
    InvalidDate
        No date can be made from frags.
    """
    if not any(frags.get(key) is not None for key in _date_keys):
        raise InvalidDate("invalid date (no date fields)")
    get = frags.get
    attempts = []
    if get("jd") is not None:
        attempts.append(lambda: get("jd"))
    if get("yday") is not None and get("year") is not None:
        attempts.append(lambda: ordinal_to_jd(get("year"), get("yday"), sg))
    if get("mday") is not None and get("mon") is not None and \
            get("year") is not None:
        attempts.append(lambda: civil_to_jd_reform(get("year"), get("mon"),
                                                   get("mday"), sg))
    # cwday is 1..7 (Monday..Sunday), wday 0..6 (Sunday..Saturday);
    # only a value borrowed from the other field is mapped
    wday = get("cwday")
    if wday is None and get("wday") is not None:
        wday = 7 if get("wday") == 0 else get("wday")
    if wday is not None and get("cweek") is not None and \
            get("cwyear") is not None:
        attempts.append(lambda: commercial_to_jd(get("cwyear"), get("cweek"),
                                                 wday, sg))
    wday0 = get("wday")
    if wday0 is None and get("cwday") is not None:
        wday0 = 0 if get("cwday") == 7 else get("cwday")
    if wday0 is not None and get("wnum0") is not None and \
            get("year") is not None:
        attempts.append(lambda: weeknum_to_jd(get("year"), get("wnum0"),
                                              wday0, 0, sg))
    wday1 = get("wday")
    if wday1 is None and get("cwday") is not None:
        wday1 = 0 if get("cwday") == 7 else get("cwday")
    if wday1 is not None:
        wday1 = (wday1 - 1) % 7
    if wday1 is not None and get("wnum1") is not None and \
            get("year") is not None:
        attempts.append(lambda: weeknum_to_jd(get("year"), get("wnum1"),
                                              wday1, 1, sg))
    for attempt in attempts:
        try:
            return attempt()
        except InvalidDate:
            continue
    raise InvalidDate("invalid date")
