#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Feb 10 20:44:05 2025

@author: Marcel Hesselberth

strftime for Date and DateTime.

A conversion is %[flags][width][E|O][:...]letter. Flags:
    -   don't pad a numerical output
    _   pad with spaces
    0   pad with zeros
    ^   upper case
    #   change case
The width is the minimum field width; for %L and %N it is the number of
digits. Conversions that are not known are copied to the output.
"""

import re
import logging
from fractions import Fraction
from civdate.constants import wdays, months, SPD, UNIX_EPOCH_JD
from civdate.config import STRFTIME_BUFSIZE
from civdate.errors import ResultTooLarge


log = logging.getLogger(__name__)

_conversion = re.compile(r"%([-_0^#]*)(\d*)([EO]?)(:{0,3})([a-zA-Z%+])")

_composite = {"F": "%Y-%m-%d",
              "D": "%m/%d/%y",
              "x": "%m/%d/%y",
              "T": "%H:%M:%S",
              "X": "%H:%M:%S",
              "R": "%H:%M",
              "r": "%I:%M:%S %p",
              "c": "%a %b %e %H:%M:%S %Y",
              "v": "%e-%^b-%4Y",
              "+": "%a %b %e %H:%M:%S %Z %Y"}

_E_ok = "cCxXyY"
_O_ok = "deHkIlmMSuUVwWy"

# Unix epoch as astronomical julian day
_UNIX_AJD = Fraction(2 * UNIX_EPOCH_JD - 1, 2)


class Formatter:
    """Formats one date according to strftime conversions."""

    def __init__(self, date, bufsize=STRFTIME_BUFSIZE):
        self.date = date
        self.bufsize = bufsize

    def format(self, fmt):
        if not isinstance(fmt, str):
            raise TypeError(f"format must be str, not {type(fmt).__name__}")
        return _conversion.sub(self.repl, fmt)

    def repl(self, escape):  # replace a conversion by its value
        flags, width, modifier, colons, code = escape.groups()
        if modifier == "E" and code not in _E_ok or \
                modifier == "O" and code not in _O_ok or \
                colons and code != "z":
            return escape.group(0)
        width = int(width) if width else None
        if width is not None and width >= self.bufsize:
            raise ResultTooLarge(f"width {width} too large")
        result = self.convert(code, flags, width, len(colons))
        if result is None:
            return escape.group(0)
        if len(result) > self.bufsize:
            raise ResultTooLarge(f"result of %{code} too large")
        return result

    def number(self, value, precision, flags, width, pad="0"):
        if "-" in flags:
            return str(value)
        if "_" in flags:
            pad = " "
        elif "0" in flags:
            pad = "0"
        width = precision if width is None else width
        sign = "-" if value < 0 else ""
        digits = str(abs(value))
        if pad == "0":
            return sign + digits.rjust(width - len(sign), "0")
        return (sign + digits).rjust(width)

    def string(self, s, flags, width, upper=False):
        if "^" in flags or "#" in flags and upper:
            s = s.upper()
        elif "#" in flags:
            s = s.lower()
        if width is None or "-" in flags:
            return s
        return s.rjust(width, "0" if "0" in flags else " ")

    def fraction(self, digits):
        value = self.date.sec_fraction * 10 ** digits
        return f"{value.numerator // value.denominator:0{digits}d}"

    def utc_offset(self, colons, flags, width):
        of = self.date.utc_offset
        sign = "-" if of < 0 else "+"
        h, rem = divmod(abs(of), 3600)
        m, s = divmod(rem, 60)
        hh = str(h) if "-" in flags else f"{h:02d}"
        if colons == 0:
            body = f"{hh}{m:02d}"
        elif colons == 1:
            body = f"{hh}:{m:02d}"
        elif colons == 2:
            body = f"{hh}:{m:02d}:{s:02d}"
        elif s:
            body = f"{hh}:{m:02d}:{s:02d}"
        elif m:
            body = f"{hh}:{m:02d}"
        else:
            body = hh
        if width is None or width <= len(body) + 1 or "-" in flags:
            return sign + body
        if "_" in flags:
            return (sign + body).rjust(width)
        return sign + body.rjust(width - 1, "0")

    def convert(self, code, flags, width, colons):
        d = self.date
        if code in _composite:
            return self.string(self.format(_composite[code]), flags, width)
        if code == "Y":
            return self.number(d.year, 4 + (d.year < 0), flags, width)
        if code == "C":
            return self.number(d.year // 100, 2, flags, width)
        if code == "y":
            return self.number(d.year % 100, 2, flags, width)
        if code == "m":
            return self.number(d.mon, 2, flags, width)
        if code in "Bbh":
            name = months[d.mon]
            return self.string(name if code == "B" else name[:3], flags,
                               width, upper=True)
        if code == "d":
            return self.number(d.mday, 2, flags, width)
        if code == "e":
            return self.number(d.mday, 2, flags, width, " ")
        if code == "j":
            return self.number(d.yday, 3, flags, width)
        if code == "H":
            return self.number(d.hour, 2, flags, width)
        if code == "k":
            return self.number(d.hour, 2, flags, width, " ")
        if code == "I":
            return self.number((d.hour - 1) % 12 + 1, 2, flags, width)
        if code == "l":
            return self.number((d.hour - 1) % 12 + 1, 2, flags, width, " ")
        if code == "M":
            return self.number(d.min, 2, flags, width)
        if code == "S":
            return self.number(d.sec, 2, flags, width)
        if code == "L":
            return self.fraction(3 if width is None else width)
        if code == "N":
            return self.fraction(9 if width is None else width)
        if code == "P":
            return self.string("pm" if d.hour >= 12 else "am", flags, width)
        if code == "p":
            s = "PM" if d.hour >= 12 else "AM"
            if "#" in flags:
                return self.string(s.lower(), flags.replace("#", ""), width)
            return self.string(s, flags, width)
        if code in "Aa":
            name = wdays[d.wday]
            return self.string(name if code == "A" else name[:3], flags,
                               width, upper=True)
        if code == "w":
            return self.number(d.wday, 1, flags, width)
        if code == "u":
            return self.number(d.cwday, 1, flags, width)
        if code == "U":
            return self.number(d.wnum0, 2, flags, width)
        if code == "W":
            return self.number(d.wnum1, 2, flags, width)
        if code == "V":
            return self.number(d.cweek, 2, flags, width)
        if code == "G":
            return self.number(d.cwyear, 4 + (d.cwyear < 0), flags, width)
        if code == "g":
            return self.number(d.cwyear % 100, 2, flags, width)
        if code == "z":
            return self.utc_offset(colons, flags, width)
        if code == "Z":
            return self.string(d.zone, flags, width, upper=True)
        if code == "s":
            seconds = (d.ajd - _UNIX_AJD) * SPD
            return self.number(seconds.numerator // seconds.denominator, 1,
                               flags, width)
        if code == "Q":
            ms = (d.ajd - _UNIX_AJD) * SPD * 1000
            return self.number(ms.numerator // ms.denominator, 1, flags,
                               width)
        if code == "n":
            return self.string("\n", flags, width)
        if code == "t":
            return self.string("\t", flags, width)
        if code == "%":
            return self.string("%", flags, width)
        log.debug("unknown conversion %%%s", code)
        return None


def strftime(date, fmt="%F"):
    """
    Format a Date or DateTime.

    Parameters
    ----------
    date : Date

    fmt : str
        Format string.

    Raises
    ------
    ResultTooLarge
        A conversion would produce more than the configured buffer size.

    Returns
    -------
    str
    """
    return Formatter(date).format(fmt)
