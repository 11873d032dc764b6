#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Feb  8 15:12:44 2025

@author: Marcel Hesselberth

Regular expressions for the date parsers.

The free text grammars are searched (not matched) in a residual string,
the format specific ones must match the whole input.
"""

import re


_X = re.VERBOSE | re.IGNORECASE

MONTHS = r"""(?:january|february|march|april|may|june|july|august|september|
               october|november|december|jan|feb|mar|apr|jun|jul|aug|sep|
               oct|nov|dec)"""
ABBR_MONTHS = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)"
DAYS = r"(?:sunday|monday|tuesday|wednesday|thursday|friday|saturday)"
ABBR_DAYS = r"(?:sun|mon|tue|wed|thu|fri|sat)"
ERA_INITIALS = "mtshr"

# Characters that can not be part of a date are folded to one space
NOISE = re.compile(r"[^-+',./:@A-Za-z0-9\[\]]+")

# Free text grammars

DAY = re.compile(rf"\b({ABBR_DAYS})[^-/\d\s]*", _X)

TIME = re.compile(r"""
    (                                   # whole time
      \d+\s*                            #   hour
      (?:
        (?:
          :\s*\d+                       #   :min
          (?:\s*:\s*\d+(?:[,.]\d*)?)?   #   :sec[.frac]
        |
          h(?:\s*\d+m?(?:\s*\d+s?)?)?   #   h[min[m][sec[s]]]
        )
        (?:\s*[ap](?:m\b|\.m\.))?       #   am/pm
      |
        [ap](?:m\b|\.m\.)               #   only am/pm
      )
    )
    (?:
      \s*
      (                                 # zone
        (?:gmt|utc?)?[-+]\d+(?:[,.:]\d+(?::\d+)?)?
      |
        [a-z.\s]+(?:standard|daylight)\stime\b
      |
        [a-z]+(?:\sdst)?\b
      )
    )?
    """, _X)

TIME_DETAIL = re.compile(r"""
    \A(\d+)\s*                          # hour
    (?:
      :\s*(\d+)                         # min
      (?:\s*:\s*(\d+)([,.]\d*)?)?       # sec, fraction
    |
      h(?:\s*(\d+)m?                    # min
        (?:\s*(\d+)s?)?                 # sec
      )?
    )?
    (?:\s*([ap])(?:m\b|\.m\.))?         # am/pm
    """, _X)

ERA1 = re.compile(r"\b(a(?:d\b|\.d\.))(?!(?<!\.)[a-z])", _X)
ERA2 = re.compile(r"\b(c(?:e\b|\.e\.)|b(?:ce\b|\.c\.e\.)|b(?:c\b|\.c\.))"
                  r"(?!(?<!\.)[a-z])", _X)

_ERA = r"""(?:\b(c(?:e|\.e\.)|b(?:ce|\.c\.e\.)|a(?:d|\.d\.)|b(?:c|\.c\.))
              (?!(?<!\.)[a-z]))"""

EU = re.compile(rf"""
    ('?\d+)[^-\d\s]*                    # mday
    \s*
    ({MONTHS})[^-\d\s']*                # mon
    (?:
      \s*
      {_ERA}?                           # era
      \s*
      ('?-?\d+(?:(?:st|nd|rd|th)\b)?)   # year
    )?
    """, _X)

US = re.compile(rf"""
    \b({MONTHS})[^-\d\s']*              # mon
    \s*
    ('?\d+)[^-\d\s']*                   # mday
    (?:
      \s*,?
      \s*
      {_ERA}?                           # era
      \s*
      ('?-?\d+)                         # year
    )?
    """, _X)

ISO = re.compile(r"('?[-+]?\d+)-(\d+)-('?-?\d+)", _X)

JIS = re.compile(rf"\b([{ERA_INITIALS}])(\d+)\.(\d+)\.(\d+)", _X)

VMS11 = re.compile(rf"""
    ('?-?\d+)                           # mday
    -({MONTHS})[^-/.]*                  # mon
    -('?-?\d+)                          # year
    """, _X)

VMS12 = re.compile(rf"""
    \b({MONTHS})[^-/.]*                 # mon
    -('?-?\d+)                          # mday
    (?:-('?-?\d+))?                     # year
    """, _X)

SLA = re.compile(r"('?-?\d+)/\s*('?\d+)(?:\D\s*('?-?\d+))?", _X)

DOT = re.compile(r"('?-?\d+)\.\s*('?\d+)\.\s*('?-?\d+)", _X)

ISO21 = re.compile(r"\b(\d{2}|\d{4})?-?w(\d{2})(?:-?(\d))?\b", _X)
ISO22 = re.compile(r"-w-(\d)\b", _X)
ISO23 = re.compile(r"--(\d{2})?-(\d{2})\b", _X)
ISO24 = re.compile(r"--(\d{2})(\d{2})?\b", _X)
ISO25_0 = re.compile(r"[,.](\d{2}|\d{4})-\d{3}\b", _X)
ISO25 = re.compile(r"\b(\d{2}|\d{4})-(\d{3})\b", _X)
ISO26_0 = re.compile(r"\d-\d{3}\b", _X)
ISO26 = re.compile(r"\b-(\d{3})\b", _X)

YEAR = re.compile(r"'(\d+)\b", _X)

MON = re.compile(rf"\b({ABBR_MONTHS})\S*", _X)

MDAY = re.compile(r"(\d+)(st|nd|rd|th)\b", _X)

DDD = re.compile(r"""
    ([-+]?)                             # sign
    (\d{2,14})                          # date digits
    (?:
      \s*t?\s*
      (\d{2,6})?                        # time digits
      (?:[,.](\d*))?                    # fraction
    )?
    (?:
      \s*
      (                                 # zone
        z\b
      |
        [-+]\d{1,4}\b
      |
        \[[-+]?\d[^\]]*\]
      )
    )?
    """, _X)

FRAG = re.compile(r"\A\s*(\d{1,2})\s*\Z", _X)

# Zones

ZONE_NUMERIC = re.compile(r"""
    \A([-+])
    (\d+)
    (?:
      :(\d*)(?::(\d*))?                 # h:m[:s]
    |
      [,.](\d*)                         # fractional hours
    )?
    \Z
    """, _X)

# ISO 8601

ISO8601_EXT_DATETIME = re.compile(r"""
    \A\s*
    (?:
      ([-+]?\d{2,}|-)-(\d{2})?(?:-(\d{2}))?     # year, mon, mday
    |
      ([-+]?\d{2,})?-(\d{3})                    # year, yday
    |
      (\d{4}|\d{2})?-w(\d{2})-(\d)              # cwyear, cweek, cwday
    |
      -w-(\d)                                   # cwday
    )
    (?:t
      (\d{2}):(\d{2})(?::(\d{2})(?:[,.](\d+))?)?
      (z|[-+]\d{2}(?::?\d{2})?)?
    )?
    \s*\Z
    """, _X)

ISO8601_BAS_DATETIME = re.compile(r"""
    \A\s*
    (?:
      ([-+]?(?:\d{4}|\d{2})|--)(\d{2}|-)(\d{2}) # year, mon, mday
    |
      ([-+]?(?:\d{4}|\d{2}))(\d{3})             # year, yday
    |
      -(\d{3})                                  # yday
    |
      (\d{4}|\d{2})w(\d{2})(\d)                 # cwyear, cweek, cwday
    |
      -w(\d{2})(\d)                             # cweek, cwday
    |
      -w-(\d)                                   # cwday
    )
    (?:t?
      (\d{2})(\d{2})(?:(\d{2})(?:[,.](\d+))?)?
      (z|[-+]\d{2}(?:\d{2})?)?
    )?
    \s*\Z
    """, _X)

ISO8601_EXT_TIME = re.compile(r"""
    \A\s*(\d{2}):(\d{2})(?::(\d{2})(?:[,.](\d+))?)?
    (z|[-+]\d{2}(?::?\d{2})?)?\s*\Z
    """, _X)

ISO8601_BAS_TIME = re.compile(r"""
    \A\s*(\d{2})(\d{2})(?:(\d{2})(?:[,.](\d+))?)?
    (z|[-+]\d{2}(?:\d{2})?)?\s*\Z
    """, _X)

RFC3339 = re.compile(r"""
    \A\s*(-?\d{4})-(\d{2})-(\d{2})
    (?:t|\s)
    (\d{2}):(\d{2}):(\d{2})(?:[,.](\d+))?
    (z|[-+]\d{2}:\d{2})\s*\Z
    """, _X)

XMLSCHEMA_DATETIME = re.compile(r"""
    \A\s*(-?\d{4,})(?:-(\d{2})(?:-(\d{2}))?)?
    (?:t(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?)?
    (z|[-+]\d{2}:\d{2})?\s*\Z
    """, _X)

XMLSCHEMA_TIME = re.compile(r"""
    \A\s*(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?
    (z|[-+]\d{2}:\d{2})?\s*\Z
    """, _X)

XMLSCHEMA_TRUNC = re.compile(r"""
    \A\s*(?:--(\d{2})(?:-(\d{2}))?|---(\d{2}))
    (z|[-+]\d{2}:\d{2})?\s*\Z
    """, _X)

RFC2822 = re.compile(rf"""
    \A\s*(?:({ABBR_DAYS})\s*,\s+)?
    (\d{{1,2}})\s+
    ({ABBR_MONTHS})\s+
    (-?\d{{2,}})\s+
    (\d{{2}}):(\d{{2}})(?::(\d{{2}}))?\s*
    ([-+]\d{{4}}|ut|gmt|e[sd]t|c[sd]t|m[sd]t|p[sd]t|[a-ik-z])\s*\Z
    """, _X)

HTTPDATE_TYPE1 = re.compile(rf"""
    \A\s*({ABBR_DAYS})\s*,\s+
    (\d{{2}})\s+({ABBR_MONTHS})\s+(-?\d{{4}})\s+
    (\d{{2}}):(\d{{2}}):(\d{{2}})\s+
    (gmt)\s*\Z
    """, _X)

HTTPDATE_TYPE2 = re.compile(rf"""
    \A\s*({DAYS})\s*,\s+
    (\d{{2}})\s*-\s*({ABBR_MONTHS})\s*-\s*(\d{{2}})\s+
    (\d{{2}}):(\d{{2}}):(\d{{2}})\s+
    (gmt)\s*\Z
    """, _X)

HTTPDATE_TYPE3 = re.compile(rf"""
    \A\s*({ABBR_DAYS})\s+
    ({ABBR_MONTHS})\s+(\d{{1,2}})\s+
    (\d{{2}}):(\d{{2}}):(\d{{2}})\s+
    (\d{{4}})\s*\Z
    """, _X)

JISX0301 = re.compile(rf"""
    \A\s*([{ERA_INITIALS}])?(\d{{2}})\.(\d{{2}})\.(\d{{2}})
    (?:t
      (?:(\d{{2}}):(\d{{2}})(?::(\d{{2}})(?:[,.](\d*))?)?
      (z|[-+]\d{{2}}(?::?\d{{2}})?)?)?
    )?
    \s*\Z
    """, _X)
