#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Dec 18 20:28:19 2023

@author: hessel
"""

import os
import logging
from configparser import ConfigParser
from civdate.constants import ITALY, ENGLAND, JULIAN, GREGORIAN


log = logging.getLogger(__name__)

path, ext = os.path.splitext(__file__)
config_filename = f"{path}.ini"
config = ConfigParser()
config.read(config_filename)

_starts = {"ITALY": ITALY, "ENGLAND": ENGLAND,
           "JULIAN": JULIAN, "GREGORIAN": GREGORIAN}


def _start(value):
    value = value.strip()
    if value.upper() in _starts:
        return _starts[value.upper()]
    return int(value)


def _limit(value):
    if value.strip().lower() == "none":
        return None
    return int(value)


# Calendar
DEFAULT_START = _start(config.get("Calendar", "start", fallback="ITALY"))

# Parser
PARSE_LIMIT  = _limit(config.get("Parser", "limit", fallback="128"))
CENTURY_PIVOT = config.getint("Parser", "pivot", fallback=69)

# Strftime
STRFTIME_BUFSIZE = config.getint("Strftime", "bufsize", fallback=1024)

log.debug("%s: start=%s limit=%s pivot=%s bufsize=%s", config_filename,
          DEFAULT_START, PARSE_LIMIT, CENTURY_PIVOT, STRFTIME_BUFSIZE)
