#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Feb  2 11:36:50 2025

@author: Marcel Hesselberth

Calendar dates with an adjustable Julian/Gregorian reform, exact
arithmetic and a free text parser.
"""

import logging

from civdate.constants import ITALY, ENGLAND, JULIAN, GREGORIAN
from civdate.errors import (DateError, InvalidDate, ParseLimitError,
                            ResultTooLarge)
from civdate.calendar import Calendar
from civdate.dt import Date, DateTime


logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["ITALY", "ENGLAND", "JULIAN", "GREGORIAN", "DateError",
           "InvalidDate", "ParseLimitError", "ResultTooLarge", "Calendar",
           "Date", "DateTime"]
