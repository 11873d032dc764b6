#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Feb  2 11:40:12 2025

@author: Marcel Hesselberth
"""


class DateError(ValueError):
    """Base class of all date errors."""


class InvalidDate(DateError):
    """A date, time or offset that does not exist."""


class ParseLimitError(DateError):
    """Input string longer than the parser limit."""

    def __init__(self, length, limit):
        self.length = length
        self.limit = limit
        super().__init__(f"string length ({length}) exceeds the limit {limit}")


class ResultTooLarge(DateError, OverflowError):
    """Formatted result exceeds the strftime buffer."""
