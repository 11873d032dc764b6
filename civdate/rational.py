#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Feb  3 19:02:51 2025

@author: Marcel Hesselberth

Exact arithmetic on the numbers accepted by the date constructors.

Everything that enters the date core is converted to int or Fraction
immediately. Floats (including numpy floating scalars, which may be
extended precision) are taken at their exact binary value, so that
2451943.5 stays 2451943.5 and nothing is rounded twice.
"""

import numbers
import numpy as np
from math import isfinite
from decimal import Decimal
from fractions import Fraction
from civdate.errors import InvalidDate


def is_numeric(x):
    """True for real numbers: int, Fraction, float, Decimal, numpy scalars."""
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (numbers.Real, Decimal, np.integer, np.floating))


def is_integral(x):
    """True if x is numeric and has no fractional part."""
    if isinstance(x, (int, np.integer)) and not isinstance(x, bool):
        return True
    if isinstance(x, Fraction):
        return x.denominator == 1
    return is_numeric(x) and _finite(x) and to_fraction(x).denominator == 1


def _finite(x):
    if isinstance(x, Decimal):
        return x.is_finite()
    if isinstance(x, (float, np.floating)):
        return bool(np.isfinite(x))
    return isfinite(x)


def to_fraction(x):
    """
    Convert a number to an exact Fraction.

    Parameters
    ----------
    x : int, Fraction, float, Decimal or numpy scalar

    Raises
    ------
    TypeError
        x is not a real number.
    InvalidDate
        x is infinite or NaN.

    Returns
    -------
    Fraction
    """
    if isinstance(x, Fraction):
        return x
    if not is_numeric(x):
        raise TypeError(f"expected numeric, got {type(x).__name__}")
    if isinstance(x, (int, np.integer)):
        return Fraction(int(x))
    if not _finite(x):
        raise InvalidDate(f"{x} is not a finite number")
    if isinstance(x, np.floating):
        return Fraction(*x.as_integer_ratio())
    if isinstance(x, numbers.Rational):
        return Fraction(x.numerator, x.denominator)
    return Fraction(x)


def to_number(x):
    """Exact value of x as int when integral, Fraction otherwise."""
    f = to_fraction(x)
    if f.denominator == 1:
        return f.numerator
    return f


def split_fraction(x):
    """
    Split x in an integer and a fractional part.

    Returns
    -------
    int, Fraction
        floor(x) and x - floor(x), the latter in [0, 1).
    """
    if isinstance(x, int):
        return x, Fraction(0)
    f = to_fraction(x)
    i = f.numerator // f.denominator
    return i, f - i
