"""
Value classification used by the comparators

Type tests:
- is_nullable / is_not_nullable: None and the MISSING sentinel
- is_number: real numbers, excluding booleans
- is_nan / is_finite: special floating point values

Conversion:
- to_timestamp: dates, datetimes and numpy datetime64 to epoch seconds
"""

import math
import numbers
from datetime import date, datetime, time
from typing import Any

import numpy as np


class _Missing:
    """
    Marker for a value that was never provided

    Plays the role of an "undefined" value next to None. There is exactly
    one instance, MISSING.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()

_EPOCH = np.datetime64(0, 's')
_ONE_SECOND = np.timedelta64(1, 's')


# ============================================================================
# Type Tests
# ============================================================================

def is_nullable(value: Any) -> bool:
    """
    Check if value is absent (None or MISSING)

    Examples
    --------
    >>> is_nullable(None), is_nullable(MISSING), is_nullable(0)
    (True, True, False)
    """
    return value is None or value is MISSING


def is_not_nullable(value: Any) -> bool:
    """Check if value is present (neither None nor MISSING)"""
    return value is not None and value is not MISSING


def is_number(value: Any) -> bool:
    """
    Check if value is a real number

    Booleans are not numbers here, even though bool subclasses int.
    numpy integer and floating scalars are numbers.

    Examples
    --------
    >>> is_number(3), is_number(2.5), is_number(np.int64(1))
    (True, True, True)
    >>> is_number(True), is_number('3')
    (False, False)
    """
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def is_nan(value) -> bool:
    """Check if a number is NaN (integers never are)"""
    if isinstance(value, numbers.Integral):
        return False
    return math.isnan(value)


def is_finite(value) -> bool:
    """Check if a number is neither NaN nor infinite (integers always are)"""
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value)


# ============================================================================
# Conversion
# ============================================================================

def to_timestamp(value) -> float:
    """
    Convert a point in time to seconds since the Unix epoch

    Parameters
    ----------
    value : datetime, date or numpy.datetime64
        Point in time. Naive datetimes and plain dates are interpreted
        in local time.

    Returns
    -------
    seconds : float
        Seconds since 1970-01-01T00:00:00Z; NaN for numpy NaT

    Raises
    ------
    TypeError
        If value is not a supported date type

    Examples
    --------
    >>> to_timestamp(np.datetime64('1970-01-01T00:01:00'))
    60.0
    >>> to_timestamp(np.datetime64('NaT'))
    nan
    """
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            return math.nan
        return float((value - _EPOCH) / _ONE_SECOND)
    if isinstance(value, datetime):
        return value.timestamp()
    if isinstance(value, date):
        return datetime.combine(value, time.min).timestamp()
    raise TypeError(f"Expected date, datetime or numpy.datetime64, got {type(value).__name__}")
