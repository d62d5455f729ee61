"""
Comparers Core Module

The comparator contract and the comparators everything else builds on.

This module provides:
- Comparer: Named, immutable three-way comparator
- sign / comparer: Helpers for writing comparators
- Primitives: equal, finite number, boolean, string, collator
- Values: absent-value sentinel and type tests
"""

from .result import (
    CompareResult,
    ComparerLike,
    Comparer,
    comparer,
    sign,
)

from .values import (
    MISSING,
    is_nullable,
    is_not_nullable,
    is_number,
    is_nan,
    is_finite,
    to_timestamp,
)

from .primitives import (
    compare_equal,
    compare_finite_number,
    compare_boolean,
    compare_string,
    Collator,
    LocaleCollator,
    collator_comparer,
    locale_comparer,
)

__all__ = [
    # Contract
    'CompareResult',
    'ComparerLike',
    'Comparer',
    'comparer',
    'sign',

    # Values
    'MISSING',
    'is_nullable',
    'is_not_nullable',
    'is_number',
    'is_nan',
    'is_finite',
    'to_timestamp',

    # Primitives
    'compare_equal',
    'compare_finite_number',
    'compare_boolean',
    'compare_string',
    'Collator',
    'LocaleCollator',
    'collator_comparer',
    'locale_comparer',
]
