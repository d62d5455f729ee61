"""
Comparers

Composable three-way comparison functions for stable sorting.

A comparator takes two values and returns -1, 0 or 1. Combinators take
comparators (and sometimes mapping or classification functions) and
return new comparators, so complex orderings are built from small rules:

>>> from comparers import chain, map_by, compare_string, compare_number
>>> rows = [('b', 2), ('a', 3), ('b', 1)]
>>> by_letter_then_number = chain(
...     map_by(compare_string, lambda row: row[0]),
...     map_by(compare_number, lambda row: row[1]),
... )
>>> sorted(rows, key=by_letter_then_number.key)
[('a', 3), ('b', 1), ('b', 2)]

The package never sorts by itself; comparators are handed to Python's
built-in stable sort through Comparer.key or Comparer.sorted.
"""

from .core import (
    CompareResult,
    ComparerLike,
    Comparer,
    comparer,
    sign,
    MISSING,
    is_nullable,
    is_not_nullable,
    is_number,
    is_nan,
    is_finite,
    to_timestamp,
    compare_equal,
    compare_finite_number,
    compare_boolean,
    compare_string,
    Collator,
    LocaleCollator,
    collator_comparer,
    locale_comparer,
)

from .combinators import (
    condition_first,
    condition_type_first,
    const_first,
    nullable_first,
    nullable_last,
    invert,
    chain,
    by_ordering,
    map_by,
    by_group,
    by_sequence,
    NATURAL_TOKEN_RE,
    compare_nullable_first,
    compare_nan_first,
    compare_positive_infinity_first,
    compare_negative_infinity_first,
    compare_number,
    compare_date,
    compare_number_or_string,
    compare_string_natural,
    natural_tokens,
)


__version__ = '0.1.0'


# Long-form names, matching the "<what>_comparer" naming of other
# comparator libraries
condition_first_comparer = condition_first
condition_type_first_comparer = condition_type_first
const_first_comparer = const_first
nullable_first_comparer = nullable_first
nullable_last_comparer = nullable_last
invert_comparer = invert
chain_comparers = chain
order_comparer = by_ordering
map_comparer = map_by
group_comparer = by_group
array_comparer = by_sequence


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

    # Primitive comparators
    'compare_equal',
    'compare_finite_number',
    'compare_boolean',
    'compare_string',
    'Collator',
    'LocaleCollator',
    'collator_comparer',
    'locale_comparer',

    # Partitioning combinators
    'condition_first',
    'condition_type_first',
    'const_first',
    'nullable_first',
    'nullable_last',

    # Structural combinators
    'invert',
    'chain',
    'by_ordering',
    'map_by',
    'by_group',
    'by_sequence',

    # Pre-built comparators
    'NATURAL_TOKEN_RE',
    'compare_nullable_first',
    'compare_nan_first',
    'compare_positive_infinity_first',
    'compare_negative_infinity_first',
    'compare_number',
    'compare_date',
    'compare_number_or_string',
    'compare_string_natural',
    'natural_tokens',

    # Long-form aliases
    'condition_first_comparer',
    'condition_type_first_comparer',
    'const_first_comparer',
    'nullable_first_comparer',
    'nullable_last_comparer',
    'invert_comparer',
    'chain_comparers',
    'order_comparer',
    'map_comparer',
    'group_comparer',
    'array_comparer',
]
