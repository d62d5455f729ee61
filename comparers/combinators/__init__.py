"""
Comparator combinators

This module provides a compositional algebra for three-way comparators,
so multi-criteria orderings are assembled from small independent rules
instead of written as one bespoke comparison routine.

Key Components
--------------
Partitioning Combinators : Order values passing a test first
Structural Combinators : Invert, chain, map, group, sequence
Pre-built Comparators : Numbers, dates, natural strings

Examples
--------
>>> from comparers.combinators import chain, map_by, by_ordering, compare_number
>>> tasks = [('low', 2), ('high', 5), ('high', 1)]
>>> by_priority_then_size = chain(
...     map_by(by_ordering(['high', 'medium', 'low']), lambda task: task[0]),
...     map_by(compare_number, lambda task: task[1]),
... )
>>> by_priority_then_size.sorted(tasks)
[('high', 1), ('high', 5), ('low', 2)]
"""

from .conditional import (
    condition_first,
    condition_type_first,
    const_first,
    nullable_first,
    nullable_last,
)

from .structural import (
    invert,
    chain,
    by_ordering,
    map_by,
    by_group,
    by_sequence,
)

from .prebuilt import (
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

__all__ = [
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
]
