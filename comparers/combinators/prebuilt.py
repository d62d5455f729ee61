"""
Pre-built comparators

Comparators assembled from the primitives and combinators:
- special number placement (NaN, infinities, absent values)
- compare_number: total order over all floats and integers
- compare_date: order by timestamp
- compare_number_or_string: numbers before strings
- compare_string_natural: "a2" before "a10"
"""

import math
import re
from typing import List, Union

from ..core.primitives import compare_equal, compare_finite_number, compare_string
from ..core.values import is_nan, is_number, to_timestamp
from .conditional import condition_first, condition_type_first, const_first, nullable_first
from .structural import by_sequence, chain, invert, map_by


NATURAL_TOKEN_RE = re.compile(r'([0-9]+)|([^0-9]+)')


# ============================================================================
# Special Values
# ============================================================================

# Absent values (None, MISSING) first, other values keep their order
compare_nullable_first = nullable_first(compare_equal)

# NaN first, other values keep their order
compare_nan_first = condition_first(is_nan)

# Infinity first, other values keep their order
compare_positive_infinity_first = const_first(math.inf)

# Negative infinity first, other values keep their order
compare_negative_infinity_first = const_first(-math.inf)


# ============================================================================
# Numbers and Dates
# ============================================================================

# NaN, then negative infinity, then finite numbers, then infinity
compare_number = chain(
    compare_nan_first,
    compare_negative_infinity_first,
    invert(compare_positive_infinity_first),
    compare_finite_number,
)

# Older before newer; NaT and other non-finite timestamps are equal to everything
compare_date = map_by(compare_finite_number, to_timestamp)


# ============================================================================
# Mixed and Natural Order
# ============================================================================

# Numbers (by compare_number) before strings (by compare_string)
compare_number_or_string = condition_type_first(is_number, compare_number, compare_string)


def natural_tokens(text: str) -> List[Union[int, str]]:
    """
    Split text into digit runs (as int) and non-digit runs (as str)

    Examples
    --------
    >>> natural_tokens('a10b2')
    ['a', 10, 'b', 2]
    >>> natural_tokens('')
    []
    """
    return [
        int(digits) if digits else other
        for digits, other in NATURAL_TOKEN_RE.findall(text)
    ]


# Numeric parts compared as numbers, other parts as strings
compare_string_natural = map_by(by_sequence(compare_number_or_string), natural_tokens)
