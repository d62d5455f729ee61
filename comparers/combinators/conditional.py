"""
Partitioning combinators

Route a comparison by which side of a test each operand falls on.
Values passing the test are ordered before the rest; each side can be
ordered internally by its own comparator.

- condition_first: partition by a boolean predicate
- condition_type_first: partition by a type test
- const_first: a single constant before everything else
- nullable_first / nullable_last: None and MISSING first or last
"""

from typing import Any, Callable, Optional, TypeVar

from ..core.result import Comparer, describe, ensure_callable
from ..core.primitives import compare_equal
from ..core.values import is_nullable, is_not_nullable


T = TypeVar('T')


def condition_first(
    condition: Callable[[T], bool],
    true_comparer: Optional[Callable[[T, T], int]] = None,
    false_comparer: Optional[Callable[[T, T], int]] = None,
) -> Comparer:
    """
    Order values that pass a condition before anything else

    Parameters
    ----------
    condition : Callable[[T], bool]
        Predicate evaluated once per operand
    true_comparer : Callable, optional
        Orders two values that both pass (default: compare_equal)
    false_comparer : Callable, optional
        Orders two values that both fail (default: compare_equal)

    Returns
    -------
    comparer : Comparer
        -1 when only a passes, 1 when only b passes, otherwise the
        result of the matching sub-comparator

    Examples
    --------
    >>> is_even = lambda value: value % 2 == 0
    >>> condition_first(is_even).sorted([1, 2, 3, 4])
    [2, 4, 1, 3]
    >>> condition_first(is_even, false_comparer=lambda a, b: (a < b) - (a > b)).sorted([1, 2, 3, 4])
    [2, 4, 3, 1]
    """
    ensure_callable(condition, 'condition')
    true_comparer = compare_equal if true_comparer is None else true_comparer
    false_comparer = compare_equal if false_comparer is None else false_comparer
    ensure_callable(true_comparer, 'true_comparer')
    ensure_callable(false_comparer, 'false_comparer')

    def compare_condition_first(a, b) -> int:
        a_passes = condition(a)
        b_passes = condition(b)
        if a_passes and b_passes:
            return true_comparer(a, b)
        if a_passes:
            return -1
        if b_passes:
            return 1
        return false_comparer(a, b)

    name = f"{describe(condition)}_first({describe(true_comparer)}, {describe(false_comparer)})"
    return Comparer(compare_condition_first, name)


def condition_type_first(
    type_test: Callable[[Any], bool],
    true_comparer: Optional[Callable[[Any, Any], int]] = None,
    false_comparer: Optional[Callable[[Any, Any], int]] = None,
) -> Comparer:
    """
    Order values that pass a type test before anything else

    Same partitioning as condition_first. The test usually separates the
    members of a union type, so true_comparer only ever receives values
    of the narrowed type and false_comparer only values of the rest.

    Parameters
    ----------
    type_test : Callable[[Any], bool]
        Type test, e.g. lambda value: isinstance(value, str)
    true_comparer : Callable, optional
        Orders two values of the narrowed type (default: compare_equal)
    false_comparer : Callable, optional
        Orders two values of the remaining types (default: compare_equal)

    Examples
    --------
    >>> from comparers import compare_number, compare_string, is_number
    >>> numbers_first = condition_type_first(is_number, compare_number, compare_string)
    >>> numbers_first.sorted(['b', 2, 'a', 1])
    [1, 2, 'a', 'b']
    """
    return condition_first(type_test, true_comparer, false_comparer)


def const_first(value: Any) -> Comparer:
    """
    Order a specific constant value before anything else

    Matching values (by ==) are equal to each other; everything else
    keeps its original order.

    Examples
    --------
    >>> const_first(3).sorted([3, 5, 2, 1, 3, 4])
    [3, 3, 5, 2, 1, 4]
    """
    def is_constant(item) -> bool:
        return item == value

    is_constant.__name__ = repr(value)
    return condition_first(is_constant)


def nullable_first(comparer: Callable[[T, T], int]) -> Comparer:
    """
    Order None and MISSING first and use comparer for other values

    None and MISSING are equal to each other, so absent values keep their
    original order.

    Examples
    --------
    >>> from comparers import MISSING, compare_number
    >>> nullable_first(compare_number).sorted([3, MISSING, None, 2, MISSING, 1])
    [MISSING, None, MISSING, 1, 2, 3]
    """
    return condition_type_first(is_nullable, compare_equal, comparer)


def nullable_last(comparer: Callable[[T, T], int]) -> Comparer:
    """
    Order None and MISSING last and use comparer for other values

    Examples
    --------
    >>> from comparers import MISSING, compare_number
    >>> nullable_last(compare_number).sorted([3, MISSING, None, 2, MISSING, 1])
    [1, 2, 3, MISSING, None, MISSING]
    """
    return condition_type_first(is_not_nullable, comparer, compare_equal)
