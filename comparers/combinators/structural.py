"""
Structural combinators

Build new comparators out of existing ones:
- invert: reverse the direction of a comparator
- chain: lexicographic precedence over several comparators
- by_ordering: order by position in an explicit sequence
- map_by: compare derived keys instead of the values themselves
- by_group: order groups, then order within each group
- by_sequence: element-wise comparison of sequences
"""

from typing import Any, Callable, Dict, Hashable, Iterable, Mapping, Optional, Sequence, TypeVar

from ..core.result import Comparer, describe, ensure_callable, sign
from ..core.primitives import compare_finite_number
from ..core.values import is_nan, is_number


T = TypeVar('T')
K = TypeVar('K', bound=Hashable)

# Shared lookup slot for every NaN, which never equals itself
_NAN_KEY = object()


def _lookup_key(item):
    if is_number(item) and is_nan(item):
        return _NAN_KEY
    return item


def invert(comparer: Callable[[T, T], int]) -> Comparer:
    """
    Invert the order of a comparator

    invert(c)(a, b) = c(b, a)

    Examples
    --------
    >>> from comparers import compare_number
    >>> invert(compare_number).sorted([1, 2, 3])
    [3, 2, 1]
    """
    ensure_callable(comparer, 'comparer')

    def inverted(a, b) -> int:
        return comparer(b, a)

    return Comparer(inverted, f"invert({describe(comparer)})")


def chain(*comparers: Callable[[T, T], int]) -> Comparer:
    """
    Combine multiple comparators into one

    Comparators are tried left to right; the first non-zero result wins.
    Values every comparator considers equal are equal. With no
    comparators at all, everything is equal.

    Parameters
    ----------
    *comparers : Callable[[T, T], int]
        Comparators in order of precedence

    Examples
    --------
    >>> from comparers import compare_string
    >>> people = [
    ...     {'name': 'a', 'country': 'US'},
    ...     {'name': 'c', 'country': 'DE'},
    ...     {'name': 'b', 'country': 'DE'},
    ... ]
    >>> by_country_then_name = chain(
    ...     map_by(compare_string, lambda person: person['country']),
    ...     map_by(compare_string, lambda person: person['name']),
    ... )
    >>> [person['name'] for person in by_country_then_name.sorted(people)]
    ['b', 'c', 'a']
    """
    for comparer in comparers:
        ensure_callable(comparer, 'comparer')

    def chained(a, b) -> int:
        for comparer in comparers:
            result = comparer(a, b)
            if result != 0:
                return result
        return 0

    names = ', '.join(describe(comparer) for comparer in comparers)
    return Comparer(chained, f"chain({names})")


def by_ordering(ordering: Iterable[T]) -> Comparer:
    """
    Compare values by their position in a predefined order

    Values missing from the ordering are placed after all listed values
    and are equal to each other. For duplicate entries the first position
    counts. All NaN values share one position. The lookup table is built
    once; hashable values cost a dictionary lookup, unhashable ones (lists,
    dicts) a linear scan of the ordering.

    Parameters
    ----------
    ordering : Iterable
        Values in the desired order

    Examples
    --------
    >>> by_ordering(['high', 'medium', 'low']).sorted(['low', 'high', 'unknown', 'medium', 'high'])
    ['high', 'high', 'medium', 'low', 'unknown']
    """
    ordering = list(ordering)
    lookup: Dict[Any, int] = {}
    for index, item in enumerate(ordering):
        try:
            lookup.setdefault(_lookup_key(item), index)
        except TypeError:
            # Unhashable, found by position() scanning the ordering
            continue
    unlisted = len(ordering)

    def position(item) -> int:
        try:
            return lookup.get(_lookup_key(item), unlisted)
        except TypeError:
            return next((index for index, listed in enumerate(ordering) if listed == item), unlisted)

    def ordered(a, b) -> int:
        return sign(position(a) - position(b))

    return Comparer(ordered, f"by_ordering({ordering!r})")


def map_by(comparer: Callable[[Any, Any], int], mapper: Callable[[T], Any]) -> Comparer:
    """
    Compare mapper(a) with mapper(b) using comparer

    Exceptions raised by mapper propagate to the caller.

    Examples
    --------
    >>> from comparers import compare_string
    >>> people = [{'name': 'Bob'}, {'name': 'Charlie'}, {'name': 'Alice'}]
    >>> map_by(compare_string, lambda person: person['name']).sorted(people)
    [{'name': 'Alice'}, {'name': 'Bob'}, {'name': 'Charlie'}]
    """
    ensure_callable(comparer, 'comparer')
    ensure_callable(mapper, 'mapper')

    def mapped(a, b) -> int:
        return comparer(mapper(a), mapper(b))

    return Comparer(mapped, f"map_by({describe(comparer)}, {describe(mapper)})")


def by_group(
    comparers_by_key: Mapping[K, Callable[[T, T], int]],
    key_fn: Callable[[T], K],
    key_comparer: Optional[Callable[[K, K], int]] = None,
) -> Comparer:
    """
    Compare values group by group

    Values are classified with key_fn. Values from different groups are
    ordered by key_comparer applied to their keys; values within one
    group are ordered by that group's comparator.

    Parameters
    ----------
    comparers_by_key : Mapping
        Comparator for every key key_fn can produce
    key_fn : Callable[[T], K]
        Classifier returning the group key of a value
    key_comparer : Callable[[K, K], int], optional
        Orders the groups. Defaults to the order in which the keys appear
        in comparers_by_key.

    Raises
    ------
    KeyError
        At comparison time, if key_fn produced a key with no comparator

    Examples
    --------
    >>> from comparers import compare_number
    >>> parity = lambda value: 'odd' if value % 2 else 'even'
    >>> by_group(
    ...     {'even': compare_number, 'odd': invert(compare_number)},
    ...     parity,
    ... ).sorted([1, 2, 3, 4, 5, 6])
    [2, 4, 6, 5, 3, 1]
    """
    if not isinstance(comparers_by_key, Mapping):
        raise TypeError(f"Expected mapping of comparers, got {type(comparers_by_key).__name__}")
    ensure_callable(key_fn, 'key_fn')
    for comparer in comparers_by_key.values():
        ensure_callable(comparer, 'group comparer')
    if key_comparer is None:
        key_comparer = by_ordering(comparers_by_key)
    ensure_callable(key_comparer, 'key_comparer')

    def grouped(a, b) -> int:
        key_a = key_fn(a)
        key_b = key_fn(b)
        result = key_comparer(key_a, key_b)
        if result != 0:
            return result
        try:
            within = comparers_by_key[key_a]
        except KeyError:
            raise KeyError(f"No comparer registered for group {key_a!r}") from None
        return within(a, b)

    return Comparer(grouped, f"by_group({describe(key_fn)})")


def by_sequence(item_comparer: Callable[[T, T], int]) -> Comparer:
    """
    Compare sequences item by item

    The first differing pair of items decides. When the overlapping part
    is equal, the shorter sequence is ordered first.

    Parameters
    ----------
    item_comparer : Callable[[T, T], int]
        Comparator for individual items

    Examples
    --------
    Versions can be sorted as sequences of numbers:

    >>> from comparers import compare_number
    >>> versions = ['1.2.3', '1.2', '1.2.1', '1']
    >>> by_version = map_by(by_sequence(compare_number), lambda v: [int(p) for p in v.split('.')])
    >>> by_version.sorted(versions)
    ['1', '1.2', '1.2.1', '1.2.3']
    """
    ensure_callable(item_comparer, 'item_comparer')

    def sequenced(a: Sequence[T], b: Sequence[T]) -> int:
        for index in range(min(len(a), len(b))):
            result = item_comparer(a[index], b[index])
            if result != 0:
                return result
        return compare_finite_number(len(a), len(b))

    return Comparer(sequenced, f"by_sequence({describe(item_comparer)})")
