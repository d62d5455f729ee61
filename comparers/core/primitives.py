"""
Primitive comparators

Fixed-behaviour comparators the combinators build on:
- compare_equal: considers everything equal (identity of chaining)
- compare_finite_number: orders finite numbers, ignores NaN and infinities
- compare_boolean: True before False
- compare_string: locale-aware string order (current LC_COLLATE)
- collator_comparer: string order from a collation delegate
- locale_comparer: string order for a named locale (deprecated)
"""

import locale
import warnings
from typing import Protocol, runtime_checkable

from .result import Comparer, comparer, sign
from .values import is_finite


# ============================================================================
# Generic Comparators
# ============================================================================

@comparer
def compare_equal(a, b) -> int:
    """
    Consider all values equal, thus never change the order

    Examples
    --------
    >>> compare_equal.sorted([3, 1, 2])
    [3, 1, 2]
    """
    return 0


@comparer
def compare_finite_number(a, b) -> int:
    """
    Compare finite numbers

    NaN, infinity and negative infinity are equal to everything, leaving
    their placement to whatever comparator is chained before this one.

    Examples
    --------
    >>> compare_finite_number(1, 2)
    -1
    >>> compare_finite_number(float('nan'), 2)
    0
    """
    if is_finite(a) and is_finite(b):
        return int(a > b) - int(a < b)
    return 0


@comparer
def compare_boolean(a: bool, b: bool) -> int:
    """
    Compare booleans, True is ordered before False

    Examples
    --------
    >>> compare_boolean.sorted([False, True, False])
    [True, False, False]
    """
    if a == b:
        return 0
    return -1 if a else 1


# ============================================================================
# String Comparators
# ============================================================================

@comparer
def compare_string(a: str, b: str) -> int:
    """
    Order strings using the collation of the current locale

    Uses locale.strcoll, so the order follows LC_COLLATE of the running
    process. Python starts under the "C" locale, where this is plain code
    point order and 'B' sorts before 'a'. Call
    ``locale.setlocale(locale.LC_COLLATE, '')`` once at startup to use the
    user's locale, or use collator_comparer for an order that does not
    depend on process state.

    Examples
    --------
    >>> compare_string.sorted(['b', 'c', 'a'])
    ['a', 'b', 'c']
    >>> compare_string('B', 'a')  # under the "C" locale
    -1
    """
    return sign(locale.strcoll(a, b))


@runtime_checkable
class Collator(Protocol):
    """Anything that compares two strings, e.g. icu.Collator"""

    def compare(self, a: str, b: str) -> int:
        ...


def collator_comparer(collator: Collator) -> Comparer:
    """
    Order strings using a collator for language-specific rules

    Parameters
    ----------
    collator : Collator
        Object with a compare(a, b) method returning a negative number,
        zero or a positive number, such as PyICU's icu.Collator

    Returns
    -------
    comparer : Comparer
        String comparator delegating to the collator

    Examples
    --------
    >>> import icu  # doctest: +SKIP
    >>> german = icu.Collator.createInstance(icu.Locale('de'))  # doctest: +SKIP
    >>> collator_comparer(german).sorted(['z', 'a', 'ä'])  # doctest: +SKIP
    ['a', 'ä', 'z']
    """
    if not isinstance(collator, Collator):
        raise TypeError(f"Expected object with a compare method, got {type(collator).__name__}")

    def compare_collated(a: str, b: str) -> int:
        return sign(collator.compare(a, b))

    return Comparer(compare_collated, f"collator({type(collator).__name__})")


class LocaleCollator:
    """
    Collator for a named locale, backed by PyICU

    Each instance owns its own ICU collator, so comparisons never touch
    the process-wide LC_COLLATE and may run from several threads.

    Parameters
    ----------
    name : str
        ICU locale identifier, e.g. 'de_DE' or 'sv'. ICU falls back to its
        root collation for identifiers it does not know.

    Raises
    ------
    ImportError
        If PyICU is not installed
    """

    def __init__(self, name: str):
        try:
            import icu
        except ImportError:
            raise ImportError("Requires PyICU for named locale collation")

        self.name = name
        self._collator = icu.Collator.createInstance(icu.Locale(name))

    def compare(self, a: str, b: str) -> int:
        return self._collator.compare(a, b)

    def __repr__(self) -> str:
        return f"LocaleCollator({self.name!r})"


def locale_comparer(name: str) -> Comparer:
    """
    Order strings using a specific locale

    .. deprecated::
        Use collator_comparer with a collator instead.

    Examples
    --------
    >>> locale_comparer('sv').sorted(['ö', 'z', 'a'])  # doctest: +SKIP
    ['a', 'z', 'ö']
    """
    warnings.warn(
        "locale_comparer is deprecated, use collator_comparer instead",
        DeprecationWarning,
        stacklevel=2,
    )
    collated = collator_comparer(LocaleCollator(name))
    return Comparer(collated, f"locale({name})")
