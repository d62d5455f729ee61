"""
Comparator contract

A comparator is a function of two values returning one of three results:
- -1: a sorts before b
-  0: a and b are equivalent for ordering purposes
-  1: a sorts after b

Any two-argument callable honouring that contract can be used wherever
this package expects a comparator. Comparators built by the package are
wrapped in Comparer, which adds a readable name and the glue needed to
hand them to Python's built-in (stable) sort.
"""

from typing import Any, Callable, Iterable, List, Literal, Optional, TypeVar
from functools import cmp_to_key


T = TypeVar('T')

CompareResult = Literal[-1, 0, 1]
ComparerLike = Callable[[T, T], int]


def sign(value) -> int:
    """
    Collapse an ordered number to -1, 0 or 1

    Works for any value that compares against 0, including arbitrarily
    large integers. NaN collapses to 0.

    Examples
    --------
    >>> sign(-7)
    -1
    >>> sign(0.0)
    0
    >>> sign(10 ** 400)
    1
    """
    return int(value > 0) - int(value < 0)


def describe(function: Callable) -> str:
    """Readable name of a comparator or helper function"""
    name = getattr(function, 'name', None)
    if isinstance(name, str):
        return name
    return getattr(function, '__name__', 'comparer')


def ensure_callable(value: Any, role: str) -> None:
    """Raise TypeError unless value can be called"""
    if not callable(value):
        raise TypeError(f"Expected callable {role}, got {type(value).__name__}")


# ============================================================================
# Comparer wrapper
# ============================================================================

class Comparer:
    """
    Three-way comparator with a readable name

    Comparer is immutable and holds no state besides the wrapped function,
    so instances can be shared freely, stored, and composed into further
    comparators.

    Parameters
    ----------
    compare : Callable[[T, T], int]
        Function returning -1, 0 or 1
    name : str, optional
        Description of the comparator; defaults to the function's name

    Examples
    --------
    >>> by_length = Comparer(lambda a, b: sign(len(a) - len(b)), 'by_length')
    >>> by_length('aa', 'b')
    1
    >>> by_length.sorted(['ccc', 'a', 'bb'])
    ['a', 'bb', 'ccc']
    >>> sorted(['ccc', 'a', 'bb'], key=by_length.key)
    ['a', 'bb', 'ccc']
    """

    __slots__ = ('_compare', '_name')

    def __init__(self, compare: Callable[[Any, Any], int], name: Optional[str] = None):
        ensure_callable(compare, 'comparer')
        object.__setattr__(self, '_compare', compare)
        object.__setattr__(self, '_name', name or describe(compare))

    def __call__(self, a, b) -> int:
        """Compare a with b"""
        return self._compare(a, b)

    def __setattr__(self, name, value):
        """Prevent modification (immutable)"""
        raise AttributeError("Comparer objects are immutable")

    def __delattr__(self, name):
        """Prevent deletion"""
        raise AttributeError("Comparer objects are immutable")

    def __repr__(self) -> str:
        return f"Comparer({self._name})"

    @property
    def name(self) -> str:
        """Description of the composition this comparator was built from"""
        return self._name

    @property
    def key(self):
        """Sort key adapter for sorted(), list.sort(), min() and max()"""
        return cmp_to_key(self._compare)

    def sorted(self, items: Iterable[T], reverse: bool = False) -> List[T]:
        """
        Sort items with the built-in stable sort using this comparator

        Values the comparator considers equal keep their input order.

        Parameters
        ----------
        items : Iterable
            Values to sort
        reverse : bool
            Passed through to sorted()

        Returns
        -------
        result : list
            New sorted list
        """
        return sorted(items, key=self.key, reverse=reverse)

    def invert(self) -> 'Comparer':
        """Comparator ordering in the opposite direction"""
        from ..combinators.structural import invert
        return invert(self)

    def then(self, *others: Callable) -> 'Comparer':
        """Break ties with the given comparators, in order"""
        from ..combinators.structural import chain
        return chain(self, *others)

    def map(self, mapper: Callable) -> 'Comparer':
        """Compare values by mapper(value) instead of by value"""
        from ..combinators.structural import map_by
        return map_by(self, mapper)


def comparer(function: Callable[[Any, Any], int]) -> Comparer:
    """
    Decorator turning a plain comparison function into a Comparer

    Examples
    --------
    >>> @comparer
    ... def compare_length(a, b):
    ...     return sign(len(a) - len(b))
    >>> compare_length
    Comparer(compare_length)
    """
    return Comparer(function)
