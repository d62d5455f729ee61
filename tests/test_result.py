"""Tests for the comparator contract (Comparer, sign, comparer)"""

import math

import numpy as np
import pytest

from comparers import Comparer, comparer, compare_number, sign


@comparer
def compare_length(a, b):
    return sign(len(a) - len(b))


class TestSign:
    """Tests for sign"""

    @pytest.mark.parametrize("value, expected", [
        (-5, -1),
        (-0.5, -1),
        (0, 0),
        (0.0, 0),
        (3, 1),
        (10 ** 400, 1),
        (-(10 ** 400), -1),
        (math.nan, 0),
        (np.float64(-2.0), -1),
        (np.int64(7), 1),
    ])
    def test_sign(self, value, expected):
        result = sign(value)
        assert result == expected
        assert type(result) is int


class TestComparer:
    """Tests for the Comparer wrapper"""

    def test_calls_wrapped_function(self):
        assert compare_length('aa', 'b') == 1
        assert compare_length('a', 'bb') == -1
        assert compare_length('a', 'b') == 0

    def test_decorator_uses_function_name(self):
        assert compare_length.name == 'compare_length'
        assert repr(compare_length) == 'Comparer(compare_length)'

    def test_explicit_name(self):
        by_length = Comparer(lambda a, b: sign(len(a) - len(b)), 'by_length')
        assert by_length.name == 'by_length'

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError, match="Expected callable comparer"):
            Comparer(42)

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            compare_length.foo = 1
        with pytest.raises(AttributeError):
            del compare_length._compare

    def test_key_plugs_into_sorted(self):
        words = ['ccc', 'a', 'bb']
        assert sorted(words, key=compare_length.key) == ['a', 'bb', 'ccc']
        assert max(words, key=compare_length.key) == 'ccc'

    def test_sorted_is_stable(self):
        words = ['bb', 'a', 'aa', 'b']
        assert compare_length.sorted(words) == ['a', 'b', 'bb', 'aa']

    def test_sorted_reverse(self):
        assert compare_length.sorted(['a', 'ccc', 'bb'], reverse=True) == ['ccc', 'bb', 'a']

    def test_sorted_accepts_iterables(self):
        assert compare_number.sorted(iter([3, 1, 2])) == [1, 2, 3]
        assert compare_number.sorted([]) == []


class TestFluentComposition:
    """Tests for Comparer.invert, Comparer.then and Comparer.map"""

    def test_invert(self):
        assert compare_number.invert().sorted([1, 3, 2]) == [3, 2, 1]

    def test_then_breaks_ties(self):
        by_length_then_text = compare_length.then(lambda a, b: (a > b) - (a < b))
        assert by_length_then_text.sorted(['bb', 'b', 'ab', 'a']) == ['a', 'b', 'ab', 'bb']

    def test_map(self):
        by_age = compare_number.map(lambda person: person['age'])
        people = [{'age': 30}, {'age': 10}, {'age': 20}]
        assert by_age.sorted(people) == [{'age': 10}, {'age': 20}, {'age': 30}]

    def test_names_describe_composition(self):
        assert compare_length.invert().name == 'invert(compare_length)'
        assert compare_length.then(compare_length).name == 'chain(compare_length, compare_length)'
