"""Tests for the primitive comparators"""

import locale
import math
import sys
import threading
import types

import numpy as np
import pytest

from comparers import (
    Collator,
    LocaleCollator,
    collator_comparer,
    compare_boolean,
    compare_equal,
    compare_finite_number,
    compare_string,
    locale_comparer,
)
from tests.helpers import rotations


class ReverseCollator:
    """Collator ordering strings backwards, returning unnormalized results"""

    def compare(self, a, b):
        return (b > a) * 10 - (a > b) * 10


class TestCompareEqual:
    """Tests for compare_equal"""

    @pytest.mark.parametrize("a, b", [(1, 2), ('b', 'a'), (None, 0), (math.nan, math.nan)])
    def test_always_zero(self, a, b):
        assert compare_equal(a, b) == 0

    def test_keeps_order(self):
        assert compare_equal.sorted([3, 1, 2]) == [3, 1, 2]


class TestCompareFiniteNumber:
    """Tests for compare_finite_number"""

    @pytest.mark.parametrize("a, b, expected", [
        (1, 2, -1),
        (2, 1, 1),
        (2, 2, 0),
        (1, 1.5, -1),
        (-0.0, 0.0, 0),
        (10 ** 400, 10 ** 400 + 1, -1),
        (10 ** 400, 1.0, 1),
        (np.float64(2.5), np.int64(2), 1),
        (math.nan, 1, 0),
        (1, math.inf, 0),
        (-math.inf, 1, 0),
        (math.inf, -math.inf, 0),
    ])
    def test_compare(self, a, b, expected):
        assert compare_finite_number(a, b) == expected


class TestCompareBoolean:
    """Tests for compare_boolean"""

    @pytest.mark.parametrize("a, b, expected", [
        (True, True, 0),
        (False, True, 1),
        (True, False, -1),
        (False, False, 0),
    ])
    def test_compare(self, a, b, expected):
        assert compare_boolean(a, b) == expected

    def test_true_first(self):
        assert compare_boolean.sorted([False, True, False, True]) == [True, True, False, False]


class TestCompareString:
    """Tests for compare_string under the default collation"""

    ORDERED = ['-1', '1', 'a', 'b', 'c', 'd']

    @pytest.mark.parametrize("strings", rotations(ORDERED))
    def test_sorts_correctly(self, strings):
        assert compare_string.sorted(strings) == self.ORDERED

    def test_normalizes_result(self):
        assert compare_string('a', 'zzz') == -1
        assert compare_string('zzz', 'a') == 1
        assert compare_string('same', 'same') == 0

    def test_code_point_order_under_c_locale(self):
        assert locale.setlocale(locale.LC_COLLATE) == 'C'
        assert compare_string('B', 'a') == -1
        assert compare_string.sorted(['b', 'a', 'B']) == ['B', 'a', 'b']


class TestCollatorComparer:
    """Tests for collator_comparer"""

    def test_delegates_and_normalizes(self):
        compare = collator_comparer(ReverseCollator())
        assert compare('a', 'b') == 1
        assert compare('b', 'a') == -1
        assert compare('a', 'a') == 0
        assert compare.sorted(['a', 'c', 'b']) == ['c', 'b', 'a']

    def test_collator_protocol(self):
        assert isinstance(ReverseCollator(), Collator)
        assert not isinstance('not a collator', Collator)

    def test_rejects_objects_without_compare(self):
        with pytest.raises(TypeError, match="compare method"):
            collator_comparer(object())


@pytest.fixture
def fake_icu(monkeypatch):
    """Stand-in icu module whose collators order strings backwards"""
    created = []

    def create_instance(name):
        created.append(name)
        return ReverseCollator()

    module = types.ModuleType('icu')
    module.Locale = lambda name: name
    module.Collator = types.SimpleNamespace(createInstance=create_instance)
    monkeypatch.setitem(sys.modules, 'icu', module)
    return created


class TestLocaleComparer:
    """Tests for the deprecated locale_comparer and LocaleCollator"""

    def test_is_deprecated(self, fake_icu):
        with pytest.warns(DeprecationWarning, match="collator_comparer"):
            locale_comparer('sv')

    def test_delegates_to_icu_collator(self, fake_icu):
        with pytest.warns(DeprecationWarning):
            compare = locale_comparer('sv')
        assert fake_icu == ['sv']
        assert compare.sorted(['a', 'c', 'b']) == ['c', 'b', 'a']
        assert compare.name == 'locale(sv)'
        assert repr(LocaleCollator('de_DE')) == "LocaleCollator('de_DE')"

    def test_never_switches_process_locale(self, fake_icu, monkeypatch):
        def refuse(*args):
            raise AssertionError("process locale touched")

        collator = LocaleCollator('sv')
        monkeypatch.setattr(locale, 'setlocale', refuse)
        assert collator.compare('a', 'b') > 0

    def test_other_threads_keep_their_locale(self, fake_icu):
        before = locale.setlocale(locale.LC_COLLATE)
        compare = collator_comparer(LocaleCollator('sv'))
        done = threading.Event()

        def compare_repeatedly():
            while not done.is_set():
                compare('a', 'b')

        worker = threading.Thread(target=compare_repeatedly)
        worker.start()
        try:
            seen = {locale.setlocale(locale.LC_COLLATE) for _ in range(20000)}
        finally:
            done.set()
            worker.join()
        assert seen == {before}

    def test_missing_icu_is_reported(self, monkeypatch):
        monkeypatch.setitem(sys.modules, 'icu', None)
        with pytest.raises(ImportError, match="PyICU"):
            LocaleCollator('sv')

    def test_real_icu_collation(self):
        pytest.importorskip('icu')
        compare = collator_comparer(LocaleCollator('sv'))
        assert compare.sorted(['ö', 'z', 'a']) == ['a', 'z', 'ö']
