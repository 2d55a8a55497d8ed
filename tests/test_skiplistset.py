"""Tests for the SkipListSet implementation."""

import pytest

from skiplist_collections import Comparator, SkipListSet


class TestSkipListSetBasic:
    """Basic functionality tests."""

    def test_create_empty_set(self):
        """Test creating an empty set."""
        s = SkipListSet()
        assert len(s) == 0
        assert list(s) == []

    def test_add_single(self):
        """Test adding a single item."""
        s = SkipListSet()
        s.add('item')
        assert 'item' in s
        assert len(s) == 1

    def test_add_duplicate(self):
        """Test adding duplicate has no effect."""
        s = SkipListSet()
        s.add('item')
        s.add('item')
        assert len(s) == 1

    def test_add_none_raises(self):
        """None cannot be stored."""
        with pytest.raises(TypeError):
            SkipListSet().add(None)

    def test_discard(self):
        """Test discard."""
        s = SkipListSet(['item'])
        s.discard('item')
        assert 'item' not in s

    def test_discard_missing(self):
        """Test discard on missing item (no exception)."""
        SkipListSet().discard('missing')

    def test_remove_missing_raises(self):
        """Test remove on missing raises KeyError."""
        with pytest.raises(KeyError):
            SkipListSet().remove('missing')

    def test_pop_smallest(self):
        """pop() removes the smallest item."""
        s = SkipListSet([3, 1, 2])
        assert s.pop() == 1
        assert list(s) == [2, 3]

    def test_pop_empty_raises(self):
        """Test pop on empty raises KeyError."""
        with pytest.raises(KeyError):
            SkipListSet().pop()

    def test_clear(self):
        """Test clear."""
        s = SkipListSet(['a', 'b'])
        s.clear()
        assert len(s) == 0

    def test_iteration_order(self):
        """Test items are iterated in sorted order."""
        s = SkipListSet(['charlie', 'alice', 'bob'])
        assert list(s) == ['alice', 'bob', 'charlie']


class TestSkipListSetOperations:
    """Tests for set operations provided by MutableSet."""

    def test_union_operator(self):
        """Test | operator."""
        result = SkipListSet([1, 2]) | {2, 3}
        assert isinstance(result, SkipListSet)
        assert list(result) == [1, 2, 3]

    def test_intersection_operator(self):
        """Test & operator."""
        assert list(SkipListSet([1, 2, 3]) & {2, 3, 4}) == [2, 3]

    def test_difference_operator(self):
        """Test - operator."""
        assert list(SkipListSet([1, 2, 3]) - {2, 3}) == [1]

    def test_symmetric_difference_operator(self):
        """Test ^ operator."""
        assert list(SkipListSet([1, 2, 3]) ^ {3, 4}) == [1, 2, 4]

    def test_in_place_update(self):
        """|= adds items in place."""
        s = SkipListSet([1])
        s |= {5, 3}
        assert list(s) == [1, 3, 5]

    def test_equality_with_set(self):
        """Equality compares contents."""
        assert SkipListSet([1, 2]) == {1, 2}
        assert SkipListSet([1, 2]) != {1}

    def test_subset(self):
        """<= checks subset."""
        assert SkipListSet([1, 2]) <= {1, 2, 3}
        assert not SkipListSet([1, 4]) <= {1, 2, 3}


class TestSkipListSetOrdered:
    """Tests for ordered operations."""

    def test_first_last(self):
        """first() and last() return extremes."""
        s = SkipListSet([5, 1, 9])
        assert s.first() == 1
        assert s.last() == 9

    def test_first_last_empty_raise(self):
        """first() and last() raise KeyError when empty."""
        s = SkipListSet()
        with pytest.raises(KeyError):
            s.first()
        with pytest.raises(KeyError):
            s.last()

    def test_custom_ordering(self):
        """cmp orders the set."""
        s = SkipListSet([1, 3, 2], cmp=Comparator.reverse())
        assert list(s) == [3, 2, 1]
        assert s.comparator_type == 'reverse'

    def test_key_ordering_dedupes_by_key(self):
        """Items with equal keys count as the same item."""
        s = SkipListSet(['a', 'A', 'b'], key=str.lower)
        assert len(s) == 2

    def test_copy(self):
        """copy() is independent and keeps the ordering."""
        s = SkipListSet([1, 2], cmp=Comparator.reverse())
        c = s.copy()
        c.add(3)
        assert list(c) == [3, 2, 1]
        assert list(s) == [2, 1]

    def test_underlying_skiplist(self):
        """The wrapped skip list rejects duplicates."""
        s = SkipListSet([1, 2], max_levels=6, seed=1)
        assert s.skiplist.duplicates == 'reject'
        assert s.skiplist.max_levels == 6

    def test_repr(self):
        """repr truncates after five items."""
        assert repr(SkipListSet([2, 1])) == "SkipListSet({1, 2})"
        assert repr(SkipListSet(range(8))) == "SkipListSet({0, 1, 2, 3, 4, ...})"
