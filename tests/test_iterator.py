"""Tests for level iteration."""

import pytest

from skiplist_collections import (
    LevelIterator,
    SkipList,
    UnsupportedOperationError,
)


class TestLevelIterator:
    """Tests for LevelIterator."""

    def test_level_zero_is_sorted_contents(self):
        """Level 0 yields every element once, ascending."""
        s = SkipList(4, [5, 1, 9, 3], seed=1)
        assert list(s.level_iterator(0)) == [1, 3, 5, 9]

    def test_exhaustion(self):
        """Advancing past the end raises StopIteration, repeatedly."""
        it = SkipList(4, [1]).iterator()
        assert next(it) == 1
        assert not it.has_next()
        with pytest.raises(StopIteration):
            next(it)
        with pytest.raises(StopIteration):
            next(it)

    def test_empty_level(self):
        """An empty level yields nothing."""
        it = SkipList(4).level_iterator(3)
        assert not it.has_next()
        assert list(it) == []

    def test_not_restartable(self):
        """A consumed iterator stays consumed."""
        it = SkipList(4, [1, 2]).iterator()
        assert list(it) == [1, 2]
        assert list(it) == []

    def test_iter_returns_self(self):
        """LevelIterator is its own iterator."""
        it = SkipList(4, [1]).iterator()
        assert iter(it) is it
        assert isinstance(it, LevelIterator)
        assert it.level == 0

    def test_higher_level_is_subsequence(self):
        """Higher levels yield a strict-order subsequence of level 0."""
        s = SkipList(5, range(200), seed=17)
        full = list(s.level_iterator(0))
        for level in range(1, 5):
            part = list(s.level_iterator(level))
            assert part == sorted(part)
            assert set(part) <= set(full)

    def test_remove_rejected(self):
        """remove() raises UnsupportedOperationError, a TypeError."""
        it = SkipList(4, [1]).iterator()
        with pytest.raises(UnsupportedOperationError):
            it.remove()
        with pytest.raises(TypeError):
            it.remove()
        assert next(it) == 1
