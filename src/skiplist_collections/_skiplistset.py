"""
SkipListSet - Ordered set implementation

This module provides SkipListSet, an ordered set with the
collections.abc.MutableSet API. It wraps a SkipList built with the
'reject' duplicate policy, so every element is stored at most once.
"""

from collections.abc import MutableSet
from typing import (
    Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar, Union
)

from skiplist_collections._comparator import Comparator, resolve_comparator
from skiplist_collections._config import DuplicatePolicy
from skiplist_collections._skiplist import SkipList


T = TypeVar('T')


class SkipListSet(MutableSet, Generic[T]):
    """Ordered set based on skip list.

    Supports custom ordering via comparator or key functions. Set algebra
    (|, &, -, ^) and comparisons come from the MutableSet mixins.

    Example:
        >>> s = SkipListSet()
        >>> s.add('alice')
        >>> s.add('bob')
        >>> s.add('alice')  # No effect, already exists
        >>> list(s)
        ['alice', 'bob']
        >>> 'alice' in s
        True
    """

    __slots__ = ('_skiplist', '_comparator', '_max_levels', '_seed')

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        *,
        max_levels: Optional[int] = None,
        cmp: Optional[Union[Comparator, Callable[[Any, Any], int]]] = None,
        key: Optional[Callable[[Any], Any]] = None,
        seed: Optional[int] = None,
    ):
        """Initialize SkipListSet.

        Args:
            items: Initial items
            max_levels: Level ceiling of the underlying list
            cmp: Comparator or comparison function
            key: Key extraction function
            seed: Seed for the underlying list's level generator
        """
        self._comparator = resolve_comparator(cmp, key)
        self._max_levels = max_levels
        self._seed = seed
        self._skiplist: SkipList[T] = self._new_skiplist(items)

    def _new_skiplist(self, items: Optional[Iterable[T]] = None) -> SkipList[T]:
        return SkipList(
            self._max_levels,
            items,
            cmp=self._comparator,
            seed=self._seed,
            duplicates=DuplicatePolicy.REJECT,
        )

    # ==========================================================================
    # MutableSet interface
    # ==========================================================================

    def add(self, item: T) -> None:
        """Add an item to the set.

        If the item already exists, this has no effect.

        Raises:
            TypeError: If item is None
        """
        if item is None:
            raise TypeError("SkipListSet does not store None")
        self._skiplist.add(item)

    def discard(self, item: T) -> None:
        """Remove an item if present, without raising."""
        self._skiplist.remove(item)

    def remove(self, item: T) -> None:
        """Remove an item.

        Raises:
            KeyError: If item not found
        """
        if not self._skiplist.remove(item):
            raise KeyError(item)

    def pop(self) -> T:
        """Remove and return the smallest item.

        Raises:
            KeyError: If set is empty
        """
        if not self._skiplist:
            raise KeyError("Set is empty")
        item = self._skiplist.first()
        self._skiplist.remove(item)
        return item

    def clear(self) -> None:
        """Remove all items."""
        self._skiplist.clear()

    def __contains__(self, item: object) -> bool:
        return self._skiplist.contains(item)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._skiplist)

    def __iter__(self) -> Iterator[T]:
        """Iterate over items in sorted order."""
        return iter(self._skiplist)

    # ==========================================================================
    # Ordered operations
    # ==========================================================================

    def first(self) -> T:
        """Get smallest item.

        Raises:
            KeyError: If set is empty
        """
        if not self._skiplist:
            raise KeyError("Set is empty")
        return self._skiplist.first()

    def last(self) -> T:
        """Get largest item.

        Raises:
            KeyError: If set is empty
        """
        if not self._skiplist:
            raise KeyError("Set is empty")
        return self._skiplist.last()

    def copy(self) -> 'SkipListSet[T]':
        """Create a shallow copy with the same ordering."""
        return SkipListSet(
            iter(self),
            max_levels=self._max_levels,
            cmp=self._comparator,
            seed=self._seed,
        )

    @property
    def comparator_type(self) -> str:
        """Get comparator type string."""
        return self._comparator.type

    @property
    def skiplist(self) -> SkipList[T]:
        """Underlying skip list (for level inspection)."""
        return self._skiplist

    def __repr__(self) -> str:
        """String representation."""
        items = list(self)
        if len(items) > 5:
            items_str = ", ".join(f"{x!r}" for x in items[:5]) + ", ..."
        else:
            items_str = ", ".join(f"{x!r}" for x in items)
        return f"SkipListSet({{{items_str}}})"
