"""
iterator - Single-level forward iteration over a skip list

A LevelIterator follows one level's forward references from a starting
node until the end of that level. Level 0 visits every element in order;
higher levels visit a thinned subsequence.
"""

from typing import Iterator, Optional, TypeVar

from skiplist_collections._node import ElementNode, Node


T = TypeVar('T')


class UnsupportedOperationError(TypeError):
    """Raised when an iterator is asked to mutate the list it walks."""
    pass


class LevelIterator(Iterator[T]):
    """Lazy, finite, non-restartable walk along one level.

    Example:
        >>> it = skiplist.level_iterator(0)
        >>> list(it)
        [1, 3, 5, 9]
        >>> next(it)
        Traceback (most recent call last):
            ...
        StopIteration
    """

    __slots__ = ('_next', '_level')

    def __init__(self, start: Node, level: int):
        """Initialize iterator.

        Args:
            start: Node whose successors are visited (not start itself)
            level: Level to follow
        """
        self._level = level
        self._next: Optional[ElementNode[T]] = start.forward_at(level)

    @property
    def level(self) -> int:
        """Level this iterator follows."""
        return self._level

    def has_next(self) -> bool:
        """True while another element remains."""
        return self._next is not None

    def __iter__(self) -> 'LevelIterator[T]':
        return self

    def __next__(self) -> T:
        node = self._next
        if node is None:
            raise StopIteration
        self._next = node.forward_at(self._level)
        return node.element

    def remove(self) -> None:
        """Always fails: elements are removed through SkipList.remove.

        Raises:
            UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError(
            "LevelIterator does not support element removal"
        )
