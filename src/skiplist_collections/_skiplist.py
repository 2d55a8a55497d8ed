"""
skiplist - Ordered container backed by a probabilistic multi-level list

This module provides SkipList, a sorted collection with expected O(log n)
search, insertion and deletion and no rebalancing. Level 0 links every
element in order; each higher level links a randomly thinned subset, so a
search can skip ahead on the sparse levels before dropping down.

The list is not thread-safe: a mutation relinks one level at a time, and
another thread could observe some levels relinked and others not. Shared
lists need external locking.
"""

import logging
from typing import (
    Any, Callable, Generic, Iterable, List, Optional, TypeVar, Union
)

from skiplist_collections._comparator import Comparator, resolve_comparator
from skiplist_collections._config import (
    DuplicatePolicy,
    config,
    resolve_policy,
    validate_levels,
)
from skiplist_collections._iterator import LevelIterator
from skiplist_collections._levels import LevelGenerator
from skiplist_collections._node import ElementNode, HeadNode, Node


logger = logging.getLogger(__name__)

T = TypeVar('T')

# Elements shown by repr() before truncating
_REPR_ITEMS = 5


class SkipList(Generic[T]):
    """Sorted container with randomized multi-level forward links.

    None is never stored: add, contains and remove return False for it.
    Equal elements are kept side by side unless the list was built with
    duplicates='reject'.

    Example:
        >>> s = SkipList(4, seed=1)
        >>> for x in (5, 1, 9, 3):
        ...     s.add(x)
        True
        True
        True
        True
        >>> list(s)
        [1, 3, 5, 9]
        >>> s.remove(5)
        True
        >>> len(s)
        3
    """

    __slots__ = (
        '_head',
        '_comparator',
        '_max_levels',
        '_levels',
        '_size',
        '_policy',
        '_debug_checks',
    )

    def __init__(
        self,
        max_levels: Optional[int] = None,
        items: Optional[Iterable[T]] = None,
        *,
        cmp: Optional[Union[Comparator, Callable[[Any, Any], int]]] = None,
        key: Optional[Callable[[Any], Any]] = None,
        seed: Optional[int] = None,
        duplicates: Optional[Union[str, DuplicatePolicy]] = None,
    ):
        """Initialize skip list.

        Args:
            max_levels: Level ceiling (None = config.default_levels)
            items: Initial elements
            cmp: Comparator or comparison function
            key: Key extraction function
            seed: Seed for this list's level generator (None = config.seed)
            duplicates: 'allow' or 'reject' (None = config.duplicates)

        Raises:
            ConfigurationError: If max_levels < 1 or duplicates is unknown
            TypeError: If cmp/key are invalid
        """
        if max_levels is None:
            max_levels = config.default_levels
        self._max_levels = validate_levels(max_levels)
        self._policy = resolve_policy(
            duplicates if duplicates is not None else config.duplicates
        )
        self._comparator = resolve_comparator(cmp, key)
        self._levels = LevelGenerator(
            self._max_levels,
            seed=seed if seed is not None else config.seed,
        )
        self._debug_checks = config.debug_checks
        self._head = HeadNode(self._max_levels)
        self._size = 0

        logger.debug(
            "Created SkipList max_levels=%d duplicates=%s comparator=%s",
            self._max_levels, self._policy.value, self._comparator.type,
        )

        if items:
            for item in items:
                self.add(item)

    # ==========================================================================
    # Descent
    # ==========================================================================

    def _descend(
        self,
        sort_key: Any,
        top_level: int,
        preds: Optional[List[Node]] = None,
    ) -> Node:
        """Walk from the head down levels top_level..0 toward sort_key.

        On every level the walk advances while the next node orders
        strictly before sort_key, and carries its position down to the
        level below. The last node visited on each level is recorded in
        preds when given.

        Returns:
            The level-0 predecessor of sort_key
        """
        comparator = self._comparator
        node: Node = self._head
        for level in range(top_level, -1, -1):
            nxt = node.forward_at(level)
            while nxt is not None and nxt.precedes(sort_key, comparator):
                node = nxt
                nxt = node.forward_at(level)
            if preds is not None:
                preds[level] = node
        return node

    # ==========================================================================
    # Mutation API
    # ==========================================================================

    def add(self, element: T) -> bool:
        """Insert an element.

        Returns:
            False for None, or for an equal element under the 'reject'
            policy; True otherwise, duplicates included.
        """
        if element is None:
            logger.debug("Rejected None passed to add()")
            return False

        sort_key = self._comparator.extract_key(element)
        node_level = self._levels.next_level()

        if self._policy is DuplicatePolicy.REJECT:
            preds: List[Node] = [self._head] * self._max_levels
            pred = self._descend(sort_key, self._max_levels - 1, preds)
            nxt = pred.forward_at(0)
            if nxt is not None and nxt.value_equals(sort_key, self._comparator):
                logger.debug("Rejected duplicate element %r", element)
                return False
        else:
            # Only the levels the new node joins are relinked
            preds = [self._head] * (node_level + 1)
            self._descend(sort_key, node_level, preds)

        new_node: ElementNode[T] = ElementNode(element, sort_key, node_level)
        for level in range(node_level + 1):
            pred = preds[level]
            new_node.set_forward_at(level, pred.forward_at(level))
            pred.set_forward_at(level, new_node)

        self._size += 1
        if self._debug_checks:
            self.check_invariants()
        return True

    def remove(self, element: T) -> bool:
        """Remove one occurrence of an element.

        With duplicates present, the most recently added equal element is
        the one unlinked, on every level it was linked into.

        Returns:
            True if an element was removed; False for None or when absent
        """
        if element is None:
            logger.debug("Rejected None passed to remove()")
            return False

        sort_key = self._comparator.extract_key(element)
        preds: List[Node] = [self._head] * self._max_levels
        pred = self._descend(sort_key, self._max_levels - 1, preds)

        target = pred.forward_at(0)
        if target is None or not target.value_equals(sort_key, self._comparator):
            return False

        for level in range(target.level_count - 1, -1, -1):
            pred = preds[level]
            if pred.forward_at(level) is target:
                pred.set_forward_at(level, target.forward_at(level))

        self._size -= 1
        if self._debug_checks:
            self.check_invariants()
        return True

    def clear(self) -> None:
        """Remove all elements."""
        self._head.clear()
        self._size = 0

    # ==========================================================================
    # Query API
    # ==========================================================================

    def contains(self, element: T) -> bool:
        """Check whether an element equal to element is present.

        Returns:
            True if found; False for None
        """
        if element is None:
            return False
        sort_key = self._comparator.extract_key(element)
        pred = self._descend(sort_key, self._max_levels - 1)
        nxt = pred.forward_at(0)
        return nxt is not None and nxt.value_equals(sort_key, self._comparator)

    def count(self, element: T) -> int:
        """Number of stored elements equal to element."""
        if element is None:
            return 0
        sort_key = self._comparator.extract_key(element)
        node = self._descend(sort_key, self._max_levels - 1).forward_at(0)
        total = 0
        while node is not None and node.value_equals(sort_key, self._comparator):
            total += 1
            node = node.forward_at(0)
        return total

    def first(self) -> T:
        """Smallest element.

        Raises:
            IndexError: If the list is empty
        """
        node = self._head.forward_at(0)
        if node is None:
            raise IndexError("first() on empty SkipList")
        return node.element

    def last(self) -> T:
        """Largest element.

        Raises:
            IndexError: If the list is empty
        """
        node: Node = self._head
        for level in range(self._max_levels - 1, -1, -1):
            nxt = node.forward_at(level)
            while nxt is not None:
                node = nxt
                nxt = node.forward_at(level)
        if node is self._head:
            raise IndexError("last() on empty SkipList")
        return node.element

    @property
    def size(self) -> int:
        """Number of elements."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    @property
    def max_levels(self) -> int:
        """Level ceiling fixed at construction."""
        return self._max_levels

    @property
    def height(self) -> int:
        """Highest level holding at least one element, -1 when empty."""
        for level in range(self._max_levels - 1, -1, -1):
            if self._head.has_element_at(level):
                return level
        return -1

    @property
    def duplicates(self) -> str:
        """Duplicate policy ('allow' or 'reject')."""
        return self._policy.value

    @property
    def comparator_type(self) -> str:
        """Get the comparator type."""
        return self._comparator.type

    # ==========================================================================
    # Iteration
    # ==========================================================================

    def iterator(self) -> LevelIterator[T]:
        """Ascending iterator over every element."""
        return LevelIterator(self._head, 0)

    def __iter__(self) -> LevelIterator[T]:
        return self.iterator()

    def level_iterator(self, level: int) -> LevelIterator[T]:
        """Ascending iterator over the elements linked at level.

        Raises:
            IndexError: If level is outside [0, max_levels - 1]
        """
        if isinstance(level, bool) or not isinstance(level, int):
            raise TypeError("level must be an integer")
        if not 0 <= level < self._max_levels:
            raise IndexError(
                f"level {level} outside 0..{self._max_levels - 1}"
            )
        return LevelIterator(self._head, level)

    def level_sizes(self) -> List[int]:
        """Element count of each level, level 0 first."""
        return [
            sum(1 for _ in LevelIterator(self._head, level))
            for level in range(self._max_levels)
        ]

    # ==========================================================================
    # Diagnostics
    # ==========================================================================

    def check_invariants(self) -> None:
        """Verify ordering, level nesting and size.

        Raises:
            AssertionError: Describing the first violation found
        """
        comparator = self._comparator
        strict = self._policy is DuplicatePolicy.REJECT
        below: Optional[set] = None

        for level in range(self._max_levels):
            seen = set()
            prev: Optional[ElementNode[T]] = None
            node = self._head.forward_at(level)
            while node is not None:
                if prev is not None:
                    result = comparator.compare(prev.sort_key, node.sort_key)
                    if result > 0 or (strict and result == 0):
                        raise AssertionError(
                            f"level {level} out of order at {node.element!r}"
                        )
                if below is not None and id(node) not in below:
                    raise AssertionError(
                        f"{node.element!r} linked at level {level} "
                        f"but not at level {level - 1}"
                    )
                seen.add(id(node))
                prev = node
                node = node.forward_at(level)

            if level == 0 and len(seen) != self._size:
                raise AssertionError(
                    f"size is {self._size} but level 0 holds {len(seen)}"
                )
            below = seen

        logger.debug("Invariants hold for %d elements", self._size)

    def __str__(self) -> str:
        """Per-level listing, highest level first, empty levels skipped."""
        lines = []
        for level in range(self._max_levels - 1, -1, -1):
            elements = list(LevelIterator(self._head, level))
            if elements:
                joined = ", ".join(str(e) for e in elements)
                lines.append(f"Level {level} Node Elements: {joined}\n")
        return "".join(lines)

    def __repr__(self) -> str:
        """String representation."""
        items = []
        for element in self:
            if len(items) == _REPR_ITEMS:
                items.append("...")
                break
            items.append(repr(element))
        return f"SkipList([{', '.join(items)}], max_levels={self._max_levels})"
