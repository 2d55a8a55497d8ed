"""
node - Skip list node variants

A list is a chain of nodes, each holding one forward reference per level it
takes part in. There are two node classes:

    HeadNode     the start sentinel, ordered before every element
    ElementNode  an internal node carrying exactly one element

The end of a level is not a node at all: an unwritten or cleared forward
slot holds None, and NodeKind.of(None) reports it as END.
"""

from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar, Union

from skiplist_collections._comparator import Comparator


T = TypeVar('T')


class NodeKind(Enum):
    """Classification of a forward reference."""
    START = "start"
    INTERNAL = "internal"
    END = "end"

    @staticmethod
    def of(node: Optional['_ForwardLinks']) -> 'NodeKind':
        """Classify a node, treating None as the end marker."""
        if node is None:
            return NodeKind.END
        return node.kind


class _ForwardLinks:
    """Growable per-level forward array shared by both node classes."""

    __slots__ = ('top_level', 'forward')

    kind: NodeKind

    def __init__(self, top_level: int):
        self.top_level = top_level
        self.forward: List[Optional['ElementNode']] = []

    @property
    def level_count(self) -> int:
        """Number of forward slots written so far."""
        return len(self.forward)

    def forward_at(self, level: int) -> Optional['ElementNode']:
        """Next node at level, or None when nothing follows.

        Slots past the written part of the array read as None.
        """
        if level < len(self.forward):
            return self.forward[level]
        return None

    def set_forward_at(self, level: int, node: Optional['ElementNode']) -> None:
        """Point this node's level slot at node.

        The array is padded with None up to level; it never shrinks.

        Raises:
            IndexError: If level is negative or above this node's top level
        """
        if level < 0 or level > self.top_level:
            raise IndexError(
                f"level {level} outside node levels 0..{self.top_level}"
            )
        missing = level + 1 - len(self.forward)
        if missing > 0:
            self.forward.extend([None] * missing)
        self.forward[level] = node

    def has_element_at(self, level: int) -> bool:
        """True when an element node follows at level."""
        return self.forward_at(level) is not None


class HeadNode(_ForwardLinks):
    """Start sentinel: precedes every element, equals none."""

    __slots__ = ()

    kind = NodeKind.START

    def __init__(self, max_levels: int):
        super().__init__(max_levels - 1)
        self.set_forward_at(self.top_level, None)

    def precedes(self, sort_key: Any, comparator: Comparator) -> bool:
        return True

    def value_equals(self, sort_key: Any, comparator: Comparator) -> bool:
        return False

    def clear(self) -> None:
        """Detach every level."""
        for level in range(len(self.forward)):
            self.forward[level] = None

    def __repr__(self) -> str:  # pragma: no cover
        return f"HeadNode<levels={self.top_level + 1}>"


class ElementNode(_ForwardLinks, Generic[T]):
    """Internal node holding one element and its extracted sort key."""

    __slots__ = ('element', 'sort_key')

    kind = NodeKind.INTERNAL

    def __init__(self, element: T, sort_key: Any, top_level: int):
        """Initialize node.

        Args:
            element: Stored element
            sort_key: Key the comparator orders by
            top_level: Highest level this node will be linked into
        """
        super().__init__(top_level)
        self.element = element
        self.sort_key = sort_key

    def precedes(self, sort_key: Any, comparator: Comparator) -> bool:
        """True if this node's element orders strictly before sort_key."""
        return comparator.compare(self.sort_key, sort_key) < 0

    def value_equals(self, sort_key: Any, comparator: Comparator) -> bool:
        """True if this node's element compares equal to sort_key."""
        return comparator.compare(self.sort_key, sort_key) == 0

    def __repr__(self) -> str:  # pragma: no cover
        return f"ElementNode<{self.element!r} top={self.top_level}>"


Node = Union[HeadNode, ElementNode]
