"""Tests for skip list nodes."""

import pytest

from skiplist_collections import Comparator, ElementNode, HeadNode, NodeKind


class TestNodeKind:
    """Tests for node classification."""

    def test_kinds(self):
        """Each class reports its own kind; None is the end marker."""
        head = HeadNode(4)
        node = ElementNode(1, 1, 0)
        assert NodeKind.of(head) is NodeKind.START
        assert NodeKind.of(node) is NodeKind.INTERNAL
        assert NodeKind.of(None) is NodeKind.END


class TestForwardLinks:
    """Tests for the forward-reference array."""

    def test_head_spans_all_levels(self):
        """The head node is sized to the ceiling, all slots empty."""
        head = HeadNode(4)
        assert head.level_count == 4
        assert all(head.forward_at(level) is None for level in range(4))

    def test_unwritten_slot_is_end(self):
        """Reading past the written slots gives None."""
        node = ElementNode('x', 'x', 5)
        assert node.level_count == 0
        assert node.forward_at(3) is None
        assert node.level_count == 0

    def test_write_pads_lower_slots(self):
        """Writing a high slot fills the gap with None."""
        node = ElementNode('a', 'a', 3)
        succ = ElementNode('b', 'b', 3)
        node.set_forward_at(2, succ)
        assert node.level_count == 3
        assert node.forward_at(0) is None
        assert node.forward_at(1) is None
        assert node.forward_at(2) is succ

    def test_write_never_shrinks(self):
        """Clearing a low slot keeps the array length."""
        node = ElementNode('a', 'a', 3)
        node.set_forward_at(3, ElementNode('b', 'b', 3))
        node.set_forward_at(0, None)
        assert node.level_count == 4

    def test_write_above_top_level_raises(self):
        """A node cannot be linked above its own top level."""
        node = ElementNode('a', 'a', 1)
        with pytest.raises(IndexError):
            node.set_forward_at(2, None)
        with pytest.raises(IndexError):
            node.set_forward_at(-1, None)

    def test_has_element_at(self):
        """has_element_at reports a following element node."""
        head = HeadNode(2)
        assert not head.has_element_at(0)
        head.set_forward_at(0, ElementNode(1, 1, 0))
        assert head.has_element_at(0)

    def test_head_clear(self):
        """clear() detaches every level of the head."""
        head = HeadNode(3)
        node = ElementNode(1, 1, 2)
        for level in range(3):
            head.set_forward_at(level, node)
        head.clear()
        assert all(head.forward_at(level) is None for level in range(3))


class TestOrdering:
    """Tests for precedes/value_equals."""

    def test_head_precedes_everything(self):
        """The head orders before any key and equals none."""
        cmp = Comparator.natural()
        head = HeadNode(1)
        assert head.precedes(-10**9, cmp)
        assert not head.value_equals(0, cmp)

    def test_element_ordering(self):
        """Element nodes compare by sort key."""
        cmp = Comparator.natural()
        node = ElementNode(5, 5, 0)
        assert node.precedes(6, cmp)
        assert not node.precedes(5, cmp)
        assert not node.precedes(4, cmp)
        assert node.value_equals(5, cmp)
        assert not node.value_equals(6, cmp)

    def test_uses_sort_key(self):
        """Comparisons read the stored sort key, not the element."""
        cmp = Comparator.natural()
        node = ElementNode('Zebra', 'zebra', 0)
        assert node.value_equals('zebra', cmp)
        assert not node.precedes('apple', cmp)
