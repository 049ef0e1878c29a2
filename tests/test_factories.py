"""Tests for the ready-made make_node factories.

Verifies:
- append_child records the child on a ChildrenNode parent, in order
- attach_left / attach_right fill only their own vacant slot
- attach_child dispatches on the parent variant (left first, then right)
- Violations raise ValueError, leave the parent untouched and insert nothing
"""

from __future__ import annotations

import pytest

from node_arena import (
    ChildrenNode,
    LeftRightNode,
    NodeArena,
    NodeKind,
    append_child,
    attach_child,
    attach_left,
    attach_right,
)


@pytest.fixture
def arena() -> NodeArena:
    return NodeArena()


def _branch(arena: NodeArena) -> int:
    """Root plus one LeftRightNode child; returns the child's id."""
    root_id = arena.make_root()
    return arena.make_node(root_id, append_child(NodeKind.LEFT_RIGHT))


class TestAppendChild:
    def test_appends_in_order(self, arena: NodeArena) -> None:
        root_id = arena.make_root()
        ids = [arena.make_node(root_id, append_child()) for _ in range(3)]
        root = arena.get_node(root_id)
        assert isinstance(root, ChildrenNode)
        assert root.children == ids

    def test_child_kind_and_parent(self, arena: NodeArena) -> None:
        root_id = arena.make_root()
        child = arena.make_node(root_id, append_child("left_right"))
        node = arena.get_node(child)
        assert isinstance(node, LeftRightNode)
        assert node.parent == root_id
        assert node.id == child

    def test_default_kind_is_children(self, arena: NodeArena) -> None:
        root_id = arena.make_root()
        child = arena.make_node(root_id, append_child())
        assert isinstance(arena.get_node(child), ChildrenNode)

    def test_rejects_left_right_parent(self, arena: NodeArena) -> None:
        branch = _branch(arena)
        before = len(arena)
        with pytest.raises(ValueError, match="Expected a ChildrenNode parent"):
            arena.make_node(branch, append_child())
        assert len(arena) == before
        assert arena.get_node(branch) == LeftRightNode(id=branch, parent=0)

    def test_unknown_kind_rejected_eagerly(self) -> None:
        with pytest.raises(ValueError):
            append_child("triple")


class TestAttachSlots:
    def test_attach_left_leaves_right(self, arena: NodeArena) -> None:
        branch = _branch(arena)
        leaf = arena.make_node(branch, attach_left())
        node = arena.get_node(branch)
        assert isinstance(node, LeftRightNode)
        assert node.left == leaf
        assert node.right is None

    def test_attach_right_leaves_left(self, arena: NodeArena) -> None:
        branch = _branch(arena)
        leaf = arena.make_node(branch, attach_right(NodeKind.LEFT_RIGHT))
        node = arena.get_node(branch)
        assert isinstance(node, LeftRightNode)
        assert node.left is None
        assert node.right == leaf
        assert isinstance(arena.get_node(leaf), LeftRightNode)

    def test_occupied_left_rejected(self, arena: NodeArena) -> None:
        branch = _branch(arena)
        first = arena.make_node(branch, attach_left())
        with pytest.raises(ValueError, match="Left slot"):
            arena.make_node(branch, attach_left())
        node = arena.get_node(branch)
        assert isinstance(node, LeftRightNode)
        assert node.left == first

    def test_occupied_right_rejected(self, arena: NodeArena) -> None:
        branch = _branch(arena)
        arena.make_node(branch, attach_right())
        with pytest.raises(ValueError, match="Right slot"):
            arena.make_node(branch, attach_right())

    def test_rejects_children_parent(self, arena: NodeArena) -> None:
        root_id = arena.make_root()
        with pytest.raises(ValueError, match="Expected a LeftRightNode parent"):
            arena.make_node(root_id, attach_left())
        root = arena.get_node(root_id)
        assert isinstance(root, ChildrenNode)
        assert root.children == []


class TestAttachChild:
    def test_children_parent_appends(self, arena: NodeArena) -> None:
        root_id = arena.make_root()
        a = arena.make_node(root_id, attach_child())
        b = arena.make_node(root_id, attach_child())
        root = arena.get_node(root_id)
        assert isinstance(root, ChildrenNode)
        assert root.children == [a, b]

    def test_left_right_parent_fills_left_then_right(self, arena: NodeArena) -> None:
        branch = _branch(arena)
        first = arena.make_node(branch, attach_child())
        second = arena.make_node(branch, attach_child())
        node = arena.get_node(branch)
        assert isinstance(node, LeftRightNode)
        assert (node.left, node.right) == (first, second)

    def test_fills_left_when_only_right_taken(self, arena: NodeArena) -> None:
        branch = _branch(arena)
        right = arena.make_node(branch, attach_right())
        left = arena.make_node(branch, attach_child())
        node = arena.get_node(branch)
        assert isinstance(node, LeftRightNode)
        assert (node.left, node.right) == (left, right)

    def test_third_child_rejected(self, arena: NodeArena) -> None:
        branch = _branch(arena)
        arena.make_node(branch, attach_child())
        arena.make_node(branch, attach_child())
        before = len(arena)
        with pytest.raises(ValueError, match="already has a left and a right child"):
            arena.make_node(branch, attach_child())
        assert len(arena) == before

    def test_new_node_parent_recorded(self, arena: NodeArena) -> None:
        branch = _branch(arena)
        leaf = arena.make_node(branch, attach_child(NodeKind.LEFT_RIGHT))
        node = arena.get_node(leaf)
        assert isinstance(node, LeftRightNode)
        assert node.parent == branch
        assert not node.is_root
