"""pytest plugin for node-arena.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from node_arena import NodeArena, as_children, as_left_right


@pytest.fixture
def node_arena() -> NodeArena:
    """Fresh, empty sequential-id NodeArena for each test."""
    return NodeArena()


@pytest.fixture(scope="session")
def assert_children() -> Any:
    """Fixture that returns a callable child-layout asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_two_children(node_arena, assert_children):
            root = node_arena.make_root()
            a = node_arena.make_node(root, append_child())
            b = node_arena.make_node(root, append_child())
            assert_children(node_arena, root, [a, b])

    For a ChildrenNode, ``expected`` is compared with ``children`` as a list.
    For a LeftRightNode, ``expected`` is compared with ``(left, right)``.

    Returns:
        A callable ``_assert(arena, parent_id, expected) -> None`` that raises
        ``AssertionError`` when the parent is missing or its children differ.
    """

    def _assert(arena: NodeArena, parent_id: Any, expected: Any) -> None:
        node = arena.get_node(parent_id)
        if node is None:
            raise AssertionError(f"Node {parent_id!r} is not in the arena: {arena!r}")

        children_inner = as_children(node)
        if children_inner is not None:
            actual: Any = list(children_inner.children)
            wanted: Any = list(expected)
        else:
            lr_inner = as_left_right(node)
            if lr_inner is None:
                raise AssertionError(f"Node {parent_id!r} has no known shape: {node!r}")
            actual = (lr_inner.left, lr_inner.right)
            wanted = tuple(expected)

        if actual != wanted:
            raise AssertionError(
                f"Children of node {parent_id!r} differ:\n"
                f"  actual:   {actual}\n"
                f"  expected: {wanted}\n"
                f"  node:     {node!r}"
            )

    return _assert
