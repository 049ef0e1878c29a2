"""Ready-made factories for ``NodeArena.make_node``.

Each function here returns a ``Factory``: a callable taking the new node's
identifier and the live parent node, recording the child on the parent, and
returning the new (empty) child node.

- ``append_child``: parent must be a ChildrenNode; appends to ``children``.
- ``attach_left`` / ``attach_right``: parent must be a LeftRightNode with
  that slot vacant.
- ``attach_child``: picks the right rule from the parent's variant; for a
  LeftRightNode it fills ``left`` first, then ``right``.

Every check runs before the parent is touched, so a factory that raises
``ValueError`` leaves the parent exactly as it was.

Example::

    arena = NodeArena()
    root = arena.make_root()
    branch = arena.make_node(root, append_child(NodeKind.LEFT_RIGHT))
    leaf = arena.make_node(branch, attach_left())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from node_arena.nodes import (
    ChildrenNode,
    LeftRightNode,
    Node,
    NodeKind,
    as_children,
    as_left_right,
    new_node,
)

if TYPE_CHECKING:
    from node_arena.arena import Factory
    from node_arena.identifiers import Identifier

__all__ = ["append_child", "attach_child", "attach_left", "attach_right"]


def _describe(parent: Node) -> str:
    return f"{type(parent).__name__}(id={parent.id!r})"


def _require_children(parent: Node) -> ChildrenNode:
    inner = as_children(parent)
    if inner is None:
        msg = f"Expected a ChildrenNode parent, got {_describe(parent)}"
        raise ValueError(msg)
    return inner


def _require_left_right(parent: Node) -> LeftRightNode:
    inner = as_left_right(parent)
    if inner is None:
        msg = f"Expected a LeftRightNode parent, got {_describe(parent)}"
        raise ValueError(msg)
    return inner


def append_child(kind: NodeKind | str = NodeKind.CHILDREN) -> Factory:
    """Factory that appends the new node to a ChildrenNode parent.

    Args:
        kind: Variant of the node to create.

    Returns:
        A factory for ``NodeArena.make_node``.
    """
    kind = NodeKind(kind)

    def _factory(new_id: Identifier, parent: Node) -> Node:
        parent_inner = _require_children(parent)
        parent_inner.children.append(new_id)
        return new_node(kind, new_id, parent_inner.id)

    return _factory


def attach_left(kind: NodeKind | str = NodeKind.CHILDREN) -> Factory:
    """Factory that fills the vacant ``left`` slot of a LeftRightNode parent."""
    kind = NodeKind(kind)

    def _factory(new_id: Identifier, parent: Node) -> Node:
        parent_inner = _require_left_right(parent)
        if parent_inner.left is not None:
            msg = (
                f"Left slot of {_describe(parent)} already holds "
                f"{parent_inner.left!r}"
            )
            raise ValueError(msg)
        parent_inner.left = new_id
        return new_node(kind, new_id, parent_inner.id)

    return _factory


def attach_right(kind: NodeKind | str = NodeKind.CHILDREN) -> Factory:
    """Factory that fills the vacant ``right`` slot of a LeftRightNode parent."""
    kind = NodeKind(kind)

    def _factory(new_id: Identifier, parent: Node) -> Node:
        parent_inner = _require_left_right(parent)
        if parent_inner.right is not None:
            msg = (
                f"Right slot of {_describe(parent)} already holds "
                f"{parent_inner.right!r}"
            )
            raise ValueError(msg)
        parent_inner.right = new_id
        return new_node(kind, new_id, parent_inner.id)

    return _factory


def attach_child(kind: NodeKind | str = NodeKind.CHILDREN) -> Factory:
    """Factory that records the new node on any parent variant.

    ChildrenNode parents get the identifier appended.  LeftRightNode parents
    get it in ``left`` if vacant, else in ``right`` if vacant.

    Raises (when called by the arena):
        ValueError: If a LeftRightNode parent already has both children.
    """
    kind = NodeKind(kind)

    def _factory(new_id: Identifier, parent: Node) -> Node:
        children_inner = as_children(parent)
        if children_inner is not None:
            children_inner.children.append(new_id)
            return new_node(kind, new_id, parent.id)

        parent_inner = _require_left_right(parent)
        if parent_inner.left is None:
            parent_inner.left = new_id
        elif parent_inner.right is None:
            parent_inner.right = new_id
        else:
            msg = f"{_describe(parent)} already has a left and a right child"
            raise ValueError(msg)
        return new_node(kind, new_id, parent.id)

    return _factory
