"""Node variants stored in a NodeArena, and accessors to recover them.

A ``Node`` is one of a closed set of shapes:

- ``ChildrenNode``:  an ordered list of child identifiers.
- ``LeftRightNode``: two independent optional slots, ``left`` and ``right``.

Every node records its own ``id`` and its ``parent``.  The root's parent is
the root itself, so "is this the root" is ``node.id == node.parent`` (also
available as ``node.is_root``); ``parent`` is never ``None``.

Generic code that receives a ``Node`` recovers the concrete shape with
``as_children()`` / ``as_left_right()`` (or ``get_inner()``), which return
``None`` when the node is a different variant.

Example::

    parent_inner = as_children(parent)
    if parent_inner is not None:
        parent_inner.children.append(new_id)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import TYPE_CHECKING, ClassVar, TypeAlias, TypeVar

if TYPE_CHECKING:
    from node_arena.identifiers import Identifier

__all__ = [
    "ChildrenNode",
    "LeftRightNode",
    "Node",
    "NodeKind",
    "as_children",
    "as_left_right",
    "get_inner",
    "new_node",
]


class NodeKind(StrEnum):
    """Tag of each node variant.

    - CHILDREN   -> "children"   : ChildrenNode
    - LEFT_RIGHT -> "left_right" : LeftRightNode
    """

    CHILDREN = auto()
    LEFT_RIGHT = auto()


@dataclass(slots=True)
class ChildrenNode:
    """A node with an ordered sequence of direct children.

    Attributes:
        id:       This node's identifier.  Never reassigned after creation.
        parent:   The parent's identifier; equal to ``id`` for a root.
        children: Child identifiers in insertion order.
    """

    kind: ClassVar[NodeKind] = NodeKind.CHILDREN

    id: Identifier
    parent: Identifier
    children: list[Identifier] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.id == self.parent


@dataclass(slots=True)
class LeftRightNode:
    """A node with at most a left and a right child.

    Attributes:
        id:     This node's identifier.  Never reassigned after creation.
        parent: The parent's identifier; equal to ``id`` for a root.
        left:   Left child identifier, or None when the slot is vacant.
        right:  Right child identifier, or None when the slot is vacant.
    """

    kind: ClassVar[NodeKind] = NodeKind.LEFT_RIGHT

    id: Identifier
    parent: Identifier
    left: Identifier | None = None
    right: Identifier | None = None

    @property
    def is_root(self) -> bool:
        return self.id == self.parent


Node: TypeAlias = ChildrenNode | LeftRightNode

_VARIANTS: dict[NodeKind, type[ChildrenNode] | type[LeftRightNode]] = {
    NodeKind.CHILDREN: ChildrenNode,
    NodeKind.LEFT_RIGHT: LeftRightNode,
}

V = TypeVar("V", ChildrenNode, LeftRightNode)


def get_inner(node: Node, variant: type[V]) -> V | None:
    """View ``node`` as ``variant``.

    Args:
        node:    Any node taken from an arena.
        variant: ``ChildrenNode`` or ``LeftRightNode``.

    Returns:
        ``node`` itself if it is that variant, otherwise None.  The returned
        object is the stored node, so mutating it mutates the arena's copy.
    """
    if isinstance(node, variant):
        return node
    return None


def as_children(node: Node) -> ChildrenNode | None:
    return get_inner(node, ChildrenNode)


def as_left_right(node: Node) -> LeftRightNode | None:
    return get_inner(node, LeftRightNode)


def new_node(kind: NodeKind | str, id: Identifier, parent: Identifier) -> Node:
    """Build an empty node of ``kind`` (no children, vacant slots).

    Raises:
        ValueError: If ``kind`` names no known variant.
    """
    try:
        variant = _VARIANTS[NodeKind(kind)]
    except ValueError:
        msg = f"Unknown node kind: {kind!r}"
        raise ValueError(msg) from None
    return variant(id=id, parent=parent)
