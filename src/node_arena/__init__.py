"""node-arena - identifier-indexed arena for heterogeneous tree nodes."""

from __future__ import annotations

from node_arena.arena import Factory, NodeArena
from node_arena.config import ArenaConfig, IdStrategy
from node_arena.errors import ArenaError, ErrorKind, NodeNotFoundError
from node_arena.factories import (
    append_child,
    attach_child,
    attach_left,
    attach_right,
)
from node_arena.identifiers import (
    Identifier,
    IdentifierAuthority,
    RandomIdAuthority,
    SequentialIdAuthority,
)
from node_arena.nodes import (
    ChildrenNode,
    LeftRightNode,
    Node,
    NodeKind,
    as_children,
    as_left_right,
    get_inner,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArenaConfig",
    "ArenaError",
    "ChildrenNode",
    "ErrorKind",
    "Factory",
    "IdStrategy",
    "Identifier",
    "IdentifierAuthority",
    "LeftRightNode",
    "Node",
    "NodeArena",
    "NodeKind",
    "NodeNotFoundError",
    "RandomIdAuthority",
    "SequentialIdAuthority",
    "append_child",
    "as_children",
    "as_left_right",
    "attach_child",
    "attach_left",
    "attach_right",
    "get_inner",
]
