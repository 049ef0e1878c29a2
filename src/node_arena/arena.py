"""NodeArena: identifier-indexed owner of every node in a tree.

The arena is the only way nodes come into existence:

- ``make_root()`` creates a ``ChildrenNode`` whose parent is itself.
- ``make_node(parent_id, factory)`` allocates a new identifier, looks up the
  parent, and calls ``factory(new_id, parent)``.  The factory gets the live
  parent node, so it can record the new child (append to ``children``, fill
  ``left``/``right``) in the same step that builds the child.  The arena
  then stores whatever node the factory returned under ``new_id``.

Callers never insert into the underlying dict themselves.  There is no
removal API: once stored, a node stays for the arena's lifetime.

Identifiers are allocated *before* the parent lookup and are never recycled,
so a failed ``make_node`` still consumes one identifier.  This is harmless
and keeps "never reused" trivially true for every authority.

The arena is not thread-safe.  Wrap it in an external lock if several
threads must share it.

Example::

    from node_arena import NodeArena, append_child

    arena = NodeArena()
    root = arena.make_root()
    a = arena.make_node(root, append_child())
    b = arena.make_node(root, append_child())
    arena.get_node(root).children   # [a, b]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, KeysView
from typing import TYPE_CHECKING

from node_arena.config import ArenaConfig
from node_arena.errors import NodeNotFoundError
from node_arena.identifiers import Identifier, make_authority
from node_arena.nodes import ChildrenNode, LeftRightNode, Node

if TYPE_CHECKING:
    from node_arena.identifiers import IdentifierAuthority

__all__ = ["Factory", "NodeArena"]

logger = logging.getLogger(__name__)

# Receives the new node's identifier and the live parent node; returns the
# new node.  May mutate the parent.
Factory = Callable[[Identifier, Node], Node]


class NodeArena:
    """Owning container for all nodes of one tree, indexed by identifier.

    Two separate ``NodeArena`` instances never share nodes or identifier
    state.  With the default sequential strategy each arena numbers its
    nodes from 0, so identifiers from different arenas may compare equal;
    use ``IdStrategy.RANDOM`` when identifiers must be globally unique.
    """

    def __init__(
        self,
        config: ArenaConfig | None = None,
        authority: IdentifierAuthority | None = None,
    ) -> None:
        """Initialise an empty arena.

        Args:
            config:    Arena configuration.  Defaults to ``ArenaConfig()``.
            authority: Identifier source.  When given it takes precedence over
                ``config.id_strategy``; otherwise a fresh authority is built
                from the configured strategy.
        """
        self._config: ArenaConfig = config if config is not None else ArenaConfig()
        self._authority: IdentifierAuthority = (
            authority
            if authority is not None
            else make_authority(self._config.id_strategy)
        )
        self._nodes: dict[Identifier, Node] = {}
        self._root: Identifier | None = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> ArenaConfig:
        return self._config

    @property
    def root(self) -> Identifier | None:
        """Identifier of the first root created, or None before ``make_root()``."""
        return self._root

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def make_root(self) -> Identifier:
        """Create a root ``ChildrenNode`` and return its identifier.

        The root's ``parent`` is its own ``id``.  Never fails.  Calling this
        again creates another, independent root; ``root`` keeps pointing at
        the first one.
        """
        root_id = self._authority.next()
        self._nodes[root_id] = ChildrenNode(id=root_id, parent=root_id)
        if self._root is None:
            self._root = root_id
        logger.debug("Created root node %s", root_id)
        return root_id

    def make_node(self, parent_id: Identifier, factory: Factory) -> Identifier:
        """Create a child of ``parent_id`` via ``factory``.

        Args:
            parent_id: Identifier of an existing node.
            factory:   Called once as ``factory(new_id, parent_node)``.  It
                must return the new node (normally with ``id=new_id`` and
                ``parent=parent_id``) and is expected to record ``new_id`` on
                the parent.  Keeping a ``LeftRightNode`` parent at two children
                or fewer is the factory's job.

        Returns:
            The new node's identifier.

        Raises:
            NodeNotFoundError: If ``parent_id`` is not in the arena.  One
                identifier is consumed anyway and nothing is inserted.
            TypeError: If the factory returns something other than a node.

        Any exception raised by the factory itself propagates unchanged.  On
        any failure nothing is inserted and the parent's ``children`` (or
        ``left``/``right``) are restored to what they were before the call.
        """
        new_id = self._authority.next()
        parent = self._nodes.get(parent_id)
        if parent is None:
            logger.debug(
                "Parent %s not found; identifier %s discarded", parent_id, new_id
            )
            msg = f"Parent node {parent_id!r} does not exist"
            raise NodeNotFoundError(msg, identifier=parent_id)

        saved = _snapshot(parent)
        try:
            node = factory(new_id, parent)
            if not isinstance(node, (ChildrenNode, LeftRightNode)):
                msg = f"Factory must return a node, got {type(node)!r}"
                raise TypeError(msg)
        except BaseException:
            _restore(parent, saved)
            raise

        self._nodes[new_id] = node
        logger.debug("Created %s node %s under %s", node.kind, new_id, parent_id)
        return new_id

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_node(self, node_id: Identifier) -> Node | None:
        """Return the node stored under ``node_id``, or None if absent."""
        return self._nodes.get(node_id)

    def get_node_mut(self, node_id: Identifier) -> Node | None:
        """Return the node stored under ``node_id`` for in-place mutation.

        Same object as ``get_node()``; the separate name marks call sites that
        modify the stored node.  Changing a node's ``id`` is not allowed.
        """
        return self._nodes.get(node_id)

    def ids(self) -> KeysView[Identifier]:
        """Live view of every stored identifier, in creation order."""
        return self._nodes.keys()

    def __getitem__(self, node_id: Identifier) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            msg = f"Node {node_id!r} does not exist"
            raise NodeNotFoundError(msg, identifier=node_id) from None

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return (
            f"NodeArena(nodes={len(self._nodes)}, root={self._root!r}, "
            f"authority={self._authority!r})"
        )


def _snapshot(node: Node) -> tuple[Identifier | None, ...]:
    """Copy the child links a factory is allowed to change."""
    if isinstance(node, ChildrenNode):
        return tuple(node.children)
    return (node.left, node.right)


def _restore(node: Node, saved: tuple[Identifier | None, ...]) -> None:
    if isinstance(node, ChildrenNode):
        node.children[:] = saved
    else:
        node.left, node.right = saved
