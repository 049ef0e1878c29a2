"""Identifier authorities: the source of node identifiers for a NodeArena.

An authority hands out identifiers that never repeat for the lifetime of the
authority instance.  Two strategies are provided:

- ``SequentialIdAuthority``: small integers 0, 1, 2, ...  Deterministic and
  compact, unique only within one instance.
- ``RandomIdAuthority``: ``uuid.uuid4()`` tokens.  Non-sequential, unique
  across instances and processes with overwhelming probability.

Any object with a conformant ``next()`` method satisfies the
``IdentifierAuthority`` Protocol, so custom strategies can be plugged into
``NodeArena`` without inheriting from anything.

Example::

    from node_arena.identifiers import SequentialIdAuthority

    ids = SequentialIdAuthority()
    ids.next()   # 0
    ids.next()   # 1
"""

from __future__ import annotations

import itertools
import uuid
from typing import Protocol, TypeAlias, runtime_checkable

from node_arena.config import IdStrategy

__all__ = [
    "Identifier",
    "IdentifierAuthority",
    "RandomIdAuthority",
    "SequentialIdAuthority",
    "make_authority",
]

# Opaque to callers: compare with == and use as a dict key, nothing else.
Identifier: TypeAlias = int | uuid.UUID


@runtime_checkable
class IdentifierAuthority(Protocol):
    """Structural protocol for identifier sources.

    ``next()`` must return a hashable value never returned before by the same
    instance.  It has no error conditions.
    """

    def next(self) -> Identifier: ...


class SequentialIdAuthority:
    """Monotonic counter starting at zero."""

    def __init__(self) -> None:
        self._counter = itertools.count()
        self._issued = 0

    @property
    def issued(self) -> int:
        """Number of identifiers handed out so far."""
        return self._issued

    def next(self) -> int:
        self._issued += 1
        return next(self._counter)

    def __repr__(self) -> str:
        return f"SequentialIdAuthority(issued={self._issued})"


class RandomIdAuthority:
    """Random UUID4 tokens, unique across arenas and processes."""

    def __init__(self) -> None:
        self._issued = 0

    @property
    def issued(self) -> int:
        """Number of identifiers handed out so far."""
        return self._issued

    def next(self) -> uuid.UUID:
        self._issued += 1
        return uuid.uuid4()

    def __repr__(self) -> str:
        return f"RandomIdAuthority(issued={self._issued})"


def make_authority(strategy: IdStrategy) -> IdentifierAuthority:
    """Build a fresh authority for ``strategy``.

    Args:
        strategy: Which identifier strategy to use.

    Returns:
        A new, unshared authority instance.

    Raises:
        ValueError: If ``strategy`` names no known strategy.
    """
    if strategy == IdStrategy.SEQUENTIAL:
        return SequentialIdAuthority()
    if strategy == IdStrategy.RANDOM:
        return RandomIdAuthority()
    msg = f"Unknown identifier strategy: {strategy!r}"
    raise ValueError(msg)
