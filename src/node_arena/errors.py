"""Error taxonomy for NodeArena operations.

Only one condition is currently raised by the arena: a parent identifier
that does not exist (``ErrorKind.NOT_FOUND``).  ``ErrorKind.UNKNOWN`` is kept
for conditions a future operation may introduce.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from node_arena.identifiers import Identifier

__all__ = ["ArenaError", "ErrorKind", "NodeNotFoundError"]


class ErrorKind(StrEnum):
    """Kinds of arena failure."""

    NOT_FOUND = auto()
    UNKNOWN = auto()


class ArenaError(Exception):
    """Base class for arena failures.

    Attributes:
        kind:       Which ``ErrorKind`` this failure is.
        identifier: The identifier involved, if any.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, identifier: Identifier | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class NodeNotFoundError(ArenaError, KeyError):
    """No node is stored under the requested identifier."""

    kind = ErrorKind.NOT_FOUND

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
