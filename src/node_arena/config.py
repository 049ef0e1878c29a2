"""ArenaConfig and IdStrategy for NodeArena configuration.

ArenaConfig is a frozen (immutable) dataclass.  IdStrategy selects how the
arena's identifier authority issues identifiers: a sequential counter or
random UUID4 tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ArenaConfig", "IdStrategy"]


class IdStrategy(StrEnum):
    """How a NodeArena allocates node identifiers.

    - SEQUENTIAL: Integers from a per-arena counter starting at 0.
    - RANDOM:     ``uuid.UUID`` version 4 tokens, globally unique.
    """

    SEQUENTIAL = auto()
    RANDOM = auto()


@dataclass(frozen=True, slots=True)
class ArenaConfig:
    """Immutable configuration for a NodeArena.

    Attributes:
        id_strategy: Identifier allocation strategy.  Plain strings such as
            ``"random"`` are accepted and converted to ``IdStrategy``.
    """

    id_strategy: IdStrategy = IdStrategy.SEQUENTIAL

    def __post_init__(self) -> None:
        if not isinstance(self.id_strategy, str):
            msg = f"id_strategy must be a string, got {type(self.id_strategy)!r}"
            raise TypeError(msg)
        try:
            strategy = IdStrategy(self.id_strategy.lower())
        except ValueError:
            choices = ", ".join(s.value for s in IdStrategy)
            msg = f"id_strategy must be one of {choices}, got {self.id_strategy!r}"
            raise ValueError(msg) from None
        # Frozen dataclass: bypass __setattr__ to store the normalised value.
        object.__setattr__(self, "id_strategy", strategy)
