"""components.actor — Actor controller states."""

from __future__ import annotations
from enum import Enum


class ActorState(Enum):
    """Top-level actor state.  ``value`` is the label shown in status lines."""
    TRAVEL = "Travel"
    SATISFYING_NEED = "SatisfyingNeed"
    IN_DUNGEON = "InDungeon"
    ESCAPING = "Escaping"

    @property
    def in_dungeon(self) -> bool:
        return self in (ActorState.IN_DUNGEON, ActorState.ESCAPING)
