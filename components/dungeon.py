"""components.dungeon — Level definitions and run phases."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Level:
    """One dungeon level.

    ``travel_time``       — seconds to cross the level (s, > 0).
    ``spawn_probability`` — chance per encounter roll (0–1).
    ``monster_damage``    — vitality lost per encounter (>= 0).
    """
    travel_time: float = 10.0
    spawn_probability: float = 0.0
    monster_damage: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> Level:
        return cls(
            travel_time=float(data.get("travel_time", 10.0)),
            spawn_probability=float(data.get("spawn_probability", 0.0)),
            monster_damage=float(data.get("monster_damage", 0.0)),
        )


class RunPhase(Enum):
    """Where a run is.  Only moves forward: DESCENDING → RETURNING → AT_SURFACE."""
    DESCENDING = "descending"
    RETURNING = "returning"
    AT_SURFACE = "at_surface"
