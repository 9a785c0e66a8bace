"""components — Plain dataclasses shared by the simulation, organised by domain.

Submodules
----------
spatial    Vec2, Locations
needs      NeedOrder, need kind names
dungeon    Level, RunPhase
actor      ActorState
dev_log    DevLog

All public names are re-exported here so callers can write
``from components import Vec2``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Vec2, Locations

# ── Needs ────────────────────────────────────────────────────────────
from components.needs import (
    NeedOrder, NEED_HEAL, NEED_EAT, NEED_SLEEP, NEED_ENTERTAIN, NEED_KINDS,
)

# ── Dungeon ──────────────────────────────────────────────────────────
from components.dungeon import Level, RunPhase

# ── Actor ────────────────────────────────────────────────────────────
from components.actor import ActorState

# ── Debug ────────────────────────────────────────────────────────────
from components.dev_log import DevLog

__all__ = [
    # spatial
    "Vec2", "Locations",
    # needs
    "NeedOrder", "NEED_HEAL", "NEED_EAT", "NEED_SLEEP", "NEED_ENTERTAIN",
    "NEED_KINDS",
    # dungeon
    "Level", "RunPhase",
    # actor
    "ActorState",
    # debug
    "DevLog",
]
