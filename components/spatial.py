"""components.spatial — 2-D points and the fixed map locations.

All coordinates are in map units (the debug view draws 1 unit = 1 px).
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field


@dataclass
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def distance_to(self, other: Vec2) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def rounded(self) -> tuple[int, int]:
        return round(self.x), round(self.y)

    @classmethod
    def from_pair(cls, pair) -> Vec2:
        """Build from a ``[x, y]`` list as stored in TOML."""
        return cls(float(pair[0]), float(pair[1]))


@dataclass
class Locations:
    """Reference points an actor travels between.

    Fixed at spawn.  There is no separate bed: the rest location *is*
    ``home``, so sleeping always sends the actor home.
    """
    home: Vec2 = field(default_factory=Vec2)
    dungeon: Vec2 = field(default_factory=Vec2)
    food: Vec2 = field(default_factory=Vec2)
    healing: Vec2 = field(default_factory=Vec2)
    entertainment: Vec2 = field(default_factory=Vec2)

    @property
    def rest(self) -> Vec2:
        return self.home

    def for_need(self, kind: str) -> Vec2:
        """Service location for a need kind.  Unknown kinds go home."""
        if kind == "eat":
            return self.food
        if kind == "heal":
            return self.healing
        if kind == "entertain":
            return self.entertainment
        return self.rest

    @classmethod
    def from_section(cls, data: dict) -> Locations:
        """Build from a ``[world.locations]`` tuning table."""
        kwargs = {}
        for name in ("home", "dungeon", "food", "healing", "entertainment"):
            if name in data:
                kwargs[name] = Vec2.from_pair(data[name])
        return cls(**kwargs)
