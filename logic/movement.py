"""logic/movement.py — Straight-line travel helpers.

The map has no obstacles, so travel is a direct walk toward the target
capped at ``speed × dt`` per tick.
"""

from __future__ import annotations
import math
from components.spatial import Vec2


def step_toward(pos: Vec2, target: Vec2, speed: float, dt: float) -> None:
    """Move *pos* in place toward *target*; never overshoots."""
    dx = target.x - pos.x
    dy = target.y - pos.y
    d = math.hypot(dx, dy)
    step = speed * dt
    if d <= step or d < 1e-6:
        pos.x, pos.y = target.x, target.y
        return
    pos.x += dx / d * step
    pos.y += dy / d * step


def arrived(pos: Vec2, target: Vec2, radius: float) -> bool:
    return pos.distance_to(target) <= radius
