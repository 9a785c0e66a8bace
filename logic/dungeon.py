"""logic/dungeon.py — Depth progression for a single dungeon run.

A run is an ordered list of levels.  ``progress`` is the fraction of
the *current* level crossed, reset at every level change, so encounter
cadence is the same on every level no matter how many there are.

Descent (``advance``) moves progress 0 → 1 and steps one level deeper
each time it wraps.  Clearing the last level, or the actor's vitality
falling below 30 % of its maximum, turns the run around.

Retreat (``retreat``) walks progress 1 → 0 back up the levels and ends
the run once it climbs past level 0.

Encounters roll on a timer:

    descending   every 1.0 s   full spawn probability
    retreating   every 1.5 s   half spawn probability

A run is created per assignment and never reused.  Once it reaches the
surface every call is a no-op.
"""

from __future__ import annotations
import random
from typing import Callable, Iterable

from components.dungeon import Level, RunPhase
from core.tuning import get as _tun


# Progress within this distance of a level edge counts as reaching it.
_EDGE_EPS = 1e-9


class InvalidRunDefinition(ValueError):
    """A dungeon run was defined with no levels, or a level with no length."""


def check_levels(levels: tuple[Level, ...], name: str) -> None:
    if not levels:
        raise InvalidRunDefinition(f"dungeon run {name!r} has no levels")
    for i, level in enumerate(levels):
        if level.travel_time <= 0.0:
            raise InvalidRunDefinition(
                f"dungeon run {name!r} level {i}: travel_time must be > 0, "
                f"got {level.travel_time}")


class DungeonProgress:
    """Progress through one run.

    ``rng`` is any object with a ``random()`` method returning a float
    in [0, 1).  Pass a seeded ``random.Random`` (or a stub) for
    deterministic encounters.
    """

    def __init__(self, levels: Iterable[Level], rng=None, name: str = "dungeon"):
        self.levels: tuple[Level, ...] = tuple(levels)
        check_levels(self.levels, name)
        self.name = name
        self.rng = rng if rng is not None else random.Random()

        self.current_level_index = 0
        self.deepest_level_index = 0
        self.progress = 0.0
        self.spawn_timer = 0.0
        self.phase = RunPhase.DESCENDING

    # ── Derived flags ────────────────────────────────────────────────

    @property
    def exiting(self) -> bool:
        """The forward run is over; the actor should retreat."""
        return self.phase is not RunPhase.DESCENDING

    @property
    def finished(self) -> bool:
        """The retreat reached the surface.  Terminal."""
        return self.phase is RunPhase.AT_SURFACE

    @property
    def level(self) -> Level:
        return self.levels[self.current_level_index]

    @property
    def depth(self) -> int:
        return len(self.levels)

    # ── Descent ──────────────────────────────────────────────────────

    def advance(self, dt: float, actor_vitality: float,
                actor_vitality_max: float,
                apply_damage: Callable[[float], None]) -> None:
        if self.finished:
            return

        # Early exit still lets this tick's progress happen.
        exit_ratio = _tun("dungeon", "early_exit_ratio", 0.3)
        if actor_vitality < actor_vitality_max * exit_ratio:
            self._turn_back(f"low vitality ({actor_vitality:.0f})")

        level = self.level
        self.progress += dt / level.travel_time
        self._encounter_check(
            dt,
            _tun("dungeon.descend", "spawn_period", 1.0),
            level.spawn_probability * _tun("dungeon.descend", "spawn_mult", 1.0),
            level,
            apply_damage,
        )

        if self.progress >= 1.0 - _EDGE_EPS:
            self.progress = 0.0
            self.current_level_index += 1
            if self.current_level_index >= len(self.levels):
                self.current_level_index = len(self.levels) - 1
                self._turn_back("deepest level cleared")
            else:
                self.deepest_level_index = max(self.deepest_level_index,
                                               self.current_level_index)
                print(f"[DUNGEON] {self.name}: reached level "
                      f"{self.current_level_index + 1}/{len(self.levels)}")

    # ── Retreat ──────────────────────────────────────────────────────

    def retreat(self, dt: float, apply_damage: Callable[[float], None]) -> None:
        if self.finished:
            return

        level = self.level
        self.progress -= dt / level.travel_time
        self._encounter_check(
            dt,
            _tun("dungeon.retreat", "spawn_period", 1.5),
            level.spawn_probability * _tun("dungeon.retreat", "spawn_mult", 0.5),
            level,
            apply_damage,
        )

        if self.progress <= _EDGE_EPS:
            self.current_level_index -= 1
            if self.current_level_index < 0:
                self.current_level_index = 0
                self.progress = 0.0
                self.phase = RunPhase.AT_SURFACE
                print(f"[DUNGEON] {self.name}: back at the surface")
                return
            # Re-enter the shallower level at its deep edge.
            self.progress = 1.0

    # ── Internals ────────────────────────────────────────────────────

    def _turn_back(self, reason: str) -> None:
        if self.phase is RunPhase.DESCENDING:
            self.phase = RunPhase.RETURNING
            print(f"[DUNGEON] {self.name}: turning back on level "
                  f"{self.current_level_index + 1} — {reason}")

    def _encounter_check(self, dt: float, period: float, chance: float,
                         level: Level,
                         apply_damage: Callable[[float], None]) -> None:
        self.spawn_timer += dt
        if self.spawn_timer < period - _EDGE_EPS:
            return
        self.spawn_timer = 0.0
        if self.rng.random() < chance:
            apply_damage(level.monster_damage)
            print(f"[DUNGEON] {self.name}: monster on level "
                  f"{self.current_level_index + 1} hits for {level.monster_damage:.0f}")
