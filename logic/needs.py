"""logic/needs.py — Vitality and need gauges: decay, evaluation, restoration.

``NeedsModel`` is owned by exactly one actor and mutated once per tick
by ``decay()``.  All gauges run from 0 (empty) to their maximum (full)
and are clamped after every mutation, so a single huge ``dt`` can
never push a value out of range.

Decay per second (base unit 2.0/s):
    sleepiness  base × 0.5                        always
    hunger      base × 2.0  while Travel / InDungeon, else × 1.0
    boredom     base × 0.5  while InDungeon,         else × 1.5

``stamina`` and ``morale`` do not decay; needs only top them up.

Low-need priority (first match wins — survival first):
    vitality   <= 50  → 'heal'
    hunger     <= 30  → 'eat'
    sleepiness <= 30  → 'sleep'
    boredom    <= 30  → 'entertain'
"""

from __future__ import annotations
from dataclasses import dataclass

from components.actor import ActorState
from components.needs import NEED_HEAL, NEED_EAT, NEED_SLEEP, NEED_ENTERTAIN
from core.tuning import get as _tun


GAUGE_MAX = 100.0

_HUNGRY_STATES = (ActorState.TRAVEL, ActorState.IN_DUNGEON)


def _clamp(value: float, hi: float) -> float:
    return max(0.0, min(hi, value))


@dataclass
class NeedsModel:
    vitality: float = 100.0
    vitality_max: float = 100.0
    stamina: float = 100.0
    morale: float = 100.0
    hunger: float = 100.0
    sleepiness: float = 100.0
    boredom: float = 100.0

    def __post_init__(self):
        self.clamp()

    # ── Per-tick ─────────────────────────────────────────────────────

    def decay(self, dt: float, state: ActorState) -> None:
        """Drain the continuous needs for *dt* seconds spent in *state*."""
        base = dt * _tun("needs.decay", "base", 2.0)

        self.sleepiness -= base * _tun("needs.decay", "sleep_mult", 0.5)

        if state in _HUNGRY_STATES:
            self.hunger -= base * _tun("needs.decay", "hunger_mult_active", 2.0)
        else:
            self.hunger -= base * _tun("needs.decay", "hunger_mult_idle", 1.0)

        if state == ActorState.IN_DUNGEON:
            self.boredom -= base * _tun("needs.decay", "boredom_mult_dungeon", 0.5)
        else:
            self.boredom -= base * _tun("needs.decay", "boredom_mult", 1.5)

        self.clamp()

    # ── Evaluation ───────────────────────────────────────────────────

    def get_low_need(self) -> str | None:
        """Most urgent need below its threshold, or ``None``.

        The order is fixed: a wounded actor heals before it eats.
        """
        if self.vitality <= _tun("needs.thresholds", "heal", 50.0):
            return NEED_HEAL
        if self.hunger <= _tun("needs.thresholds", "eat", 30.0):
            return NEED_EAT
        if self.sleepiness <= _tun("needs.thresholds", "sleep", 30.0):
            return NEED_SLEEP
        if self.boredom <= _tun("needs.thresholds", "entertain", 30.0):
            return NEED_ENTERTAIN
        return None

    # ── Mutation ─────────────────────────────────────────────────────

    def restore_need(self, kind: str) -> None:
        """Fully satisfy *kind*.  Unknown kinds are ignored."""
        if kind == NEED_SLEEP:
            self.stamina = GAUGE_MAX
            self.sleepiness = GAUGE_MAX
        elif kind == NEED_EAT:
            self.stamina = GAUGE_MAX
            self.hunger = GAUGE_MAX
        elif kind == NEED_ENTERTAIN:
            self.morale = GAUGE_MAX
            self.boredom = GAUGE_MAX
        elif kind == NEED_HEAL:
            self.vitality = self.vitality_max
        self.clamp()

    def apply_damage(self, amount: float) -> None:
        """Lose *amount* vitality (dungeon encounters)."""
        self.vitality -= amount
        self.clamp()

    def clamp(self) -> None:
        self.vitality = _clamp(self.vitality, self.vitality_max)
        self.stamina = _clamp(self.stamina, GAUGE_MAX)
        self.morale = _clamp(self.morale, GAUGE_MAX)
        self.hunger = _clamp(self.hunger, GAUGE_MAX)
        self.sleepiness = _clamp(self.sleepiness, GAUGE_MAX)
        self.boredom = _clamp(self.boredom, GAUGE_MAX)
