"""logic/actor.py — The character controller.

One ``ActorStateMachine`` per character, ticked once per fixed step by
whoever owns it (the ``DungeonCycle`` orchestrator in practice).

States
------
Travel          walk toward ``target_position``.  While nothing is queued
                or in progress, a low need redirects the walk to the
                matching service location.  Arriving starts the queued
                need, or a short nap if the trip wasn't need-driven.
SatisfyingNeed  count the active need down; on completion restore it
                and drop back to Travel (the target is left as is).
InDungeon       pinned to the dungeon entrance; the run descends.
Escaping        pinned to the entrance; the run climbs back out.  When it
                surfaces the actor heads home on its own.

Needs decay every tick in every state.

Telemetry goes to registered listeners as ``StatusReport`` (≈1 Hz),
``StateChanged``, ``NeedSought``, ``RunReplaced`` and ``RunFinished``
events.  Listeners are called synchronously and carry no control-flow
meaning.
"""

from __future__ import annotations
from typing import Callable

from components.actor import ActorState
from components.needs import NeedOrder, NEED_SLEEP
from components.spatial import Vec2, Locations
from core.events import (
    StatusReport, StateChanged, RunFinished, NeedSought, RunReplaced,
)
from core.tuning import get as _tun
from logic.dungeon import DungeonProgress
from logic.movement import step_toward, arrived
from logic.needs import NeedsModel


_NEED_DURATIONS = {
    "heal": 6.0,
    "eat": 3.0,
    "sleep": 5.0,
    "entertain": 4.0,
}


def need_duration(kind: str) -> float:
    """Seconds spent at the service location to satisfy *kind*."""
    return _tun("needs.durations", kind, _NEED_DURATIONS.get(kind, 0.0))


class ActorStateMachine:

    def __init__(self, name: str, position: Vec2, locations: Locations, *,
                 speed: float | None = None, needs: NeedsModel | None = None):
        self.name = name
        self.position = position.copy()
        self.target_position = position.copy()
        self.speed = speed if speed is not None else _tun("actor", "speed", 60.0)
        self.locations = locations
        self.needs = needs if needs is not None else NeedsModel()

        self.state = ActorState.TRAVEL
        self.pending_need: NeedOrder | None = None
        self.active_need: NeedOrder | None = None
        self.run: DungeonProgress | None = None

        self._listeners: list[Callable] = []
        self._status_timer = 0.0

    # ── Observation ──────────────────────────────────────────────────

    @property
    def vitality(self) -> float:
        return self.needs.vitality

    @property
    def hunger(self) -> float:
        return self.needs.hunger

    @property
    def sleepiness(self) -> float:
        return self.needs.sleepiness

    @property
    def boredom(self) -> float:
        return self.needs.boredom

    @property
    def is_busy(self) -> bool:
        """True while a need is queued or in progress, or a run is active."""
        return (self.pending_need is not None or self.active_need is not None
                or self.state.in_dungeon)

    def vitals(self) -> dict[str, float]:
        return {
            "vitality": self.needs.vitality,
            "hunger": self.needs.hunger,
            "sleepiness": self.needs.sleepiness,
            "boredom": self.needs.boredom,
        }

    def add_listener(self, callback: Callable) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ── Commands ─────────────────────────────────────────────────────

    def set_travel(self, destination: Vec2) -> None:
        """Walk to *destination*.  Drops a queued (not yet started) need."""
        self.target_position = destination.copy()
        self.pending_need = None

    def start_need(self, kind: str, duration: float) -> None:
        """Start satisfying *kind* in place."""
        if self.state.in_dungeon:
            print(f"[ACTOR] {self.name}: ignoring need '{kind}' during a run")
            return
        self.pending_need = None
        self.active_need = NeedOrder(kind, duration)
        self._set_state(ActorState.SATISFYING_NEED)

    def begin_dungeon_run(self, run: DungeonProgress) -> None:
        """Enter the dungeon.  An unfinished run in progress is replaced."""
        if self.run is not None and not self.run.finished:
            print(f"[ACTOR] {self.name}: replacing active run "
                  f"'{self.run.name}' with '{run.name}'")
            self._emit(RunReplaced(self.name, self.run.name, run.name))
        self.pending_need = None
        self.active_need = None
        self.run = run
        self.position = self.locations.dungeon.copy()
        self._set_state(ActorState.IN_DUNGEON)

    # ── Tick ─────────────────────────────────────────────────────────

    def update(self, dt: float) -> None:
        self.needs.decay(dt, self.state)

        if self.state is ActorState.TRAVEL:
            self._tick_travel(dt)
        elif self.state is ActorState.SATISFYING_NEED:
            self._tick_need(dt)
        elif self.state is ActorState.IN_DUNGEON:
            self._tick_dungeon(dt)
        elif self.state is ActorState.ESCAPING:
            self._tick_escape(dt)

        self._tick_status(dt)

    def _tick_travel(self, dt: float) -> None:
        if self.pending_need is None and self.active_need is None:
            kind = self.needs.get_low_need()
            if kind is not None:
                self.pending_need = NeedOrder(kind, need_duration(kind))
                self.target_position = self.locations.for_need(kind).copy()
                print(f"[NEEDS] {self.name} needs to {kind} — heading "
                      f"to {self.target_position.rounded()}")
                x, y = self.target_position.rounded()
                self._emit(NeedSought(self.name, kind, x, y))

        step_toward(self.position, self.target_position, self.speed, dt)

        if arrived(self.position, self.target_position,
                   _tun("actor", "arrive_radius", 5.0)):
            order = self.pending_need
            if order is None:
                order = NeedOrder(NEED_SLEEP, _tun("actor", "idle_nap", 2.0))
            self.pending_need = None
            self.active_need = NeedOrder(order.kind, order.remaining)
            self._set_state(ActorState.SATISFYING_NEED)

    def _tick_need(self, dt: float) -> None:
        need = self.active_need
        need.remaining -= dt
        if need.remaining <= 0.0:
            self.needs.restore_need(need.kind)
            self.active_need = None
            self.pending_need = None
            self._set_state(ActorState.TRAVEL)

    def _tick_dungeon(self, dt: float) -> None:
        self.position = self.locations.dungeon.copy()
        self.run.advance(dt, self.needs.vitality, self.needs.vitality_max,
                         self.needs.apply_damage)
        if self.run.exiting:
            self._set_state(ActorState.ESCAPING)

    def _tick_escape(self, dt: float) -> None:
        self.position = self.locations.dungeon.copy()
        self.run.retreat(dt, self.needs.apply_damage)
        if self.run.finished:
            run = self.run
            self.run = None
            self._set_state(ActorState.TRAVEL)
            self.target_position = self.locations.home.copy()
            self._emit(RunFinished(self.name, run.name, run.deepest_level_index))

    def _tick_status(self, dt: float) -> None:
        self._status_timer += dt
        if self._status_timer < _tun("actor", "status_period", 1.0):
            return
        self._status_timer = 0.0
        x, y = self.position.rounded()
        self._emit(StatusReport(
            name=self.name, x=x, y=y, state=self.state.value,
            vitality=self.needs.vitality, hunger=self.needs.hunger,
            sleepiness=self.needs.sleepiness, boredom=self.needs.boredom,
        ))

    # ── Internals ────────────────────────────────────────────────────

    def _set_state(self, new: ActorState) -> None:
        old = self.state
        self.state = new
        if old is new:
            return
        print(f"[ACTOR] {self.name}: {old.value} → {new.value}")
        self._emit(StateChanged(self.name, old.value, new.value))

    def _emit(self, event) -> None:
        for callback in list(self._listeners):
            callback(event)

    def __repr__(self) -> str:
        return (f"ActorStateMachine({self.name!r}, state={self.state.value}, "
                f"pos={self.position.rounded()})")
