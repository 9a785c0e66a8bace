"""simulation/orchestrator.py — Travel → delve → escape → home sequencing.

``DungeonCycle`` owns one actor and walks it through a dungeon cycle:

1. Send the actor to the dungeon entrance (re-issuing the order after
   any need-driven detour).  Passing through the destination with a
   need still queued does not count as arriving.
2. On arrival, create a fresh run from the catalog and start it.
3. Poll until the run has surfaced (Escaping → Travel).
4. Pay the reward into ``wallet``.
5. Walk home (the actor already turned for home on its own).

The sequence is a generator advanced once per ``update()``; it only
ever re-checks actor state and position, so it can be interleaved with
any number of other per-frame updates.  ``abandon()`` stops it between
frames; the actor keeps whatever orders it last had.

Telemetry from the actor is forwarded into an ``EventBus`` and logged
to a ``DevLog``.
"""

from __future__ import annotations
import random
from typing import Iterator

from components.actor import ActorState
from components.dev_log import DevLog
from components.spatial import Vec2
from core.events import (
    EventBus, StatusReport, StateChanged, NeedSought, RunReplaced,
    RunFinished, RewardGranted,
)
from core.tuning import get as _tun
from logic.actor import ActorStateMachine
from simulation.dungeons import DungeonCatalog


class DungeonCycle:
    """Orchestrator for a single actor."""

    def __init__(self, actor: ActorStateMachine, catalog: DungeonCatalog,
                 dungeon_id: str, *, rng: random.Random | None = None,
                 bus: EventBus | None = None, log: DevLog | None = None,
                 repeat: bool = False, verbose: bool = False):
        self.actor = actor
        self.catalog = catalog
        self.dungeon_id = dungeon_id
        self.rng = rng if rng is not None else random.Random()
        self.bus = bus if bus is not None else EventBus()
        self.log = log if log is not None else DevLog()
        self.repeat = repeat
        self.verbose = verbose

        self.time = 0.0
        self.wallet = 0
        self.runs_completed = 0
        self.phase = "idle"
        self._steps: Iterator[None] | None = None

        actor.add_listener(self.bus.emit)
        self.bus.subscribe("StatusReport", self._on_status)
        self.bus.subscribe("StateChanged", self._on_state)
        self.bus.subscribe("NeedSought", self._on_need)
        self.bus.subscribe("RunReplaced", self._on_run_replaced)
        self.bus.subscribe("RunFinished", self._on_run_finished)
        self.bus.subscribe("RewardGranted", self._on_reward)

    # ── Control ──────────────────────────────────────────────────────

    @property
    def active(self) -> bool:
        return self._steps is not None

    def start(self) -> None:
        """Begin a cycle.  A cycle already in progress is restarted."""
        if self._steps is not None:
            self._steps.close()
        self._steps = self.steps()
        self._record("cycle", f"cycle started → {self.dungeon_id}")

    def abandon(self) -> None:
        if self._steps is None:
            return
        self._steps.close()
        self._steps = None
        self.phase = "idle"
        self._record("cycle", "cycle abandoned")

    def update(self, dt: float) -> None:
        """One frame: tick the actor, advance the sequence, drain telemetry."""
        self.time += dt
        self.actor.update(dt)
        if self._steps is not None:
            try:
                next(self._steps)
            except StopIteration:
                self._steps = None
                self.phase = "idle"
        self.bus.drain()

    # ── Sequence ─────────────────────────────────────────────────────

    def steps(self) -> Iterator[None]:
        actor = self.actor
        while True:
            self.phase = "to_dungeon"
            yield from self._walk_to(actor.locations.dungeon)

            self.phase = "delving"
            run = self.catalog.create(self.dungeon_id, rng=self.rng)
            actor.begin_dungeon_run(run)
            while actor.state.in_dungeon:
                yield

            self.phase = "reward"
            self._grant_reward(run)

            self.phase = "to_home"
            yield from self._walk_to(actor.locations.home)

            if not self.repeat:
                return
            yield

    def _walk_to(self, destination: Vec2) -> Iterator[None]:
        actor = self.actor
        radius = _tun("actor", "arrive_radius", 5.0)
        actor.set_travel(destination)
        # A queued need means the actor is only passing through on its
        # way to a service location.
        while (actor.pending_need is not None
               or actor.position.distance_to(destination) > radius):
            yield
            # A finished detour leaves the actor parked at the service
            # location; point it back at our destination.
            if (actor.state is ActorState.TRAVEL and not actor.is_busy
                    and actor.target_position.distance_to(destination) > 1e-6):
                actor.set_travel(destination)

    def _grant_reward(self, run) -> None:
        per_level = int(_tun("rewards", "per_level", 10))
        amount = per_level * (run.deepest_level_index + 1)
        self.wallet += amount
        self.runs_completed += 1
        self.bus.emit(RewardGranted(self.actor.name, run.name, amount, self.wallet))

    # ── Telemetry ────────────────────────────────────────────────────

    def _record(self, cat: str, msg: str, details: dict | None = None) -> None:
        self.log.record(cat, msg, name=self.actor.name, t=self.time,
                        details=details)

    def _on_status(self, event: StatusReport) -> None:
        self._record("status", str(event))
        if self.verbose:
            print(f"[STATUS] {event}")

    def _on_state(self, event: StateChanged) -> None:
        self._record("state", f"{event.old} → {event.new}")

    def _on_need(self, event: NeedSought) -> None:
        self._record("need", f"seeking {event.kind} at ({event.x}, {event.y})",
                     details={"kind": event.kind})

    def _on_run_replaced(self, event: RunReplaced) -> None:
        self._record("dungeon", f"{event.old} replaced by {event.new}")

    def _on_run_finished(self, event: RunFinished) -> None:
        self._record("dungeon", f"{event.dungeon} cleared to level "
                                f"{event.deepest_level + 1}",
                     details={"deepest": event.deepest_level})

    def _on_reward(self, event: RewardGranted) -> None:
        self._record("reward", f"+{event.amount} from {event.dungeon}",
                     details={"wallet": event.wallet})
        print(f"[CYCLE] {event.name} earned {event.amount} "
              f"(wallet {event.wallet})")
