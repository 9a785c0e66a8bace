"""test_actor.py — ActorStateMachine travel, needs, dungeon runs, telemetry.

Map used throughout (units):

    entertainment (-300, 0)   home (0, 0)   food (200, 0)   dungeon (500, 0)
                              healing (0, 300)

Run:  python test_actor.py     (or pytest)
"""
from __future__ import annotations
import sys, traceback

from components import ActorState, Level, Locations, NeedOrder, Vec2
from core.events import (
    StatusReport, StateChanged, RunFinished, NeedSought, RunReplaced,
)
from logic.actor import ActorStateMachine, need_duration
from logic.dungeon import DungeonProgress


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


DT = 0.1

HOME = Vec2(0.0, 0.0)
FOOD = Vec2(200.0, 0.0)
DUNGEON = Vec2(500.0, 0.0)
HEALING = Vec2(0.0, 300.0)
FUN = Vec2(-300.0, 0.0)


class FixedRolls:
    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


def _locations() -> Locations:
    return Locations(home=HOME.copy(), dungeon=DUNGEON.copy(), food=FOOD.copy(),
                     healing=HEALING.copy(), entertainment=FUN.copy())


def _actor(at: Vec2 = HOME, **needs) -> ActorStateMachine:
    actor = ActorStateMachine("Tess", at, _locations(), speed=60.0)
    for key, value in needs.items():
        setattr(actor.needs, key, value)
    return actor


def _run(*times, p: float = 0.0, dmg: float = 0.0, roll: float = 0.99,
         name: str = "test_pit") -> DungeonProgress:
    levels = [Level(t, p, dmg) for t in times]
    return DungeonProgress(levels, rng=FixedRolls(roll), name=name)


def _tick_until(actor: ActorStateMachine, cond, limit: int = 5000) -> int:
    for i in range(limit):
        if cond():
            return i
        actor.update(DT)
    raise AssertionError(f"condition not met after {limit} ticks: {actor!r}")


# ════════════════════════════════════════════════════════════════════════
#  Need seeking
# ════════════════════════════════════════════════════════════════════════

def test_hunger_round_trip():
    actor = _actor(hunger=20.0)
    actor.update(DT)
    assert actor.pending_need == NeedOrder("eat", 3.0)
    assert actor.target_position == FOOD
    assert actor.state is ActorState.TRAVEL

    _tick_until(actor, lambda: actor.state is ActorState.SATISFYING_NEED)
    assert actor.active_need.kind == "eat"
    assert actor.pending_need is None
    assert actor.position.distance_to(FOOD) <= 5.0

    _tick_until(actor, lambda: actor.state is ActorState.TRAVEL)
    assert actor.hunger == 100.0
    assert actor.active_need is None
    assert actor.pending_need is None
    assert actor.target_position == FOOD          # no new order issued


def test_need_destinations_and_durations():
    cases = [
        (dict(vitality=40.0, hunger=10.0), "heal", HEALING, 6.0),
        (dict(sleepiness=10.0), "sleep", HOME, 5.0),
        (dict(boredom=10.0), "entertain", FUN, 4.0),
    ]
    for needs, kind, where, duration in cases:
        actor = _actor(at=Vec2(100.0, 100.0), **needs)
        actor.update(DT)
        assert actor.pending_need == NeedOrder(kind, duration), actor.pending_need
        assert actor.target_position == where


def test_unknown_need_goes_home():
    assert _locations().for_need("juggle") == HOME
    assert need_duration("juggle") == 0.0


def test_no_preemption_while_satisfying():
    actor = _actor()
    actor.start_need("sleep", 1.0)
    actor.needs.vitality = 10.0
    actor.update(0.5)
    assert actor.state is ActorState.SATISFYING_NEED
    assert actor.active_need == NeedOrder("sleep", 0.5)
    assert actor.pending_need is None

    actor.update(0.5)
    assert actor.state is ActorState.TRAVEL
    assert actor.sleepiness == 100.0
    assert actor.vitality == 10.0                 # heal only starts afterwards

    actor.update(DT)
    assert actor.pending_need.kind == "heal"


def test_no_preemption_while_seeking():
    actor = _actor(hunger=20.0)
    actor.update(DT)
    assert actor.pending_need.kind == "eat"
    actor.needs.vitality = 5.0
    actor.update(DT)
    assert actor.pending_need.kind == "eat"
    assert actor.target_position == FOOD


def test_arrival_without_need_takes_a_nap():
    actor = _actor()
    actor.set_travel(Vec2(30.0, 0.0))
    _tick_until(actor, lambda: actor.state is ActorState.SATISFYING_NEED)
    assert actor.active_need.kind == "sleep"
    assert actor.active_need.remaining <= 2.0


def test_movement_is_capped_by_speed():
    actor = _actor()
    actor.set_travel(Vec2(400.0, 0.0))
    actor.update(0.5)
    assert abs(actor.position.x - 30.0) < 1e-9
    assert actor.position.y == 0.0


def test_set_travel_drops_pending_need():
    actor = _actor(hunger=20.0)
    actor.update(DT)
    assert actor.pending_need is not None
    actor.set_travel(DUNGEON)
    assert actor.pending_need is None
    assert actor.target_position == DUNGEON


def test_start_need_in_place():
    actor = _actor(at=Vec2(50.0, 50.0), boredom=0.0)
    actor.start_need("entertain", 1.0)
    assert actor.state is ActorState.SATISFYING_NEED
    _tick_until(actor, lambda: actor.state is ActorState.TRAVEL)
    assert actor.boredom == 100.0
    assert actor.position == Vec2(50.0, 50.0)


# ════════════════════════════════════════════════════════════════════════
#  Dungeon runs
# ════════════════════════════════════════════════════════════════════════

def test_full_run_and_automatic_return_home():
    actor = _actor(at=DUNGEON)
    run = _run(2.0, 2.0)
    actor.begin_dungeon_run(run)
    assert actor.state is ActorState.IN_DUNGEON
    assert actor.run is run

    for _ in range(39):
        actor.update(DT)
        assert actor.state is ActorState.IN_DUNGEON
    _tick_until(actor, lambda: actor.state is ActorState.ESCAPING, limit=3)

    _tick_until(actor, lambda: actor.state is ActorState.TRAVEL, limit=100)
    assert actor.run is None
    assert run.finished
    assert actor.target_position == HOME


def test_position_is_pinned_during_run():
    actor = _actor(at=Vec2(480.0, 0.0))
    actor.begin_dungeon_run(_run(3.0, 3.0))
    assert actor.position == DUNGEON
    actor.set_travel(HOME)
    for _ in range(100):
        actor.position = Vec2(123.0, 456.0)
        actor.update(DT)
        if actor.state is ActorState.TRAVEL:
            break
        assert actor.position == DUNGEON


def test_low_vitality_triggers_escape():
    actor = _actor(at=DUNGEON)
    actor.begin_dungeon_run(_run(10.0, 10.0, 10.0))
    actor.needs.vitality = 20.0
    actor.update(DT)
    assert actor.state is ActorState.ESCAPING


def test_encounters_damage_the_actor():
    actor = _actor(at=DUNGEON)
    actor.begin_dungeon_run(_run(100.0, p=1.0, dmg=7.0, roll=0.0))
    for _ in range(10):                            # 1 s
        actor.update(DT)
    assert actor.vitality == 93.0


def test_begin_run_replaces_active_run():
    actor = _actor(at=DUNGEON)
    first = _run(10.0, name="first")
    second = _run(10.0, name="second")
    actor.begin_dungeon_run(first)
    actor.update(DT)
    actor.begin_dungeon_run(second)
    assert actor.run is second
    assert actor.state is ActorState.IN_DUNGEON


def test_begin_run_clears_need_orders():
    actor = _actor(at=DUNGEON)
    actor.start_need("sleep", 2.0)
    actor.begin_dungeon_run(_run(1.0))
    assert actor.active_need is None
    assert actor.pending_need is None


def test_start_need_ignored_during_run():
    actor = _actor(at=DUNGEON)
    actor.begin_dungeon_run(_run(10.0))
    actor.start_need("eat", 3.0)
    assert actor.state is ActorState.IN_DUNGEON
    assert actor.active_need is None


def test_needs_decay_in_dungeon():
    actor = _actor(at=DUNGEON)
    actor.begin_dungeon_run(_run(100.0))
    actor.update(1.0)
    assert actor.hunger == 96.0
    assert actor.boredom == 99.0


# ════════════════════════════════════════════════════════════════════════
#  Telemetry
# ════════════════════════════════════════════════════════════════════════

def test_status_report_once_per_second():
    actor = _actor(at=Vec2(10.4, 19.6))
    events: list = []
    actor.add_listener(events.append)
    for _ in range(8):
        actor.update(0.25)
    reports = [e for e in events if isinstance(e, StatusReport)]
    assert len(reports) == 2
    first = reports[0]
    assert first.name == "Tess"
    assert first.state in ("Travel", "SatisfyingNeed")
    text = str(first)
    assert "Tess" in text and "HP" in text and "Hunger" in text

    actor.remove_listener(events.append)
    for _ in range(8):
        actor.update(0.25)
    assert len([e for e in events if isinstance(e, StatusReport)]) == 2


def test_state_change_and_run_finished_events():
    actor = _actor(at=DUNGEON)
    events: list = []
    actor.add_listener(events.append)
    actor.begin_dungeon_run(_run(1.0, name="crypt"))
    _tick_until(actor, lambda: actor.state is ActorState.TRAVEL, limit=100)

    changes = [(e.old, e.new) for e in events if isinstance(e, StateChanged)]
    assert changes == [("Travel", "InDungeon"), ("InDungeon", "Escaping"),
                       ("Escaping", "Travel")]
    finished = [e for e in events if isinstance(e, RunFinished)]
    assert len(finished) == 1
    assert finished[0].dungeon == "crypt"
    assert finished[0].deepest_level == 0


def test_need_and_replacement_events():
    actor = _actor(hunger=20.0)
    events: list = []
    actor.add_listener(events.append)
    actor.update(DT)
    sought = [e for e in events if isinstance(e, NeedSought)]
    assert sought == [NeedSought("Tess", "eat", 200, 0)]

    actor.begin_dungeon_run(_run(10.0, name="first"))
    actor.begin_dungeon_run(_run(10.0, name="second"))
    replaced = [e for e in events if isinstance(e, RunReplaced)]
    assert replaced == [RunReplaced("Tess", "first", "second")]


if __name__ == "__main__":
    print("\n=== ActorStateMachine ===")
    for _name, _fn in list(globals().items()):
        if _name.startswith("test_") and callable(_fn):
            try:
                _fn()
                ok(_name)
            except Exception:
                fail(_name, traceback.format_exc())
    print(f"\n{_passed} passed, {_failed} failed")
    sys.exit(1 if _failed else 0)
