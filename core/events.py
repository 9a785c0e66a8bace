"""core/events.py — Telemetry events and a bounded event bus.

The actor never talks to a console or a log directly.  It calls its
registered listeners with plain event dataclasses; the orchestrator
registers ``bus.emit`` as a listener and drains the bus once per frame::

    bus = EventBus()
    actor.add_listener(bus.emit)
    bus.subscribe("StatusReport", print)
    ...
    bus.drain()          # calls all handlers for pending events

Design rules:
  - Events are plain dataclasses — no behaviour beyond formatting.
  - ``emit()`` is O(1) (just appends).  When the queue is full the
    oldest event is dropped; telemetry is best-effort.
  - ``drain()`` processes all queued events in FIFO order.
  - Handlers may emit new events; those are processed next drain.
"""

from __future__ import annotations
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Any, Callable


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class StatusReport:
    """Periodic (≈1 Hz) snapshot of an actor.  Advisory only."""
    name: str
    x: int
    y: int
    state: str
    vitality: float
    hunger: float
    sleepiness: float
    boredom: float

    def __str__(self) -> str:
        return (f"{self.name} @ ({self.x}, {self.y}) [{self.state}] "
                f"HP {self.vitality:.0f}  Hunger {self.hunger:.0f}  "
                f"Sleep {self.sleepiness:.0f}  Boredom {self.boredom:.0f}")


@dataclass
class StateChanged:
    """The actor moved between top-level states."""
    name: str
    old: str
    new: str


@dataclass
class NeedSought:
    """The actor turned toward a service location for a low need."""
    name: str
    kind: str
    x: int
    y: int


@dataclass
class RunReplaced:
    """A run was started while another was still in progress."""
    name: str
    old: str
    new: str


@dataclass
class RunFinished:
    """A dungeon run reached the surface."""
    name: str
    dungeon: str
    deepest_level: int


@dataclass
class RewardGranted:
    """The orchestrator paid out for a completed run."""
    name: str
    dungeon: str
    amount: int
    wallet: int


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus with a bounded queue."""

    def __init__(self, max_pending: int = 256):
        self._queue: deque[Any] = deque()
        self._subs: dict[str, list[Callable]] = defaultdict(list)
        self._stats: dict[str, int] = defaultdict(int)
        self.max_pending = max_pending
        self.dropped = 0

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        if len(self._queue) >= self.max_pending:
            self._queue.popleft()
            self.dropped += 1
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* to receive events of *event_type*.

        *event_type* is the class name, e.g. ``"StatusReport"``.
        """
        self._subs[event_type].append(handler)

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        Events emitted by handlers wait for the next drain.
        """
        batch = list(self._queue)
        self._queue.clear()
        for event in batch:
            name = type(event).__name__
            self._stats[name] += 1
            for handler in self._subs.get(name, []):
                try:
                    handler(event)
                except Exception as exc:
                    print(f"[EVENT] handler error for {name}: {exc}")
                    import traceback; traceback.print_exc()
        return len(batch)

    def stats(self) -> dict[str, int]:
        """Return cumulative event counts by type."""
        return dict(self._stats)

    def pending_count(self) -> int:
        """Number of events waiting to be drained."""
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"
