"""components.dev_log — Structured actor / orchestrator event log.

A ring-buffer that records timestamped state changes, need orders,
dungeon events and the 1 Hz status reports.  The debug view reads it
to show a live feed of what the actor is doing and why.

Usage:
    log = DevLog()
    log.record("state", "Travel → InDungeon", name="Ash", t=12.5)

Each entry is a dict:
    {"t": float, "name": str, "cat": str, "msg": str, "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    """Ring-buffer of actor / system events."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 500

    def record(self, cat: str, msg: str, *,
               name: str = "", t: float = 0.0,
               details: dict | None = None) -> None:
        self.entries.append({
            "t": t,
            "name": name,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def recent(self, n: int = 50) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        """Return last *n* entries in a category."""
        return [e for e in self.entries if e["cat"] == cat][-n:]

    def latest(self, cat: str) -> dict | None:
        for entry in reversed(self.entries):
            if entry["cat"] == cat:
                return entry
        return None
