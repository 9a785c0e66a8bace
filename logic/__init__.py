"""logic — Simulation systems package.

Top-level modules
-----------------
needs      — NeedsModel: vitality / need gauges, decay, priority, restoration
dungeon    — DungeonProgress: per-run depth progression and encounters
actor      — ActorStateMachine: travel, need seeking, dungeon runs
movement   — straight-line travel helpers
"""
