"""simulation — Orchestration around a single actor.

Submodules
----------
dungeons      DungeonCatalog — dungeon level tables loaded from TOML
orchestrator  DungeonCycle — travel → delve → escape → reward → home
"""
