"""simulation/dungeons.py — Dungeon definitions loaded from TOML.

Usage:
    # At startup (main.py):
    catalog = DungeonCatalog.from_file("data/dungeons.toml")

    # Per assignment — every run is a fresh object:
    run = catalog.create("old_mine", rng=random.Random(7))

File format::

    [dungeons.old_mine]
    description = "Collapsed tunnels under the ridge"
    levels = [
        { travel_time = 8.0, spawn_probability = 0.10, monster_damage = 4.0 },
        { travel_time = 10.0, spawn_probability = 0.25, monster_damage = 8.0 },
    ]
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib

from components.dungeon import Level
from logic.dungeon import DungeonProgress, check_levels


@dataclass
class DungeonDef:
    name: str = ""
    description: str = ""
    levels: tuple[Level, ...] = field(default_factory=tuple)


class DungeonCatalog:
    """All known dungeons by id."""

    def __init__(self):
        self.dungeons: dict[str, DungeonDef] = {}

    # ── public API ──────────────────────────────────────────────────

    def add(self, name: str, levels, description: str = "") -> DungeonDef:
        d = DungeonDef(name=name, description=description, levels=tuple(levels))
        self.dungeons[name] = d
        return d

    def create(self, dungeon_id: str, rng=None) -> DungeonProgress:
        """Start a new run of *dungeon_id*.

        Raises ``KeyError`` for an unknown id and ``InvalidRunDefinition``
        if the dungeon has no levels.
        """
        d = self.dungeons.get(dungeon_id)
        if d is None:
            print(f"[DUNGEON] unknown dungeon: {dungeon_id}")
            raise KeyError(dungeon_id)
        return DungeonProgress(d.levels, rng=rng, name=d.name)

    def names(self) -> list[str]:
        return sorted(self.dungeons)

    # ── loading ─────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: dict) -> DungeonCatalog:
        catalog = cls()
        for name, ddata in data.get("dungeons", {}).items():
            levels = [Level.from_dict(l) for l in ddata.get("levels", [])]
            if levels:
                # An empty list is only refused when a run is created.
                check_levels(tuple(levels), name)
            catalog.add(name, levels, ddata.get("description", ""))
        return catalog

    @classmethod
    def from_file(cls, filepath: str | Path) -> DungeonCatalog:
        filepath = Path(filepath)
        if not filepath.exists():
            alt = Path(__file__).parent.parent / "data" / "dungeons.toml"
            filepath = alt if alt.exists() else filepath
        if not filepath.exists():
            print(f"[DUNGEON] file not found: {filepath}")
            return cls()

        with open(filepath, "rb") as f:
            data = tomllib.load(f)

        catalog = cls.from_dict(data)
        print(f"[DUNGEON] loaded {len(catalog.dungeons)} dungeons")
        return catalog
