"""
main.py — Bootstrap

1. Load tuning constants
2. Load the dungeon catalog
3. Spawn the actor at home
4. Wire the dungeon cycle orchestrator
5. Push the debug view and run
"""

import random

from core import tuning
from core.app import App
from components import Vec2, Locations
from logic.actor import ActorStateMachine
from simulation.dungeons import DungeonCatalog
from simulation.orchestrator import DungeonCycle
from scenes.life_scene import LifeScene


def main():
    tuning.load()
    catalog = DungeonCatalog.from_file("data/dungeons.toml")

    locations = Locations.from_section(tuning.section("world.locations"))
    name = tuning.get("world", "actor_name", "Ash")
    dungeon_id = tuning.get("world", "dungeon", "old_mine")
    if dungeon_id not in catalog.dungeons and catalog.dungeons:
        dungeon_id = catalog.names()[0]

    actor = ActorStateMachine(name, Vec2(locations.home.x, locations.home.y), locations)

    seed = tuning.get("world", "seed", None)
    cycle = DungeonCycle(actor, catalog, dungeon_id,
                         rng=random.Random(seed), repeat=True, verbose=True)
    cycle.start()

    app = App(title="Delver", width=960, height=640)
    app.push_scene(LifeScene(cycle))
    app.run()


if __name__ == "__main__":
    main()
