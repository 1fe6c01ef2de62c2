# dungeon/sim/event_handling.py
"""
Per-tick consumers for sim narration and loot requests.

Both handlers drain their queue completely, in arrival order. A bad event
(unknown item, missing text) is skipped on its own; the rest of the batch
still runs.
"""
from typing import TYPE_CHECKING, Callable, List

from dungeon.config.config_game import DEFAULT_LOOT_GRID
from dungeon.grid.free_space import find_free_space
from dungeon.grid.region import Region
from dungeon.sim.events import EventQueue, SimLootEvent, SimMessageEvent, SpawnItemEvent
from dungeon.sim.texts import DungeonTexts, pick_random_from_series
from dungeon.utils.logger import Logger

if TYPE_CHECKING:
    from dungeon.grid.occupancy import ItemGrids
    from dungeon.items.item_catalog import ItemCatalog

def handle_sim_message(events: EventQueue[SimMessageEvent], texts: DungeonTexts,
                       narrate: Callable[[str], None], rng=None) -> int:
    """Emits one random line per narration request. Returns how many were emitted."""
    emitted = 0
    for event in events.drain():
        Logger.trace("SimMessage", f"Received sim message event for TextType.{event.text_type.name}")
        message = pick_random_from_series(texts.get(event.text_type), rng)
        if message is None:
            Logger.error("SimMessage", f"Missing or empty dungeon text: TextType.{event.text_type.name}")
            continue
        narrate(message)
        emitted += 1
    return emitted

def handle_sim_loot(events: EventQueue[SimLootEvent], grid_bound: Region, catalog: 'ItemCatalog',
                    occupancy: 'ItemGrids', spawn: Callable[[SpawnItemEvent], None],
                    grid_name: str = DEFAULT_LOOT_GRID) -> int:
    """
    Spawns each looted item at the first free spot. Returns how many spawned.

    `catalog` needs `lookup(item_id)` and `occupancy` needs `regions_in(grid_name)`;
    ItemCatalog and ItemGrids are the in-repo implementations.
    """
    # Regions handed to `spawn` this call. The sink may materialize items
    # later, so they are not guaranteed to show up in `occupancy` yet.
    emitted: List[Region] = []
    for event in events.drain():
        Logger.trace("SimLoot", f"Received sim loot event for '{event.item_id}'")
        found = catalog.lookup(event.item_id)
        if found is None:
            Logger.debug("SimLoot", f"Unknown item id '{event.item_id}', nothing to spawn.")
            continue

        (width, height), template = found
        occupied = list(occupancy.regions_in(grid_name)) + emitted
        region = find_free_space(grid_bound, width, height, occupied)
        if region is None:
            Logger.debug("SimLoot", f"No room in '{grid_name}' for {template.name} ({width}x{height}).")
            continue

        spawn(SpawnItemEvent(template, region, grid_name))
        emitted.append(region)
    return len(emitted)
