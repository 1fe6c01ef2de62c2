# dungeon/core/simulation.py
"""
Wires the grid config, item catalog, narration texts and item grids into the
two sim handlers and registers them with the tick scheduler.
"""
from typing import Callable, List, Optional

from dungeon.config import DEFAULT_LOOT_GRID, ITEM_DATA_DIR, TEXTS_FILE, TICK_RATE, GridConfig
from dungeon.core.tick_scheduler import TickScheduler
from dungeon.grid.occupancy import ItemGrids
from dungeon.items.item_catalog import ItemCatalog
from dungeon.sim.event_handling import handle_sim_loot, handle_sim_message
from dungeon.sim.events import EventQueue, SimLootEvent, SimMessageEvent, SpawnItemEvent
from dungeon.sim.texts import DungeonTexts, TextType
from dungeon.utils.logger import Logger

class DungeonSimulation:
    def __init__(self, config: GridConfig, catalog: ItemCatalog, texts: DungeonTexts,
                 occupancy: Optional[ItemGrids] = None,
                 narrate: Callable[[str], None] = print,
                 spawn: Optional[Callable[[SpawnItemEvent], None]] = None,
                 rng=None, loot_grid: str = DEFAULT_LOOT_GRID, tick_rate: int = TICK_RATE):
        self.config = config
        self.catalog = catalog
        self.texts = texts
        self.occupancy = occupancy if occupancy is not None else ItemGrids()
        self.narrate = narrate
        self.spawn = spawn or self.occupancy.spawn
        self.rng = rng
        self.loot_grid = loot_grid
        # Unknown grid names raise KeyError here, before any tick runs
        self.loot_bound = config.grid(loot_grid)

        self.message_events: EventQueue[SimMessageEvent] = EventQueue()
        self.loot_events: EventQueue[SimLootEvent] = EventQueue()
        self.last_tick_stats = {"messages": 0, "spawned": 0}

        self.scheduler = TickScheduler(tick_rate)
        self.scheduler.add_system(self._run_message_system)
        self.scheduler.add_system(self._run_loot_system)

    @classmethod
    def from_data_files(cls, **kwargs) -> 'DungeonSimulation':
        """Loads config, items and texts from the data directory."""
        config = GridConfig.load_from_file()
        catalog = ItemCatalog.load_from_dir(ITEM_DATA_DIR)
        texts = DungeonTexts.load_from_file(TEXTS_FILE)
        return cls(config, catalog, texts, **kwargs)

    def request_message(self, text_type: TextType) -> None:
        self.message_events.send(SimMessageEvent(text_type))

    def request_loot(self, item_ids: List[str]) -> None:
        self.loot_events.send_batch(SimLootEvent(item_id) for item_id in item_ids)

    def tick(self) -> None:
        self.scheduler.step()

    def run(self, max_ticks: Optional[int] = None, clock=None) -> int:
        return self.scheduler.run(max_ticks, clock)

    def _run_message_system(self) -> None:
        self.last_tick_stats["messages"] = handle_sim_message(
            self.message_events, self.texts, self.narrate, self.rng)

    def _run_loot_system(self) -> None:
        spawned = handle_sim_loot(
            self.loot_events, self.loot_bound, self.catalog, self.occupancy, self.spawn, self.loot_grid)
        self.last_tick_stats["spawned"] = spawned
        if spawned:
            Logger.debug("SimLoot", f"Spawned {spawned} item(s) into '{self.loot_grid}'.")
