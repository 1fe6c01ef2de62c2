# tests/fixtures.py
import unittest
import sys
import os
from typing import List, Sequence

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'dungeon'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from dungeon.config.config_grid import EquipmentGrid, GridConfig
from dungeon.grid.equipment_slot import EquipmentSlot
from dungeon.grid.occupancy import ItemGrids
from dungeon.grid.region import Region
from dungeon.items.item_catalog import ItemCatalog, ItemTemplate
from dungeon.sim.texts import DungeonTexts, TextType
from dungeon.utils.logger import Logger, LogLevel

class ScriptedRng:
    """Stands in for `random`: returns queued indices from randrange, in order."""
    def __init__(self, indices: Sequence[int]):
        self.indices = list(indices)
        self.calls: List[int] = []

    def randrange(self, n: int) -> int:
        self.calls.append(n)
        return self.indices.pop(0) % n

class RecordingSink:
    """Collects whatever a handler emits."""
    def __init__(self):
        self.received: List = []

    def __call__(self, value):
        self.received.append(value)

def make_catalog() -> ItemCatalog:
    return ItemCatalog({
        "item_gem": ItemTemplate("item_gem", "Gem", 1, 1),
        "item_shield": ItemTemplate("item_shield", "Shield", 2, 2),
        "item_sword": ItemTemplate("item_sword", "Sword", 1, 3),
        "item_plank": ItemTemplate("item_plank", "Plank", 4, 1),
    })

def make_config(drop_in: Region = Region(0, 0, 4, 4)) -> GridConfig:
    return GridConfig(
        drop_in=drop_in,
        inventory=Region(5, 0, 8, 6),
        crafting=Region(5, 10, 3, 3),
        equipped=EquipmentGrid(
            coords=Region(0, 10, 6, 4),
            slots={
                EquipmentSlot.HEAD: Region(0, 2, 2, 1),
                EquipmentSlot.MAIN_HAND: Region(1, 0, 2, 3),
            }
        )
    )

class SimTestBase(unittest.TestCase):
    """Base class for sim tests: fresh grids, catalog, texts and sinks per test."""

    def setUp(self):
        self._previous_level = Logger._level
        # Keep test output quiet; patched log calls are still counted
        Logger.set_level(LogLevel.CRITICAL + 1)

        self.config = make_config()
        self.catalog = make_catalog()
        self.grids = ItemGrids()
        self.texts = DungeonTexts({
            TextType.CORRIDOR: ["Water drips somewhere in the dark."],
            TextType.BATTLE_START: ["Ambush!", "Something lunges at you!", "A growl echoes."],
            TextType.LOOT_FOUND: [],
        })
        self.narration = RecordingSink()
        self.spawns = RecordingSink()

    def tearDown(self):
        Logger.set_level(self._previous_level)

    def spawn_and_place(self, event):
        """Spawn sink that records the event and places the item, like the real engine."""
        self.spawns(event)
        self.grids.spawn(event)

    def anchors(self):
        return [(event.region.row, event.region.col) for event in self.spawns.received]
