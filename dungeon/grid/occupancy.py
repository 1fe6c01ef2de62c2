# dungeon/grid/occupancy.py
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List

from dungeon.grid.region import Region

if TYPE_CHECKING:
    from dungeon.items.item_catalog import ItemTemplate
    from dungeon.sim.events import SpawnItemEvent

@dataclass
class PlacedItem:
    """An item instance occupying a region of one grid."""
    template: 'ItemTemplate'
    region: Region
    grid_name: str
    instance_id: str = field(default_factory=lambda: f"item_{uuid.uuid4().hex[:8]}")

class ItemGrids:
    """
    In-memory item placements keyed by grid name.
    Answers occupancy queries and acts as the spawn sink for loot handling.
    """

    def __init__(self):
        self.items: Dict[str, PlacedItem] = {}

    def regions_in(self, grid_name: str) -> List[Region]:
        """Point-in-time snapshot of occupied regions, in placement order."""
        return [item.region for item in self.items.values() if item.grid_name == grid_name]

    def place(self, grid_name: str, template: 'ItemTemplate', region: Region) -> PlacedItem:
        placed = PlacedItem(template=template, region=region, grid_name=grid_name)
        self.items[placed.instance_id] = placed
        return placed

    def spawn(self, event: 'SpawnItemEvent') -> PlacedItem:
        return self.place(event.grid_name, event.template, event.region)
