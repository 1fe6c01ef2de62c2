# dungeon/grid/__init__.py
"""
Grid Package.
Regions, equipment slots, first-fit placement and item occupancy.
"""
from .region import Region
from .equipment_slot import EquipmentSlot
from .free_space import find_free_space, scan_anchors
from .occupancy import ItemGrids, PlacedItem
