# dungeon/config/config_grid.py
"""
Grid layout configuration: where the drop-in, inventory, crafting and
equipment panels sit, loaded from JSON with an override layer.
"""
import json
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from dungeon.config.config_game import CONFIG_DEFAULT_DIR, CONFIG_OVERRIDE_DIR, GRID_CONFIG_FILENAME
from dungeon.grid.equipment_slot import EquipmentSlot
from dungeon.grid.region import Region
from dungeon.utils.logger import Logger

__all__ = ["GridConfigError", "EquipmentGrid", "GridConfig", "load_from_path"]

GRID_FIELDS = ("drop_in", "inventory", "crafting", "equipped")
EQUIPMENT_FIELDS = ("coords", "slots")

class GridConfigError(Exception):
    """The grid config could not be read or does not match the schema."""

def _check_fields(data: Any, expected, what: str) -> None:
    if not isinstance(data, dict):
        raise GridConfigError(f"{what} must be an object, got {type(data).__name__}")
    unknown = sorted(set(data) - set(expected))
    if unknown:
        raise GridConfigError(f"unknown field(s) in {what}: {', '.join(unknown)}")
    missing = [name for name in expected if name not in data]
    if missing:
        raise GridConfigError(f"missing field(s) in {what}: {', '.join(missing)}")

def _parse_region(data: Any, what: str) -> Region:
    try:
        return Region.from_dict(data)
    except ValueError as e:
        raise GridConfigError(f"{what}: {e}") from e

@dataclass(frozen=True)
class EquipmentGrid:
    # Absolute coordinates of the equipment panel. Slot regions are relative to this.
    coords: Region = field(default_factory=Region)
    slots: Mapping[EquipmentSlot, Region] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "slots", MappingProxyType(dict(self.slots)))

    def slot_region(self, slot: EquipmentSlot) -> Optional[Region]:
        return self.slots.get(slot)

    def absolute_slot_region(self, slot: EquipmentSlot) -> Optional[Region]:
        region = self.slots.get(slot)
        if region is None:
            return None
        return region.offset(self.coords.row, self.coords.col)

    def slots_outside_panel(self) -> List[EquipmentSlot]:
        """Slots whose region does not fit inside the panel, in enum order."""
        panel = Region(0, 0, self.coords.width, self.coords.height)
        return [slot for slot in EquipmentSlot if slot in self.slots and not panel.contains(self.slots[slot])]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "coords": self.coords.to_dict(),
            "slots": {slot.value: region.to_dict() for slot, region in self.slots.items()}
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'EquipmentGrid':
        _check_fields(data, EQUIPMENT_FIELDS, "equipped")
        slots_data = data["slots"]
        if not isinstance(slots_data, dict):
            raise GridConfigError(f"equipped.slots must be an object, got {type(slots_data).__name__}")

        slots: Dict[EquipmentSlot, Region] = {}
        for name, region_data in slots_data.items():
            try:
                slot = EquipmentSlot.from_name(name)
            except ValueError as e:
                raise GridConfigError(f"equipped.slots: {e}") from e
            slots[slot] = _parse_region(region_data, f"equipped.slots.{name}")
        return cls(coords=_parse_region(data["coords"], "equipped.coords"), slots=slots)

@dataclass(frozen=True)
class GridConfig:
    # An invisible grid above the inventory grid, this is where new items spawn in.
    drop_in: Region = field(default_factory=Region)
    # This is where items are stored.
    inventory: Region = field(default_factory=Region)
    # A small crafting window used for recipes of more than two ingredients.
    crafting: Region = field(default_factory=Region)
    equipped: EquipmentGrid = field(default_factory=EquipmentGrid)

    @classmethod
    def default(cls) -> 'GridConfig':
        """The inert layout: every grid is degenerate, no slots."""
        return cls()

    def grid(self, name: str) -> Region:
        """Bounds of a grid by name; the equipment grid resolves to its panel."""
        if name == "equipped":
            return self.equipped.coords
        if name in ("drop_in", "inventory", "crafting"):
            return getattr(self, name)
        raise KeyError(f"Unknown grid '{name}'")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "drop_in": self.drop_in.to_dict(),
            "inventory": self.inventory.to_dict(),
            "crafting": self.crafting.to_dict(),
            "equipped": self.equipped.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'GridConfig':
        _check_fields(data, GRID_FIELDS, "grid config")
        return cls(
            drop_in=_parse_region(data["drop_in"], "drop_in"),
            inventory=_parse_region(data["inventory"], "inventory"),
            crafting=_parse_region(data["crafting"], "crafting"),
            equipped=EquipmentGrid.from_dict(data["equipped"])
        )

    @classmethod
    def load_from_file(cls, default_dir: str = CONFIG_DEFAULT_DIR,
                       override_dir: str = CONFIG_OVERRIDE_DIR) -> 'GridConfig':
        """
        Loads the most relevant GridConfig. Never raises.

        If the override file exists it is the only source tried: when it fails
        to load, an error is logged and GridConfig.default() is used. The
        default file is only read when there is no override file.
        """
        override_file = os.path.join(override_dir, GRID_CONFIG_FILENAME)
        if os.path.exists(override_file):
            return load_from_path(override_file)
        return load_from_path(os.path.join(default_dir, GRID_CONFIG_FILENAME))

def _read_grid_config(path: str) -> GridConfig:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError, RecursionError) as e:
        raise GridConfigError(str(e)) from e
    return GridConfig.from_dict(data)

def load_from_path(path: str) -> GridConfig:
    try:
        config = _read_grid_config(path)
    except GridConfigError as e:
        Logger.error(
            "GridConfig",
            f"Failed to load the grid config file from {path!r}! Falling back to GridConfig.default(). Error: {e}"
        )
        return GridConfig.default()

    for slot in config.equipped.slots_outside_panel():
        Logger.warning(
            "GridConfig",
            f"Equipment slot '{slot.value}' at {config.equipped.slots[slot]} lies outside the "
            f"equipment panel {config.equipped.coords} in {path!r}."
        )
    Logger.debug("GridConfig", f"Loaded grid config from {path!r}.")
    return config
