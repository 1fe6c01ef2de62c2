# dungeon/items/item_catalog.py
import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from dungeon.utils.logger import Logger

Footprint = Tuple[int, int]  # (width, height) in grid cells

@dataclass(frozen=True)
class ItemTemplate:
    item_id: str
    name: str
    width: int = 1
    height: int = 1
    properties: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def footprint(self) -> Footprint:
        return self.width, self.height

    @classmethod
    def from_dict(cls, item_id: str, data: Dict[str, Any]) -> 'ItemTemplate':
        width = data.get("width", 1)
        height = data.get("height", 1)
        for label, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"item '{item_id}' has invalid {label} {value!r}")
        return cls(
            item_id=item_id,
            name=data.get("name", item_id),
            width=width,
            height=height,
            properties=dict(data.get("properties", {}))
        )

class ItemCatalog:
    """Resolves item ids to their grid footprint and template."""

    def __init__(self, templates: Optional[Dict[str, ItemTemplate]] = None):
        self.templates: Dict[str, ItemTemplate] = dict(templates or {})

    def register(self, template: ItemTemplate) -> None:
        if template.item_id in self.templates:
            Logger.warning("ItemCatalog", f"Overwriting item template '{template.item_id}'.")
        self.templates[template.item_id] = template

    def lookup(self, item_id: str) -> Optional[Tuple[Footprint, ItemTemplate]]:
        """Returns (footprint, template), or None for unknown or removed content."""
        template = self.templates.get(item_id)
        if template is None:
            return None
        return template.footprint, template

    def __contains__(self, item_id: str) -> bool:
        return item_id in self.templates

    def __len__(self) -> int:
        return len(self.templates)

    @classmethod
    def load_from_dir(cls, item_dir: str) -> 'ItemCatalog':
        """Loads every *.json file in `item_dir`; bad entries are skipped, never fatal."""
        catalog = cls()
        if not os.path.isdir(item_dir):
            Logger.warning("ItemCatalog", f"Item data directory not found: {item_dir}")
            return catalog

        for filename in sorted(os.listdir(item_dir)):
            if not filename.endswith(".json"):
                continue
            path = os.path.join(item_dir, filename)
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, ValueError, RecursionError) as e:
                Logger.error("ItemCatalog", f"Error loading item templates from {path}: {e}")
                continue
            if not isinstance(data, dict):
                Logger.error("ItemCatalog", f"Item templates in {path} must be a JSON object.")
                continue

            for item_id, template_data in data.items():
                try:
                    template = ItemTemplate.from_dict(item_id, template_data)
                except (ValueError, TypeError, AttributeError) as e:
                    Logger.warning("ItemCatalog", f"Skipping item template in {filename}: {e}")
                    continue
                catalog.register(template)

        Logger.info("ItemCatalog", f"Loaded {len(catalog)} item templates.")
        return catalog
