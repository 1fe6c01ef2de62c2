# dungeon/items/__init__.py
"""
Items Package.
Item templates and the catalog that resolves item ids to footprints.
"""
from .item_catalog import ItemTemplate, ItemCatalog
