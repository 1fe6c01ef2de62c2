# dungeon/sim/__init__.py
"""
Sim Package.
Narration and loot requests raised by the dungeon simulation, drained once per tick.
"""
from .events import EventQueue, SimMessageEvent, SimLootEvent, SpawnItemEvent
from .texts import TextType, DungeonTexts, pick_random_from_series
from .event_handling import handle_sim_message, handle_sim_loot
