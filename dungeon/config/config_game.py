# dungeon/config/config_game.py
"""
Configuration for file locations and the tick loop.
"""
import os

# --- Directories and Files ---
# config_game.py is in dungeon/config/, so we go up two levels to get to root.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_DIR = os.path.join(BASE_DIR, "data")
CONFIG_DIR = os.path.join(DATA_DIR, "config")
CONFIG_DEFAULT_DIR = os.path.join(CONFIG_DIR, "default")
CONFIG_OVERRIDE_DIR = os.path.join(CONFIG_DIR, "override")
ITEM_DATA_DIR = os.path.join(DATA_DIR, "items")
TEXTS_FILE = os.path.join(DATA_DIR, "sim", "texts.json")

GRID_CONFIG_FILENAME = "grid.json"

# --- Tick Loop Settings ---
TICK_RATE = 20  # Fixed steps per second
DEFAULT_LOOT_GRID = "drop_in"  # New items spawn into the drop-in area
