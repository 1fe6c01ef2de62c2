# dungeon/sim/texts.py
import json
import os
import random
from enum import Enum
from typing import Dict, List, Optional, Sequence

from dungeon.utils.logger import Logger

class TextType(Enum):
    ENTER_DUNGEON = "enter_dungeon"
    CORRIDOR = "corridor"
    BATTLE_START = "battle_start"
    BATTLE_WON = "battle_won"
    LOOT_FOUND = "loot_found"
    TREASURE_CHEST = "treasure_chest"
    LEAVE_DUNGEON = "leave_dungeon"

def pick_random_from_series(strings: Sequence[str], rng=None) -> Optional[str]:
    """
    Uniformly picks one string, or None if there is nothing to pick from.
    `rng` needs only `randrange(n)`; tests pass a seeded or scripted one.
    """
    if not strings:
        return None
    rng = rng or random
    return strings[rng.randrange(len(strings))]

class DungeonTexts:
    """Narration pools keyed by TextType."""

    def __init__(self, texts: Optional[Dict[TextType, List[str]]] = None):
        self.map: Dict[TextType, List[str]] = dict(texts or {})

    def get(self, text_type: TextType) -> List[str]:
        return self.map.get(text_type, [])

    @classmethod
    def from_dict(cls, data: Dict[str, List[str]]) -> 'DungeonTexts':
        texts: Dict[TextType, List[str]] = {}
        for key, lines in data.items():
            try:
                text_type = TextType(key)
            except ValueError:
                Logger.warning("DungeonTexts", f"Ignoring unknown text category '{key}'.")
                continue
            if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
                Logger.warning("DungeonTexts", f"Text category '{key}' must be a list of strings. Skipping.")
                continue
            texts[text_type] = list(lines)
        return cls(texts)

    @classmethod
    def load_from_file(cls, path: str) -> 'DungeonTexts':
        if not os.path.exists(path):
            Logger.error("DungeonTexts", f"Dungeon texts not found at {path}. No narration available.")
            return cls()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            Logger.error("DungeonTexts", f"Error loading dungeon texts from {path}: {e}")
            return cls()
        if not isinstance(data, dict):
            Logger.error("DungeonTexts", f"Dungeon texts in {path} must be a JSON object.")
            return cls()
        return cls.from_dict(data)
