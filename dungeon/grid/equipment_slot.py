# dungeon/grid/equipment_slot.py
from enum import Enum

class EquipmentSlot(Enum):
    """Fixed set of equipment panel slots, serialized by value."""
    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"
    HEAD = "head"
    BODY = "body"
    HANDS = "hands"
    FEET = "feet"
    NECK = "neck"

    @classmethod
    def from_name(cls, name: str) -> 'EquipmentSlot':
        """Looks up a slot by its config name. Raises ValueError if unknown."""
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(slot.value for slot in cls)
            raise ValueError(f"unknown equipment slot '{name}' (valid: {valid})") from None
