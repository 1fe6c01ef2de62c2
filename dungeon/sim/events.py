# dungeon/sim/events.py
"""
Event types and per-tick queues for the sim handlers.
"""
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Deque, Generic, List, TypeVar

from dungeon.config.config_game import DEFAULT_LOOT_GRID
from dungeon.grid.region import Region

if TYPE_CHECKING:
    from dungeon.items.item_catalog import ItemTemplate
    from dungeon.sim.texts import TextType

@dataclass(frozen=True)
class SimMessageEvent:
    """Cause a narration line to be printed."""
    text_type: 'TextType'

@dataclass(frozen=True)
class SimLootEvent:
    """Handle a looting session: try to spawn one item."""
    item_id: str

@dataclass(frozen=True)
class SpawnItemEvent:
    """Outbound request to materialize an item at a chosen region."""
    template: 'ItemTemplate'
    region: Region
    grid_name: str = DEFAULT_LOOT_GRID

E = TypeVar("E")

class EventQueue(Generic[E]):
    """
    FIFO buffer for one event kind.
    Producers `send` at any point in a tick; the consuming handler `drain`s
    everything exactly once, so nothing carries over to the next tick.
    """

    def __init__(self):
        self._pending: Deque[E] = deque()

    def send(self, event: E) -> None:
        self._pending.append(event)

    def send_batch(self, events) -> None:
        self._pending.extend(events)

    def drain(self) -> List[E]:
        drained = list(self._pending)
        self._pending.clear()
        return drained

    def is_empty(self) -> bool:
        return not self._pending

    def __len__(self) -> int:
        return len(self._pending)
