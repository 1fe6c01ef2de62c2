# dungeon/core/tick_scheduler.py
from typing import Callable, List, Optional

import pygame

from dungeon.config.config_game import TICK_RATE
from dungeon.utils.logger import Logger

System = Callable[[], None]

class TickScheduler:
    """
    Fixed-step driver: every registered system runs exactly once per tick,
    in registration order, on one thread.
    """

    def __init__(self, tick_rate: int = TICK_RATE):
        self.tick_rate = tick_rate
        self.systems: List[System] = []
        self.tick_count = 0
        self.running = False

    def add_system(self, system: System) -> None:
        if system in self.systems:
            Logger.warning("TickScheduler", f"System {getattr(system, '__name__', system)!r} already registered.")
            return
        self.systems.append(system)

    def step(self) -> None:
        """Runs one tick."""
        Logger.set_tick(self.tick_count)
        try:
            for system in self.systems:
                system()
        finally:
            Logger.set_tick(None)
        self.tick_count += 1

    def stop(self) -> None:
        self.running = False

    def run(self, max_ticks: Optional[int] = None, clock: Optional[pygame.time.Clock] = None) -> int:
        """
        Steps at `tick_rate` until stopped or `max_ticks` ticks have run.
        Returns the number of ticks executed by this call.
        """
        clock = clock or pygame.time.Clock()
        self.running = True
        executed = 0
        Logger.info("TickScheduler", f"Starting tick loop at {self.tick_rate} ticks/s with {len(self.systems)} systems.")
        while self.running and (max_ticks is None or executed < max_ticks):
            clock.tick(self.tick_rate)
            self.step()
            executed += 1
        self.running = False
        Logger.info("TickScheduler", f"Tick loop stopped after {executed} ticks.")
        return executed
