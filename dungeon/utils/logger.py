# dungeon/utils/logger.py
import datetime
from typing import Optional

class LogLevel:
    TRACE = -1 # Per-event chatter from the sim handlers
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

LEVEL_NAMES = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT"
}

class Logger:
    """
    Process-wide log facility.
    Lines are stamped with the wall clock and, while the tick scheduler is
    running, with the current simulation tick.
    """
    _instance = None
    _level = LogLevel.INFO
    _tick: Optional[int] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum logging level."""
        cls._level = level

    @classmethod
    def is_enabled(cls, level: int) -> bool:
        return level >= cls._level

    @classmethod
    def set_tick(cls, tick: Optional[int]):
        """Tags subsequent lines with a tick number (None clears it)."""
        cls._tick = tick

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if not cls.is_enabled(level):
            return
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        level_name = LEVEL_NAMES.get(level, "LOG")
        tick_tag = f" [T{cls._tick:05d}]" if cls._tick is not None else ""

        # Format: [TIME] [LEVEL] [Tnnnnn] [Source] Message
        print(f"[{timestamp}] [{level_name:<5}]{tick_tag} [{source}] {message}")

    @classmethod
    def trace(cls, source: str, message: str):
        cls._log(LogLevel.TRACE, source, message)

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
