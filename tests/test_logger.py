# tests/test_logger.py
import unittest
from unittest.mock import patch
from tests.fixtures import PROJECT_ROOT  # noqa: F401 (puts the project root on sys.path)
from dungeon.utils.logger import Logger, LogLevel

class TestLogger(unittest.TestCase):

    def setUp(self):
        self._previous_level = Logger._level

    def tearDown(self):
        Logger.set_level(self._previous_level)
        Logger.set_tick(None)

    def test_level_threshold(self):
        Logger.set_level(LogLevel.ERROR)
        with patch('builtins.print') as mock_print:
            Logger.warning("GridConfig", "hidden")
            Logger.error("GridConfig", "shown")
        self.assertEqual(mock_print.call_count, 1)
        self.assertIn("shown", mock_print.call_args[0][0])

    def test_line_format_with_tick(self):
        Logger.set_level(LogLevel.TRACE)
        Logger.set_tick(12)
        with patch('builtins.print') as mock_print:
            Logger.trace("SimLoot", "Received sim loot event")
        line = mock_print.call_args[0][0]
        self.assertIn("[TRACE] [T00012] [SimLoot] Received sim loot event", line)

    def test_line_format_without_tick(self):
        Logger.set_level(LogLevel.DEBUG)
        with patch('builtins.print') as mock_print:
            Logger.error("GridConfig", "boom")
        self.assertTrue(mock_print.call_args[0][0].endswith("[ERROR] [GridConfig] boom"))

    def test_singleton(self):
        self.assertIs(Logger(), Logger())
