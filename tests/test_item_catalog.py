# tests/test_item_catalog.py
import json
import os
import tempfile
import unittest
from unittest.mock import patch
from tests.fixtures import make_catalog
from dungeon.config import ITEM_DATA_DIR
from dungeon.items.item_catalog import ItemCatalog, ItemTemplate
from dungeon.utils.logger import Logger

class TestItemCatalog(unittest.TestCase):

    def test_lookup_returns_footprint_and_template(self):
        footprint, template = make_catalog().lookup("item_sword")
        self.assertEqual(footprint, (1, 3))
        self.assertEqual(template.name, "Sword")

    def test_lookup_unknown_returns_none(self):
        self.assertIsNone(make_catalog().lookup("item_missing"))

    def test_template_defaults_to_single_cell(self):
        template = ItemTemplate.from_dict("item_pebble", {"name": "Pebble"})
        self.assertEqual(template.footprint, (1, 1))
        self.assertEqual(template.properties, {})

    def test_template_rejects_bad_footprint(self):
        for bad in (0, -2, 1.5, "2", False):
            with self.assertRaises(ValueError, msg=repr(bad)):
                ItemTemplate.from_dict("item_bad", {"name": "Bad", "width": bad})

    def test_load_from_dir_skips_bad_entries_and_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            with open(os.path.join(tmp, "good.json"), 'w') as f:
                json.dump({
                    "item_a": {"name": "A", "width": 2, "height": 1},
                    "item_b": {"name": "B", "width": 0}
                }, f)
            with open(os.path.join(tmp, "broken.json"), 'w') as f:
                f.write("{")
            with open(os.path.join(tmp, "notes.txt"), 'w') as f:
                f.write("ignored")

            with patch.object(Logger, 'error') as mock_error, patch.object(Logger, 'warning') as mock_warning:
                catalog = ItemCatalog.load_from_dir(tmp)

        self.assertEqual(len(catalog), 1)
        self.assertIn("item_a", catalog)
        self.assertEqual(mock_error.call_count, 1)
        self.assertEqual(mock_warning.call_count, 1)

    def test_invalid_utf8_file_is_skipped(self):
        with tempfile.TemporaryDirectory() as tmp:
            with open(os.path.join(tmp, "bad.json"), 'wb') as f:
                f.write(b'{"item_x": {"name": "\xff"}}')
            with open(os.path.join(tmp, "good.json"), 'w') as f:
                json.dump({"item_a": {"name": "A"}}, f)
            with patch.object(Logger, 'error') as mock_error:
                catalog = ItemCatalog.load_from_dir(tmp)
        self.assertEqual(len(catalog), 1)
        self.assertIn("item_a", catalog)
        self.assertEqual(mock_error.call_count, 1)

    def test_missing_dir_gives_empty_catalog(self):
        with patch.object(Logger, 'warning'):
            catalog = ItemCatalog.load_from_dir("/nonexistent/items")
        self.assertEqual(len(catalog), 0)

    def test_shipped_items_load(self):
        with patch.object(Logger, 'warning') as mock_warning, patch.object(Logger, 'error') as mock_error:
            catalog = ItemCatalog.load_from_dir(ITEM_DATA_DIR)
        mock_warning.assert_not_called()
        mock_error.assert_not_called()
        self.assertEqual(catalog.lookup("item_iron_sword")[0], (1, 3))
