import unittest
from genie.domain.GroceryItem import GroceryItem, CounterIds, uuid_ids


class TestGroceryItem(unittest.TestCase):

    def test_create_uses_id_factory(self):
        ids = CounterIds()
        first = GroceryItem.create("eggs", ids)
        second = GroceryItem.create("eggs", ids)
        self.assertEqual(first.id, "item-1")
        self.assertEqual(second.id, "item-2")
        self.assertFalse(first.is_checked)

    def test_uuid_ids_are_unique(self):
        self.assertNotEqual(uuid_ids(), uuid_ids())

    def test_id_is_read_only(self):
        item = GroceryItem("a", "milk")
        with self.assertRaises(AttributeError):
            item.id = "b"

    def test_toggle(self):
        item = GroceryItem("a", "milk")
        self.assertTrue(item.toggle())
        self.assertTrue(item.is_checked)
        self.assertFalse(item.toggle())

    def test_to_dict_uses_persisted_keys(self):
        item = GroceryItem("a", "2 eggs", True)
        self.assertEqual(item.to_dict(), {"id": "a", "item": "2 eggs", "isChecked": True})

    def test_from_dict_rejects_malformed_entries(self):
        for bad in ({"item": "milk"}, {"id": "a"}, {"id": "a", "item": "milk", "isChecked": "yes"}, ["a"]):
            with self.assertRaises(ValueError):
                GroceryItem.from_dict(bad)

    def test_from_dict_defaults_unchecked(self):
        item = GroceryItem.from_dict({"id": "a", "item": "milk"})
        self.assertEqual(item, GroceryItem("a", "milk", False))

    def test_empty_id_rejected(self):
        with self.assertRaises(ValueError):
            GroceryItem("", "milk")
