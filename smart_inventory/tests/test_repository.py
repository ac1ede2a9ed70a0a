"""
Unit tests for the in-memory inventory repository and sample data.
"""
import unittest

from smart_inventory.data.item_generator import generate_sample_items
from smart_inventory.exceptions import ItemError, NotFoundError
from smart_inventory.models import Item
from smart_inventory.repository import InventoryRepository


def make_item(item_id, name="Item"):
    return Item(item_id, name, 10, 2.0, 3, 1.0, 20.0, 0.2, sales_history=[2, 2])


class TestInventoryRepository(unittest.TestCase):
    """Test cases for InventoryRepository."""

    def setUp(self):
        self.repository = InventoryRepository([make_item(3, "C"), make_item(1, "A"), make_item(2, "B")])

    def test_list_items_keeps_insertion_order(self):
        self.assertEqual([i.item_id for i in self.repository.list_items()], [3, 1, 2])
        self.assertEqual([i.item_id for i in self.repository], [3, 1, 2])

    def test_list_items_is_a_snapshot(self):
        snapshot = self.repository.list_items()
        snapshot.clear()
        self.assertEqual(len(self.repository), 3)

    def test_find_item(self):
        self.assertEqual(self.repository.find_item(1).name, "A")
        self.assertIsNone(self.repository.find_item(99))

    def test_get_item_missing(self):
        with self.assertRaises(NotFoundError):
            self.repository.get_item(99)

    def test_duplicate_id_rejected(self):
        with self.assertRaises(ItemError) as ctx:
            self.repository.add_item(make_item(1, "Duplicate"))

        self.assertEqual(ctx.exception.code, 'DUPLICATE_ITEM')
        self.assertEqual(self.repository.find_item(1).name, "A")

    def test_remove_item(self):
        removed = self.repository.remove_item(1)

        self.assertEqual(removed.name, "A")
        self.assertNotIn(1, self.repository)
        self.assertEqual(self.repository.item_count, 2)

        with self.assertRaises(NotFoundError):
            self.repository.remove_item(1)


class TestSampleItems(unittest.TestCase):
    """Test cases for sample inventory generation."""

    def test_fifty_items(self):
        items = generate_sample_items(50, seed=42)

        self.assertEqual([i.item_id for i in items], list(range(1, 51)))
        self.assertEqual([i.name for i in items[:3]], ["Chocolate Bar", "Candy Cane", "Lollipop"])
        self.assertEqual(items[0].current_stock, 50)
        self.assertEqual(items[0].lead_time, 7)

        for item in items:
            self.assertEqual(len(item.sales_history), Item.SEED_HISTORY_DAYS)
            self.assertGreaterEqual(item.current_stock, 20)
            self.assertGreaterEqual(item.lead_time, 3)
            self.assertLessEqual(item.lead_time, 12)

    def test_reproducible(self):
        a = generate_sample_items(20, seed=1)
        b = generate_sample_items(20, seed=1)

        self.assertEqual(
            [(i.current_stock, i.daily_demand, i.sales_history) for i in a],
            [(i.current_stock, i.daily_demand, i.sales_history) for i in b]
        )

    def test_small_count(self):
        self.assertEqual([i.name for i in generate_sample_items(2)], ["Chocolate Bar", "Candy Cane"])
        self.assertEqual(generate_sample_items(0), [])


if __name__ == '__main__':
    unittest.main()
