# smart_inventory/repository.py
from typing import Dict, Iterable, Iterator, List, Optional

from smart_inventory.exceptions import ItemError, NotFoundError
from smart_inventory.models import Item


class InventoryRepository:
    """Ordered, in-memory collection of items keyed by item id.

    Iteration order is insertion order; lookups by id are O(1).
    """

    def __init__(self, items: Optional[Iterable[Item]] = None):
        self._items: Dict[int, Item] = {}
        for item in items or []:
            self.add_item(item)

    def add_item(self, item: Item) -> Item:
        """Add an item.

        Raises:
            ItemError: If an item with the same id is already present
        """
        if item.item_id in self._items:
            raise ItemError(
                f"Item {item.item_id} already exists",
                code='DUPLICATE_ITEM',
                details={'item_id': item.item_id}
            )
        self._items[item.item_id] = item
        return item

    def remove_item(self, item_id: int) -> Item:
        """Remove and return an item.

        Raises:
            NotFoundError: If no item has this id
        """
        item = self.get_item(item_id)
        del self._items[item_id]
        return item

    def list_items(self) -> List[Item]:
        """Snapshot of all items in insertion order."""
        return list(self._items.values())

    def find_item(self, item_id: int) -> Optional[Item]:
        """Get an item by id, or None if it is not present."""
        return self._items.get(item_id)

    def get_item(self, item_id: int) -> Item:
        """Get an item by id.

        Raises:
            NotFoundError: If no item has this id
        """
        item = self._items.get(item_id)
        if item is None:
            raise NotFoundError(f"Item not found with ID: {item_id}", details={'item_id': item_id})
        return item

    @property
    def item_count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.list_items())

    def __contains__(self, item_id) -> bool:
        return item_id in self._items
