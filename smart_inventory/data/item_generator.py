# smart_inventory/data/item_generator.py
import random
from typing import List, Optional

from smart_inventory.models import Item

ITEM_NAMES = [
    "Chocolate Bar", "Candy Cane", "Lollipop", "Gummy Bears", "Jelly Beans",
    "Marshmallow", "Hard Candy", "Chocolate Chip Cookie", "Caramel", "Toffee",
    "Peppermint", "Licorice", "Gum Drops", "Rock Candy", "Fudge",
    "Taffy", "Sour Patch Kids", "Skittles", "M&Ms", "Reese's Pieces",
    "Hershey's Kisses", "Twix", "Snickers", "Kit Kat", "Milky Way",
    "Butterfinger", "Baby Ruth", "Almond Joy", "3 Musketeers", "PayDay",
    "Crunch Bar", "Mounds", "Dove Chocolate", "Ghirardelli Squares", "Lindt Truffle",
    "Toblerone", "Ferrero Rocher", "Godiva Chocolate", "See's Candies", "Russell Stover",
    "Jelly Belly", "Starburst", "Life Savers", "Werther's Original", "Ricola",
    "Halls", "Cough Drop", "Menthol Candy", "Throat Lozenges", "Vitamin C Drops"
]

# (id, name, stock, daily demand, lead time, reorder level, unit cost, ordering cost, holding rate)
CATALOGUE_ITEMS = [
    (1, "Chocolate Bar", 50, 5.0, 7, 20, 2.50, 25.0, 0.20),
    (2, "Candy Cane", 30, 3.0, 5, 15, 1.50, 25.0, 0.20),
    (3, "Lollipop", 80, 8.0, 10, 40, 0.75, 25.0, 0.20),
]


def generate_sample_items(count: int = 50, seed: Optional[int] = 42) -> List[Item]:
    """Generate a reproducible sample inventory.

    The first items are the fixed catalogue entries; the rest get randomized
    but realistic parameters from a generator seeded with ``seed``.

    Args:
        count: Number of items to generate
        seed: Random seed

    Returns:
        List of items with ids 1..count
    """
    rng = random.Random(seed)
    items = []

    for item_id, name, stock, demand, lead_time, reorder_level, unit_cost, order_cost, rate in CATALOGUE_ITEMS[:count]:
        items.append(Item(
            item_id, name, stock, demand, lead_time, unit_cost, order_cost, rate,
            reorder_level=reorder_level, rng=rng
        ))

    for item_id in range(len(items) + 1, count + 1):
        name = ITEM_NAMES[(item_id - 1) % len(ITEM_NAMES)]

        current_stock = rng.randint(20, 119)
        daily_demand = rng.uniform(2.0, 12.0)
        lead_time = rng.randint(3, 12)
        reorder_level = int(daily_demand * lead_time * 1.2)

        unit_cost = round(rng.uniform(0.50, 5.50), 2)
        ordering_cost = round(rng.uniform(20.0, 30.0), 2)
        holding_cost_rate = round(rng.uniform(0.15, 0.30), 3)

        items.append(Item(
            item_id, name, current_stock, daily_demand, lead_time,
            unit_cost, ordering_cost, holding_cost_rate,
            reorder_level=reorder_level, rng=rng
        ))

    return items
