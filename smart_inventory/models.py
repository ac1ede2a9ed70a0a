# smart_inventory/models.py
import enum
import numbers
import random
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional

from smart_inventory.exceptions import InvalidQuantity, ValidationError


class ForecastMethod(enum.Enum):
    """Enum for demand forecasting methods.

    Values:
        MOVING_AVERAGE ('SMA'): Simple moving average over a trailing window
        EXPONENTIAL_SMOOTHING ('EXPONENTIAL'): Exponentially smoothed average
    """
    MOVING_AVERAGE = 'SMA'
    EXPONENTIAL_SMOOTHING = 'EXPONENTIAL'

    def __str__(self):
        """Return the string value of the enum."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> 'ForecastMethod':
        """Create a ForecastMethod from a string value.

        Accepts the enum value ('SMA', 'EXPONENTIAL') or the member name
        ('MOVING_AVERAGE', 'EXPONENTIAL_SMOOTHING'), case-insensitively.

        Raises:
            ValueError if the string value is not valid
        """
        normalized = str(value).strip().upper().replace('-', '_')
        for member in cls:
            if normalized in (member.value, member.name):
                return member
        raise ValueError(
            f"Invalid forecast method: {value}. Valid values are: SMA, EXPONENTIAL"
        )


def require_quantity(quantity, label: str, item_id=None) -> int:
    """Return ``quantity`` as an int, rejecting anything but a non-negative integer.

    Raises:
        InvalidQuantity: If quantity is negative, fractional, a bool or not a number
    """
    if isinstance(quantity, bool) or not isinstance(quantity, numbers.Integral) or quantity < 0:
        raise InvalidQuantity(
            f"{label} must be a non-negative integer, got {quantity!r}",
            details={'item_id': item_id, 'quantity': quantity}
        )
    return int(quantity)


class Item:
    """A stocked product with its replenishment parameters and sales log.

    Stock and history are always mutated together through ``record_sale``
    and ``receive``. The reorder level is recomputed by the decision engine
    every cycle and is read-only to everyone else.
    """

    HISTORY_CAPACITY = 90
    SEED_HISTORY_DAYS = 30
    SEED_JITTER = 0.15

    def __init__(
        self,
        item_id: int,
        name: str,
        current_stock: int,
        daily_demand: float,
        lead_time: int,
        unit_cost: float,
        ordering_cost: float,
        holding_cost_rate: float,
        reorder_level: int = 0,
        sales_history: Optional[Iterable[int]] = None,
        rng: Optional[random.Random] = None
    ):
        """Initialize an item.

        Args:
            item_id: Unique item identifier
            name: Item name
            current_stock: Units currently on hand
            daily_demand: Average daily demand, used when history is empty
            lead_time: Days between placing and receiving an order
            unit_cost: Cost per unit
            ordering_cost: Fixed cost per order
            holding_cost_rate: Annual holding cost as a fraction of unit cost
            reorder_level: Initial reorder level
            sales_history: Optional explicit history (oldest first)
            rng: Random generator used to seed a synthetic history when
                no explicit history is given; defaults to one seeded by item_id
        """
        current_stock = require_quantity(current_stock, "Initial stock", item_id)
        if lead_time < 0:
            raise ValidationError(
                f"Lead time must be >= 0 for item {item_id}",
                details={'item_id': item_id, 'lead_time': lead_time}
            )

        self._item_id = item_id
        self._name = name
        self._lead_time = int(lead_time)
        self._unit_cost = float(unit_cost)
        self._ordering_cost = float(ordering_cost)
        self._holding_cost_rate = float(holding_cost_rate)

        self._current_stock = current_stock
        self._reorder_level = max(0, int(reorder_level))
        self.daily_demand = float(daily_demand)

        self._sales_history = deque(maxlen=self.HISTORY_CAPACITY)
        if sales_history is not None:
            # Validate everything before keeping anything
            entries = [require_quantity(q, "Sales history entry", item_id) for q in sales_history]
            self._sales_history.extend(entries)
        else:
            self._seed_history(rng if rng is not None else random.Random(item_id))

    def _seed_history(self, rng: random.Random) -> None:
        """Fill the history with jittered copies of the daily demand estimate."""
        for _ in range(self.SEED_HISTORY_DAYS):
            jitter = rng.uniform(-self.SEED_JITTER, self.SEED_JITTER) * self.daily_demand
            self._sales_history.append(max(0, int(self.daily_demand + jitter)))

    @property
    def item_id(self) -> int:
        return self._item_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def lead_time(self) -> int:
        return self._lead_time

    @property
    def unit_cost(self) -> float:
        return self._unit_cost

    @property
    def ordering_cost(self) -> float:
        return self._ordering_cost

    @property
    def holding_cost_rate(self) -> float:
        return self._holding_cost_rate

    @property
    def current_stock(self) -> int:
        return self._current_stock

    @property
    def reorder_level(self) -> int:
        return self._reorder_level

    @property
    def sales_history(self) -> List[int]:
        """Snapshot of the sales history, oldest first."""
        return list(self._sales_history)

    @property
    def annual_holding_cost(self) -> float:
        """Annual cost of holding one unit."""
        return self._unit_cost * self._holding_cost_rate

    def record_sale(self, quantity: int) -> None:
        """Record one period's sales.

        Stock is decremented (never below zero) and the quantity is appended
        to the history, evicting the oldest entry when the log is full.

        Raises:
            InvalidQuantity: If quantity is not a non-negative integer
        """
        quantity = require_quantity(quantity, "Sales quantity", self._item_id)
        self._current_stock = max(0, self._current_stock - quantity)
        self._sales_history.append(quantity)

    def receive(self, quantity: int) -> None:
        """Add received units to stock.

        Raises:
            InvalidQuantity: If quantity is not a non-negative integer
        """
        self._current_stock += require_quantity(quantity, "Received quantity", self._item_id)

    def _apply_reorder_level(self, reorder_level: int) -> None:
        # Only the decision engine calls this.
        self._reorder_level = max(0, int(reorder_level))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Item):
            return NotImplemented
        return self._item_id == other._item_id

    def __hash__(self):
        return hash(self._item_id)

    def __repr__(self):
        return (
            f"<Item(id={self._item_id}, name='{self._name}', stock={self._current_stock}, "
            f"daily_demand={self.daily_demand:.2f}, lead_time={self._lead_time}, "
            f"reorder_level={self._reorder_level})>"
        )


@dataclass(frozen=True)
class ReplenishmentDecision:
    """Outcome of one decision cycle for one item.

    ``item`` is a live reference; ``stock_at_decision`` is the stock level
    the reorder check was made against.
    """
    item: Item
    forecasted_demand: float
    safety_stock: int
    reorder_point: int
    order_quantity: int
    needs_reorder: bool
    stock_at_decision: int

    def to_display_string(self) -> str:
        """One-line summary, as the daily job logs each reorder decision."""
        status = f"REORDER -> Qty={self.order_quantity}" if self.needs_reorder else "OK"
        return (
            f"ItemID={self.item.item_id} | {self.item.name} | Stock={self.stock_at_decision} | "
            f"Forecast={self.forecasted_demand:.2f}/day | SS={self.safety_stock} | "
            f"ROP={self.reorder_point} | EOQ={self.order_quantity} | {status}"
        )
