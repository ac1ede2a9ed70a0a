# smart_inventory/services/decision_engine.py
from typing import Iterable, List, Optional

from smart_inventory.config import PolicyConfiguration
from smart_inventory.core.demand_forecast import demand_std_dev, forecast_demand
from smart_inventory.core.safety_stock import calculate_safety_stock
from smart_inventory.core.order_policy import (
    DAYS_PER_YEAR, calculate_eoq, calculate_reorder_point
)
from smart_inventory.logging_setup import get_logger
from smart_inventory.models import Item, ReplenishmentDecision, require_quantity

logger = get_logger('decision_engine')
order_logger = get_logger('orders')


class DecisionEngine:
    """Continuous-review (s, Q) replenishment engine.

    Each call to ``process_cycle`` is a complete, independent pass over the
    items it is given. The only state it writes is each item's reorder level.
    """

    def __init__(self, policy: Optional[PolicyConfiguration] = None):
        """Initialize the decision engine.

        Args:
            policy: Policy configuration (defaults to PolicyConfiguration.default())
        """
        self.policy = policy or PolicyConfiguration.default()

    def forecast(self, item: Item, history: Optional[List[int]] = None) -> float:
        """Forecast next-day demand for an item.

        Falls back to the item's static daily demand when it has no history.

        Args:
            item: Item to forecast
            history: Sales history snapshot to use instead of reading the item's
        """
        if history is None:
            history = item.sales_history
        if not history:
            return item.daily_demand

        return forecast_demand(
            history,
            self.policy.forecasting_method,
            self.policy.moving_average_window,
            self.policy.smoothing_alpha
        )

    def evaluate_item(self, item: Item) -> ReplenishmentDecision:
        """Run one decision step for one item and update its reorder level."""
        stock = item.current_stock
        history = item.sales_history

        forecast = self.forecast(item, history)
        std_dev = demand_std_dev(history)
        safety_stock = calculate_safety_stock(std_dev, self.policy.service_level_z, item.lead_time)

        reorder_point = calculate_reorder_point(forecast, item.lead_time, safety_stock)
        item._apply_reorder_level(reorder_point)

        needs_reorder = stock <= reorder_point

        order_quantity = 0
        if needs_reorder:
            order_quantity = calculate_eoq(
                forecast * DAYS_PER_YEAR,
                item.ordering_cost,
                item.annual_holding_cost / DAYS_PER_YEAR
            )

        logger.debug(
            f"Item {item.item_id}: forecast={forecast:.2f}, sigma={std_dev:.2f}, "
            f"ss={safety_stock}, rop={reorder_point}, stock={stock}, qty={order_quantity}"
        )

        return ReplenishmentDecision(
            item=item,
            forecasted_demand=forecast,
            safety_stock=safety_stock,
            reorder_point=reorder_point,
            order_quantity=order_quantity,
            needs_reorder=needs_reorder,
            stock_at_decision=stock
        )

    def process_cycle(self, items: Iterable[Item]) -> List[ReplenishmentDecision]:
        """Process the daily update for every item.

        Args:
            items: Items to evaluate

        Returns:
            One decision per item, in the order the items were given
        """
        decisions = [self.evaluate_item(item) for item in items]

        reorder_count = sum(1 for d in decisions if d.needs_reorder)
        logger.info(
            f"Daily update completed for {len(decisions)} items; "
            f"{reorder_count} need reorder"
        )
        return decisions

    def record_sale(self, item: Item, quantity: int) -> None:
        """Record one day's sales for an item.

        Raises:
            InvalidQuantity: If quantity is not a non-negative integer
        """
        item.record_sale(quantity)
        logger.debug(f"Recorded sale of {quantity} for item {item.item_id}; stock={item.current_stock}")

    def receive_stock(self, item: Item, quantity: int) -> None:
        """Receive stock for an item.

        Raises:
            InvalidQuantity: If quantity is not a non-negative integer
        """
        item.receive(quantity)
        logger.debug(f"Received {quantity} for item {item.item_id}; stock={item.current_stock}")

    def place_order(self, item: Item, quantity: int) -> None:
        """Announce an order for an item.

        This is a notification only: stock is unchanged and nothing is tracked.

        Raises:
            InvalidQuantity: If quantity is not a non-negative integer
        """
        quantity = require_quantity(quantity, "Order quantity", item.item_id)

        order_logger.info(
            f"ORDER PLACED: ItemID={item.item_id}, Name='{item.name}', "
            f"Quantity={quantity}, ExpectedDelivery={item.lead_time} days"
        )
