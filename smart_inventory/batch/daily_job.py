# smart_inventory/batch/daily_job.py
import random
from typing import Dict, List, Optional, Sequence

from smart_inventory.config import config
from smart_inventory.logging_setup import get_logger, log_exception, logger as log_manager
from smart_inventory.models import Item, ReplenishmentDecision
from smart_inventory.repository import InventoryRepository
from smart_inventory.services.decision_engine import DecisionEngine
from smart_inventory.services.reporting_service import ReportingService

logger = get_logger('daily_job')


def simulate_daily_sales(
    engine: DecisionEngine,
    items: Sequence[Item],
    rng: random.Random,
    variation: Optional[float] = None
) -> Dict[int, int]:
    """Record one simulated day of sales for every item.

    Each item sells its daily demand plus a uniform draw in
    [-variation, variation), truncated and clamped at zero.

    Returns:
        Mapping of item id to quantity sold
    """
    if variation is None:
        variation = config.simulation_config['sales_variation']

    sales = {}
    for item in items:
        quantity = max(0, int(item.daily_demand + rng.uniform(-variation, variation)))
        engine.record_sale(item, quantity)
        sales[item.item_id] = quantity

    return sales


def place_replenishment_orders(
    engine: DecisionEngine,
    decisions: Sequence[ReplenishmentDecision]
) -> List[ReplenishmentDecision]:
    """Place an order for every decision that needs one.

    Returns:
        Decisions an order was placed for
    """
    ordered = []
    for decision in decisions:
        if decision.needs_reorder and decision.order_quantity > 0:
            engine.place_order(decision.item, decision.order_quantity)
            ordered.append(decision)

    if not ordered:
        logger.info("No orders needed at this time.")
    else:
        logger.info(f"Placed {len(ordered)} orders.")

    return ordered


def run_daily_job(
    repository: InventoryRepository,
    engine: DecisionEngine,
    rng: Optional[random.Random] = None,
    place_orders: bool = True
) -> Dict:
    """Run the daily workflow: sales, decision cycle, orders, alerts.

    Args:
        repository: Inventory to process
        engine: Decision engine
        rng: Random generator for simulated sales
        place_orders: Whether to place orders for items that need them

    Returns:
        Dictionary with job results
    """
    if rng is None:
        rng = random.Random(config.simulation_config['random_seed'])

    log_info = log_manager.batch_start_log('daily_job', {'items': len(repository)})

    try:
        items = repository.list_items()

        logger.info("# Step 1: Recording daily sales")
        sales = simulate_daily_sales(engine, items, rng)

        logger.info("# Step 2: Processing daily update (forecast, safety stock, ROP)")
        decisions = engine.process_cycle(items)
        for decision in decisions:
            if decision.needs_reorder:
                logger.info(decision.to_display_string())

        ordered = []
        if place_orders:
            logger.info("# Step 3: Placing replenishment orders")
            ordered = place_replenishment_orders(engine, decisions)

        logger.info("# Step 4: Checking low stock alerts")
        alerts = ReportingService(repository).generate_low_stock_alerts()
        for alert in alerts:
            logger.warning(alert)

    except Exception as e:
        log_exception('daily_job', e, "Daily job failed")
        log_manager.batch_end_log(log_info, success=False)
        raise

    results = {
        'success': True,
        'sales': sales,
        'decisions': decisions,
        'orders_placed': len(ordered),
        'alerts': alerts
    }
    results['duration'] = log_manager.batch_end_log(
        log_info,
        success=True,
        result_info={'orders_placed': len(ordered), 'alerts': len(alerts)}
    )
    return results
