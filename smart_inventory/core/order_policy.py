# smart_inventory/core/order_policy.py
import math

DAYS_PER_YEAR = 365.0


def calculate_reorder_point(
    forecast_daily_demand: float,
    lead_time_days: float,
    safety_stock: int
) -> int:
    """Calculate the reorder point.

    ROP = ceil(daily demand * lead time) + safety stock. Stock at or below
    this level triggers a new order under continuous review.

    Args:
        forecast_daily_demand: Forecast demand per day
        lead_time_days: Lead time in days
        safety_stock: Safety stock in units

    Returns:
        Reorder point in units
    """
    lead_time_demand = forecast_daily_demand * lead_time_days
    return int(math.ceil(lead_time_demand)) + safety_stock


def calculate_eoq(
    annual_demand: float,
    order_cost: float,
    daily_holding_cost: float
) -> int:
    """Calculate the Economic Order Quantity.

    Q = ceil(sqrt(2 * D * S / H)) where H is the annual holding cost per unit.

    Args:
        annual_demand: Annual demand in units
        order_cost: Cost of placing one order
        daily_holding_cost: Cost of holding one unit for one day

    Returns:
        Order quantity, or 0 if any input is not positive
    """
    if annual_demand <= 0 or order_cost <= 0 or daily_holding_cost <= 0:
        return 0

    annual_holding_cost = daily_holding_cost * DAYS_PER_YEAR
    eoq = math.sqrt((2.0 * annual_demand * order_cost) / annual_holding_cost)
    return int(math.ceil(eoq))


def calculate_annual_holding_cost(unit_cost: float, holding_cost_rate: float) -> float:
    """Calculate the annual cost of holding one unit.

    Args:
        unit_cost: Cost per unit
        holding_cost_rate: Annual holding rate as a fraction of unit cost

    Returns:
        Annual holding cost per unit
    """
    return unit_cost * holding_cost_rate


def calculate_total_annual_cost(
    annual_demand: float,
    order_cost: float,
    annual_holding_cost: float,
    order_quantity: float
) -> float:
    """Calculate total annual ordering plus cycle holding cost for an order size.

    Args:
        annual_demand: Annual demand in units
        order_cost: Cost of placing one order
        annual_holding_cost: Annual holding cost per unit
        order_quantity: Order size

    Returns:
        Total annual cost, or 0.0 for a non-positive order quantity
    """
    if order_quantity <= 0:
        return 0.0

    num_orders = annual_demand / order_quantity
    avg_inventory = order_quantity / 2.0
    return num_orders * order_cost + avg_inventory * annual_holding_cost
