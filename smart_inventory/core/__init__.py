from .demand_forecast import (
    moving_average, exponential_smoothing, demand_std_dev, forecast_demand
)
from .safety_stock import calculate_safety_stock, z_from_service_level, service_level_from_z
from .order_policy import (
    calculate_reorder_point, calculate_eoq,
    calculate_annual_holding_cost, calculate_total_annual_cost
)

__all__ = [
    'moving_average',
    'exponential_smoothing',
    'demand_std_dev',
    'forecast_demand',
    'calculate_safety_stock',
    'z_from_service_level',
    'service_level_from_z',
    'calculate_reorder_point',
    'calculate_eoq',
    'calculate_annual_holding_cost',
    'calculate_total_annual_cost'
]
