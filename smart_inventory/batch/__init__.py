# smart_inventory/batch/__init__.py

from .daily_job import run_daily_job, simulate_daily_sales, place_replenishment_orders

__all__ = [
    'run_daily_job',
    'simulate_daily_sales',
    'place_replenishment_orders'
]
