# smart_inventory/services/reporting_service.py
from typing import Dict, List, Sequence

from tabulate import tabulate

from smart_inventory.core.order_policy import DAYS_PER_YEAR, calculate_annual_holding_cost
from smart_inventory.models import Item, ReplenishmentDecision
from smart_inventory.repository import InventoryRepository

TOP_N = 10


class ReportingService:
    """Read-only alerts and summary reports over an inventory."""

    def __init__(self, repository: InventoryRepository):
        """Initialize the reporting service.

        Args:
            repository: Inventory to report on
        """
        self.repository = repository

    def low_stock_items(self) -> List[Item]:
        """Items whose stock is at or below their reorder level."""
        return [
            item for item in self.repository.list_items()
            if item.current_stock <= item.reorder_level
        ]

    def generate_low_stock_alerts(self) -> List[str]:
        return [
            f"ALERT: {item.name} (ID={item.item_id}) is LOW - "
            f"Stock={item.current_stock}, ReorderLevel={item.reorder_level}"
            for item in self.low_stock_items()
        ]

    def weekly_summary(self, decisions: Sequence[ReplenishmentDecision]) -> Dict:
        """Summarize stock movement for the weekly report.

        Args:
            decisions: Decisions from the latest cycle

        Returns:
            Dictionary with weekly metrics
        """
        items = self.repository.list_items()

        daily_holding_cost = sum(
            item.current_stock
            * calculate_annual_holding_cost(item.unit_cost, item.holding_cost_rate)
            / DAYS_PER_YEAR
            for item in items
        )
        top_by_stock = sorted(items, key=lambda i: i.current_stock, reverse=True)[:TOP_N]

        return {
            'total_items': len(items),
            'low_stock_items': len(self.low_stock_items()),
            'items_needing_reorder': sum(1 for d in decisions if d.needs_reorder),
            'stockouts': sum(1 for item in items if item.current_stock == 0),
            'daily_holding_cost': round(daily_holding_cost, 2),
            'top_items_by_stock': [
                {'item_id': i.item_id, 'name': i.name, 'current_stock': i.current_stock}
                for i in top_by_stock
            ]
        }

    def generate_weekly_report(self, decisions: Sequence[ReplenishmentDecision]) -> str:
        summary = self.weekly_summary(decisions)

        lines = [
            "=== WEEKLY INVENTORY REPORT ===",
            "",
            f"Total Items: {summary['total_items']}",
            f"Low Stock Items: {summary['low_stock_items']}",
            f"Items Needing Reorder: {summary['items_needing_reorder']}",
            f"Stockouts: {summary['stockouts']}",
            f"Estimated Daily Holding Cost: ${summary['daily_holding_cost']:.2f}",
            "",
            f"Top {TOP_N} Items by Current Stock:",
            tabulate(
                [[r['name'], r['item_id'], r['current_stock']] for r in summary['top_items_by_stock']],
                headers=['Name', 'ID', 'Units']
            )
        ]
        return "\n".join(lines)

    def monthly_summary(self) -> Dict:
        """Summarize inventory value and demand for the monthly report."""
        items = self.repository.list_items()

        inventory_value = sum(item.current_stock * item.unit_cost for item in items)
        annual_holding_cost = sum(
            item.current_stock * calculate_annual_holding_cost(item.unit_cost, item.holding_cost_rate)
            for item in items
        )
        avg_daily_demand = (
            sum(item.daily_demand for item in items) / len(items) if items else 0.0
        )
        top_by_demand = sorted(items, key=lambda i: i.daily_demand, reverse=True)[:TOP_N]

        return {
            'total_inventory_value': round(inventory_value, 2),
            'annual_holding_cost': round(annual_holding_cost, 2),
            'average_daily_demand': round(avg_daily_demand, 2),
            'top_items_by_demand': [
                {'item_id': i.item_id, 'name': i.name, 'daily_demand': i.daily_demand}
                for i in top_by_demand
            ]
        }

    def generate_monthly_report(self) -> str:
        summary = self.monthly_summary()

        lines = [
            "=== MONTHLY INVENTORY REPORT ===",
            "",
            f"Total Inventory Value: ${summary['total_inventory_value']:.2f}",
            f"Annual Holding Cost: ${summary['annual_holding_cost']:.2f}",
            f"Average Daily Demand: {summary['average_daily_demand']:.2f} units/item",
            "",
            "Items with Highest Demand:",
            tabulate(
                [[r['name'], r['item_id'], r['daily_demand']] for r in summary['top_items_by_demand']],
                headers=['Name', 'ID', 'Units/Day'],
                floatfmt='.2f'
            )
        ]
        return "\n".join(lines)

    @staticmethod
    def items_table(items: Sequence[Item]) -> str:
        """Render items as a text table."""
        return tabulate(
            [
                [i.item_id, i.name, i.current_stock, i.daily_demand, i.lead_time, i.reorder_level]
                for i in items
            ],
            headers=['ID', 'Name', 'Stock', 'DailyDemand', 'LeadTime', 'ReorderLevel'],
            floatfmt='.2f'
        )

    @staticmethod
    def decisions_table(decisions: Sequence[ReplenishmentDecision]) -> str:
        """Render decisions as a text table."""
        return tabulate(
            [
                [
                    d.item.item_id, d.item.name, d.stock_at_decision, d.forecasted_demand,
                    d.safety_stock, d.reorder_point, d.order_quantity,
                    'REORDER' if d.needs_reorder else 'OK'
                ]
                for d in decisions
            ],
            headers=['ID', 'Name', 'Stock', 'Forecast', 'SS', 'ROP', 'EOQ', 'Status'],
            floatfmt='.2f'
        )
