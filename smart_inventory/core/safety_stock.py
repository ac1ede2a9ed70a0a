# smart_inventory/core/safety_stock.py
import math

from scipy import stats


def calculate_safety_stock(
    demand_std_dev: float,
    z_score: float,
    lead_time_days: float
) -> int:
    """Calculate safety stock in units.

    SS = ceil(Z * sigma * sqrt(LT)), with a negative lead time treated as zero.

    Args:
        demand_std_dev: Standard deviation of per-period demand
        z_score: Service level factor (e.g. 1.65 for ~95%)
        lead_time_days: Lead time in days

    Returns:
        Safety stock in units
    """
    lead_time = max(0.0, float(lead_time_days))
    return int(math.ceil(z_score * demand_std_dev * math.sqrt(lead_time)))


def z_from_service_level(service_level_goal: float) -> float:
    """Convert a service level goal to a Z-score.

    Args:
        service_level_goal: Service level goal as percentage (e.g., 95.0)

    Returns:
        Standard-normal quantile for the goal
    """
    return float(stats.norm.ppf(service_level_goal / 100.0))


def service_level_from_z(z_score: float) -> float:
    """Convert a Z-score back to the service level it provides.

    Args:
        z_score: Service level factor

    Returns:
        Service level as a percentage
    """
    return float(stats.norm.cdf(z_score) * 100.0)
