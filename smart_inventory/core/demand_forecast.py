# smart_inventory/core/demand_forecast.py
from typing import Sequence, Union

import numpy as np

from smart_inventory.models import ForecastMethod

Number = Union[int, float]


def moving_average(history: Sequence[Number], window: int) -> float:
    """Calculate the simple moving average of the most recent periods.

    Args:
        history: Demand history, oldest first
        window: Number of most recent periods to average

    Returns:
        Average of the last ``window`` entries (all entries if fewer exist),
        or 0.0 for an empty history or a non-positive window
    """
    if len(history) == 0 or window <= 0:
        return 0.0

    recent = np.asarray(history[-window:], dtype=float)
    return float(recent.mean())


def exponential_smoothing(history: Sequence[Number], alpha: float) -> float:
    """Calculate the exponentially smoothed demand level.

    The first entry seeds the level; every later entry updates it with
    ``s = alpha * x + (1 - alpha) * s``.

    Args:
        history: Demand history, oldest first
        alpha: Smoothing factor in (0, 1]

    Returns:
        Smoothed level after the newest entry, or 0.0 for an empty history
    """
    if len(history) == 0:
        return 0.0

    level = float(history[0])
    for value in history[1:]:
        level = alpha * float(value) + (1.0 - alpha) * level

    return level


def demand_std_dev(history: Sequence[Number]) -> float:
    """Calculate the sample standard deviation of demand.

    Args:
        history: Demand history

    Returns:
        Standard deviation with an n-1 divisor, 0.0 for fewer than two entries
    """
    if len(history) < 2:
        return 0.0

    return float(np.std(np.asarray(history, dtype=float), ddof=1))


def forecast_demand(
    history: Sequence[Number],
    method: ForecastMethod,
    window: int,
    alpha: float
) -> float:
    """Forecast next-period demand with the selected method.

    Args:
        history: Demand history, oldest first
        method: Forecasting method
        window: Moving-average window (used by MOVING_AVERAGE)
        alpha: Smoothing factor (used by EXPONENTIAL_SMOOTHING)

    Returns:
        Forecast value
    """
    if method == ForecastMethod.MOVING_AVERAGE:
        return moving_average(history, window)
    return exponential_smoothing(history, alpha)
