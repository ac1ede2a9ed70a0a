"""
Unit tests for the demand forecasting functions.
"""
import unittest

from smart_inventory.core.demand_forecast import (
    moving_average,
    exponential_smoothing,
    demand_std_dev,
    forecast_demand
)
from smart_inventory.models import ForecastMethod


class TestMovingAverage(unittest.TestCase):
    """Test cases for the simple moving average."""

    def test_window_covers_whole_history(self):
        """A window at least as long as the history averages everything."""
        history = [1, 2, 3, 4]
        self.assertAlmostEqual(moving_average(history, 4), 2.5)
        self.assertAlmostEqual(moving_average(history, 30), 2.5)

    def test_window_uses_most_recent_entries(self):
        self.assertAlmostEqual(moving_average([1, 2, 3, 4], 2), 3.5)
        self.assertAlmostEqual(moving_average([10, 0, 0, 6], 1), 6.0)

    def test_empty_history(self):
        self.assertEqual(moving_average([], 7), 0.0)

    def test_non_positive_window(self):
        self.assertEqual(moving_average([5, 5, 5], 0), 0.0)
        self.assertEqual(moving_average([5, 5, 5], -3), 0.0)


class TestExponentialSmoothing(unittest.TestCase):
    """Test cases for exponential smoothing."""

    def test_alpha_one_returns_last_value(self):
        for history in ([3], [3, 7, 2], [9, 0, 4, 11]):
            self.assertEqual(exponential_smoothing(history, 1.0), float(history[-1]))

    def test_constant_series(self):
        self.assertAlmostEqual(exponential_smoothing([5, 5, 5, 5, 5], 0.4), 5.0)

    def test_recurrence(self):
        # s1 = 10; s2 = 0.5*20 + 0.5*10 = 15; s3 = 0.5*40 + 0.5*15 = 27.5
        self.assertAlmostEqual(exponential_smoothing([10, 20, 40], 0.5), 27.5)

    def test_single_entry_is_seed(self):
        self.assertEqual(exponential_smoothing([8], 0.3), 8.0)

    def test_empty_history(self):
        self.assertEqual(exponential_smoothing([], 0.4), 0.0)


class TestDemandStdDev(unittest.TestCase):
    """Test cases for demand dispersion."""

    def test_short_histories(self):
        self.assertEqual(demand_std_dev([]), 0.0)
        self.assertEqual(demand_std_dev([7]), 0.0)

    def test_constant_history(self):
        self.assertEqual(demand_std_dev([10, 10, 10]), 0.0)

    def test_sample_divisor(self):
        # Two points with an n-1 divisor: sqrt(200)
        self.assertAlmostEqual(demand_std_dev([0, 20]), 14.1421356, places=5)

    def test_known_series(self):
        # mean 11, squared deviations sum to 688, 688 / 5 = 137.6
        self.assertAlmostEqual(demand_std_dev([1, 2, 3, 10, 20, 30]), 137.6 ** 0.5, places=9)


class TestForecastDemand(unittest.TestCase):
    """Test cases for method dispatch."""

    def test_dispatch(self):
        history = [1, 2, 3, 10, 20, 30]
        self.assertAlmostEqual(
            forecast_demand(history, ForecastMethod.MOVING_AVERAGE, 3, 0.4), 20.0
        )
        self.assertAlmostEqual(
            forecast_demand(history, ForecastMethod.EXPONENTIAL_SMOOTHING, 3, 1.0), 30.0
        )


if __name__ == '__main__':
    unittest.main()
