"""
Unit tests for configuration handling.
"""
import os
import tempfile
import unittest
from dataclasses import FrozenInstanceError

import numpy as np

from smart_inventory.config import PolicyConfiguration, config
from smart_inventory.exceptions import ConfigError, InvalidConfiguration, InventoryError
from smart_inventory.models import ForecastMethod

POLICY_KEYS = [
    'forecasting_method', 'moving_average_window', 'smoothing_alpha',
    'service_level_z', 'service_level_goal'
]


class TestPolicyConfiguration(unittest.TestCase):
    """Test cases for PolicyConfiguration validation."""

    def test_defaults(self):
        policy = PolicyConfiguration.default()
        self.assertEqual(policy.forecasting_method, ForecastMethod.EXPONENTIAL_SMOOTHING)
        self.assertEqual(policy.moving_average_window, 7)
        self.assertEqual(policy.smoothing_alpha, 0.4)
        self.assertEqual(policy.service_level_z, 1.65)
        self.assertEqual(policy.average_lead_time_days, 5)
        self.assertEqual(policy.lead_time_std_days, 1.5)
        self.assertEqual(policy.default_ordering_cost, 25.0)

    def test_method_string_is_parsed(self):
        policy = PolicyConfiguration(forecasting_method='SMA')
        self.assertEqual(policy.forecasting_method, ForecastMethod.MOVING_AVERAGE)

    def test_alpha_bounds(self):
        PolicyConfiguration(smoothing_alpha=1.0)
        PolicyConfiguration(smoothing_alpha=0.01)

        for alpha in (0.0, -0.2, 1.5):
            with self.assertRaises(InvalidConfiguration):
                PolicyConfiguration(smoothing_alpha=alpha)

    def test_invalid_values(self):
        invalid = [
            {'moving_average_window': 0},
            {'moving_average_window': -7},
            {'service_level_z': 0.0},
            {'average_lead_time_days': -1},
            {'lead_time_std_days': -0.5},
            {'default_ordering_cost': -10.0},
            {'forecasting_method': 'ARIMA'},
            {'forecasting_method': 42},
        ]
        for kwargs in invalid:
            with self.assertRaises(InvalidConfiguration):
                PolicyConfiguration(**kwargs)

    def test_non_numeric_values_rejected(self):
        invalid = [
            {'moving_average_window': 2.5},
            {'moving_average_window': '7'},
            {'moving_average_window': True},
            {'smoothing_alpha': 'x'},
            {'smoothing_alpha': None},
            {'service_level_z': None},
            {'service_level_z': '1.65'},
            {'average_lead_time_days': 5.5},
            {'default_ordering_cost': 'cheap'},
        ]
        for kwargs in invalid:
            with self.assertRaises(InvalidConfiguration) as ctx:
                PolicyConfiguration(**kwargs)
            self.assertEqual(ctx.exception.details['field'], next(iter(kwargs)))

    def test_numeric_types_accepted(self):
        policy = PolicyConfiguration(
            moving_average_window=np.int64(5),
            smoothing_alpha=np.float64(0.5),
            service_level_z=2
        )
        self.assertEqual(policy.moving_average_window, 5)
        self.assertEqual(policy.service_level_z, 2)

    def test_error_hierarchy(self):
        with self.assertRaises(ConfigError) as ctx:
            PolicyConfiguration(moving_average_window=0)

        self.assertIsInstance(ctx.exception, InventoryError)
        error = ctx.exception.to_dict()
        self.assertEqual(error['error'], 'InvalidConfiguration')
        self.assertEqual(error['code'], 'INVALID_CONFIGURATION')
        self.assertEqual(error['details']['field'], 'moving_average_window')

    def test_frozen(self):
        policy = PolicyConfiguration()
        with self.assertRaises(FrozenInstanceError):
            policy.smoothing_alpha = 0.9


class TestConfig(unittest.TestCase):
    """Test cases for the INI-backed configuration manager."""

    def setUp(self):
        self.saved = {key: config.get('POLICY', key) for key in POLICY_KEYS}

    def tearDown(self):
        for key, value in self.saved.items():
            if value is None:
                config.remove('POLICY', key)
            else:
                config.set('POLICY', key, value)

    def test_policy_config_from_settings(self):
        config.set('POLICY', 'forecasting_method', 'SMA')
        config.set('POLICY', 'moving_average_window', 14)

        policy = config.policy_config
        self.assertEqual(policy.forecasting_method, ForecastMethod.MOVING_AVERAGE)
        self.assertEqual(policy.moving_average_window, 14)

    def test_invalid_settings_rejected(self):
        config.set('POLICY', 'smoothing_alpha', 0)
        with self.assertRaises(InvalidConfiguration):
            config.policy_config

    def test_service_level_goal_converted_to_z(self):
        config.remove('POLICY', 'service_level_z')
        config.set('POLICY', 'service_level_goal', 97.5)

        self.assertAlmostEqual(config.policy_config.service_level_z, 1.96, places=2)

    def test_service_level_goal_out_of_range(self):
        config.remove('POLICY', 'service_level_z')
        config.set('POLICY', 'service_level_goal', 100)

        with self.assertRaises(InvalidConfiguration):
            config.policy_config

    def test_typed_getters(self):
        self.assertEqual(config.get_int('SIMULATION', 'missing', 3), 3)
        self.assertEqual(config.get('NO_SECTION', 'key', 'fallback'), 'fallback')
        self.assertIsInstance(config.log_config['console_output'], bool)
        self.assertIsInstance(config.simulation_config['item_count'], int)


class TestSettingsFile(unittest.TestCase):
    """Test cases for reading policy settings from an INI file."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, 'settings.ini')

    def tearDown(self):
        config.reload()
        self.temp_dir.cleanup()

    def write_settings(self, text):
        with open(self.path, 'w') as f:
            f.write(text)
        config.reload(self.path)

    def test_goal_only_file_sets_z(self):
        self.write_settings("[POLICY]\nservice_level_goal = 99.0\n")

        self.assertAlmostEqual(config.policy_config.service_level_z, 2.326, places=3)

    def test_explicit_z_wins_over_goal(self):
        self.write_settings("[POLICY]\nservice_level_goal = 99.0\nservice_level_z = 1.28\n")

        self.assertAlmostEqual(config.policy_config.service_level_z, 1.28)

    def test_no_z_or_goal_uses_default(self):
        self.write_settings("[POLICY]\nsmoothing_alpha = 0.5\n")

        policy = config.policy_config
        self.assertEqual(policy.service_level_z, 1.65)
        self.assertEqual(policy.smoothing_alpha, 0.5)
        self.assertEqual(policy.moving_average_window, 7)

    def test_unparsable_values_rejected(self):
        for line in ("moving_average_window = 2.5", "smoothing_alpha = x", "service_level_z = high"):
            self.write_settings(f"[POLICY]\n{line}\n")
            with self.assertRaises(InvalidConfiguration) as ctx:
                config.policy_config
            self.assertEqual(ctx.exception.details['field'], line.split(' = ')[0])


if __name__ == '__main__':
    unittest.main()
