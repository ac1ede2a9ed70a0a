import os
import numbers
import configparser
from dataclasses import dataclass
from pathlib import Path

from smart_inventory.exceptions import InvalidConfiguration
from smart_inventory.models import ForecastMethod
from smart_inventory.core.safety_stock import z_from_service_level


def _require_number(field, value, kind):
    """Raise InvalidConfiguration unless ``value`` is a ``kind`` number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, kind):
        expected = 'an integer' if kind is numbers.Integral else 'a number'
        raise InvalidConfiguration(
            f"{field} must be {expected}, got {value!r}",
            details={'field': field, 'value': repr(value)}
        )


@dataclass(frozen=True)
class PolicyConfiguration:
    """Immutable replenishment policy settings.

    Type and range checks run once here so the per-item calculations never have to.
    """
    forecasting_method: ForecastMethod = ForecastMethod.EXPONENTIAL_SMOOTHING
    moving_average_window: int = 7
    smoothing_alpha: float = 0.4
    service_level_z: float = 1.65
    # Lead time figures are carried for stochastic lead time extensions;
    # the current formulas use each item's own lead time.
    average_lead_time_days: int = 5
    lead_time_std_days: float = 1.5
    default_ordering_cost: float = 25.0

    def __post_init__(self):
        if isinstance(self.forecasting_method, str):
            try:
                method = ForecastMethod.from_string(self.forecasting_method)
            except ValueError as e:
                raise InvalidConfiguration(str(e), details={'field': 'forecasting_method'})
            object.__setattr__(self, 'forecasting_method', method)
        elif not isinstance(self.forecasting_method, ForecastMethod):
            raise InvalidConfiguration(
                f"Unknown forecasting method: {self.forecasting_method!r}",
                details={'field': 'forecasting_method'}
            )

        _require_number('moving_average_window', self.moving_average_window, numbers.Integral)
        for field in ('smoothing_alpha', 'service_level_z', 'lead_time_std_days',
                      'default_ordering_cost'):
            _require_number(field, getattr(self, field), numbers.Real)
        _require_number('average_lead_time_days', self.average_lead_time_days, numbers.Integral)

        if self.moving_average_window <= 0:
            raise InvalidConfiguration(
                "Moving-average window must be > 0",
                details={'field': 'moving_average_window', 'value': self.moving_average_window}
            )
        if not 0.0 < self.smoothing_alpha <= 1.0:
            raise InvalidConfiguration(
                "Smoothing factor must be in (0, 1]",
                details={'field': 'smoothing_alpha', 'value': self.smoothing_alpha}
            )
        if self.service_level_z <= 0:
            raise InvalidConfiguration(
                "Service level factor must be > 0",
                details={'field': 'service_level_z', 'value': self.service_level_z}
            )
        if self.average_lead_time_days < 0:
            raise InvalidConfiguration(
                "Average lead time cannot be negative",
                details={'field': 'average_lead_time_days', 'value': self.average_lead_time_days}
            )
        if self.lead_time_std_days < 0:
            raise InvalidConfiguration(
                "Lead time standard deviation cannot be negative",
                details={'field': 'lead_time_std_days', 'value': self.lead_time_std_days}
            )
        if self.default_ordering_cost < 0:
            raise InvalidConfiguration(
                "Default ordering cost cannot be negative",
                details={'field': 'default_ordering_cost', 'value': self.default_ordering_cost}
            )

    @classmethod
    def default(cls) -> 'PolicyConfiguration':
        """Exponential smoothing, alpha 0.4, Z 1.65 (~95% service level)."""
        return cls()


class Config:
    """Configuration manager for the Smart Inventory Replenishment System."""

    _instance = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the configuration if not already initialized."""
        if self._initialized:
            return

        self.reload()
        self._initialized = True

    def reload(self, path=None):
        """Reset to defaults and read the settings file over them.

        Args:
            path: Settings file; defaults to ``SMART_INVENTORY_CONFIG`` or
                ``config/settings.ini``. In-memory ``set`` calls are discarded.
        """
        self._config_path = Path(
            path or os.environ.get('SMART_INVENTORY_CONFIG', Path('config') / 'settings.ini')
        )
        self._config = configparser.ConfigParser(interpolation=None)

        # Defaults first so a partial settings file only overrides what it names
        self._create_default_config()
        if self._config_path.exists():
            self._config.read(self._config_path)

    def _create_default_config(self):
        """Populate the default configuration."""
        self._config['LOGGING'] = {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'directory': 'logs',
            'max_size_mb': '10',
            'backup_count': '5',
            'console_output': 'True',
            'file_output': 'True'
        }

        self._config['POLICY'] = {
            'forecasting_method': 'EXPONENTIAL',
            'moving_average_window': '7',
            'smoothing_alpha': '0.4',
            'average_lead_time_days': '5',
            'lead_time_std_days': '1.5',
            'default_ordering_cost': '25.0'
        }

        self._config['SIMULATION'] = {
            'item_count': '50',
            'random_seed': '42',
            'sales_variation': '1.0'
        }

    def save(self):
        """Save configuration to file."""
        if not self._config_path.parent.exists():
            self._config_path.parent.mkdir(parents=True)

        with open(self._config_path, 'w') as configfile:
            self._config.write(configfile)

    def get(self, section, key, default=None):
        """Get configuration value."""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return default

    def get_int(self, section, key, default=None):
        """Get configuration value as integer."""
        try:
            return self._config.getint(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def get_float(self, section, key, default=None):
        """Get configuration value as float."""
        try:
            return self._config.getfloat(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def get_boolean(self, section, key, default=None):
        """Get configuration value as boolean."""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def set(self, section, key, value):
        """Set configuration value (in memory; call save() to persist)."""
        if not self._config.has_section(section):
            self._config.add_section(section)

        self._config.set(section, key, str(value))

    def remove(self, section, key):
        """Remove a configuration value if present."""
        if self._config.has_section(section):
            self._config.remove_option(section, key)

    @property
    def log_config(self):
        """Get logging configuration."""
        return {
            'level': self.get('LOGGING', 'level', 'INFO'),
            'format': self.get('LOGGING', 'format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
            'directory': self.get('LOGGING', 'directory', 'logs'),
            'max_size_mb': self.get_int('LOGGING', 'max_size_mb', 10),
            'backup_count': self.get_int('LOGGING', 'backup_count', 5),
            'console_output': self.get_boolean('LOGGING', 'console_output', True),
            'file_output': self.get_boolean('LOGGING', 'file_output', True)
        }

    @property
    def simulation_config(self):
        """Get sample-data and simulation configuration."""
        return {
            'item_count': self.get_int('SIMULATION', 'item_count', 50),
            'random_seed': self.get_int('SIMULATION', 'random_seed', 42),
            'sales_variation': self.get_float('SIMULATION', 'sales_variation', 1.0)
        }

    @property
    def policy_config(self) -> PolicyConfiguration:
        """Build a validated policy configuration.

        An explicit ``service_level_z`` wins; otherwise a ``service_level_goal``
        percentage is converted to a Z-score.

        Raises:
            InvalidConfiguration: If any policy value does not parse or is out of range
        """
        z_score = self._policy_value(self._config.getfloat, 'service_level_z')
        if z_score is None:
            goal = self._policy_value(self._config.getfloat, 'service_level_goal')
            if goal is None:
                z_score = PolicyConfiguration.service_level_z
            elif not 50.0 < goal < 100.0:
                raise InvalidConfiguration(
                    "Service level goal must be between 50 and 100 percent",
                    details={'field': 'service_level_goal', 'value': goal}
                )
            else:
                z_score = z_from_service_level(goal)

        getint, getfloat = self._config.getint, self._config.getfloat
        return PolicyConfiguration(
            forecasting_method=self.get('POLICY', 'forecasting_method', 'EXPONENTIAL'),
            moving_average_window=self._policy_value(getint, 'moving_average_window', 7),
            smoothing_alpha=self._policy_value(getfloat, 'smoothing_alpha', 0.4),
            service_level_z=z_score,
            average_lead_time_days=self._policy_value(getint, 'average_lead_time_days', 5),
            lead_time_std_days=self._policy_value(getfloat, 'lead_time_std_days', 1.5),
            default_ordering_cost=self._policy_value(getfloat, 'default_ordering_cost', 25.0)
        )

    def _policy_value(self, getter, key, default=None):
        """Read a POLICY value; a value that does not parse is an error, not a default."""
        if not self._config.has_option('POLICY', key):
            return default
        try:
            return getter('POLICY', key)
        except ValueError:
            raise InvalidConfiguration(
                f"Invalid value for POLICY.{key}: {self.get('POLICY', key)!r}",
                details={'field': key, 'value': self.get('POLICY', key)}
            )

# Global config instance
config = Config()
