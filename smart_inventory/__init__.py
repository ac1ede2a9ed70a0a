from .config import config, PolicyConfiguration
from .logging_setup import logger, get_logger
from .exceptions import (
    InventoryError, ConfigError, InvalidConfiguration, ValidationError,
    InvalidQuantity, ItemError, NotFoundError
)
from .models import Item, ReplenishmentDecision, ForecastMethod
from .repository import InventoryRepository
from .services.decision_engine import DecisionEngine

__all__ = [
    'config',
    'PolicyConfiguration',
    'logger',
    'get_logger',
    'InventoryError',
    'ConfigError',
    'InvalidConfiguration',
    'ValidationError',
    'InvalidQuantity',
    'ItemError',
    'NotFoundError',
    'Item',
    'ReplenishmentDecision',
    'ForecastMethod',
    'InventoryRepository',
    'DecisionEngine'
]
