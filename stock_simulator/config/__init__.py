"""Configuration for the stock simulator."""

from .simulator_config import (
    StockSpec, SimulatorConfig, DEFAULT_CONFIG, CALM_MARKET_CONFIG,
    VOLATILE_MARKET_CONFIG, default_stocks, create_custom_config
)
from .logging_config import configure_logging

__all__ = [
    'StockSpec', 'SimulatorConfig', 'DEFAULT_CONFIG', 'CALM_MARKET_CONFIG',
    'VOLATILE_MARKET_CONFIG', 'default_stocks', 'create_custom_config',
    'configure_logging'
]
