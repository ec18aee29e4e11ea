"""
Stock Simulator - an educational console stock market simulator.

This package provides:
- Synthetic stocks whose prices follow a risk-scaled random walk
- A fixed market listing advanced one simulated day at a time
- A cash portfolio that buys and sells shares of listed stocks
- An interactive text menu tying it all together
"""

__version__ = "1.0.0"
__author__ = "Stock Simulator Team"

from .core.types import RiskLevel, OrderSide, MenuChoice, MenuState
from .core.models import Trade
from .config.simulator_config import SimulatorConfig, StockSpec, DEFAULT_CONFIG
from .market.stock import BaseStock, SimulatedStock, create_rng
from .market.market import Market
from .portfolio.position import OwnedStock
from .portfolio.portfolio import Portfolio
from .cli.simulator import SimulatorCLI, create_cli, main


# Convenience factory functions
def create_market(config: SimulatorConfig = None, seed: int = None) -> Market:
    """Create the reference market, optionally with a fixed seed"""
    if config is None:
        config = DEFAULT_CONFIG
    return Market.from_config(config, create_rng(seed if seed is not None else config.seed))


__all__ = [
    # Core types
    'RiskLevel', 'OrderSide', 'MenuChoice', 'MenuState', 'Trade',
    # Configuration
    'SimulatorConfig', 'StockSpec', 'DEFAULT_CONFIG',
    # Main components
    'BaseStock', 'SimulatedStock', 'create_rng', 'Market', 'OwnedStock', 'Portfolio',
    # Console
    'SimulatorCLI', 'create_cli', 'main',
    # Convenience functions
    'create_market'
]
