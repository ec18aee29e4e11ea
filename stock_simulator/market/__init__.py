"""Market listing and stock price simulation."""

from .stock import BaseStock, SimulatedStock, create_rng
from .market import Market

__all__ = ['BaseStock', 'SimulatedStock', 'create_rng', 'Market']
