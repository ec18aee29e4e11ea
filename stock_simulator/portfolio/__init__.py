"""Portfolio management components."""

from .position import OwnedStock
from .portfolio import Portfolio

__all__ = ['OwnedStock', 'Portfolio']
