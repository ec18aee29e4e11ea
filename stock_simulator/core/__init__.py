"""Core components of the stock simulator."""

from .types import (
    MIN_PRICE, DEFAULT_VOLATILITY, RiskLevel, OrderSide, MenuChoice, MenuState
)
from .models import Trade
from .exceptions import (
    StockSimulatorError, InsufficientFundsError, InsufficientSharesError,
    PositionNotFoundError, InvalidInstrumentIdError, InvalidMenuChoiceError,
    InvalidOrderError
)

__all__ = [
    'MIN_PRICE', 'DEFAULT_VOLATILITY', 'RiskLevel', 'OrderSide',
    'MenuChoice', 'MenuState', 'Trade',
    'StockSimulatorError', 'InsufficientFundsError', 'InsufficientSharesError',
    'PositionNotFoundError', 'InvalidInstrumentIdError', 'InvalidMenuChoiceError',
    'InvalidOrderError'
]
