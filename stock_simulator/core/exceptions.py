"""
Custom exceptions for the stock simulator.
"""


class StockSimulatorError(Exception):
    """Base exception for stock simulator"""
    pass


class InsufficientFundsError(StockSimulatorError):
    """Raised when attempting to buy with insufficient funds"""
    def __init__(self, required: float, available: float):
        self.required = required
        self.available = available
        super().__init__(f"Insufficient funds: need ${required:.2f}, have ${available:.2f}")


class InsufficientSharesError(StockSimulatorError):
    """Raised when attempting to sell more shares than available"""
    def __init__(self, symbol: str, requested: int, available: int):
        self.symbol = symbol
        self.requested = requested
        self.available = available
        super().__init__(f"Insufficient shares of {symbol}: need {requested}, have {available}")


class PositionNotFoundError(StockSimulatorError):
    """Raised when selling a stock that is not in the portfolio"""
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"No position in {symbol}")


class InvalidInstrumentIdError(StockSimulatorError):
    """Raised for a market index outside the listed stocks"""
    def __init__(self, stock_id: int, market_size: int):
        self.stock_id = stock_id
        self.market_size = market_size
        super().__init__(f"Invalid stock ID {stock_id}: expected 1..{market_size}")


class InvalidMenuChoiceError(StockSimulatorError):
    """Raised for input that is not one of the menu options"""
    def __init__(self, choice: str):
        self.choice = choice
        super().__init__(f"Invalid menu choice: {choice!r}")


class InvalidOrderError(StockSimulatorError):
    """Raised for invalid order parameters"""
    pass
