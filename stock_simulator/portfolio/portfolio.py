"""
Portfolio management for cash and positions.
"""

from typing import Dict, List, Optional
import logging

from .position import OwnedStock
from ..market.stock import SimulatedStock
from ..core.models import Trade
from ..core.types import OrderSide
from ..core.exceptions import (
    StockSimulatorError, InsufficientFundsError, InsufficientSharesError,
    PositionNotFoundError, InvalidOrderError
)

logger = logging.getLogger(__name__)

# Console messages for rejected orders
REJECTION_MESSAGES = {
    InsufficientFundsError: "Insufficient balance.",
    InsufficientSharesError: "Not enough quantity.",
    PositionNotFoundError: "Stock not found in portfolio.",
    InvalidOrderError: "Quantity must be positive.",
}


def rejection_message(error: StockSimulatorError) -> str:
    return REJECTION_MESSAGES.get(type(error), str(error))


class Portfolio:
    """Manages cash balance and stock positions"""

    def __init__(self, initial_balance: float = 3000.0):
        if initial_balance < 0:
            raise ValueError("Initial balance cannot be negative")

        self.cash = float(initial_balance)
        self.initial_balance = float(initial_balance)
        # Keyed by stock name, in purchase order
        self.positions: Dict[str, OwnedStock] = {}
        self.trades: List[Trade] = []

    def get_balance(self) -> float:
        return self.cash

    def get_position(self, name: str) -> Optional[OwnedStock]:
        return self.positions.get(name)

    def can_buy(self, stock: SimulatedStock, quantity: int) -> bool:
        """Check if we have enough cash to buy"""
        if quantity <= 0:
            return False
        return stock.price * quantity <= self.cash

    def can_sell(self, name: str, quantity: int) -> bool:
        """Check if we have enough shares to sell"""
        position = self.get_position(name)
        return position is not None and position.can_sell(quantity)

    def execute_buy(self, stock: SimulatedStock, quantity: int) -> OwnedStock:
        """Execute a buy order at the stock's current price"""
        if quantity <= 0:
            raise InvalidOrderError("Quantity must be positive")

        cost = stock.price * quantity
        if not self.can_buy(stock, quantity):
            raise InsufficientFundsError(cost, self.cash)

        self.cash -= cost
        position = self.get_position(stock.name)
        if position is None:
            position = OwnedStock.from_stock(stock, quantity)
            self.positions[stock.name] = position
        else:
            position.add_shares(quantity)

        self.trades.append(Trade(symbol=stock.name, side=OrderSide.BUY,
                                 quantity=quantity, price=stock.price))
        logger.info(f"Bought {quantity} {stock.name} @ ${stock.price:.2f}, cash ${self.cash:.2f}")
        return position

    def execute_sell(self, name: str, quantity: int) -> float:
        """Execute a sell order at the position's current price. Returns proceeds"""
        position = self.get_position(name)
        if position is None:
            raise PositionNotFoundError(name)
        if quantity <= 0:
            raise InvalidOrderError("Quantity must be positive")
        if not self.can_sell(name, quantity):
            raise InsufficientSharesError(name, quantity, position.quantity)

        proceeds = quantity * position.price
        position.remove_shares(quantity)
        self.cash += proceeds
        if position.quantity == 0:
            del self.positions[name]

        self.trades.append(Trade(symbol=name, side=OrderSide.SELL,
                                 quantity=quantity, price=position.price))
        logger.info(f"Sold {quantity} {name} @ ${position.price:.2f}, cash ${self.cash:.2f}")
        return proceeds

    def buy(self, stock: SimulatedStock, quantity: int, file=None) -> bool:
        """Buy shares, printing the reason and leaving state untouched on failure"""
        try:
            self.execute_buy(stock, quantity)
        except StockSimulatorError as e:
            logger.warning(f"Buy rejected: {e}")
            print(rejection_message(e), file=file)
            return False
        return True

    def sell(self, name: str, quantity: int, file=None) -> bool:
        """Sell shares, printing the reason and leaving state untouched on failure"""
        try:
            self.execute_sell(name, quantity)
        except StockSimulatorError as e:
            logger.warning(f"Sell rejected: {e}")
            print(rejection_message(e), file=file)
            return False
        return True

    def update_prices(self) -> None:
        """Advance every owned position by one simulated day"""
        for position in self.positions.values():
            position.update_price()

    def holdings_value(self) -> float:
        return sum(position.total_value for position in self.positions.values())

    def total_value(self) -> float:
        """Cash plus the value of every position"""
        return self.cash + self.holdings_value()

    def get_pnl(self) -> float:
        """Calculate total profit/loss vs initial balance"""
        return self.total_value() - self.initial_balance

    def render(self) -> str:
        lines = ["", "~ This is Your Portfolio ~", f"Balance: ${self.cash:.2f}"]
        if not self.positions:
            lines.append("No stocks owned yet")
        else:
            lines.extend(position.display_line() for position in self.positions.values())
        return "\n".join(lines)

    def display(self, file=None) -> None:
        print(self.render(), file=file)

    def clear(self) -> None:
        """Release every remaining position"""
        self.positions.clear()

    def __str__(self) -> str:
        return f"Portfolio(Cash: ${self.cash:.2f}, Positions: {len(self.positions)}, Trades: {len(self.trades)})"

    def __repr__(self) -> str:
        return self.__str__()
