"""
Position management for individual stock holdings.
"""

from ..market.stock import SimulatedStock


class OwnedStock(SimulatedStock):
    """Shares of one stock held in a portfolio.

    A position is a snapshot of the market stock at purchase time. From then on
    its price walks independently of the market listing it was copied from.
    """

    def __init__(self, stock_id: int, name: str, price: float, risk_level, quantity: int = 0,
                 **kwargs):
        super().__init__(stock_id, name, price, risk_level, **kwargs)
        if quantity < 0:
            raise ValueError("Quantity cannot be negative")
        self.quantity = quantity

    @classmethod
    def from_stock(cls, stock: SimulatedStock, quantity: int) -> 'OwnedStock':
        """Snapshot a market stock's id, name, price and risk level"""
        return cls(stock.id, stock.name, stock.price, stock.risk_level, quantity,
                   rng=stock.rng, volatility=stock.volatility_table, min_price=stock.min_price)

    @property
    def total_value(self) -> float:
        """Market value at the position's current price"""
        return self.quantity * self.price

    def add_shares(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValueError("Quantity must be positive")
        self.quantity += quantity

    def remove_shares(self, quantity: int) -> bool:
        """Remove shares from position. Returns True if successful"""
        if quantity <= 0:
            raise ValueError("Quantity must be positive")

        if quantity > self.quantity:
            return False

        self.quantity -= quantity
        return True

    def can_sell(self, quantity: int) -> bool:
        """Check if we can sell the requested quantity"""
        return self.quantity >= quantity and quantity > 0

    def display_line(self) -> str:
        return f"{super().display_line()} | Quantity: {self.quantity} | Value: ${self.total_value:.2f}"

    def __str__(self) -> str:
        return f"Position({self.name}: {self.quantity} @ ${self.price:.2f})"
