"""
Core data models for the stock simulator.
"""

from dataclasses import dataclass, field
from datetime import datetime
import uuid

from .types import OrderSide


@dataclass
class Trade:
    """Represents an executed trade"""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    symbol: str = ""
    side: OrderSide = OrderSide.BUY
    quantity: int = 0
    price: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def value(self) -> float:
        """Cash moved by this trade"""
        return self.quantity * self.price
