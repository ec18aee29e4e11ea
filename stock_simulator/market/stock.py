"""
Stock models and daily price evolution.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import logging
import time

import numpy as np

from ..core.types import MIN_PRICE, DEFAULT_VOLATILITY, RiskLevel

logger = logging.getLogger(__name__)


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the process-wide random generator, seeded from the clock by default"""
    if seed is None:
        seed = time.time_ns()
    logger.debug(f"Seeding price generator with {seed}")
    return np.random.default_rng(seed)


class BaseStock(ABC):
    """Base class for all tradable stocks"""

    def __init__(self, stock_id: int, name: str, price: float, risk_level: RiskLevel):
        if stock_id <= 0:
            raise ValueError("Stock id must be positive")
        self.id = stock_id
        self.name = name
        self.price = float(price)
        self.risk_level = RiskLevel.from_value(risk_level)

    @abstractmethod
    def update_price(self) -> float:
        """Advance the stock by one simulated day and return the new price"""
        pass

    def display_line(self) -> str:
        """Single line for market and portfolio listings"""
        return f"{self.id:>2}. {self.name:>12} | ${self.price:>8.2f} | Risk: {self.risk_level.value}"

    def __str__(self) -> str:
        return f"{self.name} (${self.price:.2f}, {self.risk_level.value})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name!r}, price={self.price:.2f})"


class SimulatedStock(BaseStock):
    """Stock whose price follows a bounded random walk scaled by its risk level"""

    def __init__(self, stock_id: int, name: str, price: float, risk_level: RiskLevel,
                 rng: Optional[np.random.Generator] = None,
                 volatility: Optional[Dict[RiskLevel, float]] = None,
                 min_price: float = MIN_PRICE):
        if price < min_price:
            raise ValueError(f"Price must be at least {min_price}")
        super().__init__(stock_id, name, price, risk_level)
        self.rng = rng if rng is not None else create_rng()
        self.volatility_table = volatility if volatility is not None else DEFAULT_VOLATILITY
        self.min_price = min_price
        self.price_history: List[float] = [self.price]

    @property
    def volatility(self) -> float:
        return self.volatility_table[self.risk_level]

    @property
    def day(self) -> int:
        """Day counter shown in listings, 1 on the listing day"""
        return len(self.price_history)

    @property
    def price_change(self) -> float:
        return self.price - self.price_history[0]

    @property
    def price_change_percent(self) -> float:
        return self.price_change / self.price_history[0] * 100

    def update_price(self) -> float:
        # Uniform integer in [-100, 100] scaled to a fraction in [-1, 1]
        fraction = int(self.rng.integers(-100, 101)) / 100.0
        change = fraction * self.volatility * self.price
        self.price = max(self.price + change, self.min_price)
        self.price_history.append(self.price)
        return self.price

    def get_history(self) -> List[float]:
        return list(self.price_history)

    def display_line(self) -> str:
        return f"{super().display_line()} | Day {self.day}"
