"""
Configuration settings for the stock simulator.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.types import MIN_PRICE, DEFAULT_VOLATILITY, RiskLevel


@dataclass
class StockSpec:
    """Initial listing of a single stock"""
    id: int
    name: str
    price: float
    risk_level: RiskLevel = RiskLevel.MEDIUM

    def __post_init__(self):
        self.risk_level = RiskLevel.from_value(self.risk_level)


def default_stocks() -> List[StockSpec]:
    """Reference market listing"""
    return [
        StockSpec(1, "Apple", 211.0, RiskLevel.MEDIUM),
        StockSpec(2, "Google", 165.0, RiskLevel.MEDIUM),
        StockSpec(3, "Amazon", 205.0, RiskLevel.HIGH),
        StockSpec(4, "McDonald's", 314.0, RiskLevel.LOW),
        StockSpec(5, "UnitedHealth", 60.0, RiskLevel.LOW),
        StockSpec(6, "Tesla", 342.0, RiskLevel.HIGH),
        StockSpec(7, "NVDA", 134.0, RiskLevel.HIGH),
        StockSpec(8, "Microsoft", 453.0, RiskLevel.MEDIUM),
        StockSpec(9, "META", 643.0, RiskLevel.HIGH),
    ]


@dataclass
class SimulatorConfig:
    """Main simulator configuration"""
    initial_balance: float = 3000.0
    min_price: float = MIN_PRICE
    volatility: Dict[RiskLevel, float] = field(default_factory=lambda: dict(DEFAULT_VOLATILITY))
    seed: Optional[int] = None  # None seeds from the wall clock
    stocks: List[StockSpec] = field(default_factory=default_stocks)
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.initial_balance < 0:
            raise ValueError("Initial balance cannot be negative")
        if self.min_price <= 0:
            raise ValueError("Minimum price must be positive")
        missing = [level.value for level in RiskLevel if level not in self.volatility]
        if missing:
            raise ValueError(f"Missing volatility for risk levels: {', '.join(missing)}")


# Predefined configurations
DEFAULT_CONFIG = SimulatorConfig()

CALM_MARKET_CONFIG = SimulatorConfig(
    volatility={
        RiskLevel.HIGH: 0.10,
        RiskLevel.MEDIUM: 0.05,
        RiskLevel.LOW: 0.02,
    }
)

VOLATILE_MARKET_CONFIG = SimulatorConfig(
    volatility={
        RiskLevel.HIGH: 0.40,
        RiskLevel.MEDIUM: 0.20,
        RiskLevel.LOW: 0.10,
    }
)


def create_custom_config(stocks: List[StockSpec] = None, initial_balance: float = 3000.0,
                         market_mode: str = "default", seed: Optional[int] = None) -> SimulatorConfig:
    """Create a custom configuration based on market mode"""

    modes = {
        "calm": CALM_MARKET_CONFIG,
        "default": DEFAULT_CONFIG,
        "volatile": VOLATILE_MARKET_CONFIG,
    }

    if market_mode not in modes:
        market_mode = "default"

    return SimulatorConfig(
        initial_balance=initial_balance,
        volatility=dict(modes[market_mode].volatility),
        seed=seed,
        stocks=list(stocks) if stocks is not None else default_stocks(),
    )
