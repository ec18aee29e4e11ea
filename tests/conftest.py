"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np
from stock_simulator.config.simulator_config import SimulatorConfig, StockSpec
from stock_simulator.core.types import RiskLevel
from stock_simulator.market.market import Market
from stock_simulator.market.stock import SimulatedStock
from stock_simulator.portfolio.portfolio import Portfolio


class ScriptedRng:
    """Stand-in generator that returns pre-chosen daily draws"""

    def __init__(self, draws):
        self.draws = list(draws)

    def integers(self, low, high):
        assert (low, high) == (-100, 101)
        return self.draws.pop(0)


@pytest.fixture
def rng():
    """Deterministic numpy generator"""
    return np.random.default_rng(12345)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def apple(rng):
    return SimulatedStock(1, 'Apple', 211.0, RiskLevel.MEDIUM, rng=rng)


@pytest.fixture
def sample_config():
    """Small market with a multi-word stock name"""
    return SimulatorConfig(
        initial_balance=3000.0,
        seed=7,
        stocks=[
            StockSpec(1, 'Apple', 211.0, RiskLevel.MEDIUM),
            StockSpec(2, 'Home Depot', 50.0, RiskLevel.LOW),
            StockSpec(3, 'Tesla', 342.0, RiskLevel.HIGH),
        ]
    )


@pytest.fixture
def sample_market(sample_config, rng):
    return Market.from_config(sample_config, rng)


@pytest.fixture
def sample_portfolio():
    """Create a sample portfolio for testing"""
    return Portfolio(initial_balance=3000.0)
