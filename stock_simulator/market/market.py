"""
The market: an ordered, fixed listing of simulated stocks.
"""

from typing import Iterator, List, Optional
import logging

import numpy as np
import pandas as pd

from .stock import SimulatedStock, create_rng
from ..config.simulator_config import SimulatorConfig
from ..core.exceptions import InvalidInstrumentIdError

logger = logging.getLogger(__name__)


class Market:
    """Owns the canonical list of stocks and advances them day by day"""

    def __init__(self, stocks: List[SimulatedStock]):
        self.stocks = list(stocks)
        self.days_elapsed = 0

    @classmethod
    def from_config(cls, config: SimulatorConfig,
                    rng: Optional[np.random.Generator] = None) -> 'Market':
        """Build the market listing described by a configuration"""
        if rng is None:
            rng = create_rng(config.seed)
        stocks = [
            SimulatedStock(spec.id, spec.name, spec.price, spec.risk_level,
                           rng=rng, volatility=config.volatility, min_price=config.min_price)
            for spec in config.stocks
        ]
        logger.info(f"Market opened with {len(stocks)} stocks")
        return cls(stocks)

    def get_stock(self, display_index: int) -> SimulatedStock:
        """Get a stock by its 1-based position in the listing"""
        if not 1 <= display_index <= len(self.stocks):
            raise InvalidInstrumentIdError(display_index, len(self.stocks))
        return self.stocks[display_index - 1]

    def find(self, name: str) -> Optional[SimulatedStock]:
        for stock in self.stocks:
            if stock.name == name:
                return stock
        return None

    def advance_day(self) -> None:
        """Move every listed stock forward by one simulated day"""
        for stock in self.stocks:
            stock.update_price()
        self.days_elapsed += 1
        logger.debug(f"Market advanced to day {self.days_elapsed + 1}")

    def current_prices(self) -> dict:
        return {stock.name: stock.price for stock in self.stocks}

    def history_frame(self) -> pd.DataFrame:
        """Price history with one column per stock and one row per day"""
        frame = pd.DataFrame({stock.name: pd.Series(stock.price_history) for stock in self.stocks})
        frame.index = pd.RangeIndex(1, len(frame) + 1, name="day")
        return frame

    def display(self, file=None) -> None:
        for stock in self.stocks:
            print(stock.display_line(), file=file)

    def clear(self) -> None:
        """Release every listed stock"""
        self.stocks.clear()

    def __len__(self) -> int:
        return len(self.stocks)

    def __iter__(self) -> Iterator[SimulatedStock]:
        return iter(self.stocks)

    def __str__(self) -> str:
        return f"Market(Stocks: {len(self.stocks)}, Days: {self.days_elapsed})"

    def __repr__(self) -> str:
        return self.__str__()
