"""
Core type definitions for the stock simulator.
Contains all enums and basic constants.
"""

from enum import Enum, IntEnum


# Prices are clamped to this floor after every simulated day
MIN_PRICE = 1.0


class RiskLevel(Enum):
    """Volatility classification of a stock"""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_value(cls, value) -> 'RiskLevel':
        """Parse a risk level from an enum member or a case-insensitive name"""
        if isinstance(value, cls):
            return value
        for level in cls:
            if level.value.lower() == str(value).strip().lower():
                return level
        raise ValueError(f"Unknown risk level: {value!r}")

    def __str__(self) -> str:
        return self.value


# Fraction of the current price a stock can move in a single day
DEFAULT_VOLATILITY = {
    RiskLevel.HIGH: 0.20,
    RiskLevel.MEDIUM: 0.10,
    RiskLevel.LOW: 0.05,
}


class OrderSide(Enum):
    """Side of a trade - buy or sell"""
    BUY = "buy"
    SELL = "sell"


class MenuChoice(IntEnum):
    """Numeric options of the interactive menu"""
    EXIT = 0
    SHOW_MARKET = 1
    BUY = 2
    SELL = 3
    SHOW_PORTFOLIO = 4
    NEXT_DAY = 5


class MenuState(Enum):
    """States of the interactive loop"""
    MENU_DISPLAY = "menu_display"
    AWAITING_CHOICE = "awaiting_choice"
    DISPATCH = "dispatch"
    EXIT = "exit"
