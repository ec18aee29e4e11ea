"""
Interactive console loop for the investment simulator.
"""

from typing import Optional
import logging
import sys

from ..config.simulator_config import SimulatorConfig, DEFAULT_CONFIG
from ..config.logging_config import configure_logging
from ..core.exceptions import InvalidInstrumentIdError, InvalidMenuChoiceError
from ..core.types import MenuChoice, MenuState
from ..market.market import Market
from ..market.stock import create_rng
from ..portfolio.portfolio import Portfolio

logger = logging.getLogger(__name__)

MENU_TEXT = (
    "\n~ This is investment simulator ~\n"
    "1. Show market\n"
    "2. Buy stock\n"
    "3. Sell stock\n"
    "4. Show portfolio\n"
    "5. Simulate next day\n"
    "0. Exit\n"
    "Please, choose an action(number): "
)


def parse_choice(line: str) -> MenuChoice:
    """Parse a line of user input into a menu option"""
    try:
        return MenuChoice(int(line.strip()))
    except ValueError:
        raise InvalidMenuChoiceError(line.strip())


class SimulatorCLI:
    """Menu-driven loop over a market and a portfolio"""

    def __init__(self, market: Market, portfolio: Portfolio, stdin=None, stdout=None):
        self.market = market
        self.portfolio = portfolio
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.state = MenuState.MENU_DISPLAY
        self.handlers = {
            MenuChoice.SHOW_MARKET: self.show_market,
            MenuChoice.BUY: self.buy_stock,
            MenuChoice.SELL: self.sell_stock,
            MenuChoice.SHOW_PORTFOLIO: self.show_portfolio,
            MenuChoice.NEXT_DAY: self.simulate_next_day,
            MenuChoice.EXIT: self.exit,
        }

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def prompt(self, text: str) -> Optional[str]:
        """Write a prompt and read one line. Returns None at end of input"""
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def read_int(self, text: str) -> Optional[int]:
        line = self.prompt(text)
        try:
            return int(line.strip()) if line is not None else None
        except ValueError:
            return None

    def read_name(self, text: str) -> Optional[str]:
        """Read a free-text name, skipping blank lines. Returns None at end of input"""
        line = self.prompt(text)
        while line is not None and not line.strip():
            line = self.stdin.readline()
            line = line.rstrip("\r\n") if line else None
        return line.strip() if line is not None else None

    def run(self) -> int:
        """Run the menu until the user exits. Returns the process exit code"""
        choice = MenuChoice.EXIT
        line = None
        while self.state is not MenuState.EXIT:
            if self.state is MenuState.MENU_DISPLAY:
                line = self.prompt(MENU_TEXT)
                self.state = MenuState.AWAITING_CHOICE
            elif self.state is MenuState.AWAITING_CHOICE:
                if line is None:
                    logger.debug("End of input, exiting")
                    self.write()
                    choice = MenuChoice.EXIT
                else:
                    try:
                        choice = parse_choice(line)
                    except InvalidMenuChoiceError as e:
                        logger.debug(str(e))
                        self.write("Invalid option.")
                        self.state = MenuState.MENU_DISPLAY
                        continue
                self.state = MenuState.DISPATCH
            elif self.state is MenuState.DISPATCH:
                self.handlers[choice]()
                if choice is not MenuChoice.EXIT:
                    self.state = MenuState.MENU_DISPLAY
        return 0

    def show_market(self) -> None:
        self.write("\n~ Market Stocks ~")
        self.market.display(file=self.stdout)

    def buy_stock(self) -> None:
        self.write("Enter stock ID to buy: ")
        self.market.display(file=self.stdout)
        stock_id = self.read_int("")
        quantity = self.read_int("Enter quantity: ")
        if stock_id is None or quantity is None:
            self.write("Invalid number.")
            return

        try:
            stock = self.market.get_stock(stock_id)
        except InvalidInstrumentIdError as e:
            logger.debug(str(e))
            self.write("Invalid ID.")
            return
        self.portfolio.buy(stock, quantity, file=self.stdout)

    def sell_stock(self) -> None:
        name = self.read_name("Enter stock name to sell: ")
        quantity = self.read_int("Enter quantity: ")
        if name is None or quantity is None:
            self.write("Invalid number.")
            return
        self.portfolio.sell(name, quantity, file=self.stdout)

    def show_portfolio(self) -> None:
        self.portfolio.display(file=self.stdout)

    def simulate_next_day(self) -> None:
        self.write("Simulating next day...")
        self.market.advance_day()
        self.portfolio.update_prices()
        self.write("Changes simulated! Here's your updated portfolio:")
        self.portfolio.display(file=self.stdout)

    def exit(self) -> None:
        self.write("Goodbye! Please return later!")
        self.portfolio.clear()
        self.market.clear()
        self.state = MenuState.EXIT


def create_cli(config: SimulatorConfig = None, stdin=None, stdout=None) -> SimulatorCLI:
    """Create a simulator session from a configuration"""
    if config is None:
        config = DEFAULT_CONFIG
    market = Market.from_config(config, create_rng(config.seed))
    portfolio = Portfolio(config.initial_balance)
    return SimulatorCLI(market, portfolio, stdin=stdin, stdout=stdout)


def main() -> int:
    configure_logging(DEFAULT_CONFIG.log_level)
    return create_cli(DEFAULT_CONFIG).run()
