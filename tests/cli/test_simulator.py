"""
Tests for the interactive menu loop.
"""

import io

import pytest
from stock_simulator.cli.simulator import SimulatorCLI, MENU_TEXT, parse_choice, create_cli
from stock_simulator.core.exceptions import InvalidMenuChoiceError
from stock_simulator.core.types import MenuChoice, MenuState
from stock_simulator.portfolio.portfolio import Portfolio


def run_session(market, portfolio, *lines):
    """Run the menu over scripted input and return the exit code and output"""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    cli = SimulatorCLI(market, portfolio, stdin=stdin, stdout=stdout)
    return cli.run(), stdout.getvalue(), cli


class TestParseChoice:
    def test_valid_choices(self):
        assert parse_choice('1\n') is MenuChoice.SHOW_MARKET
        assert parse_choice(' 0 ') is MenuChoice.EXIT

    @pytest.mark.parametrize('line', ['6', '-1', 'abc', ''])
    def test_invalid_choices(self, line):
        with pytest.raises(InvalidMenuChoiceError):
            parse_choice(line)


class TestSimulatorCLI:
    def test_exit(self, sample_market, sample_portfolio):
        """Test choice 0 ends the loop with exit code 0"""
        code, out, cli = run_session(sample_market, sample_portfolio, '0')

        assert code == 0
        assert out.startswith(MENU_TEXT)
        assert out.endswith("Goodbye! Please return later!\n")
        assert cli.state is MenuState.EXIT
        assert len(sample_market) == 0

    def test_end_of_input_exits(self, sample_market, sample_portfolio):
        code, out, _ = run_session(sample_market, sample_portfolio)

        assert code == 0
        assert "Goodbye! Please return later!" in out

    def test_show_market(self, sample_market, sample_portfolio):
        _, out, _ = run_session(sample_market, sample_portfolio, '1', '0')

        assert "~ Market Stocks ~" in out
        assert " 3.        Tesla | $  342.00 | Risk: High | Day 1" in out

    def test_invalid_option(self, sample_market, sample_portfolio):
        """Test unknown input redisplays the menu"""
        _, out, _ = run_session(sample_market, sample_portfolio, '9', 'abc', '0')

        assert out.count("Invalid option.") == 2
        assert out.count(MENU_TEXT) == 3

    def test_buy_scenario(self, sample_market, sample_portfolio):
        """Test buying 2 Apple shares through the menu"""
        _, out, _ = run_session(sample_market, sample_portfolio, '2', '1', '2', '4', '0')

        assert "Enter stock ID to buy: " in out
        assert "Balance: $2578.00" in out
        assert "Quantity: 2 | Value: $422.00" in out
        assert sample_portfolio.get_balance() == 2578.0

    def test_buy_insufficient_balance(self, sample_market, sample_portfolio):
        _, out, _ = run_session(sample_market, sample_portfolio, '2', '1', '100', '0')

        assert "Insufficient balance." in out
        assert sample_portfolio.get_balance() == 3000.0

    @pytest.mark.parametrize('stock_id', ['0', '4'])
    def test_buy_invalid_id(self, sample_market, sample_portfolio, stock_id):
        _, out, _ = run_session(sample_market, sample_portfolio, '2', stock_id, '1', '0')

        assert "Invalid ID." in out
        assert sample_portfolio.get_balance() == 3000.0

    def test_buy_non_numeric(self, sample_market, sample_portfolio):
        _, out, _ = run_session(sample_market, sample_portfolio, '2', 'one', '1', '0')

        assert "Invalid number." in out
        assert sample_portfolio.positions == {}

    def test_buy_non_positive_quantity(self, sample_market, sample_portfolio):
        _, out, _ = run_session(sample_market, sample_portfolio, '2', '1', '-3', '0')

        assert "Quantity must be positive." in out
        assert sample_portfolio.get_balance() == 3000.0

    def test_sell_name_with_spaces(self, sample_market, sample_portfolio):
        """Test selling a stock whose name contains whitespace"""
        _, out, _ = run_session(
            sample_market, sample_portfolio,
            '2', '2', '4',
            '3', '  Home Depot', '4',
            '0'
        )

        assert "Enter stock name to sell: " in out
        assert sample_portfolio.positions == {}
        assert sample_portfolio.get_balance() == 3000.0

    def test_sell_skips_blank_name_lines(self, sample_market, sample_portfolio):
        """Test blank lines before the stock name are skipped"""
        _, out, cli = run_session(
            sample_market, sample_portfolio,
            '2', '1', '2',
            '3', '', '   ', 'Apple', '2',
            '0'
        )

        assert "Invalid number." not in out
        assert sample_portfolio.positions == {}
        assert sample_portfolio.get_balance() == 3000.0
        assert out.endswith("Goodbye! Please return later!\n")
        assert out.count(MENU_TEXT) == 3

    def test_sell_blank_name_at_end_of_input(self, sample_market, sample_portfolio):
        code, out, _ = run_session(sample_market, sample_portfolio, '3', '')

        assert code == 0
        assert "Invalid number." in out
        assert "Goodbye! Please return later!" in out

    def test_sell_unknown(self, sample_market, sample_portfolio):
        _, out, _ = run_session(sample_market, sample_portfolio, '3', 'Google', '1', '0')
        assert "Stock not found in portfolio." in out

    def test_sell_too_many(self, sample_market, sample_portfolio):
        _, out, _ = run_session(
            sample_market, sample_portfolio, '2', '1', '2', '3', 'Apple', '5', '0'
        )

        assert "Not enough quantity." in out
        assert sample_portfolio.get_balance() == 2578.0

    def test_simulate_next_day(self, sample_market):
        """Test day advance moves market stocks and owned positions"""
        portfolio = Portfolio(3000.0)
        _, out, _ = run_session(sample_market, portfolio, '2', '1', '1', '5', '5', '0')

        assert "Simulating next day..." in out
        assert out.count("Changes simulated! Here's your updated portfolio:") == 2
        assert "Day 3 | Quantity: 1" in out
        assert sample_market.days_elapsed == 2

    def test_create_cli(self, sample_config):
        stdout = io.StringIO()
        cli = create_cli(sample_config, stdin=io.StringIO("4\n0\n"), stdout=stdout)

        assert cli.run() == 0
        assert len(cli.portfolio.positions) == 0
        assert "Balance: $3000.00" in stdout.getvalue()
