"""Console interface of the stock simulator."""

from .simulator import SimulatorCLI, MENU_TEXT, parse_choice, create_cli, main

__all__ = ['SimulatorCLI', 'MENU_TEXT', 'parse_choice', 'create_cli', 'main']
