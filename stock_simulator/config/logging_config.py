"""
Logging setup for the simulator.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr so they never mix with the menu text"""
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr)
