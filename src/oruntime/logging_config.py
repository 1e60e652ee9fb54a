"""
Deterministic logging configuration for the O runtime.

Library modules never configure handlers on import; they only ask for a
named logger. Hosts that want to see runtime diagnostics call
``setup_logging`` once.
"""

import logging
import sys
from typing import Final

LOGGER_NAMESPACE: Final[str] = "oruntime"
LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL: Final[int] = logging.WARNING


def setup_logging(level: int = DEFAULT_LEVEL) -> logging.Logger:
    """
    Attach a single stderr handler to the ``oruntime`` logger.

    Args:
        level: The logging level to use (default: WARNING).

    Returns:
        The ``oruntime`` logger instance.
    """
    runtime_logger = logging.getLogger(LOGGER_NAMESPACE)
    # Replace handlers so repeated calls stay deterministic
    runtime_logger.handlers.clear()
    runtime_logger.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    runtime_logger.addHandler(handler)
    runtime_logger.propagate = False
    return runtime_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the ``oruntime`` namespace."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
