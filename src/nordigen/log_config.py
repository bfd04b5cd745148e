# nordigen/log_config.py
"""Logging configuration for the nordigen library using Loguru.

The library logs through the shared Loguru ``logger`` but keeps its own
namespace disabled until an application opts in, either with
``logger.enable("nordigen")`` or by calling :func:`configure_logging`.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

logger.disable("nordigen")


def configure_logging(level: str = "INFO", sink=sys.stderr, *, diagnose: bool = False):
    """
    Configures Loguru for applications using nordigen.

    Removes existing handlers, adds one with the specified level and sink and
    enables log output from the ``nordigen`` namespace.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "nordigen.log").
        diagnose: Whether to show variable values in tracebacks. Off by default
            since request bodies can hold secrets.
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=diagnose,
    )
    logger.enable("nordigen")
    logger.info(f"nordigen logging configured with level={level.upper()} writing to {sink}")
