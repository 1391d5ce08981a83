# spigetloom/log_config.py
"""Loguru setup for spigetloom.

The client traces every request it builds and sends (method, URL, status) at
DEBUG/TRACE level and reports failed calls at WARNING/ERROR. Those records stay
muted until the application turns them on with `configure_logging`, or with
``logger.enable("spigetloom")`` when it manages its own Loguru handlers.
"""

import sys

from loguru import logger

__all__ = ["configure_logging", "disable_logging", "logger"]

LOGGER_NAME = "spigetloom"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def disable_logging() -> None:
    """Mutes spigetloom's records without touching the application's handlers."""
    logger.disable(LOGGER_NAME)


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Routes spigetloom's log records to a single sink.

    Replaces any existing Loguru handlers with one for `sink` and unmutes the
    library. Use "DEBUG" to see each request and response status, "TRACE" to
    also see headers and form bodies.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "TRACE", "WARNING").
        sink: The output sink (e.g., sys.stderr, "spiget.log").
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,  # Only colorize if writing to stderr
        backtrace=True,
        diagnose=False,  # No local variable values in tracebacks
    )
    logger.enable(LOGGER_NAME)
    logger.info(f"spigetloom logging enabled at level={level.upper()} on {sink}")
