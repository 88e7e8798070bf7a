"""Logging configuration for the service."""

import logging
import sys

from frontdoor.domain.enums import TRACE_LEVEL, LogLevel


def setup_logging(level: LogLevel) -> None:
    """Configure process-wide logging at the resolved severity.

    Registers the TRACE level name, installs a stdout handler when none
    exists, and sets the root level even if handlers were already set up.
    """
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    log_level = level.to_logging_level()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger().setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
