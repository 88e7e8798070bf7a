"""Domain enumerations for the frontdoor service.

Enums represent fixed sets of domain values (e.g. log severity).
"""

import logging
from enum import Enum

from frontdoor.domain.exceptions import ValidationException

# Stdlib has no level below DEBUG; registered by setup_logging.
TRACE_LEVEL = 5


class LogLevel(str, Enum):
    """Minimum severity the service logs.

    Values are the lowercase names operators put in RHO_LOGLEVEL.
    """

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"
    PANIC = "panic"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid level values as strings."""
        return [level.value for level in cls]

    @classmethod
    def parse(cls, raw: str) -> "LogLevel":
        """Parse a level name, ignoring case; "warning" is accepted for warn.

        Args:
            raw: Level name as configured.

        Returns:
            The matching LogLevel.

        Raises:
            ValidationException: If raw is not a recognized level.
        """
        name = raw.lower()
        if name == "warning":
            return cls.WARN
        try:
            return cls(name)
        except ValueError:
            raise ValidationException(
                f"Not a valid log level: {raw!r}. Must be one of: {', '.join(cls.values())}",
                field="log_level",
            ) from None

    def to_logging_level(self) -> int:
        """Return the equivalent stdlib logging level number."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS: dict[LogLevel, int] = {
    LogLevel.TRACE: TRACE_LEVEL,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.PANIC: logging.CRITICAL,
}
