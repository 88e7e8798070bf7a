"""Domain layer: enums and exceptions.

No dependencies on infrastructure. Used by core and infrastructure layers.
"""

from frontdoor.domain.enums import LogLevel
from frontdoor.domain.exceptions import (
    EnvironmentException,
    FrontdoorException,
    ValidationException,
)

__all__ = [
    # Enums
    "LogLevel",
    # Exceptions
    "EnvironmentException",
    "FrontdoorException",
    "ValidationException",
]
