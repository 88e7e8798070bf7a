"""Domain exceptions for the frontdoor service.

Defines the errors that abort startup. Both kinds are terminal: the entry
point reports them and exits without running partially configured.
"""

from typing import Any


class FrontdoorException(Exception):
    """Base exception for all frontdoor errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(FrontdoorException):
    """Raised when a configured value is rejected (bad log level, both modes disabled)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional settings field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class EnvironmentException(FrontdoorException):
    """Raised when the operating system cannot identify the current user."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "ENVIRONMENT_ERROR")
