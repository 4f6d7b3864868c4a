# ABOUTME: Core exception classes for the shared-object registry
# ABOUTME: Provides structured error handling with context and error codes

from typing import Any, Dict


class FlyweightException(Exception):
    """Base exception class for the shared-object registry.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the package inherit from this class so
    callers can catch registry failures with a single ``except`` clause.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize FlyweightException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ValidationException(FlyweightException):
    """Exception raised for input validation errors.

    Used when caller-supplied data fails validation checks, such as:
    - Missing required values
    - Values of the wrong type
    - Values outside acceptable bounds

    Should include specific details about what validation failed.
    """

    pass


class InvalidKeyError(ValidationException):
    """Exception raised when a registry key is null, empty, or otherwise unusable.

    The rejected key is recorded (as its ``repr``) under ``details["key"]``.
    A rejected key never creates a registry entry; the caller must correct
    and resubmit it.
    """

    def __init__(
        self,
        message: str,
        key: Any = None,
        code: str | None = "INVALID_KEY",
        details: Dict[str, Any] | None = None,
    ):
        merged = {"key": repr(key)}
        if details:
            merged.update(details)
        super().__init__(message, code, merged)
        self.key = key


class ConfigurationException(FlyweightException):
    """Exception raised for configuration errors.

    Used when a registry is constructed with invalid options, such as:
    - Non-positive key length limits
    - Non-callable factories or writers

    Should include details about the configuration issue.
    """

    pass
