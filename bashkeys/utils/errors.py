"""Centralized error handling module."""

from enum import Enum
from typing import Any, Dict

from bashkeys.utils.logging import get_logger

_logger = None


def _get_logger():
    """Get logger with lazy initialisation."""
    global _logger
    if _logger is None:
        _logger = get_logger(__name__)
    return _logger


## Error Categories


class ErrorCategory(Enum):
    """Categories of errors for better handling."""

    VALIDATION = "validation"
    FILE_SYSTEM = "file_system"
    UNKNOWN = "unknown"


## Custom Exceptions


class BashKeysError(Exception):
    """Base exception for all bash-keys errors."""

    category = ErrorCategory.UNKNOWN
    user_message = "An error occurred"

    def __init__(
        self, message: str | None = None, details: Dict[str, Any] | None = None
    ):
        """Initialise BashKeysError with optional message and details."""
        self.message = message or self.user_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error details to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


## Validation Errors


class ValidationError(BashKeysError):
    """Base exception for validation-related errors."""

    category = ErrorCategory.VALIDATION
    user_message = "Invalid input"


class InvalidArgumentError(ValidationError):
    """Exception for unrecognized flags, chained letters or stray arguments."""

    user_message = "Invalid argument"


## File System Errors


class FileSystemError(BashKeysError):
    """Base exception for file system-related errors."""

    category = ErrorCategory.FILE_SYSTEM
    user_message = "A file system error occurred"


class UninstallError(FileSystemError):
    """Exception when the installed launcher cannot be found or removed."""

    user_message = "Failed to uninstall bk"


## Error Handler


class ErrorHandler:
    """Centralized error handling and logging."""

    @staticmethod
    def handle(
        error: Exception, context: str = "", log_traceback: bool = False
    ) -> Dict[str, Any]:
        """Handle errors with logging and user-friendly message."""
        if isinstance(error, BashKeysError):
            _get_logger().debug(
                f"{context}: {error.message}",
                extra={"details": error.details},
                exc_info=log_traceback,
            )
            return error.to_dict()

        if log_traceback:
            _get_logger().exception(f"{context}: {error}")
        else:
            _get_logger().error(f"{context}: {error}")

        return {
            "error_type": "UnknownError",
            "category": ErrorCategory.UNKNOWN.value,
            "message": str(error),
            "details": {"context": context},
        }


## Utility Functions


def format_error_message(error: Exception) -> str:
    """Format an error message for display."""
    if isinstance(error, BashKeysError):
        return error.message
    else:
        return "An unexpected error occurred - see the log output above for details."
