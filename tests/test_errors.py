"""
Tests for the error hierarchy and error handler
"""
from bashkeys.utils.errors import (
    BashKeysError,
    ErrorCategory,
    ErrorHandler,
    FileSystemError,
    InvalidArgumentError,
    UninstallError,
    ValidationError,
    format_error_message,
)


class TestErrorHierarchy:
    """Tests for exception classes"""

    def test_invalid_argument_is_validation_error(self):
        error = InvalidArgumentError("unrecognized arguments: -z")
        assert isinstance(error, ValidationError)
        assert isinstance(error, BashKeysError)
        assert error.category is ErrorCategory.VALIDATION

    def test_uninstall_is_file_system_error(self):
        error = UninstallError()
        assert isinstance(error, FileSystemError)
        assert error.message == "Failed to uninstall bk"

    def test_to_dict(self):
        error = InvalidArgumentError("bad flag", details={"usage": "usage: bk"})
        assert error.to_dict() == {
            "error_type": "InvalidArgumentError",
            "category": "validation",
            "message": "bad flag",
            "details": {"usage": "usage: bk"},
        }


class TestErrorHandler:
    """Tests for ErrorHandler and message formatting"""

    def test_handle_library_error(self):
        result = ErrorHandler.handle(UninstallError("nope"), "uninstall")
        assert result["error_type"] == "UninstallError"
        assert result["message"] == "nope"

    def test_handle_unknown_error(self):
        result = ErrorHandler.handle(RuntimeError("boom"), "render")
        assert result["error_type"] == "UnknownError"
        assert result["category"] == "unknown"
        assert result["details"] == {"context": "render"}

    def test_format_error_message(self):
        assert format_error_message(InvalidArgumentError("bad")) == "bad"
        assert "unexpected" in format_error_message(RuntimeError("secret internals"))
