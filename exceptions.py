"""Custom exceptions for the vowel words extractor."""

from typing import Optional, Dict, Any


class VowelWordsError(Exception):
    """Base exception class for the vowel words extractor."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize base exception.

        Args:
            message: Error message.
            error_code: Optional error code for categorization.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details
        }


class ConfigurationError(VowelWordsError):
    """Raised for a malformed environment setting."""
    pass


class DataError(VowelWordsError):
    """Base for failures to obtain the text of an input file."""
    pass


class ValidationError(VowelWordsError):
    """Raised when a request is rejected before any file is touched."""
    pass


class AccessDeniedError(ValidationError):
    """Raised when a requested path lies outside the data directory."""

    def __init__(self, file_path: str):
        super().__init__(
            f"Access denied: {file_path}",
            error_code="ACCESS_DENIED",
            details={"file_path": file_path}
        )


class MissingFileError(DataError):
    """Exception raised when the input file does not exist."""

    def __init__(self, file_path: str, message: Optional[str] = None):
        """Initialize missing file error.

        Args:
            file_path: Path to the missing file.
            message: Custom error message.
        """
        if message is None:
            message = f"File does not exist: {file_path}"
        super().__init__(message, error_code="FILE_NOT_FOUND", details={"file_path": file_path})


class ReadError(DataError):
    """Exception raised when an existing file cannot be read."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        """Initialize read error.

        Args:
            message: Underlying reason the read failed.
            file_path: Path that was being read, if known.
        """
        details = {"file_path": file_path} if file_path is not None else None
        super().__init__(message, error_code="READ_ERROR", details=details)


def handle_error(error: Exception) -> VowelWordsError:
    """Convert generic exceptions to VowelWordsError instances.

    Args:
        error: The original exception.

    Returns:
        Appropriate VowelWordsError instance.
    """
    if isinstance(error, VowelWordsError):
        return error

    # Builtin FileNotFoundError is an OSError, so it must be checked first
    if isinstance(error, FileNotFoundError):
        return MissingFileError(error.filename or str(error))
    elif isinstance(error, ValueError):
        return ValidationError(str(error))
    elif isinstance(error, OSError):
        return ReadError(str(error), file_path=error.filename)
    else:
        return VowelWordsError(f"Unexpected error: {str(error)}")


def create_error_response(error: Exception) -> Dict[str, Any]:
    """Create standardized error response for API endpoints.

    Args:
        error: The exception that occurred.

    Returns:
        Dictionary containing error information for API response.
    """
    return handle_error(error).to_dict()
