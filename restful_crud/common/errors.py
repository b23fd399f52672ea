"""
Error Definitions

Defines custom exception classes used in the application for unified error handling.

Only expected, classified failures are modelled here. Database errors raised by
SQLAlchemy are never wrapped and reach the global handler unchanged.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
            status_code: HTTP status code
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Convert to dictionary format (for API response)

        Args:
            include_details: Whether to include the details payload

        Returns:
            dict: Error information dictionary
        """
        result = {
            "error": {
                "message": self.message,
                "type": self.error_type,
                "code": self.code,
            }
        }
        if include_details and self.details:
            result["error"]["details"] = self.details
        return result


class NotFoundError(AppError):
    """
    Resource Not Found Error

    Raised when an entity looked up by identifier does not exist.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "not_found",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="not_found_error",
            code=code,
            details=details,
            status_code=404,
        )


class CountNotFoundError(AppError):
    """
    Count Not Found Error

    Raised when a scalar count query yields no value or a value that is not an integer.
    """

    def __init__(
        self,
        message: str = "Count not found",
        code: str = "count_not_found",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="count_not_found_error",
            code=code,
            details=details,
            status_code=500,
        )


class BadRequestError(AppError):
    """
    Bad Request Error

    Raised when the request body is missing or malformed.
    """

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "bad_request",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="bad_request_error",
            code=code,
            details=details,
            status_code=400,
        )


class UnsupportedApiVersionError(AppError):
    """
    Unsupported API Version Error

    Raised when the version path segment is not one of the configured API versions.
    """

    def __init__(
        self,
        version: str,
        supported: Optional[list[str]] = None,
    ):
        super().__init__(
            message=f"API version '{version}' is not supported",
            error_type="bad_request_error",
            code="unsupported_api_version",
            details={"supported_versions": supported or []},
            status_code=400,
        )
