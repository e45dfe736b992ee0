"""
Custom HTTP exceptions with error codes.

Extends FastAPI's HTTPException with standardized error codes so the
request layer can surface caller defects as consistent API errors.

Example:
    from common.utils import BadRequestException

    if limit < 1:
        raise BadRequestException("limit must be positive", code="INVALID_LIMIT")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException

from common.utils.responses import error_response


class APIException(HTTPException):
    """
    Base API exception with error code support.

    Provides consistent error response format across the API.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
            headers: Optional response headers
        """
        detail: Dict[str, Any] = {"message": message}

        if code:
            detail["code"] = code

        if details is not None:
            detail["details"] = details

        self.message = message
        self.code = code

        super().__init__(
            status_code=status_code,
            detail=detail,
            headers=headers,
        )

    def to_response(self) -> Dict[str, Any]:
        """Render this exception as a standard error response body."""
        return error_response(
            self.message,
            code=self.code,
            details=self.detail.get("details"),
        )


class BadRequestException(APIException):
    """400 Bad Request - Invalid input or malformed request."""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "BAD_REQUEST",
        details: Optional[Any] = None,
    ):
        super().__init__(400, message, code, details)
