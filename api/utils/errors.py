# api/utils/errors.py
from fastapi import HTTPException, status
from typing import Optional, Dict, Any
import logging
import traceback

logger = logging.getLogger("floorplan_drafter.api")

class APIError(Exception):
    """
    Base class for API-specific exceptions.

    Carries an HTTP status code and structured error details for the response.
    """
    def __init__(
        self,
        status_code: int,
        detail: str,
        internal_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the APIError with HTTP status and details.

        Args:
            status_code: HTTP status code to return
            detail: Human-readable error message
            internal_code: Optional internal error code for client reference
            extra: Optional additional error context
        """
        self.status_code = status_code
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
        super().__init__(detail)

    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        error_response = {
            "detail": self.detail,
        }

        if self.internal_code:
            error_response["code"] = self.internal_code

        if self.extra:
            error_response["extra"] = self.extra

        return HTTPException(
            status_code=self.status_code,
            detail=error_response
        )

class ValidationError(APIError):
    """Error raised for input that cannot be drafted."""
    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        message = f"Validation error"
        if field:
            message += f" for field '{field}'"
        message += f": {detail}"

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
            internal_code="validation_error",
            extra=extra
        )

class GenerationError(APIError):
    """Error raised when the layout generator fails or returns an unusable layout."""

    # Gateway statuses passed through to the client unchanged
    PASSTHROUGH_STATUSES = (status.HTTP_429_TOO_MANY_REQUESTS, status.HTTP_402_PAYMENT_REQUIRED)

    def __init__(
        self,
        detail: str,
        upstream_status: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize with generator failure details.

        Args:
            detail: Failure message from the generator client
            upstream_status: HTTP status returned by the gateway, if any
            extra: Optional additional context
        """
        status_code = (
            upstream_status if upstream_status in self.PASSTHROUGH_STATUSES
            else status.HTTP_502_BAD_GATEWAY
        )
        super().__init__(
            status_code=status_code,
            detail=detail,
            internal_code="generation_error",
            extra=extra
        )

class GeneratorUnavailableError(APIError):
    """Error raised when no layout generator is configured."""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Layout generator is not configured",
            internal_code="generator_unavailable"
        )

def handle_exception(e: Exception, resource_type: str = "resource", resource_id: Optional[str] = None) -> HTTPException:
    """
    Handle exceptions and convert to appropriate HTTPExceptions.

    Args:
        e: The exception to handle
        resource_type: Type of resource being processed (for context)
        resource_id: ID of the resource (for context)

    Returns:
        HTTPException with appropriate status code and details
    """
    # If it's already an APIError, just convert it
    if isinstance(e, APIError):
        return e.to_http_exception()

    # If it's already an HTTPException, return it
    if isinstance(e, HTTPException):
        return e

    # Log the full error
    error_detail = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(e)}\n{error_detail}")

    error_response = {
        "detail": f"An unexpected error occurred: {str(e)}",
        "code": "internal_server_error"
    }

    if resource_id:
        error_response["resource_id"] = resource_id

    if resource_type:
        error_response["resource_type"] = resource_type

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_response
    )
