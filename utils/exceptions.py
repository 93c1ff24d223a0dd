"""
Custom exception classes for service clients and protocol handling.
"""
from typing import Optional, Dict, Any


class SdkError(Exception):
    """Base class for every error raised by the client layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ServiceError(SdkError):
    """Exception raised when a service answers with an error response."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
        response_data: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize service error.

        Args:
            message: Error message returned by the service
            error_code: Service error code (e.g. ResourceNotFoundException)
            status_code: HTTP status code of the response
            request_id: Service request id if available
            response_data: Parsed error document if available
        """
        super().__init__(message)
        self.error_code = error_code
        self.status_code = status_code
        self.request_id = request_id
        self.response_data = response_data or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"{self.error_code}: {self.message}"
        return self.message


class MissingParameterError(SdkError):
    """Exception raised before sending when a required URI or host field is unset."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        operation: Optional[str] = None
    ):
        """
        Initialize missing parameter error.

        Args:
            message: Error message
            field: Name of the unset field
            operation: Operation name if available
        """
        super().__init__(message)
        self.field = field
        self.operation = operation


class EndpointResolutionError(SdkError):
    """Exception raised when no valid endpoint can be built for a request."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


class NetworkError(SdkError):
    """Exception raised when the HTTP call itself fails."""

    def __init__(self, message: str, url: Optional[str] = None):
        """
        Initialize network error.

        Args:
            message: Error message
            url: Request URL if available
        """
        super().__init__(message)
        self.url = url


class ResponseParseError(SdkError):
    """Exception raised when a response body cannot be decoded."""

    def __init__(self, message: str, body: Optional[bytes] = None):
        super().__init__(message)
        self.body = body
