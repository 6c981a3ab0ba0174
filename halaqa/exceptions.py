"""
Exceptions raised by the halaqa client.

The progress engine never raises; everything here comes from the API layer
or from client-side validation done before a request is sent.
"""

from typing import Any, Optional


class HalaqaError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(HalaqaError):
    """Raised when input is rejected before any request is made."""


class ApiError(HalaqaError):
    """
    Raised when the backend answers with a non-2xx status.

    Attributes:
        message: Server-provided message when available, else a generic one
        status_code: HTTP status, or None when no response was received
        payload: Parsed response body (dict, list, str) or None
    """

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"


class AuthenticationError(ApiError):
    """Raised on HTTP 401. The stored session has already been cleared."""


class NetworkError(ApiError):
    """Raised when the request never produced a response (DNS, refused, timeout)."""
