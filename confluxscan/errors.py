"""
errors.py

Exception hierarchy raised by the client.

ValidationError is raised before any request is sent. TransportError and
APIError describe a request that was sent and failed. Network exceptions from
requests propagate unchanged.
"""

from typing import Any, Optional


class ScanError(Exception):
    """Base class for every error raised by the client."""


class ValidationError(ScanError, ValueError):
    """A caller-supplied parameter failed local validation."""


class TransportError(ScanError):
    """The scanner answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP error! status: {status_code}")


class APIError(ScanError):
    """
    The response envelope reported a failure.

    Attributes:
        status: The envelope's ``status`` value.
        message: The envelope's ``message`` value.
        result: The envelope's ``result`` value, often an extra reason string.
    """

    def __init__(self, message: str, status: Any = None, result: Any = None):
        self.status = status
        self.message = message
        self.result = result
        super().__init__(message)


class NotFoundError(APIError):
    """The request succeeded but carried no usable result."""
