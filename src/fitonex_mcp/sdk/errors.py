"""
FitONEX SDK error types.

Every failure raised by the HTTP transport is one of the three
FitonexApiError subclasses below.
"""

from typing import Optional


class FitonexApiError(Exception):
    """Base class for transport, HTTP and decode failures."""

    error_code = "API_ERROR"


class ApiConnectionError(FitonexApiError):
    """No response was obtained (DNS, refused connection, timeout...)."""

    error_code = "CONNECTION_ERROR"


class ApiHTTPError(FitonexApiError):
    """The server answered with a non-2xx status."""

    error_code = "HTTP_ERROR"

    def __init__(self, status_code: int, message: str, code: Optional[str] = None):
        super().__init__(f"{message} (status={status_code})")
        self.status_code = status_code
        self.message = message
        self.code = code


class ApiDecodeError(FitonexApiError):
    """The response body is not JSON or does not match the expected shape."""

    error_code = "DECODE_ERROR"
