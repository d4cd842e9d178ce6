"""Custom exception hierarchy for crptapi."""

from __future__ import annotations

class CrptApiError(Exception):
    """Base exception for all crptapi errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class SerializationError(CrptApiError):
    """Document could not be encoded or decoded — never retried, no request sent."""

    def __init__(self, message: str = "", original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class TransportError(CrptApiError):
    """Transport-level failure before a response was received.

    Examples: connection refused, DNS failure, read timeout, broken connection.
    """

    def __init__(
        self,
        message: str = "",
        error_type: str = "connection",
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.original = original


class RejectedResponse(CrptApiError):
    """Completed HTTP exchange with a status other than 200."""

    def __init__(self, message: str = "", status_code: int = 0, body: str = "") -> None:
        super().__init__(message or f"Document rejected with status {status_code}")
        self.status_code = status_code
        self.body = body


class LimiterShutdownError(CrptApiError):
    """Admission was cancelled because the rate limiter shut down."""
