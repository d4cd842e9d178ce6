"""Map httpx failures and HTTP responses onto the crptapi error hierarchy."""

from __future__ import annotations

import httpx

from crptapi.errors.exceptions import RejectedResponse, TransportError

SUCCESS_STATUS = 200


def classify_transport_error(exc: httpx.RequestError) -> TransportError:
    """Convert an httpx request failure to a TransportError.

    Covers transport failures as well as bodies that fail to decode and redirect
    loops; the latter two are reported as "protocol".
    """
    if isinstance(exc, httpx.TimeoutException):
        error_type = "timeout"
    elif isinstance(exc, httpx.ConnectError):
        error_type = "connection"
    elif isinstance(exc, httpx.NetworkError):
        error_type = "network"
    else:
        # ProtocolError, ProxyError, DecodingError, TooManyRedirects, ...
        error_type = "protocol"

    return TransportError(
        str(exc) or type(exc).__name__,
        error_type=error_type,
        original=exc,
    )


def classify_status(status_code: int, body: str) -> RejectedResponse | None:
    """Return a RejectedResponse for any status other than 200, else None."""
    if status_code == SUCCESS_STATUS:
        return None
    return RejectedResponse(status_code=status_code, body=body)
