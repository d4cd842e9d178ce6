"""Error handling — exception hierarchy shared by the limiter and the client."""

from crptapi.errors.exceptions import (
    CrptApiError,
    LimiterShutdownError,
    RejectedResponse,
    SerializationError,
    TransportError,
)

__all__ = [
    "CrptApiError",
    "SerializationError",
    "TransportError",
    "RejectedResponse",
    "LimiterShutdownError",
]
