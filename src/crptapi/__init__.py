"""crptapi — rate-limited client for the CRPT document registry."""

from crptapi.codec import decode_document, encode_document, load_document
from crptapi.concurrency.rate_limiter import RateLimiter
from crptapi.core import submit_document, submit_documents
from crptapi.errors.exceptions import (
    CrptApiError,
    LimiterShutdownError,
    RejectedResponse,
    SerializationError,
    TransportError,
)
from crptapi.submission.client import DOCUMENTS_CREATE_URL, SubmissionClient
from crptapi.types import (
    Description,
    Document,
    OutcomeKind,
    Product,
    SubmissionOutcome,
    TimeUnit,
)

__all__ = [
    "DOCUMENTS_CREATE_URL",
    "CrptApiError",
    "Description",
    "Document",
    "LimiterShutdownError",
    "OutcomeKind",
    "Product",
    "RateLimiter",
    "RejectedResponse",
    "SerializationError",
    "SubmissionClient",
    "SubmissionOutcome",
    "TimeUnit",
    "TransportError",
    "decode_document",
    "encode_document",
    "load_document",
    "submit_document",
    "submit_documents",
]
