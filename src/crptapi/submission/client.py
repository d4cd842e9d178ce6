"""Async submission client — admission, encoding, one POST, outcome."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any

import httpx

from crptapi.codec import encode_document
from crptapi.concurrency.rate_limiter import RateLimiter
from crptapi.errors.classify import classify_status, classify_transport_error
from crptapi.errors.exceptions import LimiterShutdownError, SerializationError
from crptapi.types import Document, OutcomeKind, SubmissionOutcome, TimeUnit

logger = logging.getLogger(__name__)

DOCUMENTS_CREATE_URL = "https://ismp.crpt.ru/api/v3/lk/documents/create"

_HEADERS = {"Content-Type": "application/json"}


class SubmissionClient:
    """Submits documents to the registry, at most ``request_limit`` per ``time_unit``.

    One RateLimiter lives as long as the client and is shared by every call.
    ``shutdown()`` must be awaited (or the client used as an async context
    manager) to stop its replenishment task.
    """

    def __init__(
        self,
        time_unit: TimeUnit | str | timedelta | float,
        request_limit: int,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self._rate_limiter = RateLimiter(time_unit, request_limit)

        # An injected client stays owned by the caller.
        self._owns_http_client = http_client is None
        if http_client is None:
            client_kwargs: dict[str, Any] = {}
            if timeout is not None:
                client_kwargs["timeout"] = timeout
            http_client = httpx.AsyncClient(**client_kwargs)
        self._http_client = http_client
        self._closed = False

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    @property
    def is_shutdown(self) -> bool:
        return self._closed

    async def submit(
        self,
        document: Document | Mapping[str, Any],
        signature: str,
    ) -> SubmissionOutcome:
        """Submit one document and return its classified outcome.

        Never raises for limiter shutdown, encoding, transport or non-200
        responses; those come back as the matching OutcomeKind. The signature is
        part of the call contract but is not sent.
        """
        try:
            await self._rate_limiter.acquire()
        except LimiterShutdownError as exc:
            logger.warning("Submission cancelled: %s", exc)
            return SubmissionOutcome(kind=OutcomeKind.CANCELLED, error=exc)

        loop = asyncio.get_running_loop()
        started = loop.time()

        try:
            payload = encode_document(document)
        except SerializationError as exc:
            logger.error("Document not submitted: %s", exc)
            return SubmissionOutcome(
                kind=OutcomeKind.SERIALIZATION_ERROR,
                error=exc,
                elapsed_seconds=loop.time() - started,
            )

        try:
            response = await self._http_client.post(
                DOCUMENTS_CREATE_URL,
                content=payload.encode("utf-8"),
                headers=_HEADERS,
            )
        except httpx.RequestError as exc:
            classified = classify_transport_error(exc)
            logger.error(
                "Transport failure (%s) submitting document: %s",
                classified.error_type,
                classified.message,
            )
            return SubmissionOutcome(
                kind=OutcomeKind.TRANSPORT_ERROR,
                error=classified,
                elapsed_seconds=loop.time() - started,
            )

        return self._classify_response(response, loop.time() - started)

    async def submit_many(
        self,
        submissions: Iterable[tuple[Document | Mapping[str, Any], str]],
    ) -> list[SubmissionOutcome]:
        """Submit (document, signature) pairs concurrently, outcomes in input order."""
        tasks = [self.submit(document, signature) for document, signature in submissions]
        return list(await asyncio.gather(*tasks))

    async def shutdown(self) -> None:
        """Stop the rate limiter and close the owned HTTP client (idempotent)."""
        if self._closed:
            return
        self._closed = True
        self._rate_limiter.shutdown()
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> SubmissionClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.shutdown()

    @staticmethod
    def _classify_response(response: httpx.Response, elapsed: float) -> SubmissionOutcome:
        body = response.text
        rejected = classify_status(response.status_code, body)

        if rejected is None:
            logger.debug("Document accepted in %.3fs", elapsed)
            return SubmissionOutcome(
                kind=OutcomeKind.ACCEPTED,
                status_code=response.status_code,
                body=body,
                elapsed_seconds=elapsed,
            )

        logger.warning("Document rejected with status %d", response.status_code)
        logger.info("Rejected response body: %s", body)
        return SubmissionOutcome(
            kind=OutcomeKind.REJECTED,
            status_code=response.status_code,
            body=body,
            error=rejected,
            elapsed_seconds=elapsed,
        )
