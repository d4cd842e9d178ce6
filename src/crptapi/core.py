"""Top-level entry points: submit_document(), submit_documents()."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from crptapi.submission.client import SubmissionClient
from crptapi.types import Document, SubmissionOutcome, TimeUnit


def submit_document(
    document: Document | Mapping[str, Any],
    signature: str,
    time_unit: TimeUnit | str | timedelta | float,
    request_limit: int,
    timeout: float | None = None,
) -> SubmissionOutcome:
    """Submit a single document (sync wrapper)."""
    return submit_documents(
        [(document, signature)],
        time_unit=time_unit,
        request_limit=request_limit,
        timeout=timeout,
    )[0]


def submit_documents(
    submissions: list[tuple[Document | Mapping[str, Any], str]],
    time_unit: TimeUnit | str | timedelta | float,
    request_limit: int,
    timeout: float | None = None,
) -> list[SubmissionOutcome]:
    """Submit several documents through one rate-limited client (sync wrapper)."""

    async def _run() -> list[SubmissionOutcome]:
        async with SubmissionClient(time_unit, request_limit, timeout=timeout) as client:
            return await client.submit_many(submissions)

    return asyncio.run(_run())
