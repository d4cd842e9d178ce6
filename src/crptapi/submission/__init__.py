"""Submission — the rate-limited registry client."""

from crptapi.submission.client import DOCUMENTS_CREATE_URL, SubmissionClient

__all__ = ["DOCUMENTS_CREATE_URL", "SubmissionClient"]
