"""Concurrency — fixed-window admission control for submissions."""

from crptapi.concurrency.rate_limiter import RateLimiter

__all__ = ["RateLimiter"]
