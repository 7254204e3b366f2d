"""HTTP utilities public API (barrel module).

This package provides:
- Shared HTTP client manager and helpers
- Retry decorator with jittered backoff
- The ``request`` helper every endpoint method calls

Recommended import pattern for consumers:
    from googleapis_rest.utils.http import request, get_http_client
"""

from .client_manager import (
    HTTPClientManager,
    create_limits,
    create_timeout,
    get_http_client,
    http_client_manager,
)
from .api_request import IDEMPOTENT_METHODS, RETRY_STATUS_CODES, request
from .retry import async_retry

__all__ = [
    "HTTPClientManager",
    "http_client_manager",
    "get_http_client",
    "create_timeout",
    "create_limits",
    "async_retry",
    "request",
    "IDEMPOTENT_METHODS",
    "RETRY_STATUS_CODES",
]
