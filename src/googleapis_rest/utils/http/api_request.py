"""The shared request helper used by every endpoint method.

``request`` sends one JSON call to a Google REST endpoint and returns the
parsed JSON response. It adds the authorization headers of the optional
credentials client, retries idempotent calls on transient failures and
turns error responses into :class:`~googleapis_rest.exceptions.APIError`.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from ...config import get_settings
from ...exceptions import APIError
from ..security import sanitize_headers
from .client_manager import get_http_client
from .retry import async_retry

if TYPE_CHECKING:
    from ...auth.base import CredentialsClient

logger = logging.getLogger(__name__)

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "PUT", "DELETE"})
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


async def _send(
    http: httpx.AsyncClient,
    method: str,
    url: str,
    headers: Dict[str, str],
    body: Optional[str],
) -> httpx.Response:
    response = await http.request(method, url, headers=headers, content=body)
    response.raise_for_status()
    return response


async def request(
    url: str,
    *,
    client: Optional["CredentialsClient"] = None,
    method: str = "GET",
    body: Optional[str] = None,
) -> Any:
    """Perform one call against a Google REST endpoint.

    :param url: Fully resolved URL, including any query string
    :type url: str
    :param client: Credentials used to authorize the call, if any
    :type client: Optional[CredentialsClient]
    :param method: HTTP method
    :type method: str
    :param body: JSON encoded request body
    :type body: Optional[str]
    :return: Parsed JSON response, ``{}`` when the response has no body
    :rtype: Any
    :raises APIError: If the API answers with a non-success status
    :raises httpx.TransportError: If the request cannot be delivered
    """
    method = method.upper()
    headers = {"Accept": "application/json"}
    if body is not None:
        headers["Content-Type"] = "application/json"
    if client is not None:
        headers.update(await client.get_request_headers())

    settings = get_settings()
    max_attempts = settings.http_max_attempts if method in IDEMPOTENT_METHODS else 1
    send = async_retry(
        max_attempts=max_attempts,
        delay=settings.http_retry_delay,
        exceptions=(httpx.TransportError, httpx.HTTPStatusError),
        status_codes=RETRY_STATUS_CODES,
    )(_send)

    http = await get_http_client()
    logger.debug("%s %s headers=%s", method, url, sanitize_headers(headers))
    try:
        response = await send(http, method, url, headers, body)
    except httpx.HTTPStatusError as e:
        error = APIError.from_response(e.response)
        logger.warning(
            "%s %s failed with %s: %s", method, url, error.status_code, error.message
        )
        raise error from e

    logger.debug("%s %s -> %d", method, url, response.status_code)
    if not response.content:
        return {}
    return response.json()
