"""HTTP client manager with connection pooling and lifecycle management.

A single manager caches ``httpx.AsyncClient`` instances keyed by their
configuration, so every endpoint call and token refresh shares pooled
connections. Timeouts and HTTP/2 default to the values in
:class:`~googleapis_rest.config.Settings`.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from ...config import get_settings

logger = logging.getLogger(__name__)


class HTTPClientManager:
    """Manages shared HTTP clients with connection pooling.

    This singleton caches clients by base URL, timeout, limits and HTTP
    version so that clients with the same settings are reused, and closes
    them all on :meth:`close_all`.
    """

    _instance: Optional["HTTPClientManager"] = None
    _lock = asyncio.Lock()

    def __new__(cls):
        """Ensure singleton pattern - only one instance exists.

        :return: The single instance of HTTPClientManager
        :rtype: HTTPClientManager
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize client storage and default connection limits."""
        if not hasattr(self, "_initialized"):
            self._clients: Dict[str, httpx.AsyncClient] = {}
            self._default_limits = httpx.Limits(
                max_keepalive_connections=10,
                max_connections=20,
                keepalive_expiry=30.0,
            )
            self._initialized = True
            self._is_closing = False

    def default_timeout(self) -> httpx.Timeout:
        """Return the timeout derived from the configured read timeout.

        :return: Timeout configuration
        :rtype: httpx.Timeout
        """
        return create_timeout(read=get_settings().http_timeout)

    async def get_client(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[httpx.Timeout] = None,
        limits: Optional[httpx.Limits] = None,
        **kwargs,
    ) -> httpx.AsyncClient:
        """Get or create an HTTP client for the given configuration.

        :param base_url: Optional base URL for the client
        :type base_url: Optional[str]
        :param timeout: Optional custom timeout configuration
        :type timeout: Optional[httpx.Timeout]
        :param limits: Optional custom connection limits
        :type limits: Optional[httpx.Limits]
        :param **kwargs: Additional ``httpx.AsyncClient`` options
        :return: Configured HTTP client instance
        :rtype: httpx.AsyncClient
        """
        http2_flag = kwargs.pop("http2", None)
        if http2_flag is None:
            http2_flag = get_settings().http_enable_http2
        if http2_flag:
            try:
                import h2  # type: ignore  # noqa: F401
            except ImportError:
                logger.warning(
                    "HTTP/2 requested but 'h2' package not installed; falling back to HTTP/1.1"
                )
                http2_flag = False
        follow = kwargs.pop("follow_redirects", True)
        timeout = timeout or self.default_timeout()
        limits = limits or self._default_limits

        cache_key = str(
            (
                base_url or "default",
                (timeout.connect, timeout.read, timeout.write, timeout.pool),
                (
                    limits.max_keepalive_connections,
                    limits.max_connections,
                    limits.keepalive_expiry,
                ),
                http2_flag,
                follow,
            )
        )

        client = self._clients.get(cache_key)
        if client is None or client.is_closed:
            async with self._lock:
                client = self._clients.get(cache_key)
                if client is None or client.is_closed:
                    client_config: Dict[str, Any] = {
                        "timeout": timeout,
                        "limits": limits,
                        "http2": http2_flag,
                        "follow_redirects": follow,
                        **kwargs,
                    }
                    if base_url:
                        client_config["base_url"] = base_url
                    client = httpx.AsyncClient(**client_config)
                    self._clients[cache_key] = client
                    logger.debug("Created new HTTP client for %s", cache_key)

        return client

    async def close_all(self):
        """Close all managed HTTP clients.

        Duplicate calls while a close is in progress are ignored; errors
        from individual clients are logged and do not stop the others
        from closing.
        """
        if self._is_closing:
            logger.debug("Already closing HTTP clients, skipping duplicate call")
            return

        self._is_closing = True
        try:
            if not self._clients:
                logger.debug("No HTTP clients to close")
                return
            logger.info("Closing %d HTTP client(s)...", len(self._clients))
            for cache_key, client in list(self._clients.items()):
                try:
                    await client.aclose()
                    logger.debug("Closed managed HTTP client: %s", cache_key)
                except Exception as e:
                    logger.warning(
                        "Error closing managed HTTP client %s: %s",
                        cache_key,
                        e,
                    )
            self._clients.clear()
            logger.info("All HTTP clients closed successfully")
        finally:
            self._is_closing = False


http_client_manager = HTTPClientManager()


async def get_http_client(**kwargs) -> httpx.AsyncClient:
    """Get a shared HTTP client from the global manager.

    :param **kwargs: Client configuration parameters
    :return: Configured HTTP client instance
    :rtype: httpx.AsyncClient
    """
    return await http_client_manager.get_client(**kwargs)


def create_timeout(
    connect: float = 5.0,
    read: float = 30.0,
    write: float = 10.0,
    pool: float = 5.0,
) -> httpx.Timeout:
    """Create a timeout configuration object.

    :param connect: Connection timeout in seconds
    :type connect: float
    :param read: Read timeout in seconds
    :type read: float
    :param write: Write timeout in seconds
    :type write: float
    :param pool: Pool timeout in seconds
    :type pool: float
    :return: Configured timeout object
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(connect=connect, read=read, write=write, pool=pool)


def create_limits(
    max_keepalive_connections: int = 10,
    max_connections: int = 20,
    keepalive_expiry: float = 30.0,
) -> httpx.Limits:
    """Create a connection limits configuration object.

    :param max_keepalive_connections: Maximum number of keepalive connections
    :type max_keepalive_connections: int
    :param max_connections: Maximum total number of connections
    :type max_connections: int
    :param keepalive_expiry: Keepalive connection expiry time in seconds
    :type keepalive_expiry: float
    :return: Configured limits object
    :rtype: httpx.Limits
    """
    return httpx.Limits(
        max_keepalive_connections=max_keepalive_connections,
        max_connections=max_connections,
        keepalive_expiry=keepalive_expiry,
    )
