"""Define base credential provider interfaces.

Every endpoint client accepts an optional :class:`CredentialsClient`. The
shared request helper asks it for the headers that authorize a call, so
any kind of Google credential (a fixed access token, an authorized user
refresh token, a service account key) can be plugged in.

Examples
--------
.. code-block:: python

   class StaticProvider(CredentialsClient):
       @property
       def provider_type(self) -> str:
           return "static"

       async def get_token(self) -> Token:
           return Token(value="ya29.example")

       async def validate_token(self, token: Token) -> bool:
           return True

       async def close(self) -> None:
           pass
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from ..models import Token

logger = logging.getLogger(__name__)

# Tokens are refreshed once fewer than this many seconds remain
REFRESH_BUFFER = timedelta(minutes=5)


class CredentialsClient(ABC):
    """Provide the core credentials interface.

    Define the minimal contract for anything that can authorize a request
    against a Google API.
    """

    @property
    @abstractmethod
    def provider_type(self) -> str:
        """Return the provider type identifier.

        :return: Provider type (e.g., "service_account", "authorized_user").
        """
        pass

    @abstractmethod
    async def get_token(self) -> Token:
        """Return a valid access token.

        Refresh the token if necessary.

        :return: Valid access token.
        """
        pass

    @abstractmethod
    async def validate_token(self, token: Token) -> bool:
        """Return whether the token is still usable.

        :param token: Token to validate.
        :return: True if token is valid, False otherwise.
        """
        pass

    async def get_request_headers(self) -> Dict[str, str]:
        """Return the headers that authorize a request.

        :return: Header mapping with an ``Authorization`` entry.
        """
        token = await self.get_token()
        return {"Authorization": f"{token.token_type} {token.value}"}

    @abstractmethod
    async def close(self) -> None:
        """Clean up provider resources."""
        pass


class RefreshingCredentialsClient(CredentialsClient):
    """Cache an access token and refresh it shortly before it expires.

    Subclasses implement :meth:`_refresh` to exchange their long-lived
    credential for a new access token. Concurrent callers share a single
    refresh.
    """

    def __init__(self, scopes: Optional[List[str]] = None):
        self.scopes: List[str] = list(scopes or [])
        self._token: Optional[Token] = None
        self._refresh_lock = asyncio.Lock()

    async def get_token(self) -> Token:
        """Return the cached token, refreshing it when it is about to expire.

        :return: Valid access token.
        :raises TokenError: If the token endpoint rejects the exchange.
        """
        if self._token and await self.validate_token(self._token):
            return self._token
        async with self._refresh_lock:
            if self._token and await self.validate_token(self._token):
                return self._token
            logger.debug("Refreshing %s access token", self.provider_type)
            self._token = await self._refresh()
            logger.debug(
                "%s access token obtained, expires at %s",
                self.provider_type,
                self._token.expires_at,
            )
            return self._token

    async def validate_token(self, token: Token) -> bool:
        """Return whether the token has more than five minutes left.

        :param token: Token to validate.
        :return: True if token is valid, False otherwise.
        """
        if token.expires_at is None:
            return True
        expiry = token.expires_at
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=timezone.utc)
        return datetime.now(timezone.utc) < (expiry - REFRESH_BUFFER)

    @abstractmethod
    async def _refresh(self) -> Token:
        """Obtain a new access token from the token endpoint."""
        pass

    async def close(self) -> None:
        """Drop the cached token."""
        self._token = None


class ProviderConfig:
    """Hold provider configuration values.

    Wrap a parsed credentials document with both mapping-style and
    attribute-style access.
    """

    def __init__(self, **kwargs):
        """Initialize configuration from keyword arguments.

        :param kwargs: Provider-specific configuration parameters.
        """
        self._config = kwargs

    def get(self, key: str, default: Any = None) -> Any:
        """Return configuration value by key.

        :param key: Configuration key to retrieve.
        :param default: Default value if key not present.
        :return: The configuration value or the default.
        """
        return self._config.get(key, default)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._config:
            return self._config[name]
        raise AttributeError(f"Config has no attribute '{name}'")
