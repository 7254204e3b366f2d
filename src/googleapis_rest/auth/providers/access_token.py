"""Fixed bearer token provider.

Use this when the access token is obtained elsewhere (for example with
``gcloud auth print-access-token``). The token is never refreshed.
"""

import logging

from ...exceptions import ConfigurationError
from ...models import Token
from ..base import CredentialsClient, ProviderConfig
from ..registry import register_provider

logger = logging.getLogger(__name__)


@register_provider("access_token")
class AccessTokenProvider(CredentialsClient):
    """Authorize requests with a fixed OAuth2 access token."""

    def __init__(self, config: ProviderConfig):
        """Initialize the provider.

        :param config: Provider configuration with ``access_token``
        :type config: ProviderConfig
        :raises ConfigurationError: If no token is configured
        """
        access_token = config.get("access_token")
        if not access_token:
            raise ConfigurationError(
                "access_token provider requires 'access_token'",
                setting="GOOGLEAPIS_ACCESS_TOKEN",
            )
        self._token = Token(value=access_token)

    @property
    def provider_type(self) -> str:
        return "access_token"

    async def get_token(self) -> Token:
        return self._token

    async def validate_token(self, token: Token) -> bool:
        return bool(token.value)

    async def close(self) -> None:
        pass
