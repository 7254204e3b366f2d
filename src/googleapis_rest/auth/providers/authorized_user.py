"""Authorized user provider.

Handles the ``authorized_user`` credentials document written by
``gcloud auth application-default login``: an OAuth2 client id and secret
plus a refresh token, exchanged for access tokens with the refresh token
grant.
"""

import logging

from ...exceptions import ConfigurationError
from ...models import Token
from ..base import ProviderConfig, RefreshingCredentialsClient
from ..registry import register_provider
from .oauth import GOOGLE_TOKEN_URI, exchange_token

logger = logging.getLogger(__name__)


@register_provider("authorized_user")
class AuthorizedUserProvider(RefreshingCredentialsClient):
    """Refresh-token credentials of an end user."""

    def __init__(self, config: ProviderConfig):
        """Initialize the provider.

        :param config: Provider configuration with client_id, client_secret,
                       refresh_token and optionally token_uri and quota_project_id
        :type config: ProviderConfig
        :raises ConfigurationError: If a required field is missing
        """
        super().__init__(scopes=config.get("scopes"))
        self.client_id = config.get("client_id")
        self.client_secret = config.get("client_secret")
        self.refresh_token = config.get("refresh_token")
        self.token_uri = config.get("token_uri") or GOOGLE_TOKEN_URI
        self.quota_project_id = config.get("quota_project_id")

        missing = [
            name
            for name in ("client_id", "client_secret", "refresh_token")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"authorized_user credentials missing: {', '.join(missing)}"
            )

    @property
    def provider_type(self) -> str:
        return "authorized_user"

    async def _refresh(self) -> Token:
        """Exchange the refresh token for a new access token.

        :return: New access token with expiration
        :rtype: Token
        :raises TokenError: If the token endpoint rejects the refresh token
        """
        data = {
            "grant_type": "refresh_token",
            "refresh_token": self.refresh_token,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        return await exchange_token(self.token_uri, data, self.provider_type)

    async def get_request_headers(self):
        headers = await super().get_request_headers()
        if self.quota_project_id:
            headers["x-goog-user-project"] = self.quota_project_id
        return headers
