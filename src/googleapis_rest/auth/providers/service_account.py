"""Service account provider.

Handles the ``service_account`` credentials document downloaded from the
Cloud console. A JWT assertion signed with the account's private key is
exchanged for an access token with the JWT bearer grant.
"""

import logging
import time
from typing import Dict

import jwt

from ...exceptions import ConfigurationError, TokenError
from ...models import Token
from ..base import ProviderConfig, RefreshingCredentialsClient
from ..registry import register_provider
from .oauth import GOOGLE_TOKEN_URI, exchange_token

logger = logging.getLogger(__name__)

JWT_BEARER_GRANT = "urn:ietf:params:oauth:grant-type:jwt-bearer"
ASSERTION_LIFETIME = 3600


@register_provider("service_account")
class ServiceAccountProvider(RefreshingCredentialsClient):
    """Credentials of a service account, authorized by a signed JWT."""

    def __init__(self, config: ProviderConfig):
        """Initialize the provider.

        :param config: Provider configuration with client_email, private_key
                       and optionally private_key_id, token_uri, scopes and
                       subject (for domain-wide delegation)
        :type config: ProviderConfig
        :raises ConfigurationError: If a required field is missing
        """
        super().__init__(scopes=config.get("scopes"))
        self.client_email = config.get("client_email")
        self.private_key = config.get("private_key")
        self.private_key_id = config.get("private_key_id")
        self.token_uri = config.get("token_uri") or GOOGLE_TOKEN_URI
        self.subject = config.get("subject")

        missing = [
            name for name in ("client_email", "private_key") if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"service_account credentials missing: {', '.join(missing)}"
            )

    @property
    def provider_type(self) -> str:
        return "service_account"

    def _make_assertion(self) -> str:
        """Sign the JWT assertion sent to the token endpoint.

        :return: Encoded RS256 JWT
        :rtype: str
        :raises TokenError: If the private key cannot sign
        """
        now = int(time.time())
        payload: Dict[str, object] = {
            "iss": self.client_email,
            "scope": " ".join(self.scopes),
            "aud": self.token_uri,
            "iat": now,
            "exp": now + ASSERTION_LIFETIME,
        }
        if self.subject:
            payload["sub"] = self.subject
        headers = {"kid": self.private_key_id} if self.private_key_id else None
        try:
            return jwt.encode(
                payload, self.private_key, algorithm="RS256", headers=headers
            )
        except (ValueError, TypeError, jwt.PyJWTError) as e:
            raise TokenError(
                f"Could not sign service account assertion: {e}",
                token_type=self.provider_type,
            ) from e

    async def _refresh(self) -> Token:
        """Exchange a freshly signed assertion for an access token.

        :return: New access token with expiration
        :rtype: Token
        :raises TokenError: If signing fails or the grant is rejected
        """
        data = {"grant_type": JWT_BEARER_GRANT, "assertion": self._make_assertion()}
        token = await exchange_token(self.token_uri, data, self.provider_type)
        token.metadata["client_email"] = self.client_email
        return token
