"""OAuth2 token endpoint exchange shared by the refreshing providers."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict

import httpx

from ...exceptions import TokenError
from ...models import Token
from ...utils.http import get_http_client

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


async def exchange_token(token_uri: str, data: Dict[str, str], token_type: str) -> Token:
    """Post a grant to an OAuth2 token endpoint and return the access token.

    :param token_uri: Token endpoint URL
    :type token_uri: str
    :param data: Form fields of the grant
    :type data: Dict[str, str]
    :param token_type: Provider type, reported in errors
    :type token_type: str
    :return: The new access token
    :rtype: Token
    :raises TokenError: If the endpoint rejects the grant or omits the token
    """
    client = await get_http_client()
    try:
        response = await client.post(
            token_uri,
            data=data,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
    except httpx.TransportError as e:
        logger.error("Token request to %s failed: %s", token_uri, e)
        raise TokenError(
            f"Could not reach token endpoint: {e}", token_type=token_type
        ) from e

    try:
        payload = response.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    if response.status_code != 200:
        oauth_error = payload.get("error")
        description = payload.get("error_description") or response.text
        logger.error(
            "Token refresh failed: %s %s", response.status_code, oauth_error
        )
        raise TokenError(
            f"Token refresh failed ({response.status_code}): {description}",
            token_type=token_type,
            oauth_error=oauth_error if isinstance(oauth_error, str) else None,
        )

    access_token = payload.get("access_token")
    if not access_token:
        raise TokenError("No access_token in token response", token_type=token_type)

    expires_in = int(payload.get("expires_in", 3600))
    return Token(
        value=access_token,
        expires_at=datetime.now(timezone.utc) + timedelta(seconds=expires_in),
        token_type=payload.get("token_type", "Bearer"),
        scope=payload.get("scope"),
    )
