"""Credential providers package.

Each provider is automatically registered when imported.
"""

# Import providers to trigger auto-registration
from .access_token import AccessTokenProvider
from .authorized_user import AuthorizedUserProvider
from .service_account import ServiceAccountProvider

__all__ = [
    "AccessTokenProvider",
    "AuthorizedUserProvider",
    "ServiceAccountProvider",
]
