"""Authentication for the Google REST API clients.

Credential providers are pluggable and registered by the ``type`` of the
Google credentials document they handle.

:var __all__: List of public exports from this module
:type __all__: List[str]
"""

# Import providers to trigger registration
from . import (  # noqa: F401  # imported for side effects (provider registration)
    providers,
)
from .base import CredentialsClient, ProviderConfig, RefreshingCredentialsClient
from .google_auth import GoogleAuth
from .registry import ProviderRegistry, register_provider

__all__ = [
    "CredentialsClient",
    "GoogleAuth",
    "ProviderConfig",
    "ProviderRegistry",
    "RefreshingCredentialsClient",
    "register_provider",
]
