"""Registry of credential providers.

Providers are keyed by the ``type`` field of a Google credentials JSON
document (``service_account``, ``authorized_user``), plus ``access_token``
for a bare bearer token.

Examples
--------
.. code-block:: python

   from googleapis_rest.auth.registry import register_provider, ProviderRegistry
   from googleapis_rest.auth.base import CredentialsClient, ProviderConfig

   @register_provider("external_account")
   class ExternalAccountProvider(CredentialsClient):
       ...

   provider = ProviderRegistry.create_provider(
       "external_account", ProviderConfig(audience="...")
   )
"""

import logging
from typing import Dict, Optional, Type

from .base import CredentialsClient, ProviderConfig

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registry for credential providers."""

    _providers: Dict[str, Type[CredentialsClient]] = {}

    @classmethod
    def register(
        cls, provider_type: str, provider_class: Type[CredentialsClient]
    ) -> None:
        """Register a provider class.

        :param provider_type: Unique identifier for the provider type.
        :param provider_class: Provider class to register.
        :raises ValueError: If provider type is already registered.
        """
        if provider_type in cls._providers:
            raise ValueError(f"Provider type '{provider_type}' is already registered")

        cls._providers[provider_type] = provider_class
        logger.debug(
            "Registered provider: %s -> %s", provider_type, provider_class.__name__
        )

    @classmethod
    def unregister(cls, provider_type: str) -> None:
        """Remove a provider type from the registry.

        :param provider_type: Provider type to unregister.
        """
        if cls._providers.pop(provider_type, None) is not None:
            logger.debug("Unregistered provider: %s", provider_type)

    @classmethod
    def get_provider_class(
        cls, provider_type: str
    ) -> Optional[Type[CredentialsClient]]:
        return cls._providers.get(provider_type)

    @classmethod
    def create_provider(
        cls, provider_type: str, config: ProviderConfig
    ) -> CredentialsClient:
        """Create a provider instance.

        :param provider_type: Type of provider to create.
        :param config: Configuration for the provider.
        :return: Provider instance.
        :raises ValueError: If provider type is not registered.
        """
        provider_class = cls.get_provider_class(provider_type)
        if not provider_class:
            available = ", ".join(sorted(cls._providers))
            raise ValueError(
                f"Unknown provider type: '{provider_type}'. "
                f"Available providers: {available or 'none'}"
            )

        return provider_class(config)

    @classmethod
    def list_providers(cls) -> Dict[str, Type[CredentialsClient]]:
        return cls._providers.copy()


def register_provider(provider_type: str):
    """Return a decorator that registers a provider class.

    :param provider_type: Type identifier for the provider.
    :return: Decorator function.
    """

    def decorator(provider_class: Type[CredentialsClient]):
        ProviderRegistry.register(provider_type, provider_class)
        return provider_class

    return decorator
