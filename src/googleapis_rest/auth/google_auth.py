"""Build credential providers from Google credentials documents.

:class:`GoogleAuth` reads the JSON documents produced by the Cloud console
and ``gcloud`` and returns the registered provider for their ``type``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from ..config import Settings, get_settings
from ..exceptions import ConfigurationError
from .base import CredentialsClient, ProviderConfig
from .registry import ProviderRegistry

logger = logging.getLogger(__name__)


class GoogleAuth:
    """Factory for :class:`~googleapis_rest.auth.base.CredentialsClient` objects.

    Examples
    --------
    .. code-block:: python

       credentials = GoogleAuth.from_file("service-account.json")
       dv360 = DisplayVideo(credentials)
    """

    @staticmethod
    def from_json(
        info: Union[str, Mapping[str, Any]],
        scopes: Optional[Sequence[str]] = None,
    ) -> CredentialsClient:
        """Create credentials from a parsed or raw credentials document.

        :param info: Credentials JSON document, as a string or mapping
        :type info: Union[str, Mapping[str, Any]]
        :param scopes: OAuth2 scopes; defaults to the ``GOOGLEAPIS_SCOPES`` setting
        :type scopes: Optional[Sequence[str]]
        :return: Credentials provider for the document's ``type``
        :rtype: CredentialsClient
        :raises ConfigurationError: If the document is malformed or of an
                                    unsupported type
        """
        if isinstance(info, str):
            try:
                info = json.loads(info)
            except ValueError as e:
                raise ConfigurationError(f"Invalid credentials JSON: {e}") from e
        if not isinstance(info, Mapping):
            raise ConfigurationError("Credentials document must be a JSON object")

        provider_type = info.get("type")
        if not provider_type:
            raise ConfigurationError("Credentials document has no 'type' field")

        config = dict(info)
        config["scopes"] = list(
            scopes if scopes is not None else get_settings().googleapis_scopes
        )
        try:
            provider = ProviderRegistry.create_provider(
                provider_type, ProviderConfig(**config)
            )
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        logger.debug("Loaded %s credentials", provider_type)
        return provider

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        scopes: Optional[Sequence[str]] = None,
    ) -> CredentialsClient:
        """Create credentials from a JSON file on disk.

        :param path: Path to the credentials file
        :param scopes: OAuth2 scopes; defaults to the ``GOOGLEAPIS_SCOPES`` setting
        :return: Credentials provider for the file's ``type``
        :raises ConfigurationError: If the file cannot be read or parsed
        """
        try:
            text = Path(path).expanduser().read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read credentials file {path}: {e}",
                setting="GOOGLE_APPLICATION_CREDENTIALS",
            ) from e
        return cls.from_json(text, scopes=scopes)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> CredentialsClient:
        """Create credentials from the environment.

        A fixed ``GOOGLEAPIS_ACCESS_TOKEN`` wins over the file named by
        ``GOOGLE_APPLICATION_CREDENTIALS``.

        :param settings: Settings to read; defaults to the process settings
        :return: Credentials provider
        :raises ConfigurationError: If neither setting is present
        """
        settings = settings or get_settings()
        if settings.googleapis_access_token:
            return ProviderRegistry.create_provider(
                "access_token",
                ProviderConfig(access_token=settings.googleapis_access_token),
            )
        if settings.google_application_credentials:
            return cls.from_file(
                settings.google_application_credentials,
                scopes=settings.googleapis_scopes,
            )
        raise ConfigurationError(
            "No Google credentials configured. Set GOOGLEAPIS_ACCESS_TOKEN or "
            "GOOGLE_APPLICATION_CREDENTIALS.",
            setting="GOOGLE_APPLICATION_CREDENTIALS",
        )
