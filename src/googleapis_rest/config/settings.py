"""Configuration settings for the Google REST API clients.

Settings cover credential discovery, HTTP transport behaviour and logging.
They are loaded from environment variables and ``.env`` files.
"""

import json
from typing import Annotated, List, Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    :param google_application_credentials: Path to a credentials JSON file
    :type google_application_credentials: Optional[str]
    :param googleapis_access_token: Fixed OAuth2 access token
    :type googleapis_access_token: Optional[str]
    :param googleapis_scopes: OAuth2 scopes requested for service accounts
    :type googleapis_scopes: List[str]
    :param http_timeout: Read timeout for API calls in seconds
    :type http_timeout: float
    :param http_max_attempts: Attempts for idempotent calls (1 disables retry)
    :type http_max_attempts: int
    :param http_retry_delay: Initial delay between attempts in seconds
    :type http_retry_delay: float
    :param http_enable_http2: Use HTTP/2 when the ``h2`` package is present
    :type http_enable_http2: bool
    :param log_level: Logging level for the package
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Credentials
    google_application_credentials: Optional[str] = Field(
        None,
        alias="GOOGLE_APPLICATION_CREDENTIALS",
        description="Path to a service account or authorized user JSON file",
    )
    googleapis_access_token: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(
            "GOOGLEAPIS_ACCESS_TOKEN", "GOOGLE_OAUTH_ACCESS_TOKEN"
        ),
        description="Pre-issued OAuth2 access token",
    )
    googleapis_scopes: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_SCOPES),
        alias="GOOGLEAPIS_SCOPES",
        description="Scopes requested when minting service account tokens",
    )

    # HTTP transport
    http_timeout: float = Field(30.0, alias="HTTP_TIMEOUT", gt=0)
    http_max_attempts: int = Field(3, alias="HTTP_MAX_ATTEMPTS", ge=1)
    http_retry_delay: float = Field(1.0, alias="HTTP_RETRY_DELAY", ge=0)
    http_enable_http2: bool = Field(False, alias="HTTP_ENABLE_HTTP2")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", alias="LOG_LEVEL", description="Logging level"
    )

    @field_validator("googleapis_scopes", mode="before")
    @classmethod
    def split_scopes(cls, v):
        """Accept scopes as a comma or space separated string.

        :param v: Raw value from the environment or caller
        :return: List of scope URLs
        :rtype: List[str]
        """
        if isinstance(v, str):
            stripped = v.strip()
            if stripped.startswith("["):
                return json.loads(stripped)
            return [s for s in stripped.replace(",", " ").split() if s]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Upper-case the configured log level."""
        if isinstance(v, str):
            return v.upper()
        return v


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings instance, creating it on first use.

    :return: Cached settings
    :rtype: Settings
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
