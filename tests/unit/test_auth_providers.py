"""Tests for the credential provider architecture."""

import json
from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs

import httpx
import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from googleapis_rest.auth import (
    CredentialsClient,
    GoogleAuth,
    ProviderConfig,
    ProviderRegistry,
    register_provider,
)
from googleapis_rest.auth.providers import (
    AccessTokenProvider,
    AuthorizedUserProvider,
    ServiceAccountProvider,
)
from googleapis_rest.auth.providers.service_account import JWT_BEARER_GRANT
from googleapis_rest.config import Settings
from googleapis_rest.exceptions import ConfigurationError, TokenError
from googleapis_rest.models import Token

TOKEN_URI = "https://oauth2.googleapis.com/token"


def _form(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def _token_response(token="ya29.fresh", expires_in=3600):
    return httpx.Response(
        200,
        json={"access_token": token, "expires_in": expires_in, "token_type": "Bearer"},
    )


@pytest.fixture(scope="module")
def rsa_key():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    return key, pem


@pytest.fixture
def service_account_info(rsa_key):
    _, pem = rsa_key
    return {
        "type": "service_account",
        "project_id": "demo-project",
        "private_key_id": "key-1",
        "private_key": pem,
        "client_email": "robot@demo-project.iam.gserviceaccount.com",
        "token_uri": TOKEN_URI,
    }


@pytest.fixture
def authorized_user_info():
    return {
        "type": "authorized_user",
        "client_id": "client-123.apps.googleusercontent.com",
        "client_secret": "shh",
        "refresh_token": "1//refresh-token",
    }


class TestProviderRegistry:
    """Tests for the provider registry system."""

    def test_registry_lists_builtin_providers(self):
        providers = ProviderRegistry.list_providers()
        assert providers["access_token"] is AccessTokenProvider
        assert providers["authorized_user"] is AuthorizedUserProvider
        assert providers["service_account"] is ServiceAccountProvider

    def test_registry_raises_for_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider type"):
            ProviderRegistry.create_provider("unknown", ProviderConfig())

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            ProviderRegistry.register("access_token", AccessTokenProvider)

    def test_custom_provider_registration(self):
        @register_provider("test_custom")
        class CustomProvider(CredentialsClient):
            def __init__(self, config: ProviderConfig):
                self.config = config

            @property
            def provider_type(self) -> str:
                return "test_custom"

            async def get_token(self) -> Token:
                return Token(value="custom")

            async def validate_token(self, token: Token) -> bool:
                return True

            async def close(self) -> None:
                pass

        try:
            provider = ProviderRegistry.create_provider(
                "test_custom", ProviderConfig(audience="x")
            )
            assert isinstance(provider, CustomProvider)
            assert provider.config.audience == "x"
        finally:
            ProviderRegistry.unregister("test_custom")
        assert ProviderRegistry.get_provider_class("test_custom") is None


class TestProviderConfig:
    def test_mapping_and_attribute_access(self):
        config = ProviderConfig(client_id="abc")
        assert config.get("client_id") == "abc"
        assert config.client_id == "abc"
        assert config.get("missing", "default") == "default"
        with pytest.raises(AttributeError):
            config.missing


class TestAccessTokenProvider:
    @pytest.mark.asyncio
    async def test_headers(self):
        provider = AccessTokenProvider(ProviderConfig(access_token="ya29.fixed"))
        assert await provider.get_request_headers() == {
            "Authorization": "Bearer ya29.fixed"
        }
        assert await provider.validate_token(await provider.get_token())

    def test_requires_token(self):
        with pytest.raises(ConfigurationError):
            AccessTokenProvider(ProviderConfig())


class TestAuthorizedUserProvider:
    @pytest.mark.asyncio
    async def test_refresh_token_grant(self, mock_http, authorized_user_info):
        http = mock_http(lambda r: _token_response())
        provider = GoogleAuth.from_json(authorized_user_info, scopes=[])

        token = await provider.get_token()

        assert token.value == "ya29.fresh"
        assert token.expires_at > datetime.now(timezone.utc) + timedelta(minutes=55)
        sent = http.last
        assert str(sent.url) == TOKEN_URI
        assert _form(sent) == {
            "grant_type": "refresh_token",
            "refresh_token": "1//refresh-token",
            "client_id": "client-123.apps.googleusercontent.com",
            "client_secret": "shh",
        }

    @pytest.mark.asyncio
    async def test_token_cached_until_near_expiry(self, mock_http, authorized_user_info):
        tokens = iter(["ya29.one", "ya29.two"])
        http = mock_http(lambda r: _token_response(next(tokens)))
        provider = GoogleAuth.from_json(authorized_user_info)

        assert (await provider.get_token()).value == "ya29.one"
        assert (await provider.get_token()).value == "ya29.one"
        assert len(http.requests) == 1

        provider._token = provider._token.model_copy(
            update={"expires_at": datetime.now(timezone.utc) + timedelta(minutes=4)}
        )
        assert (await provider.get_token()).value == "ya29.two"
        assert len(http.requests) == 2

    @pytest.mark.asyncio
    async def test_rejected_grant_raises_token_error(self, mock_http, authorized_user_info):
        mock_http(
            lambda r: httpx.Response(
                400,
                json={"error": "invalid_grant", "error_description": "Token has been expired or revoked."},
            )
        )
        provider = GoogleAuth.from_json(authorized_user_info)

        with pytest.raises(TokenError) as exc_info:
            await provider.get_token()

        assert exc_info.value.details["oauth_error"] == "invalid_grant"
        assert "expired or revoked" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_quota_project_header(self, mock_http, authorized_user_info):
        mock_http(lambda r: _token_response())
        info = dict(authorized_user_info, quota_project_id="billing-project")
        provider = GoogleAuth.from_json(info)

        headers = await provider.get_request_headers()

        assert headers["Authorization"] == "Bearer ya29.fresh"
        assert headers["x-goog-user-project"] == "billing-project"

    def test_missing_fields(self):
        with pytest.raises(ConfigurationError, match="refresh_token"):
            AuthorizedUserProvider(ProviderConfig(client_id="a", client_secret="b"))


class TestServiceAccountProvider:
    @pytest.mark.asyncio
    async def test_jwt_bearer_grant(self, mock_http, rsa_key, service_account_info):
        key, _ = rsa_key
        http = mock_http(lambda r: _token_response("ya29.sa"))
        scopes = ["https://www.googleapis.com/auth/display-video"]
        provider = GoogleAuth.from_json(service_account_info, scopes=scopes)

        headers = await provider.get_request_headers()

        assert headers == {"Authorization": "Bearer ya29.sa"}
        form = _form(http.last)
        assert form["grant_type"] == JWT_BEARER_GRANT
        assert jwt.get_unverified_header(form["assertion"])["kid"] == "key-1"
        claims = jwt.decode(
            form["assertion"],
            key.public_key(),
            algorithms=["RS256"],
            audience=TOKEN_URI,
        )
        assert claims["iss"] == "robot@demo-project.iam.gserviceaccount.com"
        assert claims["scope"] == "https://www.googleapis.com/auth/display-video"
        assert claims["exp"] - claims["iat"] == 3600

    @pytest.mark.asyncio
    async def test_invalid_key_raises_token_error(self, service_account_info):
        info = dict(service_account_info, private_key="not a key")
        provider = GoogleAuth.from_json(info)

        with pytest.raises(TokenError):
            await provider.get_token()

    def test_missing_private_key(self, service_account_info):
        info = dict(service_account_info)
        del info["private_key"]
        with pytest.raises(ConfigurationError, match="private_key"):
            GoogleAuth.from_json(info)


class TestGoogleAuth:
    def test_from_json_string(self, authorized_user_info):
        provider = GoogleAuth.from_json(json.dumps(authorized_user_info))
        assert isinstance(provider, AuthorizedUserProvider)
        assert provider.scopes == ["https://www.googleapis.com/auth/cloud-platform"]

    def test_unsupported_type(self):
        with pytest.raises(ConfigurationError, match="Unknown provider type"):
            GoogleAuth.from_json({"type": "external_account"})

    def test_missing_type(self):
        with pytest.raises(ConfigurationError):
            GoogleAuth.from_json({"client_email": "x"})

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError):
            GoogleAuth.from_json("{not json")

    def test_from_file(self, tmp_path, service_account_info):
        path = tmp_path / "sa.json"
        path.write_text(json.dumps(service_account_info))
        provider = GoogleAuth.from_file(path, scopes=["a", "b"])
        assert isinstance(provider, ServiceAccountProvider)
        assert provider.scopes == ["a", "b"]

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(ConfigurationError):
            GoogleAuth.from_file(tmp_path / "nope.json")

    def test_from_settings_prefers_access_token(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GOOGLEAPIS_ACCESS_TOKEN", "ya29.env")
        monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", str(tmp_path / "unused.json"))
        provider = GoogleAuth.from_settings(Settings())
        assert isinstance(provider, AccessTokenProvider)

    def test_from_settings_reads_credentials_file(
        self, monkeypatch, tmp_path, authorized_user_info
    ):
        path = tmp_path / "adc.json"
        path.write_text(json.dumps(authorized_user_info))
        monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", str(path))
        monkeypatch.setenv("GOOGLEAPIS_SCOPES", "scope-a, scope-b")
        provider = GoogleAuth.from_settings(Settings())
        assert isinstance(provider, AuthorizedUserProvider)
        assert provider.scopes == ["scope-a", "scope-b"]

    def test_from_settings_without_credentials(self):
        with pytest.raises(ConfigurationError, match="No Google credentials"):
            GoogleAuth.from_settings(Settings())
