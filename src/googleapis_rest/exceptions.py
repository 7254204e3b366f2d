"""Structured exception classes for the Google REST API clients."""

import json
from typing import Any, Dict, Optional

import httpx


class GoogleApisError(Exception):
    """Base exception for all errors raised by this package.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class AuthenticationError(GoogleApisError):
    """Raised when credentials cannot be used to authenticate.

    :param message: Description of the authentication failure
    :param details: Optional additional context about the failure
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize authentication error with message and optional details."""
        super().__init__(message=message, code="AUTHENTICATION_ERROR", details=details)


class TokenError(AuthenticationError):
    """Raised when an access token cannot be obtained or refreshed.

    :param message: Description of the token error
    :param token_type: Optional type of credential that failed
    :param oauth_error: Optional OAuth2 error code returned by the token endpoint
    """

    def __init__(
        self,
        message: str,
        token_type: Optional[str] = None,
        oauth_error: Optional[str] = None,
    ):
        """Initialize token error with message and optional context."""
        details = {}
        if token_type:
            details["token_type"] = token_type
        if oauth_error:
            details["oauth_error"] = oauth_error
        super().__init__(message=message, details=details)
        self.code = "TOKEN_ERROR"


class APIError(GoogleApisError):
    """Raised when a Google API answers with a non-success status.

    Google APIs report failures with a JSON envelope of the form
    ``{"error": {"code": 404, "message": "...", "status": "NOT_FOUND"}}``.
    The parsed envelope fields are exposed as attributes.

    :param message: Description of the API error
    :param status_code: Optional HTTP status code from the API response
    :param response_body: Optional response body from the failed request
    :param status: Optional canonical status name (e.g. ``NOT_FOUND``)
    :param errors: Optional list of error detail objects from the envelope
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        status: Optional[str] = None,
        errors: Optional[list] = None,
    ):
        """Initialize API error with message and optional response details."""
        details: Dict[str, Any] = {}
        if status_code:
            details["status_code"] = status_code
        if status:
            details["status"] = status
        if errors:
            details["errors"] = errors
        if response_body:
            details["response_body"] = response_body
        super().__init__(message=message, code="API_ERROR", details=details)
        self.status_code = status_code
        self.response_body = response_body
        self.status = status
        self.errors = errors or []

    @classmethod
    def from_response(cls, response: httpx.Response) -> "APIError":
        """Build an error from a failed HTTP response.

        :param response: The non-success response
        :type response: httpx.Response
        :return: Error carrying the envelope message and status
        :rtype: APIError
        """
        text = response.text
        message = f"{response.status_code} {response.reason_phrase}".strip()
        status = None
        errors = None
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
            envelope = payload["error"]
            message = envelope.get("message") or message
            status = envelope.get("status")
            errors = envelope.get("details") or envelope.get("errors")
        elif text:
            message = f"{message}: {text}"
        return cls(
            message,
            status_code=response.status_code,
            response_body=text or None,
            status=status,
            errors=errors,
        )


class ConfigurationError(GoogleApisError):
    """Raised for configuration-related errors.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)
