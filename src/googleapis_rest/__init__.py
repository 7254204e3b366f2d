"""Google REST API clients package.

This package provides thin asynchronous clients for Google REST APIs
(Display & Video 360 and Service Control). Each client method maps to one
REST endpoint and transcodes request and response messages between their
JSON wire form and typed Pydantic models.

:var __version__: Current package version
:type __version__: str
"""

from .auth import CredentialsClient, GoogleAuth
from .clients import DisplayVideo, ServiceControl
from .utils.http import request

__version__ = "0.1.0"

__all__ = [
    "CredentialsClient",
    "GoogleAuth",
    "DisplayVideo",
    "ServiceControl",
    "request",
]
