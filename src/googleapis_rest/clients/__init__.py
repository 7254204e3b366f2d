"""Endpoint clients, one class per Google API."""

from .base import BaseApiClient
from .displayvideo import DisplayVideo
from .servicecontrol import ServiceControl

__all__ = ["BaseApiClient", "DisplayVideo", "ServiceControl"]
