"""Google REST API models package.

This package contains the Pydantic models for the wire messages of each
supported API, organized by API, plus the shared transcoding base.
"""

from . import displayvideo, servicecontrol
from .base_models import ApiModel, Empty, Token, coerce, deserialize, serialize

__all__ = [
    "ApiModel",
    "Empty",
    "Token",
    "coerce",
    "deserialize",
    "serialize",
    "displayvideo",
    "servicecontrol",
]
