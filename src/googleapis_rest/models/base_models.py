"""Shared Pydantic models for the Google REST API clients.

This module contains the base class for every wire message along with the
small models shared across APIs:

- :class:`ApiModel`, the transcoding base for request and response messages
- :class:`Empty`, the response of DELETE endpoints
- :class:`Token`, an OAuth2 access token held by credential providers
"""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

M = TypeVar("M", bound="ApiModel")


class ApiModel(BaseModel):
    """Base model for Google API wire messages.

    Attributes use snake_case names and map to the camelCase wire names.
    Fields the model does not declare are kept as extras and written back
    unchanged, so messages round-trip even when the API adds fields.

    Declared fields that are not set, or set to ``None``, are left out of
    the wire form. Nothing is ever synthesized for an absent field. Extras
    keep their value, ``null`` included.

    Extras are written under the key they were given, so pass them by wire
    name. :func:`coerce` camelizes snake_case extras of mapping bodies.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
        protected_namespaces=(),
    )

    @model_serializer(mode="wrap")
    def _keep_null_extras(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Any:
        # exclude_none applies to declared fields only
        data = handler(self)
        if info.exclude_none and self.model_extra and isinstance(data, dict):
            for key, value in self.model_extra.items():
                if value is None and key not in data:
                    data[key] = None
        return data

    @classmethod
    def from_wire(cls: Type[M], data: Mapping[str, Any]) -> M:
        """Build a model from its JSON wire form.

        64-bit integer strings become ``int``, RFC 3339 strings become
        ``datetime`` and nested messages are transcoded recursively.

        :param data: Parsed JSON object
        :type data: Mapping[str, Any]
        :return: Model instance
        :raises pydantic.ValidationError: If a value has the wrong encoding
        """
        return cls.model_validate(data)

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON wire form of this message.

        :return: JSON-compatible dict keyed by wire names
        :rtype: Dict[str, Any]
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Return the JSON wire form of this message as a string.

        :return: JSON document
        :rtype: str
        """
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Empty(ApiModel):
    """A generic empty message, returned by DELETE endpoints."""


class Token(BaseModel):
    """OAuth2 access token used to authorize Google API calls.

    :param value: The access token string
    :type value: str
    :param expires_at: When the token expires, or None if unknown
    :type expires_at: Optional[datetime]
    :param token_type: Type of token (default: "Bearer")
    :type token_type: str
    :param scope: Optional space separated scopes granted to the token
    :type scope: Optional[str]
    :param metadata: Additional token metadata
    :type metadata: Dict[str, Any]
    """

    value: str
    expires_at: Optional[datetime] = None
    token_type: str = "Bearer"
    scope: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


def serialize(
    message: Union[ApiModel, Mapping[str, Any], None],
    model_cls: Optional[Type[ApiModel]] = None,
) -> Optional[Dict[str, Any]]:
    """Convert a message to its wire form.

    A plain mapping is validated against ``model_cls`` first when one is
    given, otherwise it is returned as a shallow copy.

    :param message: Model instance, mapping, or None
    :param model_cls: Model used to interpret a plain mapping
    :return: Wire dict, or None when ``message`` is None
    """
    if message is None:
        return None
    if isinstance(message, ApiModel):
        return message.to_wire()
    if model_cls is not None:
        return coerce(model_cls, message).to_wire()
    return dict(message)


def deserialize(model_cls: Type[M], data: Optional[Mapping[str, Any]]) -> Optional[M]:
    """Convert wire data to a model, passing None through.

    :param model_cls: Target model class
    :param data: Parsed JSON object, or None
    :return: Model instance, or None when ``data`` is None
    """
    if data is None:
        return None
    return model_cls.from_wire(data)


def coerce(model_cls: Type[M], message: Union[M, Mapping[str, Any]]) -> M:
    """Return ``message`` as an instance of ``model_cls``.

    Request bodies may be given as models or as mappings using either
    attribute or wire names.

    :param model_cls: Expected model class
    :param message: Model instance or mapping
    :return: Model instance
    """
    if isinstance(message, model_cls):
        return message
    if isinstance(message, BaseModel):
        message = message.model_dump(by_alias=True, exclude_none=True)
    return model_cls.model_validate(_camelize_extras(model_cls, message))


def _camelize_extras(
    model_cls: Type[ApiModel], message: Mapping[str, Any]
) -> Dict[str, Any]:
    known = set(model_cls.model_fields)
    known.update(f.alias for f in model_cls.model_fields.values() if f.alias)
    return {
        (to_camel(key) if key not in known and "_" in key else key): value
        for key, value in message.items()
    }

