"""Shared pydantic configuration for API and provider schemas.

Every schema in the service inherits from one of four bases, picked by the
direction the data travels:

    - APIRequest: bodies sent to us by clients
    - APIResponse: bodies we send back to clients
    - DownstreamRequest: payloads we send to the recipe provider
    - DownstreamResponse: payloads the recipe provider sends us
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Common configuration; inherit from a public subclass instead."""

    model_config = ConfigDict(
        # Wire format is camelCase, Python attributes are snake_case
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
        use_enum_values=True,
        validate_default=True,
        validate_assignment=True,
    )


class APIRequest(_BaseSchema):
    """Base for incoming request bodies.

    Unknown properties sent by clients are ignored.
    """

    model_config = ConfigDict(extra="ignore")


class APIResponse(_BaseSchema):
    """Base for outgoing response bodies.

    Only declared properties may be returned.
    """

    model_config = ConfigDict(extra="forbid")


class DownstreamRequest(_BaseSchema):
    """Base for payloads sent to the recipe provider."""

    model_config = ConfigDict(extra="forbid")


class DownstreamResponse(_BaseSchema):
    """Base for payloads received from the recipe provider.

    The provider returns far more fields than we use, and may add new ones
    at any time, so anything undeclared is ignored.
    """

    model_config = ConfigDict(extra="ignore")
