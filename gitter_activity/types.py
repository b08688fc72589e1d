"""
Pydantic models for the Gitter activity adapter.

Inbound Gitter payloads use camelCase keys (``fromUser``, ``oneToOne``);
the models expose them with snake_case names and accept either form.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator


ACTIVITY_STREAMS_CONTEXT = "https://www.w3.org/ns/activitystreams"


# ============================================================
#  Configuration
# ============================================================


class ParserConfig(BaseModel):
    """Settings a :class:`~gitter_activity.parser.Parser` is built from."""

    service_id: str = Field(alias="serviceID")
    log_level: str = Field("info", alias="logLevel")

    model_config = {"populate_by_name": True}


# ============================================================
#  Gitter events (inbound)
# ============================================================
#
# Inbound models never reject a payload: a value of the wrong shape is
# read as missing, so parsing always yields an envelope.

_DATETIME = TypeAdapter(datetime)


def _text_or_none(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _mapping_or_none(value: Any) -> Any:
    return value if isinstance(value, Mapping) else None


def _datetime_or_none(value: Any) -> datetime | None:
    if not value:
        return None
    try:
        return _DATETIME.validate_python(value)
    except ValidationError:
        return None


class GitterUser(BaseModel):
    """Author of a Gitter message."""

    id: str | None = None
    username: str | None = None
    display_name: str | None = Field(None, alias="displayName")

    model_config = ConfigDict(populate_by_name=True)

    read_text = field_validator("id", "username", "display_name", mode="before")(
        _text_or_none
    )


class GitterMessage(BaseModel):
    """A chat message as delivered by the Gitter streaming API."""

    id: str | None = None
    text: str | None = None
    sent: datetime | None = None
    from_user: GitterUser | None = Field(None, alias="fromUser")

    model_config = ConfigDict(populate_by_name=True)

    read_text = field_validator("id", "text", mode="before")(_text_or_none)
    read_sent = field_validator("sent", mode="before")(_datetime_or_none)
    read_from_user = field_validator("from_user", mode="before")(_mapping_or_none)


class GitterRoom(BaseModel):
    """Room the message was posted in."""

    id: str | None = None
    name: str | None = None
    one_to_one: bool = Field(False, alias="oneToOne")

    model_config = ConfigDict(populate_by_name=True)

    read_text = field_validator("id", "name", mode="before")(_text_or_none)

    @field_validator("one_to_one", mode="before")
    @classmethod
    def read_flag(cls, value: Any) -> bool:
        return bool(value)


class GitterEvent(BaseModel):
    """Raw event: a message plus the room it belongs to.

    Every field is optional; missing or malformed sub-objects simply leave
    the matching envelope fields empty. Unknown keys, including the event
    ``type``, are ignored.
    """

    room: GitterRoom | None = None
    data: GitterMessage | None = None

    read_parts = field_validator("room", "data", mode="before")(_mapping_or_none)


# ============================================================
#  Activity Streams (outbound)
# ============================================================


class Generator(BaseModel):
    """The service that produced the activity."""

    id: str
    name: str
    type: Literal["Service"] = "Service"


class Actor(BaseModel):
    """Who sent the message."""

    id: str | None = None
    name: str | None = None
    type: Literal["Person"] = "Person"


class Target(BaseModel):
    """Where the message was sent: a direct chat or a group room."""

    id: str | None = None
    name: str | None = None
    type: Literal["Person", "Group"] = "Group"


class ActivityObject(BaseModel):
    """The message itself."""

    id: str
    content: str | None = None
    type: Literal["Note"] = "Note"


class ActivityStream(BaseModel):
    """Canonical activity envelope produced by :meth:`Parser.parse`.

    Dump with ``model_dump(by_alias=True, exclude_none=True)`` to get the
    wire form with its ``@context`` key.
    """

    context: str = Field(ACTIVITY_STREAMS_CONTEXT, alias="@context")
    generator: Generator
    published: int
    type: Literal["Create"] = "Create"
    actor: Actor
    target: Target
    object: ActivityObject

    model_config = {"populate_by_name": True}


# ============================================================
#  Schema validation
# ============================================================


class SchemaResult(BaseModel):
    """Outcome of a schema check: valid, or invalid with a reason."""

    valid: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> SchemaResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, reason: str) -> SchemaResult:
        return cls(valid=False, reason=reason)
