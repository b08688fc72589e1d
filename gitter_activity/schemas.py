"""
Schema validation for outbound activity envelopes.

Schemas are pydantic models registered under a category name. Validation
never raises: the outcome is reported as a :class:`SchemaResult`.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from gitter_activity.types import SchemaResult

logger = logging.getLogger(__name__)

__all__ = ["SCHEMAS", "validate_schema"]


EntityType = Literal["Person", "Group", "Service", "Application", "Organization"]

ActivityType = Literal[
    "Accept", "Add", "Announce", "Arrive", "Block", "Create", "Delete",
    "Dislike", "Flag", "Follow", "Ignore", "Invite", "Join", "Leave", "Like",
    "Listen", "Move", "Offer", "Question", "Reject", "Read", "Remove",
    "TentativeReject", "TentativeAccept", "Travel", "Undo", "Update", "View",
]


class _Entity(BaseModel):
    id: str
    name: str
    type: EntityType

    model_config = ConfigDict(extra="allow")


class _Generator(BaseModel):
    id: str
    name: str
    type: Literal["Service"]

    model_config = ConfigDict(extra="allow")


class _Object(BaseModel):
    id: str
    type: str
    content: str | None = None

    model_config = ConfigDict(extra="allow")


class ActivitySchema(BaseModel):
    """Minimum shape every outbound activity must have."""

    context: str = Field(alias="@context")
    type: ActivityType
    generator: _Generator
    actor: _Entity
    object: _Object
    target: _Entity | None = None
    published: StrictInt | None = None

    model_config = ConfigDict(extra="allow")


SCHEMAS: dict[str, type[BaseModel]] = {
    "activity": ActivitySchema,
}


async def validate_schema(data: Any, category: str) -> SchemaResult:
    """Check ``data`` against the schema registered as ``category``.

    Args:
        data: Candidate envelope, usually a plain dict.
        category: Registered schema name, e.g. ``"activity"``.

    Returns:
        :class:`SchemaResult` — ``valid`` is False with a readable
        ``reason`` when the category is unknown or the data does not fit.
    """
    schema = SCHEMAS.get(category)
    if schema is None:
        return SchemaResult.fail(f"Unknown schema category: {category!r}")

    try:
        schema.model_validate(data)
    except ValidationError as exc:
        logger.debug("Schema %r rejected data (%d errors)", category, exc.error_count())
        return SchemaResult.fail(f"Invalid {category}: {exc}")
    return SchemaResult.ok()
