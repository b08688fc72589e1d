"""
Gitter activity adapter.

Normalizes Gitter chat events into Activity Streams 2.0 envelopes and
validates outbound envelopes against the activity schema.

Example::

    from gitter_activity import Parser

    parser = Parser(service_id="gitter-service-1", log_level="info")

    activity = await parser.parse({
        "type": "message",
        "room": {"id": "r1", "name": "general", "oneToOne": False},
        "data": {
            "id": "m1",
            "text": "hi",
            "sent": "2020-01-01T00:00:00.000Z",
            "fromUser": {"id": "u1", "username": "bob"},
        },
    })
    print(activity.actor.name, activity.published)  # bob 1577836800

    envelope = activity.model_dump(by_alias=True, exclude_none=True)
    assert await parser.validate(envelope) == envelope
"""

from gitter_activity.clean import clean_nulls
from gitter_activity.parser import GENERATOR_NAME, Parser
from gitter_activity.schemas import SCHEMAS, validate_schema
from gitter_activity.types import (
    ACTIVITY_STREAMS_CONTEXT,
    ParserConfig,
    GitterEvent,
    GitterMessage,
    GitterRoom,
    GitterUser,
    ActivityStream,
    ActivityObject,
    Actor,
    Target,
    Generator,
    SchemaResult,
)

__all__ = [
    "Parser",
    "GENERATOR_NAME",
    "ParserConfig",
    "GitterEvent",
    "GitterMessage",
    "GitterRoom",
    "GitterUser",
    "ActivityStream",
    "ActivityObject",
    "Actor",
    "Target",
    "Generator",
    "SchemaResult",
    "ACTIVITY_STREAMS_CONTEXT",
    "SCHEMAS",
    "clean_nulls",
    "validate_schema",
]

__version__ = "0.1.0"
