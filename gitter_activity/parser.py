"""
Gitter event parser.

Turns raw Gitter streaming events into Activity Streams ``Create``
envelopes, and gates outbound envelopes through the schema validator.

Usage::

    from gitter_activity import Parser

    parser = Parser("gitter-service-1", "debug")

    activity = await parser.parse(raw_event)
    if activity is not None:
        checked = await parser.validate(
            activity.model_dump(by_alias=True, exclude_none=True)
        )
"""

from __future__ import annotations

import logging
import math
import time
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

from gitter_activity.clean import clean_nulls
from gitter_activity.schemas import validate_schema
from gitter_activity.types import (
    ActivityObject,
    ActivityStream,
    Actor,
    Generator,
    GitterEvent,
    ParserConfig,
    SchemaResult,
    Target,
)

logger = logging.getLogger(__name__)

# Type aliases
SchemaValidator = Callable[[Any, str], Awaitable[SchemaResult]]
IdFactory = Callable[[], str]
Clock = Callable[[], float]

GENERATOR_NAME = "gitter"

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def _new_id() -> str:
    return str(uuid.uuid4())


class _ParserLogAdapter(logging.LoggerAdapter):
    """Applies one parser's verbosity on top of the shared module logger.

    Records carry the parser's ``service_id``.
    """

    def __init__(self, base: logging.Logger, level: int, service_id: str) -> None:
        super().__init__(base, {"service_id": service_id})
        self.threshold = level

    def isEnabledFor(self, level: int) -> bool:
        return level >= self.threshold and self.logger.isEnabledFor(level)


class Parser:
    """Normalizes Gitter events and validates activity envelopes.

    Holds only its configuration, so one instance can serve any number of
    concurrent calls.
    """

    def __init__(
        self,
        service_id: str,
        log_level: str = "info",
        *,
        schema_validator: SchemaValidator | None = None,
        id_factory: IdFactory | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.service_id = service_id
        self.generator_name = GENERATOR_NAME
        self._validate_schema = schema_validator or validate_schema
        self._new_id = id_factory or _new_id
        self._clock = clock or time.time
        self._log_level = _LOG_LEVELS.get(log_level.lower(), logging.INFO)
        self._logger = _ParserLogAdapter(logger, self._log_level, service_id)

    @classmethod
    def from_config(cls, config: ParserConfig, **kwargs: Any) -> Parser:
        """Build a parser from a :class:`ParserConfig`.

        Keyword arguments are passed through (``schema_validator``,
        ``id_factory``, ``clock``).
        """
        return cls(config.service_id, config.log_level, **kwargs)

    async def validate(self, event: Any) -> dict[str, Any] | None:
        """Check an outbound envelope against the ``activity`` schema.

        Returns:
            The null-pruned envelope when it is valid, otherwise ``None``.
            Schema failures are logged, never raised.
        """
        self._logger.debug("Validation process: %r", event)

        parsed = clean_nulls(event)
        if not isinstance(parsed, Mapping) or not parsed:
            return None

        if not parsed.get("type"):
            self._logger.debug("Type not found: %r", parsed)
            return None

        result = await self._validate_schema(parsed, "activity")
        if not result.valid:
            self._logger.error(result.reason)
            return None
        return parsed

    async def parse(self, event: Any) -> ActivityStream | None:
        """Normalize a raw Gitter event into an :class:`ActivityStream`.

        Returns:
            The envelope, or ``None`` when the event is empty after null
            pruning. Fields missing or malformed in the event are left
            empty in the envelope.
        """
        self._logger.debug("Normalize process: %r", event)

        normalized = clean_nulls(event)
        if not isinstance(normalized, Mapping) or not normalized:
            return None

        gitter_event = GitterEvent.model_validate(normalized)
        message = gitter_event.data
        sender = message.from_user if message else None
        room = gitter_event.room

        return ActivityStream(
            generator=Generator(id=self.service_id, name=self.generator_name),
            published=self._published(message.sent if message else None),
            actor=Actor(
                id=sender.id if sender else None,
                name=sender.username if sender else None,
            ),
            target=Target(
                id=room.id if room else None,
                name=room.name if room else None,
                type="Person" if room and room.one_to_one else "Group",
            ),
            object=ActivityObject(
                id=(message.id if message else None) or self._new_id(),
                content=message.text if message else None,
            ),
        )

    def _published(self, sent: datetime | None) -> int:
        """Epoch seconds of ``sent``, or of now when the event has none."""
        if sent is None:
            return math.floor(self._clock())
        if sent.tzinfo is None:
            sent = sent.replace(tzinfo=timezone.utc)
        return math.floor(sent.timestamp())
