"""
JSON encoding of events.

Fields are written explicitly in declared order. ``eventTime`` and any
datetime found inside ``properties`` go through the timestamp adapter. Property
containers are converted recursively before the standard JSON encoder runs.
"""

import json
from collections.abc import Mapping
from datetime import datetime
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from .config import Settings, get_settings
from .errors import DecodingError, EncodingError
from .event import Event, EventRecord
from .logging import get_logger
from .schema import EventDocument
from .timestamps import format_timestamp, parse_timestamp

logger = get_logger(__name__)


class EventEncoder:
    """Serializes events to and from JSON text"""

    def __init__(self, serialize_nulls: bool = False, pretty_printing: bool = False):
        self.serialize_nulls = serialize_nulls
        self.pretty_printing = pretty_printing

    @classmethod
    def from_settings(cls, settings: Settings) -> "EventEncoder":
        return cls(
            serialize_nulls=settings.serialize_nulls,
            pretty_printing=settings.pretty_printing,
        )

    def to_document(self, record: EventRecord) -> dict[str, Any]:
        """
        Build the JSON document for a record

        Unset fields are omitted unless ``serialize_nulls`` is on.
        ``properties`` is always present. Property values are converted the
        same way ``encode`` writes them, so the result can go straight into
        ``json.dumps``.

        Raises:
            EncodingError: if a property value has no JSON representation
                or contains a reference cycle
        """
        event_time = record.event_time
        if isinstance(event_time, datetime):
            event_time = format_timestamp(event_time)

        try:
            properties = self._to_json_value(record.properties, set())
        except (TypeError, ValueError, RecursionError) as e:
            raise self._encoding_error(record, e) from e

        fields = [
            ("event", record.event),
            ("entityType", record.entity_type),
            ("entityId", record.entity_id),
            ("targetEntityType", record.target_entity_type),
            ("targetEntityId", record.target_entity_id),
            ("properties", properties),
            ("eventTime", event_time),
        ]

        return {
            name: value
            for name, value in fields
            if value is not None or self.serialize_nulls
        }

    def encode(self, record: EventRecord) -> str:
        """
        Serialize a record to JSON text

        Raises:
            EncodingError: if a property value has no JSON representation,
                contains a reference cycle, or is a non-finite float
        """
        document = self.to_document(record)

        if self.pretty_printing:
            layout = {"indent": 2}
        else:
            layout = {"separators": (",", ":")}

        try:
            return json.dumps(document, allow_nan=False, ensure_ascii=False, **layout)
        except (TypeError, ValueError) as e:
            raise self._encoding_error(record, e) from e

    def decode(self, text: str | bytes) -> Event:
        """
        Read JSON text back into a new Event

        Raises:
            DecodingError: if the text is not a JSON object of the event shape
        """
        try:
            document = EventDocument.model_validate_json(text)
        except ValidationError as e:
            raw = text.decode("utf-8", errors="replace") if isinstance(text, bytes) else text
            logger.warning("Event decoding failed", error=str(e))
            raise DecodingError(raw, str(e)) from e

        return self._to_event(document)

    def from_document(self, data: Mapping[str, Any]) -> Event:
        """Create a new Event from a dictionary with the JSON field names"""
        try:
            document = EventDocument.model_validate(data)
        except ValidationError as e:
            logger.warning("Event decoding failed", error=str(e))
            raise DecodingError(repr(data), str(e)) from e

        return self._to_event(document)

    def _to_event(self, document: EventDocument) -> Event:
        event = (
            Event()
            .event(document.event)
            .entity_type(document.entity_type)
            .entity_id(document.entity_id)
            .target_entity_type(document.target_entity_type)
            .target_entity_id(document.target_entity_id)
            .properties(document.properties or {})
        )

        if document.event_time is not None:
            event.event_time(parse_timestamp(document.event_time))

        return event

    @staticmethod
    def _encoding_error(record: EventRecord, error: Exception) -> EncodingError:
        logger.error("Event encoding failed", event_name=record.event, error=str(error))
        return EncodingError(record.event, str(error))

    def _to_json_value(self, value: Any, active: set[int]) -> Any:
        if value is None or isinstance(value, (str, int, float)):
            return value
        if isinstance(value, datetime):
            return format_timestamp(value)
        if not isinstance(value, (Mapping, list, tuple, set, frozenset)):
            raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

        # containers on the current path, by identity
        if id(value) in active:
            raise ValueError("Circular reference detected")
        active.add(id(value))
        try:
            if isinstance(value, Mapping):
                return {key: self._to_json_value(item, active) for key, item in value.items()}
            return [self._to_json_value(item, active) for item in value]
        finally:
            active.discard(id(value))


class EventEncoderBuilder:
    """Fluent configuration of an EventEncoder"""

    def __init__(self):
        self._serialize_nulls = False
        self._pretty_printing = False

    def serialize_nulls(self) -> "EventEncoderBuilder":
        self._serialize_nulls = True
        return self

    def set_pretty_printing(self) -> "EventEncoderBuilder":
        self._pretty_printing = True
        return self

    def create(self) -> EventEncoder:
        return EventEncoder(
            serialize_nulls=self._serialize_nulls,
            pretty_printing=self._pretty_printing,
        )


@lru_cache()
def get_default_encoder() -> EventEncoder:
    """Get the process-wide encoder configured from settings"""
    return EventEncoder.from_settings(get_settings())
