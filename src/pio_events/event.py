# Assumptions:
# - Event is a mutable fluent builder, every setter returns the same instance
# - No validation of mandatory fields, absence passes through to the output
# - EventRecord is the frozen snapshot for sharing across threads

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .encoding import EventEncoder


@dataclass(frozen=True)
class EventRecord:
    """Immutable snapshot of an event, hashed on its scalar fields"""

    # mandatory fields
    event: str | None = None
    entity_type: str | None = None
    entity_id: str | None = None

    # optional fields
    target_entity_type: str | None = None
    target_entity_id: str | None = None
    properties: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    event_time: datetime | None = None

    def to_dict(self, encoder: "EventEncoder | None" = None) -> dict[str, Any]:
        """Convert record to a JSON-ready dictionary"""
        return _resolve(encoder).to_document(self)

    def to_json_string(self, encoder: "EventEncoder | None" = None) -> str:
        """Serialize record to JSON"""
        return _resolve(encoder).encode(self)

    def __str__(self) -> str:
        return self.to_json_string()


class Event:
    """
    Event object sent to an event-collection service.

    entityType-entityId forms the unique identifier of the entity. Build one
    with chained setters::

        event = (
            Event()
            .event("$set")
            .entity_type("user")
            .entity_id("u1")
            .property("age", 30)
        )
        event.to_json_string()

    Instances are not thread-safe; use ``build()`` to get an immutable
    ``EventRecord`` that can be shared.
    """

    def __init__(self):
        # mandatory fields
        self._event: str | None = None
        self._entity_type: str | None = None
        self._entity_id: str | None = None

        # optional fields
        self._target_entity_type: str | None = None
        self._target_entity_id: str | None = None
        self._properties: dict[str, Any] = {}
        self._event_time: datetime | None = None

    def get_event(self) -> str | None:
        """Returns the name of the event."""
        return self._event

    def get_entity_type(self) -> str | None:
        """Returns the entity type."""
        return self._entity_type

    def get_entity_id(self) -> str | None:
        """Returns the entity id."""
        return self._entity_id

    def get_target_entity_type(self) -> str | None:
        """Returns the target entity type, or None if the field is not set."""
        return self._target_entity_type

    def get_target_entity_id(self) -> str | None:
        """Returns the target entity id, or None if the field is not set."""
        return self._target_entity_id

    def get_properties(self) -> dict[str, Any]:
        """Returns the live properties dictionary, empty when nothing was set."""
        return self._properties

    def get_event_time(self) -> datetime | None:
        """Returns the event time, or None if the field is not set."""
        return self._event_time

    # builder methods

    def event(self, event: str | None) -> "Event":
        """Sets the name of the event."""
        self._event = event
        return self

    def entity_type(self, entity_type: str | None) -> "Event":
        """Sets the entity type."""
        self._entity_type = entity_type
        return self

    def entity_id(self, entity_id: str | None) -> "Event":
        """Sets the entity id."""
        self._entity_id = entity_id
        return self

    def target_entity_type(self, target_entity_type: str | None) -> "Event":
        self._target_entity_type = target_entity_type
        return self

    def target_entity_id(self, target_entity_id: str | None) -> "Event":
        self._target_entity_id = target_entity_id
        return self

    def property(self, key: str, value: Any) -> "Event":
        self._properties[key] = value
        return self

    def properties(self, properties: Mapping[str, Any]) -> "Event":
        """Merges properties, overwriting keys that are already set."""
        self._properties.update(properties)
        return self

    def event_time(self, event_time: datetime | None) -> "Event":
        self._event_time = event_time
        return self

    def build(self) -> EventRecord:
        """Snapshot the current fields into an immutable record"""
        return EventRecord(
            event=self._event,
            entity_type=self._entity_type,
            entity_id=self._entity_id,
            target_entity_type=self._target_entity_type,
            target_entity_id=self._target_entity_id,
            properties=MappingProxyType(dict(self._properties)),
            event_time=self._event_time,
        )

    # serialization

    def to_dict(self, encoder: "EventEncoder | None" = None) -> dict[str, Any]:
        """Convert event to a JSON-ready dictionary"""
        return _resolve(encoder).to_document(self.build())

    def to_json_string(self, encoder: "EventEncoder | None" = None) -> str:
        """Serialize event to JSON"""
        return _resolve(encoder).encode(self.build())

    @classmethod
    def from_json(cls, text: str, encoder: "EventEncoder | None" = None) -> "Event":
        """Create event from JSON text"""
        return _resolve(encoder).decode(text)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], encoder: "EventEncoder | None" = None) -> "Event":
        """Create event from a dictionary with the JSON field names"""
        return _resolve(encoder).from_document(data)

    @classmethod
    def from_record(cls, record: EventRecord) -> "Event":
        """Create a mutable event from a snapshot"""
        return (
            cls()
            .event(record.event)
            .entity_type(record.entity_type)
            .entity_id(record.entity_id)
            .target_entity_type(record.target_entity_type)
            .target_entity_id(record.target_entity_id)
            .properties(record.properties)
            .event_time(record.event_time)
        )

    def __str__(self) -> str:
        return self.to_json_string()

    def __repr__(self) -> str:
        return (
            f"Event(event={self._event!r}, entity_type={self._entity_type!r}, "
            f"entity_id={self._entity_id!r})"
        )


def _resolve(encoder: "EventEncoder | None") -> "EventEncoder":
    if encoder is not None:
        return encoder

    from .encoding import get_default_encoder

    return get_default_encoder()
