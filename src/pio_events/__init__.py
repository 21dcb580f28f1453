"""
Event value object for event-collection SDK clients.

This library provides:
- A fluent Event builder and its immutable EventRecord snapshot
- JSON encoding with a fixed event time format
- Logging and configuration helpers
"""

__version__ = "1.0.0"
__author__ = "PIO Events Team"

from .encoding import EventEncoder, EventEncoderBuilder, get_default_encoder
from .errors import DecodingError, EncodingError, EventsError
from .event import Event, EventRecord
from .timestamps import format_timestamp, parse_timestamp

__all__ = [
    "Event",
    "EventRecord",
    "EventEncoder",
    "EventEncoderBuilder",
    "get_default_encoder",
    "format_timestamp",
    "parse_timestamp",
    "EventsError",
    "EncodingError",
    "DecodingError",
]
