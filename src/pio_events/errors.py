# Assumptions:
# - Custom exceptions for event serialization
# - Construction and field setting never raise
# - No retries, errors propagate to the caller


class EventsError(Exception):
    """Base exception for pio-events"""

    pass


class EncodingError(EventsError):
    """Raised when an event cannot be rendered as JSON"""

    def __init__(self, event_name: str | None, reason: str):
        self.event_name = event_name
        self.reason = reason
        super().__init__(f"Failed to encode event {event_name!r}: {reason}")


class DecodingError(EventsError):
    """Raised when JSON text or a timestamp cannot be read back"""

    def __init__(self, raw_data: str, reason: str):
        self.raw_data = raw_data
        self.reason = reason
        super().__init__(f"Failed to decode event: {reason}")
