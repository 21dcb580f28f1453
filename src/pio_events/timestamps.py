"""
Timestamp adapter for the ``eventTime`` field.

Timestamps are rendered as ISO-8601 date-times with millisecond precision and
a numeric offset, zero offsets written as ``Z``::

    2004-12-13T21:39:45.618Z
    2004-12-13T21:39:45.618-08:00

Offsets that are not whole minutes keep their seconds, e.g.
``2020-01-01T00:00:00.000+00:00:30``. Naive datetimes are treated as UTC.
"""

from datetime import UTC, datetime

from .errors import DecodingError


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=UTC)
    return value


def format_timestamp(value: datetime) -> str:
    """Render a datetime in the canonical event time format"""
    value = _as_aware(value)
    text = value.isoformat(timespec="milliseconds")
    if not value.utcoffset():
        # isoformat writes +00:00 for UTC
        return text[: -len("+00:00")] + "Z"
    return text


def parse_timestamp(text: str) -> datetime:
    """
    Parse an event time back into an aware datetime

    Args:
        text: ISO-8601 date-time, e.g. ``2004-12-13T21:39:45.618Z``

    Raises:
        DecodingError: if the text is not an ISO-8601 date-time
    """
    if not isinstance(text, str):
        raise DecodingError(repr(text), "event time must be a string")

    try:
        value = datetime.fromisoformat(text)
    except ValueError as e:
        raise DecodingError(text, f"invalid event time: {str(e)}") from e

    return _as_aware(value)
