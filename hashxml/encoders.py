"""Built-in and optional encoders.

Every encoder has the signature ``(serializer, value, path, name) -> bool``;
see ``hashxml.types.Encoder``.
"""

from collections.abc import Mapping
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from hashxml.serializer import Serializer
    from hashxml.types import Encoder


SCALAR_TYPES = (str, bool, int, float, Decimal)


def mapping_encoder(serializer: "Serializer", value: Any, path: str, name: str | None) -> bool:
    """Encode a mapping, each key becoming a child element."""
    if not isinstance(value, Mapping):
        return False

    writer = serializer.writer
    if name is None:
        for key, item in value.items():
            serializer.convert(item, path, str(key))
        return True

    writer.write_start_tag(name)
    writer.newline()
    with writer.nested():
        for key, item in value.items():
            serializer.convert(item, path, str(key))
    writer.write_indentation()
    writer.write_end_tag(name)
    return True


def sequence_encoder(serializer: "Serializer", value: Any, path: str, name: str | None) -> bool:
    """Encode a list or tuple.

    Elements are converted without a name, so each one picks its own tag
    (scalars fall back to their type name). There is no repeated item tag.
    """
    if not isinstance(value, (list, tuple)):
        return False

    writer = serializer.writer
    if name is None:
        for item in value:
            serializer.convert(item, path)
        return True

    writer.write_start_tag(name)
    writer.newline()
    with writer.nested():
        for item in value:
            serializer.convert(item, path)
    writer.write_indentation()
    writer.write_end_tag(name)
    return True


def _write_leaf(serializer: "Serializer", value: Any, text: Any, name: str | None) -> None:
    tag = name if name is not None else serializer.default_element_name(value)
    serializer.writer.write_start_tag(tag)
    serializer.writer.write_scalar(text)
    serializer.writer.write_end_tag(tag)


def scalar_encoder(serializer: "Serializer", value: Any, path: str, name: str | None) -> bool:
    """Encode strings, booleans and numbers as text elements."""
    if not isinstance(value, SCALAR_TYPES):
        return False

    _write_leaf(serializer, value, value, name)
    return True


def format_rfc3339(value: datetime) -> str:
    """Format a datetime as RFC 3339 with second precision.

    Naive datetimes are treated as UTC. A zero offset is written as "Z".

    Example:
        >>> from datetime import timezone
        >>> format_rfc3339(datetime(2023, 5, 1, 12, tzinfo=timezone.utc))
        '2023-05-01T12:00:00Z'
    """
    offset = value.utcoffset()
    stamp = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if offset is None or offset == timedelta(0):
        return stamp + "Z"

    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(offset) // timedelta(minutes=1)
    return f"{stamp}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def timestamp_encoder(serializer: "Serializer", value: Any, path: str, name: str | None) -> bool:
    """Encode datetimes as RFC 3339 text elements."""
    if not isinstance(value, datetime):
        return False

    _write_leaf(serializer, value, format_rfc3339(value), name)
    return True


def default_encoders() -> list["Encoder"]:
    """Return a fresh list of the built-in encoders in priority order."""
    return [
        mapping_encoder,
        sequence_encoder,
        scalar_encoder,
        timestamp_encoder,
    ]


# --- Optional encoders, registered with Serializer.add_encoder ---


def pydantic_encoder(serializer: "Serializer", value: Any, path: str, name: str | None) -> bool:
    """Encode a Pydantic model through its ``model_dump()`` dictionary.

    Fields set to None are omitted. Unnamed models (e.g. sequence elements)
    are wrapped in a tag named after the model class.
    """
    if not isinstance(value, BaseModel):
        return False

    tag = name if name is not None else type(value).__name__
    return mapping_encoder(serializer, value.model_dump(exclude_none=True), path, tag)


def enum_encoder(serializer: "Serializer", value: Any, path: str, name: str | None) -> bool:
    """Encode an Enum member as its value, tagged with the enum class name when unnamed."""
    if not isinstance(value, Enum):
        return False

    tag = name if name is not None else type(value).__name__
    _write_leaf(serializer, value, value.value, tag)
    return True
