"""Core types for hashxml."""

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from hashxml.serializer import Serializer


class Encoder(Protocol):
    """A handler that may claim and render one kind of value.

    Encoders are called with the serializer, the value, the element path of
    the value and its element name (None for sequence elements and for an
    unnamed root). They return True after rendering the value and all of
    its descendants, return False without writing anything when the value
    is not theirs, and raise when they claimed the value but could not
    render it.

    Example:
        >>> def point_encoder(serializer, value, path, name):
        ...     if not isinstance(value, Point):
        ...         return False
        ...     return mapping_encoder(serializer, {"x": value.x, "y": value.y}, path, name)
    """

    def __call__(
        self,
        serializer: "Serializer",
        value: Any,
        path: str,
        name: str | None,
    ) -> bool: ...
