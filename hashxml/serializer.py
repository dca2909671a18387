"""Dispatching serializer that turns nested mappings into XML."""

import logging
from collections.abc import Mapping
from typing import Any, BinaryIO

from hashxml.config import SerializerConfig
from hashxml.encoders import default_encoders
from hashxml.exceptions import EncoderError, HashXMLError, UnsupportedTypeError
from hashxml.types import Encoder
from hashxml.writer import Writer

logger = logging.getLogger(__name__)

HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'


class Serializer:
    """Converts a mapping to an XML document through an encoder chain.

    Encoders are tried in order and the first one that claims a value
    renders it. The chain starts with the built-in mapping, sequence, scalar
    and timestamp encoders; ``add_encoder`` puts new encoders in front of
    them.

    A serializer holds the nesting depth and output buffer of one document
    and must not be shared between concurrent ``encode`` calls.

    Args:
        sink: Binary stream receiving the document (default: a new BytesIO)
        indent: Indentation unit, repeated once per nesting level
        pretty: Whether to emit newlines and indentation

    Example:
        >>> serializer = Serializer(indent="  ")
        >>> print(serializer.encode("docroot", {"name": "Alice"}).decode())
        <?xml version="1.0" encoding="UTF-8"?>
        <docroot>
          <name>Alice</name>
        </docroot>
    """

    def __init__(self, sink: BinaryIO | None = None, indent: str = " ", pretty: bool = True):
        self.writer = Writer(sink, indent=indent, pretty=pretty)
        self._encoders: list[Encoder] = default_encoders()

    @classmethod
    def from_config(cls, config: SerializerConfig, sink: BinaryIO | None = None) -> "Serializer":
        """Create a serializer from a SerializerConfig."""
        return cls(sink, indent=config.indent, pretty=config.pretty)

    @property
    def encoders(self) -> tuple[Encoder, ...]:
        return tuple(self._encoders)

    def add_encoder(self, *encoders: Encoder) -> None:
        """Register encoders ahead of all existing ones.

        The given encoders keep their relative order, so
        ``add_encoder(a, b)`` tries ``a``, then ``b``, then whatever was
        registered before.
        """
        self._encoders = list(encoders) + self._encoders
        logger.debug("Registered %d encoder(s); chain length is now %d", len(encoders), len(self._encoders))

    def encode(self, root_name: str, root: Mapping) -> bytes:
        """Write ``root`` as an XML document with ``root_name`` as the root tag.

        Args:
            root_name: Tag name of the root element
            root: The mapping to serialize

        Returns:
            The UTF-8 encoded document, which has also been written to the sink

        Raises:
            TypeError: If root is not a mapping
            UnsupportedTypeError: If some value has no matching encoder
            EncoderError: If an encoder failed while rendering a value
        """
        if not isinstance(root, Mapping):
            raise TypeError(f"Expected a mapping as the document root, got {type(root)}")

        self.writer.write_raw(HEADER)
        try:
            self.convert(root, "", root_name)
        except HashXMLError as e:
            logger.error("XML conversion of <%s> failed: %s", root_name, e)
            raise

        return self.writer.flush()

    def convert(self, value: Any, parent_path: str, name: str | None = None) -> None:
        """Render one value by handing it to the first encoder that claims it.

        Args:
            value: The value to render
            parent_path: Element path of the enclosing element
            name: Element name for the value, or None for sequence elements

        Raises:
            UnsupportedTypeError: If no encoder claims the value
            EncoderError: If the claiming encoder raised a non-hashxml error
        """
        path = f"{parent_path}/{name}" if name is not None else parent_path

        for encoder in self._encoders:
            try:
                found = encoder(self, value, path, name)
            except HashXMLError:
                raise
            except Exception as e:
                raise EncoderError(f"Encoder failed at {path or '/'}: {e}", path=path) from e
            if found:
                return

        logger.warning("Please add an encoder that accepts type %s (at %s)", type(value).__name__, path or "/")
        raise UnsupportedTypeError(type(value), path)

    def default_element_name(self, value: Any) -> str:
        """Tag name used for a value that has no element name of its own."""
        return type(value).__name__


def to_xml(root_name: str, root: Mapping, config: SerializerConfig | None = None) -> bytes:
    """Convert a mapping to an XML document in one call.

    Args:
        root_name: Tag name of the root element
        root: The mapping to serialize
        config: Formatting options (default: one-space indent, pretty printed)

    Returns:
        The UTF-8 encoded XML document

    Example:
        >>> print(to_xml("docroot", {"key1": 1, "key2": "2"}).decode())
        <?xml version="1.0" encoding="UTF-8"?>
        <docroot>
         <key1>1</key1>
         <key2>2</key2>
        </docroot>
    """
    serializer = Serializer.from_config(config or SerializerConfig())
    return serializer.encode(root_name, root)
