"""hashxml - serialize nested mappings to XML.

hashxml walks dictionaries, lists, scalars and datetimes and writes an
indented XML document, dispatching each value through a chain of encoders
that callers can extend or override.
"""

from hashxml._version import __version__
from hashxml.config import SerializerConfig
from hashxml.encoders import (
    default_encoders,
    enum_encoder,
    mapping_encoder,
    pydantic_encoder,
    scalar_encoder,
    sequence_encoder,
    timestamp_encoder,
)
from hashxml.exceptions import EncoderError, HashXMLError, UnsupportedTypeError
from hashxml.serializer import Serializer, to_xml
from hashxml.types import Encoder
from hashxml.writer import Writer

__all__ = [
    "__version__",
    "to_xml",
    "Serializer",
    "SerializerConfig",
    "Writer",
    "Encoder",
    "default_encoders",
    "mapping_encoder",
    "sequence_encoder",
    "scalar_encoder",
    "timestamp_encoder",
    "pydantic_encoder",
    "enum_encoder",
    "HashXMLError",
    "UnsupportedTypeError",
    "EncoderError",
]
