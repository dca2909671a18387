"""Formatting configuration for the serializer."""

from pydantic import BaseModel, ConfigDict


class SerializerConfig(BaseModel):
    """Output formatting options.

    Attributes:
        indent: Unit repeated once per nesting level when pretty printing
        pretty: Whether to emit newlines and indentation at all
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: str = " "
    pretty: bool = True
