"""Indentation-aware text output for the XML serializer."""

import io
from contextlib import contextmanager
from typing import Any, BinaryIO, Iterator


class Writer:
    """Buffers XML text and tracks nesting depth.

    Nothing reaches the sink until ``flush()`` is called.

    Args:
        sink: Binary stream that receives the document on flush
        indent: Unit repeated once per nesting level
        pretty: When False, no indentation or newlines are emitted
    """

    def __init__(self, sink: BinaryIO | None = None, indent: str = " ", pretty: bool = True):
        self.sink = sink if sink is not None else io.BytesIO()
        self.indent_unit = indent
        self.pretty = pretty
        self._depth = 0
        self._buffer: list[str] = []

    @property
    def depth(self) -> int:
        return self._depth

    def indent(self) -> None:
        """Increase the current depth."""
        self._depth += 1

    def dedent(self) -> None:
        """Decrease the current depth."""
        self._depth -= 1

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Indent for the duration of the block, dedenting even on error."""
        self.indent()
        try:
            yield
        finally:
            self.dedent()

    def current_indentation(self) -> str:
        """Return the indentation for the current depth as a string."""
        if self.pretty and self._depth > 0:
            return self.indent_unit * self._depth
        return ""

    def write_indentation(self) -> None:
        self._buffer.append(self.current_indentation())

    def newline(self) -> None:
        if self.pretty:
            self._buffer.append("\n")

    def write_start_tag(self, name: str, *attributes: str) -> None:
        """Write an indented start tag.

        Attributes are written verbatim (e.g. ``'id="1"'``), each preceded by
        a space. No newline follows the tag.
        """
        self.write_indentation()
        self._buffer.append(f"<{name}")
        for attr in attributes:
            self._buffer.append(f" {attr}")
        self._buffer.append(">")

    def write_end_tag(self, name: str) -> None:
        self._buffer.append(f"</{name}>")
        self.newline()

    def write_scalar(self, value: Any) -> None:
        """Write the plain text form of a scalar.

        Reserved characters (<, > and &) are NOT escaped.
        """
        if isinstance(value, bool):
            self._buffer.append(str(value).lower())
        else:
            self._buffer.append(str(value))

    def write_raw(self, text: str) -> None:
        """Write preformatted text exactly as given."""
        self._buffer.append(text)

    def flush(self) -> bytes:
        """Write buffered text to the sink as UTF-8 and return those bytes."""
        data = "".join(self._buffer).encode("utf-8")
        self._buffer.clear()
        self.sink.write(data)
        if hasattr(self.sink, "flush"):
            self.sink.flush()
        return data
