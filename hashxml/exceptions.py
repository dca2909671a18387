"""Exception classes for hashxml."""


class HashXMLError(Exception):
    """Base exception for all hashxml errors."""


class UnsupportedTypeError(HashXMLError):
    """Raised when no encoder in the chain claims a value.

    Register an encoder for the type with ``Serializer.add_encoder`` to
    support it.

    Attributes:
        value_type: The runtime type of the rejected value
        path: Element path of the value (e.g. "/docroot/key1")
    """

    def __init__(self, value_type: type, path: str = ""):
        super().__init__(
            f"XML serializer did not find an encoder for type: {value_type.__name__}"
            + (f" (at {path})" if path else "")
        )
        self.value_type = value_type
        self.path = path


class EncoderError(HashXMLError):
    """Raised when an encoder claims a value but fails to render it.

    The original exception is kept as ``__cause__``.

    Attributes:
        path: Element path of the value being encoded
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path
