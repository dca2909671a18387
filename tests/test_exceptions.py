"""Tests for exception classes."""

import pytest
from hashxml.exceptions import (
    HashXMLError,
    UnsupportedTypeError,
    EncoderError,
)


def test_hashxml_error():
    """Test base HashXMLError exception."""
    error = HashXMLError("test error")
    assert str(error) == "test error"
    assert isinstance(error, Exception)


def test_unsupported_type_error_message():
    """Test UnsupportedTypeError names the type and path."""
    error = UnsupportedTypeError(set, "/docroot/tags")
    assert "set" in str(error)
    assert "/docroot/tags" in str(error)
    assert error.value_type is set
    assert error.path == "/docroot/tags"


def test_unsupported_type_error_without_path():
    """Test UnsupportedTypeError without a path."""
    error = UnsupportedTypeError(object)
    assert str(error) == "XML serializer did not find an encoder for type: object"
    assert error.path == ""


def test_encoder_error():
    """Test EncoderError keeps its path."""
    error = EncoderError("encoder failed", path="/docroot/x")
    assert str(error) == "encoder failed"
    assert error.path == "/docroot/x"


def test_exception_hierarchy():
    """Test that all exceptions inherit from HashXMLError."""
    assert issubclass(UnsupportedTypeError, HashXMLError)
    assert issubclass(EncoderError, HashXMLError)


def test_exception_catching():
    """Test that exceptions can be caught as HashXMLError."""
    with pytest.raises(HashXMLError):
        raise UnsupportedTypeError(complex)

    with pytest.raises(HashXMLError):
        raise EncoderError("test")
