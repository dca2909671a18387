"""Shared test configuration and fixtures."""

import io

import pytest

from hashxml import Serializer


@pytest.fixture
def sink():
    """A fresh in-memory binary sink."""
    return io.BytesIO()


@pytest.fixture
def serializer(sink):
    """A pretty-printing serializer with a one-space indent writing to ``sink``."""
    return Serializer(sink, indent=" ", pretty=True)
