"""Tests for parsing serializer output back with ElementTree."""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone

from hashxml import Serializer, to_xml


def _parse(xml: bytes) -> ET.Element:
    return ET.fromstring(xml)


def test_scalars_roundtrip():
    """Test that scalar values come back as text."""
    root = _parse(to_xml("docroot", {"key1": 1, "key2": "2", "key3": 2.343, "key4": True}))

    assert root.tag == "docroot"
    assert root.find("key1").text == "1"
    assert root.find("key2").text == "2"
    assert root.find("key3").text == "2.343"
    assert root.find("key4").text == "true"


def test_sequences_roundtrip():
    """Test sequences of strings and ints."""
    root = _parse(to_xml("docroot", {
        "key3": ["Array value 1", "Array value 2"],
        "key4": [1, 2, 3, 4, 5, 6, 7],
    }))

    assert [e.text for e in root.find("key3").findall("str")] == ["Array value 1", "Array value 2"]
    assert [int(e.text) for e in root.find("key4").findall("int")] == [1, 2, 3, 4, 5, 6, 7]


def test_nested_mappings_roundtrip():
    """Test a mixed document with nested maps."""
    data = {
        "key4": {"MapKey1": "Map value 1", "MapKey2": "Map value 2"},
        "key5": {
            "EmbeddedMap1": {"a": "hallo world", "b": "sawubona mhlaba"},
            "EmbeddedMap2": {"c": "another key", "d": 123},
        },
    }
    root = _parse(to_xml("docroot", data))

    assert root.find("key4/MapKey1").text == "Map value 1"
    assert root.find("key5/EmbeddedMap1/b").text == "sawubona mhlaba"
    assert root.find("key5/EmbeddedMap2/d").text == "123"


def test_sequence_of_maps_roundtrip():
    """Test that maps inside a sequence become sibling elements."""
    stamp = datetime(2023, 5, 1, 12, tzinfo=timezone.utc)
    root = _parse(to_xml("docroot", {"EmbeddedMap3": [
        {"EmbeddedArray1": "This is a string"},
        {"EmbeddedArray2": 2.343},
        {"EmbeddedArray3": 3},
        {"EmbeddedArray4": stamp},
        {"EmbeddedArray5": True},
    ]}))

    children = list(root.find("EmbeddedMap3"))
    assert [c.tag for c in children] == [f"EmbeddedArray{i}" for i in range(1, 6)]
    assert children[3].text == "2023-05-01T12:00:00Z"


def test_whitespace_only_differs_between_modes():
    """Test that pretty and compact output parse to the same structure."""
    data = {"a": {"b": [1, 2]}, "c": "x"}
    pretty = _parse(Serializer().encode("docroot", data))
    compact = _parse(Serializer(pretty=False).encode("docroot", data))

    assert [e.tag for e in pretty.iter()] == [e.tag for e in compact.iter()]
    assert [(e.text or "").strip() for e in pretty.iter()] == [(e.text or "") for e in compact.iter()]
