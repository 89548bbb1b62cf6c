import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import pytest

from eppkit.xmlcodec import (
    XmlError,
    child,
    child_text,
    children,
    deserialize,
    local_name,
    parse_datetime,
    serialize,
)

HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'


def _tree():
    root = ET.Element("epp", {"xmlns": "urn:ietf:params:xml:ns:epp-1.0"})
    command = ET.SubElement(root, "command")
    ET.SubElement(command, "logout")
    ET.SubElement(command, "clTRID").text = "cltrid:1626454866"
    return root


def test_serialize_starts_with_header_and_crlf():
    text = serialize(_tree())
    assert text.startswith(HEADER + "\r\n")


def test_serialize_empty_element_is_self_closing():
    assert serialize(ET.Element("hello")) == HEADER + "\r\n<hello/>"


def test_round_trip_keeps_structure():
    parsed = deserialize(serialize(_tree()))
    assert local_name(parsed.tag) == "epp"
    command = child(parsed, "command")
    assert [local_name(sub.tag) for sub in command] == ["logout", "clTRID"]
    assert child_text(command, "clTRID") == "cltrid:1626454866"


def test_round_trip_escapes_text_and_attributes():
    element = ET.Element("note", {"title": 'a "quoted" <value>'})
    element.text = "x < y & z"
    parsed = deserialize(serialize(element))
    assert parsed.get("title") == 'a "quoted" <value>'
    assert parsed.text == "x < y & z"


def test_local_name_strips_namespace_and_prefix():
    assert local_name("{urn:ietf:params:xml:ns:host-1.0}name") == "name"
    assert local_name("host:name") == "name"
    assert local_name("name") == "name"


def test_children_and_missing_child():
    root = deserialize(
        '<list xmlns:h="urn:x"><h:item>one</h:item><h:item>two</h:item></list>'
    )
    assert [sub.text for sub in children(root, "item")] == ["one", "two"]
    assert child(root, "missing") is None
    assert child_text(root, "missing") is None


def test_deserialize_malformed_raises():
    with pytest.raises(XmlError):
        deserialize("<epp><response></epp>")


def test_parse_datetime_zulu_with_fraction():
    assert parse_datetime("2021-07-25T14:51:17.0Z") == datetime(
        2021, 7, 25, 14, 51, 17, tzinfo=timezone.utc
    )


def test_parse_datetime_offset_is_normalised_to_utc():
    stamp = parse_datetime("2021-07-26T05:28:55+00:00")
    assert stamp == datetime(2021, 7, 26, 5, 28, 55, tzinfo=timezone.utc)
    assert stamp.utcoffset().total_seconds() == 0


@pytest.mark.parametrize("text", ["garbage", "2021-07-25T14:51:17", "2021-13-01T00:00:00Z"])
def test_parse_datetime_invalid(text):
    with pytest.raises(XmlError):
        parse_datetime(text)