"""Encoding and decoding of EPP XML documents."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from datetime import datetime, timedelta, timezone
from xml.sax.saxutils import escape

EPP_XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'

_ATTR_ENTITIES = {'"': "&quot;"}

_DATETIME = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


class XmlError(ValueError):
    """Raised when a document cannot be encoded or decoded."""


def serialize(element: ET.Element) -> str:
    """Render an element tree as an EPP document with its XML declaration."""
    return f"{EPP_XML_HEADER}\r\n{_render(element)}"


def _render(element: ET.Element) -> str:
    if not isinstance(element.tag, str):
        raise XmlError(f"cannot serialize node {element.tag!r}")
    attrs = "".join(
        f' {name}="{escape(str(value), _ATTR_ENTITIES)}"'
        for name, value in element.attrib.items()
    )
    inner = escape(element.text or "") + "".join(
        _render(sub) + escape(sub.tail or "") for sub in element
    )
    if not inner:
        return f"<{element.tag}{attrs}/>"
    return f"<{element.tag}{attrs}>{inner}</{element.tag}>"


def deserialize(text: str) -> ET.Element:
    """Parse an XML document and return its root element."""
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise XmlError(f"malformed XML: {exc}") from exc


def local_name(tag: str) -> str:
    """Return a tag name without its namespace URI or prefix."""
    return tag.rpartition("}")[2].rpartition(":")[2]


def children(element: ET.Element, name: str) -> list[ET.Element]:
    """All direct children whose local name is ``name``."""
    return [sub for sub in element if isinstance(sub.tag, str) and local_name(sub.tag) == name]


def child(element: ET.Element, name: str) -> ET.Element | None:
    """The first direct child whose local name is ``name``, if any."""
    found = children(element, name)
    return found[0] if found else None


def child_text(element: ET.Element, name: str) -> str | None:
    """The stripped text of the first matching child, or None if absent."""
    sub = child(element, name)
    if sub is None:
        return None
    return (sub.text or "").strip()


def parse_datetime(text: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware UTC datetime."""
    match = _DATETIME.fullmatch(text.strip())
    if match is None:
        raise XmlError(f"invalid date-time: {text!r}")
    year, month, day, hour, minute, second = (int(match[i]) for i in range(1, 7))
    micro = int((match[7] or "").ljust(6, "0")[:6])
    zone = match[8]
    try:
        if zone == "Z":
            tzinfo = timezone.utc
        else:
            sign = -1 if zone[0] == "-" else 1
            delta = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
            tzinfo = timezone(sign * delta)
        stamp = datetime(year, month, day, hour, minute, second, micro, tzinfo=tzinfo)
    except ValueError as exc:
        raise XmlError(f"invalid date-time: {text!r}") from exc
    return stamp.astimezone(timezone.utc)