"""The EPP <hello> request and the server <greeting> it elicits."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TypeVar

from eppkit.request import EPP_XMLNS
from eppkit.xmlcodec import XmlError, child, children, deserialize, local_name, parse_datetime

_E = TypeVar("_E", bound=Enum)


def hello_document() -> ET.Element:
    """Return the <epp><hello/></epp> request document."""
    root = ET.Element("epp", {"xmlns": EPP_XMLNS})
    ET.SubElement(root, "hello")
    return root


class AccessType(Enum):
    """The kinds of data access announced in <access>."""

    ALL = "all"
    NO_ACCESS = "none"
    NULL = "null"
    PERSONAL = "personal"
    PERSONAL_AND_OTHER = "personalAndOther"
    OTHER = "other"


class PurposeType(Enum):
    """The purposes listed in a <purpose> element."""

    ADMIN = "admin"
    CONTACT = "contact"
    PROV = "prov"
    OTHER_PURPOSE = "other"


class RecipientType(Enum):
    """The recipients listed in a <recipient> element."""

    OTHER = "other"
    OURS = "ours"
    PUBLIC = "public"
    SAME = "same"
    UNRELATED = "unrelated"


class RetentionType(Enum):
    """The retention policy named in a <retention> element."""

    BUSINESS = "business"
    INDEFINITE = "indefinite"
    LEGAL = "legal"
    NO = "none"
    STATED = "stated"


class ExpiryType(Enum):
    """Whether an <expiry> is an absolute date or a relative duration."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


def _required(element: ET.Element, name: str) -> ET.Element:
    found = child(element, name)
    if found is None:
        raise XmlError(f"missing <{name}> in <{local_name(element.tag)}>")
    return found


def _required_text(element: ET.Element, name: str) -> str:
    return (_required(element, name).text or "").strip()


def _element_children(element: ET.Element) -> list[ET.Element]:
    return [sub for sub in element if isinstance(sub.tag, str)]


def _from_tag(kind: type[_E], element: ET.Element) -> _E:
    name = local_name(element.tag)
    try:
        return kind(name)
    except ValueError as exc:
        raise XmlError(f"unexpected <{name}> for {kind.__name__}") from exc


def _single(kind: type[_E], element: ET.Element) -> _E:
    subs = _element_children(element)
    if not subs:
        raise XmlError(f"<{local_name(element.tag)}> has no value")
    return _from_tag(kind, subs[0])


@dataclass(frozen=True)
class ServiceMenu:
    """The <svcMenu> section: protocol options and offered services."""

    version: str
    lang: str
    obj_uris: tuple[str, ...]
    ext_uris: tuple[str, ...] | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> ServiceMenu:
        obj_uris = tuple((sub.text or "").strip() for sub in children(element, "objURI"))
        if not obj_uris:
            raise XmlError("missing <objURI> in <svcMenu>")
        ext = child(element, "svcExtension")
        ext_uris = None
        if ext is not None:
            ext_uris = tuple((sub.text or "").strip() for sub in children(ext, "extURI"))
        return cls(
            version=_required_text(element, "version"),
            lang=_required_text(element, "lang"),
            obj_uris=obj_uris,
            ext_uris=ext_uris,
        )


@dataclass(frozen=True)
class Statement:
    """One <statement> of the data collection policy."""

    purpose: tuple[PurposeType, ...]
    recipient: tuple[RecipientType, ...]
    retention: RetentionType

    @classmethod
    def from_element(cls, element: ET.Element) -> Statement:
        purpose = _required(element, "purpose")
        recipient = _required(element, "recipient")
        return cls(
            purpose=tuple(_from_tag(PurposeType, sub) for sub in _element_children(purpose)),
            recipient=tuple(
                _from_tag(RecipientType, sub) for sub in _element_children(recipient)
            ),
            retention=_single(RetentionType, _required(element, "retention")),
        )


@dataclass(frozen=True)
class Expiry:
    """The <expiry> of the data collection policy."""

    kind: ExpiryType
    value: str

    @classmethod
    def from_element(cls, element: ET.Element) -> Expiry:
        subs = _element_children(element)
        if not subs:
            raise XmlError("<expiry> has no value")
        return cls(kind=_from_tag(ExpiryType, subs[0]), value=(subs[0].text or "").strip())


@dataclass(frozen=True)
class Dcp:
    """The <dcp> data collection policy section."""

    access: AccessType
    statements: tuple[Statement, ...]
    expiry: Expiry | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> Dcp:
        statements = tuple(Statement.from_element(sub) for sub in children(element, "statement"))
        if not statements:
            raise XmlError("missing <statement> in <dcp>")
        expiry = child(element, "expiry")
        return cls(
            access=_single(AccessType, _required(element, "access")),
            statements=statements,
            expiry=Expiry.from_element(expiry) if expiry is not None else None,
        )


@dataclass(frozen=True)
class Greeting:
    """The <greeting> a server sends on connect or in reply to <hello>."""

    service_id: str
    service_date: datetime
    svc_menu: ServiceMenu
    dcp: Dcp

    @classmethod
    def from_element(cls, element: ET.Element) -> Greeting:
        """Build a greeting from a <greeting> element."""
        return cls(
            service_id=_required_text(element, "svID"),
            service_date=parse_datetime(_required_text(element, "svDate")),
            svc_menu=ServiceMenu.from_element(_required(element, "svcMenu")),
            dcp=Dcp.from_element(_required(element, "dcp")),
        )


def parse_greeting(text: str) -> Greeting:
    """Parse a greeting document."""
    root = deserialize(text)
    if local_name(root.tag) != "epp":
        raise XmlError(f"expected <epp> root, found <{local_name(root.tag)}>")
    return Greeting.from_element(_required(root, "greeting"))