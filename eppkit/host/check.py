"""The EPP <check> command for hosts, and helpers shared by the host commands."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from eppkit.request import Command
from eppkit.xmlcodec import XmlError, child, child_text, children, local_name

XMLNS = "urn:ietf:params:xml:ns:host-1.0"

_AVAILABILITY = {"1": True, "true": True, "0": False, "false": False}


def _host_command(command: str, names: Iterable[str]) -> tuple[ET.Element, ET.Element]:
    """Build <command><host:command> holding one <host:name> per name."""
    root = ET.Element(command)
    body = ET.SubElement(root, f"host:{command}", {"xmlns:host": XMLNS})
    for name in names:
        ET.SubElement(body, "host:name").text = name
    return root, body


def _required(element: ET.Element, name: str) -> ET.Element:
    found = child(element, name)
    if found is None:
        raise XmlError(f"missing <{name}> in <{local_name(element.tag)}>")
    return found


def _required_text(element: ET.Element, name: str) -> str:
    return (_required(element, name).text or "").strip()


@dataclass(frozen=True)
class HostCheck(Command):
    """Asks whether the given host names are available."""

    COMMAND = "check"

    hosts: Sequence[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "hosts", tuple(self.hosts))

    def to_element(self) -> ET.Element:
        root, _ = _host_command(self.COMMAND, self.hosts)
        return root


@dataclass(frozen=True)
class CheckedHost:
    """The availability of one host name."""

    id: str
    available: bool
    reason: str | None = None


@dataclass(frozen=True)
class HostCheckResponse:
    """The <chkData> of a host check response."""

    hosts: tuple[CheckedHost, ...]

    @classmethod
    def from_element(cls, element: ET.Element) -> HostCheckResponse:
        """Build from the <resData> element."""
        chk = _required(element, "chkData")
        return cls(hosts=tuple(_checked(cd) for cd in children(chk, "cd")))


def _checked(cd: ET.Element) -> CheckedHost:
    name = _required(cd, "name")
    raw = (name.get("avail") or "").strip()
    if raw not in _AVAILABILITY:
        raise XmlError(f"invalid avail value: {raw!r}")
    return CheckedHost(
        id=(name.text or "").strip(),
        available=_AVAILABILITY[raw],
        reason=child_text(cd, "reason"),
    )