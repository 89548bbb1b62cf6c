"""The EPP <update> command for hosts."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass

from eppkit.host.check import _host_command
from eppkit.host.create import IPAddress, _addresses, host_addr_elements
from eppkit.request import Command


@dataclass(frozen=True)
class HostChangeInfo:
    """Data for the <chg> element: the new host name."""

    name: str

    def _element(self) -> ET.Element:
        element = ET.Element("host:chg")
        ET.SubElement(element, "host:name").text = self.name
        return element


@dataclass(frozen=True)
class HostAddRemove:
    """Addresses and statuses to add to or remove from a host."""

    addresses: Sequence[IPAddress | str] | None = None
    statuses: Sequence[str] | None = None

    def __post_init__(self) -> None:
        if self.addresses is not None:
            object.__setattr__(self, "addresses", _addresses(self.addresses))
        if self.statuses is not None:
            object.__setattr__(self, "statuses", tuple(self.statuses))

    def _element(self, tag: str) -> ET.Element:
        element = ET.Element(tag)
        element.extend(host_addr_elements(self.addresses or ()))
        for status in self.statuses or ():
            ET.SubElement(element, "host:status", {"s": status})
        return element


@dataclass(frozen=True)
class HostUpdate(Command):
    """Updates a host's addresses, statuses or name."""

    COMMAND = "update"

    name: str
    add: HostAddRemove | None = None
    remove: HostAddRemove | None = None
    change_info: HostChangeInfo | None = None

    def to_element(self) -> ET.Element:
        root, body = _host_command(self.COMMAND, [self.name])
        for tag, section in (("host:add", self.add), ("host:rem", self.remove)):
            if section is not None:
                body.append(section._element(tag))
        if self.change_info is not None:
            body.append(self.change_info._element())
        return root