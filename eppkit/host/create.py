"""The EPP <create> command for hosts."""

from __future__ import annotations

import ipaddress
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from eppkit.host.check import _host_command, _required, _required_text
from eppkit.request import Command
from eppkit.xmlcodec import parse_datetime

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def host_addr_elements(addresses: Iterable[IPAddress]) -> list[ET.Element]:
    """Render addresses as <host:addr> elements tagged with their IP version."""
    elements = []
    for address in addresses:
        element = ET.Element("host:addr", {"ip": f"v{address.version}"})
        element.text = str(address)
        elements.append(element)
    return elements


def _addresses(values: Iterable[IPAddress | str]) -> tuple[IPAddress, ...]:
    return tuple(ipaddress.ip_address(value) for value in values)


@dataclass(frozen=True)
class HostCreate(Command):
    """Creates a host with optional IP addresses."""

    COMMAND = "create"

    name: str
    addresses: Sequence[IPAddress | str] | None = None

    def __post_init__(self) -> None:
        if self.addresses is not None:
            object.__setattr__(self, "addresses", _addresses(self.addresses))

    def to_element(self) -> ET.Element:
        root, body = _host_command(self.COMMAND, [self.name])
        body.extend(host_addr_elements(self.addresses or ()))
        return root


@dataclass(frozen=True)
class HostCreateResponse:
    """The <creData> of a host create response."""

    name: str
    created_at: datetime

    @classmethod
    def from_element(cls, element: ET.Element) -> HostCreateResponse:
        """Build from the <resData> element."""
        data = _required(element, "creData")
        return cls(
            name=_required_text(data, "name"),
            created_at=parse_datetime(_required_text(data, "crDate")),
        )