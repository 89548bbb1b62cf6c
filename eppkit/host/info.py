"""The EPP <info> command for hosts."""

from __future__ import annotations

import ipaddress
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime

from eppkit.host.check import _host_command, _required, _required_text
from eppkit.host.create import IPAddress
from eppkit.request import Command
from eppkit.xmlcodec import XmlError, child_text, children, parse_datetime


@dataclass(frozen=True)
class HostInfo(Command):
    """Queries the details of one host."""

    COMMAND = "info"

    name: str

    def to_element(self) -> ET.Element:
        root, _ = _host_command(self.COMMAND, [self.name])
        return root


def _optional_datetime(element: ET.Element, name: str) -> datetime | None:
    text = child_text(element, name)
    return parse_datetime(text) if text is not None else None


def _address(element: ET.Element) -> IPAddress:
    text = (element.text or "").strip()
    try:
        return ipaddress.ip_address(text)
    except ValueError as exc:
        raise XmlError(f"invalid IP address: {text!r}") from exc


def _status(element: ET.Element) -> str:
    status = element.get("s")
    if status is None:
        raise XmlError("<status> requires an s attribute")
    return status


@dataclass(frozen=True)
class HostInfoData:
    """The <infData> describing a host."""

    name: str
    roid: str
    statuses: tuple[str, ...]
    addresses: tuple[IPAddress, ...]
    client_id: str
    creator_id: str
    created_at: datetime
    updater_id: str | None = None
    updated_at: datetime | None = None
    transferred_at: datetime | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> HostInfoData:
        """Build from an <infData> element."""
        return cls(
            name=_required_text(element, "name"),
            roid=_required_text(element, "roid"),
            statuses=tuple(_status(sub) for sub in children(element, "status")),
            addresses=tuple(_address(sub) for sub in children(element, "addr")),
            client_id=_required_text(element, "clID"),
            creator_id=_required_text(element, "crID"),
            created_at=parse_datetime(_required_text(element, "crDate")),
            updater_id=child_text(element, "upID"),
            updated_at=_optional_datetime(element, "upDate"),
            transferred_at=_optional_datetime(element, "trDate"),
        )


@dataclass(frozen=True)
class HostInfoResponse:
    """The <resData> of a host info response."""

    info_data: HostInfoData

    @classmethod
    def from_element(cls, element: ET.Element) -> HostInfoResponse:
        """Build from the <resData> element."""
        return cls(info_data=HostInfoData.from_element(_required(element, "infData")))