"""The EPP <poll op="req"> command and its response data."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime

from eppkit.host.info import HostInfoData
from eppkit.request import Command
from eppkit.xmlcodec import XmlError, child, child_text, local_name, parse_datetime


@dataclass(frozen=True)
class MessagePoll(Command):
    """Requests the first message in the server's queue."""

    COMMAND = "poll"

    def to_element(self) -> ET.Element:
        return ET.Element(self.COMMAND, {"op": "req"})


def _required_text(element: ET.Element, name: str) -> str:
    found = child(element, name)
    if found is None:
        raise XmlError(f"missing <{name}> in <{local_name(element.tag)}>")
    return (found.text or "").strip()


@dataclass(frozen=True)
class _DomainTransferData:
    """A domain <trnData> reported through the message queue."""

    name: str
    transfer_status: str
    requester_id: str
    requested_at: datetime
    ack_id: str
    ack_by: datetime
    expiring_at: datetime | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> _DomainTransferData:
        expiry = child_text(element, "exDate")
        return cls(
            name=_required_text(element, "name"),
            transfer_status=_required_text(element, "trStatus"),
            requester_id=_required_text(element, "reID"),
            requested_at=parse_datetime(_required_text(element, "reDate")),
            ack_id=_required_text(element, "acID"),
            ack_by=parse_datetime(_required_text(element, "acDate")),
            expiring_at=parse_datetime(expiry) if expiry is not None else None,
        )


_MESSAGE_PARSERS = {
    "trnData": _DomainTransferData.from_element,
    "infData": HostInfoData.from_element,
}


@dataclass(frozen=True)
class MessagePollResponse:
    """The <resData> of a poll response: a domain transfer or host info record."""

    message_data: _DomainTransferData | HostInfoData

    @classmethod
    def from_element(cls, element: ET.Element) -> MessagePollResponse:
        """Build from the <resData> element."""
        for sub in element:
            if not isinstance(sub.tag, str):
                continue
            parser = _MESSAGE_PARSERS.get(local_name(sub.tag))
            if parser is None:
                raise XmlError(f"unexpected <{local_name(sub.tag)}> in poll response")
            return cls(message_data=parser(sub))
        raise XmlError("empty <resData> in poll response")