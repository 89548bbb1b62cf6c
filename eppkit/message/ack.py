"""The EPP <poll op="ack"> command."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from eppkit.request import Command


@dataclass(frozen=True)
class MessageAck(Command):
    """Acknowledges a queued message so that it is removed from the queue."""

    COMMAND = "poll"

    message_id: str

    def to_element(self) -> ET.Element:
        return ET.Element(self.COMMAND, {"op": "ack", "msgID": self.message_id})