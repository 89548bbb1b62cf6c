"""The EPP <delete> command for hosts."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from eppkit.host.check import _host_command
from eppkit.request import Command


@dataclass(frozen=True)
class HostDelete(Command):
    """Deletes a host; the response carries no data."""

    COMMAND = "delete"

    name: str

    def to_element(self) -> ET.Element:
        root, _ = _host_command(self.COMMAND, [self.name])
        return root