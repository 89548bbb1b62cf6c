"""The EPP <logout> command."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from eppkit.request import Command


@dataclass(frozen=True)
class Logout(Command):
    """Ends the session; the response carries no data."""

    COMMAND = "logout"

    def to_element(self) -> ET.Element:
        return ET.Element(self.COMMAND)