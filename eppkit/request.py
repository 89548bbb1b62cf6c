"""Building EPP command documents."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import ClassVar

from eppkit.xmlcodec import serialize

EPP_XMLNS = "urn:ietf:params:xml:ns:epp-1.0"
EPP_VERSION = "1.0"
EPP_LANG = "en"


class Command(ABC):
    """An EPP command; ``COMMAND`` names the element placed under <command>."""

    COMMAND: ClassVar[str]

    @abstractmethod
    def to_element(self) -> ET.Element:
        """Return the element whose tag is ``COMMAND``."""


class Extension(ABC):
    """Data carried in the <extension> section of a command."""

    @abstractmethod
    def elements(self) -> list[ET.Element]:
        """Return the elements placed inside <extension>."""


def command_document(
    command: Command, client_tr_id: str, extension: Extension | None = None
) -> ET.Element:
    """Wrap a command, its optional extension and the client TRID in <epp>."""
    body = command.to_element()
    if body.tag != command.COMMAND:
        raise ValueError(
            f"command element <{body.tag}> does not match {command.COMMAND!r}"
        )
    root = ET.Element("epp", {"xmlns": EPP_XMLNS})
    wrapper = ET.SubElement(root, "command")
    wrapper.append(body)
    if extension is not None:
        ET.SubElement(wrapper, "extension").extend(extension.elements())
    ET.SubElement(wrapper, "clTRID").text = client_tr_id
    return root


def serialize_command(
    command: Command, client_tr_id: str, extension: Extension | None = None
) -> str:
    """Render a complete command document as text."""
    return serialize(command_document(command, client_tr_id, extension))