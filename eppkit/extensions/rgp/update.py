"""The <rgp:update> wrapper shared by registry grace period extensions."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Protocol

from eppkit.request import Extension

XMLNS = "urn:ietf:params:xml:ns:rgp-1.0"


class _RgpData(Protocol):
    def to_element(self) -> ET.Element: ...


@dataclass(frozen=True)
class RgpUpdate(Extension):
    """Places RGP data inside an <rgp:update> extension element."""

    data: _RgpData

    def elements(self) -> list[ET.Element]:
        element = ET.Element("rgp:update", {"xmlns:rgp": XMLNS})
        element.append(self.data.to_element())
        return [element]