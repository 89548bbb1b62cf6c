"""The Verisign NameStore extension carrying the target sub-product."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from eppkit.request import Extension
from eppkit.xmlcodec import XmlError, child, child_text, local_name

XMLNS = "http://www.verisign-grs.com/epp/namestoreExt-1.1"


@dataclass(frozen=True)
class NameStore(Extension):
    """Names the registry sub-product (such as ``com``) a command applies to."""

    subproduct: str

    def to_element(self) -> ET.Element:
        """Return the <namestoreExt:namestoreExt> element."""
        element = ET.Element("namestoreExt:namestoreExt", {"xmlns:namestoreExt": XMLNS})
        ET.SubElement(element, "namestoreExt:subProduct").text = self.subproduct
        return element

    def elements(self) -> list[ET.Element]:
        return [self.to_element()]

    @classmethod
    def from_element(cls, element: ET.Element) -> NameStore:
        """Build from an <extension> element or the <namestoreExt> element itself."""
        if local_name(element.tag) == "namestoreExt":
            data = element
        else:
            data = child(element, "namestoreExt")
        if data is None:
            raise XmlError(f"missing <namestoreExt> in <{local_name(element.tag)}>")
        subproduct = child_text(data, "subProduct")
        if subproduct is None:
            raise XmlError("missing <subProduct> in <namestoreExt>")
        return cls(subproduct=subproduct)