"""The RGP restore request and the RGP status it returns."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from eppkit.xmlcodec import XmlError, child, children, local_name

_DATA_TAGS = ("update", "upData", "infData")


@dataclass(frozen=True)
class RgpRestoreRequest:
    """Asks the registry to restore a deleted domain."""

    def to_element(self) -> ET.Element:
        """Return the <rgp:restore op="request"> element."""
        return ET.Element("rgp:restore", {"op": "request"})


@dataclass(frozen=True)
class RgpStatus:
    """One RGP status of a domain."""

    status: str


@dataclass(frozen=True)
class RgpRequestResponse:
    """The RGP statuses reported in a response extension."""

    rgp_status: tuple[RgpStatus, ...]

    @classmethod
    def from_element(cls, element: ET.Element) -> RgpRequestResponse:
        """Build from an <extension> element or the RGP data element itself."""
        if local_name(element.tag) in _DATA_TAGS:
            data = element
        else:
            data = next(
                (found for tag in _DATA_TAGS if (found := child(element, tag)) is not None),
                None,
            )
        if data is None:
            raise XmlError(f"missing RGP data in <{local_name(element.tag)}>")
        return cls(rgp_status=tuple(_status(sub) for sub in children(data, "rgpStatus")))


def _status(element: ET.Element) -> RgpStatus:
    status = element.get("s")
    if status is None:
        raise XmlError("<rgpStatus> requires an s attribute")
    return RgpStatus(status=status)