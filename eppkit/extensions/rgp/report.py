"""The RGP restore report sent with a domain update."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone


def _timestamp(value: datetime) -> str:
    """Format as RFC 3339 in UTC with a Z suffix, omitting a zero fraction."""
    stamp = value.astimezone(timezone.utc)
    text = stamp.strftime("%Y-%m-%dT%H:%M:%S")
    micro = stamp.microsecond
    if micro:
        text += f".{micro // 1000:03}" if micro % 1000 == 0 else f".{micro:06}"
    return text + "Z"


@dataclass(frozen=True)
class RgpRestoreReport:
    """The registrar's report supporting a domain restore."""

    pre_data: str
    post_data: str
    deleted_at: datetime
    restored_at: datetime
    restore_reason: str
    statements: Sequence[str]
    other: str

    def __post_init__(self) -> None:
        for stamp in (self.deleted_at, self.restored_at):
            if stamp.tzinfo is None or stamp.utcoffset() is None:
                raise ValueError("restore report timestamps must be timezone-aware")
        object.__setattr__(self, "statements", tuple(self.statements))

    def to_element(self) -> ET.Element:
        """Return the <rgp:restore op="report"> element."""
        restore = ET.Element("rgp:restore", {"op": "report"})
        report = ET.SubElement(restore, "rgp:report")
        fields = [
            ("rgp:preData", self.pre_data),
            ("rgp:postData", self.post_data),
            ("rgp:delTime", _timestamp(self.deleted_at)),
            ("rgp:resTime", _timestamp(self.restored_at)),
            ("rgp:resReason", self.restore_reason),
            *(("rgp:statement", statement) for statement in self.statements),
            ("rgp:other", self.other),
        ]
        for tag, text in fields:
            ET.SubElement(report, tag).text = text
        return restore