"""The Verisign sync (consolidate) extension for domain updates."""

from __future__ import annotations

import datetime as dt
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from eppkit.extensions.namestore import NameStore
from eppkit.request import Extension

XMLNS = "http://www.verisign.com/epp/sync-1.0"

_MONTH_MAX_LEN = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _format_offset(offset: dt.timedelta) -> str:
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02}:{minutes:02}"
    if seconds:
        text += f":{seconds:02}"
    return text


@dataclass(frozen=True)
class GMonthDay:
    """An XML Schema gMonthDay value: a recurring month and day."""

    month: int
    day: int
    timezone: dt.tzinfo | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError("Month value within GMonthDay should lie between 1 and 12")
        if not 1 <= self.day <= 31:
            raise ValueError("Day value within GMonthDay should lie between 1 and 31")
        if self.day > _MONTH_MAX_LEN[self.month - 1]:
            raise ValueError("Day value within GMonthDay is to big for specified month")
        if self.timezone is not None and self.timezone.utcoffset(None) is None:
            raise ValueError("GMonthDay timezone must have a fixed offset")

    def __str__(self) -> str:
        text = f"--{self.month:02}-{self.day:02}"
        if self.timezone is not None:
            text += _format_offset(self.timezone.utcoffset(None))
        return text


@dataclass(frozen=True)
class Update(Extension):
    """Sets the month and day on which a domain expires."""

    expiration: GMonthDay

    def to_element(self) -> ET.Element:
        """Return the <sync:update> element."""
        element = ET.Element("sync:update", {"xmlns:sync": XMLNS})
        ET.SubElement(element, "sync:expMonthDay").text = str(self.expiration)
        return element

    def elements(self) -> list[ET.Element]:
        return [self.to_element()]


@dataclass(frozen=True)
class UpdateWithNameStore(Extension):
    """A sync update together with the NameStore sub-product."""

    expiration: GMonthDay
    subproduct: str

    def elements(self) -> list[ET.Element]:
        return [
            Update(self.expiration).to_element(),
            NameStore(self.subproduct).to_element(),
        ]