"""EPP response documents and result codes."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Callable

from eppkit.xmlcodec import (
    XmlError,
    child,
    child_text,
    deserialize,
    local_name,
    parse_datetime,
)


class ResultCode(IntEnum):
    """Response codes as enumerated in section 3 of RFC 5730."""

    COMMAND_COMPLETED_SUCCESSFULLY = 1000
    COMMAND_COMPLETED_SUCCESSFULLY_ACTION_PENDING = 1001
    COMMAND_COMPLETED_SUCCESSFULLY_NO_MESSAGES = 1300
    COMMAND_COMPLETED_SUCCESSFULLY_ACK_TO_DEQUEUE = 1301
    COMMAND_COMPLETED_SUCCESSFULLY_ENDING_SESSION = 1500
    UNKNOWN_COMMAND = 2000
    COMMAND_SYNTAX_ERROR = 2001
    COMMAND_USE_ERROR = 2002
    REQUIRED_PARAMETER_MISSING = 2003
    PARAMETER_VALUE_RANGE_ERROR = 2004
    PARAMETER_VALUE_SYNTAX_ERROR = 2005
    UNIMPLEMENTED_PROTOCOL_VERSION = 2100
    UNIMPLEMENTED_COMMAND = 2101
    UNIMPLEMENTED_OPTION = 2102
    UNIMPLEMENTED_EXTENSION = 2103
    BILLING_FAILURE = 2104
    OBJECT_IS_NOT_ELIGIBLE_FOR_RENEWAL = 2105
    OBJECT_IS_NOT_ELIGIBLE_FOR_TRANSFER = 2106
    AUTHENTICATION_ERROR = 2200
    AUTHORIZATION_ERROR = 2201
    INVALID_AUTHORIZATION_INFORMATION = 2202
    OBJECT_PENDING_TRANSFER = 2300
    OBJECT_NOT_PENDING_TRANSFER = 2301
    OBJECT_EXISTS = 2302
    OBJECT_DOES_NOT_EXIST = 2303
    OBJECT_STATUS_PROHIBITS_OPERATION = 2304
    OBJECT_ASSOCIATION_PROHIBITS_OPERATION = 2305
    PARAMETER_VALUE_POLICY_ERROR = 2306
    UNIMPLEMENTED_OBJECT_SERVICE = 2307
    DATA_MANAGEMENT_POLICY_VIOLATION = 2308
    COMMAND_FAILED = 2400
    COMMAND_FAILED_SERVER_CLOSING_CONNECTION = 2500
    AUTHENTICATION_ERROR_SERVER_CLOSING_CONNECTION = 2501
    SESSION_LIMIT_EXCEEDED_SERVER_CLOSING_CONNECTION = 2502

    @classmethod
    def from_code(cls, code: int | str) -> ResultCode | None:
        """Look up a code; return None if it is not a known result code."""
        try:
            return cls(int(code))
        except ValueError:
            return None

    def is_success(self) -> bool:
        """True for the 1xxx completion codes."""
        return 1000 <= self.value < 2000


@dataclass(frozen=True)
class ExtValue:
    """The <extValue> section of a result."""

    reason: str


@dataclass(frozen=True)
class EppResult:
    """The <result> section of a response."""

    code: ResultCode
    message: str
    ext_value: ExtValue | None = None


@dataclass(frozen=True)
class ResponseTRID:
    """The <trID> section of a response."""

    server_tr_id: str
    client_tr_id: str | None = None


@dataclass(frozen=True)
class MessageQueue:
    """The <msgQ> section of a response."""

    count: int
    id: str
    date: datetime | None = None
    message: str | None = None


@dataclass(frozen=True)
class Response:
    """A full <response> with optional message queue, data and extension."""

    result: EppResult
    tr_ids: ResponseTRID
    message_queue: MessageQueue | None = None
    res_data: Any = None
    extension: Any = None


@dataclass(frozen=True)
class ResponseStatus:
    """A <response> reduced to its result and transaction ids."""

    result: EppResult
    tr_ids: ResponseTRID


Parser = Callable[[ET.Element], Any]


def _required(element: ET.Element, name: str) -> ET.Element:
    found = child(element, name)
    if found is None:
        raise XmlError(f"missing <{name}> in <{local_name(element.tag)}>")
    return found


def _required_text(element: ET.Element, name: str) -> str:
    return (_required(element, name).text or "").strip()


def _response_element(text: str) -> ET.Element:
    root = deserialize(text)
    if local_name(root.tag) != "epp":
        raise XmlError(f"expected <epp> root, found <{local_name(root.tag)}>")
    return _required(root, "response")


def _parse_result(response: ET.Element) -> EppResult:
    result = _required(response, "result")
    raw = result.get("code")
    code = ResultCode.from_code(raw) if raw is not None else None
    if code is None:
        raise XmlError(f"unexpected result code: {raw!r}")
    ext = child(result, "extValue")
    ext_value = None
    if ext is not None:
        _required(ext, "value")
        ext_value = ExtValue(reason=_required_text(ext, "reason"))
    return EppResult(code=code, message=_required_text(result, "msg"), ext_value=ext_value)


def _parse_tr_ids(response: ET.Element) -> ResponseTRID:
    tr_id = _required(response, "trID")
    return ResponseTRID(
        server_tr_id=_required_text(tr_id, "svTRID"),
        client_tr_id=child_text(tr_id, "clTRID"),
    )


def _parse_message_queue(response: ET.Element) -> MessageQueue | None:
    queue = child(response, "msgQ")
    if queue is None:
        return None
    count, message_id = queue.get("count"), queue.get("id")
    if count is None or message_id is None:
        raise XmlError("<msgQ> requires count and id attributes")
    try:
        count_value = int(count)
    except ValueError as exc:
        raise XmlError(f"invalid message count: {count!r}") from exc
    if count_value < 0:
        raise XmlError(f"invalid message count: {count!r}")
    date_text = child_text(queue, "qDate")
    return MessageQueue(
        count=count_value,
        id=message_id,
        date=parse_datetime(date_text) if date_text is not None else None,
        message=child_text(queue, "msg"),
    )


def parse_response(
    text: str, res_data: Parser | None = None, extension: Parser | None = None
) -> Response:
    """Parse a response; the parsers receive the <resData> and <extension> elements."""
    response = _response_element(text)
    data_element = child(response, "resData")
    ext_element = child(response, "extension")
    return Response(
        result=_parse_result(response),
        tr_ids=_parse_tr_ids(response),
        message_queue=_parse_message_queue(response),
        res_data=res_data(data_element) if res_data and data_element is not None else None,
        extension=extension(ext_element) if extension and ext_element is not None else None,
    )


def parse_status(text: str) -> ResponseStatus:
    """Parse only the result and transaction ids of a response."""
    response = _response_element(text)
    return ResponseStatus(result=_parse_result(response), tr_ids=_parse_tr_ids(response))