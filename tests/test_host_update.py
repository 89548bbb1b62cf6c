import ipaddress

import pytest

from eppkit.host.update import HostAddRemove, HostChangeInfo, HostUpdate
from eppkit.request import serialize_command
from eppkit.response import ResultCode, parse_response

CLTRID = "cltrid:1626454866"
SVTRID = "RO-6879-1627224678242975"
SUCCESS_MSG = "Command completed successfully"
HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'
HOST_NS = "urn:ietf:params:xml:ns:host-1.0"


def _command(body: str) -> str:
    return (
        HEADER
        + "\r\n"
        + '<epp xmlns="urn:ietf:params:xml:ns:epp-1.0"><command><update>'
        + f'<host:update xmlns:host="{HOST_NS}">'
        + body
        + f"</host:update></update><clTRID>{CLTRID}</clTRID></command></epp>"
    )


def test_command():
    add = HostAddRemove(addresses=[ipaddress.ip_address("2404:6800:4001:801::200e")])
    remove = HostAddRemove(statuses=["clientDeleteProhibited"])
    update = HostUpdate(
        "host1.eppdev-1.com",
        add=add,
        remove=remove,
        change_info=HostChangeInfo("host2.eppdev-1.com"),
    )
    expected = _command(
        "<host:name>host1.eppdev-1.com</host:name>"
        '<host:add><host:addr ip="v6">2404:6800:4001:801::200e</host:addr></host:add>'
        '<host:rem><host:status s="clientDeleteProhibited"/></host:rem>'
        "<host:chg><host:name>host2.eppdev-1.com</host:name></host:chg>"
    )
    assert serialize_command(update, CLTRID) == expected


def test_command_with_name_only():
    expected = _command("<host:name>ns1.eppdev-1.com</host:name>")
    assert serialize_command(HostUpdate("ns1.eppdev-1.com"), CLTRID) == expected


def test_addresses_given_as_text_are_parsed():
    change = HostAddRemove(addresses=["29.245.122.14"])
    assert change.addresses == (ipaddress.ip_address("29.245.122.14"),)


def test_invalid_address_is_rejected():
    with pytest.raises(ValueError):
        HostAddRemove(addresses=["bogus"])


def test_response():
    text = (
        HEADER
        + '<epp xmlns="urn:ietf:params:xml:ns:epp-1.0"><response>'
        + f'<result code="1000"><msg>{SUCCESS_MSG}</msg></result>'
        + f"<trID><clTRID>{CLTRID}</clTRID><svTRID>{SVTRID}</svTRID></trID>"
        + "</response></epp>"
    )
    rsp = parse_response(text)
    assert rsp.result.code == ResultCode.COMMAND_COMPLETED_SUCCESSFULLY
    assert rsp.result.message == SUCCESS_MSG
    assert rsp.tr_ids.client_tr_id == CLTRID
    assert rsp.tr_ids.server_tr_id == SVTRID