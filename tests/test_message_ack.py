from eppkit.message.ack import MessageAck
from eppkit.request import serialize_command
from eppkit.response import ResultCode, parse_response

CLTRID = "cltrid:1626454866"
SVTRID = "RO-6879-1627224678242975"
SUCCESS_MSG = "Command completed successfully"
HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'


def test_command():
    expected = (
        HEADER
        + "\r\n"
        + '<epp xmlns="urn:ietf:params:xml:ns:epp-1.0"><command>'
        + '<poll op="ack" msgID="12345"/>'
        + f"<clTRID>{CLTRID}</clTRID></command></epp>"
    )
    assert serialize_command(MessageAck("12345"), CLTRID) == expected


def test_response():
    text = (
        HEADER
        + '<epp xmlns="urn:ietf:params:xml:ns:epp-1.0"><response>'
        + f'<result code="1000"><msg>{SUCCESS_MSG}</msg></result>'
        + '<msgQ count="4" id="12345"/>'
        + f"<trID><svTRID>{SVTRID}</svTRID></trID>"
        + "</response></epp>"
    )
    rsp = parse_response(text)
    assert rsp.result.code == ResultCode.COMMAND_COMPLETED_SUCCESSFULLY
    assert rsp.result.message == SUCCESS_MSG
    assert rsp.message_queue.count == 4
    assert rsp.message_queue.id == "12345"
    assert rsp.tr_ids.server_tr_id == SVTRID
    assert rsp.tr_ids.client_tr_id is None