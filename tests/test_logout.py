from eppkit.logout import Logout
from eppkit.request import serialize_command
from eppkit.response import ResultCode, parse_response


def test_command():
    expected = (
        '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\r\n'
        '<epp xmlns="urn:ietf:params:xml:ns:epp-1.0"><command><logout/>'
        "<clTRID>cltrid:1626454866</clTRID></command></epp>"
    )
    assert serialize_command(Logout(), "cltrid:1626454866") == expected


def test_response():
    text = (
        '<epp xmlns="urn:ietf:params:xml:ns:epp-1.0"><response><result code="1500">'
        "<msg>Command completed successfully; ending session</msg></result>"
        "<trID><clTRID>cltrid:1626454866</clTRID>"
        "<svTRID>RO-6879-1627224678242975</svTRID></trID></response></epp>"
    )
    response = parse_response(text)
    assert response.result.code == ResultCode.COMMAND_COMPLETED_SUCCESSFULLY_ENDING_SESSION
    assert response.result.code.is_success()
    assert response.result.message == "Command completed successfully; ending session"
    assert response.tr_ids.client_tr_id == "cltrid:1626454866"
    assert response.tr_ids.server_tr_id == "RO-6879-1627224678242975"