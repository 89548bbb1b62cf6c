import xml.etree.ElementTree as ET

import pytest

from eppkit.extensions.namestore import XMLNS, NameStore
from eppkit.host.check import HostCheck, HostCheckResponse
from eppkit.request import serialize_command
from eppkit.response import ResultCode, parse_response
from eppkit.xmlcodec import XmlError, deserialize

CLTRID = "cltrid:1626454866"
SVTRID = "RO-6879-1627224678242975"


def _response(extension: str) -> str:
    return (
        '<epp xmlns="urn:ietf:params:xml:ns:epp-1.0"><response>'
        '<result code="1000"><msg>Command completed successfully</msg></result>'
        '<resData><host:chkData xmlns:host="urn:ietf:params:xml:ns:host-1.0">'
        '<host:cd><host:name avail="1">example1.com</host:name></host:cd>'
        "</host:chkData></resData>"
        f"<extension>{extension}</extension>"
        f"<trID><clTRID>{CLTRID}</clTRID><svTRID>{SVTRID}</svTRID></trID>"
        "</response></epp>"
    )


def test_command():
    command = HostCheck(["example1.com", "example2.com", "example3.com"])
    text = serialize_command(command, CLTRID, NameStore("com"))
    expected = (
        '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\r\n'
        '<epp xmlns="urn:ietf:params:xml:ns:epp-1.0"><command><check>'
        '<host:check xmlns:host="urn:ietf:params:xml:ns:host-1.0">'
        "<host:name>example1.com</host:name><host:name>example2.com</host:name>"
        "<host:name>example3.com</host:name></host:check></check><extension>"
        '<namestoreExt:namestoreExt xmlns:namestoreExt="http://www.verisign-grs.com/epp/namestoreExt-1.1">'
        "<namestoreExt:subProduct>com</namestoreExt:subProduct>"
        "</namestoreExt:namestoreExt></extension>"
        f"<clTRID>{CLTRID}</clTRID></command></epp>"
    )
    assert text == expected


def test_response():
    ext = (
        f'<namestoreExt:namestoreExt xmlns:namestoreExt="{XMLNS}">'
        "<namestoreExt:subProduct>com</namestoreExt:subProduct>"
        "</namestoreExt:namestoreExt>"
    )
    response = parse_response(
        _response(ext),
        res_data=HostCheckResponse.from_element,
        extension=NameStore.from_element,
    )
    assert response.result.code is ResultCode.COMMAND_COMPLETED_SUCCESSFULLY
    assert response.extension.subproduct == "com"
    assert response.res_data.hosts[0].id == "example1.com"
    assert response.tr_ids.server_tr_id == SVTRID


def test_round_trip_through_element():
    original = NameStore("net")
    parsed = NameStore.from_element(deserialize(ET.tostring(original.to_element(), "unicode").replace(
        "xmlns:namestoreExt", "xmlns:namestoreExt", 1)))
    assert parsed == original


def test_elements_holds_single_extension():
    elements = NameStore("com").elements()
    assert len(elements) == 1
    assert elements[0].get("xmlns:namestoreExt") == XMLNS


def test_missing_namestore_raises():
    with pytest.raises(XmlError):
        NameStore.from_element(ET.Element("extension"))


def test_missing_subproduct_raises():
    extension = ET.Element("extension")
    ET.SubElement(extension, "namestoreExt")
    with pytest.raises(XmlError):
        NameStore.from_element(extension)