import pytest

from senml import Record, Format, decode, encode
from senml.exceptions import ParseException


REFERENCE_XML = (
    b'<sensml xmlns="urn:ietf:params:xml:ns:senml">'
    b'<senml bn="dev123" bt="-45.67" bu="degC" bver="5" n="temp" u="degC" t="-1" ut="10" v="22.1" s="0"></senml>'
    b'<senml n="room" t="-1" vs="kitchen"></senml>'
    b'<senml n="data" vd="abc"></senml>'
    b'<senml n="ok" vb="true"></senml>'
    b'</sensml>'
)


def test_encode_xml(reference_pack):
    assert encode(reference_pack, Format.XML) == REFERENCE_XML


def test_encode_xml_pretty(reference_pack):
    data = encode(reference_pack[3:], Format.XML, pretty_print=True)

    assert data == (
        b'<sensml xmlns="urn:ietf:params:xml:ns:senml">\n'
        b'  <senml n="ok" vb="true"></senml>\n'
        b'</sensml>'
    )


def test_decode_xml(reference_pack):
    assert decode(REFERENCE_XML, Format.XML) == reference_pack


def test_decode_xml_self_closing():
    data = b'<?xml version="1.0"?><sensml xmlns="urn:ietf:params:xml:ns:senml"><senml n="a" v="1e3"/></sensml>'

    assert decode(data, Format.XML) == [Record(name='a', value=1000)]


def test_decode_xml_ignores_other_elements():
    data = b'<sensml><comment/><senml n="a" vb="false"/></sensml>'

    assert decode(data, Format.XML) == [Record(name='a', bool_value=False)]


def test_decode_xml_wrong_root():
    with pytest.raises(ParseException):
        decode(b'<pack><senml n="a" v="1"/></pack>', Format.XML)


def test_decode_xml_malformed():
    with pytest.raises(ParseException):
        decode(b'<sensml><senml n="a" v="1"></sensml>', Format.XML)

    with pytest.raises(ParseException):
        decode(b'<sensml><senml n="a" v="one"/></sensml>', Format.XML)


def test_encode_xml_invalid_characters():
    """Characters XML can't hold become U+FFFD, the output is still parseable"""
    pack = [Record(name='a', unit='\x00C', string_value='x\x1by\ud800')]

    data = encode(pack, Format.XML)

    assert data == (
        b'<sensml xmlns="urn:ietf:params:xml:ns:senml">'
        b'<senml n="a" u="\xef\xbf\xbdC" vs="x\xef\xbf\xbdy\xef\xbf\xbd"></senml>'
        b'</sensml>'
    )
    assert decode(data, Format.XML) == [Record(name='a', unit='\ufffdC', string_value='x\ufffdy\ufffd')]
