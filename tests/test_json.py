import pytest

from senml import Record, Format, decode, encode
from senml.exceptions import ParseException, InvalidPack, EncodeException


REFERENCE_JSON = (
    b'[{"bn":"dev123","bt":-45.67,"bu":"degC","bver":5,"n":"temp","u":"degC","t":-1,"ut":10,"v":22.1,"s":0},'
    b'{"n":"room","t":-1,"vs":"kitchen"},'
    b'{"n":"data","vd":"abc"},'
    b'{"n":"ok","vb":true}]'
)


def test_encode_json(reference_pack):
    assert encode(reference_pack, Format.JSON) == REFERENCE_JSON


def test_encode_json_pretty(reference_pack):
    data = encode(reference_pack[2:], Format.JSON, pretty_print=True)

    assert data == b'[\n  {"n":"data","vd":"abc"},\n  {"n":"ok","vb":true}\n]\n'


def test_decode_json(reference_pack):
    assert decode(REFERENCE_JSON, Format.JSON) == reference_pack


def test_decode_json_not_an_array():
    with pytest.raises(ParseException):
        decode(b'{"n":"a","v":1}', Format.JSON)

    with pytest.raises(ParseException):
        decode(b'[1, 2]', Format.JSON)


def test_decode_json_wrong_type():
    with pytest.raises(ParseException):
        decode(b'[{"n":"a","v":"1"}]', Format.JSON)


def test_encode_json_nan():
    with pytest.raises(EncodeException):
        encode([Record(name='a', value=float('nan'))], Format.JSON)


def test_encode_jsonline(absolute_pack):
    """Only the records with a numeric value are written"""
    data = encode(absolute_pack.normalize(now=0), Format.JSONLINE)

    assert data == b'{"bver":5,"n":"dev123temp","u":"degC","t":946684799,"ut":10,"v":22.1,"s":0}\n'


def test_decode_jsonline():
    data = (
        b'{"n":"a","v":1}\n'
        b'\n'
        b'{}\r\n'
        b'{"n":"b","vs":"on"}\r\n'
    )

    pack = decode(data, Format.JSONLINE)

    assert pack == [Record(name='a', value=1), Record(name='b', string_value='on')]


def test_decode_jsonline_malformed():
    with pytest.raises(ParseException) as excinfo:
        decode(b'{"n":"a","v":1}\n{"n":"b",\n', Format.JSONLINE)

    assert 'line 2' in str(excinfo.value)


def test_decode_jsonline_validation_is_optional():
    data = b'{"n":"-a","v":1}\n'

    assert decode(data, Format.JSONLINE) == [Record(name='-a', value=1)]

    with pytest.raises(InvalidPack):
        decode(data, Format.JSONLINE, validate=True)


@pytest.mark.parametrize('data', [
    b'[{"n":"a","v":NaN}]',
    b'[{"n":"a","v":Infinity}]',
    b'[{"n":"a","v":-Infinity}]',
    b'[{"n":"a","v":1e400}]',
    b'[{"n":"a","v":1' + b'0' * 400 + b'}]',
])
def test_decode_json_non_finite_numbers(data):
    """Not JSON: refused while parsing and not later by the encoder"""
    with pytest.raises(ParseException):
        decode(data, Format.JSON)

    with pytest.raises(ParseException):
        decode(data, Format.JSON, validate=False)


def test_decode_jsonline_non_finite_numbers():
    with pytest.raises(ParseException):
        decode(b'{"n":"a","v":NaN}\n', Format.JSONLINE)
