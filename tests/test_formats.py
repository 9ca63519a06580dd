import io
import logging

import pytest

from senml import Record, Pack, Format, Options, decode, encode, load, dump
from senml.formats import get_codec
from senml.exceptions import (
    InvalidPack,
    UnknownFormat,
    TooManyValues,
    ParseException,
)


ROUND_TRIP_FORMATS = [Format.JSON, Format.XML, Format.CBOR, Format.MPACK]


@pytest.mark.parametrize('format', ROUND_TRIP_FORMATS)
def test_round_trip(format, reference_pack):
    data = encode(reference_pack, format)
    pack = decode(data, format)

    assert pack == reference_pack
    pack.validate()


@pytest.mark.parametrize('format', ROUND_TRIP_FORMATS)
def test_round_trip_pretty(format, reference_pack):
    data = reference_pack.encode(format, pretty_print=True)

    assert Pack.decode(data, format) == reference_pack


def test_all_formats_are_registered():
    for format in Format:
        assert get_codec(format).format == format


def test_format_by_value():
    assert get_codec(1).format == Format.JSON


def test_unknown_format():
    with pytest.raises(UnknownFormat):
        encode(Pack(), 42)

    # it's also a programming error
    with pytest.raises(ValueError):
        decode(b'', 'yaml')


def test_unknown_option():
    with pytest.raises(TypeError):
        encode(Pack(), Format.JSON, pretty=True)


def test_options_defaults():
    options = Options.from_kwargs(topic='')

    assert options.topic == 'senml'
    assert options.pretty_print is False
    assert options.with_header is False
    assert options.validate is None


def test_decode_invalid_pack():
    data = b'[{"n":"a","v":1,"vs":"one"}]'

    with pytest.raises(InvalidPack) as excinfo:
        decode(data, Format.JSON)

    assert isinstance(excinfo.value.__cause__, TooManyValues)


def test_decode_without_validation(caplog):
    data = b'[{"n":"a","v":1,"vs":"one"}]'

    with caplog.at_level(logging.WARNING):
        pack = decode(data, Format.JSON, validate=False)

    assert pack == [Record(name='a', value=1, string_value='one')]
    assert 'validation disabled' in caplog.text


def test_decode_malformed():
    with pytest.raises(ParseException):
        decode(b'[{"n":', Format.JSON)


def test_dump_load_path(tmp_path, reference_pack):
    path = tmp_path / 'pack.cbor'

    dump(reference_pack, path, Format.CBOR)

    assert path.stat().st_size > 0
    assert load(path, Format.CBOR) == reference_pack
    assert load(str(path), Format.CBOR) == reference_pack


def test_dump_load_fileobj(reference_pack):
    buf = io.BytesIO()

    dump(reference_pack, buf, Format.JSON)

    assert not buf.closed
    assert load(buf.getvalue(), Format.JSON) == reference_pack

    buf.seek(0)

    assert load(buf, Format.JSON) == reference_pack


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / 'missing.json', Format.JSON)
