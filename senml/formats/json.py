'''
# JSON

The pack is an array of objects, each one keyed by the short names of
RFC 8428 (bn, bt, n, v, ...).
'''
import json
import math

from . import Codec, register
from ..core import Record, Pack
from ..enum import Format
from ..exceptions import ParseException, EncodeException


COMPACT_SEPARATORS = (',', ':')


def dumps_record(record: Record) -> str:
    try:
        return json.dumps(record.to_dict(), separators=COMPACT_SEPARATORS, ensure_ascii=False, allow_nan=False)
    except ValueError as e:
        raise EncodeException(f'cannot encode {record!r} as JSON: {e}') from e


def loads_record(data) -> Record:
    if not isinstance(data, dict):
        raise ParseException(f'expected a JSON object for the record, not {type(data).__name__}')

    return Record.from_dict(data)


def _reject_constant(name):
    raise ValueError(f'\'{name}\' is not a valid JSON number')


def _parse_float(text):
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f'number {text} is out of range')
    return value


def loads(data: bytes):
    try:
        return json.loads(data, parse_constant=_reject_constant, parse_float=_parse_float)
    except ValueError as e:  # also UnicodeDecodeError
        raise ParseException(f'error parsing JSON: {e}') from e


@register(Format.JSON)
class JSONCodec(Codec):

    def encode(self, pack: Pack) -> bytes:
        records = [dumps_record(_) for _ in pack]

        if self.options.pretty_print:
            text = '[\n  %s\n]\n' % ',\n  '.join(records)
        else:
            text = '[%s]' % ','.join(records)

        return text.encode('utf-8')

    def decode(self, data: bytes) -> Pack:
        records = loads(data)

        if not isinstance(records, list):
            raise ParseException(f'expected a JSON array, not {type(records).__name__}')

        return Pack(loads_record(_) for _ in records)
