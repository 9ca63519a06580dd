'''
# Line Protocol

The InfluxDB line protocol, restricted to what a numeric record needs:

    <topic>,n=<name>,u=<unit> v=<value> <time in nanoseconds>

Records without a numeric value can't be represented and are skipped; the
pack is written as it is, so normalize it first if it uses base fields.
'''
import re

from . import Codec, register
from ..core import Record, Pack
from ..enum import Format
from ..exceptions import ParseException, EncodeException
from ..utils import format_float


LINE = re.compile(
    r'''
    (?P<topic>[^,\s]+)
    ,n=(?P<name>[^,\s]*)
    ,u=(?P<unit>[^,\s]*)
    \s+v=(?P<value>\S+)
    \s+(?P<ts>-?\d+)
    ''',
    re.VERBOSE,
)


def record_to_line(record: Record, topic: str) -> str:
    return '%s,n=%s,u=%s v=%s %d\n' % (
        topic,
        record.name,
        record.unit,
        format_float(record.value),
        int(record.time * 1.0e9),
    )


def line_to_record(line: str) -> Record:
    match = LINE.fullmatch(line.strip())
    if not match:
        raise ParseException(f'malformed line \'{line}\'')

    try:
        value = float(match.group('value'))
    except ValueError as e:
        raise ParseException(f'invalid value \'{match.group("value")}\'') from e

    return Record(
        name=match.group('name'),
        unit=match.group('unit'),
        value=value,
        time=int(match.group('ts')) / 1.0e9,
    )


@register(Format.LINEP)
class LinePCodec(Codec):

    def encode(self, pack: Pack) -> bytes:
        lines = []
        for record in pack:
            if record.value is None:
                self.logger.debug('skipping %r: no numeric value', record)
                continue
            try:
                lines.append(record_to_line(record, self.options.topic))
            except (ValueError, OverflowError) as e:
                raise EncodeException(f'cannot encode {record!r} as line protocol: {e}') from e

        return ''.join(lines).encode('utf-8')

    def decode(self, data: bytes) -> Pack:
        try:
            text = data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ParseException(f'error parsing line protocol: {e}') from e

        pack = Pack()
        for idx, line in enumerate(text.splitlines()):
            if not line.strip():
                continue
            try:
                pack.append(line_to_record(line))
            except ParseException as e:
                raise ParseException(f'line {idx + 1}: {e}') from e

        return pack
