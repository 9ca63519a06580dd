'''
# JSON Lines

One record per line, each line a JSON object on its own.
'''
from . import Codec, register
from .json import dumps_record, loads_record, loads
from ..core import Pack
from ..enum import Format
from ..exceptions import ParseException


# lines not longer than this are noise (blank lines, "\r", "{}", ...)
MIN_LINE_LENGTH = 6


@register(Format.JSONLINE)
class JSONLineCodec(Codec):
    validate_on_decode = False

    def encode(self, pack: Pack) -> bytes:
        lines = []
        for record in pack:
            if record.value is None:
                self.logger.debug('skipping %r: no numeric value', record)
                continue
            lines.append(dumps_record(record) + '\n')

        return ''.join(lines).encode('utf-8')

    def decode(self, data: bytes) -> Pack:
        pack = Pack()
        for idx, line in enumerate(data.split(b'\n')):
            if len(line) < MIN_LINE_LENGTH:
                continue

            try:
                pack.append(loads_record(loads(line)))
            except ParseException as e:
                raise ParseException(f'error parsing JSON line {idx + 1}: {e}') from e

        return pack
