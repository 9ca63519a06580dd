'''
# CSV

One row per record of the normalized pack, with a fixed set of columns so
that records with different kinds of value fit in the same table:

    Time,Update Time,Name,Unit,Value,String Value,Boolean Value,Data Value,Sum

Base fields can't be represented, for this reason the pack is normalized
before being written; the header is optional.
'''
import csv
import io
import time
from typing import Callable, List, TextIO

from . import Codec, register
from ..core import Record, Pack
from ..enum import Format
from ..exceptions import ParseException, HeaderMismatch
from ..normalize import normalize


CSV_HEADER = 'Time,Update Time,Name,Unit,Value,String Value,Boolean Value,Data Value,Sum'

# the record's field for each column of CSV_HEADER
COLUMNS = (
    'time',
    'update_time',
    'name',
    'unit',
    'value',
    'string_value',
    'bool_value',
    'data_value',
    'sum',
)


def record_to_row(record: Record) -> List[str]:
    row = []
    for name in COLUMNS:
        field = Record.get_field(name)
        value = getattr(record, name)
        row.append('' if value is None else field.to_text(value))

    return row


def row_to_record(row: List[str]) -> Record:
    if len(row) != len(COLUMNS):
        raise ParseException(f'wrong number of fields: {len(row)} instead of {len(COLUMNS)}')

    record = Record()
    for name, cell in zip(COLUMNS, row):
        field = Record.get_field(name)
        # an empty cell is an absent value, mandatory numbers must be there
        if cell == '' and (field.optional or field.zero == ''):
            continue
        setattr(record, name, field.from_text(cell))

    return record


def write_csv(pack: Pack, fp: TextIO, with_header: bool = False, clock: Callable[[], float] = time.time) -> None:
    '''Write the normalized pack to a text file object'''
    writer = csv.writer(fp, lineterminator='\n')

    if with_header:
        writer.writerow(CSV_HEADER.split(','))

    for record in normalize(pack, clock=clock):
        writer.writerow(record_to_row(record))


def read_csv(fp: TextIO, with_header: bool = False) -> Pack:
    '''Read a pack from a text file object; any malformed cell aborts the
    whole reading.'''
    reader = csv.reader(fp, strict=True)
    pack = Pack()

    try:
        if with_header:
            row = next(reader, None)
            if row is None:
                raise HeaderMismatch('missing header or no input')
            joined = ','.join(row)
            if joined != CSV_HEADER:
                raise HeaderMismatch(f'unexpected header: {joined}. Expected: {CSV_HEADER}')

        for row in reader:
            if not row:
                continue
            try:
                pack.append(row_to_record(row))
            except ParseException as e:
                raise ParseException(f'line {reader.line_num}: {e}') from e
    except csv.Error as e:
        raise ParseException(f'error parsing CSV: {e}') from e

    return pack


@register(Format.CSV)
class CSVCodec(Codec):

    def encode(self, pack: Pack) -> bytes:
        buf = io.StringIO()
        write_csv(pack, buf, with_header=self.options.with_header, clock=self.options.clock)
        return buf.getvalue().encode('utf-8')

    def decode(self, data: bytes) -> Pack:
        try:
            text = data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ParseException(f'error parsing CSV: {e}') from e

        return read_csv(io.StringIO(text, newline=''), with_header=self.options.with_header)
