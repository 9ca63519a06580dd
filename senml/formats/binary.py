'''
Shared part of the binary formats: a record becomes a map having as keys
the integer labels of RFC 8428 (see senml.enum.Label); the byte level
encoding is left to the generic CBOR/MessagePack libraries.

Empty fields are omitted so each map has only the entries needed.
'''
from typing import Any, Dict, List, Mapping

from ..core import Record, Pack
from ..exceptions import ParseException


def record_to_map(record: Record) -> Dict[int, Any]:
    return {
        int(field.label): field.to_wire(value) for field, value in record.get_fields() if not field.is_empty(value)
    }


def map_to_record(data: Mapping) -> Record:
    if not isinstance(data, Mapping):
        raise ParseException(f'expected a map for the record, not {type(data).__name__}')

    record = Record()
    for label, value in data.items():
        # bool is an int but never a label
        if isinstance(label, bool) or not isinstance(label, int):
            raise ParseException(f'unexpected key {label!r}: labels must be integers')

        field = Record._meta.by_label.get(label)
        if field is None:
            continue
        setattr(record, field.name, field.from_wire(value))

    return record


def pack_to_maps(pack: Pack) -> List[Dict[int, Any]]:
    return [record_to_map(_) for _ in pack]


def maps_to_pack(data) -> Pack:
    if not isinstance(data, list):
        raise ParseException(f'expected an array of records, not {type(data).__name__}')

    return Pack(map_to_record(_) for _ in data)
