"""
# SenML: Sensor Measurement Lists (RFC 8428)

A measurement is a Record, a sequence of records is a Pack; the records at
the beginning of a pack can define "base" values (name, time, unit and
version) that apply to the records that follow.

Three operations are defined on a pack

 1. validate(): check the pack is well formed (names, exactly one value,
    a single version).

 2. normalize(): build a new pack where every record is self-contained:
    base values resolved and times absolute.

 3. encode()/decode(): convert the pack to/from one of the formats listed
    in Format (JSON, XML, CBOR, CSV, MPACK, LINEP, JSONLINE).

For example

    pack = decode(b'[{"bn":"dev123/","n":"temp","v":22.1}]', Format.JSON)
    encode(pack.normalize(now=0), Format.LINEP)

"""
from .core import Record, Pack
from .enum import Format, Label
from .names import validate_name
from .normalize import normalize
from .validation import validate
from .formats import Options, decode, encode, load, dump

__all__ = [
    "Record", "Pack", "Format", "Label", "Options",
    "validate_name", "validate", "normalize",
    "decode", "encode", "load", "dump",
]
