'''
# CBOR

Spec for CBOR is at <https://www.rfc-editor.org/rfc/rfc8949>, the
representation of the pack is at section 6 of RFC 8428.
'''
import cbor2

from . import Codec, register
from .binary import pack_to_maps, maps_to_pack
from ..core import Pack
from ..enum import Format
from ..exceptions import ParseException, EncodeException


@register(Format.CBOR)
class CBORCodec(Codec):

    def encode(self, pack: Pack) -> bytes:
        try:
            return cbor2.dumps(pack_to_maps(pack))
        except cbor2.CBOREncodeError as e:
            raise EncodeException(f'error encoding CBOR: {e}') from e

    def decode(self, data: bytes) -> Pack:
        try:
            maps = cbor2.loads(data)
        except cbor2.CBORDecodeError as e:
            raise ParseException(f'error parsing CBOR: {e}') from e

        return maps_to_pack(maps)
