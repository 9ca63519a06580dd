'''
# MessagePack

Spec for MessagePack is at <https://github.com/msgpack/msgpack/>, the map
keys are the same integer labels used for CBOR.
'''
import msgpack

from . import Codec, register
from .binary import pack_to_maps, maps_to_pack
from ..core import Pack
from ..enum import Format
from ..exceptions import ParseException, EncodeException


@register(Format.MPACK)
class MPACKCodec(Codec):

    def encode(self, pack: Pack) -> bytes:
        try:
            return msgpack.packb(pack_to_maps(pack), use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as e:
            raise EncodeException(f'error encoding MPACK: {e}') from e

    def decode(self, data: bytes) -> Pack:
        try:
            maps = msgpack.unpackb(data, raw=False, strict_map_key=False)
        except (ValueError, TypeError, msgpack.UnpackException) as e:
            raise ParseException(f'error parsing MPACK: {e}') from e

        return maps_to_pack(maps)
