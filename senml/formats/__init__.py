"""
# Formats

Each encoding of a pack is a Codec registered for one of the values of
Format: the codec converts a Pack into bytes (encode()) and back (decode()).

decode() validates the pack it produced, unless the codec (or the caller,
via the "validate" option) says otherwise: JSONLINE doesn't by default since
its lines are supposed to be checked one by one by whoever produced them.
"""
import dataclasses
import logging
import time
from typing import Callable, Dict, Optional, Type

from ..core import Pack
from ..enum import Format
from ..exceptions import InvalidPack, UnknownFormat, ValidationException
from ..streams import Stream
from ..validation import validate


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Options:
    '''Knobs of the codecs; each codec looks only at the ones it needs.'''
    pretty_print: bool = False
    topic: str = 'senml'
    with_header: bool = False
    validate: Optional[bool] = None
    clock: Callable[[], float] = time.time

    @classmethod
    def from_kwargs(cls, **kwargs) -> "Options":
        names = {_.name for _ in dataclasses.fields(cls)}
        unknown = set(kwargs) - names
        if unknown:
            raise TypeError(f'unknown option(s): {", ".join(sorted(unknown))}')

        options = cls(**kwargs)
        if not options.topic:
            options.topic = 'senml'

        return options


class Codec:
    '''Base class to subclass from'''
    format: Format = None
    validate_on_decode = True

    def __init__(self, options: Options = None):
        self.options = options or Options()
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")

    def encode(self, pack: Pack) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.encode() not implemented")

    def decode(self, data: bytes) -> Pack:
        raise NotImplementedError(f"method {self.__class__.__name__}.decode() not implemented")

    def should_validate(self) -> bool:
        if self.options.validate is None:
            return self.validate_on_decode

        if not self.options.validate and self.validate_on_decode:
            self.logger.warning('validation disabled for %s', self.format.name)

        return self.options.validate


_registry: Dict[Format, Type[Codec]] = {}


def register(format: Format):
    '''Decorator to register a Codec for the given format'''
    def _register(cls: Type[Codec]) -> Type[Codec]:
        if format in _registry:
            raise ValueError(f'a codec for {format.name} is already registered')
        cls.format = format
        _registry[format] = cls
        return cls

    return _register


def get_codec(format: Format, **options) -> Codec:
    try:
        cls = _registry[Format(format)]
    except (KeyError, ValueError) as e:
        raise UnknownFormat(f'no codec registered for format {format!r}') from e

    return cls(Options.from_kwargs(**options))


def decode(data: bytes, format: Format, **options) -> Pack:
    """Takes a SenML message in the given format, parses it and decodes it
    into the returned Pack."""
    codec = get_codec(format, **options)
    logger.debug('decoding %d bytes as %s', len(data), codec.format.name)

    pack = codec.decode(data)

    if codec.should_validate():
        try:
            validate(pack)
        except ValidationException as e:
            raise InvalidPack(f'invalid SenML Pack: {e}') from e

    return pack


def encode(pack: Pack, format: Format, **options) -> bytes:
    """Takes a SenML pack and encodes it using the given format."""
    codec = get_codec(format, **options)
    logger.debug('encoding %d record(s) as %s', len(pack), codec.format.name)

    return codec.encode(pack)


def load(source, format: Format, **options) -> Pack:
    '''Like decode() but reading from a path, bytes or a binary file object'''
    with Stream(source) as stream:
        data = stream.read_all()

    return decode(data, format, **options)


def dump(pack: Pack, target, format: Format, **options) -> None:
    '''Like encode() but writing to a path or a binary file object'''
    data = encode(pack, format, **options)

    with Stream(target, flags='w') as stream:
        stream.write(data)


# the codecs register themselves at import time
from . import json, jsonline, xml, csv, linep, cbor, mpack  # noqa: E402,F401
