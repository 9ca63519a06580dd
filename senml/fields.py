"""
A Field describes one attribute of a Record: which python type it holds,
the key used by the textual formats and the integer label used by the
binary ones.

A field is either mandatory, and then it's absent from the wire when it
holds its zero value, or optional, and then None means absent and any
other value (zero included) is written out.
"""

from .meta import FieldBase
from .exceptions import ParseException
from .utils import format_float, format_bool, parse_bool


class Field(FieldBase):
    """Base class to subclass from"""
    zero = None

    def __init__(self, key, label=None, optional=False):
        super().__init__()
        self.name = None
        self.key = key
        self.label = label
        self.optional = optional
        self.default = None if optional else self.zero

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.key!r})>'

    def clean(self, value):
        '''Coerce the value to the python type of the field, raise TypeError
        when not possible.'''
        if value is None:
            if self.optional:
                return None
            raise TypeError(f'field \'{self.name}\' is not optional')

        return self._clean(value)

    def _clean(self, value):
        raise NotImplementedError(f"method {self.__class__.__name__}._clean() not implemented")

    def is_empty(self, value) -> bool:
        if self.optional:
            return value is None

        return value == self.zero

    def to_wire(self, value):
        '''Value as handed to the generic encoders (cbor2, msgpack).'''
        return value

    def to_json(self, value):
        return self.to_wire(value)

    def from_wire(self, value):
        try:
            return self.clean(value)
        except (TypeError, OverflowError) as e:
            raise ParseException(f'field \'{self.key}\' has the wrong type ({type(value).__name__})') from e

    def to_text(self, value) -> str:
        return str(value)

    def from_text(self, text: str):
        return text


class StringField(Field):
    zero = ''

    def _clean(self, value):
        if not isinstance(value, str):
            raise TypeError(f'field \'{self.name}\' must be a string, not {type(value).__name__}')
        return value


class DataField(StringField):
    '''Opaque data, the binary formats can carry it as a byte string'''

    def from_wire(self, value):
        if isinstance(value, (bytes, bytearray)):
            try:
                value = bytes(value).decode('utf-8')
            except UnicodeDecodeError as e:
                raise ParseException(f'field \'{self.key}\' is not valid UTF-8: {e}') from e

        return super().from_wire(value)


class FloatField(Field):
    zero = 0.0

    def _clean(self, value):
        # bool is an int but not a number for us
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f'field \'{self.name}\' must be a number, not {type(value).__name__}')
        return float(value)

    def to_wire(self, value):
        return float(value)

    def to_json(self, value):
        # write -1 and not -1.0 like the other implementations do
        if value.is_integer() and abs(value) < 1e21:
            return int(value)
        return value

    def to_text(self, value) -> str:
        return format_float(value)

    def from_text(self, text: str):
        try:
            return float(text)
        except ValueError as e:
            raise ParseException(f'field \'{self.key}\' is not a valid number: \'{text}\'') from e


class IntField(Field):
    zero = 0

    def _clean(self, value):
        if isinstance(value, bool):
            raise TypeError(f'field \'{self.name}\' must be an integer, not bool')
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if not isinstance(value, int):
            raise TypeError(f'field \'{self.name}\' must be an integer, not {type(value).__name__}')
        return value

    def from_text(self, text: str):
        try:
            return int(text)
        except ValueError as e:
            raise ParseException(f'field \'{self.key}\' is not a valid integer: \'{text}\'') from e


class BoolField(Field):
    zero = False

    def _clean(self, value):
        if not isinstance(value, bool):
            raise TypeError(f'field \'{self.name}\' must be a boolean, not {type(value).__name__}')
        return value

    def to_text(self, value) -> str:
        return format_bool(value)

    def from_text(self, text: str):
        try:
            return parse_bool(text)
        except ValueError as e:
            raise ParseException(f'field \'{self.key}\' is not a valid boolean: \'{text}\'') from e
