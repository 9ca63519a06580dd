"""
Core module with the data model of SenML (RFC 8428)

A Record is a single measurement or configuration event, a Pack is an
ordered list of records where the base fields (base_name, base_time,
base_unit, base_version) of a record apply also to the records following
it, until overridden.

The model doesn't enforce anything: use validate() for that.
"""
import logging
from typing import Any, Dict, List, Mapping

from . import fields
from .enum import Label
from .meta import MetaRecord


logger = logging.getLogger(__name__)


class Record(metaclass=MetaRecord):
    """One measurement or configuration instance in time.

    The order of the declaration is the order the fields are written out."""
    base_name    = fields.StringField('bn', label=Label.BASE_NAME)
    base_time    = fields.FloatField('bt', label=Label.BASE_TIME)
    base_unit    = fields.StringField('bu', label=Label.BASE_UNIT)
    base_version = fields.IntField('bver', label=Label.BASE_VERSION)

    name        = fields.StringField('n', label=Label.NAME)
    unit        = fields.StringField('u', label=Label.UNIT)
    time        = fields.FloatField('t', label=Label.TIME)
    update_time = fields.FloatField('ut', label=Label.UPDATE_TIME)

    # the value slot: at most one of them in a valid record
    value        = fields.FloatField('v', label=Label.VALUE, optional=True)
    string_value = fields.StringField('vs', label=Label.STRING_VALUE, optional=True)
    data_value   = fields.DataField('vd', label=Label.DATA_VALUE, optional=True)
    bool_value   = fields.BoolField('vb', label=Label.BOOL_VALUE, optional=True)

    sum = fields.FloatField('s', label=Label.SUM, optional=True)

    VALUE_SLOT = ('value', 'string_value', 'data_value', 'bool_value')

    def __init__(self, **kwargs):
        for name, value in kwargs.items():
            if name not in self._meta.fields:
                raise TypeError(f'{self.__class__.__name__}() got an unexpected keyword argument \'{name}\'')
            setattr(self, name, value)

    @classmethod
    def get_field(cls, name: str) -> fields.Field:
        return cls.__dict__[name].field

    def get_fields(self):
        '''It returns a list of couples (field, value) for each field.'''
        return [(self.get_field(_), getattr(self, _)) for _ in self._meta.fields]

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented

        return all(getattr(self, _) == getattr(other, _) for _ in self._meta.fields)

    __hash__ = None

    def __repr__(self):
        msg = []
        for field, value in self.get_fields():
            if not field.is_empty(value):
                msg.append('%s=%r' % (field.name, value))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def copy(self, **changes) -> "Record":
        values = {_: getattr(self, _) for _ in self._meta.fields}
        values.update(changes)

        return self.__class__(**values)

    def value_count(self) -> int:
        '''Number of populated entries of the value slot'''
        return len([_ for _ in self.VALUE_SLOT if getattr(self, _) is not None])

    def has_value(self) -> bool:
        return self.value_count() > 0

    def to_dict(self) -> Dict[str, Any]:
        '''The non-empty fields keyed by their JSON name'''
        return {field.key: field.to_json(value) for field, value in self.get_fields() if not field.is_empty(value)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Record":
        record = cls()
        for key, value in data.items():
            field = cls._meta.get_by_key(key)
            if field is None:
                logger.debug('ignoring unknown key \'%s\'' % key)
                continue
            setattr(record, field.name, field.from_wire(value))

        return record


class Pack(list):
    '''One or more SenML Records in an array structure.

    It's a plain list, the methods are here for convenience and delegate to
    the modules implementing them.'''

    def __repr__(self):
        return f'<{self.__class__.__name__}({list.__repr__(self)})>'

    def validate(self) -> None:
        from .validation import validate
        validate(self)

    def normalize(self, now=None, **kwargs) -> "Pack":
        from .normalize import normalize
        return normalize(self, now=now, **kwargs)

    def encode(self, format, **options) -> bytes:
        from .formats import encode
        return encode(self, format, **options)

    @classmethod
    def decode(cls, data: bytes, format, **options) -> "Pack":
        from .formats import decode
        return decode(data, format, **options)

    @classmethod
    def from_records(cls, records: List[Mapping[str, Any]]) -> "Pack":
        return cls(Record.from_dict(_) for _ in records)
