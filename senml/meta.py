import logging


class FieldDescriptor(object):
    """Wrapper around attribute access of a Field of a Record.

    The value lives in the instance's __dict__, the field only knows how
    to validate it and how to represent it on the wire."""

    def __init__(self, field_instance: "FieldBase", field_name: str):
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, type=None):
        if instance is None:
            return self.field

        return instance.__dict__.get(self.field.name, self.field.default)

    def __set__(self, instance, value):
        instance.__dict__[self.field.name] = self.field.clean(value)


class FieldBase(object):

    def contribute_to_record(self, cls, name):
        if name in cls.__dict__:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        setattr(cls, name, FieldDescriptor(self, name))


class Meta(object):
    """Class containing metadata about the record"""

    def __init__(self):
        self.fields = []
        self.by_key = {}
        self.by_label = {}

    def get_by_key(self, key):
        return self.by_key.get(key)

    def add(self, name, field):
        self.fields.append(name)
        self.by_key[field.key] = field
        if field.label is not None:
            self.by_label[int(field.label)] = field


class MetaRecord(type):
    logger = logging.getLogger(__name__)

    def __new__(cls, names, bases, attrs):
        '''Collect the declared fields preserving their order, that order is
        also the order they are written out by the encoders.'''
        module = attrs.pop('__module__')
        classcell = attrs.pop('__classcell__', None)

        new_attrs = {
            '__module__': module,
        }
        if classcell is not None:
            new_attrs['__classcell__'] = classcell
        new_cls = super(MetaRecord, cls).__new__(cls, names, bases, new_attrs)

        new_cls._meta = Meta()

        for obj_name, obj in attrs.items():
            new_cls.add_to_class(obj_name, obj)

        return new_cls

    def add_to_class(cls, name, value):
        if hasattr(value, 'contribute_to_record'):
            cls.logger.debug('contribute_to_record() found for field \'%s\'' % name)
            value.contribute_to_record(cls, name)
            cls._meta.add(name, value)
        else:
            setattr(cls, name, value)
