import logging
from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()
    NETWORK       = auto()


class FieldDescriptor(object):
    """Read-only access to the value a record holds for a given field."""

    def __init__(self, field_instance: "Field", field_name: str):
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, owner=None):
        # accessing from the class returns the field definition itself
        if instance is None:
            return self.field

        try:
            return instance._values[self.field.name]
        except KeyError:
            raise AttributeError(f"field '{self.field.name}' has no value yet") from None

    def __set__(self, instance, value):
        raise AttributeError(f"field '{self.field.name}' of {instance.__class__.__name__} is read-only")


class FieldBase(object):

    def contribute_to_record(self, cls, name):
        if name in cls._meta.fields:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        setattr(cls, name, FieldDescriptor(self, name))
        cls._meta.fields.append(name)


class Meta(object):
    """Class containing metadata about the record"""

    def __init__(self):
        self.fields = []


class MetaRecord(type):

    def __new__(cls, name, bases, attrs):
        new_cls = super().__new__(cls, name, bases, {
            _k: _v for _k, _v in attrs.items() if not isinstance(_v, FieldBase)
        })

        new_cls._meta = Meta()
        new_cls.logger = logging.getLogger(f'{new_cls.__module__}.{name}')

        # handle inheritance: parent's fields come first
        for parent in [_ for _ in bases if isinstance(_, MetaRecord)]:
            for field_name in parent._meta.fields:
                new_cls._meta.fields.append(field_name)

        for obj_name, obj in attrs.items():
            if isinstance(obj, FieldBase):
                new_cls.logger.debug('contribute_to_record() for field \'%s\'' % obj_name)
                obj.contribute_to_record(new_cls, obj_name)

        return new_cls
