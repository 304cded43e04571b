"""
Core module for the abstraction of a binary record.

A record is described declaratively: its fields are class attributes listed
in the same order they appear in the stream.

Two basic main operations are defined for a record:

 1. unpack(): reading the binary data and build a high-level representation of that.
 2. raw: encode the high-level representation back into binary data.

Records are immutable once built: a field that depends on another one (a length,
a checksum) is updated only at construction time.
"""
from typing import Dict, List, Tuple

from .enum import Compliant
from .fields import Field
from .meta import MetaRecord
from .exceptions import PngmeException


class Record(metaclass=MetaRecord):
    """
    Base class for a format's record: values are passed as keyword arguments,
    missing ones get the field's default and dependent ones are recomputed.
    """

    def __init__(self, compliant=Compliant.CRC, **values):
        self.compliant = compliant
        self._values = {}

        for field_name, field in self.get_fields():
            self._values[field_name] = values.pop(field_name) if field_name in values else field.value_from_default()

        if values:
            raise TypeError(f'unknown fields for {self.__class__.__name__}: {", ".join(values)}')

        for field_name, field in self.get_fields():
            field.update(self)

    @classmethod
    def get_ordered_fields_name(cls) -> List[str]:
        return cls._meta.fields

    @classmethod
    def get_fields(cls) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, field) for each field.'''
        return [(_, getattr(cls, _)) for _ in cls.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name in self.get_ordered_fields_name():
            msg.append('%s=%r' % (field_name, self._values[field_name]))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented

        return self._values == other._values

    def __hash__(self):
        return hash(self.raw)

    @property
    def raw(self) -> bytes:
        value = b''
        for field_name, field in self.get_fields():
            value += field.pack(self._values[field_name])

        return value

    def __bytes__(self):
        return self.raw

    @property
    def size(self) -> int:
        return sum(field.size(self) for _, field in self.get_fields())

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        offset = 0
        for name, field in self.get_fields():
            size = field.size(self)
            result[name] = (offset, size)
            offset += size

        return result

    @classmethod
    def unpack(cls, stream, compliant=Compliant.CRC):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        The fields are read in order from the actual position of the stream, a field
        failing makes the whole record fail: the name of the field is appended to
        the chain of the exception so that the caller knows where it happened.
        '''
        record = cls.__new__(cls)
        record.compliant = compliant
        record._values = {}

        for field_name, field in cls.get_fields():
            cls.logger.debug('unpacking %s.%s at offset %d' % (cls.__name__, field_name, stream.tell()))

            try:
                record._values[field_name] = field.unpack(stream, record)
            except PngmeException as e:
                e.chain.append(field_name)
                raise

        return record
