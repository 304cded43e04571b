"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable: it knows how many bytes it takes and how to turn them into a value.

The field instances are shared between all the records of the same class, the values
live in the record itself.
"""
import logging
import struct

from .meta import FieldBase, Endianess
from .properties import Dependency
from .enum import Compliant
from .exceptions import PngmeException, DataLengthMismatch, MagicException


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, default=None, endianess=Endianess.LITTLE_ENDIAN):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.default = default
        self.endianess = endianess

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name})>'

    def value_from_default(self):
        return self.default

    def size(self, record) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.size() not implemented")

    def pack(self, value) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.pack() not implemented")

    def unpack(self, stream, record):
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")

    def update(self, record):
        '''This is used to update the fields this one depends on before packing'''
        pass


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def size(self, record=None):
        return struct.calcsize(self.get_format())

    def pack(self, value):
        return struct.pack(self.get_format(), value)

    def unpack(self, stream, record):
        raw = stream.read_exact(self.size())
        return struct.unpack(self.get_format(), raw)[0]


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The length is fixed if "n" is an integer, otherwise it's a Dependency on
    a sibling field that is resolved at unpacking time and updated at packing time."""

    def __init__(self, n, default=b'', **kw):
        if not isinstance(n, (int, Dependency)):
            raise ValueError(f"StringField length must be an int or a Dependency, not {n.__class__.__name__}")

        self.length = n

        super().__init__(default=default, **kw)

    def size(self, record):
        return len(record._values[self.name])

    def get_length(self, record):
        if isinstance(self.length, Dependency):
            return self.length.resolve(record)

        return self.length

    def pack(self, value):
        return bytes(value)

    def unpack(self, stream, record):
        length = self.get_length(record)

        if isinstance(self.length, Dependency) and length > stream.remaining():
            raise DataLengthMismatch(
                f'declared length {length} but only {stream.remaining()} bytes available')

        return stream.read_exact(length)

    def update(self, record):
        """The StringField with a Dependency writes back its actual size, a fixed
        length one refuses values with the wrong size."""
        length = len(record._values[self.name])

        if isinstance(self.length, Dependency):
            self.length.resolve_and_set(record, length)
        elif length != self.length:
            raise ValueError(f"field '{self.name}' can only accept binary strings of length {self.length}")


class MagicField(StringField):
    '''Fixed bytes at the start of a format; a mismatch is only logged
    unless the record requires Compliant.MAGIC, the value is always the magic.'''

    def __init__(self, magic, **kw):
        super().__init__(len(magic), default=magic, **kw)

    def unpack(self, stream, record):
        value = super().unpack(stream, record)

        if value != self.default:
            self.logger.warning(f'the magic doesn\'t correspond: {value!r}')
            if record.compliant & Compliant.MAGIC:
                raise MagicException(f'expected magic {self.default!r}, found {value!r}')

        return self.default


class ArrayField(Field):
    '''Un/Pack a sequence of records of the same class until the stream is exhausted.

    The value is a tuple: a record holding an ArrayField replaces it as a whole
    when it needs to change its elements.
    '''

    def __init__(self, record_cls, **kw):
        self.record_cls = record_cls
        kw.setdefault('default', ())
        super().__init__(**kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.record_cls.__name__})>'

    def size(self, record):
        return sum(element.size for element in record._values[self.name])

    def pack(self, value):
        return b''.join(element.raw for element in value)

    def unpack(self, stream, record):
        elements = []

        while not stream.at_eof():
            self.logger.debug('unpacking element #%d of \'%s\'' % (len(elements), self.name))
            try:
                elements.append(self.record_cls.unpack(stream, compliant=record.compliant))
            except PngmeException as e:
                e.chain.append(str(len(elements)))
                raise

        return tuple(elements)

    def update(self, record):
        record._values[self.name] = tuple(record._values[self.name])
