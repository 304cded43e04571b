'''
# PNG chunk

This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each integer field is intended big-endian.

    +--------+------+------------------+-------+
    | length | type | data (length)    |  crc  |
    +--------+------+------------------+-------+

The crc field is network-byte-order CRC-32 computed over the chunk type and
chunk data, but not the length.
'''
from typing import Union

from .core import Record
from .enum import Compliant
from .fields import StructField, StringField
from .meta import Endianess
from .properties import Dependency
from .streams import Stream, to_bytes
from .chunk_type import ChunkType
from .common.crc import CRCField
from .exceptions import DataLengthMismatch, InvalidUtf8


# By the PNG 1.2 specification length must be less than 2^31
MAX_LENGTH = (1 << 31) - 1


class LengthField(StructField):

    def __init__(self, **kw):
        super().__init__('I', endianess=Endianess.BIG_ENDIAN, **kw)

    def unpack(self, stream, record):
        value = super().unpack(stream, record)

        if value > MAX_LENGTH:
            raise DataLengthMismatch(f'length {value} exceeds the maximum allowed of {MAX_LENGTH}')

        return value


class ChunkTypeField(StringField):
    '''The value is a ChunkType, built leniently: a file can contain
    non-conforming chunks that we want to read anyway.'''

    def __init__(self, **kw):
        super().__init__(ChunkType.SIZE, default=None, **kw)

    def value_from_default(self):
        return ChunkType(b'\x00' * ChunkType.SIZE) if self.default is None else self.default

    def size(self, record=None):
        return ChunkType.SIZE

    def pack(self, value):
        return value.bytes()

    def unpack(self, stream, record):
        return ChunkType.from_bytes(super().unpack(stream, record))

    def update(self, record):
        pass


class Chunk(Record):
    length     = LengthField()
    chunk_type = ChunkTypeField()
    data       = StringField(Dependency('.length'))
    crc        = CRCField(['chunk_type', 'data'])

    def __init__(self, chunk_type: ChunkType, data: bytes = b''):
        super().__init__(chunk_type=chunk_type, data=to_bytes(data))

    @classmethod
    def new(cls, chunk_type: ChunkType, data: bytes) -> 'Chunk':
        return cls(chunk_type, data)

    @classmethod
    def from_strings(cls, chunk_type: str, message: str) -> 'Chunk':
        '''Build a new chunk from user input: the type is checked strictly
        and the message is stored UTF-8 encoded.'''
        return cls(ChunkType.from_str(chunk_type), message.encode('utf-8'))

    @classmethod
    def from_bytes(cls, raw: Union[bytes, bytearray], compliant=Compliant.CRC) -> 'Chunk':
        '''Parse exactly one chunk: trailing bytes mean the length is wrong.'''
        with Stream(to_bytes(raw)) as stream:
            chunk = cls.unpack(stream, compliant=compliant)

            if not stream.at_eof():
                raise DataLengthMismatch(
                    f'{stream.remaining()} bytes remaining after the chunk, length is likely incorrect')

        return chunk

    def data_as_string(self) -> str:
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidUtf8(f'data of chunk {self.chunk_type} is not valid UTF-8: {e.reason}') from e

    def as_bytes(self) -> bytes:
        return self.raw

    def is_critical(self) -> bool:
        return self.chunk_type.is_critical()

    def __str__(self):
        return f'{self.chunk_type} length={self.length} crc=0x{self.crc:08x}'
