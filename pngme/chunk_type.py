'''
# Chunk type

A type code is made of 4 bytes, restricted to uppercase and lowercase ASCII letters
(A-Z and a-z, or 65-90 and 97-122 decimal). Four bits of the type code, namely
bit 5 (value 32) of each byte, are used to convey chunk properties:

 1. ancillary bit (first byte): 0 (uppercase) = critical, 1 (lowercase) = ancillary
 2. private bit (second byte): 0 (uppercase) = public, 1 (lowercase) = private
 3. reserved bit (third byte): must be 0 (uppercase) in files conforming to PNG 1.2
 4. safe-to-copy bit (fourth byte): 0 (uppercase) = unsafe to copy, 1 (lowercase) = safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from bitstring import Bits

from .exceptions import InvalidChunkType
from .streams import to_bytes


def _is_ascii_letter(value: int) -> bool:
    return 65 <= value <= 90 or 97 <= value <= 122


class ChunkType(object):
    '''Immutable 4-byte type code.

    There are two ways of building one: from_bytes() accepts anything of the right
    size since a file can contain non-conforming chunks that must be readable anyway,
    from_str()/strict() are meant for new chunk types and refuse invalid codes.'''

    __slots__ = ('_bytes', '_bits')

    SIZE = 4

    def __init__(self, raw: bytes):
        raw = to_bytes(raw, what='chunk type')
        if len(raw) != self.SIZE:
            raise InvalidChunkType(f'chunk type must be exactly {self.SIZE} bytes, got {len(raw)}')

        object.__setattr__(self, '_bytes', raw)
        object.__setattr__(self, '_bits', Bits(raw))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'ChunkType':
        return cls(raw)

    @classmethod
    def strict(cls, raw: bytes) -> 'ChunkType':
        chunk_type = cls(raw)

        if not all(_is_ascii_letter(_) for _ in chunk_type.bytes()):
            raise InvalidChunkType(f'invalid character in chunk type {raw!r}, only ASCII letters are allowed')

        if not chunk_type.is_reserved_bit_valid():
            raise InvalidChunkType(f'chunk type {raw!r} must have the third letter uppercase')

        return chunk_type

    @classmethod
    def from_str(cls, value: str) -> 'ChunkType':
        try:
            raw = value.encode('ascii')
        except UnicodeEncodeError:
            raise InvalidChunkType(f'chunk type \'{value}\' contains non ASCII characters') from None

        return cls.strict(raw)

    def bytes(self) -> bytes:
        return self._bytes

    def to_string(self) -> str:
        return self._bytes.decode('latin1')

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.to_string()})>'

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._bytes == other._bytes

    def __hash__(self):
        return hash(self._bytes)

    def _bit5(self, index) -> bool:
        # bitstring indexes from the most significant bit
        return self._bits[index * 8 + 2]

    def is_critical(self) -> bool:
        return not self._bit5(0)

    def is_public(self) -> bool:
        return not self._bit5(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._bit5(2)

    def is_safe_to_copy(self) -> bool:
        return self._bit5(3)

    def is_valid(self) -> bool:
        return all(_is_ascii_letter(_) for _ in self._bytes) and self.is_reserved_bit_valid()
