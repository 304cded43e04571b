'''
# Portable Network Graphics

A PNG file consists of a PNG signature followed by a series of chunks.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html> and
is available a full test-suite with a lot of PNG images covering all
the possible cases at <http://www.schaik.com/pngsuite/>.

Here the chunks are read until the input is exhausted, IEND is not
treated differently from any other chunk.
'''
import logging
from typing import Iterable, Optional, Tuple, Union

from .core import Record
from .enum import Compliant
from .fields import MagicField, ArrayField
from .streams import BYTES_LIKE, Stream, to_bytes
from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import ChunkNotFound


logger = logging.getLogger(__name__)

TypeCode = Union[str, bytes, ChunkType]


def _type_name(chunk_type: TypeCode) -> str:
    '''the type code as text, bytes are decoded like ChunkType.to_string() does'''
    if isinstance(chunk_type, (str, ChunkType)):
        return str(chunk_type)
    if isinstance(chunk_type, BYTES_LIKE):
        return bytes(chunk_type).decode('latin1')

    raise TypeError(f'chunk type must be str, bytes or ChunkType, not {chunk_type.__class__.__name__}')


class Png(Record):
    SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'

    header = MagicField(SIGNATURE)
    chunks = ArrayField(Chunk)

    # chunks can be appended and removed
    __hash__ = None

    def __init__(self, chunks: Iterable[Chunk] = ()):
        super().__init__(chunks=tuple(chunks))

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> 'Png':
        return cls(chunks)

    @classmethod
    def from_bytes(cls, raw: bytes, compliant=Compliant.CRC) -> 'Png':
        with Stream(to_bytes(raw)) as stream:
            return cls.unpack(stream, compliant=compliant)

    @classmethod
    def from_file(cls, path, compliant=Compliant.CRC) -> 'Png':
        with Stream(path) as stream:
            return cls.unpack(stream, compliant=compliant)

    def write_file(self, path):
        logger.debug('writing %d chunks to \'%s\'' % (len(self), path))
        with open(path, 'wb') as f:
            f.write(self.as_bytes())

    def __len__(self):
        return len(self.chunks)

    def __iter__(self):
        return iter(self.chunks)

    def __getitem__(self, index) -> Chunk:
        return self.chunks[index]

    def _find(self, chunk_type: TypeCode) -> Optional[int]:
        '''index of the first chunk with the given type'''
        name = _type_name(chunk_type)
        for idx, chunk in enumerate(self.chunks):
            if str(chunk.chunk_type) == name:
                return idx

        return None

    def append_chunk(self, chunk: Chunk):
        self._values['chunks'] = self.chunks + (chunk,)

    def remove_chunk(self, chunk_type: TypeCode) -> Chunk:
        '''Remove only the first chunk of the given type, in file order.'''
        idx = self._find(chunk_type)

        if idx is None:
            raise ChunkNotFound(_type_name(chunk_type))

        chunk = self.chunks[idx]
        self._values['chunks'] = self.chunks[:idx] + self.chunks[idx + 1:]

        return chunk

    def chunk_by_type(self, chunk_type: TypeCode) -> Optional[Chunk]:
        idx = self._find(chunk_type)

        return self.chunks[idx] if idx is not None else None

    def chunks_by_type(self, chunk_type: TypeCode) -> Tuple[Chunk, ...]:
        name = _type_name(chunk_type)
        return tuple(_ for _ in self.chunks if str(_.chunk_type) == name)

    def as_bytes(self) -> bytes:
        return self.raw

    def __str__(self):
        return '\n'.join(f'[{idx:02d}] {chunk}' for idx, chunk in enumerate(self.chunks))
