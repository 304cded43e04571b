'''
Operations hiding, reading and removing messages in PNG chunks.

Each command works on the raw bytes of a file; the *_file() variants read the
file, apply the command and write the result back (in place if no output
path is given).
'''
import logging
from collections import namedtuple
from typing import List

from .png import Png
from .chunk import Chunk
from .exceptions import ChunkNotFound, InvalidUtf8


logger = logging.getLogger(__name__)


ChunkInfo = namedtuple('ChunkInfo', ['index', 'length', 'chunk_type', 'data_length', 'crc'])
TextChunk = namedtuple('TextChunk', ['index', 'chunk_type', 'text'])


def encode(data: bytes, chunk_type: str, message: str) -> bytes:
    png = Png.from_bytes(data)
    png.append_chunk(Chunk.from_strings(chunk_type, message))

    return png.as_bytes()


def decode(data: bytes, chunk_type: str) -> str:
    png = Png.from_bytes(data)
    chunk = png.chunk_by_type(chunk_type)

    if chunk is None:
        raise ChunkNotFound(chunk_type)

    return chunk.data_as_string()


def remove(data: bytes, chunk_type: str) -> bytes:
    png = Png.from_bytes(data)
    chunk = png.remove_chunk(chunk_type)
    logger.debug(f'removed chunk {chunk}')

    return png.as_bytes()


def print_chunks(data: bytes) -> List[ChunkInfo]:
    png = Png.from_bytes(data)

    return [
        ChunkInfo(idx, chunk.length, str(chunk.chunk_type), len(chunk.data), chunk.crc)
        for idx, chunk in enumerate(png.chunks)
    ]


def identify_text(data: bytes) -> List[TextChunk]:
    '''Chunks whose data is non-empty valid UTF-8, in file order.'''
    png = Png.from_bytes(data)
    result = []

    for idx, chunk in enumerate(png.chunks):
        try:
            text = chunk.data_as_string()
        except InvalidUtf8:
            continue

        if text:
            result.append(TextChunk(idx, str(chunk.chunk_type), text))

    return result


def _read(path) -> bytes:
    with open(path, 'rb') as f:
        return f.read()


def _write(path, data: bytes):
    logger.debug(f'writing {len(data)} bytes to \'{path}\'')
    with open(path, 'wb') as f:
        f.write(data)


def encode_file(path, chunk_type: str, message: str, output=None):
    _write(output or path, encode(_read(path), chunk_type, message))


def decode_file(path, chunk_type: str) -> str:
    return decode(_read(path), chunk_type)


def remove_file(path, chunk_type: str, output=None):
    _write(output or path, remove(_read(path), chunk_type))


def print_file(path) -> List[ChunkInfo]:
    return print_chunks(_read(path))


def identify_text_file(path) -> List[TextChunk]:
    return identify_text(_read(path))
