import io
import struct
from zlib import crc32

import pytest
from PIL import Image


SIGNATURE = b'\x89PNG\r\n\x1a\n'


def make_chunk(chunk_type: bytes, data: bytes, crc=None) -> bytes:
    crc = crc32(chunk_type + data) if crc is None else crc
    return struct.pack('>I', len(data)) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def red_png():
    '''A real 5x5 red image as saved by Pillow'''
    image = Image.new('RGB', (5, 5), 'red')
    buffer = io.BytesIO()
    image.save(buffer, 'PNG')

    return buffer.getvalue()


@pytest.fixture
def minimal_png():
    '''1x1 grayscale image built by hand: IHDR, IDAT, IEND'''
    ihdr = struct.pack('>IIBBBBB', 1, 1, 8, 0, 0, 0, 0)
    idat = b'\x78\x9c\x63\x00\x00\x00\x01\x00\x01'

    return (
        SIGNATURE +
        make_chunk(b'IHDR', ihdr) +
        make_chunk(b'IDAT', idat) +
        make_chunk(b'IEND', b'')
    )
