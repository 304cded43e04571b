"""
# pngme: hide messages into PNG files

A PNG file is a signature followed by a sequence of chunks; each chunk is
length-prefixed and protected by a CRC-32 over its type and data. Appending
a chunk with a private, ancillary type code doesn't change the image, so it's
a good place where to put a message.

The binary layouts are described declaratively by Record subclasses (see
pngme.core): a record lists its fields in wire order and knows how to

 1. unpack(): read the binary data and build a high-level representation of that
 2. raw: encode the high-level representation back into binary data

The three layers are ChunkType (the 4 letters type code), Chunk (a single
record) and Png (the signature plus the ordered chunks).
"""
from .chunk_type import ChunkType
from .chunk import Chunk
from .png import Png
from .enum import Compliant
from .exceptions import (
    PngmeException,
    InvalidChunkType,
    UnexpectedEof,
    DataLengthMismatch,
    CrcMismatch,
    InvalidUtf8,
    ChunkNotFound,
    MagicException,
)
