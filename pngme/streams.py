import io
import os
import logging

from .exceptions import UnexpectedEof


logger = logging.getLogger(__name__)

BYTES_LIKE = (bytes, bytearray, memoryview)


def to_bytes(obj, what='data') -> bytes:
    '''Copy a bytes-like object, anything else is refused'''
    if not isinstance(obj, BYTES_LIKE):
        raise TypeError(f'{what} must be bytes-like, not {obj.__class__.__name__}')

    return bytes(obj)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: mainly we need a read_exact() that never
    returns less than asked.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        if isinstance(obj, (str, os.PathLike)):
            logger.debug('opening path \'%s\'' % obj)
            self.obj = open(obj, 'rb')
        elif isinstance(obj, BYTES_LIKE):
            self.obj = io.BytesIO(bytes(obj))
        else:
            raise ValueError('\'%s\' is the wrong kind of object to stream' % obj.__class__.__name__)

        self._size = self.obj.seek(0, io.SEEK_END)
        self.obj.seek(0)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.obj.close()

    def tell(self):
        return self.obj.tell()

    def remaining(self):
        return self._size - self.obj.tell()

    def at_eof(self):
        return self.remaining() == 0

    def read_exact(self, n):
        data = self.obj.read(n)

        if len(data) != n:
            raise UnexpectedEof(f'expected {n} bytes at offset {self.tell() - len(data)}, only {len(data)} available')

        return data

    def read_all(self):
        return self.obj.read()
