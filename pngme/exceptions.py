class PngmeException(Exception):
    '''Base class to extend in order to throw exception in pngme.

    It takes an optional argument that represents the chain of the layer that
    caused the exception, innermost field first.
    '''

    def __init__(self, message='', chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(message)

    @property
    def path(self):
        return '.'.join(self.chain[::-1])


class InvalidChunkType(PngmeException):
    '''A type code supplied for a new chunk is not four ASCII letters
    with the reserved bit valid.'''
    pass


class UnexpectedEof(PngmeException):
    pass


class DataLengthMismatch(UnexpectedEof):
    '''The declared length doesn't agree with the available bytes.'''
    pass


class CrcMismatch(PngmeException):

    def __init__(self, expected, calculated, chain=None):
        self.expected = expected
        self.calculated = calculated
        super().__init__(
            f'stored CRC 0x{expected:08x} doesn\'t match calculated 0x{calculated:08x}',
            chain=chain)


class InvalidUtf8(PngmeException):
    pass


class ChunkNotFound(PngmeException):

    def __init__(self, chunk_type):
        self.chunk_type = chunk_type
        super().__init__(f'no chunk with type {chunk_type}')


class MagicException(PngmeException):
    pass
