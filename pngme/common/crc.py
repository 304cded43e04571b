'''
We are implementing fields to handle CRC calculation.
'''
from zlib import crc32

from .. import fields
from ..enum import Compliant
from ..meta import Endianess
from ..exceptions import CrcMismatch


def calculate_crc(data: bytes) -> int:
    """standard CRC methods with pre and post conditioning, as defined by ISO 3309 [ISO-3309]
    or ITU-T V.42 [ITU-V42]. The CRC polynomial employed is

      x^32+x^26+x^23+x^22+x^16+x^12+x^11+x^10+x^8+x^7+x^5+x^4+x^2+x+1

    The 32-bit CRC register is initialized to all 1's, and then the data from each byte is processed
    from the least significant bit (1) to the most significant bit (128). After all the data bytes are processed,
    the CRC register is inverted (its ones complement is taken).

    zlib implements exactly this one, table included.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.
    """
    return crc32(data) & 0xffffffff


class CRCField(fields.StructField):
    """The CRC over the raw values of the sibling fields indicated by name.
    This value is transmitted (stored in the file) MSB first."""

    def __init__(self, fields, **kwargs):
        kwargs.setdefault('endianess', Endianess.BIG_ENDIAN)
        super().__init__('I', **kwargs)
        self.fields = fields

    def calculate(self, record):
        value = b''
        for field_name in self.fields:
            field = getattr(record.__class__, field_name)
            value += field.pack(record._values[field_name])

        return calculate_crc(value)

    def unpack(self, stream, record):
        value = super().unpack(stream, record)

        if record.compliant & Compliant.CRC:
            calculated = self.calculate(record)
            if calculated != value:
                raise CrcMismatch(value, calculated)

        return value

    def update(self, record):
        record._values[self.name] = self.calculate(record)
