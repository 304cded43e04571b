import pytest

from pngme.core import Record
from pngme.fields import StructField, StringField, MagicField, ArrayField
from pngme.meta import Endianess
from pngme.properties import Dependency
from pngme.streams import Stream
from pngme.enum import Compliant
from pngme.common.crc import CRCField, calculate_crc
from pngme.exceptions import DataLengthMismatch, MagicException, UnexpectedEof


def test_record():
    """Check that building a Record from fields behaves correctly."""
    class Dummy(Record):
        a = StructField('I', default=0xbad)
        b = StringField(0x10, default=b'\x00' * 0x10)
        c = StructField('I', default=0xdeadbeef)

    dummy = Dummy()

    assert Dummy.get_ordered_fields_name() == ['a', 'b', 'c']
    assert dummy.a == 0xbad
    assert dummy.size == 0x18
    assert dummy.layout == {
        'a': (0, 4),
        'b': (4, 0x10),
        'c': (0x14, 4),
    }
    assert dummy.raw == (
        b'\xad\x0b\x00\x00' +
        b'\x00' * 0x10 +
        b'\xef\xbe\xad\xde'
    )


def test_fixed_length_string():
    class Dummy(Record):
        magic = StringField(4, default=b'ABCD')

    with pytest.raises(ValueError):
        Dummy(magic=b'AB')


def test_unknown_field():
    class Dummy(Record):
        a = StructField('B')

    with pytest.raises(TypeError):
        Dummy(b=1)


def test_inheritance():
    '''subclasses inherit fields'''
    class Father(Record):
        field_a = StringField(0x10)
        field_b = StructField('I')

    class Son(Father):
        field_c = StringField(0x08)

    field_b_value = b'\x01\x02\x03\x04'
    field_c_value = b'ABCDEFGH'
    son = Son.unpack(Stream(b'A' * 16 + field_b_value + field_c_value))

    assert Son.get_ordered_fields_name() == ['field_a', 'field_b', 'field_c']
    assert son.field_b == 0x04030201
    assert son.field_c == field_c_value


def test_dependency():
    class TLV(Record):
        type   = StructField('I')
        length = StructField('I')
        data   = StringField(Dependency('.length'))
        extra  = StructField('I')

    tlv = TLV.unpack(Stream(
        b'\x01\x00\x00\x00'
        b'\x0f\x00\x00\x00'
        b'\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41'
        b'\x0a\x0b\x0c\x0d'
    ))

    assert tlv.type == 0x01
    assert tlv.length == 0x0f
    assert tlv.data == b'\x41' * 0x0f
    assert tlv.extra == 0x0d0c0b0a
    assert tlv.layout['extra'] == (0x04 + 0x04 + 0x0f, 4)

    # building a new one the length follows the data
    other = TLV(type=1, data=b'\x42\x42\x42', extra=0x0d0c0b0a)

    assert other.length == 3
    assert other.raw == b'\x01\x00\x00\x00\x03\x00\x00\x00BBB\x0a\x0b\x0c\x0d'


def test_dependency_truncated():
    class TLV(Record):
        length = StructField('B')
        data   = StringField(Dependency('.length'))

    with pytest.raises(DataLengthMismatch) as e:
        TLV.unpack(Stream(b'\x10ABC'))

    assert e.value.path == 'data'


def test_dependency_must_be_relative():
    with pytest.raises(ValueError):
        Dependency('length')


def test_big_endian():
    class Dummy(Record):
        value = StructField('H', endianess=Endianess.BIG_ENDIAN)

    assert Dummy(value=0x0102).raw == b'\x01\x02'


def test_crc():
    class Dummy(Record):
        dataA = StructField('I')
        dataB = StructField('I')
        dataC = StructField('I')

        crc   = CRCField([
            'dataA',
            'dataC',
        ])

    dummy = Dummy(dataA=0x01020304, dataB=0x05060708, dataC=0x090A0B0C)

    assert dummy.crc == calculate_crc(b'\x04\x03\x02\x01\x0c\x0b\x0a\x09')
    assert Dummy.unpack(Stream(dummy.raw)) == dummy


def test_crc_known_value():
    # check value from the CRC-32 catalogue
    assert calculate_crc(b'123456789') == 0xcbf43926


def test_magic():
    class Dummy(Record):
        magic = MagicField(b'HELLO')
        value = StructField('B')

    assert Dummy(value=1).raw == b'HELLO\x01'

    # by default a wrong magic is tolerated
    dummy = Dummy.unpack(Stream(b'HELLA\x01'), compliant=Compliant.NONE)
    assert dummy.magic == b'HELLO'
    assert dummy.value == 1

    with pytest.raises(MagicException) as e:
        Dummy.unpack(Stream(b'HELLA\x01'), compliant=Compliant.MAGIC)

    assert e.value.chain == ['magic']


def test_array():
    class Element(Record):
        value = StructField('H')

    class Container(Record):
        count = StructField('B')
        elements = ArrayField(Element)

    container = Container.unpack(Stream(b'\x03\x01\x00\x02\x00\x03\x00'))

    assert [_.value for _ in container.elements] == [1, 2, 3]
    assert container.size == 7

    with pytest.raises(UnexpectedEof) as e:
        Container.unpack(Stream(b'\x03\x01\x00\x02'))

    assert e.value.path == 'elements.1.value'


def test_stream_file(tmp_path):
    path = tmp_path / 'data'
    path.write_bytes(b'\x01\x02\x03\x04\x05')

    with Stream(path) as stream:
        assert stream.read_exact(2) == b'\x01\x02'
        assert stream.remaining() == 3
        assert stream.read_all() == b'\x03\x04\x05'
        assert stream.at_eof()


def test_stream_wrong_type():
    with pytest.raises(ValueError):
        Stream(42)
