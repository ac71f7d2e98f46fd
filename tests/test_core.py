import pytest

from pngchunks.core import Chunk
from pngchunks.exceptions import UnexpectedEof, TrailingBytes
from pngchunks.fields import StructField, StringField, ArrayField
from pngchunks.meta import Endianess
from pngchunks.properties import Dependency


def test_chunk():
    """Check that building a Chunk from fields behaves correctly."""
    class Dummy(Chunk):
        a = StructField('I', default=0xbad)
        b = StringField(0x10)
        c = StructField('I', default=0xdeadbeef, endianess=Endianess.BIG_ENDIAN)

    dummy = Dummy()

    assert [name for name, _ in Dummy.get_fields()] == ['a', 'b', 'c']
    assert Dummy.a.name == 'a'
    assert Dummy.a.father is Dummy

    assert dummy.a == 0xbad
    assert dummy.b == b'\x00' * 0x10
    assert dummy.c == 0xdeadbeef

    assert dummy.size == 0x18
    assert Dummy.get_header_size() == 0x18
    assert dummy.raw == (
        b'\xad\x0b\x00\x00' +
        b'\x00' * 0x10 +
        b'\xde\xad\xbe\xef'
    )
    assert bytes(dummy) == dummy.raw


def test_chunk_is_read_only():
    class Dummy(Chunk):
        a = StructField('B')

    dummy = Dummy(a=1)

    with pytest.raises(AttributeError):
        dummy.a = 2

    assert dummy.a == 1


def test_chunk_unknown_field():
    class Dummy(Chunk):
        a = StructField('B')

    with pytest.raises(TypeError):
        Dummy(b=1)


def test_chunk_w_dependencies():
    """The length is derived from the data when building from values
    and drives the reading when unpacking."""
    class Example(Chunk):
        sz = StructField('I')
        data = StringField(Dependency('.sz'))

    example = Example(data=b'kebab')

    assert example.sz == 5
    assert example.data == b'kebab'
    assert example.raw == b'\x05\x00\x00\x00kebab'
    assert Example.get_header_size() == 4

    unpacked = Example(b'\x03\x00\x00\x00abcdef')

    assert unpacked.sz == 3
    assert unpacked.data == b'abc'
    assert unpacked != example
    assert Example(example.raw) == example


def test_chunk_unpack_eof():
    class Example(Chunk):
        sz = StructField('I')
        data = StringField(Dependency('.sz'))

    with pytest.raises(UnexpectedEof) as excinfo:
        Example(b'\x10\x00\x00\x00abc')

    assert excinfo.value.chain == ['data']
    assert excinfo.value.offset == 4


def test_dependency_must_be_declared_before():
    with pytest.raises(ValueError):
        Dependency('sz')

    class Wrong(Chunk):
        data = StringField(Dependency('.sz'))
        sz = StructField('I')

    with pytest.raises(AttributeError):
        Wrong(b'\x00\x00\x00\x00')


def test_inheritance():
    class Base(Chunk):
        a = StructField('B')

    class Derived(Base):
        b = StructField('B')

    derived = Derived(a=1, b=2)

    assert [name for name, _ in Derived.get_fields()] == ['a', 'b']
    assert derived.raw == b'\x01\x02'


def test_arrayfield():
    class Element(Chunk):
        sz = StructField('B')
        data = StringField(Dependency('.sz'))

    class Container(Chunk):
        elements = ArrayField(Element)

    container = Container(b'\x01a\x02bc\x00')

    assert len(container.elements) == 3
    assert [_.data for _ in container.elements] == [b'a', b'bc', b'']
    assert container.size == 6
    assert container.raw == b'\x01a\x02bc\x00'

    # each instance has its own list
    assert Container().elements == []
    assert Container().elements is not Container().elements

    with pytest.raises(ValueError):
        Container(elements=[1, 2])


def test_arrayfield_errors_chain():
    class Element(Chunk):
        sz = StructField('H')
        data = StringField(Dependency('.sz'))

    class Container(Chunk):
        elements = ArrayField(Element)

    with pytest.raises(UnexpectedEof) as excinfo:
        Container(b'\x01\x00a\x05\x00bc')

    assert excinfo.value.chain == ['elements', 1, 'data']
    assert excinfo.value.offset == 5
    assert str(excinfo.value).startswith('elements.1.data: ')

    with pytest.raises(TrailingBytes) as excinfo:
        Container(b'\x01\x00a\x05')

    assert excinfo.value.chain == ['elements']
    assert excinfo.value.offset == 3
