"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable: it knows how to encode a value, not where the value is stored.
The values live in the Chunk the field is declared into.
"""
import logging
import struct
from typing import Any, Dict, List, Optional

from .meta import FieldBase, Endianess
from .properties import Dependency
from .streams import Stream
from .exceptions import BadSignature, PNGChunksException, TrailingBytes


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, default=None, endianess=Endianess.LITTLE_ENDIAN, is_magic=False):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = None
        self.default = default
        self.endianess = endianess
        self.is_magic = is_magic

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def value_from_default(self):
        return self.default

    def prepare(self, value):
        '''Normalize a value passed by the user before storing it.'''
        return value

    def fixed_size(self) -> Optional[int]:
        '''The size in bytes when it doesn't depend on the value, None otherwise.'''
        return None

    def get_size(self, value) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.get_size() not implemented")

    def update(self, values: Dict[str, Any]) -> None:
        '''Hook called when a chunk is built from values: here the fields
        derived from other fields write back their value.'''
        pass

    def check_magic(self, value):
        if self.is_magic and value != self.default:
            self.logger.warning(f'the magic for field \'{self.name}\' doesn\'t correspond')
            raise BadSignature(f'expected {self.default!r}, found {value!r}')

    def pack(self, value, values: Dict[str, Any]) -> bytes:
        raise NotImplementedError('you need to implement this in the subclass')

    def unpack(self, stream: Stream, values: Dict[str, Any]):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def fixed_size(self):
        return struct.calcsize(self.get_format())

    def get_size(self, value):
        return self.fixed_size()

    def prepare(self, value):
        if not isinstance(value, int):
            raise ValueError(f"field '{self.name}' accepts only integers, not {value.__class__.__name__}")

        return value

    def pack(self, value, values):
        try:
            return struct.pack(self.get_format(), value)
        except struct.error as e:
            self.logger.error(e)
            raise ValueError(f"value {value!r} doesn't fit field '{self.name}' with format '{self.format}'") from e

    def unpack(self, stream, values):
        raw = stream.read_exact(self.fixed_size())
        value = struct.unpack(self.get_format(), raw)[0]

        self.check_magic(value)

        return value


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The length can be fixed or a Dependency on a field declared before this one.
    """

    def __init__(self, n=None, **kw):
        if n is None and kw.get('default') is None:
            raise ValueError("StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        if not isinstance(self.length, (int, Dependency)):
            raise ValueError('n is \'%s\' must be of the right type' % self.length.__class__.__name__)

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s, n=%r)>' % (self.__class__.__name__, self.name, self.length)

    def value_from_default(self):
        if self.default is not None:
            return self.default

        return b'\x00' * self.length if isinstance(self.length, int) else b''

    def prepare(self, value):
        value = bytes(value)

        if isinstance(self.length, int) and len(value) != self.length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self.length} bytes)')

        return value

    def fixed_size(self):
        return self.length if isinstance(self.length, int) else None

    def get_size(self, value):
        return len(value)

    def get_length(self, values) -> int:
        if isinstance(self.length, Dependency):
            return self.length.resolve(values)

        return self.length

    def update(self, values):
        if isinstance(self.length, Dependency):
            self.length.resolve_and_set(values, len(values[self.name]))

    def pack(self, value, values):
        if len(value) != self.get_length(values):
            raise ValueError(f"field '{self.name}' has {len(value)} bytes but its length says {self.get_length(values)}")

        return value

    def unpack(self, stream, values):
        length = self.get_length(values)

        if self.is_magic:
            # a short stream must be reported as a wrong magic
            value = stream.read(length)
            self.check_magic(value)
            return value

        return stream.read_exact(length)


class ArrayField(Field):
    '''Un/Pack an array of Chunks running until the end of the stream.

    This class stores a plain python list, so that appending and removing
    elements is the usual list business.
    '''

    def __init__(self, field_cls, **kw):
        self.field_cls = field_cls
        super().__init__(**kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name}, {self.field_cls.__name__})>'

    def value_from_default(self):
        return list(self.default) if self.default is not None else []

    def prepare(self, value) -> List:
        value = list(value)

        for element in value:
            if not isinstance(element, self.field_cls):
                raise ValueError(f"'{self.name}' can only contain {self.field_cls.__name__}, not {element.__class__.__name__}")

        return value

    def get_size(self, value):
        return sum(element.size for element in value)

    def pack(self, value, values):
        return b''.join(element.pack() for element in value)

    def unpack(self, stream, values):
        elements = []
        header_size = self.field_cls.get_header_size()

        while not stream.at_end():
            if stream.remaining() < header_size:
                raise TrailingBytes(
                    f'{stream.remaining()} bytes left, not enough for a header of {header_size} bytes',
                    offset=stream.tell(),
                )

            self.logger.debug('unpacking element #%d of \'%s\' at offset %d' % (len(elements), self.name, stream.tell()))

            try:
                element = self.field_cls.unpack_from(stream)
            except PNGChunksException as e:
                e.chain.insert(0, len(elements))
                raise

            elements.append(element)

        return elements
