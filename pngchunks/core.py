"""
Core module for the abstraction of a file format

"""
from typing import Any, Dict, List, Tuple

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import PNGChunksException


class Chunk(metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: the fields
    declared as class attributes, in order, describe the binary layout.

    An instance can be obtained in two ways

     1. passing some binary data (or a Stream) to the constructor, the data is unpacked
     2. passing the values as keyword arguments, the missing ones are taken from the
        defaults of the fields and the derived ones (lengths, checksums) are computed

    Once built, the fields can be read as attributes but not assigned.
    """

    def __init__(self, source=None, **kwargs):
        if source is not None:
            if kwargs:
                raise TypeError('you can pass binary data or values, not both')

            stream = source if isinstance(source, Stream) else Stream(source)
            self.logger.debug('unpacking \'%s\' from %r' % (self.__class__.__name__, stream))
            self.unpack(stream)
        else:
            self.init(**kwargs)

    @classmethod
    def get_fields(cls) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, field) for each field.'''
        return [(_, getattr(cls, _)) for _ in cls._meta.fields]

    @classmethod
    def get_header_size(cls) -> int:
        '''Size of the leading fields with a fixed size, i.e. the minimum
        amount of data needed to know how much a chunk is long.'''
        size = 0
        for _, field in cls.get_fields():
            field_size = field.fixed_size()
            if field_size is None:
                break
            size += field_size

        return size

    @classmethod
    def parse(cls, buffer):
        return cls(buffer)

    @classmethod
    def unpack_from(cls, stream: Stream):
        return cls(stream)

    def get_values(self) -> Dict[str, Any]:
        return {name: self.__dict__[name] for name in self._meta.fields}

    def __repr__(self):
        msg = []
        for field_name, value in self.get_values().items():
            msg.append('%s=%r' % (field_name, value))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, value in self.get_values().items():
            msg += '%s: %r\n' % (field_name, value)
        return msg

    def __eq__(self, other):
        if not isinstance(other, Chunk) or other.__class__ != self.__class__:
            return NotImplemented

        return self.get_values() == other.get_values()

    def __bytes__(self):
        return self.pack()

    def init(self, **kwargs):
        values = {}
        for field_name, field in self.get_fields():
            value = kwargs.pop(field_name) if field_name in kwargs else field.value_from_default()
            values[field_name] = field.prepare(value)

        if kwargs:
            raise TypeError(f'{self.__class__.__name__} has no fields named {", ".join(kwargs)}')

        # now the derived values
        for field_name, field in self.get_fields():
            field.update(values)

        self.__dict__.update(values)

    @property
    def size(self) -> int:
        size = 0
        for field_name, field in self.get_fields():
            size += field.get_size(self.__dict__[field_name])

        return size

    @property
    def raw(self) -> bytes:
        return self.pack()

    def pack(self) -> bytes:
        '''Encode the values of the fields, in order.'''
        values = self.get_values()
        value = b''
        for field_name, field in self.get_fields():
            self.logger.debug('packing %s.%s' % (self.__class__.__name__, field_name))
            value += field.pack(values[field_name], values)

        return value

    def unpack(self, stream: Stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        Each field is unpacked in order, starting from where the stream is and
        with the values of the fields before it available to resolve the
        dependencies. If something goes wrong the exception is propagated
        as is, adding to its chain the name of the field.
        '''
        values = {}
        for field_name, field in self.get_fields():
            offset = stream.tell()
            self.logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, offset))

            try:
                values[field_name] = field.unpack(stream, values)
            except PNGChunksException as e:
                e.chain.insert(0, field_name)
                if e.offset is None:
                    e.offset = offset
                raise

        self.__dict__.update(values)
