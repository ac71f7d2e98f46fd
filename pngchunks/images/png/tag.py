'''
The chunk type is a 4-byte code where each byte is an ASCII letter: the case
of each letter (that is the bit 5 of the byte) encodes a property of the chunk

 1. ancillary bit (first byte): uppercase means critical, a decoder that
    doesn't recognize the chunk must give up
 2. private bit (second byte): uppercase means public, i.e. defined by the standard
 3. reserved bit (third byte): must be uppercase for the current version of PNG
 4. safe-to-copy bit (fourth byte): lowercase means that editors can copy the
    chunk even if they don't know it

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from functools import total_ordering

from ... import fields
from ...exceptions import InvalidTagBytes, InvalidTagLength


PROPERTY_BIT = 1 << 5


def _is_ascii_letter(byte: int) -> bool:
    return 0x41 <= byte <= 0x5a or 0x61 <= byte <= 0x7a


@total_ordering
class ChunkTag(object):
    '''Value type for the chunk type, compared byte-wise.'''

    __slots__ = ('_raw',)

    SIZE = 4

    def __init__(self, raw: bytes):
        raw = bytes(raw)

        if len(raw) != self.SIZE:
            raise InvalidTagLength(f'a chunk type has {self.SIZE} bytes, not {len(raw)}')

        for idx, byte in enumerate(raw):
            if not _is_ascii_letter(byte):
                raise InvalidTagBytes(f'byte 0x{byte:02x} at position {idx} of {raw!r} is not an ASCII letter')

        object.__setattr__(self, '_raw', raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'ChunkTag':
        return cls(raw)

    @classmethod
    def from_string(cls, value: str) -> 'ChunkTag':
        if len(value) != cls.SIZE:
            raise InvalidTagLength(f'a chunk type has {cls.SIZE} characters, \'{value}\' has {len(value)}')

        if not (value.isascii() and value.isalpha()):
            raise InvalidTagBytes(f'\'{value}\' must contain only ASCII letters')

        return cls(value.encode('ascii'))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        # copy and pickle go through the constructor, setattr is forbidden
        return (self.__class__, (self._raw,))

    @property
    def raw(self) -> bytes:
        return self._raw

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self)

    def __eq__(self, other):
        if not isinstance(other, ChunkTag):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other):
        if not isinstance(other, ChunkTag):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self):
        return hash(self._raw)

    @property
    def is_critical(self) -> bool:
        return not self._raw[0] & PROPERTY_BIT

    @property
    def is_public(self) -> bool:
        return not self._raw[1] & PROPERTY_BIT

    @property
    def is_reserved_bit_valid(self) -> bool:
        return not self._raw[2] & PROPERTY_BIT

    @property
    def is_safe_to_copy(self) -> bool:
        return bool(self._raw[3] & PROPERTY_BIT)

    @property
    def is_valid(self) -> bool:
        # the letters are checked at construction, only the reserved bit is left
        return self.is_reserved_bit_valid


class TagField(fields.Field):
    '''The 4 bytes chunk type, stored as a ChunkTag.

    When building a chunk it's possible to pass a string, raw bytes
    or a ChunkTag.'''

    def fixed_size(self):
        return ChunkTag.SIZE

    def get_size(self, value):
        return ChunkTag.SIZE

    def value_from_default(self):
        if self.default is None:
            raise ValueError(f"field '{self.name}' needs a chunk type")

        return self.default

    def prepare(self, value):
        if isinstance(value, ChunkTag):
            return value

        if isinstance(value, str):
            return ChunkTag.from_string(value)

        return ChunkTag.from_bytes(value)

    def pack(self, value, values):
        return value.raw

    def unpack(self, stream, values):
        return ChunkTag.from_bytes(stream.read_exact(ChunkTag.SIZE))
