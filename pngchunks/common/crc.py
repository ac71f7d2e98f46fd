'''
We are implementing fields to handle CRC calculation.
'''
from zlib import crc32 as _crc32

from .. import fields
from ..exceptions import ChecksumMismatch


def crc32(data: bytes) -> int:
    return _crc32(data) & 0xffffffff


class CRCField(fields.StructField):
    """standard CRC methods with pre and post conditioning, as defined by ISO 3309 [ISO-3309]
    or ITU-T V.42 [ITU-V42]. The CRC polynomial employed is

      x^32+x^26+x^23+x^22+x^16+x^12+x^11+x^10+x^8+x^7+x^5+x^4+x^2+x+1

    The 32-bit CRC register is initialized to all 1's, and then the data from each byte is processed
    from the least significant bit (1) to the most significant bit (128). After all the data bytes are processed,
    the CRC register is inverted (its ones complement is taken). This value is transmitted (stored in the file)
    MSB first.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.

    The fields named at construction must be declared before this one.
    """

    def __init__(self, fields, *args, **kwargs):
        super().__init__('I', *args, **kwargs)
        self.fields = fields

    def calculate(self, values) -> int:
        value = b''
        for field_name in self.fields:
            field = getattr(self.father, field_name)
            value += field.pack(values[field_name], values)

        return crc32(value)

    def update(self, values):
        values[self.name] = self.calculate(values)

    def unpack(self, stream, values):
        value = super().unpack(stream, values)
        expected = self.calculate(values)

        if value != expected:
            self.logger.debug('stored crc 0x%08x, computed 0x%08x' % (value, expected))
            raise ChecksumMismatch(f'crc is 0x{value:08x} but the data says 0x{expected:08x}')

        return value
