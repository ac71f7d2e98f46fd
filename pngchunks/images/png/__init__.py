'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html> and
is available a full test-suite with a lot of PNG images covering all
the possible cases at <http://www.schaik.com/pngsuite/>.

Here the file is handled at the chunk level only: the payloads are opaque
bytes, nothing is decompressed.
'''
from typing import Optional

from pngchunks.core import Chunk
from pngchunks import (
    fields,
)
from pngchunks.meta import Endianess
from pngchunks.properties import Dependency
from pngchunks.common import crc
from pngchunks.exceptions import ChunkNotFound, InvalidUtf8

from .tag import ChunkTag, TagField
from . import utils


PNG_SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class PNGChunk(Chunk):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

    A chunk is defined as critical or ancillary depending on the case of the
    starting letter of the type field.

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.

    # Critical chunks

     1. IHDR: contains image's width, height, bit depth, color type, compression method, filter method and interlace method
     2. PLTE: contains the palette data
     3. IDAT: contains the actual image data (compressed)
     4. IEND: is the terminator chunk
    '''
    length = fields.StructField('I', endianess=Endianess.BIG_ENDIAN)  # big endian
    type   = TagField()
    data   = fields.StringField(Dependency('.length'))
    crc    = crc.CRCField(['type', 'data'], endianess=Endianess.BIG_ENDIAN)  # network byte order

    @classmethod
    def new(cls, chunk_type, data: bytes) -> 'PNGChunk':
        return cls(type=chunk_type, data=data)

    def is_critical(self) -> bool:
        return self.type.is_critical

    def data_as_text(self) -> str:
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidUtf8(f'the data of chunk {self.type} is not valid UTF-8: {e.reason}') from e


class PNGFile(Chunk):
    header = fields.StringField(8, default=PNG_SIGNATURE, is_magic=True)
    chunks = fields.ArrayField(PNGChunk)

    def __str__(self):
        return '\n'.join(utils.describe_chunk(idx, chunk) for idx, chunk in enumerate(self.chunks))

    def append_chunk(self, chunk: PNGChunk) -> None:
        if not isinstance(chunk, PNGChunk):
            raise ValueError(f'only PNGChunk can be appended, not {chunk.__class__.__name__}')

        self.logger.debug(f'appending chunk {chunk.type} after {len(self.chunks)} chunks')
        self.chunks.append(chunk)

    def chunk_by_type(self, chunk_type) -> Optional[PNGChunk]:
        return next(utils.iter_chunks_by_name(self.chunks, chunk_type), None)

    def remove_chunk(self, chunk_type) -> PNGChunk:
        chunk_type = str(chunk_type)
        for idx, chunk in enumerate(self.chunks):
            if str(chunk.type) == chunk_type:
                self.logger.debug(f'removing chunk #{idx} with type {chunk_type}')
                return self.chunks.pop(idx)

        raise ChunkNotFound(f'no chunk with type \'{chunk_type}\'')

    def as_bytes(self) -> bytes:
        return self.pack()
