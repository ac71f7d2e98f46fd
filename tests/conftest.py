import io
import struct
import zlib

import pytest
from PIL import Image


def make_raw_chunk(chunk_type: bytes, data: bytes, crc=None) -> bytes:
    if crc is None:
        crc = zlib.crc32(chunk_type + data)

    return struct.pack('>I', len(data)) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def raw_chunk():
    return make_raw_chunk


@pytest.fixture
def minimal_png():
    '''A 1x1 grayscale image assembled by hand.'''
    ihdr = struct.pack('>IIBBBBB', 1, 1, 8, 0, 0, 0, 0)
    idat = zlib.compress(b'\x00\x00')

    return (
        b'\x89PNG\r\n\x1a\n'
        + make_raw_chunk(b'IHDR', ihdr)
        + make_raw_chunk(b'IDAT', idat)
        + make_raw_chunk(b'IEND', b'')
    )


@pytest.fixture
def red_png():
    '''$ convert -size 5x5 xc:red red.png'''
    image = Image.new('RGB', (5, 5), 'red')
    output = io.BytesIO()
    image.save(output, format='PNG')

    return output.getvalue()


@pytest.fixture
def red_png_path(tmp_path, red_png):
    path = tmp_path / 'red.png'
    path.write_bytes(red_png)

    return path
