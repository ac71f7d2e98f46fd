import pytest

from pngchunks.exceptions import UnexpectedEof
from pngchunks.streams import Stream


def test_stream_from_bytes_like():
    for obj in (b'kebab', bytearray(b'kebab'), memoryview(b'kebab')):
        stream = Stream(obj)

        assert stream.size == 5
        assert stream.tell() == 0
        assert stream.read_exact(2) == b'ke'
        assert stream.remaining() == 3
        assert not stream.at_end()
        assert stream.read_exact(3) == b'bab'
        assert stream.at_end()


def test_stream_wrong_type():
    with pytest.raises(ValueError):
        Stream(12)


def test_stream_read_exact_eof():
    """A short read must not move the stream."""
    stream = Stream(b'\x00\x01\x02')
    stream.seek(1)

    with pytest.raises(UnexpectedEof) as excinfo:
        stream.read_exact(3)

    assert excinfo.value.offset == 1
    assert stream.tell() == 1
    assert stream.read_exact(0) == b''
