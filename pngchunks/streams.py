import io
import logging

from .exceptions import UnexpectedEof


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes-like objects to
    uniform their properties: mainly we need a read_exact() method
    that fails loudly when the data is not there.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' cannot be used as a stream' % self.obj.__class__.__name__)

        init_method()

        self.size = self.obj.seek(0, io.SEEK_END)
        self.obj.seek(0)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return '<%s(%s, offset=%d, size=%d)>' % (
            self.__class__.__name__, self._type.__name__, self.tell(), self.size)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

        return self

    def remaining(self):
        return self.size - self.tell()

    def at_end(self):
        return self.remaining() == 0

    def read_exact(self, n):
        '''Read exactly n bytes or raise UnexpectedEof leaving the stream where it was.'''
        offset = self.tell()
        data = self.obj.read(n)

        if len(data) != n:
            self.obj.seek(offset)
            logger.debug('wanted %d bytes at offset %d, only %d available', n, offset, len(data))
            raise UnexpectedEof(
                'expected %d bytes but only %d are available' % (n, len(data)),
                offset=offset,
            )

        return data

