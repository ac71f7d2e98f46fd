class PNGChunksException(Exception):
    '''Base class to extend in order to throw exception in pngchunks.

    It takes an optional argument that represents the chain of the layers that
    caused the exception and the offset in the stream where the failing field starts.
    '''

    def __init__(self, message='', chain=None, offset=None):
        self.chain = chain if chain is not None else []
        self.offset = offset
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.chain:
            msg = '%s: %s' % ('.'.join(str(_) for _ in self.chain), msg)
        if self.offset is not None:
            msg = '%s (at offset 0x%x)' % (msg, self.offset)
        return msg


class InvalidTagLength(PNGChunksException):
    pass


class UnpackException(PNGChunksException):
    '''Something went wrong while decoding binary data.'''
    pass


class InvalidTagBytes(UnpackException):
    pass


class UnexpectedEof(UnpackException):
    pass


class ChecksumMismatch(UnpackException):
    pass


class BadSignature(UnpackException):
    pass


class TrailingBytes(UnpackException):
    '''Some bytes are left after the last chunk but not enough for a new one.'''
    pass


class ChunkNotFound(PNGChunksException, LookupError):
    pass


class InvalidUtf8(PNGChunksException, ValueError):
    pass
