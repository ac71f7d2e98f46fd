import logging


logger = logging.getLogger(__name__)

PREVIEW_SIZE = 32


def iter_chunks_by_name(chunks, name):
    '''Yield the chunks whose type is the given name (a string or a ChunkTag), in file order.'''
    name = str(name)
    return (chunk for chunk in chunks if str(chunk.type) == name)


def preview_data(data: bytes, n=PREVIEW_SIZE) -> str:
    '''Return a printable preview of the payload: the text if it's printable
    UTF-8, the hexadecimal representation otherwise.'''
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError:
        text = None

    if text is not None and text.isprintable():
        return repr(text if len(text) <= n else text[:n] + '...')

    logger.debug('binary payload of %d bytes, using hex' % len(data))

    return data[:n].hex() + ('...' if len(data) > n else '')


def describe_chunk(idx, chunk) -> str:
    return '[{idx:02d}] {type} {kind:<9} length={length:<8d} crc=0x{crc:08x} {preview}'.format(
        idx=idx,
        type=chunk.type,
        kind='critical' if chunk.is_critical() else 'ancillary',
        length=chunk.length,
        crc=chunk.crc,
        preview=preview_data(chunk.data),
    )
