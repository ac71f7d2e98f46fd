'''
Commands to hide (and find back) messages into the chunks of a PNG file.

    encode <file> <type> <message> [<output>]
    decode <file> <type>
    remove <file> <type>
    print <file>
'''
import logging
import os
import sys
from pathlib import Path

from .exceptions import PNGChunksException
from .images.png import PNGChunk, PNGFile


logger = logging.getLogger(__name__)


def read_png(path) -> PNGFile:
    '''The whole file is read in memory before parsing.'''
    logger.debug('reading \'%s\'' % path)
    with open(path, 'rb') as f:
        data = f.read()

    return PNGFile.parse(data)


def write_png(path, png: PNGFile) -> None:
    logger.debug('writing \'%s\'' % path)
    with open(path, 'wb') as f:
        f.write(png.as_bytes())


def run_encode(file_path, chunk_type, message, output_file=None):
    png = read_png(file_path)

    # command line arguments that are not valid UTF-8 come back as they were passed
    chunk = PNGChunk.new(chunk_type, os.fsencode(message))
    png.append_chunk(chunk)

    if output_file is not None:
        write_png(output_file, png)
    else:
        logger.info('no output file given, the new chunk is not saved')


def run_decode(file_path, chunk_type):
    png = read_png(file_path)

    chunk = png.chunk_by_type(chunk_type)

    if chunk is None:
        print("That chunk doesn't exist")
        return

    print(chunk.data_as_text())


def run_remove(file_path, chunk_type):
    # NOTE: the file on disk is left untouched
    png = read_png(file_path)

    chunk = png.remove_chunk(chunk_type)

    print(chunk.data_as_text())


def run_print(file_path):
    png = read_png(file_path)

    print(png)


COMMANDS = {
    # name: (function, min args, max args)
    'encode': (run_encode, 3, 4),
    'decode': (run_decode, 2, 2),
    'remove': (run_remove, 2, 2),
    'print': (run_print, 1, 1),
}


def usage(progname):
    print(f'''usage: {progname} encode <png file path> <chunk type> <message> [<output file path>]
       {progname} decode <png file path> <chunk type>
       {progname} remove <png file path> <chunk type>
       {progname} print <png file path>''', file=sys.stderr)


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    progname = Path(argv[0]).name if argv else 'pngsecret'

    if len(argv) < 2 or argv[1] not in COMMANDS:
        usage(progname)
        return 1

    command, min_args, max_args = COMMANDS[argv[1]]
    args = argv[2:]

    if not min_args <= len(args) <= max_args:
        usage(progname)
        return 1

    try:
        command(*args)
    except (PNGChunksException, OSError) as e:
        logger.debug('command \'%s\' failed', argv[1], exc_info=True)
        print(f'{progname}: error: {e}', file=sys.stderr)
        return 1

    return 0
