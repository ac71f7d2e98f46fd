#!/usr/bin/env python3
'''
Hide a message into a PNG file and read it back

 $ pngsecret.py encode image.png ruSt "hello world" image.secret.png
 $ pngsecret.py decode image.secret.png ruSt
 hello world
'''
import logging
import os
import sys

from pngchunks.commands import main


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger('pngchunks')
logger.setLevel(level=logging.INFO if 'DEBUG' not in os.environ else logging.DEBUG)


if __name__ == '__main__':
    sys.exit(main(sys.argv))
