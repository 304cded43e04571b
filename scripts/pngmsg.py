#!/usr/bin/env python3
'''
Hide, read and remove messages in PNG chunks.

 $ pngmsg.py encode image.png ruSt 'hello world' out.png
 $ pngmsg.py decode out.png ruSt
'''
import logging
import sys
import os

from pngme import commands
from pngme.exceptions import PngmeException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <command> <args...>

 encode <png file> <chunk type> <message> [output file]
 decode <png file> <chunk type>
 remove <png file> <chunk type> [output file]
 print <png file>
 identify-text <png file>''')
    sys.exit(1)


def main(progname, argv):
    if len(argv) < 2:
        usage(progname)

    command, path, args = argv[0], argv[1], argv[2:]

    if command == 'encode' and len(args) in (2, 3):
        commands.encode_file(path, *args)
        print(f'Writing out file to {args[2] if len(args) == 3 else path}')
    elif command == 'decode' and len(args) == 1:
        print(commands.decode_file(path, args[0]))
    elif command == 'remove' and len(args) in (1, 2):
        commands.remove_file(path, *args)
        print(f'Writing out file to {args[1] if len(args) == 2 else path}')
    elif command == 'print' and not args:
        for info in commands.print_file(path):
            print(f'[{info.index:02d}] {info.chunk_type} length={info.length} data={info.data_length} crc=0x{info.crc:08x}')
    elif command == 'identify-text' and not args:
        for text in commands.identify_text_file(path):
            print(f'{text.index} - {text.chunk_type} - {text.text}')
    else:
        usage(progname)


if __name__ == '__main__':
    try:
        main(sys.argv[0], sys.argv[1:])
    except (PngmeException, OSError) as e:
        logger.debug('failed', exc_info=True)
        location = f' (at {e.path})' if isinstance(e, PngmeException) and e.chain else ''
        print(f'error: {e}{location}', file=sys.stderr)
        sys.exit(1)
