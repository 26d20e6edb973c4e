'''command line: ``lzw12 [options] <c|d> <input> <output>``'''
from __future__ import annotations
import argparse
import logging
import time

from .compression import Format, compress_file, decompress_file
from .exceptions import ArgumentError, FormatError

logger = logging.getLogger('lzw12')

OPERATIONS = {
    'c': ('Compression', compress_file),
    'd': ('Decompression', decompress_file),
}


class _Parser(argparse.ArgumentParser):
    # argparse exits on errors, we want them before any I/O as exceptions
    def error(self, message):
        raise ArgumentError(message)


def _parser():
    parser = _Parser(
        prog='lzw12',
        description='12-bit LZW compression and decompression of files')
    parser.add_argument('operation', choices=sorted(OPERATIONS),
                        help='c to compress, d to decompress')
    parser.add_argument('input', help='file to read')
    parser.add_argument('output', help='file to write')
    parser.add_argument('-f', '--format', default=Format.COUNTED.value,
                        choices=[f.value for f in Format],
                        help=('layout of the compressed file: "counted" '
                              'stores the number of codes, "raw" is the '
                              'headerless historical layout '
                              '(default: %(default)s)'))
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log debugging information')
    return parser


def main(argv=None):
    parser = _parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as e:
        logging.basicConfig(format='%(levelname)s: %(message)s')
        logger.error('%s\n%s', e, parser.format_usage().rstrip())
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s')

    name, func = OPERATIONS[args.operation]
    start = time.perf_counter()
    try:
        insize, outsize = func(args.input, args.output, args.format)
    except OSError as e:
        logger.error('%s failed: %s', name, e)
        return 1
    except FormatError as e:
        logger.error('%s failed: %s: %s', name, args.input, e)
        return 1

    elapsed = (time.perf_counter() - start) * 1000
    logger.info('%s time: %d ms', name, elapsed)
    logger.info('%s: %d -> %d bytes', args.output, insize, outsize)
    original, packed = (insize, outsize) if func is compress_file \
        else (outsize, insize)
    if packed:
        logger.info('compression ratio (original/compressed): %.3f',
                    original / packed)
    return 0
