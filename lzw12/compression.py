'''byte and file level entry points

.. doctest::

    >>> compress(b'AAAAAAAAAA', 'raw')
    b'\\x04\\x11\\x00\\x10\\x11\\x02'
    >>> decompress(compress(b'TOBEORNOTTOBEORTOBEORNOT'))
    b'TOBEORNOTTOBEORTOBEORNOT'
'''
from __future__ import annotations
from pathlib import Path
import tempfile
import logging
import enum
import stat
import os

from .decoder import decode
from .encoder import encode
from .packing import pack, pack_counted, unpack, unpack_counted

logger = logging.getLogger(__name__)


class Format(enum.Enum):
    # no header, bit-exact with the historical layout
    RAW = 'raw'
    # uint32 code count, then the same units
    COUNTED = 'counted'


_PACKERS = {
    Format.RAW: (pack, unpack),
    Format.COUNTED: (pack_counted, unpack_counted),
}


def compress(data, fmt=Format.COUNTED) -> bytes:
    packer, _ = _PACKERS[Format(fmt)]
    return packer(encode(data))


def decompress(data, fmt=Format.COUNTED) -> bytes:
    _, unpacker = _PACKERS[Format(fmt)]
    return decode(unpacker(data))


def _mode_for(path):
    # what a plain open(path, "wb") would leave behind
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_atomic(path, data):
    # write next to the destination so that the rename stays on one device
    path = Path(path)
    mode = _mode_for(path)
    tmp = tempfile.NamedTemporaryFile(
        dir=path.parent, prefix=f'.{path.name}.', suffix='.tmp', delete=False)
    try:
        with tmp:
            tmp.write(data)
        os.chmod(tmp.name, mode)
        os.replace(tmp.name, path)
    except BaseException:
        os.unlink(tmp.name)
        raise


def _transform(func, src, dst, fmt):
    with open(src, 'rb') as f:
        data = f.read()
    out = func(data, fmt)
    _write_atomic(dst, out)
    logger.debug('%s: %s (%d bytes) -> %s (%d bytes)',
                 func.__name__, src, len(data), dst, len(out))
    return len(data), len(out)


def compress_file(src, dst, fmt=Format.COUNTED):
    '''compress file ``src`` into ``dst``

    ``dst`` is replaced only once the whole output is written.

    :returns: a tuple (input size, output size)
    '''
    return _transform(compress, src, dst, fmt)


def decompress_file(src, dst, fmt=Format.COUNTED):
    '''decompress file ``src`` into ``dst``, see :func:`compress_file`'''
    return _transform(decompress, src, dst, fmt)
