'''12-bit codes to bytes and back

codes go out two at a time in 3 bytes, most significant bits first::

    byte0 = code1[11:4]
    byte1 = code1[3:0] code2[11:8]
    byte2 = code2[7:0]

an odd code count pads the last unit with a zero code. in the ``raw``
layout nothing tells the padding from a real trailing code 0, so
:func:`unpack` returns it as a code. the ``counted`` layout prefixes
the units with a big-endian uint32 code count which removes the
ambiguity.

.. doctest::

    >>> pack([65, 256, 257, 258])
    b'\\x04\\x11\\x00\\x10\\x11\\x02'
    >>> unpack(pack([65]))
    [65, 0]
    >>> unpack_counted(pack_counted([65]))
    [65]
'''
from __future__ import annotations
from ctypes import sizeof
import logging

from bitstring import Bits, BitStream

from .exceptions import FormatError
from .structs import StreamHeader, readfrom, writeinto
from .table import MAX, WIDTH

logger = logging.getLogger(__name__)

UNIT = 3  # bytes per pair of codes


def _code(num):
    if not 0 <= num < MAX:
        raise ValueError(f'code {num} does not fit in {WIDTH} bits')
    return Bits(uint=num, length=WIDTH)


def pack(codes) -> bytes:
    bits = [_code(code) for code in codes]
    if len(bits) % 2:
        bits.append(Bits(length=WIDTH))
    return Bits().join(bits).tobytes()


def unpack(data) -> list[int]:
    if len(data) % UNIT:
        raise FormatError((f'packed stream length {len(data)} is not '
                           f'a multiple of {UNIT}'))

    codes = []
    bits = BitStream(bytes=bytes(data))
    while bits.pos < len(bits):
        codes.extend(bits.readlist(f'uint:{WIDTH}, uint:{WIDTH}'))
    return codes


def pack_counted(codes) -> bytes:
    codes = list(codes)
    if len(codes) > 0xFFFFFFFF:
        raise ValueError(f'too many codes for a counted stream: {len(codes)}')

    header = StreamHeader(count=len(codes))
    buf = bytearray(sizeof(header))
    writeinto(header, buf)
    return bytes(buf) + pack(codes)


def unpack_counted(data) -> list[int]:
    header = StreamHeader()
    off = readfrom(header, data)
    count = header.count

    body = data[off:]
    expected = UNIT * ((count + 1) // 2)
    if len(body) != expected:
        raise FormatError((f'header announces {count} codes ({expected} '
                           f'bytes) but {len(body)} bytes follow'))

    codes = unpack(body)
    if count % 2:
        pad = codes.pop()
        if pad != 0:
            raise FormatError(f'non-zero padding code {pad}')

    logger.debug('unpacked %d codes from %d bytes', count, len(data))
    return codes
