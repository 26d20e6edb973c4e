from __future__ import annotations
import logging

from .exceptions import FormatError
from .table import DecodeTable, FIRST

logger = logging.getLogger(__name__)


class Decoder:
    '''mirror of :class:`Encoder <lzw12.encoder.Encoder>`

    the decoder learns each table entry one code late: the entry the
    encoder added while emitting code ``i`` is only known once code
    ``i + 1`` shows its first byte. when code ``i + 1`` is that very
    entry (the KwK case), its first byte is the first byte of code ``i``.

    ``self.resets`` holds, for each table reset, the index of the code
    processed right after the reset. for a stream coming from the
    encoder it matches :attr:`Encoder.resets`.

    .. doctest::

        >>> Decoder().decode([65, 256, 257, 258])
        b'AAAAAAAAAA'
    '''

    table_class = DecodeTable

    def __init__(self):
        self.table = self.table_class()
        self.resets = []

    def decode(self, codes) -> bytes:
        table = self.table = self.table_class()
        self.resets = []
        if not codes:
            return b''

        first = codes[0]
        if not 0 <= first < FIRST:
            raise FormatError(f'first code {first} is not a literal')
        pcw = table[first]
        out = bytearray(pcw)

        for index in range(1, len(codes)):
            cw = codes[index]
            if table.reset_if_full():
                self.resets.append(index)

            if cw in table:
                entry = table[cw]
            elif cw == table.next_code:
                entry = pcw + pcw[:1]
            else:
                raise FormatError(
                    f'code {cw} at index {index} is not assigned '
                    f'(next code is {table.next_code})')

            table.add(pcw + entry[:1])
            out += entry
            pcw = entry

        logger.debug('decoded %d codes into %d bytes (%d resets)',
                     len(codes), len(out), len(self.resets))
        return bytes(out)


def decode(codes) -> bytes:
    return Decoder().decode(codes)
