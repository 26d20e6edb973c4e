from __future__ import annotations
import logging

from .table import EncodeTable, SYMBOLS

logger = logging.getLogger(__name__)


class Encoder:
    '''greedy longest-match lzw encoder

    every call to :meth:`encode` starts from a fresh table. the table of
    the last call stays around as ``self.table`` together with
    ``self.resets``: for each table reset, the index of the first code
    allowed to refer to the fresh table.

    .. doctest::

        >>> Encoder().encode(b'AAAAAAAAAA')
        [65, 256, 257, 258]
    '''

    table_class = EncodeTable

    def __init__(self):
        self.table = self.table_class()
        self.resets = []

    def encode(self, data) -> list[int]:
        table = self.table = self.table_class()
        self.resets = []
        codes = []
        s = b''

        for c in data:
            # the cursor only moves on emission so `s` is a single byte here
            if table.reset_if_full():
                self.resets.append(len(codes) + 1)

            sc = s + SYMBOLS[c]
            if sc in table:
                s = sc
                continue

            codes.append(table[s])
            table.add(sc)
            s = SYMBOLS[c]

        if s:
            codes.append(table[s])

        logger.debug('encoded %d bytes into %d codes (%d resets)',
                     len(data), len(codes), len(self.resets))
        return codes


def encode(data) -> list[int]:
    return Encoder().encode(data)
