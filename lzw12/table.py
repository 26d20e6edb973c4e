'''symbol tables shared by the encoder and the decoder

both sides grow a dictionary of byte strings in lockstep. the encoder
needs to go from a symbol to its code, the decoder from a code back to
its symbol, so there are two realizations over one reset policy.
'''
from __future__ import annotations
import logging
import abc

logger = logging.getLogger(__name__)

WIDTH = 12
MAX = 1 << WIDTH  # 4096 codes
FIRST = 256       # first dynamic code

# the 256 literal symbols, indexed by their byte value
SYMBOLS = tuple(bytes([i]) for i in range(FIRST))


class _SymbolTable(abc.ABC):
    def __init__(self):
        self.next_code = FIRST
        self._fill()

    @abc.abstractmethod
    def _fill(self):
        '''(re)build the table holding only the literal symbols'''
        raise NotImplementedError()

    @abc.abstractmethod
    def _store(self, code, symbol):
        raise NotImplementedError()

    @property
    def full(self):
        return self.next_code >= MAX

    def reset(self):
        self.next_code = FIRST
        self._fill()

    def reset_if_full(self):
        '''apply the reset policy, return whether the table was reset'''
        if not self.full:
            return False
        logger.debug('%s full at %d codes, resetting',
                     type(self).__name__, self.next_code)
        self.reset()
        return True

    def add(self, symbol: bytes) -> int:
        if self.full:
            raise OverflowError(f'{type(self).__name__} is full')
        code = self.next_code
        self._store(code, symbol)
        self.next_code += 1
        return code

    def __len__(self):
        return self.next_code


class EncodeTable(_SymbolTable):
    '''symbol -> code

    .. doctest::

        >>> table = EncodeTable()
        >>> table[b'A']
        65
        >>> table.add(b'AB')
        256
        >>> b'AB' in table, len(table)
        (True, 257)
    '''

    def _fill(self):
        self._codes = {sym: code for code, sym in enumerate(SYMBOLS)}

    def _store(self, code, symbol):
        self._codes[symbol] = code

    def __contains__(self, symbol):
        return symbol in self._codes

    def __getitem__(self, symbol: bytes) -> int:
        return self._codes[symbol]


class DecodeTable(_SymbolTable):
    '''code -> symbol

    a fixed array of `MAX` slots. dynamic slots hold ``None`` until
    assigned; use ``code in table`` to tell an assigned code from an
    unknown one before indexing.
    '''

    def _fill(self):
        self._slots = list(SYMBOLS) + [None] * (MAX - FIRST)

    def _store(self, code, symbol):
        self._slots[code] = symbol

    def __contains__(self, code):
        return 0 <= code < MAX and self._slots[code] is not None

    def __getitem__(self, code: int) -> bytes:
        if code not in self:
            raise KeyError(code)
        return self._slots[code]
