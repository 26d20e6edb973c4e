'''fixed-size big-endian headers declared as annotated classes

a tiny overlay over :class:`ctypes.BigEndianStructure`: annotate a
class with ctypes types and :func:`structclass` turns it into a packed
structure.

.. doctest::

    >>> bytes(StreamHeader(count=258))
    b'\\x00\\x00\\x01\\x02'
    >>> header = StreamHeader()
    >>> readfrom(header, b'\\x00\\x00\\x00\\x07\\xff')
    4
    >>> header.count
    7
'''
from __future__ import annotations
from ctypes import BigEndianStructure, addressof, memmove, sizeof
import ctypes
import sys

from .exceptions import FormatError


def _get_hints(cls):
    # annotations are strings under `from __future__ import annotations`
    globalns = vars(sys.modules[cls.__module__])
    hints = dict()
    for name, tval in getattr(cls, '__annotations__', {}).items():
        if isinstance(tval, str):
            tval = eval(tval, globalns, dict(vars(cls)))
        hints[name] = tval
    return hints


def structclass(cls):
    dct = {k: v for k, v in vars(cls).items()
           if k not in ('__dict__', '__weakref__')}
    # packed, no padding between fields
    dct['_layout_'] = 'ms'
    dct['_pack_'] = 1
    dct['_fields_'] = list(_get_hints(cls).items())
    return type(cls.__name__, (BigEndianStructure,), dct)


def readfrom(struct, buffer, offset=0):
    '''fill ``struct`` from ``buffer`` at ``offset``

    :returns: the number of bytes consumed
    :raises FormatError: when the buffer is too short
    '''
    ret = sizeof(struct)
    chunk = bytes(buffer[offset:offset+ret])
    if len(chunk) != ret:
        raise FormatError((f'{type(struct).__name__} size: {ret}, buffer '
                           f'section size: {len(chunk)}'))
    memmove(addressof(struct), chunk, ret)
    return ret


def writeinto(struct, buffer, offset=0):
    ret = sizeof(struct)
    buffer[offset:offset+ret] = bytes(struct)
    return ret


uint32 = ctypes.c_uint32


@structclass
class StreamHeader:
    count: uint32  # number of codes in the stream
