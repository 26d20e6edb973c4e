from lzw12.packing import pack, unpack, pack_counted, unpack_counted
from lzw12.exceptions import FormatError
from lzw12.structs import (StreamHeader, structclass, readfrom, writeinto,
                           uint32)

from ctypes import sizeof
import unittest


class TestPack(unittest.TestCase):
    def test_pair(self):
        self.assertEqual(pack([0xABC, 0xDEF]), b'\xab\xcd\xef')
        self.assertEqual(pack([65, 256]), b'\x04\x11\x00')

    def test_odd(self):
        self.assertEqual(pack([0xABC]), b'\xab\xc0\x00')
        self.assertEqual(pack([1, 2, 3]), b'\x00\x10\x02\x00\x30\x00')

    def test_empty(self):
        self.assertEqual(pack([]), b'')
        self.assertEqual(unpack(b''), [])

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            pack([4096])
        with self.assertRaises(ValueError):
            pack([-1])

    def test_inverse(self):
        edges = [0, 1, 0x0F, 0xF0, 0xFF, 0x100, 0x800, 0xF0F, 0xFFE, 0xFFF]
        for a in edges:
            for b in edges:
                self.assertEqual(unpack(pack([a, b])), [a, b])

    def test_unpack(self):
        self.assertEqual(unpack(b'\x04\x11\x00\x10\x11\x02'),
                         [65, 256, 257, 258])
        self.assertEqual(unpack(b'\xff\xff\xff'), [4095, 4095])

    def test_raw_padding_ambiguity(self):
        # an odd sequence and the same sequence with a real trailing 0
        # pack to the same bytes
        self.assertEqual(pack([65]), pack([65, 0]))
        self.assertEqual(unpack(pack([65])), [65, 0])

    def test_bad_length(self):
        for data in (b'\x00', b'\x00\x00', b'\x00\x00\x00\x00'):
            with self.assertRaises(FormatError):
                unpack(data)


class TestCounted(unittest.TestCase):
    def test_layout(self):
        self.assertEqual(pack_counted([65, 256, 257, 258]),
                         b'\x00\x00\x00\x04\x04\x11\x00\x10\x11\x02')
        self.assertEqual(pack_counted([]), b'\x00\x00\x00\x00')

    def test_odd(self):
        self.assertEqual(unpack_counted(pack_counted([65])), [65])
        self.assertEqual(unpack_counted(pack_counted([65, 0])), [65, 0])
        self.assertEqual(unpack_counted(pack_counted([1, 2, 3])), [1, 2, 3])

    def test_inverse(self):
        codes = list(range(0, 4096, 7))
        self.assertEqual(unpack_counted(pack_counted(codes)), codes)

    def test_short_header(self):
        with self.assertRaises(FormatError):
            unpack_counted(b'\x00\x00')

    def test_length_mismatch(self):
        data = pack_counted([1, 2, 3])
        with self.assertRaises(FormatError):
            unpack_counted(data[:-1])
        with self.assertRaises(FormatError):
            unpack_counted(data + b'\x00\x00\x00')
        with self.assertRaises(FormatError):
            unpack_counted(b'\x00\x00\x00\x05' + data[4:])

    def test_bad_padding(self):
        with self.assertRaises(FormatError):
            unpack_counted(b'\x00\x00\x00\x01\x04\x10\x01')


class TestHeader(unittest.TestCase):
    def test_size(self):
        self.assertEqual(sizeof(StreamHeader), 4)

    def test_writeinto(self):
        header = StreamHeader(count=0x01020304)
        buf = bytearray(4)
        self.assertEqual(writeinto(header, buf), 4)
        self.assertEqual(bytes(buf), b'\x01\x02\x03\x04')

    def test_readfrom(self):
        header = StreamHeader()
        self.assertEqual(readfrom(header, b'\xff\x00\x00\x00\x02\x01', 1), 4)
        self.assertEqual(header.count, 2)

    def test_structclass_packed(self):
        @structclass
        class pair:
            tag: uint32
            value: uint32

        self.assertEqual(sizeof(pair), 8)
        self.assertEqual(bytes(pair(tag=1, value=0x0203)),
                         b'\x00\x00\x00\x01\x00\x00\x02\x03')

    def test_readfrom_short(self):
        with self.assertRaises(FormatError):
            readfrom(StreamHeader(), b'\x00\x00\x00', 0)
