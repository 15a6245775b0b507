# -*- Mode: Python -*-

import unittest

from sshpki.errors import Malformed_Integer
from sshpki.util import mpint

class Test (unittest.TestCase):

    def check (self, num, string):
        self.assertEqual (mpint.pack_mpint (num), string)

    def test_pack (self):
        self.check (0, b'')
        self.check (0x9a378f9b2e332a7, b'\x09\xa3\x78\xf9\xb2\xe3\x32\xa7')
        self.check (0x80, b'\0\x80')
        self.check (-0x1234, b'\xed\xcc')
        self.check (-0xdeadbeef, b'\xff\x21\x52\x41\x11')
        self.check (0xffffffff, b'\0\xff\xff\xff\xff')
        self.check (-0xffffffff, b'\xff\0\0\0\x01')
        self.check (-1, b'\377')
        self.check (-0x80, b'\x80')

    def test_encode (self):
        self.assertEqual (mpint.encode (0), b'\0\0\0\0')
        self.assertEqual (mpint.encode (0x7f), b'\0\0\0\x01\x7f')
        # top bit set: a zero byte keeps it positive
        self.assertEqual (mpint.encode (0x80), b'\0\0\0\x02\0\x80')
        self.assertEqual (mpint.encode (0x10001), b'\0\0\0\x03\x01\0\x01')

    def test_idempotence (self):
        for x in (0, 1, 0x7f, 0x80, 0xff, 0x100, 0x8000, 0xffffffff, 2 ** 1023, 2 ** 1024 - 1, 3 ** 500):
            self.assertEqual (mpint.decode (mpint.encode (x)), x)

    def test_decode_sign_byte (self):
        self.assertEqual (mpint.decode (b'\0\0\0\x02\0\x80'), 0x80)
        # no padding byte: still read as non-negative
        self.assertEqual (mpint.decode (b'\0\0\0\x01\x80'), 0x80)
        self.assertEqual (mpint.decode (b'\0\0\0\0'), 0)

    def test_decode_errors (self):
        self.assertRaises (Malformed_Integer, mpint.decode, b'')
        self.assertRaises (Malformed_Integer, mpint.decode, b'\0\0')
        self.assertRaises (Malformed_Integer, mpint.decode, b'\0\0\0\x02\x01')
        self.assertRaises (Malformed_Integer, mpint.decode, b'\0\0\0\x01\x01\x02')
        # not a byte string
        self.assertRaises (Malformed_Integer, mpint.decode, 3)
        self.assertRaises (Malformed_Integer, mpint.decode, None)
        self.assertRaises (Malformed_Integer, mpint.decode, '\0\0\0\x01\x01')

    def test_encode_negative (self):
        self.assertRaises (Malformed_Integer, mpint.encode, -1)

if __name__ == '__main__':
    unittest.main()
