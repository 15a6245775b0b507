# -*- Mode: Python -*-

import unittest

from sshpki.util import packet

class Test (unittest.TestCase):

    def test_pack_string (self):
        data = packet.pack_payload ((packet.STRING, packet.STRING), ('ssh-rsa', b'\x01\x02'))
        self.assertEqual (data, b'\x00\x00\x00\x07ssh-rsa\x00\x00\x00\x02\x01\x02')

    def test_unpack_string (self):
        data = b'\x00\x00\x00\x07ssh-rsa\x00\x00\x00\x00'
        values, offset = packet.unpack_payload_get_offset ((packet.STRING, packet.STRING), data)
        self.assertEqual (values, [b'ssh-rsa', b''])
        self.assertEqual (offset, len (data))

    def test_offset (self):
        data = b'\x00\x00\x00\x07ssh-dss\x00\x00\x00\x01\x7f'
        values, offset = packet.unpack_payload_get_offset ((packet.FRAMED_MPINT,), data, 11)
        self.assertEqual (values, [b'\x00\x00\x00\x01\x7f'])
        self.assertEqual (offset, len (data))

    def test_framed_mpint (self):
        data = b'\x00\x00\x00\x01\x7f\x00\x00\x00\x00'
        values, offset = packet.unpack_payload_get_offset (
            (packet.FRAMED_MPINT, packet.FRAMED_MPINT), data)
        self.assertEqual (values, [b'\x00\x00\x00\x01\x7f', b'\x00\x00\x00\x00'])
        self.assertEqual (offset, len (data))
        self.assertEqual (packet.pack_payload ((packet.FRAMED_MPINT, packet.FRAMED_MPINT), values), data)

    def test_truncated (self):
        self.assertRaises (
            packet.Truncated_Payload,
            packet.unpack_payload_get_offset, (packet.STRING,), b'\x00\x00\x00\x07ssh'
        )
        self.assertRaises (
            packet.Truncated_Payload,
            packet.unpack_payload_get_offset, (packet.FRAMED_MPINT,), b'\x00\x00'
        )

    def test_unknown_format_code (self):
        self.assertRaises (ValueError, packet.pack_payload, ('bogus',), (1,))
        self.assertRaises (ValueError, packet.unpack_payload_get_offset, ('bogus',), b'\x00')

if __name__ == '__main__':
    unittest.main()
