# -*- Mode: Python -*-

import unittest

from Crypto.Hash import SHA1
from Crypto.Signature import pkcs1_15

import key_fixtures
from key_fixtures import PASSPHRASE, mpint, wire_string

from sshpki import keys
from sshpki.errors import Decryption_Failed, Signing_Failed, Unsupported_Algorithm
from sshpki.keys.rsa import RSA_Material

DIGEST = SHA1.new (b'session identifier and friends').digest()

class Test (unittest.TestCase):

    def test_rsa (self):
        key = keys.private_key_from_base64 (key_fixtures.rsa_pem(), PASSPHRASE)
        sign = keys.do_sign (key, DIGEST)
        self.assertEqual (sign.type, keys.KEYTYPE_RSA)
        self.assertIsNone (sign.dsa_sign)
        self.assertEqual (len (sign.rsa_sign), 128)
        # PKCS#1 v1.5 is deterministic: must match signing the message itself
        expected = pkcs1_15.new (key_fixtures.rsa_key()).sign (SHA1.new (b'session identifier and friends'))
        self.assertEqual (sign.rsa_sign, expected)
        self.assertTrue (keys.verify_signature (key, DIGEST, sign))
        self.assertFalse (keys.verify_signature (key, SHA1.new (b'other').digest(), sign))

    def test_dss (self):
        key = keys.private_key_from_base64 (key_fixtures.dsa_pem(), PASSPHRASE)
        sign = keys.do_sign (key, DIGEST)
        self.assertEqual (sign.type, keys.KEYTYPE_DSS)
        self.assertIsNone (sign.rsa_sign)
        r, s = sign.dsa_sign
        q = key_fixtures.dsa_key().q
        self.assertTrue (0 < r < q)
        self.assertTrue (0 < s < q)
        self.assertTrue (keys.verify_signature (key, DIGEST, sign))
        self.assertFalse (keys.verify_signature (key, SHA1.new (b'other').digest(), sign))
        # verifies with just the public half
        public = keys.key_dup (key, demote=True)
        self.assertTrue (keys.verify_signature (public, DIGEST, sign))

    def test_rsa_without_factors (self):
        rsa = key_fixtures.rsa_key()
        key = keys.SSH_Key (keys.KEYTYPE_RSA)
        key.material = RSA_Material (n=rsa.n, e=rsa.e, d=rsa.d)
        key.flags = keys.FLAG_PUBLIC | keys.FLAG_PRIVATE
        sign = keys.do_sign (key, DIGEST)
        self.assertTrue (keys.verify_signature (key, DIGEST, sign))

    def test_rsa1 (self):
        rsa = key_fixtures.rsa_key()
        key = keys.SSH_Key (keys.KEYTYPE_RSA1)
        key.material = RSA_Material (n=rsa.n, e=rsa.e, d=rsa.d, p=rsa.p, q=rsa.q)
        key.flags = keys.FLAG_PUBLIC | keys.FLAG_PRIVATE
        sign = keys.do_sign (key, DIGEST)
        self.assertEqual (sign.type, keys.KEYTYPE_RSA1)
        self.assertIsNotNone (sign.rsa_sign)

    def test_public_only (self):
        rsa = key_fixtures.rsa_key()
        key = keys.pubkey_build (keys.KEYTYPE_RSA, [mpint (rsa.e), mpint (rsa.n)])
        self.assertRaises (Signing_Failed, keys.do_sign, key, DIGEST)

    def test_digest_length (self):
        key = keys.private_key_from_base64 (key_fixtures.rsa_pem(), PASSPHRASE)
        # a buffer that still carries its leading framing byte
        self.assertRaises (Signing_Failed, keys.do_sign, key, b'\0' + DIGEST)
        self.assertRaises (Signing_Failed, keys.do_sign, key, DIGEST[:10])

    def test_engine_failure (self):
        rsa = key_fixtures.rsa_key()
        key = keys.SSH_Key (keys.KEYTYPE_RSA)
        key.material = RSA_Material (n=rsa.n, e=rsa.e, d=12345)
        key.flags = keys.FLAG_PUBLIC | keys.FLAG_PRIVATE
        self.assertRaises (Signing_Failed, keys.do_sign, key, DIGEST)

    def test_unsupported (self):
        for keytype in (keys.KEYTYPE_ECDSA, keys.KEYTYPE_UNKNOWN):
            key = keys.SSH_Key (keytype)
            key.flags = keys.FLAG_PUBLIC | keys.FLAG_PRIVATE
            self.assertRaises (Unsupported_Algorithm, keys.do_sign, key, DIGEST)

    def test_rsa_blob (self):
        key = keys.private_key_from_base64 (key_fixtures.rsa_pem(), PASSPHRASE)
        sign = keys.do_sign (key, DIGEST)
        self.assertEqual (keys.signature_to_blob (sign), wire_string ('ssh-rsa') + wire_string (sign.rsa_sign))

    def test_dss_blob (self):
        sign = keys.SSH_Signature (keys.KEYTYPE_DSS)
        sign.dsa_sign = (0x0102, 0x0304)
        blob = keys.signature_to_blob (sign)
        self.assertEqual (
            blob,
            wire_string ('ssh-dss') + wire_string (b'\0' * 18 + b'\x01\x02' + b'\0' * 18 + b'\x03\x04')
        )

    def test_dss_wide_subprime (self):
        dsa = key_fixtures.dsa2048_key()
        self.assertNotEqual (dsa.q.bit_length(), 160)
        pem = dsa.export_key ('PEM', pkcs8=False).decode ('ascii')
        key = keys.private_key_from_base64 (pem)
        self.assertTrue (key.is_private())
        self.assertRaises (Unsupported_Algorithm, keys.do_sign, key, DIGEST)

    def test_dss_blob_too_wide (self):
        sign = keys.SSH_Signature (keys.KEYTYPE_DSS)
        sign.dsa_sign = (2 ** 160, 1)
        self.assertRaises (Signing_Failed, keys.signature_to_blob, sign)
        sign.dsa_sign = (1, 2 ** 200)
        self.assertRaises (Signing_Failed, keys.signature_to_blob, sign)
        # largest value that still fits
        sign.dsa_sign = (2 ** 160 - 1, 1)
        self.assertEqual (len (keys.signature_to_blob (sign)), 4 + 7 + 4 + 40)

    def test_free (self):
        sign = keys.SSH_Signature (keys.KEYTYPE_DSS)
        sign.dsa_sign = (1, 2)
        sign.free()
        sign.free()
        self.assertIsNone (sign.dsa_sign)
        self.assertIsNone (sign.rsa_sign)

    def test_mismatched_verify (self):
        rsa_key = keys.private_key_from_base64 (key_fixtures.rsa_pem(), PASSPHRASE)
        dss_key = keys.private_key_from_base64 (key_fixtures.dsa_pem(), PASSPHRASE)
        sign = keys.do_sign (rsa_key, DIGEST)
        self.assertFalse (keys.verify_signature (dss_key, DIGEST, sign))

class End_To_End_Test (unittest.TestCase):

    def test_rsa (self):
        key = keys.private_key_from_base64 (key_fixtures.rsa_pem(), PASSPHRASE)
        self.assertEqual (key.flags, keys.FLAG_PUBLIC | keys.FLAG_PRIVATE)

        digest = bytes (range (20))
        sign = keys.do_sign (key, digest)
        self.assertIsNotNone (sign)
        self.assertEqual (sign.type, keys.KEYTYPE_RSA)
        self.assertIsNotNone (sign.rsa_sign)

        rsa = key_fixtures.rsa_key()
        self.assertEqual (rsa.e, 65537)
        n_bytes = rsa.n.to_bytes (128, 'big')
        # 1024-bit modulus: top bit set, so a zero byte is prepended
        expected = (b'\x00\x00\x00\x07ssh-rsa' +
                    b'\x00\x00\x00\x03\x01\x00\x01' +
                    b'\x00\x00\x00\x81\x00' + n_bytes)
        self.assertEqual (keys.publickey_to_blob (key), expected)

    def test_rsa_wrong_passphrase (self):
        self.assertRaises (
            Decryption_Failed,
            keys.private_key_from_base64, key_fixtures.rsa_pem(), 'wrong'
        )

if __name__ == '__main__':
    unittest.main()
