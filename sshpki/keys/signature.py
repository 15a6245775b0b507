# Copyright (c) 2002-2012 IronPort Systems and Cisco Systems
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

#
# sshpki.keys.signature
#
# Signs digests with private keys.
#
# The digest is computed by the caller.  Callers working with a buffer that
# carries a leading framing byte strip it before calling do_sign; nothing
# here skips bytes on their behalf.
#

from Crypto.Util import number

from sshpki.errors import Signing_Failed, Unsupported_Algorithm
from sshpki.keys import key as ssh_key
from sshpki.util import packet

# Length of the SHA-1 digest the signer expects.
SHA_DIGEST_LEN = 20

# ssh-dss carries r and s as fixed 20-byte integers, so q must be 160 bits.
DSS_Q_BITS = 160
DSS_SIG_LEN = DSS_Q_BITS // 8

class SSH_Signature:

    """SSH_Signature(keytype)
    A signature made by do_sign.

    <rsa_sign>: The RSA signature value (bytes, as long as the modulus).
    <dsa_sign>: The DSA (r, s) pair.

    Only the member matching <type> is set.
    """

    def __init__(self, keytype):
        self.type = keytype
        self.rsa_sign = None
        self.dsa_sign = None

    def free(self):
        self.rsa_sign = None
        self.dsa_sign = None

    def __repr__(self):
        return '<SSH_Signature type=%s>' % (ssh_key.key_type_to_char(self.type),)

def do_sign(key, digest):
    """do_sign(key, digest) -> SSH_Signature
    Signs <digest> (exactly SHA_DIGEST_LEN bytes) with the private half of
    <key>.

    Raises Signing_Failed if the key has no private material, the digest has
    the wrong length, or the engine refuses to sign.  Raises
    Unsupported_Algorithm for a DSS key whose q is not 160 bits.
    """
    if not ssh_key.is_supported(key.type):
        raise Unsupported_Algorithm(key.type)
    if key.type == ssh_key.KEYTYPE_DSS and key.material is not None and key.material.q is not None:
        if key.material.q.bit_length() != DSS_Q_BITS:
            raise Unsupported_Algorithm('%s with %d-bit q' % (key.type_c, key.material.q.bit_length()))
    if not key.is_private():
        raise Signing_Failed('%s key has no private material' % (key.type_c,))
    if len(digest) != SHA_DIGEST_LEN:
        raise Signing_Failed('digest is %d bytes, expected %d' % (len(digest), SHA_DIGEST_LEN))

    sign = SSH_Signature(key.type)
    try:
        if key.type == ssh_key.KEYTYPE_DSS:
            sign.dsa_sign = key.material.sign(digest)
        else:
            sign.rsa_sign = key.material.sign(digest)
    except (MemoryError, ValueError, TypeError, AttributeError) as e:
        sign.free()
        raise Signing_Failed('%s signing failed: %s' % (key.type_c, e))
    return sign

def signature_to_blob(sign):
    """signature_to_blob(sign) -> bytes
    Returns the wire form of the signature:

        string  "ssh-rsa" / "ssh-dss"
        string  signature blob

    The DSS blob is r and s as 20-byte big-endian integers, concatenated.
    Raises Signing_Failed if either does not fit in 20 bytes.
    """
    name = ssh_key.key_type_to_char(sign.type)
    if sign.type == ssh_key.KEYTYPE_DSS:
        r, s = sign.dsa_sign
        if r.bit_length() > DSS_Q_BITS or s.bit_length() > DSS_Q_BITS:
            raise Signing_Failed('DSS signature does not fit in %d bytes' % (DSS_SIG_LEN,))
        blob = number.long_to_bytes(r, DSS_SIG_LEN) + number.long_to_bytes(s, DSS_SIG_LEN)
    elif sign.type in (ssh_key.KEYTYPE_RSA, ssh_key.KEYTYPE_RSA1):
        blob = sign.rsa_sign
    else:
        raise Unsupported_Algorithm(sign.type)
    return packet.pack_payload(SIG_PAYLOAD, (name, blob))

def verify_signature(key, digest, sign):
    """verify_signature(key, digest, sign) -> boolean
    Returns true if <sign> is a signature of <digest> by <key>.
    """
    if not ssh_key.is_supported(key.type):
        raise Unsupported_Algorithm(key.type)
    if sign.type != key.type or not key.is_public():
        return False
    if key.type == ssh_key.KEYTYPE_DSS:
        if sign.dsa_sign is None:
            return False
        return key.material.verify(digest, sign.dsa_sign)
    if sign.rsa_sign is None:
        return False
    return key.material.verify(digest, sign.rsa_sign)

SIG_PAYLOAD = (packet.STRING,  # "ssh-rsa" / "ssh-dss"
               packet.STRING   # signature_key_blob
              )
