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
# sshpki.keys.dss
#
# Encapsulates the DSS key material.

from Crypto.PublicKey import DSA
from Crypto.Signature import DSS
from Crypto.Util import number

from sshpki.keys.engine import Prehashed_SHA1

class DSS_Material:

    """DSS_Material(**fields)
    The integers of a DSA key.

    p        = public prime number
    q        = public 160-bit subprime, q | p-1
    g        = public generator of subgroup
    pub_key  = public key y = g^x
    priv_key = private key x
    """

    # In wire order.
    public_fields = ('p', 'q', 'g', 'pub_key')
    private_fields = ('priv_key',)
    optional_fields = ()

    p = None
    q = None
    g = None
    pub_key = None
    priv_key = None

    def __init__(self, **fields):
        for name, value in fields.items():
            if name not in self.public_fields and name not in self.private_fields:
                raise TypeError(name)
            setattr(self, name, value)

    @classmethod
    def from_engine(cls, dsa_obj):
        """from_engine(cls, dsa_obj) -> DSS_Material
        Copies the integers out of a Crypto.PublicKey.DSA key.
        """
        self = cls(p=int(dsa_obj.p), q=int(dsa_obj.q), g=int(dsa_obj.g), pub_key=int(dsa_obj.y))
        if dsa_obj.has_private():
            self.priv_key = int(dsa_obj.x)
        return self

    def to_engine(self, private=True):
        """to_engine(self, private=True) -> Crypto.PublicKey.DSA key"""
        if private:
            return DSA.construct((self.pub_key, self.g, self.p, self.q, self.priv_key))
        return DSA.construct((self.pub_key, self.g, self.p, self.q))

    def has_private(self):
        return self.priv_key is not None

    def burn(self):
        for name in self.public_fields + self.private_fields:
            if getattr(self, name) is not None:
                setattr(self, name, 0)

    def sign(self, digest):
        """sign(self, digest) -> (r, s)
        DSA signature of <digest> with a fresh random nonce.
        """
        signer = DSS.new(self.to_engine(), 'fips-186-3')
        blob = signer.sign(Prehashed_SHA1(digest))
        half = len(blob) // 2
        return number.bytes_to_long(blob[:half]), number.bytes_to_long(blob[half:])

    def verify(self, digest, signature):
        """verify(self, digest, (r, s)) -> boolean"""
        r, s = signature
        size = (self.q.bit_length() + 7) // 8
        blob = number.long_to_bytes(r, size) + number.long_to_bytes(s, size)
        try:
            DSS.new(self.to_engine(private=False), 'fips-186-3').verify(Prehashed_SHA1(digest), blob)
        except (ValueError, TypeError):
            return False
        return True
