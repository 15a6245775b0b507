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
# sshpki.keys.rsa
#
# Encapsulates the RSA key material.

from Crypto.PublicKey import RSA
from Crypto.Signature import pkcs1_15
from Crypto.Util import number

from sshpki.keys.engine import Prehashed_SHA1

class RSA_Material:

    """RSA_Material(**fields)
    The integers of an RSA key.

    n    = public modulus
    e    = public exponent
    d    = private exponent
    p    = secret prime factor
    q    = secret prime factor
    dmp1 = d mod (p-1)
    dmq1 = d mod (q-1)
    iqmp = q^-1 mod p

    p, q, dmp1, dmq1 and iqmp may be None in private keys, but the RSA
    operations are much faster when these values are available.
    """

    # In wire order.
    public_fields = ('e', 'n')
    private_fields = ('d', 'p', 'q', 'dmp1', 'dmq1', 'iqmp')
    # Fields that are allowed to be absent even when d is present.
    optional_fields = ('p', 'q', 'dmp1', 'dmq1', 'iqmp')

    n = None
    e = None
    d = None
    p = None
    q = None
    dmp1 = None
    dmq1 = None
    iqmp = None

    def __init__(self, **fields):
        for name, value in fields.items():
            if name not in self.public_fields and name not in self.private_fields:
                raise TypeError(name)
            setattr(self, name, value)

    @classmethod
    def from_engine(cls, rsa_obj):
        """from_engine(cls, rsa_obj) -> RSA_Material
        Copies the integers out of a Crypto.PublicKey.RSA key.
        """
        self = cls(n=int(rsa_obj.n), e=int(rsa_obj.e))
        if rsa_obj.has_private():
            d, p, q = int(rsa_obj.d), int(rsa_obj.p), int(rsa_obj.q)
            self.d = d
            self.p = p
            self.q = q
            self.dmp1 = d % (p - 1)
            self.dmq1 = d % (q - 1)
            self.iqmp = number.inverse(q, p)
        return self

    def to_engine(self, private=True):
        """to_engine(self, private=True) -> Crypto.PublicKey.RSA key"""
        if not private:
            return RSA.construct((self.n, self.e))
        if self.p is not None and self.q is not None:
            return RSA.construct((self.n, self.e, self.d, self.p, self.q))
        # The engine recovers the factors from d.
        return RSA.construct((self.n, self.e, self.d))

    def has_private(self):
        return self.d is not None

    def burn(self):
        """burn(self) -> None
        Overwrites every integer with zero.
        """
        for name in self.public_fields + self.private_fields:
            if getattr(self, name) is not None:
                setattr(self, name, 0)

    def sign(self, digest):
        """sign(self, digest) -> signature bytes
        PKCS#1 v1.5 signature over the SHA-1 DigestInfo of <digest>.
        The result is as long as the modulus.
        """
        return pkcs1_15.new(self.to_engine()).sign(Prehashed_SHA1(digest))

    def verify(self, digest, signature):
        try:
            pkcs1_15.new(self.to_engine(private=False)).verify(Prehashed_SHA1(digest), signature)
        except (ValueError, TypeError):
            return False
        return True
