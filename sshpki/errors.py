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
# sshpki.errors
#
# Exceptions raised by the key layer.
#
# Every operation either returns a complete result or raises one of these.
# Nothing here is retried.
#

class PKI_Error(Exception):
    pass

class Malformed_Integer(PKI_Error):
    pass

class Unsupported_Algorithm(PKI_Error):

    """Unsupported_Algorithm(keytype)
    Raised for key types this layer does not handle (ECDSA, unknown
    types, or unrecognized wire names).

    <keytype>: The key type constant or wire name that was rejected.
    """

    def __init__(self, keytype):
        self.keytype = keytype
        PKI_Error.__init__(self, keytype)

    def __str__(self):
        return '<Unsupported_Algorithm: %r>' % (self.keytype,)

class Unknown_Key_Format(PKI_Error):
    pass

class Decryption_Failed(PKI_Error):
    """The private key could not be decoded.  A wrong passphrase and corrupt
    data are reported identically."""
    pass

class Crypto_Allocation_Failed(PKI_Error):
    pass

class No_Public_Material(PKI_Error):
    pass

class Signing_Failed(PKI_Error):
    pass
