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
# sshpki.keys
#
# This implements the interface to parse and use the supported key types.
#

from sshpki.keys.key import (
    SSH_Key, KEYTYPE_UNKNOWN, KEYTYPE_DSS, KEYTYPE_RSA, KEYTYPE_RSA1, KEYTYPE_ECDSA,
    FLAG_EMPTY, FLAG_PUBLIC, FLAG_PRIVATE, key_type_to_char, key_type_from_name)
from sshpki.keys.builder import pubkey_build, import_pubkey_blob
from sshpki.keys.dup import key_dup
from sshpki.keys.private_key import private_key_from_base64, privatekey_type_from_string
from sshpki.keys.publickey import publickey_to_blob, public_key_fingerprint
from sshpki.keys.signature import SSH_Signature, do_sign, signature_to_blob, verify_signature
