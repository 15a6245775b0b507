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
# sshpki.keys.publickey
#
# Renders the public half of a key as an SSH public key blob.
#

import hashlib

from sshpki.errors import No_Public_Material, Unsupported_Algorithm
from sshpki.keys import key as ssh_key
from sshpki.util import mpint
from sshpki.util import packet

def publickey_to_blob(key):
    """publickey_to_blob(key) -> bytes
    Returns the wire public key blob:

        string  type_c ("ssh-rsa", "ssh-dss", ...)
        mpint   e, n              (RSA)
        mpint   p, q, g, pub_key  (DSS)

    Raises No_Public_Material if <key> has no public half.
    """
    if not key.is_public():
        raise No_Public_Material(key.type_c)
    if not ssh_key.is_supported(key.type):
        raise Unsupported_Algorithm(key.type)
    material = key.material
    names = material.public_fields
    values = [key.type_c] + [mpint.encode(getattr(material, name)) for name in names]
    return packet.pack_payload((packet.STRING,) + (packet.FRAMED_MPINT,) * len(names), values)

def public_key_fingerprint(key):
    """public_key_fingerprint(key) -> fingerprint string
    Returns the MD5 of the public key blob as colon-separated hex pairs.
    """
    digest = hashlib.md5(publickey_to_blob(key)).hexdigest()
    return ':'.join(digest[i:i + 2] for i in range(0, len(digest), 2))
