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
# sshpki.keys.builder
#
# Builds public keys from the integers carried in SSH messages.
#

from sshpki.errors import Crypto_Allocation_Failed, Malformed_Integer, Unsupported_Algorithm
from sshpki.keys import key as ssh_key
from sshpki.util import mpint
from sshpki.util import packet

def pubkey_build(keytype, fields):
    """pubkey_build(keytype, fields) -> SSH_Key
    Builds a public key from wire integers.

    <keytype>: KEYTYPE_DSS, KEYTYPE_RSA or KEYTYPE_RSA1.
    <fields>: Sequence of length-prefixed mpints in wire order:
              DSS (p, q, g, pub_key), RSA (e, n).

    The returned key has only FLAG_PUBLIC set.
    """
    if not ssh_key.is_supported(keytype):
        raise Unsupported_Algorithm(keytype)
    material_class = ssh_key.material_classes[keytype]
    names = material_class.public_fields
    if len(fields) != len(names):
        raise Malformed_Integer('%s public key needs %d integers, got %d' % (
            ssh_key.key_type_to_char(keytype), len(names), len(fields)))

    key = ssh_key.SSH_Key(keytype)
    try:
        key.material = material_class()
        for name, field in zip(names, fields):
            setattr(key.material, name, mpint.decode(field))
    except MemoryError:
        key.free()
        raise Crypto_Allocation_Failed(keytype)
    except Exception:
        key.free()
        raise
    key.flags = ssh_key.FLAG_PUBLIC
    return key

def import_pubkey_blob(blob):
    """import_pubkey_blob(blob) -> SSH_Key
    This takes a public key blob and builds an SSH_Key from it.

    <blob>: A packed public key.  The format should be a packed string
            with the first value being a string to identify the type,
            followed by the mpints of that type.
    """
    try:
        data, offset = packet.unpack_payload_get_offset((packet.STRING,), blob)
    except packet.Truncated_Payload:
        raise Malformed_Integer('truncated key type')
    keytype = ssh_key.key_type_from_name(data[0])
    if not ssh_key.is_supported(keytype):
        raise Unsupported_Algorithm(data[0])

    count = len(ssh_key.material_classes[keytype].public_fields)
    try:
        fields, offset = packet.unpack_payload_get_offset((packet.FRAMED_MPINT,) * count, blob, offset)
    except packet.Truncated_Payload:
        raise Malformed_Integer('truncated %s public key' % (ssh_key.key_type_to_char(keytype),))
    if offset != len(blob):
        raise Malformed_Integer('%d trailing bytes after public key' % (len(blob) - offset,))
    return pubkey_build(keytype, fields)
