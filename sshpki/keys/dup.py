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
# sshpki.keys.dup
#
# Copies keys, optionally dropping the private half.
#

from sshpki.errors import Crypto_Allocation_Failed, Unsupported_Algorithm
from sshpki.keys import key as ssh_key

def _copy_field(value):
    # ints are immutable; a fresh int object keeps the copy independent of
    # anything done to the source's storage.
    return int(value)

def key_dup(key, demote=False):
    """key_dup(key, demote=False) -> SSH_Key
    Returns a copy of <key> that shares no material with it.

    <demote>: If true, the copy only gets the public fields and
              FLAG_PRIVATE is cleared.

    Optional private fields (the RSA accelerators) are only copied when the
    source has them.  <key> is not modified.
    """
    if not ssh_key.is_supported(key.type):
        raise Unsupported_Algorithm(key.type)

    new = ssh_key.SSH_Key(key.type)
    new.flags = key.flags
    if demote:
        new.flags &= ~ssh_key.FLAG_PRIVATE

    source = key.material
    try:
        new.material = source.__class__()
        for name in source.public_fields:
            setattr(new.material, name, _copy_field(getattr(source, name)))

        if not demote and key.is_private():
            for name in source.private_fields:
                value = getattr(source, name)
                if value is None and name in source.optional_fields:
                    continue
                setattr(new.material, name, _copy_field(value))
    except (MemoryError, AttributeError, TypeError, ValueError):
        # A missing field fails the same way as a failed copy.
        new.free()
        raise Crypto_Allocation_Failed(key.type)
    return new
