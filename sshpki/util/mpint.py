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
# sshpki.util.mpint
#
# Routines to handle SSH multiple-precision integers.
#

import struct

from sshpki.errors import Malformed_Integer

def pack_mpint(n):
    """pack_mpint(n) -> bytes
    Multiple-Precision Integer
    Packs a python int into a big endian byte string (no length prefix).
    """
    # Per RFC 4251:
    # - two's compliment
    # - big-endian
    # - negative numbers have MSB of the first byte set
    # - if MSB would be set in a positive number, then preceed with a zero byte
    # - Unnecessary leading bytes with the value 0 or 255 MUST NOT be included.
    # - Zero stored as the empty string.
    if n == 0:
        return b''
    # One extra bit leaves room for the sign, which gives us the zero (or
    # 0xff) padding byte exactly when it is needed.
    if n > 0:
        length = (n.bit_length() + 8) // 8
    else:
        length = ((~n).bit_length() + 8) // 8
    return n.to_bytes(length, 'big', signed=True)

def encode(n):
    """encode(n) -> bytes
    Encodes a non-negative integer as a length-prefixed mpint.

    A leading zero byte is inserted when the top bit of the magnitude is
    set, so the value can never be read back as negative.
    """
    if n < 0:
        raise Malformed_Integer('negative value %d' % (n,))
    s = pack_mpint(n)
    return struct.pack('>I', len(s)) + s

def decode(data):
    """decode(data) -> int
    Decodes a length-prefixed mpint into a non-negative integer.

    <data> must hold exactly one mpint: the 4-byte length followed by that
    many bytes of magnitude.  A leading sign byte is ignored.

    Raises Malformed_Integer if <data> is not a byte string, or is empty,
    truncated, or has trailing bytes.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise Malformed_Integer('expected bytes, got %s' % (type(data).__name__,))
    if not data:
        raise Malformed_Integer('empty mpint')
    if len(data) < 4:
        raise Malformed_Integer('truncated mpint length')
    length = struct.unpack('>I', data[:4])[0]
    if len(data) - 4 != length:
        raise Malformed_Integer('mpint length %d does not match %d bytes of data' % (length, len(data) - 4))
    return int.from_bytes(data[4:], 'big')
