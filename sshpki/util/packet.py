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
# sshpki.util.packet
#
# This module implements features to pack and unpack SSH wire payloads
# (key blobs and signature blobs).

# Format Codes
STRING = 'string'
# An mpint left in its length-prefixed wire form.
FRAMED_MPINT = 'framed-mpint'

import struct

class Truncated_Payload(ValueError):
    pass

def _read_length(payload, i):
    if len(payload) < i + 4:
        raise Truncated_Payload(i)
    length = struct.unpack('>I', payload[i:i + 4])[0]
    if len(payload) < i + 4 + length:
        raise Truncated_Payload(i)
    return length

def unpack_payload_get_offset(format, payload, offset=0):
    """unpack_payload_get_offset(format, payload, offset=0) -> items, index_where_scanning_stopped
    Unpacks an SSH payload.

    Raises Truncated_Payload if <payload> ends before <format> does.
    """
    i = offset   # Index into payload
    result = []
    for value_type in format:
        if value_type is STRING:
            str_len = _read_length(payload, i)
            i += 4
            result.append(payload[i:i + str_len])
            i += str_len
        elif value_type is FRAMED_MPINT:
            mpint_len = _read_length(payload, i)
            result.append(payload[i:i + 4 + mpint_len])
            i += 4 + mpint_len
        else:
            raise ValueError(value_type)
    return result, i

def pack_payload(format, values):
    """pack_payload(format, values) -> bytes
    Creates an SSH payload.

    <format> is a list Format Codes.
    <values> is a tuple of values to use.  STRING values may be str
    (encoded as ascii) or bytes.
    """
    packet = [b''] * len(format)
    if __debug__:
        assert(len(values) == len(format))
    i = 0
    for value_type in format:
        if value_type is STRING:
            s = values[i]
            if isinstance(s, str):
                s = s.encode('ascii')
            packet[i] = struct.pack('>I', len(s)) + s
        elif value_type is FRAMED_MPINT:
            packet[i] = values[i]
        else:
            raise ValueError(value_type)
        i += 1
    return b''.join(packet)
