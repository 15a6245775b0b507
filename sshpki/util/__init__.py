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
# sshpki.util
#
# Utility functions for the key code.
#

import string

def burn(buf):
    """burn(buf) -> None
    Overwrites a mutable scratch buffer (bytearray or memoryview) with
    zeros.  Used on passphrase buffers before they are dropped.
    """
    if buf is None:
        return
    for i in range(len(buf)):
        buf[i] = 0

_printable = frozenset(string.printable.encode('ascii'))

def safe_string(s):
    """safe_string(s) -> new_s
    Escapes control characters in s such that it is suitably
    safe for printing to a terminal.  Accepts bytes or str; returns str.
    """
    if isinstance(s, str):
        s = s.encode('latin-1', 'replace')
    return ''.join([chr(x) if x in _printable else '$' for x in s])
