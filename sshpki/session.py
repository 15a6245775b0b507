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
# sshpki.session
#
# The slice of an SSH session the key layer talks to: a diagnostics sink,
# the last error, and the host's interactive passphrase callback.
#

from sshpki.util import debug as ssh_debug

# Error codes.
SSH_NO_ERROR = 0
SSH_FATAL = 2

class SSH_Session:

    # Host-supplied passphrase callback, see set_auth_callback.
    auth_function = None

    error_code = SSH_NO_ERROR
    error_message = ''

    def __init__(self, debug=None):
        if debug is None:
            self.debug = ssh_debug.Debug()
        else:
            self.debug = debug

    def set_auth_callback(self, auth_function):
        """set_auth_callback(self, auth_function) -> None
        Registers the interactive passphrase callback.

        <auth_function> is called as auth_function(prompt, buf, max_len)
        where <buf> is a zero-filled bytearray of <max_len> bytes.  It writes
        the passphrase into <buf> and returns the number of bytes written,
        or 0 if no passphrase was obtained.

        Pass None to remove a previously registered callback.
        """
        self.debug.write(ssh_debug.DEBUG_3, 'set_auth_callback(auth_function=%r)', (auth_function,))
        self.auth_function = auth_function

    def set_error(self, code, message, args=None):
        """set_error(self, code, message, args=None) -> None
        Records the error on the session and reports it to the debug sink.
        """
        if args is not None:
            message = message % args
        self.error_code = code
        self.error_message = message
        self.debug.write(ssh_debug.ERROR, message)
