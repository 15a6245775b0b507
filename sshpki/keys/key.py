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
# sshpki.keys.key
#
# The key handle shared by every key operation.
#
# A handle knows its type, whether it carries public and/or private
# material, and holds the integers in an algorithm-specific material
# object (RSA_Material or DSS_Material) selected by the type.
#

from sshpki.keys.dss import DSS_Material
from sshpki.keys.rsa import RSA_Material

KEYTYPE_UNKNOWN = 0
KEYTYPE_DSS = 1
KEYTYPE_RSA = 2
KEYTYPE_RSA1 = 3
KEYTYPE_ECDSA = 4

FLAG_EMPTY = 0x00
FLAG_PUBLIC = 0x01
FLAG_PRIVATE = 0x02

keytype_names = {
    KEYTYPE_DSS: 'ssh-dss',
    KEYTYPE_RSA: 'ssh-rsa',
    KEYTYPE_RSA1: 'ssh-rsa1',
    KEYTYPE_ECDSA: 'ssh-ecdsa',
}

# Key types this layer has material for.  ECDSA has a name but no material.
material_classes = {
    KEYTYPE_DSS: DSS_Material,
    KEYTYPE_RSA: RSA_Material,
    KEYTYPE_RSA1: RSA_Material,
}

def key_type_to_char(keytype):
    """key_type_to_char(keytype) -> name
    Returns the wire name of <keytype>, or None if it has none.
    """
    return keytype_names.get(keytype)

def key_type_from_name(name):
    """key_type_from_name(name) -> keytype
    Maps a wire name (str or bytes) to a key type.
    Returns KEYTYPE_UNKNOWN for names we do not know.
    """
    if isinstance(name, bytes):
        try:
            name = name.decode('ascii')
        except UnicodeDecodeError:
            return KEYTYPE_UNKNOWN
    for keytype, keytype_name in keytype_names.items():
        if keytype_name == name:
            return keytype
    return KEYTYPE_UNKNOWN

def is_supported(keytype):
    return keytype in material_classes

class SSH_Key:

    """SSH_Key(keytype=KEYTYPE_UNKNOWN)
    An empty key handle of the given type.

    <type> and <type_c> (the wire name) are fixed for the life of the handle.
    <flags> is a combination of FLAG_PUBLIC and FLAG_PRIVATE.
    <material> is None until one of the builder, loader or duplicator fills
    it in.  It is owned by this handle alone.

    Call free() when done with the key.
    """

    def __init__(self, keytype=KEYTYPE_UNKNOWN):
        self._type = keytype
        self._type_c = key_type_to_char(keytype)
        self.flags = FLAG_EMPTY
        self.material = None

    @property
    def type(self):
        return self._type

    @property
    def type_c(self):
        return self._type_c

    def is_public(self):
        return bool(self.flags & FLAG_PUBLIC)

    def is_private(self):
        return bool(self.flags & FLAG_PRIVATE)

    def free(self):
        """free(self) -> None
        Zeroes and drops the key material.  Safe to call more than once.
        """
        if self.material is not None:
            self.material.burn()
            self.material = None
        self.flags = FLAG_EMPTY

    def __repr__(self):
        return '<SSH_Key type=%s flags=%#x>' % (self._type_c, self.flags)
