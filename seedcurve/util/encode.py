"""
Copyright (c) 2020, Brian Stafford
Copyright (c) 2020, the Decred developers
See LICENSE for details

Integer and byte codecs, and a class that wraps bytearray with some convenient
operators.
"""


def intToBytes(i, signed=False):
    """
    Encodes an integer to bytes. The encoding is minimal, so zero encodes to
    an empty bytearray.

    Args:
        i (int): The integer.
        signed (bool): Whether to encode as a signed integer.

    Returns:
        bytearray: The encoded integer.
    """
    length = ((i + ((i * signed) < 0)).bit_length() + 7 + signed) // 8
    return bytearray(i.to_bytes(length, byteorder="big", signed=signed))


def intFromBytes(b, signed=False):
    """
    Decodes an integer from bytes.

    Args:
        b (bytes-like): The encoded integer.
        signed (bool): Whether to decode as a signed integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big", signed=signed)

def decodeBA(b, copy=False):
    """
    Decode into a bytearray.

    Args:
        b (bytes-like, ByteArray): The value to decode to a bytearray.
        copy (bool): Whether a bytearray or ByteArray input is copied rather
            than shared.

    Returns:
        bytearray: The decoded bytes.
    """
    if isinstance(b, ByteArray):
        return bytearray(b.b) if copy else b.b
    if isinstance(b, bytearray):
        return bytearray(b) if copy else b
    if isinstance(b, (bytes, memoryview)):
        return bytearray(b)
    raise TypeError("decodeBA: unknown type %s" % type(b))


class ByteArray:
    """
    ByteArray is a bytearray manager for building hash outputs. A slice is a
    new ByteArray whose bytes can be masked in place, and addition
    concatenates into a new ByteArray.
    """

    def __init__(self, b=b"", copy=True):
        """
        Set copy to False if you want to share the memory with another
        bytearray/ByteArray. If the type of b is not bytearray or ByteArray,
        copy has no effect.
        """
        self.b = decodeBA(b, copy=copy)

    def __add__(self, a):
        """append the bytes and return a new ByteArray"""
        a = decodeBA(a)
        return ByteArray(self.b + a)

    def __getitem__(self, k):
        if not isinstance(k, slice):
            raise TypeError("ByteArray indices must be slices")
        return ByteArray(self.b[k.start : k.stop : k.step], copy=False)

    def hex(self):
        """
        A hexadecimal string representation of the bytes.

        Returns:
            str: The hex bytes.
        """
        return self.b.hex()

    def int(self):
        """The bytes as an integer."""
        return intFromBytes(self.b)
