"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Pseudorandom expansion of a curve seed, as specified for verifiably random
curve generation in [ANSI X9.62-1998] A.3.3. The expansion has to match the
published NIST P-curve parameters bit for bit, so the truncation below is
reproduced literally.

References:
  [ANSI X9.62-1998] Public Key Cryptography For The Financial Services
    Industry: The Elliptic Curve Digital Signature Algorithm (ECDSA)

  [FIPS 186-4] Digital Signature Standard, Appendix D.1.2
"""

import hashlib

from seedcurve import BadSeedError, SeedCurveError
from seedcurve.util.encode import ByteArray, intFromBytes, intToBytes


SHA1_SIZE = 20
SHA1_BITS = SHA1_SIZE * 8


class NegativeSeedError(BadSeedError):
    """
    Seed arithmetic produced a value below zero, which has no big-endian byte
    encoding.
    """

    pass


def sha1(b):
    """
    The SHA-1 hash as a ByteArray.

    Args:
        b (byte-like): The thing to hash.

    Returns:
        ByteArray: The 20-byte hash.
    """
    return ByteArray(hashlib.sha1(bytes(b)).digest())


def addToSeed(seed, value):
    """
    Add an integer to the seed, treating the seed as a big-endian unsigned
    integer. The result is minimally encoded, so leading zero bytes of the
    original seed are not preserved and a zero result is empty.

    Args:
        seed (bytes-like): The seed.
        value (int): The amount to add. May be negative.

    Returns:
        bytes: The encoded sum.
    """
    i = intFromBytes(seed) + value
    if i < 0:
        raise NegativeSeedError(f"bad seed: seed {bytes(seed).hex()} {value:+d} is negative")
    return bytes(intToBytes(i))


def blockCount(bitLen):
    """
    The number of SHA-1 blocks needed to cover bitLen bits. This is the
    initial truncated block plus the full blocks that follow it.

    Args:
        bitLen (int): The target bit length, usually the bit length of p.

    Returns:
        int: The block count.
    """
    if bitLen < 1:
        raise SeedCurveError(f"invalid bit length {bitLen}")
    return (bitLen - 1) // SHA1_BITS + 1


def expansionBlocks(seed, bitLen):
    """
    Compute the ordered hash blocks W_0 ... W_s of the seed expansion.

    W_0 is the tail of SHA-1(seed), shortened to the bytes that hold the
    leading hBits of the result, with its high-order bits cleared. The count of
    cleared bits is (160 - hBits) % 8 + 1, one more than the leading byte's
    excess bits. The published parameters depend on that count.

    W_i for i >= 1 is SHA-1 of the minimal big-endian encoding of seed + i.
    The encoding is not padded back to the seed length.

    Args:
        seed (bytes-like): The seed.
        bitLen (int): The target bit length.

    Returns:
        list(ByteArray): The blocks, W_0 first.
    """
    sCount = blockCount(bitLen) - 1
    hBits = bitLen - SHA1_BITS * sCount
    hBytes = (hBits + 7) // 8

    w0 = sha1(seed)[SHA1_SIZE - hBytes :]
    for i in range((SHA1_BITS - hBits) % 8 + 1):
        w0.b[0] &= ~(1 << (7 - i))
    blocks = [w0]

    seedInt = intFromBytes(seed)
    for i in range(1, sCount + 1):
        blocks.append(sha1(intToBytes(seedInt + i)))
    return blocks


def expandSeed(seed, bitLen):
    """
    Expand the seed into the pseudorandom integer r used to derive the curve
    coefficient b.

    Args:
        seed (bytes-like): The seed. Hashed exactly as given.
        bitLen (int): The target bit length.

    Returns:
        int: r.
    """
    r = ByteArray()
    for w in expansionBlocks(seed, bitLen):
        r += w
    return r.int()
