"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Verifiably random generation of the coefficient b of a short Weierstrass curve
y^2 = x^3 + a*x + b over a prime field, following [ANSI X9.62-1998] A.3.3.
The seed is expanded into r, and b is chosen such that r * b^2 = a^3 (mod p).

References:
  [ANSI X9.62-1998] Public Key Cryptography For The Financial Services
    Industry: The Elliptic Curve Digital Signature Algorithm (ECDSA)
"""

from typing import NamedTuple

from seedcurve import BadSeedError
from seedcurve.util import helpers

from .modular import modInv, modSqrt
from .seed import expandSeed


log = helpers.getLogger("GENERATE")


class SingularCurveError(BadSeedError):
    """
    4a^3 + 27b^2 = 0 (mod p). The curve is singular and unusable.
    """

    pass


class Solution(NamedTuple):
    """
    The solution of r * b^2 = a^3 (mod p), along with the intermediate values
    needed by the singularity check.
    """

    a3: int
    b2val: int
    b1: int
    b2: int


class Result(NamedTuple):
    """
    A generated curve. b1 and b2 are the two square roots of a^3 / r mod p,
    so either can serve as b.
    """

    r: int
    b1: int
    b2: int


def solve(p, a, r):
    """
    Solve r * b^2 = a^3 (mod p) for b.

    Args:
        p (int): The prime modulus.
        a (int): The curve coefficient a.
        r (int): The expanded seed.

    Returns:
        Solution: a^3 mod p, b^2 mod p and both roots.

    Raises:
        NoInverseError: r is not invertible mod p.
        NoSquareRootError: a^3 / r is not a square mod p.
    """
    a3 = pow(a, 3, p)
    rInv = modInv(r, p)
    b2val = a3 * rInv % p
    b1 = modSqrt(b2val, p)
    return Solution(a3=a3, b2val=b2val, b1=b1, b2=p - b1)


def checkNonsingular(a3, b2val, p):
    """
    Check that the curve with a^3 = a3 and b^2 = b2val is not singular.

    Args:
        a3 (int): a^3 mod p.
        b2val (int): b^2 mod p.
        p (int): The prime modulus.

    Raises:
        SingularCurveError: 4a^3 + 27b^2 = 0 (mod p).
    """
    if (4 * a3 + 27 * b2val) % p == 0:
        raise SingularCurveError("bad seed: 4a^3 + 27b^2 ≡ 0 (mod p)")


def generate(p, a, seed):
    """
    Compute curve parameters for a given p, a, and seed.

    Args:
        p (int): The prime modulus.
        a (int): The curve coefficient a, usually p - 3.
        seed (bytes-like): The seed.

    Returns:
        Result: r and the two candidates for b.

    Raises:
        BadSeedError: The seed cannot produce a curve. One of NoInverseError,
            NoSquareRootError or SingularCurveError.
    """
    r = expandSeed(seed, p.bit_length())
    try:
        sol = solve(p, a, r)
        checkNonsingular(sol.a3, sol.b2val, p)
    except BadSeedError as e:
        log.debug(f"seed {bytes(seed).hex()} rejected: {e}")
        raise
    return Result(r=r, b1=sol.b1, b2=sol.b2)
