"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Modular arithmetic over a prime field.

References:
  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)

  [HAC]: Handbook of Applied Cryptography (Menezes, van Oorschot, Vanstone),
    Algorithm 3.34
"""

from seedcurve import BadSeedError


class NoInverseError(BadSeedError):
    """
    The value shares a nontrivial factor with the modulus and has no modular
    inverse.
    """

    pass


class NoSquareRootError(BadSeedError):
    """
    The value is a quadratic non-residue modulo p.
    """

    pass


def egcd(a, b):
    """
    Calculate the extended Euclidean algorithm. ax + by = gcd(a,b)

    Args:
        a (int): An integer.
        b (int): Another integer.

    Returns:
        int: Greatest common denominator.
        int: x coefficient of Bezout's identity.
        int: y coefficient of Bezout's identity.
    """
    x0, x1, y0, y1 = 1, 0, 0, 1
    while b != 0:
        q, a, b = a // b, b, a % b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def modInv(a, m):
    """
    Modular inverse. Raises NoInverseError if impossible.

    Args:
        a (int): An integer.
        m (int): The modulus.

    Returns:
        int: The modular inverse.
    """
    g, x, _ = egcd(a % m, m)
    if g != 1:
        raise NoInverseError("bad seed: error computing r-inverse")
    return x % m


def legendre(n, p):
    """
    The Legendre symbol by Euler's criterion, n^((p-1)/2) mod p.

    Args:
        n (int): An integer.
        p (int): An odd prime.

    Returns:
        int: 1 for a quadratic residue, p - 1 for a non-residue, 0 if p | n.
    """
    return pow(n, (p - 1) // 2, p)


def isQuadraticResidue(n, p):
    """
    Whether n has a square root modulo the prime p. Zero counts as a residue.
    """
    n %= p
    if n == 0 or p == 2:
        return True
    return legendre(n, p) == 1


def modSqrt(n, p):
    """
    A square root of n modulo the prime p. The other root is p minus the
    returned value.

    For p = 3 mod 4 the root is n^((p+1)/4). Otherwise Tonelli-Shanks is used.

    Args:
        n (int): The square.
        p (int): The prime modulus.

    Returns:
        int: x such that x * x = n (mod p).
    """
    n %= p
    if n == 0:
        return 0
    if p == 2:
        return n
    if legendre(n, p) != 1:
        raise NoSquareRootError("bad seed: error computing b")
    if p % 4 == 3:
        return pow(n, (p + 1) // 4, p)

    # Tonelli-Shanks. Write p - 1 = q * 2^s with q odd.
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    # Any non-residue z works.
    z = 2
    while legendre(z, p) != p - 1:
        z += 1

    m = s
    c = pow(z, q, p)
    t = pow(n, q, p)
    x = pow(n, (q + 1) // 2, p)
    while t != 1:
        # Least i, 0 < i < m, such that t^(2^i) = 1.
        i, t2 = 0, t
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        x = x * b % p
    return x
