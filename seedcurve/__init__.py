"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""


class SeedCurveError(Exception):
    pass


class BadSeedError(SeedCurveError):
    """
    The seed cannot produce a usable curve for the given p and a. The
    condition is definitive for that (p, a, seed) triple and the caller should
    simply move on to another seed.
    """

    pass
