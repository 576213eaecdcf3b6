"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

The NIST prime curves and the seeds they were generated from. Values mirror
[FIPS 186-4] Appendix D.1.2 exactly. For each curve, generate(p, a, seed)
reproduces r, and b is one of the two roots it offers.

References:
  [FIPS 186-4] Digital Signature Standard, Appendix D.1.2
"""

from typing import NamedTuple

from seedcurve import SeedCurveError

from .curve import generate


class CurveParams(NamedTuple):
    name: str
    p: int
    a: int
    b: int
    seed: bytes
    r: int


P192 = CurveParams(
    name="P-192",
    p=int("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFF", 16),
    a=int("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFC", 16),
    b=int("64210519E59C80E70FA7E9AB72243049FEB8DEECC146B9B1", 16),
    seed=bytes.fromhex("3045AE6FC8422F64ED579528D38120EAE12196D5"),
    r=int("3099D2BBBFCB2538542DCD5FB078B6EF5F3D6FE2C745DE65", 16),
)

# NIST chose the larger of the two roots for P-224. The other one is
# 4BFAF57AF3FB4C540ABECDA9AFBB4F4728402745D8F4C6BCDCAA004D.
P224 = CurveParams(
    name="P-224",
    p=int("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF000000000000000000000001", 16),
    a=int("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFE", 16),
    b=int("B4050A850C04B3ABF54132565044B0B7D7BFD8BA270B39432355FFB4", 16),
    seed=bytes.fromhex("BD71344799D5C7FCDC45B59FA3B9AB8F6A948BC5"),
    r=int("5B056C7E11DD68F40469EE7F3C7A7D74F7D121116506D031218291FB", 16),
)

P256 = CurveParams(
    name="P-256",
    p=int("FFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF", 16),
    a=int("FFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC", 16),
    b=int("5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B", 16),
    seed=bytes.fromhex("C49D360886E704936A6678E1139D26B7819F7E90"),
    r=int("7EFBA1662985BE9403CB055C75D4F7E0CE8D84A9C5114ABCAF3177680104FA0D", 16),
)

P384 = CurveParams(
    name="P-384",
    p=int(
        "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFE"
        "FFFFFFFF0000000000000000FFFFFFFF",
        16,
    ),
    a=int(
        "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFE"
        "FFFFFFFF0000000000000000FFFFFFFC",
        16,
    ),
    b=int(
        "B3312FA7E23EE7E4988E056BE3F82D19181D9C6EFE8141120314088F5013875A"
        "C656398D8A2ED19D2A85C8EDD3EC2AEF",
        16,
    ),
    seed=bytes.fromhex("A335926AA319A27A1D00896A6773A4827ACDAC73"),
    r=int(
        "79D1E655F868F02FFF48DCDEE14151DDB80643C1406D0CA10DFE6FC52009540A"
        "495E8042EA5F744F6E184667CC722483",
        16,
    ),
)

P521 = CurveParams(
    name="P-521",
    p=2 ** 521 - 1,
    a=2 ** 521 - 4,
    b=int(
        "0051953EB9618E1C9A1F929A21A0B68540EEA2DA725B99B315F3B8B489918EF1"
        "09E156193951EC7E937B1652C0BD3BB1BF073573DF883D2C34F1EF451FD46B50"
        "3F00",
        16,
    ),
    seed=bytes.fromhex("D09E8800291CB85396CC6717393284AAA0DA64BA"),
    r=int(
        "00B48BFA5F420A34949539D2BDFC264EEEEB077688E44FBF0AD8F6D0EDB37BD6"
        "B533281000518E19F1B9FFBE0FE9ED8A3C2200B8F875E523868C70C1E5BF55BA"
        "D637",
        16,
    ),
)

the_curves = {c.name: c for c in (P192, P224, P256, P384, P521)}


def normalizeName(name):
    """
    Normalize a curve name so that P256, p-256 and P_256 are all P-256.

    Args:
        name (str): The raw curve name.

    Returns:
        str: The normalized name.
    """
    n = name.strip().upper().replace("_", "").replace("-", "")
    if n.startswith("P"):
        return "P-" + n[1:]
    return n


def parse(name):
    """
    Get the curve parameters based on the curve name.
    """
    try:
        return the_curves[normalizeName(name)]
    except KeyError:
        raise SeedCurveError(f"unrecognized curve name {name}")


def verifyParams(params):
    """
    Check that the curve's seed reproduces its published r and b.

    Args:
        params (CurveParams): The curve.

    Returns:
        bool: True if r matches and b is one of the generated roots.
    """
    res = generate(params.p, params.a, params.seed)
    return res.r == params.r and params.b in (res.b1, res.b2)
