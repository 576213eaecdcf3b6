"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Search a neighborhood of seeds for ones that generate a usable curve. Every
candidate is evaluated independently, so the work can be spread over a process
pool without any coordination.
"""

from concurrent.futures import ProcessPoolExecutor
import sys
from typing import NamedTuple, Optional

from seedcurve import BadSeedError, SeedCurveError
from seedcurve.crypto.curve import Result, generate
from seedcurve.crypto.seed import addToSeed
from seedcurve.util import helpers
from seedcurve.util.encode import ByteArray


log = helpers.getLogger("SEARCH")

# ANSI SGR sequences.
RESET = "\x1b[0m"
FG_GREEN = "\x1b[32m"
FG_RED = "\x1b[31m"
BG_BLUE = "\x1b[44m"


class SeedOutcome(NamedTuple):
    """
    The outcome of one candidate seed. Exactly one of result and error is set.
    """

    offset: int
    seed: Optional[bytes]
    result: Optional[Result]
    error: Optional[BadSeedError]

    @property
    def ok(self):
        return self.error is None


def evaluateSeed(p, a, seed):
    """
    Run the generator on a seed, returning bad seed errors rather than raising
    them.

    Returns:
        Result or None: The generated curve.
        BadSeedError or None: The reason the seed was rejected.
    """
    try:
        return generate(p, a, seed), None
    except BadSeedError as e:
        return None, e


def _evaluateOffset(job):
    p, a, start, offset = job
    try:
        seed = addToSeed(start, offset)
    except BadSeedError as e:
        return SeedOutcome(offset, None, None, e)
    result, err = evaluateSeed(p, a, seed)
    return SeedOutcome(offset, seed, result, err)


def searchSeeds(p, a, startSeed, margin, workers=1):
    """
    Evaluate every seed in [startSeed - margin, startSeed + margin].

    Args:
        p (int): The prime modulus.
        a (int): The curve coefficient a.
        startSeed (bytes-like): The center of the search.
        margin (int): The search half-width.
        workers (int): Worker processes. 1 evaluates in this process.

    Yields:
        SeedOutcome: One per candidate, in ascending offset order.
    """
    if margin < 0:
        raise SeedCurveError(f"margin must be non-negative, got {margin}")
    start = bytes(startSeed)
    jobs = ((p, a, start, i) for i in range(-margin, margin + 1))
    log.debug(f"searching {2 * margin + 1} seeds around {start.hex()}")
    if workers <= 1:
        for job in jobs:
            yield _evaluateOffset(job)
        return
    with ProcessPoolExecutor(max_workers=workers) as executor:
        # map preserves the order of the jobs.
        yield from executor.map(_evaluateOffset, jobs, chunksize=16)


def formatOutcome(outcome, color=True):
    """
    Format the outcome as a report line. The line for the starting seed is
    marked with a leading '>' and, with color, a blue background.

    Args:
        outcome (SeedOutcome): The outcome.
        color (bool): Whether to use ANSI colors.

    Returns:
        str: The line, without a newline.
    """
    seedHex = ByteArray(outcome.seed).hex() if outcome.seed is not None else "-"
    marker = ">" if outcome.offset == 0 else " "
    if outcome.ok:
        text, fg = f"{seedHex} OK", FG_GREEN
    else:
        text, fg = f"{seedHex} BAD {outcome.error}", FG_RED
    if not color:
        return f"{marker} {text}"
    bg = BG_BLUE if outcome.offset == 0 else ""
    return f"{marker} {bg}{fg}{text}{RESET}"


def report(outcomes, out=None, color=True):
    """
    Write one line per outcome.

    Args:
        outcomes (iterable(SeedOutcome)): The outcomes.
        out (file-like): Destination. Defaults to stdout.
        color (bool): Whether to use ANSI colors.

    Returns:
        int: The number of good seeds.
        int: The number of bad seeds.
    """
    out = out if out is not None else sys.stdout
    good = bad = 0
    for outcome in outcomes:
        if outcome.ok:
            good += 1
        else:
            bad += 1
        out.write(formatOutcome(outcome, color) + "\n")
    return good, bad
