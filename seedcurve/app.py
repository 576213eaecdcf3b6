"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Entry point for seedsearch.
"""

import os
import sys

from seedcurve import SeedCurveError
from seedcurve.config import CmdArgs
from seedcurve.search import report, searchSeeds
from seedcurve.util import helpers


def setupLogging(cfg):
    """
    Configure logging from the command-line options. The log file, if any, is
    opened here.

    Args:
        cfg (CmdArgs): The configuration.
    """
    helpers.prepareLogging(cfg.logFile, logLvl=cfg.logLevel, lvlMap=cfg.moduleLevels)


def run(cfg, out=None):
    """
    Run the search described by the configuration and report every candidate.

    Args:
        cfg (CmdArgs): The configuration.
        out (file-like): Report destination. Defaults to stdout.

    Returns:
        int: The number of good seeds.
        int: The number of bad seeds.
    """
    out = out if out is not None else sys.stdout
    log = helpers.getLogger("APP")
    log.debug(f"p = {cfg.p:x}, a = {cfg.a:x}, margin = {cfg.margin}")
    color = cfg.color and out.isatty()
    outcomes = searchSeeds(cfg.p, cfg.a, cfg.startSeed, cfg.margin, cfg.workers)
    good, bad = report(outcomes, out, color)
    log.info(f"{good} good seeds, {bad} bad seeds")
    return good, bad


def main(argv=None):
    """
    Start seedsearch. Argument errors and an unusable log file are fatal,
    per-seed failures are reported inline.
    """
    try:
        cfg = CmdArgs(argv)
        setupLogging(cfg)
    except (SeedCurveError, OSError) as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    try:
        run(cfg)
    except BrokenPipeError:
        # The reader went away. Point stdout at devnull so the interpreter's
        # final flush does not fail again.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)


if __name__ == "__main__":
    main()
