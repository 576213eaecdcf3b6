"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Configuration settings for seedsearch.
"""

import argparse
import binascii
import logging
import os

from appdirs import AppDirs

from seedcurve import SeedCurveError
from seedcurve.crypto import nist
from seedcurve.util import helpers
from seedcurve.util.encode import intFromBytes


# The settings file lives in an OS-appropriate location. It is only read.
_ad = AppDirs("SeedSearch", False)
CONFIG_DIR = _ad.user_config_dir

CONFIG_NAME = "seedsearch.conf"
CONFIG_PATH = os.path.join(CONFIG_DIR, CONFIG_NAME)

# Keys recognized in the settings file.
FILE_KEYS = ("margin", "workers", "loglevel", "nocolor")

DEFAULT_MARGIN = 100

log = helpers.getLogger("CONFIG")

logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str): A string which is a key for the logLevelMap. Case-insensitive.
    """
    return logLevelMap[s.lower()]


def parseLogLevel(s):
    """
    Parse a log level specifier. Either a single level name, or a
    comma-separated list of MODULE:level pairs.

    Args:
        s (str): The specifier.

    Returns:
        int or None: The default level, if one was specified.
        dict: Module name -> level.
    """
    try:
        if any(ch in s for ch in (",", ":")):
            pairs = (p.split(":") for p in s.split(","))
            return None, {k: logLvl(v) for k, v in pairs}
        return logLvl(s), {}
    except Exception:
        raise SeedCurveError(f"malformed loglevel specifier: {s}")


def decodeHex(s, name="value"):
    """
    Decode a hexadecimal string.

    Args:
        s (str): The hex string. An optional 0x prefix is accepted.
        name (str): Used in error messages.

    Returns:
        bytes: The decoded bytes.
    """
    h = s[2:] if s.lower().startswith("0x") else s
    if not h:
        raise SeedCurveError(f"empty hex value for {name}")
    try:
        return binascii.unhexlify(h)
    except (binascii.Error, ValueError) as e:
        raise SeedCurveError(f"invalid hex for {name}: {e}")


def decodeHexInt(s, name="value"):
    """
    Decode a hexadecimal string as a big-endian unsigned integer.
    """
    return intFromBytes(decodeHex(s, name))


def parseBool(s):
    return s.strip().lower() in ("1", "true", "yes", "on")


def readSettings(path):
    """
    Read the settings file, if there is one.

    Args:
        path (str): The file path.

    Returns:
        dict: Recognized keys found in the file.
    """
    if not os.path.isfile(path):
        return {}
    log.debug(f"reading settings from {path}")
    return helpers.readINI(path, FILE_KEYS)


def makeParser():
    parser = argparse.ArgumentParser(
        prog="seedsearch",
        description="Search a neighborhood of seeds for ones that generate "
        "a valid curve coefficient b for the given p and a.",
    )
    parser.add_argument("--margin", type=int, help="how wide to search")
    parser.add_argument("-p", help="(hex) prime modulus p")
    parser.add_argument("-a", help="(hex) chosen value for a (default: p-3)")
    parser.add_argument(
        "--start_seed", help="(hex) seed to search around for valid seeds"
    )
    parser.add_argument(
        "--curve",
        help="use p, a and seed of a published curve (P-192 ... P-521)",
    )
    parser.add_argument("--workers", type=int, help="number of worker processes")
    parser.add_argument("--nocolor", action="store_true", help="plain output")
    parser.add_argument("--loglevel", help="level, or MODULE:level,... pairs")
    parser.add_argument("--logfile", help="also log to this rotating file")
    parser.add_argument("--config", default=CONFIG_PATH, help="settings file")
    return parser


class CmdArgs:
    """
    CmdArgs are command-line configuration options, with defaults taken from
    the settings file.
    """

    def __init__(self, argv=None):
        self.logLevel = logging.INFO
        self.moduleLevels = {}
        args = makeParser().parse_args(argv)
        try:
            settings = readSettings(args.config)
        except Exception as e:
            raise SeedCurveError(f"error reading {args.config}: {e}")

        loglevel = args.loglevel or settings.get("loglevel")
        if loglevel:
            lvl, self.moduleLevels = parseLogLevel(loglevel)
            if lvl is not None:
                self.logLevel = lvl
        self.logFile = args.logfile

        self.margin = args.margin
        if self.margin is None:
            self.margin = self.intSetting(settings, "margin", DEFAULT_MARGIN)
        if self.margin < 0:
            raise SeedCurveError(f"margin must be non-negative, got {self.margin}")

        self.workers = args.workers
        if self.workers is None:
            self.workers = self.intSetting(settings, "workers", 1)
        if self.workers < 1:
            raise SeedCurveError(f"workers must be at least 1, got {self.workers}")

        self.color = not (args.nocolor or parseBool(settings.get("nocolor", "")))

        preset = nist.parse(args.curve) if args.curve else None

        if args.p:
            self.p = decodeHexInt(args.p, "-p")
        elif preset:
            self.p = preset.p
        else:
            raise SeedCurveError("missing value for -p")
        if self.p < 3:
            raise SeedCurveError(f"invalid prime modulus {self.p}")

        if args.a:
            self.a = decodeHexInt(args.a, "-a")
        elif preset and not args.p:
            self.a = preset.a
        else:
            self.a = self.p - 3

        if args.start_seed:
            self.startSeed = decodeHex(args.start_seed, "--start_seed")
        elif preset:
            self.startSeed = preset.seed
        else:
            raise SeedCurveError("missing value for --start_seed")

    @staticmethod
    def intSetting(settings, key, default):
        if key not in settings:
            return default
        try:
            return int(settings[key])
        except ValueError:
            raise SeedCurveError(f"invalid {key} setting {settings[key]!r}")


cmdArgs = None


def load(argv=None):
    """
    Load and return the current command-line configuration. The configuration is
    only loaded once. Successive calls to the modular `load` function will
    return the same instance.

    Returns:
        CmdArgs: The current command-line configuration.
    """
    global cmdArgs
    if not cmdArgs:
        cmdArgs = CmdArgs(argv)
    return cmdArgs
