"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import logging

import pytest

from seedcurve import SeedCurveError, config
from seedcurve.config import CmdArgs
from seedcurve.crypto import nist


P_HEX = "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFF"
A_HEX = "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFC"
SEED_HEX = "3045AE6FC8422F64ED579528D38120EAE12196D5"


def test_CmdArgs(noSettings):
    cfg = CmdArgs(["-p", P_HEX, "--start_seed", SEED_HEX, "--config", noSettings])
    assert cfg.p == nist.P192.p
    assert cfg.a == nist.P192.p - 3
    assert cfg.startSeed == nist.P192.seed
    assert cfg.margin == config.DEFAULT_MARGIN
    assert cfg.workers == 1
    assert cfg.color
    assert cfg.logLevel == logging.INFO
    assert cfg.moduleLevels == {}
    assert cfg.logFile is None

    cfg = CmdArgs(
        ["-p", P_HEX, "-a", A_HEX, "--start_seed", SEED_HEX, "--config", noSettings]
    )
    assert cfg.a == nist.P192.a

    cfg = CmdArgs(
        [
            "-p", P_HEX,
            "-a", "03",
            "--start_seed", SEED_HEX,
            "--margin", "2",
            "--workers", "4",
            "--nocolor",
            "--config", noSettings,
        ]
    )
    assert cfg.a == 3
    assert cfg.margin == 2
    assert cfg.workers == 4
    assert not cfg.color


def test_CmdArgs_errors(noSettings):
    tests = [
        (["--start_seed", SEED_HEX], "missing value for -p"),
        (["-p", P_HEX], "missing value for --start_seed"),
        (["-p", "XYZ", "--start_seed", SEED_HEX], "invalid hex for -p"),
        (["-p", "ab cd", "--start_seed", SEED_HEX], "invalid hex for -p"),
        (
            ["-p", P_HEX, "--start_seed", " " + SEED_HEX],
            "invalid hex for --start_seed",
        ),
        (["-p", P_HEX, "--start_seed", "ABC"], "invalid hex for --start_seed"),
        (["-p", P_HEX, "-a", "0xZZ", "--start_seed", SEED_HEX], "invalid hex for -a"),
        (["-p", P_HEX, "--start_seed", SEED_HEX, "--margin", "-1"], "margin"),
        (["-p", P_HEX, "--start_seed", SEED_HEX, "--workers", "0"], "workers"),
        (["-p", "02", "--start_seed", SEED_HEX], "invalid prime modulus"),
        (["--curve", "P-999"], "unrecognized curve name"),
    ]
    for argv, msg in tests:
        with pytest.raises(SeedCurveError) as excinfo:
            CmdArgs(argv + ["--config", noSettings])
        assert msg in str(excinfo.value), argv

    with pytest.raises(SystemExit):
        CmdArgs(["--unknown", "--config", noSettings])
    with pytest.raises(SystemExit):
        CmdArgs(["--margin", "wide", "--config", noSettings])


def test_CmdArgs_curve(noSettings):
    cfg = CmdArgs(["--curve", "P-256", "--config", noSettings])
    assert cfg.p == nist.P256.p
    assert cfg.a == nist.P256.a
    assert cfg.startSeed == nist.P256.seed

    cfg = CmdArgs(["--curve", "p384", "--start_seed", "00ff", "--config", noSettings])
    assert cfg.p == nist.P384.p
    assert cfg.startSeed == b"\x00\xff"

    # An explicit p replaces the preset's a with the p - 3 default.
    cfg = CmdArgs(["--curve", "P-256", "-p", P_HEX, "--config", noSettings])
    assert cfg.p == nist.P192.p
    assert cfg.a == nist.P192.p - 3
    assert cfg.startSeed == nist.P256.seed


def test_CmdArgs_loglevel(noSettings):
    base = ["--curve", "P-192", "--config", noSettings]

    cfg = CmdArgs(base + ["--loglevel", "debug"])
    assert cfg.logLevel == logging.DEBUG

    cfg = CmdArgs(base + ["--loglevel", "A:Warning,B:deBug,C:Critical,D:0"])
    assert cfg.logLevel == logging.INFO
    assert len(cfg.moduleLevels) == 4
    assert cfg.moduleLevels["A"] == logging.WARNING
    assert cfg.moduleLevels["B"] == logging.DEBUG
    assert cfg.moduleLevels["C"] == logging.CRITICAL
    assert cfg.moduleLevels["D"] == logging.NOTSET

    for spec in (",:", "verbose", "A:loud"):
        with pytest.raises(SeedCurveError):
            CmdArgs(base + ["--loglevel", spec])


def test_CmdArgs_settings(tmp_path):
    path = tmp_path / "seedsearch.conf"
    path.write_text("margin=5\nworkers=2\nloglevel=debug\nnocolor=1\nunused=9\n")
    base = ["--curve", "P-192", "--config", str(path)]

    cfg = CmdArgs(base)
    assert cfg.margin == 5
    assert cfg.workers == 2
    assert cfg.logLevel == logging.DEBUG
    assert not cfg.color

    # Flags take precedence.
    cfg = CmdArgs(base + ["--margin", "7", "--workers", "1", "--loglevel", "error"])
    assert cfg.margin == 7
    assert cfg.workers == 1
    assert cfg.logLevel == logging.ERROR

    path.write_text("[search]\nmargin = 3\n")
    assert CmdArgs(base).margin == 3

    path.write_text("margin=wide\n")
    with pytest.raises(SeedCurveError):
        CmdArgs(base)


def test_decodeHex():
    assert config.decodeHex("00ff") == b"\x00\xff"
    assert config.decodeHex("0x00FF") == b"\x00\xff"
    assert config.decodeHexInt("0100") == 256
    for bad in ("", "0x", "abc", "zz", "ab cd", " 00", "00\n", "0x 01", "ä0"):
        with pytest.raises(SeedCurveError):
            config.decodeHex(bad)


def test_load(monkeypatch, noSettings):
    monkeypatch.setattr(config, "cmdArgs", None)
    cfg = config.load(["--curve", "P-192", "--config", noSettings])
    assert isinstance(cfg, CmdArgs)
    assert config.load() is cfg
