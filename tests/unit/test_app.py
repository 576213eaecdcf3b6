"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import io

import pytest

from seedcurve import app
from seedcurve.config import CmdArgs
from seedcurve.crypto import nist


class ClosedPipe:
    """A stdout whose reader has gone away."""

    def __init__(self, f):
        self.f = f

    def write(self, s):
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self):
        pass

    def isatty(self):
        return False

    def fileno(self):
        return self.f.fileno()


def test_run(tmp_path, noSettings):
    logPath = tmp_path / "seedsearch.log"
    cfg = CmdArgs(
        [
            "--curve", "P-192",
            "--margin", "2",
            "--logfile", str(logPath),
            "--config", noSettings,
        ]
    )
    app.setupLogging(cfg)
    assert logPath.is_file()
    out = io.StringIO()
    good, bad = app.run(cfg, out)
    assert good + bad == 5
    lines = out.getvalue().splitlines()
    assert len(lines) == 5
    assert lines[2] == "> " + nist.P192.seed.hex() + " OK"
    # Not a terminal, so no colors.
    assert "\x1b" not in out.getvalue()
    assert "good seeds" in logPath.read_text()


def test_main(capsys, noSettings):
    app.main(["--curve", "P-256", "--margin", "1", "--config", noSettings])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[1].startswith("> " + nist.P256.seed.hex())


def test_main_errors(capsys, tmp_path, noSettings):
    with pytest.raises(SystemExit) as excinfo:
        app.main(["--start_seed", "00", "--config", noSettings])
    assert excinfo.value.code == 1
    assert "missing value for -p" in capsys.readouterr().err

    with pytest.raises(SystemExit) as excinfo:
        app.main(["-p", "0xQQ", "--start_seed", "00", "--config", noSettings])
    assert excinfo.value.code == 1
    assert "invalid hex for -p" in capsys.readouterr().err

    with pytest.raises(SystemExit) as excinfo:
        app.main(["-p", "ab cd", "--start_seed", "01", "--config", noSettings])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "invalid hex for -p" in captured.err
    assert captured.out == ""

    logPath = tmp_path / "missing" / "x.log"
    with pytest.raises(SystemExit) as excinfo:
        app.main(
            [
                "--curve", "P-192",
                "--margin", "1",
                "--logfile", str(logPath),
                "--config", noSettings,
            ]
        )
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert str(logPath) in captured.err
    assert "Traceback" not in captured.err
    # Nothing is searched.
    assert captured.out == ""


def test_main_closed_pipe(capsys, monkeypatch, tmp_path, noSettings):
    with open(tmp_path / "stdout", "w") as f:
        monkeypatch.setattr(app.sys, "stdout", ClosedPipe(f))
        with pytest.raises(SystemExit) as excinfo:
            app.main(["--curve", "P-192", "--margin", "1", "--config", noSettings])
    assert excinfo.value.code == 1
    assert "BrokenPipeError" not in capsys.readouterr().err
