"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Logging and settings-file plumbing for seedsearch. Diagnostics go to stderr,
and optionally to a rotating log file, with per-module levels taken from the
--loglevel option. The search report alone is written to stdout. readINI reads
the sectionless seedsearch.conf.
"""

import configparser
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Dict, Iterable, List, Optional, Union


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: List[logging.Handler] = []


LogSettings.root.setLevel(logging.NOTSET)


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Prepare for using getLogger. Logs to stderr, leaving stdout to the search
    report. If filepath is provided, log outputs will be saved to a rotating
    log file at the specified location. Any loggers, both future loggers and
    those already created, will have their levels set according to the new
    logLvl and lvlMap.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level used for all new loggers without
            entries in the lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
    """
    # Set log level for existing loggers.
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        if name in LogSettings.moduleLevels:
            logger.setLevel(LogSettings.moduleLevels[name])
        else:
            logger.setLevel(LogSettings.defaultLevel)

    log_formatter = logging.Formatter(
        "%(asctime)s %(module)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"
    )
    handlers = []
    if filepath:
        # Raises OSError for an unusable path, before anything is replaced.
        handlers.append(
            RotatingFileHandler(
                filepath,
                mode="a",
                maxBytes=5 * 1024 * 1024,
                backupCount=2,
                encoding=None,
                delay=False,
            )
        )
    if not sys.executable.endswith("pythonw.exe"):
        # Skip adding the stream handler for pythonw in windows.
        handlers.append(logging.StreamHandler(sys.stderr))

    # Handlers from an earlier call are replaced.
    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(log_formatter)
        LogSettings.root.addHandler(handler)
    LogSettings.handlers = handlers


def getLogger(name: str) -> Logger:
    """
    Gets a named logger. If the name has a log level registered with
    prepareLogging, that level will be used, otherwise the default is used.

    Args:
        name: The logger name.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l


def readINI(path: Union[Path, str], keys: Iterable[str]) -> Dict[str, str]:
    """
    Attempt to read the specified keys from the INI-formatted configuration
    file. All sections will be searched. A dict with discovered keys and
    values will be returned. If a key is not discovered, it will not be
    present in the result.

    Args:
        path: The path to the INI configuration file.
        keys: Keys to search for.

    Returns:
        Discovered keys and values.
    """
    config = configparser.ConfigParser(strict=False)
    # Need to add a section header since configparser doesn't handle sectionless
    # INI format.
    with open(path) as f:
        config.read_string("[seedsearch]\n" + f.read())
    res = {}
    for section in config.sections():
        for k in config[section]:
            if k in keys:
                res[k] = config[section][k]
    return res
