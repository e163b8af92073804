"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, the Decred developers
Copyright (c) 2026, the ecfield developers
See LICENSE for details

Configuration settings for the ecfield tools. Settings are read from an
optional INI file in the application data directory and can be overridden on
the command line.
"""

import argparse
import logging
import os

from ecfield import EcfieldError
from ecfield.util import helpers


APP_NAME = "ecfield"

# The master configuration file name.
CONFIG_NAME = "ecfield.conf"

# Keys recognized in the configuration file.
CONFIG_KEYS = ("loglevel", "logfile", "num", "prime")

# Demonstration defaults, a small element of GF(11).
DEFAULT_NUM = 2
DEFAULT_PRIME = 11

log = helpers.getLogger("CONFIG")


def defaultConfigPath():
    return os.path.join(helpers.appDataDir(APP_NAME), CONFIG_NAME)


def parseLogLevel(lvl):
    """
    Convert a level name such as "debug" or a number into a logging level.

    Args:
        lvl (str or int): The level.

    Returns:
        int: The logging level.
    """
    if isinstance(lvl, int):
        return lvl
    lvl = lvl.strip()
    if lvl.isdigit():
        return int(lvl)
    level = logging.getLevelName(lvl.upper())
    if not isinstance(level, int):
        raise EcfieldError(f"unknown log level {lvl!r}")
    return level


def parseInt(k, v):
    try:
        return int(v, 0)
    except ValueError:
        raise EcfieldError(f"configuration value {k}={v!r} is not an integer")


class EcfieldConfig:
    """
    EcfieldConfig is the configuration settings. File settings are applied
    first, then command line arguments.
    """

    def __init__(self, args=None):
        """
        Args:
            args (list(str)): Command line arguments. Unknown arguments are
                ignored with a warning.
        """
        parser = argparse.ArgumentParser(prog=APP_NAME)
        parser.add_argument("--config", help="path to the configuration file")
        parser.add_argument("--num", help="field element representative")
        parser.add_argument("--prime", help="field modulus")
        parser.add_argument("--debug", action="store_true", help="debug logging")
        parsed, unknown = parser.parse_known_args(args)
        if unknown:
            log.warning("ignoring unknown arguments: %s", repr(unknown))

        self.path = parsed.config if parsed.config else defaultConfigPath()
        self.file = {}
        if os.path.isfile(self.path):
            self.file = helpers.readINI(self.path, CONFIG_KEYS)
        elif parsed.config:
            raise EcfieldError(f"configuration file {self.path} not found")

        self.logLevel = parseLogLevel(self.file.get("loglevel", logging.INFO))
        if parsed.debug:
            self.logLevel = logging.DEBUG
        self.logFile = self.file.get("logfile")

        num = parsed.num if parsed.num is not None else self.file.get("num")
        prime = parsed.prime if parsed.prime is not None else self.file.get("prime")
        self.num = parseInt("num", num) if num is not None else DEFAULT_NUM
        self.prime = parseInt("prime", prime) if prime is not None else DEFAULT_PRIME
        if self.prime < 2:
            raise EcfieldError(
                f"configuration value prime={self.prime} must be at least 2"
            )

    def get(self, k, default=None):
        """
        Retrieve a raw setting from the configuration file.

        Args:
            k (str): The setting key.
            default: The value returned when the key is missing.
        """
        return self.file.get(k, default)


def load(args=None):
    """
    Load and return the configuration.

    Args:
        args (list(str)): Command line arguments. Defaults to sys.argv[1:].

    Returns:
        EcfieldConfig: The configuration.
    """
    return EcfieldConfig(args)
