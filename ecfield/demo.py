"""
Copyright (c) 2026, the ecfield developers
See LICENSE for details

Demonstration entry point. Builds one field element from the configured num
and prime and reports the outcome.
"""

import sys

from ecfield import EcfieldError
from ecfield import config as ecconfig
from ecfield.math.field import FieldElement
from ecfield.util import helpers


log = helpers.getLogger("DEMO")


def run(cfg):
    """
    Create the configured FieldElement and print the result.

    Args:
        cfg (EcfieldConfig): The configuration.

    Returns:
        int: The process exit code.
    """
    try:
        fe = FieldElement(cfg.num, cfg.prime)
    except EcfieldError as e:
        log.debug(helpers.formatTraceback(e))
        print(f"Got err: {e}")
        return 1
    print(f"Created {fe}")
    return 0


def main(args=None):
    try:
        cfg = ecconfig.load(args)
    except EcfieldError as e:
        print(f"Got err: {e}")
        return 1
    helpers.prepareLogging(cfg.logFile, logLvl=cfg.logLevel)
    return run(cfg)


if __name__ == "__main__":
    sys.exit(main())
