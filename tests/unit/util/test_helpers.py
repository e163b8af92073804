"""
Copyright (c) 2020, the Decred developers
Copyright (c) 2026, the ecfield developers
See LICENSE for details
"""

import logging
from pathlib import Path
import platform

from appdirs import AppDirs

from ecfield import EcfieldError
from ecfield.util import helpers


def test_formatTraceback():
    # Cannot actually raise an error because pytest intercepts it.
    assert helpers.formatTraceback(EcfieldError("errmsg")) == (
        "ecfield.EcfieldError: errmsg\n"
    )


def test_prepareLogging(tmp_path):
    path = tmp_path / "test.log"
    helpers.prepareLogging(filepath=path)
    logger = helpers.getLogger("1")
    logger1 = logger
    assert logger.name == "ecfield.1"
    assert logger.getEffectiveLevel() == logging.INFO

    logger.info("something")
    assert path.is_file()

    helpers.prepareLogging(filepath=path, logLvl=logging.DEBUG)
    logger = helpers.getLogger("2")
    assert logger.getEffectiveLevel() == logging.DEBUG

    helpers.prepareLogging(
        filepath=path,
        logLvl=logging.INFO,
        lvlMap={"1": logging.NOTSET, "3": logging.WARNING},
    )
    logger = helpers.getLogger("3")
    assert logger.getEffectiveLevel() == logging.WARNING
    # NOTSET defers to the package logger, which passes everything.
    assert logger1.level == logging.NOTSET

    # Put things back for the other tests.
    helpers.LogSettings.moduleLevels.clear()
    for handler in helpers.LogSettings.root.handlers:
        handler.close()
    helpers.LogSettings.root.handlers.clear()


def test_readINI(tmp_path):
    path = tmp_path / "ecfield.conf"
    path.write_text("loglevel=debug\nnum = 3\n[other]\nprime=7\nignored=1\n")
    cfg = helpers.readINI(path, ["loglevel", "num", "prime", "missing"])
    assert cfg == {"loglevel": "debug", "num": "3", "prime": "7"}


def test_appDataDir(monkeypatch):
    """
    Tests appDataDir to ensure it gives expected results for various operating
    systems.
    """
    # App name plus upper and lowercase variants.
    appName = "myapp"
    appNameUpper = appName.capitalize()
    appNameLower = appName

    # Get the home directory to use for testing expected results.
    homeDir = Path.home()

    winLocal = AppDirs(appNameUpper, "").user_data_dir

    # Mac app data directory.
    macAppData = homeDir / "Library" / "Application Support"

    posixPath = Path(homeDir, "." + appNameLower)
    macPath = Path(macAppData, appNameUpper)

    """
    Tests are 3-tuples:

    opSys (str): Operating system.
    appName (str): The appDataDir argument.
    want (str): The expected result
    """
    tests = [
        # Various combinations of application name casing, leading
        # period and operating system.
        ("Windows", appNameLower, winLocal),
        ("Windows", "." + appNameUpper, winLocal),
        ("Linux", appNameLower, posixPath),
        ("Linux", appNameUpper, posixPath),
        ("Linux", "." + appNameLower, posixPath),
        ("Darwin", appNameLower, macPath),
        ("Darwin", "." + appNameUpper, macPath),
        ("Linux", ".", "."),
        ("Linux", "", "."),
    ]
    for opSys, name, want in tests:
        monkeypatch.setattr(platform, "system", lambda: opSys)
        assert str(helpers.appDataDir(name)) == str(want)
