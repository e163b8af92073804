"""
Copyright (c) 2026, the ecfield developers
See LICENSE for details
"""

import logging

import pytest

from ecfield import EcfieldError, config


@pytest.fixture
def noDefaultFile(monkeypatch, tmp_path):
    path = tmp_path / "absent" / config.CONFIG_NAME
    monkeypatch.setattr(config, "defaultConfigPath", lambda: str(path))
    return path


def test_defaults(noDefaultFile):
    cfg = config.load([])
    assert cfg.path == str(noDefaultFile)
    assert cfg.num == config.DEFAULT_NUM
    assert cfg.prime == config.DEFAULT_PRIME
    assert cfg.logLevel == logging.INFO
    assert cfg.logFile is None
    assert cfg.get("num") is None
    assert cfg.get("num", "x") == "x"


def test_commandLine(noDefaultFile):
    cfg = config.load(["--num", "5", "--prime", "0x1f", "--debug", "--bogus"])
    assert cfg.num == 5
    assert cfg.prime == 31
    assert cfg.logLevel == logging.DEBUG

    with pytest.raises(EcfieldError):
        config.load(["--num", "five"])
    for prime in ("0", "1", "-5"):
        with pytest.raises(EcfieldError):
            config.load(["--prime", prime])
    assert config.load(["--prime", "2"]).prime == 2


def test_file(tmp_path):
    path = tmp_path / "custom.conf"
    path.write_text("loglevel = warning\nlogfile = ecfield.log\nnum = 4\nprime = 13\n")
    cfg = config.load(["--config", str(path)])
    assert cfg.logLevel == logging.WARNING
    assert cfg.logFile == "ecfield.log"
    assert cfg.num == 4
    assert cfg.prime == 13
    assert cfg.get("loglevel") == "warning"

    # Command line values win.
    cfg = config.load(["--config", str(path), "--num", "9"])
    assert cfg.num == 9
    assert cfg.prime == 13

    with pytest.raises(EcfieldError):
        config.load(["--config", str(tmp_path / "missing.conf")])

    path.write_text("loglevel = chatty\n")
    with pytest.raises(EcfieldError):
        config.load(["--config", str(path)])


def test_parseLogLevel():
    assert config.parseLogLevel("debug") == logging.DEBUG
    assert config.parseLogLevel(" ERROR ") == logging.ERROR
    assert config.parseLogLevel("15") == 15
    assert config.parseLogLevel(logging.INFO) == logging.INFO
    with pytest.raises(EcfieldError):
        config.parseLogLevel("loud")
