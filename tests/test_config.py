"""
Tests for runtime configuration and logging setup.
"""
import logging

import pytest

from anise import ANISE_VERSION, AniseConfig, Semver
from anise.config import parse_log_level
from anise.logging_config import setup_logging


def test_defaults():
    config = AniseConfig()

    assert config.supported_version == ANISE_VERSION
    assert config.originator == ""
    assert config.metadata_uri == ""
    assert config.log_level == logging.WARNING


def test_from_env():
    config = AniseConfig.from_env({
        "ANISE_SUPPORTED_VERSION": "2.1.0",
        "ANISE_ORIGINATOR": "Nyx Space",
        "ANISE_METADATA_URI": "https://example.org/meta",
        "ANISE_LOG_LEVEL": "debug",
    })

    assert config.supported_version == Semver(2, 1, 0)
    assert config.originator == "Nyx Space"
    assert config.metadata_uri == "https://example.org/meta"
    assert config.log_level == logging.DEBUG


def test_from_env_keeps_defaults():
    assert AniseConfig.from_env({}) == AniseConfig()


def test_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("ANISE_ORIGINATOR", "env tool")
    monkeypatch.delenv("ANISE_SUPPORTED_VERSION", raising=False)

    assert AniseConfig.from_env().originator == "env tool"


def test_from_env_rejects_bad_values():
    with pytest.raises(ValueError):
        AniseConfig.from_env({"ANISE_SUPPORTED_VERSION": "two"})
    with pytest.raises(ValueError):
        AniseConfig.from_env({"ANISE_LOG_LEVEL": "chatty"})


def test_parse_log_level():
    assert parse_log_level("20") == 20
    assert parse_log_level(" error ") == logging.ERROR


def test_setup_logging(tmp_path):
    log_file = tmp_path / "anise.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        assert logger.name == "anise"
        assert len(logger.handlers) == 2

        # calling again does not stack handlers
        logger = setup_logging(logging.DEBUG, str(log_file))
        assert len(logger.handlers) == 2

        logging.getLogger("anise.context").debug("resolved Earth")
        for handler in logger.handlers:
            handler.flush()
        assert "anise.context - DEBUG - resolved Earth" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_setup_logging_from_config():
    from anise.logging_config import setup_logging_from_config

    config = AniseConfig.from_env({"ANISE_LOG_LEVEL": "ERROR"})
    logger = setup_logging_from_config(config)
    try:
        assert logger.level == logging.ERROR
        assert [h.level for h in logger.handlers] == [logging.ERROR]
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
