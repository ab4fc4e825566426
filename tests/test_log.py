"""
Tests for wson.log.
"""

import logging

import pytest
from wson.log import PACKAGE_LOGGER, configure_logging, get_logger


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestGetLogger:

    def test_namespaced(self):
        assert get_logger("testing").name == "wson.testing"

    def test_cached(self):
        assert get_logger("cached") is get_logger("cached")

    def test_library_loggers_propagate(self):
        """Module loggers carry no handlers and hand records to the application."""
        logger = get_logger("handlers")
        assert logger.handlers == []
        assert logger.propagate is True

    def test_records_reach_application_handlers(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            get_logger("app").debug("hello from wson")
        assert "hello from wson" in caplog.text


class TestConfigureLogging:

    def test_single_handler(self, package_logger):
        configure_logging()
        configure_logging()
        assert len(package_logger.handlers) == 1

    def test_explicit_level(self, package_logger):
        configure_logging("DEBUG")
        assert package_logger.level == logging.DEBUG

    def test_env_level(self, package_logger, monkeypatch):
        monkeypatch.setenv("WSON_LOG_LEVEL", "error")
        configure_logging()
        assert package_logger.level == logging.ERROR

    def test_unknown_env_level_falls_back(self, package_logger, monkeypatch):
        monkeypatch.setenv("WSON_LOG_LEVEL", "LOUD")
        configure_logging()
        assert package_logger.level == logging.WARNING

    def test_module_loggers_inherit_level(self, package_logger):
        configure_logging("ERROR")
        assert get_logger("inherit").getEffectiveLevel() == logging.ERROR
