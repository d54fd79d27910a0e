"""
Tests for logging configuration helpers.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from catalog.utils.logging_config import configure_api_logging, get_logger


@pytest.fixture
def root_logger(tmp_path, monkeypatch):
    """Root logger restored to its previous handlers and level afterwards."""
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestConfigureApiLogging:

    def test_debug_flag_sets_debug_level(self, root_logger):
        configure_api_logging(debug=True, log_file=None)

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1

    def test_explicit_level_overrides_debug(self, root_logger):
        configure_api_logging(debug=True, level="warning", log_file=None)

        assert root_logger.level == logging.WARNING

    def test_log_file_adds_rotating_handler(self, root_logger, tmp_path):
        configure_api_logging(level="INFO", log_file="catalog-test.log")

        file_handlers = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert (tmp_path / "logs" / "catalog-test.log").exists()

    def test_get_logger_level_override(self):
        logger = get_logger("catalog.tests.override", level="error")
        assert logger.level == logging.ERROR
