"""
Tests for the application logger setup.
"""

import logging

import pytest

from editor_sidebar.logger import LOGGER_NAME, get_logger, setup_logger


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = logger.handlers[:]
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved
    logger.propagate = True


class TestSetupLogger:

    def test_console_and_file_handlers(self, clean_logger, tmp_path):
        logger = setup_logger(log_dir=tmp_path)

        assert logger is clean_logger
        assert len(logger.handlers) == 2
        assert logger.propagate is False

        logger.info("sidebar ready")
        for handler in logger.handlers:
            handler.flush()
        assert "INFO - sidebar ready" in (tmp_path / "editor_sidebar.log").read_text(
            encoding="utf-8"
        )

    def test_configured_once(self, clean_logger, tmp_path):
        setup_logger(log_dir=tmp_path)
        setup_logger(log_dir=tmp_path)

        assert len(clean_logger.handlers) == 2

    def test_child_loggers(self):
        assert get_logger().name == LOGGER_NAME
        assert get_logger("visibility").name == f"{LOGGER_NAME}.visibility"
