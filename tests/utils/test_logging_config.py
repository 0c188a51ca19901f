"""
Unit tests for logging configuration.
"""

import logging
from logging.handlers import RotatingFileHandler

from app.utils.logging_config import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def teardown_method(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            if isinstance(handler, RotatingFileHandler):
                root.removeHandler(handler)
                handler.close()

    def test_console_only(self):
        setup_logging(level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_rotating_file(self, tmp_path):
        setup_logging(log_file="api.log", level="INFO", log_dir=str(tmp_path / "logs"))
        logging.getLogger("app.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello" in (tmp_path / "logs" / "api.log").read_text()
