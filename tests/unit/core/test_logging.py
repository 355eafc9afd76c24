"""
Unit Tests for Centralized Logging.

Tests handler wiring from the logging section of the app config.
"""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock, patch

import pytest

from notebook.core.config_schema import LoggingSchema
from notebook.core.logging import get_logger, setup_logging


def _app_config(console: bool = True, file: bool = False) -> MagicMock:
    config = MagicMock()
    config.logging = LoggingSchema(
        level="DEBUG",
        format="console",
        handlers={
            "console": {"enabled": console},
            "file": {
                "enabled": file,
                "path": "logs/test.jsonl",
                "max_bytes": 5242880,
                "backup_count": 3,
            },
        },
    )
    return config


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Keep handler changes from leaking into other tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging handler wiring."""

    def test_console_handler_from_config(self):
        with patch("notebook.core.logging.get_app_config", return_value=_app_config()):
            setup_logging()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [logging.StreamHandler]

    def test_arguments_override_config(self):
        with patch("notebook.core.logging.get_app_config", return_value=_app_config()):
            setup_logging(level="warning", enable_console=False)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert root.handlers == []

    def test_file_handler_under_project_root(self, tmp_path):
        with patch("notebook.core.logging.get_app_config", return_value=_app_config(console=False, file=True)), \
             patch("notebook.core.logging.find_project_root", return_value=tmp_path):
            setup_logging(format_type="json")

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "logs" / "test.jsonl")
        assert file_handlers[0].maxBytes == 5242880

    def test_replaces_existing_handlers(self):
        stale = logging.NullHandler()
        logging.getLogger().addHandler(stale)

        with patch("notebook.core.logging.get_app_config", return_value=_app_config()):
            setup_logging()

        assert stale not in logging.getLogger().handlers

    def test_quiets_sqlalchemy_engine(self):
        with patch("notebook.core.logging.get_app_config", return_value=_app_config()):
            setup_logging(level="DEBUG")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_usable_logger(self):
        logger = get_logger("notebook.tests")
        assert hasattr(logger, "info")
