"""Tests for LogManager."""

import logging

import pytest

from todolist.core.settings.settings import TodoSettings
from todolist.gui.logic.generic.log_manager import LogManager


@pytest.fixture
def log_manager(tmp_path):
    root = logging.getLogger()
    previous_level = root.level
    LogManager._instance = None
    manager = LogManager(TodoSettings(logs_dir=tmp_path / "logs", log_level="DEBUG"))
    yield manager
    for handler in manager.handlers:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(previous_level)
    LogManager._instance = None


class TestLogManager:
    """Test LogManager configuration."""

    def test_creates_dated_log_file(self, log_manager, tmp_path):
        assert log_manager.log_file.parent == tmp_path / "logs"
        assert log_manager.log_file.name.startswith("gui_")
        assert log_manager.log_file.exists()

    def test_applies_level_and_quiets_libraries(self, log_manager):
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("pymongo").level == logging.WARNING
        assert logging.getLogger("motor").level == logging.WARNING
        assert logging.getLogger("PySide6").level == logging.WARNING

    def test_singleton(self, log_manager):
        assert LogManager() is log_manager
        assert LogManager.get_instance() is log_manager
