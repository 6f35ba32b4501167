"""Global pytest configuration and fixtures."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from todolist.core.settings.settings import get_settings
from todolist.providers.db.memory.provider import MemoryStoreProvider
from todolist.gui.logic.services.task_service import TaskService

from .fakes import SyncAsyncRunner


@pytest.fixture(scope="session")
def qapp():
    """One offscreen QApplication for the whole session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are read from the environment of each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def runner():
    runner = SyncAsyncRunner()
    yield runner
    runner.close()


@pytest.fixture
def memory_store(runner):
    """Initialized in-memory store driven by the synchronous runner."""
    store = MemoryStoreProvider()
    runner.run_sync(store.initialize())
    return store


@pytest.fixture
def task_service(memory_store):
    return TaskService(memory_store, "tasks")
