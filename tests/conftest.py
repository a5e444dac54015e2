"""Shared test fixtures."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from ticklist.config.settings import get_settings
from ticklist.persons import default_persons
from ticklist.tasks.store import TaskStore


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Isolate Settings from the developer's environment and .env file."""
    for var in ("TICKLIST_LOG_LEVEL", "TICKLIST_DATE_FORMAT", "TICKLIST_SHOW_BANNER"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI attaches so they never outlive a test's streams."""
    yield
    logger = logging.getLogger("ticklist")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def persons():
    return default_persons()


@pytest.fixture
def console() -> Console:
    """A plain-text console that records into a buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)
