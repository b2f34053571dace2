"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config and log
directories and from the process-wide CLI workspace.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from taskshelf.services.workspace import create_workspace, get_workspace


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset cached singletons."""
    import taskshelf.config as config_module
    import taskshelf.utils.logger as logger_module

    config_dir = str(tmp_path / "config")
    log_dir = str(tmp_path / "logs")

    config_module._config_manager = None
    logger_module._logger = None
    get_workspace.cache_clear()

    with patch("taskshelf.config.user_config_dir", return_value=config_dir):
        with patch("taskshelf.utils.logger.user_log_dir", return_value=log_dir):
            yield tmp_path

    app_logger = logging.getLogger("taskshelf")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)
    config_module._config_manager = None
    logger_module._logger = None
    get_workspace.cache_clear()


# ---------------------------------------------------------------------------
# Workspaces
# ---------------------------------------------------------------------------


@pytest.fixture()
def workspace():
    """A fresh in-memory workspace holding only the inbox."""
    return create_workspace()


@pytest.fixture()
def section_repo(workspace):
    return workspace.section_repository


@pytest.fixture()
def task_repo(workspace):
    return workspace.task_repository


class ChangeCounter:
    """Listener that counts how often it was called."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture()
def counter():
    return ChangeCounter()
