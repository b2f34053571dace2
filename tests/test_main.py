"""Tests for the root command and logging setup."""

import logging

from typer.testing import CliRunner

from taskshelf import __version__
from taskshelf.config import get_config_manager
from taskshelf.main import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "sections" in result.stdout
    assert "tasks" in result.stdout


def test_log_level_comes_from_config():
    get_config_manager().set("logging.level", "warning")
    runner.invoke(app, ["version"])
    assert logging.getLogger("taskshelf").level == logging.WARNING


def test_logging_can_be_disabled():
    get_config_manager().set("logging.enabled", False)
    runner.invoke(app, ["version"])
    assert logging.getLogger("taskshelf").level > logging.CRITICAL


def test_typo_suggests_command():
    result = runner.invoke(app, ["sectons"])
    assert result.exit_code == 1
    assert "sections" in result.stdout


def test_color_can_be_disabled():
    from taskshelf.utils.ui.console import get_console

    get_config_manager().set("output.color", False)
    runner.invoke(app, ["version"])
    assert get_console().no_color is True
    get_console().no_color = False


def test_unknown_stored_log_level_falls_back_to_info():
    from taskshelf.config import Config, LoggingConfig

    manager = get_config_manager()
    manager._config = Config(
        logging=LoggingConfig.model_construct(enabled=True, level="VERBOSE")
    )
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert logging.getLogger("taskshelf").level == logging.INFO
