"""Main entry point for Taskshelf."""

import logging

import typer

from taskshelf import __version__
from taskshelf.commands import config, sections, tasks
from taskshelf.config import get_config_manager
from taskshelf.ui.shell import run_shell
from taskshelf.utils.logger import get_logger
from taskshelf.utils.typer_helpers import SuggestingGroup
from taskshelf.utils.ui.console import get_console

app = typer.Typer(
    name="taskshelf",
    cls=SuggestingGroup,
    help="Organize tasks into sections from the command line",
    no_args_is_help=True,
)

app.add_typer(sections.app, name="sections", help="Section management commands")
app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def main_callback() -> None:
    """Configure logging and console colour from the active profile."""
    config = get_config_manager().config
    get_console().no_color = not config.output.color
    logging_config = config.logging
    logger = get_logger()
    if logging_config.enabled:
        level = logging.getLevelNamesMapping().get(logging_config.level.upper())
        if level is None:
            logger.warning("Unknown log level %r, using INFO", logging_config.level)
            level = logging.INFO
        logger.setLevel(level)
    else:
        logger.setLevel(logging.CRITICAL + 1)


@app.command()
def version() -> None:
    """Show version information."""
    get_console().print(f"[bold]Taskshelf[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def shell() -> None:
    """Start an interactive session.

    Sections and tasks live in memory, so they only survive as long as the
    shell does.
    """
    run_shell(app)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
