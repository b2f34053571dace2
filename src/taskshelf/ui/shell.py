"""Interactive shell keeping one in-memory workspace alive between commands."""

from __future__ import annotations

import shlex
from collections.abc import Callable

import typer
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from taskshelf.utils.logger import get_logger
from taskshelf.utils.ui.console import get_console
from taskshelf.utils.ui.formatters import format_error

EXIT_WORDS = {"exit", "quit", ":q"}
SHELL_WORDS = [
    "sections", "tasks", "config", "profiles", "list", "create", "rename", "delete",
    "show", "add", "edit", "move", "toggle", "help", "exit",
]


def _default_reader() -> Callable[[str], str]:
    session: PromptSession = PromptSession(
        history=InMemoryHistory(),
        completer=WordCompleter(SHELL_WORDS, ignore_case=True),
    )
    return session.prompt


def run_shell(app: typer.Typer, read_line: Callable[[str], str] | None = None) -> int:
    """Read commands until EOF or ``exit`` and run each through ``app``.

    Args:
        app: The root Typer application
        read_line: Prompt function; defaults to a prompt_toolkit session

    Returns:
        Number of commands executed
    """
    logger = get_logger()
    console = get_console()
    read_line = read_line or _default_reader()
    command = typer.main.get_command(app)
    executed = 0

    console.print("[dim]Taskshelf shell - type 'help' for commands, 'exit' to leave.[/dim]")
    while True:
        try:
            line = read_line("taskshelf> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            continue
        if line in EXIT_WORDS:
            break

        try:
            args = shlex.split(line)
        except ValueError as e:
            format_error(f"Could not parse input: {e}")
            continue
        if args[0] == "help":
            args = ["--help"]
        if args[0] == "shell":
            format_error("Already in the shell")
            continue

        logger.debug("shell command: %s", args)
        # Standalone mode prints usage errors and aborts itself, then exits.
        try:
            command.main(args=args, prog_name="taskshelf")
        except SystemExit as e:
            logger.debug("shell command exited with %s", e.code)
        executed += 1

    return executed
