"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from taskshelf.models import NotFoundError
from taskshelf.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    get_exit_code_name,
)
from taskshelf.utils.logger import get_logger
from taskshelf.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _fail(cmd: str, start: float, error: Exception, exit_code: int) -> typer.Exit:
    logger = get_logger()
    logger.error(
        "command failed: %s (%.3fs) %s - %s",
        cmd,
        time.monotonic() - start,
        get_exit_code_name(exit_code),
        str(error),
    )
    format_error(str(error))
    return typer.Exit(code=exit_code)


def command_wrapper(func: Callable):
    """Wrap a command with timing logs and error-to-exit-code mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except NotFoundError as e:
            raise _fail(cmd, start, e, ERROR_NOT_FOUND) from e

        except AppError as e:
            raise _fail(cmd, start, e, e.exit_code) from e

        except ValueError as e:
            raise _fail(cmd, start, e, ERROR_INVALID_ARGS) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper


def require_title(title: str, what: str = "Title") -> str:
    """Strip a user-supplied title and reject it when empty."""
    title = title.strip()
    if not title:
        raise AppError(f"{what} must not be empty", exit_code=ERROR_INVALID_ARGS)
    return title
