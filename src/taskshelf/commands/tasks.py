"""Task management commands."""

from datetime import datetime

import typer

from taskshelf.models import INBOX_SECTION_ID, Priority
from taskshelf.services.workspace import Workspace, get_workspace
from taskshelf.utils.exit_codes import ERROR_INVALID_ARGS
from taskshelf.utils.reminders import ReminderPreset, resolve_reminder
from taskshelf.utils.typer_helpers import SuggestingGroup
from taskshelf.utils.ui.formatters import (
    format_success,
    format_task_detail,
    format_tasks,
)
from taskshelf.utils.uuid_utils import resolve_section_id, resolve_task_id

from .decorators import AppError, command_wrapper, require_title
from .utils import resolve_output

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")

DATETIME_FORMATS = ["%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M", "%Y-%m-%d"]


def _task_id(workspace: Workspace, reference: str) -> str:
    return resolve_task_id(reference, workspace.task_service.list_tasks())


def _section_id(workspace: Workspace, reference: str) -> str:
    return resolve_section_id(reference, workspace.section_service.list_sections())


def _reminder(
    preset: ReminderPreset | None, remind_at: datetime | None
) -> datetime | None:
    if remind_at is not None:
        return resolve_reminder(ReminderPreset.CUSTOM, custom=remind_at)
    return resolve_reminder(preset or ReminderPreset.NONE)


@app.command("list")
@command_wrapper
def list_tasks(
    section: str | None = typer.Option(
        None, "--section", "-s", help="Only tasks in this section (ID, suffix or title)"
    ),
    search: str | None = typer.Option(
        None, "--search", "-q", help="Text to look for in title or description"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List tasks, newest first."""
    workspace = get_workspace()
    task_service = workspace.task_service
    if section is None:
        if search:
            raise AppError("--search needs --section", exit_code=ERROR_INVALID_ARGS)
        tasks = task_service.list_tasks()
    else:
        tasks = task_service.search(_section_id(workspace, section), search or "")

    format_tasks(tasks, workspace.section_service.list_sections(), resolve_output(output))


@app.command("show")
@command_wrapper
def show_task(
    task_id: str = typer.Argument(..., help="Task ID, prefix or suffix"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show every field of a task."""
    workspace = get_workspace()
    task = workspace.task_service.get_task(_task_id(workspace, task_id))
    format_task_detail(
        task, workspace.section_service.list_sections(), resolve_output(output)
    )


@app.command("add")
@command_wrapper
def add_task(
    title: str = typer.Argument(..., help="Task title"),
    description: str = typer.Option("", "--description", "-d", help="Task details"),
    priority: Priority = typer.Option(Priority.LOW, "--priority", "-p", help="Priority"),
    section: str = typer.Option(
        INBOX_SECTION_ID, "--section", "-s", help="Section ID, suffix or title"
    ),
    remind: ReminderPreset | None = typer.Option(
        None, "--remind", help="Reminder preset"
    ),
    remind_at: datetime | None = typer.Option(
        None, "--remind-at", formats=DATETIME_FORMATS, help="Custom reminder time"
    ),
) -> None:
    """Add a task at the top of the list."""
    workspace = get_workspace()
    task = workspace.task_service.add_task(
        require_title(title),
        description=description.strip(),
        priority=priority,
        section_id=_section_id(workspace, section),
        reminder=_reminder(remind, remind_at),
    )
    format_success(f"Task added: {task.title} ({task.id})")


@app.command("edit")
@command_wrapper
def edit_task(
    task_id: str = typer.Argument(..., help="Task ID, prefix or suffix"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="New details"
    ),
    priority: Priority | None = typer.Option(None, "--priority", "-p", help="Priority"),
    section: str | None = typer.Option(
        None, "--section", "-s", help="Section ID, suffix or title"
    ),
    remind: ReminderPreset | None = typer.Option(
        None, "--remind", help="Reminder preset ('none' clears it)"
    ),
    remind_at: datetime | None = typer.Option(
        None, "--remind-at", formats=DATETIME_FORMATS, help="Custom reminder time"
    ),
) -> None:
    """Edit a task. Options left out keep their current value."""
    workspace = get_workspace()
    resolved = _task_id(workspace, task_id)
    current = workspace.task_service.get_task(resolved)

    reminder = current.reminder
    if remind is not None or remind_at is not None:
        reminder = _reminder(remind, remind_at)

    task = workspace.task_service.update_task(
        resolved,
        title=require_title(title) if title is not None else current.title,
        description=description.strip() if description is not None else current.description,
        priority=priority or current.priority,
        section_id=_section_id(workspace, section) if section else current.section_id,
        reminder=reminder,
    )
    format_success(f"Task updated: {task.title}")


@app.command("move")
@command_wrapper
def move_task(
    task_id: str = typer.Argument(..., help="Task ID, prefix or suffix"),
    section: str = typer.Argument(..., help="Target section ID, suffix or title"),
) -> None:
    """Move a task to another section."""
    workspace = get_workspace()
    task = workspace.task_service.move_task(
        _task_id(workspace, task_id), _section_id(workspace, section)
    )
    target = workspace.section_service.get_section(task.section_id)
    format_success(f"Task moved: {task.title} -> {target.title}")


@app.command("toggle")
@command_wrapper
def toggle_task(
    task_id: str = typer.Argument(..., help="Task ID, prefix or suffix"),
) -> None:
    """Mark a task completed, or reopen it."""
    workspace = get_workspace()
    task = workspace.task_service.toggle_task(_task_id(workspace, task_id))
    state = "completed" if task.completed else "reopened"
    format_success(f"Task {state}: {task.title}")


@app.command("delete")
@command_wrapper
def delete_task(
    task_id: str = typer.Argument(..., help="Task ID, prefix or suffix"),
) -> None:
    """Delete a task."""
    workspace = get_workspace()
    resolved = _task_id(workspace, task_id)
    workspace.task_service.delete_task(resolved)
    format_success(f"Task deleted: {resolved}")
