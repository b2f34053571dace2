"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.table import Table

from taskshelf.models import Priority, Section, Task
from taskshelf.services.projection import SectionSummary, resolve_section
from taskshelf.utils.reminders import format_reminder
from taskshelf.utils.ui.console import get_console
from taskshelf.utils.uuid_utils import shorten_uuid

PRIORITY_STYLES = {
    Priority.HIGH: "bold red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        format_table(data)


def format_table(data: Any) -> None:
    """Format plain data as a table."""
    console = get_console()
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if value is None:
        return "-"
    return str(value)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    console = get_console()
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for item in items:
        table.add_row(*[_cell(item.get(col, "")) for col in columns])

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _cell(value))

    get_console().print(table)


def format_sections(summaries: list[SectionSummary], output_format: str = "table") -> None:
    """Display sections with their task counts."""
    if output_format != "table":
        format_output(
            [
                {**s.section.model_dump(mode="json"), "task_count": s.task_count}
                for s in summaries
            ],
            output_format,
        )
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Tasks", justify="right")
    for section, count in summaries:
        title = f"[bold]{section.title}[/bold]" if section.is_inbox else section.title
        table.add_row(shorten_uuid(section.id), title, str(count))
    get_console().print(table)


def format_tasks(
    tasks: list[Task], sections: list[Section], output_format: str = "table"
) -> None:
    """Display tasks with the title of the section they are shown under."""
    if output_format != "table":
        format_output([t.model_dump(mode="json") for t in tasks], output_format)
        return

    console = get_console()
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("", width=3)
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Priority")
    table.add_column("Section")
    table.add_column("Reminder")
    for task in tasks:
        title = f"[strike dim]{task.title}[/strike dim]" if task.completed else task.title
        style = PRIORITY_STYLES[task.priority]
        table.add_row(
            "[green]✓[/green]" if task.completed else "○",
            shorten_uuid(task.id),
            title,
            f"[{style}]{task.priority.value.upper()}[/{style}]",
            resolve_section(sections, task.section_id).title,
            format_reminder(task.reminder),
        )
    console.print(table)


def format_task_detail(
    task: Task, sections: list[Section], output_format: str = "table"
) -> None:
    """Display every field of one task."""
    if output_format != "table":
        format_output(task.model_dump(mode="json"), output_format)
        return

    format_single_item(
        {
            "id": task.id,
            "title": task.title,
            "description": task.description or None,
            "priority": task.priority.value.upper(),
            "section": resolve_section(sections, task.section_id).title,
            "completed": task.completed,
            "reminder": format_reminder(task.reminder),
        }
    )


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")
