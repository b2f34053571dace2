"""Section management commands."""

import typer

from taskshelf.models import INBOX_SECTION_ID
from taskshelf.services.workspace import get_workspace
from taskshelf.utils.typer_helpers import SuggestingGroup
from taskshelf.utils.ui.formatters import format_info, format_sections, format_success
from taskshelf.utils.uuid_utils import resolve_section_id

from .decorators import command_wrapper, require_title
from .utils import resolve_output

app = typer.Typer(cls=SuggestingGroup, help="Section management commands")


@app.command("list")
@command_wrapper
def list_sections(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List sections with their task counts."""
    section_service = get_workspace().section_service
    format_sections(section_service.list_summaries(), resolve_output(output))


@app.command("create")
@command_wrapper
def create_section(
    title: str = typer.Argument(..., help="Section title"),
) -> None:
    """Create a new section."""
    section_service = get_workspace().section_service
    section = section_service.create_section(require_title(title))
    format_success(f"Section created: {section.title} ({section.id})")


@app.command("rename")
@command_wrapper
def rename_section(
    section_id: str = typer.Argument(..., help="Section ID, suffix or title"),
    title: str = typer.Argument(..., help="New section title"),
) -> None:
    """Rename a section (the inbox can be renamed too)."""
    section_service = get_workspace().section_service
    resolved = resolve_section_id(section_id, section_service.list_sections())
    section = section_service.rename_section(resolved, require_title(title))
    format_success(f"Section renamed: {section.title}")


@app.command("delete")
@command_wrapper
def delete_section(
    section_id: str = typer.Argument(..., help="Section ID, suffix or title"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a section. Its tasks move to the inbox."""
    section_service = get_workspace().section_service
    resolved = resolve_section_id(section_id, section_service.list_sections())
    if resolved == INBOX_SECTION_ID:
        format_info("The inbox section cannot be deleted")
        return

    section = section_service.get_section(resolved)
    if not yes and not typer.confirm(
        f'Delete "{section.title}"? Tasks will move to the inbox.'
    ):
        format_info("Cancelled")
        raise typer.Exit(0)

    moved = section_service.delete_section(resolved)
    format_success(f"Section deleted: {section.title} ({moved} task(s) moved to inbox)")
