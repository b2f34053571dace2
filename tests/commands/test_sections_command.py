"""Tests for section commands."""

import json

from typer.testing import CliRunner

from taskshelf.main import app
from taskshelf.models import INBOX_SECTION_ID
from taskshelf.services.workspace import get_workspace
from taskshelf.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

runner = CliRunner()


def test_list_shows_inbox():
    result = runner.invoke(app, ["sections", "list"])
    assert result.exit_code == 0
    assert "Inbox" in result.stdout


def test_create_section():
    result = runner.invoke(app, ["sections", "create", "  Work  "])
    assert result.exit_code == 0
    titles = [s.title for s in get_workspace().section_service.list_sections()]
    assert titles == ["Inbox", "Work"]


def test_create_rejects_empty_title():
    result = runner.invoke(app, ["sections", "create", "   "])
    assert result.exit_code == ERROR_INVALID_ARGS
    assert len(get_workspace().section_service.list_sections()) == 1


def test_rename_by_title():
    runner.invoke(app, ["sections", "create", "Work"])
    result = runner.invoke(app, ["sections", "rename", "work", "Office"])
    assert result.exit_code == 0
    assert get_workspace().section_service.list_sections()[1].title == "Office"


def test_rename_unknown_section():
    result = runner.invoke(app, ["sections", "rename", "nonexistent", "X"])
    assert result.exit_code == ERROR_NOT_FOUND


def test_list_json_includes_counts():
    workspace = get_workspace()
    workspace.task_service.add_task("a")
    result = runner.invoke(app, ["sections", "list", "-o", "json"])
    data = json.loads(result.stdout)
    assert data == [{"id": INBOX_SECTION_ID, "title": "Inbox", "task_count": 1}]


def test_delete_moves_tasks_to_inbox():
    workspace = get_workspace()
    work = workspace.section_service.create_section("Work")
    workspace.task_service.add_task("Report", section_id=work.id)

    result = runner.invoke(app, ["sections", "delete", "Work", "--yes"])

    assert result.exit_code == 0
    assert "moved to inbox" in result.stdout
    assert [s.id for s in workspace.section_service.list_sections()] == [INBOX_SECTION_ID]
    assert workspace.task_service.list_tasks()[0].section_id == INBOX_SECTION_ID


def test_delete_asks_for_confirmation():
    workspace = get_workspace()
    workspace.section_service.create_section("Work")

    result = runner.invoke(app, ["sections", "delete", "Work"], input="n\n")

    assert result.exit_code == 0
    assert len(workspace.section_service.list_sections()) == 2


def test_delete_inbox_is_refused():
    result = runner.invoke(app, ["sections", "delete", "inbox", "-y"])
    assert result.exit_code == 0
    assert "cannot be deleted" in result.stdout
    assert len(get_workspace().section_service.list_sections()) == 1


def test_short_title_is_not_mistaken_for_inbox():
    workspace = get_workspace()
    section = workspace.section_service.create_section("In")

    added = runner.invoke(app, ["tasks", "add", "Report", "--section", "In"])
    assert added.exit_code == 0
    assert workspace.task_service.list_tasks()[0].section_id == section.id

    result = runner.invoke(app, ["sections", "delete", "In", "-y"])
    assert result.exit_code == 0
    assert "cannot be deleted" not in result.stdout
    assert [s.id for s in workspace.section_service.list_sections()] == [INBOX_SECTION_ID]
    assert workspace.task_service.list_tasks()[0].section_id == INBOX_SECTION_ID
