"""Unit tests for the section/task read projection."""

from __future__ import annotations

from taskshelf.models import INBOX_SECTION_ID, Section, Task
from taskshelf.services.projection import (
    matches_query,
    resolve_section,
    section_summaries,
)

INBOX = Section(id=INBOX_SECTION_ID, title="My Inbox")
WORK = Section(id="w", title="Work")


class TestResolveSection:
    def test_known_section(self):
        assert resolve_section([INBOX, WORK], "w") == WORK

    def test_unknown_falls_back_to_inbox(self):
        assert resolve_section([INBOX, WORK], "gone") == INBOX

    def test_fallback_does_not_touch_task(self, task_repo):
        from taskshelf.models import TaskCreate

        task = task_repo.add(TaskCreate(title="t", section_id="gone"))
        resolve_section([INBOX], task.section_id)
        assert task_repo.get(task.id).section_id == "gone"

    def test_fallback_without_inbox_in_list(self):
        section = resolve_section([], "gone")
        assert section.id == INBOX_SECTION_ID
        assert section.title == "Inbox"


def test_section_summaries_keep_section_order():
    tasks = [Task(id="1", title="a", section_id="w"), Task(id="2", title="b")]
    rows = section_summaries([INBOX, WORK], tasks)
    assert [(r.section.id, r.task_count) for r in rows] == [(INBOX_SECTION_ID, 1), ("w", 1)]


def test_matches_query():
    task = Task(id="1", title="Buy Milk", description="2 litres")
    assert matches_query(task, "milk")
    assert matches_query(task, "LITRES")
    assert not matches_query(task, "bread")
