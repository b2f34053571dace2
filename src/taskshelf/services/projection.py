"""Read-side helpers that join tasks against sections for display."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from taskshelf.models import INBOX_SECTION_ID, INBOX_SECTION_TITLE, Section, Task


class SectionSummary(NamedTuple):
    section: Section
    task_count: int


def resolve_section(sections: Sequence[Section], section_id: str) -> Section:
    """Return the section a task should be shown under.

    A ``section_id`` that matches nothing falls back to the inbox. This is a
    display decision only; the task itself keeps its stored value.
    """
    inbox = None
    for section in sections:
        if section.id == section_id:
            return section
        if section.id == INBOX_SECTION_ID:
            inbox = section
    return inbox or Section(id=INBOX_SECTION_ID, title=INBOX_SECTION_TITLE)


def section_summaries(
    sections: Sequence[Section], tasks: Iterable[Task]
) -> list[SectionSummary]:
    """Pair every section with the number of tasks stored under its id."""
    counts = Counter(task.section_id for task in tasks)
    return [SectionSummary(section, counts[section.id]) for section in sections]


def matches_query(task: Task, query: str) -> bool:
    """Case-insensitive substring match on title or description."""
    needle = query.lower()
    return needle in task.title.lower() or needle in task.description.lower()
