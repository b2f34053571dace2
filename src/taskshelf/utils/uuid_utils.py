"""UUID utility functions for Taskshelf.

Provides short UUID display and resolution of user-typed references
(full id, prefix, suffix or section title) to full ids.
"""

from __future__ import annotations

from collections.abc import Sequence

from taskshelf.models import NotFoundError, Section, Task


def shorten_uuid(uuid: str, length: int = 8) -> str:
    """Get shortened version of UUID.

    Args:
        uuid: Full UUID string
        length: Number of characters to return (default 8)

    Returns:
        First N characters of UUID
    """
    return uuid[:length]


def _match_ids(reference: str, ids: Sequence[str]) -> list[str]:
    if reference in ids:
        return [reference]
    prefix_matches = [i for i in ids if i.startswith(reference)]
    if prefix_matches:
        return prefix_matches
    return [i for i in ids if i.endswith(reference)]


def _ambiguous(kind: str, reference: str, matches: list[str]) -> ValueError:
    shown = ", ".join(shorten_uuid(m) for m in matches[:5])
    if len(matches) > 5:
        shown += f", ... ({len(matches)} total)"
    return ValueError(
        f"Ambiguous ID '{reference}' matches {len(matches)} {kind}s: {shown}"
    )


def resolve_task_id(reference: str, tasks: Sequence[Task]) -> str:
    """Resolve a full id, id prefix or id suffix to a task id.

    Raises:
        NotFoundError: If nothing matches
        ValueError: If the reference matches more than one task
    """
    reference = reference.strip().lstrip("#").lower()
    matches = _match_ids(reference, [t.id for t in tasks]) if reference else []
    if not matches:
        raise NotFoundError("task", reference)
    if len(matches) > 1:
        raise _ambiguous("task", reference, matches)
    return matches[0]


def resolve_section_id(reference: str, sections: Sequence[Section]) -> str:
    """Resolve a section id, title, id prefix or id suffix to a section id.

    Lookup order: full id, then title (case-insensitive), then id prefix or
    suffix. Short titles such as "In" therefore never fall through to the
    ``inbox`` id.

    Raises:
        NotFoundError: If nothing matches
        ValueError: If the reference matches more than one section
    """
    stripped = reference.strip().lstrip("#")
    normalized = stripped.lower()
    if not normalized:
        raise NotFoundError("section", reference)

    ids = [s.id for s in sections]
    if normalized in ids:
        return normalized

    by_title = [s.id for s in sections if s.title.strip().lower() == normalized]
    if len(by_title) == 1:
        return by_title[0]
    if len(by_title) > 1:
        raise _ambiguous("section", stripped, by_title)

    matches = _match_ids(normalized, ids)
    if len(matches) == 1:
        return matches[0]
    if matches:
        raise _ambiguous("section", stripped, matches)
    raise NotFoundError("section", stripped)
