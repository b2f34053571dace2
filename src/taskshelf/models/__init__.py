"""Taskshelf domain models.

This package contains Pydantic models that represent the core domain entities
(sections and tasks) together with the errors raised by the stores.
"""

from .core import (
    INBOX_SECTION_ID,
    INBOX_SECTION_TITLE,
    Priority,
    Section,
    SectionCreate,
    SectionUpdate,
    Task,
    TaskCreate,
    TaskUpdate,
)
from .exceptions import NotFoundError, TaskshelfError

__all__ = [
    # Section models
    "Section",
    "SectionCreate",
    "SectionUpdate",
    "INBOX_SECTION_ID",
    "INBOX_SECTION_TITLE",
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "Priority",
    # Errors
    "TaskshelfError",
    "NotFoundError",
]
