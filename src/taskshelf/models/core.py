"""Section and task data models."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

INBOX_SECTION_ID = "inbox"
INBOX_SECTION_TITLE = "Inbox"


class Priority(StrEnum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Section(BaseModel):
    """Section model grouping tasks together.

    Sections do not hold their tasks; membership is computed from
    ``Task.section_id``.

    Attributes:
        id: Unique identifier for the section (immutable)
        title: Display name
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str

    @property
    def is_inbox(self) -> bool:
        """Whether this is the protected default section."""
        return self.id == INBOX_SECTION_ID


class SectionCreate(BaseModel):
    """Model for creating a new section.

    Attributes:
        title: Section title. Emptiness is checked by the caller.
    """

    title: str


class SectionUpdate(BaseModel):
    """Model for renaming an existing section.

    Attributes:
        title: New section title
    """

    title: str


class Task(BaseModel):
    """Task model representing a complete task entity.

    Instances are frozen: values handed out by a store are snapshots and
    changes only happen through the store's operations.

    Attributes:
        id: Unique identifier for the task (immutable)
        title: Short task title
        description: Free-form details
        priority: Priority level (default: low)
        completed: Completion flag
        section_id: Id of the section the task belongs to. Not enforced as a
            foreign key; display code falls back to the inbox.
        reminder: Optional stored timestamp, no scheduling attached
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    priority: Priority = Priority.LOW
    completed: bool = False
    section_id: str = INBOX_SECTION_ID
    reminder: datetime | None = None


class TaskCreate(BaseModel):
    """Model for creating a new task.

    Attributes:
        title: Task title (required)
        description: Optional details
        priority: Priority level
        section_id: Target section (default: inbox)
        reminder: Optional reminder timestamp
    """

    title: str
    description: str = ""
    priority: Priority = Priority.LOW
    section_id: str = INBOX_SECTION_ID
    reminder: datetime | None = None


class TaskUpdate(BaseModel):
    """Model for replacing every mutable field of a task.

    This is a full replace, not a patch: omitting ``reminder`` clears it.

    Attributes:
        title: Task title
        description: Details
        priority: Priority level
        section_id: Section the task belongs to
        reminder: Reminder timestamp, or None to clear
    """

    title: str
    description: str
    priority: Priority
    section_id: str
    reminder: datetime | None = None

    @classmethod
    def from_task(cls, task: Task, **changes) -> "TaskUpdate":
        """Build a full update from an existing snapshot, overriding ``changes``."""
        fields = {
            "title": task.title,
            "description": task.description,
            "priority": task.priority,
            "section_id": task.section_id,
            "reminder": task.reminder,
        }
        fields.update(changes)
        return cls(**fields)
