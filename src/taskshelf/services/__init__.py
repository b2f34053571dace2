"""Services module for Taskshelf - Business logic layer."""

from .projection import SectionSummary, resolve_section, section_summaries
from .section_service import SectionService
from .task_service import TaskService
from .workspace import Workspace, create_workspace

__all__ = [
    "SectionService",
    "TaskService",
    "Workspace",
    "create_workspace",
    "SectionSummary",
    "resolve_section",
    "section_summaries",
]
