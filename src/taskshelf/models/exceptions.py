"""Custom exceptions for Taskshelf."""


class TaskshelfError(Exception):
    """Base exception for all Taskshelf errors."""


class NotFoundError(TaskshelfError):
    """Raised when a section or task id does not exist.

    Attributes:
        entity: Kind of entity that was looked up ("section" or "task")
        entity_id: The id that could not be resolved
    """

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity.capitalize()} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id
