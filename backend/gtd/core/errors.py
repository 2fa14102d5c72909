"""Errors raised by the task core.

Read paths raise ``TaskNotFoundError``; ``save`` raises ``TaskValidationError``
before touching the backend; backend failures surface as ``StorageError``.
"""


class ErrorCode:
    """Error codes for validation failures."""

    INVALID_TITLE = "INVALID_TITLE"
    INVALID_STATUS = "INVALID_STATUS"
    NOT_A_PROJECT = "NOT_A_PROJECT"


class GTDError(Exception):
    """Base class for all task core errors."""


class TaskNotFoundError(GTDError, LookupError):
    """The task does not exist or has been soft-deleted."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


class TaskValidationError(GTDError, ValueError):
    """Task data failed validation; the caller must fix the input."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(message)


class NotAProjectError(TaskValidationError):
    """A project operation was attempted on a task that is not a project."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(ErrorCode.NOT_A_PROJECT, f"Not a project: {task_id}")


class StorageError(GTDError):
    """The storage backend failed; the operation was not retried."""
