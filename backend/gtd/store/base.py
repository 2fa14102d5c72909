"""Storage contract shared by every task store backend."""

from abc import ABC, abstractmethod

from gtd.models.owner import OwnerID, require_owner
from gtd.models.task import Task, TaskStatus


class TaskStore(ABC):
    """Owner- and status-scoped collection of tasks.

    Every list operation excludes soft-deleted tasks and returns tasks newest
    first (``created_at`` descending, then ``id``). Returned tasks are copies;
    changes reach the store only through ``save``.
    """

    @abstractmethod
    def get(self, task_id: str) -> Task:
        """Return the task, or raise ``TaskNotFoundError`` if missing or deleted."""

    @abstractmethod
    def get_all(self) -> list[Task]:
        """Return all live tasks."""

    @abstractmethod
    def get_all_by_user_id(self, owner: OwnerID) -> list[Task]:
        """Return the owner's live tasks."""

    @abstractmethod
    def get_by_status(self, status: TaskStatus | str) -> list[Task]:
        """Return live tasks with exactly this status."""

    @abstractmethod
    def get_by_status_and_user_id(self, status: TaskStatus | str, owner: OwnerID) -> list[Task]:
        """Return the owner's live tasks with exactly this status."""

    @abstractmethod
    def search(self, query: str) -> list[Task]:
        """Return live tasks whose title, description, contexts or tags contain ``query``.

        Matching is case-insensitive; an empty query matches every live task.
        """

    @abstractmethod
    def search_by_user_id(self, query: str, owner: OwnerID) -> list[Task]:
        """Owner-scoped ``search``."""

    @abstractmethod
    def save(self, task: Task) -> None:
        """Validate, refresh ``updated_at`` and insert or fully overwrite the task.

        Raises ``TaskValidationError`` before any write and ``StorageError`` on
        backend failure.
        """

    @abstractmethod
    def delete(self, task_id: str) -> None:
        """Soft-delete the task, or raise ``TaskNotFoundError``."""

    def close(self) -> None:
        """Release backend resources."""
        return

    # Derived queries, identical for every backend

    def get_project_tasks(self, project_id: str, owner: OwnerID) -> list[Task]:
        """Return the owner's tasks that belong to the given project."""
        return [task for task in self.get_all_by_user_id(owner) if task.project_id == project_id]

    def get_available_tasks(self, owner: OwnerID) -> list[Task]:
        """Return the owner's tasks that could still be added to a project."""
        return [
            task
            for task in self.get_all_by_user_id(owner)
            if not task.project_id and not task.is_project()
        ]

    def count_by_status(self, owner: OwnerID | None = None) -> dict[TaskStatus, int]:
        tasks = self.get_all() if owner is None else self.get_all_by_user_id(require_owner(owner))
        counts = dict.fromkeys(TaskStatus, 0)
        for task in tasks:
            counts[task.status] += 1
        return counts
