"""In-memory task store guarded by a reader/writer lock."""

import logging
from collections.abc import Callable

from gtd.core.errors import TaskNotFoundError
from gtd.models.owner import OwnerID, require_owner
from gtd.models.task import Task, TaskStatus, coerce_status, sort_tasks
from gtd.store.base import TaskStore
from gtd.store.locks import ReadWriteLock

logger = logging.getLogger(__name__)


class MemoryTaskStore(TaskStore):
    """Task store that keeps deep copies of saved tasks in a dict.

    Reads share the lock; ``save`` and ``delete`` hold it exclusively.
    Data is lost when the process exits.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = ReadWriteLock()
        logger.info("MemoryTaskStore ready")

    def _select(self, predicate: Callable[[Task], bool]) -> list[Task]:
        with self._lock.read():
            found = [
                task.model_copy(deep=True)
                for task in self._tasks.values()
                if not task.is_deleted() and predicate(task)
            ]
        return sort_tasks(found)

    def get(self, task_id: str) -> Task:
        with self._lock.read():
            task = self._tasks.get(task_id)
            if task is None or task.is_deleted():
                raise TaskNotFoundError(task_id)
            return task.model_copy(deep=True)

    def get_all(self) -> list[Task]:
        return self._select(lambda task: True)

    def get_all_by_user_id(self, owner: OwnerID) -> list[Task]:
        owner = require_owner(owner)
        return self._select(lambda task: task.belongs_to(owner))

    def get_by_status(self, status: TaskStatus | str) -> list[Task]:
        status = coerce_status(status)
        return self._select(lambda task: task.status == status)

    def get_by_status_and_user_id(self, status: TaskStatus | str, owner: OwnerID) -> list[Task]:
        status = coerce_status(status)
        owner = require_owner(owner)
        return self._select(lambda task: task.status == status and task.belongs_to(owner))

    def search(self, query: str) -> list[Task]:
        return self._select(lambda task: task.matches(query))

    def search_by_user_id(self, query: str, owner: OwnerID) -> list[Task]:
        owner = require_owner(owner)
        return self._select(lambda task: task.belongs_to(owner) and task.matches(query))

    def save(self, task: Task) -> None:
        task.ensure_valid()

        with self._lock.write():
            task.touch()
            self._tasks[task.id] = task.model_copy(deep=True)

        logger.debug("Saved task id=%s status=%s", task.id, task.status.value)

    def delete(self, task_id: str) -> None:
        with self._lock.write():
            task = self._tasks.get(task_id)
            if task is None or task.is_deleted():
                raise TaskNotFoundError(task_id)
            task.delete()

        logger.debug("Soft-deleted task id=%s", task_id)
