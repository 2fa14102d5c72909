"""Project operations.

A project is a task with status ``project``; member tasks point at it through
``project_id``.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from gtd.core.errors import NotAProjectError
from gtd.models.owner import OwnerID
from gtd.models.task import Task, TaskStatus, new_task
from gtd.store.base import TaskStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectProgress:
    """Completion of a project's member tasks."""

    project_id: str
    total: int
    done: int

    @property
    def percent(self) -> int:
        if self.total == 0:
            return 0
        return round(self.done * 100 / self.total)


def create_project(
    store: TaskStore,
    title: str,
    description: str,
    owner: OwnerID,
    *,
    due_date: datetime | None = None,
    contexts: list[str] | None = None,
    tags: list[str] | None = None,
) -> Task:
    project = new_task(title, description, owner)
    project.mark_as_project()
    project.due_date = due_date
    project.contexts = list(contexts or [])
    project.tags = list(tags or [])
    store.save(project)
    logger.info("Created project id=%s owner=%s", project.id, owner)
    return project


def get_project(store: TaskStore, project_id: str) -> Task:
    """Return the project, raising ``NotAProjectError`` for ordinary tasks."""
    project = store.get(project_id)
    if not project.is_project():
        raise NotAProjectError(project_id)
    return project


def list_projects(store: TaskStore, owner: OwnerID) -> list[Task]:
    return store.get_by_status_and_user_id(TaskStatus.PROJECT, owner)


def complete_project(store: TaskStore, project_id: str) -> Task:
    project = get_project(store, project_id)
    project.mark_as_done()
    store.save(project)
    return project


def archive_project(store: TaskStore, project_id: str) -> Task:
    """Archive a project. There is no archive status, so it is marked done."""
    return complete_project(store, project_id)


def delete_project(store: TaskStore, project_id: str) -> None:
    """Soft-delete a project. Member tasks keep their ``project_id``."""
    project = get_project(store, project_id)
    store.delete(project.id)
    logger.info("Deleted project id=%s", project.id)


def add_task_to_project(store: TaskStore, project_id: str, task_id: str) -> Task:
    project = get_project(store, project_id)
    task = store.get(task_id)
    task.project_id = project.id
    store.save(task)
    logger.debug("Added task id=%s to project id=%s", task.id, project.id)
    return task


def project_progress(store: TaskStore, project_id: str, owner: OwnerID) -> ProjectProgress:
    tasks = store.get_project_tasks(project_id, owner)
    done = sum(1 for task in tasks if task.status == TaskStatus.DONE)
    return ProjectProgress(project_id=project_id, total=len(tasks), done=done)
