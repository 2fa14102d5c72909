"""Seed a task store with sample GTD tasks."""

import logging

from gtd.models.owner import OwnerID
from gtd.models.task import Task, new_task
from gtd.store.base import TaskStore

logger = logging.getLogger(__name__)


def seed_tasks(store: TaskStore, owner: OwnerID) -> list[Task]:
    """Add one sample task per GTD bucket for ``owner`` and return them."""
    capture = new_task(
        "Capture all open loops",
        "Gather all tasks, ideas, and commitments into the inbox",
        owner,
    )

    process = new_task(
        "Process inbox items",
        "Go through inbox and decide what to do with each item",
        owner,
    )
    process.mark_as_next()
    process.contexts = ["home"]

    reply = new_task(
        "Response from email",
        "Waiting for reply from team about project timeline",
        owner,
    )
    reply.mark_as_waiting()
    reply.contexts = ["email"]

    language = new_task("Learn a new language", "Consider learning Spanish or German", owner)
    language.mark_as_someday()
    language.tags = ["learning"]

    website = new_task(
        "Redesign personal website",
        "Project to update and refresh my personal website",
        owner,
    )
    website.mark_as_project()

    sample_tasks = [capture, process, reply, language, website]
    for task in sample_tasks:
        store.save(task)

    logger.info("Seeded %d sample tasks owner=%s", len(sample_tasks), owner)
    return sample_tasks
