"""Build the task store selected by the settings."""

import logging

from gtd.core.settings import Settings
from gtd.store.base import TaskStore
from gtd.store.memory import MemoryTaskStore
from gtd.store.sql import SqlTaskStore

logger = logging.getLogger(__name__)


def build_task_store(settings: Settings) -> TaskStore:
    """Return a relational store when configured, otherwise an in-memory one."""
    if settings.uses_sql_store:
        logger.info("Using relational task storage")
        return SqlTaskStore.from_url(settings.database_url_resolved, pool_size=settings.db_pool_size)

    logger.info("Using in-memory task storage (data will be lost when the process stops)")
    return MemoryTaskStore()
