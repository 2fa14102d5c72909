"""Process bootstrap: logging, task store and sample data."""

import logging

from gtd.core.logging import configure_logging
from gtd.core.settings import Settings, get_settings
from gtd.db.seed_data import seed_tasks
from gtd.models.owner import OwnerID
from gtd.store.base import TaskStore
from gtd.store.factory import build_task_store
from gtd.store.memory import MemoryTaskStore

logger = logging.getLogger(__name__)


def create_task_store(settings: Settings | None = None) -> TaskStore:
    """Instantiate and configure the task store for this process."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    store = build_task_store(settings)

    # Sample tasks only make sense for a store that starts empty every run
    if isinstance(store, MemoryTaskStore) and settings.seed_sample_tasks:
        seed_tasks(store, OwnerID(settings.sample_owner_id))

    logger.info("%s %s ready (%s)", settings.project_name, settings.version, settings.environment)
    return store
