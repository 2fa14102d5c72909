"""Task store contract and backends."""

from gtd.store.base import TaskStore
from gtd.store.memory import MemoryTaskStore

__all__ = ["MemoryTaskStore", "TaskStore"]
