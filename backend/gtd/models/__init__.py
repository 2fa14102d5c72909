"""Domain models."""

from gtd.models.owner import OwnerID
from gtd.models.task import Task, TaskStatus, Timeframe, new_task

__all__ = ["OwnerID", "Task", "TaskStatus", "Timeframe", "new_task"]
