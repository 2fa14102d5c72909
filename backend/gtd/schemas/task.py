"""Pydantic schemas that turn request payloads into task operations."""

from datetime import date, datetime, time, timezone

from pydantic import BaseModel, Field

from gtd.models.owner import OwnerID
from gtd.models.task import Task, TaskStatus, Timeframe, new_task, to_utc


class TaskBase(BaseModel):
    """Shared task fields."""

    title: str = Field(..., min_length=1)
    description: str = ""
    project_id: str | None = None
    contexts: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    due_date: datetime | None = None
    time_estimate: int | None = Field(None, ge=0)  # minutes
    energy_required: str | None = None
    priority: int | None = None
    timeframe: Timeframe | None = None
    is_recurring: bool = False
    recurring_rule: str | None = None


class TaskCreate(TaskBase):
    """Schema for creating a new task; it lands in the inbox unless told otherwise."""

    status: TaskStatus = TaskStatus.INBOX
    scheduled_date: datetime | None = None

    def to_task(self, owner: OwnerID) -> Task:
        task = new_task(self.title, self.description, owner)
        task.project_id = self.project_id
        task.contexts = list(self.contexts)
        task.tags = list(self.tags)
        task.due_date = to_utc(self.due_date)
        task.time_estimate = self.time_estimate
        task.energy_required = self.energy_required
        task.priority = self.priority
        task.timeframe = self.timeframe
        task.is_recurring = self.is_recurring
        task.recurring_rule = self.recurring_rule
        _apply_status(task, self.status, self.scheduled_date)
        return task


class TaskUpdate(BaseModel):
    """Schema for editing an existing task (all fields optional)."""

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    status: TaskStatus | None = None
    project_id: str | None = None
    contexts: list[str] | None = None
    tags: list[str] | None = None
    due_date: datetime | None = None
    scheduled_date: datetime | None = None
    time_estimate: int | None = Field(None, ge=0)
    energy_required: str | None = None
    priority: int | None = None
    timeframe: Timeframe | None = None
    is_recurring: bool | None = None
    recurring_rule: str | None = None

    def apply_to(self, task: Task) -> Task:
        """Copy the fields that were set onto ``task``; the caller saves it."""
        update_data = self.model_dump(exclude_unset=True)
        status = update_data.pop("status", None)
        scheduled_date = update_data.get("scheduled_date")

        for field, value in update_data.items():
            if field in ("contexts", "tags") and value is None:
                value = []
            elif field == "description" and value is None:
                value = ""
            elif isinstance(value, datetime):
                value = to_utc(value)
            setattr(task, field, value)

        if status is not None and status != task.status:
            _apply_status(task, status, scheduled_date)
        else:
            task.touch()
        return task


class QuickCapture(BaseModel):
    """Schema for quick capture; captured items always go to the inbox."""

    title: str = Field(..., min_length=1)
    description: str = ""

    def to_task(self, owner: OwnerID) -> Task:
        return new_task(self.title, self.description, owner)


class ScheduleRequest(BaseModel):
    """Schema for scheduling a task on a calendar day."""

    date: date

    def scheduled_at(self) -> datetime:
        return datetime.combine(self.date, time.min, tzinfo=timezone.utc)


def _apply_status(task: Task, status: TaskStatus, scheduled_date: datetime | None) -> None:
    if status == TaskStatus.DONE:
        task.mark_as_done()
    elif status == TaskStatus.SCHEDULED and scheduled_date is not None:
        task.mark_as_scheduled(scheduled_date)
    elif status == TaskStatus.NEXT:
        task.mark_as_next()
    elif status == TaskStatus.WAITING:
        task.mark_as_waiting()
    elif status == TaskStatus.SOMEDAY:
        task.mark_as_someday()
    elif status == TaskStatus.PROJECT:
        task.mark_as_project()
    else:
        task.status = status
        task.touch()
