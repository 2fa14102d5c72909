"""Task model for GTD workflow management.

A project is a task whose status is ``project``. Tasks are pure in-memory
objects: transition methods mutate the task and refresh ``updated_at``, and
nothing is persisted until the task is passed to a store's ``save``.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from gtd.core.errors import ErrorCode, TaskValidationError
from gtd.models.owner import OwnerID


class TaskStatus(str, Enum):
    """GTD bucket a task currently sits in."""

    INBOX = "inbox"  # uncategorized / unprocessed
    NEXT = "next"
    WAITING = "waiting"  # waiting for someone else
    SCHEDULED = "scheduled"
    SOMEDAY = "someday"  # someday / maybe
    DONE = "done"
    PROJECT = "project"  # multi-step outcome containing other tasks
    REFERENCE = "reference"


class Timeframe(str, Enum):
    """When a task should be addressed."""

    TODAY = "today"
    THIS_WEEK = "this_week"
    NEXT_WEEK = "next_week"
    SOMEDAY = "someday"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_task_id() -> str:
    return uuid4().hex


def to_utc(value: datetime | None) -> datetime | None:
    """Return ``value`` as an aware UTC datetime; naive values are taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def coerce_status(status: "TaskStatus | str") -> TaskStatus:
    """Return ``status`` as a ``TaskStatus`` or raise ``TaskValidationError``."""
    try:
        return TaskStatus(status)
    except ValueError as exc:
        raise TaskValidationError(ErrorCode.INVALID_STATUS, f"invalid task status: {status!r}") from exc


_DATETIME_FIELDS = ("due_date", "scheduled_date", "created_at", "updated_at", "completed_at", "deleted_at")


class Task(BaseModel):
    """A single GTD task or project."""

    id: str = Field(default_factory=generate_task_id)
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.INBOX
    owner_id: str | None = None
    project_id: str | None = None  # parent project, not enforced
    parent_id: str | None = None  # hierarchical subtasking
    contexts: list[str] = Field(default_factory=list)  # where it can be done: home, phone, ...
    tags: list[str] = Field(default_factory=list)

    # Planning metadata
    due_date: datetime | None = None
    scheduled_date: datetime | None = None
    time_estimate: int | None = None  # minutes
    energy_required: str | None = None
    priority: int | None = None  # 1 (highest) to 3
    timeframe: Timeframe | None = None
    is_recurring: bool = False
    recurring_rule: str | None = None

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    completed_at: datetime | None = None
    deleted_at: datetime | None = None

    @field_validator(*_DATETIME_FIELDS)
    @classmethod
    def _normalize_datetime(cls, value: datetime | None) -> datetime | None:
        return to_utc(value)

    @field_validator("description", mode="before")
    @classmethod
    def _normalize_description(cls, value: str | None) -> str | None:
        return "" if value is None else value

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title='{self.title}', status={self.status})>"

    def ensure_valid(self) -> None:
        """Raise ``TaskValidationError`` if the task cannot be saved."""
        if not isinstance(self.title, str) or not self.title:
            raise TaskValidationError(ErrorCode.INVALID_TITLE, "task title cannot be empty")
        self.status = coerce_status(self.status)
        if self.description is None:
            self.description = ""
        # Direct field edits skip the validators above
        for name in _DATETIME_FIELDS:
            setattr(self, name, to_utc(getattr(self, name)))

    def touch(self) -> datetime:
        """Refresh ``updated_at``; the new value is always later than the old one."""
        now = utcnow()
        if self.updated_at is not None and now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now
        return now

    # -- transitions: unconditional, any status can move to any other --

    def mark_as_next(self) -> None:
        self.status = TaskStatus.NEXT
        self.touch()

    def mark_as_waiting(self) -> None:
        self.status = TaskStatus.WAITING
        self.touch()

    def mark_as_scheduled(self, scheduled_date: datetime) -> None:
        self.status = TaskStatus.SCHEDULED
        self.scheduled_date = to_utc(scheduled_date)
        self.touch()

    def mark_as_someday(self) -> None:
        self.status = TaskStatus.SOMEDAY
        self.touch()

    def mark_as_done(self) -> None:
        """Complete the task. ``completed_at`` is kept on later status changes."""
        self.status = TaskStatus.DONE
        self.completed_at = self.touch()

    def mark_as_project(self) -> None:
        self.status = TaskStatus.PROJECT
        self.touch()

    def delete(self) -> None:
        """Soft-delete the task; its status is left unchanged."""
        self.deleted_at = self.touch()

    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_project(self) -> bool:
        return self.status == TaskStatus.PROJECT

    def belongs_to(self, owner: OwnerID) -> bool:
        return self.owner_id is not None and self.owner_id == owner.value

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title, description, contexts and tags.

        The empty query matches every task.
        """
        needle = query.lower()
        if needle in self.title.lower() or needle in (self.description or "").lower():
            return True
        if any(needle in context.lower() for context in self.contexts):
            return True
        return any(needle in tag.lower() for tag in self.tags)


def new_task(title: str, description: str = "", owner_id: OwnerID | str | None = None) -> Task:
    """Create an inbox task with fresh timestamps.

    An empty title is accepted here and rejected when the task is saved.
    """
    now = utcnow()
    if isinstance(owner_id, OwnerID):
        owner_id = owner_id.value
    return Task(
        title=title,
        description=description,
        owner_id=owner_id,
        status=TaskStatus.INBOX,
        created_at=now,
        updated_at=now,
    )


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Order tasks newest first; tasks created at the same instant by id."""
    return sorted(sorted(tasks, key=lambda t: t.id), key=lambda t: to_utc(t.created_at), reverse=True)
