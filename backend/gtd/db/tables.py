"""Relational mapping of the task record."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from gtd.db.base import Base
from gtd.models.task import Task, TaskStatus, Timeframe


class UTCDateTime(TypeDecorator):
    """Stores aware datetimes as naive UTC and returns them as aware UTC."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def process_result_value(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)


class TaskRecord(Base):
    """Row of the ``tasks`` table."""

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    owner_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    project_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    parent_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    contexts: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    due_date: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    scheduled_date: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    time_estimate: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    energy_required: Mapped[str | None] = mapped_column(String(20), nullable=True)
    priority: Mapped[int | None] = mapped_column(Integer, nullable=True)
    timeframe: Mapped[str | None] = mapped_column(String(20), nullable=True)
    is_recurring: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    recurring_rule: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<TaskRecord(id={self.id}, title='{self.title}', status={self.status})>"

    @staticmethod
    def values_from_task(task: Task) -> dict[str, Any]:
        """Column values for ``task``; enums are stored by value."""
        values = task.model_dump()
        values["status"] = TaskStatus(task.status).value
        values["timeframe"] = Timeframe(task.timeframe).value if task.timeframe is not None else None
        values["contexts"] = list(task.contexts)
        values["tags"] = list(task.tags)
        return values

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description or "",
            status=self.status,
            owner_id=self.owner_id,
            project_id=self.project_id,
            parent_id=self.parent_id,
            contexts=list(self.contexts or []),
            tags=list(self.tags or []),
            due_date=self.due_date,
            scheduled_date=self.scheduled_date,
            time_estimate=self.time_estimate,
            energy_required=self.energy_required,
            priority=self.priority,
            timeframe=self.timeframe,
            is_recurring=bool(self.is_recurring),
            recurring_rule=self.recurring_rule,
            created_at=self.created_at,
            updated_at=self.updated_at,
            completed_at=self.completed_at,
            deleted_at=self.deleted_at,
        )
