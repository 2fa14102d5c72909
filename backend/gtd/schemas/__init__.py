"""Pydantic schemas for task payloads."""

from gtd.schemas.task import (
    QuickCapture,
    ScheduleRequest,
    TaskCreate,
    TaskUpdate,
)

__all__ = ["QuickCapture", "ScheduleRequest", "TaskCreate", "TaskUpdate"]
