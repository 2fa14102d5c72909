"""Relational task store backed by SQLAlchemy."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import ColumnElement, Engine, select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gtd.core.errors import StorageError, TaskNotFoundError
from gtd.db.base import create_db_engine, create_session_factory
from gtd.db.init_db import init_db
from gtd.db.tables import TaskRecord
from gtd.models.owner import OwnerID, require_owner
from gtd.models.task import Task, TaskStatus, coerce_status
from gtd.store.base import TaskStore

logger = logging.getLogger(__name__)

# Dialects with a native INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class SqlTaskStore(TaskStore):
    """Task store on a relational database.

    Each operation runs in its own session checked out from the engine's
    connection pool. Search narrows candidates in SQL and applies the same
    substring match as the in-memory store, so both return identical results.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = create_session_factory(engine)
        try:
            init_db(engine)
        except SQLAlchemyError as exc:
            logger.error("Failed to initialize task schema: %s", exc)
            raise StorageError(f"Failed to initialize schema: {exc}") from exc
        logger.info("SqlTaskStore ready dialect=%s", engine.dialect.name)

    @classmethod
    def from_url(cls, url: str, *, pool_size: int = 5) -> "SqlTaskStore":
        return cls(create_db_engine(url, pool_size=pool_size))

    def close(self) -> None:
        self._engine.dispose()

    # ---- low-level helpers ----

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        try:
            with self._session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.error("Task store %s failed: %s", operation, exc)
            raise StorageError(f"Failed to {operation}: {exc}") from exc

    def _list(self, operation: str, *criteria: ColumnElement[bool]) -> list[Task]:
        stmt = (
            select(TaskRecord)
            .where(TaskRecord.deleted_at.is_(None), *criteria)
            .order_by(TaskRecord.created_at.desc(), TaskRecord.id.asc())
        )
        with self._session(operation) as session:
            return [record.to_task() for record in session.scalars(stmt)]

    def _upsert(self, session: Session, values: dict[str, Any]) -> None:
        insert = _UPSERT_INSERTS.get(self._engine.dialect.name)
        if insert is None:
            session.merge(TaskRecord(**values))
            return

        stmt = insert(TaskRecord).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[TaskRecord.id],
            set_={name: stmt.excluded[name] for name in values if name != "id"},
        )
        session.execute(stmt)

    # ---- public API ----

    def get(self, task_id: str) -> Task:
        stmt = select(TaskRecord).where(TaskRecord.id == task_id, TaskRecord.deleted_at.is_(None))
        with self._session("get task") as session:
            record = session.scalars(stmt).first()
            if record is None:
                raise TaskNotFoundError(task_id)
            return record.to_task()

    def get_all(self) -> list[Task]:
        return self._list("list tasks")

    def get_all_by_user_id(self, owner: OwnerID) -> list[Task]:
        owner = require_owner(owner)
        return self._list("list tasks by owner", TaskRecord.owner_id == owner.value)

    def get_by_status(self, status: TaskStatus | str) -> list[Task]:
        status = coerce_status(status)
        return self._list("list tasks by status", TaskRecord.status == status.value)

    def get_by_status_and_user_id(self, status: TaskStatus | str, owner: OwnerID) -> list[Task]:
        status = coerce_status(status)
        owner = require_owner(owner)
        return self._list(
            "list tasks by status and owner",
            TaskRecord.status == status.value,
            TaskRecord.owner_id == owner.value,
        )

    def search(self, query: str) -> list[Task]:
        return [task for task in self._list("search tasks") if task.matches(query)]

    def search_by_user_id(self, query: str, owner: OwnerID) -> list[Task]:
        owner = require_owner(owner)
        candidates = self._list("search tasks by owner", TaskRecord.owner_id == owner.value)
        return [task for task in candidates if task.matches(query)]

    def save(self, task: Task) -> None:
        task.ensure_valid()
        # The caller keeps its old updated_at if the write fails
        stored = task.model_copy(deep=True)
        stored.touch()
        values = TaskRecord.values_from_task(stored)

        with self._session("save task") as session:
            self._upsert(session, values)
            session.commit()

        task.updated_at = stored.updated_at
        logger.debug("Saved task id=%s status=%s", task.id, task.status.value)

    def delete(self, task_id: str) -> None:
        task = self.get(task_id)
        task.delete()

        stmt = (
            update(TaskRecord)
            .where(TaskRecord.id == task_id, TaskRecord.deleted_at.is_(None))
            .values(deleted_at=task.deleted_at, updated_at=task.updated_at)
        )
        with self._session("delete task") as session:
            result = session.execute(stmt)
            session.commit()
            if result.rowcount == 0:
                # Deleted by someone else between the read and the update
                raise TaskNotFoundError(task_id)

        logger.debug("Soft-deleted task id=%s", task_id)
