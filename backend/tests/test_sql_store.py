# tests/test_sql_store.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from sqlalchemy import text

from gtd.core.errors import StorageError
from gtd.db.base import create_db_engine
from gtd.models.task import new_task
from gtd.store.sql import SqlTaskStore


def test_tasks_persist_across_store_instances(tmp_path: Path) -> None:
    url = f"sqlite:///{tmp_path / 'tasks.db'}"
    first = SqlTaskStore.from_url(url)
    task = new_task("Survives restart", owner_id="u1")
    task.tags = ["durable"]
    first.save(task)
    first.close()

    second = SqlTaskStore.from_url(url)
    try:
        assert second.get(task.id) == task
    finally:
        second.close()


def test_soft_deleted_rows_stay_in_table(tmp_path: Path) -> None:
    engine = create_db_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    store = SqlTaskStore(engine)
    task = new_task("Soft")
    store.save(task)

    store.delete(task.id)

    with engine.connect() as conn:
        row = conn.execute(text("SELECT deleted_at FROM tasks WHERE id = :id"), {"id": task.id}).one()
    assert row.deleted_at is not None
    store.close()


def test_datetimes_come_back_timezone_aware_utc(tmp_path: Path) -> None:
    store = SqlTaskStore.from_url(f"sqlite:///{tmp_path / 'tasks.db'}")
    task = new_task("Across zones")
    plus_two = timezone(timedelta(hours=2))
    task.due_date = datetime(2026, 5, 1, 12, 0, tzinfo=plus_two)
    store.save(task)

    fetched = store.get(task.id)

    assert fetched.due_date == task.due_date
    assert fetched.due_date.utcoffset() == timedelta(0)
    assert fetched.created_at.tzinfo is not None
    store.close()


def test_in_memory_sqlite_url_shares_one_database() -> None:
    store = SqlTaskStore.from_url("sqlite://")
    task = new_task("Ephemeral")
    store.save(task)

    assert store.get(task.id).title == "Ephemeral"
    store.close()


def test_backend_failures_surface_as_storage_error(tmp_path: Path) -> None:
    engine = create_db_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    store = SqlTaskStore(engine)
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE tasks"))

    with pytest.raises(StorageError) as excinfo:
        store.get_all()
    assert excinfo.value.__cause__ is not None

    with pytest.raises(StorageError):
        store.save(new_task("Nowhere to go"))
    store.close()


def test_failed_save_leaves_updated_at_alone(tmp_path: Path) -> None:
    engine = create_db_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    store = SqlTaskStore(engine)
    task = new_task("Unsaved")
    before = task.updated_at
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE tasks"))

    with pytest.raises(StorageError):
        store.save(task)

    assert task.updated_at == before
    store.close()


def test_successful_save_advances_updated_at(tmp_path: Path) -> None:
    store = SqlTaskStore.from_url(f"sqlite:///{tmp_path / 'tasks.db'}")
    task = new_task("Saved")
    before = task.updated_at

    store.save(task)

    assert task.updated_at > before
    assert store.get(task.id).updated_at == task.updated_at
    store.close()
