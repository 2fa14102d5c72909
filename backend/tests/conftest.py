# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from gtd.models.owner import OwnerID
from gtd.store.base import TaskStore
from gtd.store.memory import MemoryTaskStore
from gtd.store.sql import SqlTaskStore


@pytest.fixture(params=["memory", "sql"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> Iterator[TaskStore]:
    """Every backend must pass the same contract tests."""
    if request.param == "memory":
        task_store: TaskStore = MemoryTaskStore()
    else:
        task_store = SqlTaskStore.from_url(f"sqlite:///{tmp_path / 'tasks.db'}")
    yield task_store
    task_store.close()


@pytest.fixture()
def owner() -> OwnerID:
    return OwnerID("u1")


@pytest.fixture()
def other_owner() -> OwnerID:
    return OwnerID("u2")
