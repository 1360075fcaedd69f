# tests/conftest.py

import itertools
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from application.edit_state import EditState
from application.use_cases import TaskStore
from infrastructure.database import Database
from main import create_app


class FakeClock:
    """Returns a fixed start time, one second later on every call."""

    def __init__(self, start: datetime = datetime(2025, 3, 1, 9, 30, 0, 123456)):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture()
def db(tmp_path: Path) -> Database:
    return Database(str(tmp_path / "todo.db"))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(db: Database, clock: FakeClock) -> TaskStore:
    counter = itertools.count(1)
    return TaskStore(db, key="zenTasks", clock=clock, id_factory=lambda: f"task-{next(counter)}")


@pytest.fixture()
def edits(store: TaskStore) -> EditState:
    return EditState(store)


@pytest.fixture()
def client(store: TaskStore) -> TestClient:
    return TestClient(create_app(store))
