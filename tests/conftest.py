"""Pytest configuration and fixtures for the task MCP server tests."""

from datetime import datetime

import pytest

from task_mcp.db.config import Database
from task_mcp.db.init import init_db
from task_mcp.models import Task, User

OWNER = "user-1"
OTHER_OWNER = "user-2"


@pytest.fixture
def database(tmp_path):
    """Database handle on a temporary SQLite file with all tables created."""
    db = Database(f"sqlite:///{tmp_path / 'tasks.db'}", echo=False)
    init_db(db)

    yield db

    db.disconnect()


@pytest.fixture
def session(database):
    """Test database session."""
    with database.session() as session:
        yield session


@pytest.fixture
def user(session):
    """The owner row tags are appended to."""
    owner = User(user_id=OWNER, tags=["existing-tag"])
    session.add(owner)
    session.commit()
    session.refresh(owner)
    return owner


@pytest.fixture
def make_task(session):
    """Insert a task row directly, bypassing the service defaults."""

    def _make_task(title: str, user_id: str = OWNER, **fields) -> Task:
        fields.setdefault("created_at", datetime(2025, 1, 1, 12, 0, 0))
        task = Task(user_id=user_id, title=title, **fields)
        session.add(task)
        session.commit()
        session.refresh(task)
        return task

    return _make_task
