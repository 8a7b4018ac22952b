"""Task model for SQLModel."""
from enum import Enum
from datetime import datetime
from typing import List, Optional
import uuid

from sqlalchemy import JSON, Column, String
from sqlmodel import Field, SQLModel

from task_mcp.utils.timeutils import utcnow

DEFAULT_PRIORITY = 3


class TaskStatus(str, Enum):
    """Lifecycle states of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class Task(SQLModel, table=True):
    """Task entity owned by exactly one user."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(sa_column=Column(String, index=True, nullable=False))
    title: str = Field(min_length=1)
    description: Optional[str] = Field(default=None)
    priority: int = Field(default=DEFAULT_PRIORITY)
    status: str = Field(default=TaskStatus.PENDING.value, max_length=20)
    favorite: bool = Field(default=False)
    need_tips: bool = Field(default=False)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))  # tag ids
    end_at: Optional[datetime] = Field(default=None)  # due date
    completed_at: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow, index=True)
