"""SQLModel tables."""
from task_mcp.models.tag import Tag
from task_mcp.models.task import DEFAULT_PRIORITY, Task, TaskStatus
from task_mcp.models.user import User

__all__ = ["DEFAULT_PRIORITY", "Tag", "Task", "TaskStatus", "User"]
