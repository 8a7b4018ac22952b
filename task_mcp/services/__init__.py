"""Task and tag services; raise typed errors from ``task_mcp.services.errors``."""
from task_mcp.services.tag_service import TagService
from task_mcp.services.task_service import TaskService

__all__ = ["TagService", "TaskService"]
