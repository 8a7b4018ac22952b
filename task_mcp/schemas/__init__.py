"""Request and response schemas."""
from task_mcp.schemas.tag import TagBatch, TagInput
from task_mcp.schemas.task import TaskCreate, TaskDelete, TaskFilter, TaskRead, TaskUpdate

__all__ = [
    "TagBatch",
    "TagInput",
    "TaskCreate",
    "TaskDelete",
    "TaskFilter",
    "TaskRead",
    "TaskUpdate",
]
