"""Task schemas for the MCP tools.

Wire names are camelCase (``endAt``, ``needTips``, ``userID``) so agents can
keep sending the same arguments the tool schemas advertise; snake_case field
names are accepted as well.
"""
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from task_mcp.models.task import Task, TaskStatus
from task_mcp.utils.timeutils import to_naive_utc

INPUT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    use_enum_values=True,
    extra="ignore",
)


def _is_zero(value: Any) -> bool:
    # bool is an int subclass; False must not count as a zero priority
    return isinstance(value, int) and not isinstance(value, bool) and value == 0


def _zero_priority_as_unset(value: Any) -> Any:
    """A priority of 0 is outside 1-5 and means "not supplied"."""
    return None if _is_zero(value) else value


class TaskCreate(BaseModel):
    """Schema for creating a task."""
    model_config = INPUT_CONFIG

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    priority: Optional[int] = Field(None, ge=1, le=5)  # None -> DEFAULT_PRIORITY
    end_at: Optional[datetime] = None
    favorite: bool = False
    need_tips: bool = False
    tags: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null and omitted are the same thing on create
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Task title cannot be empty")
        return value

    @field_validator("priority", mode="before")
    @classmethod
    def zero_priority_as_unset(cls, value: Any) -> Any:
        return _zero_priority_as_unset(value)

    @field_validator("end_at")
    @classmethod
    def normalize_end_at(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)


NON_NULLABLE_UPDATE_FIELDS = ("title", "priority", "status", "favorite", "need_tips", "tags")


class TaskUpdate(BaseModel):
    """
    Explicit update patch.

    Every field is independently present or absent; only fields in
    ``model_fields_set`` are written. ``description`` and ``end_at`` can be
    cleared with an explicit null. ``completed_at`` is only honoured next to
    ``status=completed``.
    """
    model_config = INPUT_CONFIG

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[int] = Field(None, ge=1, le=5)
    end_at: Optional[datetime] = None
    favorite: Optional[bool] = None
    need_tips: Optional[bool] = None
    tags: Optional[List[str]] = None
    completed_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def drop_zero_priority(cls, data: Any) -> Any:
        if isinstance(data, dict) and _is_zero(data.get("priority")):
            data = {key: value for key, value in data.items() if key != "priority"}
        return data

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("Task title cannot be empty")
        return value

    @field_validator("end_at", "completed_at")
    @classmethod
    def normalize_timestamps(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)

    @model_validator(mode="after")
    def reject_null_on_required_fields(self) -> "TaskUpdate":
        for name in NON_NULLABLE_UPDATE_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def to_patch(self) -> dict:
        """Only the fields the caller actually supplied, keyed by column name."""
        return self.model_dump(exclude_unset=True)


class TaskFilter(BaseModel):
    """Optional filters for listing tasks; every absent field imposes no constraint."""
    model_config = INPUT_CONFIG

    title: Optional[str] = None
    description: Optional[str] = None
    search_text: Optional[str] = None  # title OR description
    status: Optional[TaskStatus] = None
    priority: Optional[int] = None
    favorite: Optional[bool] = None
    need_tips: Optional[bool] = None
    end_at_start: Optional[datetime] = None
    end_at_end: Optional[datetime] = None
    completed_at_start: Optional[datetime] = None
    completed_at_end: Optional[datetime] = None
    created_at_start: Optional[datetime] = None
    created_at_end: Optional[datetime] = None
    page_size: Optional[int] = Field(None, ge=1)
    page_num: int = Field(1, ge=1)

    @field_validator("priority", mode="before")
    @classmethod
    def zero_priority_as_unset(cls, value: Any) -> Any:
        return _zero_priority_as_unset(value)

    @field_validator(
        "end_at_start", "end_at_end",
        "completed_at_start", "completed_at_end",
        "created_at_start", "created_at_end",
    )
    @classmethod
    def normalize_bounds(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)

    @field_validator("page_num", mode="before")
    @classmethod
    def default_page_num(cls, value: Any) -> Any:
        return 1 if value is None else value


class TaskDelete(BaseModel):
    """A single task id or a list of ids."""
    model_config = INPUT_CONFIG

    id: Union[str, List[str]]

    @property
    def ids(self) -> List[str]:
        return [self.id] if isinstance(self.id, str) else list(self.id)


class TaskRead(BaseModel):
    """Task payload returned to agents."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: str
    user_id: str = Field(serialization_alias="userID")
    title: str
    description: Optional[str] = None
    priority: int
    status: str
    favorite: bool
    need_tips: bool
    tags: List[str] = []
    end_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def serialize(cls, task: Task) -> dict:
        return cls.model_validate(task).model_dump(mode="json", by_alias=True)
