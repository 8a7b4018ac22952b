"""Tag schemas for the MCP tools."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TagInput(BaseModel):
    """One tag to create; color is free-form and not validated."""
    model_config = ConfigDict(extra="ignore")

    text: str = Field(..., min_length=1)
    color: str

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Tag text cannot be empty")
        return value


class TagBatch(BaseModel):
    """Non-empty batch of tags for a single user."""
    model_config = ConfigDict(extra="ignore")

    tags: List[TagInput] = Field(..., min_length=1)
