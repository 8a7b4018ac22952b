"""Tag model for SQLModel."""
import uuid

from sqlalchemy import Column, String
from sqlmodel import Field, SQLModel


class Tag(SQLModel, table=True):
    """Label a user can attach to tasks; color is free-form (e.g. '#FF5733')."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(sa_column=Column(String, index=True, nullable=False))
    text: str
    color: str
