"""User model for SQLModel."""
from typing import List

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    Owner record, provisioned outside this service.

    Only the tag-id list is maintained here. ``version`` is bumped on every
    write to ``tags`` so concurrent appends can detect each other.
    """

    user_id: str = Field(primary_key=True, index=True)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    version: int = Field(default=0)
