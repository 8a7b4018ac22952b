"""Translate optional task filters into a SQLModel select statement."""
from datetime import datetime
from typing import Optional

from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import and_, col, or_, select
from sqlmodel.sql.expression import SelectOfScalar

from task_mcp.models.task import Task
from task_mcp.schemas.task import TaskFilter


def date_range(column, start: Optional[datetime], end: Optional[datetime]) -> Optional[ColumnElement]:
    """
    Inclusive range predicate on ``column``.

    Either bound may be omitted for an open-ended range. With neither bound
    there is no constraint at all (not "column IS NULL"). Rows whose column
    is NULL never satisfy a bound.
    """
    conditions = []
    if start is not None:
        conditions.append(column >= start)
    if end is not None:
        conditions.append(column <= end)
    if not conditions:
        return None
    return and_(*conditions)


def build_task_query(user_id: str, filters: Optional[TaskFilter] = None) -> SelectOfScalar[Task]:
    """Build the list query for ``user_id``; results are always newest first."""
    statement = select(Task).where(Task.user_id == user_id)
    filters = filters or TaskFilter()

    if filters.title is not None:
        statement = statement.where(col(Task.title).contains(filters.title, autoescape=True))
    if filters.description is not None:
        statement = statement.where(
            col(Task.description).contains(filters.description, autoescape=True)
        )
    if filters.search_text is not None:
        statement = statement.where(
            or_(
                col(Task.title).contains(filters.search_text, autoescape=True),
                col(Task.description).contains(filters.search_text, autoescape=True),
            )
        )

    # Exact matches; False is a real filter value for the flags
    if filters.status is not None:
        statement = statement.where(Task.status == filters.status)
    if filters.priority is not None:
        statement = statement.where(Task.priority == filters.priority)
    if filters.favorite is not None:
        statement = statement.where(Task.favorite == filters.favorite)
    if filters.need_tips is not None:
        statement = statement.where(Task.need_tips == filters.need_tips)

    for predicate in (
        date_range(col(Task.end_at), filters.end_at_start, filters.end_at_end),
        date_range(col(Task.completed_at), filters.completed_at_start, filters.completed_at_end),
        date_range(col(Task.created_at), filters.created_at_start, filters.created_at_end),
    ):
        if predicate is not None:
            statement = statement.where(predicate)

    statement = statement.order_by(col(Task.created_at).desc())

    if filters.page_size is not None:
        statement = statement.offset((filters.page_num - 1) * filters.page_size).limit(filters.page_size)

    return statement
