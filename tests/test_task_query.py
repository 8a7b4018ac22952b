"""Tests for task list filtering and ordering."""

from datetime import datetime

import pytest

from task_mcp.schemas.task import TaskFilter
from task_mcp.services.task_query import build_task_query, date_range
from task_mcp.services.task_service import TaskService
from task_mcp.models import Task

from tests.conftest import OTHER_OWNER, OWNER


def titles(tasks):
    return [task.title for task in tasks]


@pytest.fixture
def service(session):
    return TaskService(session)


@pytest.fixture
def board(make_task):
    """A small set of tasks with distinct creation times (oldest first)."""
    make_task(
        "Buy groceries",
        description="milk and eggs",
        priority=2,
        favorite=True,
        created_at=datetime(2025, 1, 1, 9, 0),
        end_at=datetime(2025, 1, 5),
    )
    make_task(
        "Write report",
        description="quarterly numbers",
        priority=5,
        status="completed",
        need_tips=True,
        completed_at=datetime(2025, 1, 3, 18, 0),
        created_at=datetime(2025, 1, 2, 9, 0),
        end_at=datetime(2025, 1, 10),
    )
    make_task(
        "Call plumber",
        status="in-progress",
        created_at=datetime(2025, 1, 3, 9, 0),
    )
    make_task(
        "Book 100% refund",
        description="travel_agency claim",
        created_at=datetime(2025, 1, 4, 9, 0),
        end_at=datetime(2025, 1, 20),
    )
    make_task("Someone else's task", user_id=OTHER_OWNER, created_at=datetime(2025, 1, 5))


class TestListOrdering:
    """Unfiltered listing."""

    def test_no_filter_returns_owner_tasks_newest_first(self, service, board):
        tasks = service.list_tasks(OWNER)

        assert titles(tasks) == [
            "Book 100% refund",
            "Call plumber",
            "Write report",
            "Buy groceries",
        ]

    def test_no_matches_is_empty_list(self, service, board):
        assert service.list_tasks("nobody") == []

    def test_empty_filter_equals_no_filter(self, service, board):
        assert titles(service.list_tasks(OWNER, TaskFilter())) == titles(service.list_tasks(OWNER))


class TestListFilters:
    """Each optional field narrows the result independently."""

    def test_title_substring(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(title="report"))

        assert titles(tasks) == ["Write report"]

    def test_description_substring(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(description="quarterly"))

        assert titles(tasks) == ["Write report"]

    def test_description_filter_skips_null_descriptions(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(description=""))

        assert "Call plumber" not in titles(tasks)
        assert len(tasks) == 3

    def test_wildcards_are_matched_literally(self, service, board):
        assert titles(service.list_tasks(OWNER, TaskFilter(title="100%"))) == ["Book 100% refund"]
        assert titles(service.list_tasks(OWNER, TaskFilter(description="l_a"))) == ["Book 100% refund"]
        assert service.list_tasks(OWNER, TaskFilter(title="%")) == service.list_tasks(
            OWNER, TaskFilter(title="100%")
        )

    def test_search_text_matches_title_or_description(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(search_text="milk"))
        assert titles(tasks) == ["Buy groceries"]

        tasks = service.list_tasks(OWNER, TaskFilter(search_text="plumber"))
        assert titles(tasks) == ["Call plumber"]

    def test_status_exact_match(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(status="in-progress"))

        assert titles(tasks) == ["Call plumber"]

    def test_priority_exact_match(self, service, board):
        assert titles(service.list_tasks(OWNER, TaskFilter(priority=5))) == ["Write report"]

    def test_priority_zero_is_no_filter(self, service, board):
        assert len(service.list_tasks(OWNER, TaskFilter(priority=0))) == 4

    def test_favorite_true_and_false(self, service, board):
        assert titles(service.list_tasks(OWNER, TaskFilter(favorite=True))) == ["Buy groceries"]
        assert "Buy groceries" not in titles(service.list_tasks(OWNER, TaskFilter(favorite=False)))
        assert len(service.list_tasks(OWNER, TaskFilter(favorite=False))) == 3

    def test_need_tips(self, service, board):
        assert titles(service.list_tasks(OWNER, TaskFilter(need_tips=True))) == ["Write report"]

    def test_filters_combine_with_and(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(status="pending", favorite=True))
        assert titles(tasks) == ["Buy groceries"]

        tasks = service.list_tasks(OWNER, TaskFilter(status="completed", favorite=True))
        assert tasks == []


class TestDateRanges:
    """Inclusive, open-ended ranges on endAt, completedAt and createdAt."""

    def test_end_at_start_only_is_open_ended_and_skips_nulls(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(end_at_start=datetime(2025, 1, 10)))

        assert titles(tasks) == ["Book 100% refund", "Write report"]

    def test_end_at_end_only(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(end_at_end=datetime(2025, 1, 5)))

        assert titles(tasks) == ["Buy groceries"]

    def test_bounds_are_inclusive(self, service, board):
        filters = TaskFilter(end_at_start=datetime(2025, 1, 5), end_at_end=datetime(2025, 1, 10))

        assert titles(service.list_tasks(OWNER, filters)) == ["Write report", "Buy groceries"]

    def test_completed_at_range(self, service, board):
        filters = TaskFilter(
            completed_at_start=datetime(2025, 1, 3), completed_at_end=datetime(2025, 1, 4)
        )

        assert titles(service.list_tasks(OWNER, filters)) == ["Write report"]

    def test_created_at_range(self, service, board):
        filters = TaskFilter(
            created_at_start=datetime(2025, 1, 2, 9, 0), created_at_end=datetime(2025, 1, 3, 9, 0)
        )

        assert titles(service.list_tasks(OWNER, filters)) == ["Call plumber", "Write report"]

    def test_timezone_aware_bounds_are_compared_in_utc(self, service, board):
        filters = TaskFilter.model_validate({"createdAtStart": "2025-01-04T11:00:00+02:00"})

        assert titles(service.list_tasks(OWNER, filters)) == ["Book 100% refund"]

    def test_date_range_without_bounds_is_no_constraint(self):
        assert date_range(Task.end_at, None, None) is None


class TestPaging:
    """Optional pageSize / pageNum."""

    def test_page_size_limits_results(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(page_size=3))

        assert titles(tasks) == ["Book 100% refund", "Call plumber", "Write report"]

    def test_page_num_offsets(self, service, board):
        tasks = service.list_tasks(OWNER, TaskFilter(page_size=3, page_num=2))

        assert titles(tasks) == ["Buy groceries"]

    def test_page_num_alone_does_not_paginate(self, service, board):
        assert len(service.list_tasks(OWNER, TaskFilter(page_num=2))) == 4


def test_query_is_scoped_and_ordered():
    sql = str(build_task_query(OWNER).compile(compile_kwargs={"literal_binds": True}))

    assert "task.user_id = 'user-1'" in sql
    assert "ORDER BY task.created_at DESC" in sql
