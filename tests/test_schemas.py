"""Tests for argument parsing and payload serialization."""

from datetime import datetime

import pytest
from pydantic import ValidationError as SchemaValidationError

from task_mcp.models import Task
from task_mcp.schemas import TagBatch, TaskCreate, TaskDelete, TaskFilter, TaskRead, TaskUpdate


class TestTaskCreate:

    def test_camel_case_arguments(self):
        data = TaskCreate.model_validate(
            {"userID": "u", "title": "  Keep spacing  ", "needTips": True, "endAt": "2025-02-01T10:00:00Z"}
        )

        assert data.title == "  Keep spacing  "
        assert data.need_tips is True
        assert data.end_at == datetime(2025, 2, 1, 10, 0)
        assert data.end_at.tzinfo is None

    def test_nulls_fall_back_to_defaults(self):
        data = TaskCreate.model_validate({"title": "x", "tags": None, "favorite": None})

        assert data.tags == []
        assert data.favorite is False

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_rejected(self, title):
        with pytest.raises(SchemaValidationError):
            TaskCreate(title=title)

    def test_missing_title_is_rejected(self):
        with pytest.raises(SchemaValidationError):
            TaskCreate.model_validate({"description": "no title"})

    @pytest.mark.parametrize("priority", [-1, 6])
    def test_out_of_range_priority_is_rejected(self, priority):
        with pytest.raises(SchemaValidationError):
            TaskCreate(title="x", priority=priority)


class TestTaskUpdate:

    def test_patch_contains_only_supplied_fields(self):
        patch = TaskUpdate.model_validate({"id": "t1", "userID": "u", "needTips": False})

        assert patch.to_patch() == {"need_tips": False}

    def test_explicit_null_is_kept_for_nullable_fields(self):
        patch = TaskUpdate.model_validate({"description": None, "completedAt": None})

        assert patch.to_patch() == {"description": None, "completed_at": None}

    @pytest.mark.parametrize("field", ["title", "status", "favorite", "needTips", "tags", "priority"])
    def test_explicit_null_is_rejected_for_required_fields(self, field):
        with pytest.raises(SchemaValidationError):
            TaskUpdate.model_validate({field: None})

    def test_zero_priority_is_dropped(self):
        assert TaskUpdate.model_validate({"priority": 0}).to_patch() == {}

    def test_status_is_a_plain_string(self):
        patch = TaskUpdate.model_validate({"status": "in-progress"}).to_patch()

        assert patch == {"status": "in-progress"}
        assert type(patch["status"]) is str

    def test_unknown_status_is_rejected(self):
        with pytest.raises(SchemaValidationError):
            TaskUpdate.model_validate({"status": "done"})


class TestTaskFilter:

    def test_defaults_impose_nothing(self):
        filters = TaskFilter()

        assert filters.page_size is None
        assert filters.page_num == 1
        assert filters.favorite is None

    def test_priority_zero_means_unset(self):
        assert TaskFilter(priority=0).priority is None

    def test_false_flag_is_kept(self):
        assert TaskFilter.model_validate({"favorite": False}).favorite is False


class TestTaskDelete:

    def test_single_id_is_normalized(self):
        assert TaskDelete.model_validate({"id": "abc"}).ids == ["abc"]

    def test_id_list_is_kept(self):
        assert TaskDelete.model_validate({"id": ["a", "b"]}).ids == ["a", "b"]


class TestTagBatch:

    def test_empty_batch_is_rejected(self):
        with pytest.raises(SchemaValidationError):
            TagBatch.model_validate({"tags": []})

    def test_color_is_not_validated(self):
        batch = TagBatch.model_validate({"tags": [{"text": "urgent", "color": "not-a-color"}]})

        assert batch.tags[0].color == "not-a-color"


def test_task_read_uses_wire_names():
    task = Task(
        id="t1",
        user_id="u1",
        title="Report",
        priority=3,
        status="pending",
        favorite=False,
        need_tips=True,
        tags=["tag-1"],
        end_at=datetime(2025, 1, 2, 3, 4, 5),
        created_at=datetime(2025, 1, 1),
    )

    payload = TaskRead.serialize(task)

    assert payload["userID"] == "u1"
    assert payload["needTips"] is True
    assert payload["endAt"] == "2025-01-02T03:04:05"
    assert payload["completedAt"] is None
    assert payload["createdAt"] == "2025-01-01T00:00:00"
    assert payload["tags"] == ["tag-1"]
