"""Tests for application/use_cases.py - task rules on top of the store."""

import pytest

from domain.exceptions import TaskNotFoundError, ValidationError


class TestCreateTask:
    @pytest.mark.parametrize("title", ["", None])
    def test_empty_title_rejected(self, use_cases, store, title):
        with pytest.raises(ValidationError, match="Title is required"):
            use_cases.create_task(title, "desc")
        assert len(store) == 0

    def test_forces_incomplete_and_defaults_description(self, use_cases):
        task = use_cases.create_task("Write docs")
        assert task.completed is False
        assert task.description == ""
        assert task.id == 1

    def test_whitespace_title_is_accepted(self, use_cases):
        assert use_cases.create_task("  ").title == "  "


class TestGetTask:
    def test_returns_created(self, use_cases):
        created = use_cases.create_task("a", "b")
        assert use_cases.get_task(created.id) == created

    def test_missing_raises(self, use_cases):
        with pytest.raises(TaskNotFoundError) as excinfo:
            use_cases.get_task(42)
        assert excinfo.value.task_id == 42
        assert excinfo.value.status_code == 404


class TestUpdateTask:
    def test_empty_strings_leave_fields_unchanged(self, use_cases):
        created = use_cases.create_task("title", "desc")
        updated = use_cases.update_task(created.id, "", "", True)
        assert updated.title == "title"
        assert updated.description == "desc"
        assert updated.completed is True

    def test_completed_always_overwritten(self, use_cases):
        created = use_cases.create_task("title")
        use_cases.update_task(created.id, completed=True)
        updated = use_cases.update_task(created.id, title="renamed")
        assert updated.title == "renamed"
        assert updated.completed is False

    def test_missing_raises(self, use_cases):
        with pytest.raises(TaskNotFoundError):
            use_cases.update_task(7, "x", "y", True)


class TestDeleteTask:
    def test_delete_then_get_raises(self, use_cases):
        created = use_cases.create_task("gone")
        use_cases.delete_task(created.id)
        with pytest.raises(TaskNotFoundError):
            use_cases.get_task(created.id)

    def test_missing_raises(self, use_cases):
        with pytest.raises(TaskNotFoundError):
            use_cases.delete_task(1)


def test_get_all_tasks_in_order(use_cases):
    for title in ["a", "b"]:
        use_cases.create_task(title)
    assert [t.title for t in use_cases.get_all_tasks()] == ["a", "b"]
