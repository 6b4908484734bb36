"""Activity handlers: creation, listing per project and both update paths."""

import time
from datetime import datetime, timezone

import pytest

from activity_tracker.errors import NotFoundError
from activity_tracker.models import ActivityStatus
from activity_tracker.schemas import ActivityCreate, ActivityStatusUpdate, ActivityUpdate
from activity_tracker.services import activities


def _create_input(project_id, **overrides):
    fields = {
        "project_id": project_id,
        "name": "Design",
        "description": "Initial design work",
        "start_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "end_date": datetime(2024, 1, 15, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return ActivityCreate(**fields)


class TestCreateActivity:
    """Test activity creation and its project check."""

    def test_create_activity(self, db, project):
        result = activities.create_activity(db, _create_input(project.id, status="in_progress"))

        assert result.id is not None
        assert result.project_id == project.id
        assert result.name == "Design"
        assert result.description == "Initial design work"
        assert result.status == ActivityStatus.IN_PROGRESS
        assert result.start_date.replace(tzinfo=None) == datetime(2024, 1, 1)
        assert result.end_date.replace(tzinfo=None) == datetime(2024, 1, 15)
        assert result.created_at == result.updated_at

    def test_status_defaults_to_todo(self, db, project):
        result = activities.create_activity(db, _create_input(project.id))
        assert result.status == ActivityStatus.TODO

    def test_end_before_start_is_accepted(self, db, project):
        result = activities.create_activity(db, _create_input(
            project.id,
            start_date=datetime(2024, 2, 1, tzinfo=timezone.utc),
            end_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ))
        assert result.id is not None

    def test_missing_project(self, db):
        with pytest.raises(NotFoundError, match="Project with id 999 not found"):
            activities.create_activity(db, _create_input(999))


class TestGetProjectActivities:
    """Test listing activities of one project."""

    def test_project_without_activities(self, db, project):
        assert activities.get_project_activities(db, project.id) == []

    def test_unknown_project_yields_empty_list(self, db):
        assert activities.get_project_activities(db, 424242) == []

    def test_only_own_activities(self, db, make_project, make_activity):
        first = make_project("First")
        second = make_project("Second")
        make_activity(first.id, "A1")
        make_activity(first.id, "A2")
        make_activity(second.id, "B1")

        result = activities.get_project_activities(db, first.id)

        assert [a.name for a in result] == ["A1", "A2"]
        assert all(a.project_id == first.id for a in result)


class TestUpdateActivity:
    """Test partial activity updates."""

    def test_update_name_only(self, db, activity):
        before = {
            "description": activity.description,
            "start_date": activity.start_date,
            "end_date": activity.end_date,
            "status": activity.status,
            "created_at": activity.created_at,
        }
        previous_updated_at = activity.updated_at
        time.sleep(0.01)

        result = activities.update_activity(db, ActivityUpdate(id=activity.id, name="X"))

        assert result.name == "X"
        for field, value in before.items():
            assert getattr(result, field) == value
        assert result.updated_at > previous_updated_at

    def test_update_several_fields(self, db, activity):
        result = activities.update_activity(db, ActivityUpdate(
            id=activity.id,
            description=None,
            end_date=datetime(2024, 3, 1, tzinfo=timezone.utc),
            status="review",
        ))

        assert result.description is None
        assert result.end_date.replace(tzinfo=None) == datetime(2024, 3, 1)
        assert result.status == ActivityStatus.REVIEW
        assert result.name == "Activity 1"

    def test_update_missing_activity(self, db):
        with pytest.raises(NotFoundError, match="Activity with id 99999 not found"):
            activities.update_activity(db, ActivityUpdate(id=99999, name="X"))


class TestUpdateActivityStatus:
    """Test the narrow status update used by the board."""

    @pytest.mark.parametrize("sequence", [
        ["in_progress", "review", "done"],
        ["done", "todo", "review", "in_progress"],
        ["todo", "todo", "todo"],
    ])
    def test_any_transition_refreshes_updated_at(self, db, activity, sequence):
        previous = activity.updated_at
        for status in sequence:
            time.sleep(0.01)
            result = activities.update_activity_status(
                db, ActivityStatusUpdate(id=activity.id, status=status)
            )
            assert result.status == ActivityStatus(status)
            assert result.updated_at > previous
            previous = result.updated_at

    def test_other_fields_untouched(self, db, activity):
        name, description = activity.name, activity.description
        start, end = activity.start_date, activity.end_date

        result = activities.update_activity_status(
            db, ActivityStatusUpdate(id=activity.id, status="done")
        )

        assert (result.name, result.description) == (name, description)
        assert (result.start_date, result.end_date) == (start, end)

    def test_missing_activity(self, db):
        with pytest.raises(NotFoundError, match="not found"):
            activities.update_activity_status(db, ActivityStatusUpdate(id=99999, status="done"))
