"""Tests for the daily project deadline scan."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from projecthub.application.use_cases import deadlines
from projecthub.application.use_cases.deadlines import (
    DEADLINE_REMINDER_TITLE,
    days_until_deadline,
    scan_project_deadlines,
)
from projecthub.domain.entities import Project, ProjectMember
from projecthub.infrastructure.models import NotificationModel, ReminderModel
from projecthub.infrastructure.repositories import NotificationRepository, ProjectRepository

NOW = datetime(2025, 12, 10, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
def make_project(session):
    def _make_project(name="Apollo", *, deadline, manager=None, members=()):
        return ProjectRepository(session).create(
            Project(
                id=None,
                name=name,
                deadline=deadline,
                project_manager_id=manager.id if manager else None,
                members=[
                    ProjectMember(id=None, project_id=None, user_id=member.id, role="developer")
                    for member in members
                ],
            )
        )

    return _make_project


@pytest.fixture()
def team(make_user):
    return {
        "manager": make_user("Maria", role="manager"),
        "members": [make_user("Dev"), make_user("Tess")],
    }


def _rows(session, model):
    session.expire_all()
    return session.query(model).order_by(model.id).all()


@pytest.mark.parametrize("days", [1, 3, 7])
def test_threshold_day_creates_one_notification_and_reminder_per_recipient(
    session, make_project, team, days
):
    project = make_project(
        deadline=NOW + timedelta(days=days), manager=team["manager"], members=team["members"]
    )

    result = scan_project_deadlines(session, now=NOW)

    assert result.projects_checked == 1
    assert result.projects_notified == 1
    assert result.notifications_created == 3
    assert result.reminders_created == 3

    expected_users = [team["manager"].id] + [member.id for member in team["members"]]
    notifications = _rows(session, NotificationModel)
    reminders = _rows(session, ReminderModel)
    assert [row.user_id for row in notifications] == expected_users
    assert [row.user_id for row in reminders] == expected_users
    for row in notifications:
        assert row.type == "deadline_reminder"
        assert (row.related_type, row.related_id) == ("Project", project.id)
        assert row.title == DEADLINE_REMINDER_TITLE
        assert row.is_read is False
    for row in reminders:
        assert row.type == "deadline"
        assert (row.related_model, row.related_model_id) == ("Project", project.id)


def test_message_names_project_day_count_and_deadline_date(session, make_project, team):
    make_project("Apollo", deadline=NOW + timedelta(days=3), manager=team["manager"])

    scan_project_deadlines(session, now=NOW)

    notification = _rows(session, NotificationModel)[0]
    reminder = _rows(session, ReminderModel)[0]
    assert notification.message == "Project 'Apollo' deadline is in 3 day(s) - Dec 13, 2025"
    assert reminder.description == notification.message


def test_rescanning_does_not_duplicate_rows(session, make_project, team):
    make_project(deadline=NOW + timedelta(days=7), manager=team["manager"], members=team["members"])

    first = scan_project_deadlines(session, now=NOW)
    second = scan_project_deadlines(session, now=NOW)

    assert first.notifications_created == 3
    assert second.notifications_created == 0
    assert second.reminders_created == 0
    assert second.projects_notified == 1
    assert len(_rows(session, NotificationModel)) == 3
    assert len(_rows(session, ReminderModel)) == 3


def test_rescanning_later_the_same_day_does_not_duplicate_rows(session, make_project, team):
    make_project(deadline=NOW + timedelta(days=3, hours=6), manager=team["manager"])

    scan_project_deadlines(session, now=NOW)
    scan_project_deadlines(session, now=NOW + timedelta(hours=4))

    assert len(_rows(session, NotificationModel)) == 1
    assert len(_rows(session, ReminderModel)) == 1


@pytest.mark.parametrize("days", [2, 4, 5, 6])
def test_non_threshold_day_creates_nothing(session, make_project, team, days):
    make_project(deadline=NOW + timedelta(days=days), manager=team["manager"], members=team["members"])

    result = scan_project_deadlines(session, now=NOW)

    assert result.projects_checked == 1
    assert result.projects_notified == 0
    assert _rows(session, NotificationModel) == []
    assert _rows(session, ReminderModel) == []


def test_partial_days_are_floored(session, make_project, team):
    make_project("Floored", deadline=NOW + timedelta(days=3, hours=20), manager=team["manager"])
    make_project("Short", deadline=NOW + timedelta(days=2, hours=23), manager=team["manager"])

    result = scan_project_deadlines(session, now=NOW)

    assert result.projects_checked == 2
    assert result.projects_notified == 1
    [notification] = _rows(session, NotificationModel)
    assert "'Floored' deadline is in 3 day(s)" in notification.message


def test_projects_outside_the_window_are_not_checked(session, make_project, team):
    make_project("Past", deadline=NOW - timedelta(days=1), manager=team["manager"])
    make_project("Far", deadline=NOW + timedelta(days=8), manager=team["manager"])
    make_project("Open ended", deadline=None, manager=team["manager"])

    result = scan_project_deadlines(session, now=NOW)

    assert result.projects_checked == 0
    assert _rows(session, NotificationModel) == []


@pytest.mark.parametrize("days", [1, 3, 7])
def test_remind_at_is_one_day_before_deadline(session, make_project, team, days):
    deadline = NOW + timedelta(days=days)
    make_project(deadline=deadline, manager=team["manager"])

    scan_project_deadlines(session, now=NOW)

    [reminder] = _rows(session, ReminderModel)
    assert reminder.remind_at == (deadline - timedelta(days=1)).replace(tzinfo=None)


def test_each_threshold_day_adds_a_reminder_with_the_same_remind_at(session, make_project, team):
    deadline = NOW + timedelta(days=7)
    make_project(deadline=deadline, manager=team["manager"])

    for days_before in (7, 3, 1):
        scan_project_deadlines(session, now=deadline - timedelta(days=days_before))

    reminders = _rows(session, ReminderModel)
    assert len(reminders) == 3
    assert {row.remind_at for row in reminders} == {(deadline - timedelta(days=1)).replace(tzinfo=None)}
    assert len({row.description for row in reminders}) == 3


def test_manager_listed_as_member_collapses_to_one_record(session, make_project, team):
    manager = team["manager"]
    make_project(deadline=NOW + timedelta(days=1), manager=manager, members=[manager])

    result = scan_project_deadlines(session, now=NOW)

    # The membership entry resolves to the rows already created for the manager.
    assert result.notifications_created == 1
    assert result.reminders_created == 1
    assert [row.user_id for row in _rows(session, NotificationModel)] == [manager.id]


def test_project_without_manager_notifies_members_only(session, make_project, team):
    make_project(deadline=NOW + timedelta(days=1), members=team["members"])

    scan_project_deadlines(session, now=NOW)

    assert [row.user_id for row in _rows(session, NotificationModel)] == [
        member.id for member in team["members"]
    ]


def test_recipient_list_keeps_manager_and_member_entries(make_user):
    manager = make_user("Maria", role="manager")
    project = Project(
        id=1,
        name="Apollo",
        deadline=NOW,
        project_manager=manager,
        members=[ProjectMember(id=1, project_id=1, user_id=manager.id)],
    )

    assert deadlines.deadline_recipients(project) == [manager.id, manager.id]


def test_persistence_errors_propagate(session, make_project, team, monkeypatch):
    make_project(deadline=NOW + timedelta(days=3), manager=team["manager"])

    def _fail(self, notification):
        raise OperationalError("INSERT INTO notification", {}, Exception("database is locked"))

    monkeypatch.setattr(NotificationRepository, "create_if_absent", _fail)

    with pytest.raises(OperationalError):
        scan_project_deadlines(session, now=NOW)


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(days=7), 7),
        (timedelta(days=6, hours=23, minutes=59), 6),
        (timedelta(hours=1), 0),
        (timedelta(hours=-1), -1),
        (timedelta(days=-2), -2),
    ],
)
def test_days_until_deadline_is_signed_and_floored(delta, expected):
    assert days_until_deadline(NOW + delta, NOW) == expected


def test_days_until_deadline_accepts_naive_deadlines():
    assert days_until_deadline(datetime(2025, 12, 13, 9, 0), NOW) == 3
