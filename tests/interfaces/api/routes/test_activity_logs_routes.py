from datetime import date, datetime, timezone

import pytest

from projecthub.application.use_cases.activity import record_request_activity, track_screen_time
from projecthub.domain.entities import ActivityAction, ActivityLog
from projecthub.infrastructure.repositories import ActivityLogRepository


@pytest.fixture()
def admin(make_user):
    return make_user("Root", role="admin")


def _log(session, user, method, path):
    return record_request_activity(
        session, user=user, method=method, path=path, ip_address="10.0.0.2", user_agent="browser"
    )


def _log_at(session, user, created_at, description):
    return ActivityLogRepository(session).create(
        ActivityLog(
            id=None,
            user_id=user.id,
            user_role=user.role,
            action=ActivityAction.VIEW,
            model="Project",
            model_id=None,
            description=description,
            ip_address=None,
            user_agent=None,
            event_type="GET /projects",
            created_at=created_at,
        )
    )


def test_listing_requires_admin(client, make_user, auth_headers):
    developer = make_user("Dev", role="developer")

    assert client.get("/activity-logs/", headers=auth_headers(developer)).status_code == 403
    assert client.get("/activity-logs/statistics", headers=auth_headers(developer)).status_code == 403


def test_lists_entries_newest_first(client, session, make_user, admin, auth_headers):
    alice = make_user("Alice")
    first = _log(session, alice, "POST", "/projects")
    second = _log(session, alice, "DELETE", "/tasks/3")

    response = client.get("/activity-logs/", headers=auth_headers(admin))

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body] == [second.id, first.id]
    assert body[0]["action"] == "delete"
    assert body[0]["model"] == "Task"
    assert body[0]["model_id"] == 3
    assert body[0]["description"] == "Alice deleted a Task"
    assert body[0]["event_type"] == "DELETE /tasks/3"


def test_filters_by_role_action_and_search(client, session, make_user, admin, auth_headers):
    alice = make_user("Alice", role="developer")
    maria = make_user("Maria", role="manager")
    created = _log(session, alice, "POST", "/projects")
    _log(session, alice, "GET", "/projects")
    managed = _log(session, maria, "PUT", "/clients/2")
    headers = auth_headers(admin)

    by_role = client.get("/activity-logs/?role=manager", headers=headers).json()
    assert [item["id"] for item in by_role] == [managed.id]

    by_action = client.get("/activity-logs/?role=all&action=create", headers=headers).json()
    assert [item["id"] for item in by_action] == [created.id]

    by_search = client.get("/activity-logs/?search=Client", headers=headers).json()
    assert [item["id"] for item in by_search] == [managed.id]

    assert client.get("/activity-logs/?action=explode", headers=headers).status_code == 422


def test_filters_by_inclusive_date_range(client, session, make_user, admin, auth_headers):
    alice = make_user("Alice")
    _log_at(session, alice, datetime(2025, 12, 8, 23, 59, tzinfo=timezone.utc), "too early")
    start = _log_at(session, alice, datetime(2025, 12, 9, 0, 0, tzinfo=timezone.utc), "first day")
    end = _log_at(session, alice, datetime(2025, 12, 10, 23, 59, tzinfo=timezone.utc), "last day")
    _log_at(session, alice, datetime(2025, 12, 11, 0, 0, tzinfo=timezone.utc), "too late")

    response = client.get(
        "/activity-logs/",
        params={"start_date": date(2025, 12, 9).isoformat(), "end_date": date(2025, 12, 10).isoformat()},
        headers=auth_headers(admin),
    )

    assert [item["description"] for item in response.json()] == ["last day", "first day"]
    assert {item["id"] for item in response.json()} == {start.id, end.id}


def test_statistics(client, session, make_user, admin, auth_headers):
    alice = make_user("Alice", role="developer")
    maria = make_user("Maria", role="manager")
    _log(session, alice, "POST", "/projects")
    _log(session, maria, "GET", "/projects")
    track_screen_time(session, user=alice, duration=60, ip_address=None, user_agent=None)

    response = client.get("/activity-logs/statistics", headers=auth_headers(admin))

    assert response.status_code == 200
    assert response.json() == {
        "total_activities": 3,
        "today_activities": 3,
        "by_role": [
            {"user_role": "developer", "count": 2},
            {"user_role": "manager", "count": 1},
        ],
        "by_action": [
            {"action": "active", "count": 1},
            {"action": "create", "count": 1},
            {"action": "view", "count": 1},
        ],
    }


def test_track_screen_time_and_read_todays_total(client, make_user, auth_headers):
    alice = make_user("Alice")
    headers = auth_headers(alice)

    first = client.post("/activity-logs/screen-time", json={"duration": 1800}, headers=headers)
    client.post("/activity-logs/screen-time", json={"duration": 2100}, headers=headers)

    assert first.status_code == 200
    assert first.json()["success"] is True
    assert first.json()["log_id"] > 0

    today = client.get("/activity-logs/screen-time-today", headers=headers)
    assert today.json() == {"screen_time_seconds": 3900, "formatted": "1h 5m"}


def test_screen_time_today_is_zero_without_heartbeats(client, make_user, auth_headers):
    alice = make_user("Alice")

    response = client.get("/activity-logs/screen-time-today", headers=auth_headers(alice))

    assert response.json() == {"screen_time_seconds": 0, "formatted": "0m"}


@pytest.mark.parametrize("duration", [0, 7201])
def test_track_screen_time_validates_duration(client, make_user, auth_headers, duration):
    alice = make_user("Alice")

    response = client.post(
        "/activity-logs/screen-time", json={"duration": duration}, headers=auth_headers(alice)
    )

    assert response.status_code == 422
