"""
Router tests for /sessions endpoints.
"""

from unittest.mock import AsyncMock

import pytest

from backend.api.deps.dependencies import get_course_service, get_session_service
from backend.core.exceptions import SessionNotFoundError

SESSION = {"id": 4, "course_id": 1, "start_time": "09:00:00", "end_time": "10:30:00", "user_id": 1}


@pytest.fixture
def mock_session_service(app):
    service = AsyncMock()
    service.create_session.return_value = 4
    service.get_session.return_value = SESSION
    service.session_exists.return_value = True
    app.dependency_overrides[get_session_service] = lambda: service
    return service


@pytest.fixture
def mock_course_service(app):
    service = AsyncMock()
    service.course_exists.return_value = True
    app.dependency_overrides[get_course_service] = lambda: service
    return service


def test_create_session(client, authed, mock_session_service, mock_course_service):
    response = client.post(
        "/api/v1/sessions",
        json={"course_id": 1, "start_time": "09:00:00", "end_time": "10:30:00"},
    )

    assert response.status_code == 201
    assert response.json()["id"] == 4
    kwargs = mock_session_service.create_session.await_args.kwargs
    assert kwargs["owner_username"] == "alice"


def test_create_session_end_before_start(client, authed, mock_session_service, mock_course_service):
    response = client.post(
        "/api/v1/sessions",
        json={"course_id": 1, "start_time": "11:00:00", "end_time": "10:00:00"},
    )

    assert response.status_code == 422
    mock_session_service.create_session.assert_not_called()


def test_create_session_unknown_course(client, authed, mock_session_service, mock_course_service):
    mock_course_service.course_exists.return_value = False

    response = client.post(
        "/api/v1/sessions",
        json={"course_id": 7, "start_time": "09:00:00", "end_time": "10:00:00"},
    )

    assert response.status_code == 404
    mock_session_service.create_session.assert_not_called()


def test_update_missing_session(client, authed, mock_session_service, mock_course_service):
    mock_session_service.get_session.side_effect = SessionNotFoundError(4)

    response = client.put(
        "/api/v1/sessions/4",
        json={"course_id": 1, "start_time": "09:00:00", "end_time": "10:00:00"},
    )

    assert response.status_code == 404
    mock_session_service.update_session.assert_not_called()


def test_update_session(client, authed, mock_session_service, mock_course_service):
    response = client.put(
        "/api/v1/sessions/4",
        json={"course_id": 1, "start_time": "09:00:00", "end_time": "10:30:00"},
    )

    assert response.status_code == 200
    mock_session_service.update_session.assert_awaited_once()


def test_delete_missing_session(client, authed, mock_session_service):
    mock_session_service.delete_session_by_id.return_value = 0

    response = client.delete("/api/v1/sessions/4")

    assert response.status_code == 404


def test_list_course_sessions(client, mock_session_service):
    mock_session_service.get_sessions_by_course.return_value = [SESSION]

    response = client.get("/api/v1/sessions/course/1")

    assert response.status_code == 200
    assert response.json()[0]["start_time"] == "09:00:00"


def test_update_someone_elses_session(client, authed, mock_session_service, mock_course_service):
    mock_session_service.get_session.return_value = {**SESSION, "user_id": 2}

    response = client.put(
        "/api/v1/sessions/4",
        json={"course_id": 1, "start_time": "09:00:00", "end_time": "10:30:00"},
    )

    assert response.status_code == 403
    mock_session_service.update_session.assert_not_called()


def test_delete_own_session(client, authed, mock_session_service):
    mock_session_service.delete_session_by_id.return_value = 1

    response = client.delete("/api/v1/sessions/4")

    assert response.status_code == 204
    mock_session_service.delete_session_by_id.assert_awaited_once_with(4)


def test_delete_someone_elses_session(client, authed, mock_session_service):
    mock_session_service.get_session.return_value = {**SESSION, "user_id": 2}

    response = client.delete("/api/v1/sessions/4")

    assert response.status_code == 403
    mock_session_service.delete_session_by_id.assert_not_called()
