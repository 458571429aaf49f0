"""Tests for the current user's progress endpoints."""

from quest_api.api.deps.dependencies import get_progress_service


def test_participated_quests(authed_client, mock_progress_service, current_user_id):
    mock_progress_service.get_participated_quest_ids.return_value = ["q1", "q2"]
    authed_client.app.dependency_overrides[get_progress_service] = lambda: mock_progress_service

    response = authed_client.get("/me/participated_quests")

    assert response.status_code == 200
    assert response.json() == ["q1", "q2"]
    mock_progress_service.get_participated_quest_ids.assert_called_once_with(current_user_id)


def test_completed_challenges(authed_client, mock_progress_service):
    mock_progress_service.get_completed_challenge_ids.return_value = []
    authed_client.app.dependency_overrides[get_progress_service] = lambda: mock_progress_service

    response = authed_client.get("/me/completed_challenges")

    assert response.status_code == 200
    assert response.json() == []


def test_progress_requires_authentication(client, mock_progress_service):
    client.app.dependency_overrides[get_progress_service] = lambda: mock_progress_service

    assert client.get("/me/participated_quests").status_code == 401
    assert client.get("/me/completed_challenges").status_code == 401
