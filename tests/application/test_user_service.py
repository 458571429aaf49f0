"""Test suite for UserService against an in-memory database."""

import pytest

from quest_api.application.services.progress_service import ProgressService
from quest_api.application.services.quest_service import QuestService
from quest_api.application.services.user_service import UserService
from quest_api.boundary.db.CRUD.user_crud import user_crud
from quest_api.core.exceptions import (
    AuthenticationError,
    DuplicateEntryError,
    ResourceNotFoundError,
)


@pytest.fixture
def user_service(test_async_db) -> UserService:
    return UserService(db=test_async_db)


async def _register(service: UserService, username: str = "alice", email: str = "alice@example.com") -> dict:
    return await service.register_user(username=username, email=email, password="correct-horse")


async def test_register_hashes_password(user_service, test_async_db):
    user = await _register(user_service)

    stored = await user_crud.get_by_id(test_async_db, user["id"])
    assert stored.password != "correct-horse"
    assert "password" not in user


async def test_register_duplicate_username(user_service):
    await _register(user_service)

    with pytest.raises(DuplicateEntryError) as exc_info:
        await _register(user_service, email="other@example.com")
    assert exc_info.value.details["field"] == "username"


async def test_register_duplicate_email(user_service):
    await _register(user_service)

    with pytest.raises(DuplicateEntryError) as exc_info:
        await _register(user_service, username="bob")
    assert exc_info.value.details["field"] == "email"


async def test_authenticate(user_service):
    user = await _register(user_service)

    assert (await user_service.authenticate("alice", "correct-horse"))["id"] == user["id"]


async def test_authenticate_wrong_password(user_service):
    await _register(user_service)

    with pytest.raises(AuthenticationError):
        await user_service.authenticate("alice", "wrong-password")


async def test_authenticate_unknown_user(user_service):
    with pytest.raises(AuthenticationError):
        await user_service.authenticate("nobody", "whatever")


async def test_get_user_lists_participated_quests(user_service, test_async_db):
    user = await _register(user_service)
    quest = await QuestService(db=test_async_db).create_quest("Castle Walk", "", 0, "Easy")
    await ProgressService(db=test_async_db).participate_quest(user["id"], quest["id"])

    detail = await user_service.get_user(user["id"])

    assert [q["id"] for q in detail["participate_quest"]] == [quest["id"]]
    assert "challenges" not in detail["participate_quest"][0]


async def test_get_missing_user(user_service):
    with pytest.raises(ResourceNotFoundError):
        await user_service.get_user("missing")


async def test_delete_user_removes_progress(user_service, test_async_db):
    user = await _register(user_service)
    quest = await QuestService(db=test_async_db).create_quest("Castle Walk", "", 0, "Easy")
    progress = ProgressService(db=test_async_db)
    await progress.participate_quest(user["id"], quest["id"])

    await user_service.delete_user(user["id"])

    with pytest.raises(ResourceNotFoundError):
        await user_service.get_user(user["id"])
    assert await progress.get_participated_quest_ids(user["id"]) == []


async def test_delete_missing_user(user_service):
    with pytest.raises(ResourceNotFoundError):
        await user_service.delete_user("missing")
