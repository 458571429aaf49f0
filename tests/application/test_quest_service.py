"""
Test suite for QuestService and ChallengeService.

Runs the services against an in-memory SQLite database so the CRUD
layer and constraints are exercised end to end.
"""

import pytest

from quest_api.application.services.challenge_service import ChallengeService
from quest_api.application.services.progress_service import ProgressService
from quest_api.application.services.quest_service import QuestService
from quest_api.application.services.user_service import UserService
from quest_api.core.exceptions import DuplicateEntryError, ResourceNotFoundError


@pytest.fixture
def quest_service(test_async_db) -> QuestService:
    return QuestService(db=test_async_db)


@pytest.fixture
def challenge_service(test_async_db) -> ChallengeService:
    return ChallengeService(db=test_async_db)


async def _create_quest(service: QuestService, title: str = "Castle Walk") -> dict:
    return await service.create_quest(
        title=title,
        description="Visit the old castle grounds",
        price=0,
        difficulty="Easy",
    )


def _challenge_fields(name: str = "Main Gate") -> dict:
    return {
        "name": name,
        "description": "",
        "latitude": 35.0,
        "longitude": 139.0,
        "stamp_name": "",
        "stamp_image_color": "",
        "stamp_image_gray": "",
        "flavor_text": "",
    }


class TestQuestLifecycle:
    async def test_create_quest_starts_with_zero_counters(self, quest_service):
        quest = await _create_quest(quest_service)

        assert quest["id"]
        assert quest["num_participate"] == 0
        assert quest["num_clear"] == 0
        assert quest["challenges"] == []

    async def test_get_missing_quest_raises(self, quest_service):
        with pytest.raises(ResourceNotFoundError):
            await quest_service.get_quest("missing")

    async def test_get_all_quests_ordered_by_title(self, quest_service):
        await _create_quest(quest_service, "Zoo Tour")
        await _create_quest(quest_service, "Aquarium")

        quests = await quest_service.get_all_quests()

        assert [q["title"] for q in quests] == ["Aquarium", "Zoo Tour"]

    async def test_get_all_quests_paginates(self, quest_service):
        for title in ("A", "B", "C"):
            await _create_quest(quest_service, title)

        quests = await quest_service.get_all_quests(limit=1, offset=1)

        assert [q["title"] for q in quests] == ["B"]

    async def test_update_keeps_omitted_fields(self, quest_service):
        quest = await _create_quest(quest_service)

        updated = await quest_service.update_quest(quest["id"], price=500, title=None)

        assert updated["price"] == 500
        assert updated["title"] == "Castle Walk"
        assert updated["description"] == "Visit the old castle grounds"

    async def test_update_ignores_unknown_fields(self, quest_service):
        quest = await _create_quest(quest_service)

        updated = await quest_service.update_quest(quest["id"], id="hijack")

        assert updated["id"] == quest["id"]

    async def test_update_missing_quest_raises(self, quest_service):
        with pytest.raises(ResourceNotFoundError):
            await quest_service.update_quest("missing", price=1)

    async def test_delete_quest_removes_challenges_and_participation(
        self, quest_service, challenge_service, test_async_db
    ):
        quest = await _create_quest(quest_service)
        await challenge_service.create_challenge(quest["id"], "gate", **_challenge_fields())
        user = await UserService(db=test_async_db).register_user(
            "alice", "alice@example.com", "correct-horse"
        )
        progress = ProgressService(db=test_async_db)
        await progress.participate_quest(user["id"], quest["id"])

        await quest_service.delete_quest(quest["id"])

        with pytest.raises(ResourceNotFoundError):
            await quest_service.get_quest(quest["id"])
        assert await challenge_service.get_challenges_by_quest(quest["id"]) == []
        assert await progress.get_participated_quest_ids(user["id"]) == []

    async def test_delete_missing_quest_raises(self, quest_service):
        with pytest.raises(ResourceNotFoundError):
            await quest_service.delete_quest("missing")


class TestChallenges:
    async def test_create_challenge_appears_on_quest(self, quest_service, challenge_service):
        quest = await _create_quest(quest_service)

        challenge = await challenge_service.create_challenge(
            quest["id"], "gate", **_challenge_fields()
        )
        loaded = await quest_service.get_quest(quest["id"])

        assert challenge["id"] == "gate"
        assert challenge["quest_id"] == quest["id"]
        assert [c["id"] for c in loaded["challenges"]] == ["gate"]

    async def test_generated_challenge_id(self, quest_service, challenge_service):
        quest = await _create_quest(quest_service)

        challenge = await challenge_service.create_challenge(quest["id"], **_challenge_fields())

        assert challenge["id"]

    async def test_same_id_allowed_in_different_quests(self, quest_service, challenge_service):
        first = await _create_quest(quest_service, "First")
        second = await _create_quest(quest_service, "Second")

        await challenge_service.create_challenge(first["id"], "gate", **_challenge_fields())
        await challenge_service.create_challenge(second["id"], "gate", **_challenge_fields())

        assert (await challenge_service.get_challenge(first["id"], "gate"))["quest_id"] == first["id"]
        assert (await challenge_service.get_challenge(second["id"], "gate"))["quest_id"] == second["id"]

    async def test_same_id_rejected_within_quest(self, quest_service, challenge_service):
        quest = await _create_quest(quest_service)
        await challenge_service.create_challenge(quest["id"], "gate", **_challenge_fields())

        with pytest.raises(DuplicateEntryError):
            await challenge_service.create_challenge(quest["id"], "gate", **_challenge_fields("Again"))

    async def test_challenge_for_missing_quest(self, challenge_service):
        with pytest.raises(ResourceNotFoundError):
            await challenge_service.create_challenge("missing", "gate", **_challenge_fields())

    async def test_get_challenge_in_wrong_quest(self, quest_service, challenge_service):
        first = await _create_quest(quest_service, "First")
        second = await _create_quest(quest_service, "Second")
        await challenge_service.create_challenge(first["id"], "gate", **_challenge_fields())

        with pytest.raises(ResourceNotFoundError):
            await challenge_service.get_challenge(second["id"], "gate")

    async def test_challenges_listed_by_name(self, quest_service, challenge_service):
        quest = await _create_quest(quest_service)
        await challenge_service.create_challenge(quest["id"], "b", **_challenge_fields("Tower"))
        await challenge_service.create_challenge(quest["id"], "a", **_challenge_fields("Moat"))

        challenges = await challenge_service.get_challenges_by_quest(quest["id"])

        assert [c["name"] for c in challenges] == ["Moat", "Tower"]
