"""
User service orchestrator.

Registration, credential checks, lookups and account deletion.
Passwords are hashed before they reach the database and never leave
this service.

Dependencies: quest_api.boundary.db.CRUD, quest_api.core.security
System role: User account use case orchestration
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quest_api.application.services.quest_service import quest_to_dict
from quest_api.boundary.db.CRUD.progress_crud import (
    user_completed_challenge_crud,
    user_participating_quest_crud,
)
from quest_api.boundary.db.CRUD.user_crud import user_crud
from quest_api.boundary.db.models import UserModel
from quest_api.core.exceptions import (
    AuthenticationError,
    DuplicateEntryError,
    ResourceNotFoundError,
)
from quest_api.core.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def user_to_dict(user: UserModel) -> dict:
    """Flatten a user row without the password hash."""
    return {"id": user.id, "username": user.username, "email": user.email}


class UserService:
    """User service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize user service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def register_user(self, username: str, email: str, password: str) -> dict:
        """
        Register a new user.

        Args:
            username: Login name, must be unused
            email: Contact address, must be unused
            password: Plain password (hashed before storage)

        Returns:
            dict: Created user (id, username, email)

        Raises:
            DuplicateEntryError: If the username or email is taken
        """
        if await user_crud.get_by_username(self.db, username):
            raise DuplicateEntryError("user", {"field": "username"})
        if await user_crud.get_by_email(self.db, email):
            raise DuplicateEntryError("user", {"field": "email"})

        try:
            user = await user_crud.create(
                self.db,
                username=username,
                email=email,
                password=hash_password(password),
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateEntryError("user", {"username": username}) from e

        logger.info("User registered", extra={"user_id": user.id})
        return user_to_dict(user)

    async def authenticate(self, username: str, password: str) -> dict:
        """
        Check credentials.

        Args:
            username: Login name
            password: Plain password

        Returns:
            dict: Authenticated user

        Raises:
            AuthenticationError: If the user is unknown or the password is wrong
        """
        user = await user_crud.get_by_username(self.db, username)
        if not user or not verify_password(password, user.password):
            logger.warning("Failed login attempt", extra={"username": username})
            raise AuthenticationError("Invalid username or password")
        return user_to_dict(user)

    async def get_user(self, user_id: str) -> dict:
        """
        Get a user with the quests they participate in.

        Raises:
            ResourceNotFoundError: If user not found
        """
        user = await user_crud.get_by_id(self.db, user_id)
        if not user:
            raise ResourceNotFoundError("user", user_id)

        quests = await user_crud.get_participating_quests(self.db, user_id)
        data = user_to_dict(user)
        data["participate_quest"] = [quest_to_dict(q, with_challenges=False) for q in quests]
        return data

    async def delete_user(self, user_id: str) -> None:
        """
        Delete a user and all of their progress rows in one transaction.

        Raises:
            ResourceNotFoundError: If user not found
        """
        if not await user_crud.exists(self.db, user_id):
            raise ResourceNotFoundError("user", user_id)

        try:
            await user_participating_quest_crud.delete_by_user(self.db, user_id)
            await user_completed_challenge_crud.delete_by_user(self.db, user_id)
            await user_crud.delete_by_id(self.db, user_id)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error("Failed to delete user", extra={"error": str(e), "user_id": user_id})
            raise

        logger.info("User deleted", extra={"user_id": user_id})
