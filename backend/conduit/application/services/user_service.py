"""Application service for user registration and lookup."""

import logging

from conduit.application.interfaces import UserRepository
from conduit.application.schemas import UserCreate
from conduit.domain.entities import User
from conduit.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def register_user(self, data: UserCreate) -> User:
        if await self._repository.get_by_username(data.username) is not None:
            raise DuplicateEntityError("User", "username", data.username)
        if await self._repository.get_by_email(data.email) is not None:
            raise DuplicateEntityError("User", "email", data.email)
        user = await self._repository.create(data.to_entity())
        logger.info("Registered user '%s' (id=%s)", user.username, user.id)
        return user

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def get_user_by_username(self, username: str) -> User:
        user = await self._repository.get_by_username(username)
        if user is None:
            raise EntityNotFoundError("User", username)
        return user
