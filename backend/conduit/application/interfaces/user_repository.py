from abc import ABC, abstractmethod

from conduit.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with the generated ID."""
        ...
