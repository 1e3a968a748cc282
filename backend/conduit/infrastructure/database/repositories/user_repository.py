from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.application.interfaces import UserRepository
from conduit.domain.entities import User
from conduit.infrastructure.database.models import UserModel


def user_to_entity(model: UserModel) -> User:
    """Map ORM model → domain entity. Shared by every repository that embeds users."""
    return User(
        id=model.id,
        username=model.username,
        email=model.email,
        bio=model.bio,
        image=model.image,
    )


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return user_to_entity(result) if result else None

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return user_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return user_to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            email=user.email,
            bio=user.bio,
            image=user.image,
        )
        self._session.add(model)
        await self._session.flush()
        return user_to_entity(model)
