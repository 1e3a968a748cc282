"""Dependency wiring — binds repositories and services to one session scope.

Callers (a web layer, a script) use these as async context managers; the
session commits when the block exits cleanly and rolls back otherwise.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from conduit.application.services import ArticleService, UserService
from conduit.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyUserRepository,
)
from conduit.infrastructure.database.session import session_scope


@asynccontextmanager
async def get_article_service(
    factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[ArticleService]:
    """Provides an ArticleService instance with its repository wired up."""
    async with session_scope(factory) as session:
        yield ArticleService(SQLAlchemyArticleRepository(session))


@asynccontextmanager
async def get_user_service(
    factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[UserService]:
    """Provides a UserService instance with its repository wired up."""
    async with session_scope(factory) as session:
        yield UserService(SQLAlchemyUserRepository(session))
