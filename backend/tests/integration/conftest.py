"""Shared fixtures: an in-memory SQLite database per test."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from conduit.domain.entities import User
from conduit.infrastructure.database import init_database
from conduit.infrastructure.database.repositories import SQLAlchemyUserRepository


@pytest_asyncio.fixture
async def engine():
    # StaticPool keeps the single in-memory database alive across sessions.
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await init_database(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def users(session) -> dict[str, User]:
    repository = SQLAlchemyUserRepository(session)
    created = {}
    for name in ("alice", "bob", "carol"):
        created[name] = await repository.create(User(username=name, email=f"{name}@example.com"))
    return created
