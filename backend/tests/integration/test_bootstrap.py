import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from conduit import main
from conduit.infrastructure.database import init_database


@pytest.mark.asyncio
async def test_bootstrap_creates_schema(monkeypatch):
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)

    async def init_test_database() -> None:
        await init_database(engine)

    monkeypatch.setattr(main, "init_database", init_test_database)
    try:
        await main.bootstrap()
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))
    finally:
        await engine.dispose()

    assert {"users", "articles", "article_favorites", "comments"} <= tables
