"""Shared fixtures: an in-memory SQLite database and an HTTP client bound to it."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.domain.entities import Category
from app.infrastructure.database import Base, build_engine, build_session_factory, get_db_session
from app.infrastructure.database.repositories import SQLAlchemyCategoryRepository
from app.main import app


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    test_engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def categories(session_factory) -> list[Category]:
    """Three committed categories (ids 1, 2, 3)."""
    async with session_factory() as session:
        repository = SQLAlchemyCategoryRepository(session)
        created = [Category(name=f"cat{i}", description=f"desc {i}") for i in range(1, 4)]
        for category in created:
            await repository.add(category)
        await repository.commit()
    return created


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            finally:
                await session.rollback()

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.pop(get_db_session, None)
