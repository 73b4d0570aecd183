from __future__ import annotations

import os

os.environ.setdefault("TASKTRACKER_ENVIRONMENT", "test")
os.environ.setdefault("TASKTRACKER_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncIterator, Awaitable, Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest_asyncio  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from tasktracker.app.core.config import get_settings  # noqa: E402
from tasktracker.app.db import Database, enable_sqlite_foreign_keys, metadata  # noqa: E402
from tasktracker.app.deps import get_db_session  # noqa: E402
from tasktracker.app.main import create_app  # noqa: E402


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine: AsyncEngine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as connection:
        await connection.run_sync(metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


@pytest_asyncio.fixture
async def app(
    engine: AsyncEngine,
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[FastAPI]:
    get_settings.cache_clear()
    application = create_app(get_settings(), Database(engine))

    async def _override_db_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as request_session:
            try:
                yield request_session
            except Exception:
                await request_session.rollback()
                raise

    application.dependency_overrides[get_db_session] = _override_db_session
    try:
        yield application
    finally:
        application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def create_user(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    counter = iter(range(1, 10_000))

    async def _create(name: str = "Ada Lovelace", email: str | None = None) -> dict[str, Any]:
        response = await client.post(
            "/api/users",
            json={"name": name, "email": email or f"user{next(counter)}@example.com"},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest_asyncio.fixture
async def create_category(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    counter = iter(range(1, 10_000))

    async def _create(name: str | None = None, description: str | None = "Work items") -> dict[str, Any]:
        response = await client.post(
            "/api/categories",
            json={"name": name or f"Category {next(counter)}", "description": description},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest_asyncio.fixture
async def create_priority(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    counter = iter(range(1, 10_000))

    async def _create(name: str | None = None, level: int | None = 1) -> dict[str, Any]:
        response = await client.post(
            "/api/priorities",
            json={"name": name or f"Priority {next(counter)}", "level": level},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
