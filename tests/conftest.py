"""Shared fixtures: file-backed SQLite database per test, FastAPI client, seed data.

Every test gets a fresh database under tmp_path. SQLite foreign keys are
enabled on each connection so dangling associations fail like they would on
MySQL.
"""

import os

# Must be set before config/storage are imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEBUG", "false")

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

from storage import Base
from storage.database import (
    create_engine_for_url,
    create_session_factory,
    get_session,
    get_session_factory,
)
from main import app
from helpers import create_category, create_post


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_engine_for_url(
        f"sqlite+aiosqlite:///{tmp_path / 'content.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def client(session_factory):
    """FastAPI test client with both session dependencies pointed at the test DB."""
    async def override_get_session():
        async with session_factory() as session:
            yield session
            await session.commit()

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed(session_factory):
    """Categories A, B, C and post P belonging to {A, B}."""
    a = await create_category(session_factory, "A")
    b = await create_category(session_factory, "B")
    c = await create_category(session_factory, "C")
    post = await create_post(
        session_factory, "First post", [a.id, b.id],
        cover_image_url="https://example.com/cover.png",
    )
    return SimpleNamespace(a=a, b=b, c=c, post=post)


@pytest.fixture
async def seventeen_posts(session_factory):
    base = datetime(2024, 1, 1, 12, 0, 0)
    return [
        await create_post(
            session_factory, f"Post {i:02d}", created_at=base + timedelta(minutes=i),
        )
        for i in range(17)
    ]
