import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./.pytest-blogapi.db")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_db
from app.db.schema import create_schema
from app.db.session import build_engine, build_sessionmaker
from app.main import start_server


@pytest_asyncio.fixture
async def engine(tmp_path):
    eng = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'blogs.db'}")
    await create_schema(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def sessionmaker(engine):
    return build_sessionmaker(engine)


@pytest_asyncio.fixture
async def client(sessionmaker):
    async def _get_db():
        async with sessionmaker() as session:
            yield session

    start_server.dependency_overrides[get_db] = _get_db
    async with AsyncClient(transport=ASGITransport(app=start_server), base_url="http://test") as c:
        yield c
    start_server.dependency_overrides.clear()


@pytest_asyncio.fixture
async def author(client):
    res = await client.post("/api/v1/authors", json={"name": "Ada", "email": "ada@x.com"})
    assert res.status_code == 201
    return res.json()


@pytest_asyncio.fixture
async def blog(client, author):
    res = await client.post(
        "/api/v1/blogs",
        json={"title": "Hi", "content": "Body", "tags": ["a", "b"], "authorId": author["id"]},
    )
    assert res.status_code == 201
    return res.json()
