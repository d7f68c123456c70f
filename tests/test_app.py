import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_db
from app.db.schema import distribute_blogs
from app.db.session import build_engine, build_sessionmaker
from app.main import _normalize_cors, start_server
from app.schemas.blog import AuthorDTO, BlogDTO


def test_normalize_cors_accepts_csv_json_and_list():
    assert _normalize_cors("http://a, http://b") == ["http://a", "http://b"]
    assert _normalize_cors('["http://a", " http://b "]') == ["http://a", "http://b"]
    assert _normalize_cors(["http://a", ""]) == ["http://a"]
    assert _normalize_cors("") == []


def test_build_engine_rejects_sync_drivers():
    with pytest.raises(RuntimeError):
        build_engine("postgresql://localhost/blogs")


async def test_distribute_blogs_is_noop_on_sqlite(engine):
    assert await distribute_blogs(engine) is False


async def test_health_endpoints(client, blog):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"

    res = await client.get("/api/v1/health/db")
    assert res.status_code == 200
    body = res.json()
    assert body["db"] == "ok"
    assert body["dialect"] == "sqlite"
    assert body["blog_count"] == 1


async def test_unreachable_store_is_service_unavailable(tmp_path):
    # diretório inexistente: o SQLite não consegue abrir o arquivo
    broken = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'blogs.db'}")
    sessions = build_sessionmaker(broken)

    async def _get_db():
        async with sessions() as session:
            yield session

    start_server.dependency_overrides[get_db] = _get_db
    try:
        async with AsyncClient(transport=ASGITransport(app=start_server), base_url="http://test") as c:
            for path in ("/api/v1/blogs", "/api/v1/blogs/1", "/api/v1/authors"):
                res = await c.get(path)
                assert res.status_code == 503
                assert res.json()["error"] == "store_unavailable"
    finally:
        start_server.dependency_overrides.clear()
        await broken.dispose()


def test_wire_models_inherit_camel_case_config():
    by_alias = BlogDTO.model_validate({"title": "T", "content": "C", "authorId": 1})
    by_name = BlogDTO(title="T", content="C", author_id=1)
    assert by_alias == by_name
    assert "authorId" in by_name.model_dump(by_alias=True)
    assert BlogDTO.model_config["json_schema_extra"]["example"]["authorId"] == 1
    assert AuthorDTO.model_config["populate_by_name"] is True
