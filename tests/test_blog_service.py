import pytest

from app.core.errors import BadRequest, ConcurrencyConflict, NotFound
from app.db.entities import Blog
from app.schemas.blog import BlogDTO
from app.services import blog_service, blog_store


def _dto(**overrides):
    data = {"id": 5, "title": "T", "content": "C", "tags": ["x"], "author_id": 1}
    data.update(overrides)
    return BlogDTO(**data)


class FakeStore:
    """Substitui as funções de blog_store e registra as chamadas."""

    def __init__(self, monkeypatch, *, current=None, matched=True, exists=True, deleted=True):
        self.current = current
        self.matched = matched
        self.exists = exists
        self.deleted = deleted
        self.calls = []
        monkeypatch.setattr(blog_store, "fetch_blog", self.fetch_blog)
        monkeypatch.setattr(blog_store, "update_blog_versioned", self.update_blog_versioned)
        monkeypatch.setattr(blog_store, "blog_exists", self.blog_exists)
        monkeypatch.setattr(blog_store, "delete_blog_row", self.delete_blog_row)
        monkeypatch.setattr(blog_service, "commit", self.commit)

    async def fetch_blog(self, db, blog_id):
        self.calls.append(("fetch_blog", blog_id))
        return self.current

    async def update_blog_versioned(self, db, blog, expected_version):
        self.calls.append(("update", blog.id, expected_version))
        return self.matched

    async def blog_exists(self, db, blog_id):
        self.calls.append(("exists", blog_id))
        return self.exists

    async def delete_blog_row(self, db, blog_id):
        self.calls.append(("delete", blog_id))
        return self.deleted

    async def commit(self, db):
        self.calls.append(("commit",))


async def test_update_mismatch_fails_before_touching_store(monkeypatch):
    store = FakeStore(monkeypatch, current=Blog(id=5, title="T", content="C", author_id=1))

    with pytest.raises(BadRequest):
        await blog_service.update_blog(None, 6, _dto())
    assert store.calls == []


async def test_update_missing_blog_is_not_found(monkeypatch):
    store = FakeStore(monkeypatch, current=None)

    with pytest.raises(NotFound):
        await blog_service.update_blog(None, 5, _dto())
    assert store.calls == [("fetch_blog", 5)]


async def test_update_uses_fetched_version_when_client_sends_none(monkeypatch):
    store = FakeStore(monkeypatch, current=Blog(id=5, title="T", content="C", author_id=1, version=3))

    await blog_service.update_blog(None, 5, _dto(title="new"))
    assert ("update", 5, 3) in store.calls
    assert store.calls[-1] == ("commit",)


async def test_update_uses_client_version_token(monkeypatch):
    store = FakeStore(monkeypatch, current=Blog(id=5, title="T", content="C", author_id=1, version=3))

    await blog_service.update_blog(None, 5, _dto(version=2))
    assert ("update", 5, 2) in store.calls


async def test_conflict_on_deleted_row_is_not_found(monkeypatch):
    store = FakeStore(
        monkeypatch,
        current=Blog(id=5, title="T", content="C", author_id=1),
        matched=False,
        exists=False,
    )

    with pytest.raises(NotFound):
        await blog_service.update_blog(None, 5, _dto())
    assert ("commit",) not in store.calls


async def test_conflict_on_existing_row_is_surfaced_once(monkeypatch):
    store = FakeStore(
        monkeypatch,
        current=Blog(id=5, title="T", content="C", author_id=1),
        matched=False,
        exists=True,
    )

    with pytest.raises(ConcurrencyConflict):
        await blog_service.update_blog(None, 5, _dto())
    assert [c[0] for c in store.calls] == ["fetch_blog", "update", "exists"]


async def test_delete_of_row_removed_after_fetch_is_not_found(monkeypatch):
    store = FakeStore(
        monkeypatch,
        current=Blog(id=4242, title="T", content="C", author_id=1),
        deleted=False,
    )

    with pytest.raises(NotFound):
        await blog_service.delete_blog(None, 4242)
    assert store.calls == [("fetch_blog", 4242), ("delete", 4242)]


async def test_delete_commits_after_removing_row(monkeypatch):
    store = FakeStore(monkeypatch, current=Blog(id=7, title="T", content="C", author_id=1))

    await blog_service.delete_blog(None, 7)
    assert store.calls == [("fetch_blog", 7), ("delete", 7), ("commit",)]
