# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, List, Optional
from sqlalchemy import delete, exists, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.base import authors, blogs
from app.db.entities import Blog
from app.services.store import key_in_range, store_errors

"""
Acesso a dados de `blogs` (repositório explícito, sessão passada por parâmetro).


- Leitura: `fetch_blogs_with_author`, `fetch_blog_with_author`, `fetch_blog`, `blog_exists`.
- Escrita: `insert_blog` (retorna id), `update_blog_versioned` (checa versão), `delete_blog_row`.
- Ids fora da faixa da coluna são tratados como ausentes, sem ir ao banco.
- Não faz commit: quem chama decide quando confirmar a transação (`store.commit`).
"""

_WITH_AUTHOR = select(
    blogs,
    authors.c.name.label("author_name"),
    authors.c.email.label("author_email"),
).join(authors, authors.c.id == blogs.c.author_id)


async def fetch_blogs_with_author(db: AsyncSession) -> List[Blog]:
    async with store_errors():
        res = await db.execute(_WITH_AUTHOR.order_by(blogs.c.id))
        return [Blog.from_row(row) for row in res.mappings().all()]


async def fetch_blog_with_author(db: AsyncSession, blog_id: int) -> Optional[Blog]:
    if not key_in_range(blog_id):
        return None
    async with store_errors():
        res = await db.execute(_WITH_AUTHOR.where(blogs.c.id == blog_id))
        row = res.mappings().first()
    return Blog.from_row(row) if row else None


async def fetch_blog(db: AsyncSession, blog_id: int) -> Optional[Blog]:
    if not key_in_range(blog_id):
        return None
    async with store_errors():
        res = await db.execute(select(blogs).where(blogs.c.id == blog_id))
        row = res.mappings().first()
    return Blog.from_row(row) if row else None


async def blog_exists(db: AsyncSession, blog_id: int) -> bool:
    if not key_in_range(blog_id):
        return False
    async with store_errors():
        res = await db.execute(select(exists().where(blogs.c.id == blog_id)))
        return bool(res.scalar())


def _values(blog: Blog) -> dict[str, Any]:
    return {
        "title": blog.title,
        "content": blog.content,
        "tags": list(blog.tags or []),
        "author_id": blog.author_id,
    }


async def insert_blog(db: AsyncSession, blog: Blog) -> int:
    async with store_errors():
        res = await db.execute(
            insert(blogs).values(**_values(blog), version=1).returning(blogs.c.id)
        )
        return res.scalar_one()


async def update_blog_versioned(db: AsyncSession, blog: Blog, expected_version: int) -> bool:
    """
    UPDATE condicional: só grava se `version` ainda for `expected_version`, e incrementa a versão.

    Retorna False quando nenhuma linha casou (linha alterada ou removida desde a leitura).
    """
    stmt = (
        update(blogs)
        .where(blogs.c.id == blog.id, blogs.c.version == expected_version)
        .values(**_values(blog), version=blogs.c.version + 1)
    )
    async with store_errors():
        res = await db.execute(stmt)
    return res.rowcount == 1


async def delete_blog_row(db: AsyncSession, blog_id: int) -> bool:
    if not key_in_range(blog_id):
        return False
    async with store_errors():
        res = await db.execute(delete(blogs).where(blogs.c.id == blog_id))
    return res.rowcount == 1
