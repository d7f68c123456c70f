# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import List
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import BadRequest, ConcurrencyConflict, NotFound
from app.db.entities import Blog
from app.schemas.blog import BlogDTO, to_blog_dto
from app.services import blog_store
from app.services.store import commit

"""
Regras do recurso Blog (list/get/create/update/delete).


- Mapeia entidades <-> DTOs e garante existência do recurso (NotFound).
- `update_blog()` usa concorrência otimista: UPDATE condicionado à versão lida
  (ou à enviada pelo cliente); sem linha casada -> uma checagem de existência
  decide entre NotFound e ConcurrencyConflict. Nunca re-tenta.
- Cada chamada faz no máximo um commit (tudo ou nada).
"""

log = logging.getLogger("blogs")


async def list_blogs(db: AsyncSession) -> List[BlogDTO]:
    return [to_blog_dto(b) for b in await blog_store.fetch_blogs_with_author(db)]


async def get_blog(db: AsyncSession, blog_id: int) -> BlogDTO:
    blog = await blog_store.fetch_blog_with_author(db, blog_id)
    if blog is None:
        raise NotFound("Blog not found")
    return to_blog_dto(blog)


async def create_blog(db: AsyncSession, dto: BlogDTO) -> BlogDTO:
    # id/version/author enviados pelo cliente são ignorados
    blog = Blog(
        title=dto.title,
        content=dto.content,
        tags=list(dto.tags or []),
        author_id=dto.author_id,
    )
    blog.id = await blog_store.insert_blog(db, blog)

    created = await blog_store.fetch_blog_with_author(db, blog.id)
    await commit(db)
    log.info("blog %s criado (author_id=%s)", blog.id, blog.author_id)
    return to_blog_dto(created or blog)


async def blog_exists(db: AsyncSession, blog_id: int) -> bool:
    return await blog_store.blog_exists(db, blog_id)


async def update_blog(db: AsyncSession, blog_id: int, dto: BlogDTO) -> None:
    if dto.id != blog_id:
        raise BadRequest(f"Id do corpo ({dto.id}) difere do id da rota ({blog_id})")

    blog = await blog_store.fetch_blog(db, blog_id)
    if blog is None:
        raise NotFound("Blog not found")

    expected_version = dto.version if dto.version is not None else blog.version

    blog.title = dto.title
    blog.content = dto.content
    blog.tags = list(dto.tags or [])
    blog.author_id = dto.author_id

    if not await blog_store.update_blog_versioned(db, blog, expected_version):
        if not await blog_exists(db, blog_id):
            raise NotFound("Blog not found")
        log.warning("conflito de concorrência no blog %s (versão esperada %s)", blog_id, expected_version)
        raise ConcurrencyConflict(
            f"Blog {blog_id} foi alterado por outra requisição (versão esperada {expected_version})"
        )

    await commit(db)
    log.info("blog %s atualizado", blog_id)


async def delete_blog(db: AsyncSession, blog_id: int) -> None:
    blog = await blog_store.fetch_blog(db, blog_id)
    if blog is None:
        raise NotFound("Blog not found")

    # a linha pode ter sido removida por outra requisição desde a leitura
    if not await blog_store.delete_blog_row(db, blog_id):
        raise NotFound("Blog not found")
    await commit(db)
    log.info("blog %s removido", blog_id)
