# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import List, Optional
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.base import authors
from app.db.entities import Author
from app.services.store import key_in_range, store_errors

"""
Acesso a dados de `authors` (listar, buscar por id, inserir)."""


async def fetch_authors(db: AsyncSession) -> List[Author]:
    async with store_errors():
        res = await db.execute(select(authors).order_by(authors.c.id))
        return [Author.from_row(row) for row in res.mappings().all()]


async def fetch_author(db: AsyncSession, author_id: int) -> Optional[Author]:
    if not key_in_range(author_id):
        return None
    async with store_errors():
        res = await db.execute(select(authors).where(authors.c.id == author_id))
        row = res.mappings().first()
    return Author.from_row(row) if row else None


async def insert_author(db: AsyncSession, name: str, email: str) -> Author:
    async with store_errors():
        res = await db.execute(
            insert(authors).values(name=name, email=email).returning(authors.c.id)
        )
        author_id = res.scalar_one()
    return Author(id=author_id, name=name, email=email)
