# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import logging
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine
from app.db.base import metadata

"""
Bootstrap do schema e distribuição (Citus).


- `create_schema(engine)` cria `authors`/`blogs` se não existirem (não é migration).
- `distribute_blogs(engine)` chama `create_distributed_table('blogs', 'id')` no PostgreSQL.
"""

log = logging.getLogger("db")


async def create_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    log.info("schema ok (authors, blogs)")


async def distribute_blogs(engine: AsyncEngine) -> bool:
    """
    Distribui `blogs` por `id` via extensão Citus. Retorna False (sem erro) fora do PostgreSQL.
    """
    if engine.dialect.name != "postgresql":
        log.info("distribute_blogs ignorado: dialeto %s", engine.dialect.name)
        return False

    async with engine.begin() as conn:
        await conn.execute(text("SELECT create_distributed_table('blogs', 'id')"))
    log.info("tabela blogs distribuída por id")
    return True
