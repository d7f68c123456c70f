# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator
import logging
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import StoreUnavailable, ValidationFailed
from app.db.base import MAX_KEY

"""
Helpers comuns aos repositórios (`blog_store`, `author_store`).


- `store_errors()` traduz erros do driver: IntegrityError -> ValidationFailed; conexão -> StoreUnavailable.
- `commit(db)` confirma a transação com a mesma tradução.
- `key_in_range(key)` diz se um id cabe na coluna INTEGER (int4); fora disso nunca existe linha.
"""

log = logging.getLogger("db")


def key_in_range(key: int) -> bool:
    return 1 <= key <= MAX_KEY


@asynccontextmanager
async def store_errors() -> AsyncIterator[None]:
    try:
        yield
    except IntegrityError as e:
        raise ValidationFailed(f"Constraint violada: {e.orig}") from e
    except (OperationalError, InterfaceError, OSError) as e:
        log.error("store indisponível: %s: %s", e.__class__.__name__, e)
        raise StoreUnavailable(f"Banco indisponível ({e.__class__.__name__})") from e


async def commit(db: AsyncSession) -> None:
    async with store_errors():
        await db.commit()
