# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import Any
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import NullPool
from app.core.config import settings

"""
Sessão assíncrona via SQLAlchemy 2.0.


- `build_engine(url)` cria `engine` async: PostgreSQL (asyncpg) com pool, SQLite (aiosqlite) sem pool.
- SQLite liga `PRAGMA foreign_keys=ON` em cada conexão.
- Expõe `engine` e `SessionLocal` (async_sessionmaker) para injeção via deps.
"""

SUPPORTED_PREFIXES = ("postgresql+asyncpg://", "sqlite+aiosqlite://")


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    if not url.startswith(SUPPORTED_PREFIXES):
        raise RuntimeError(
            "DATABASE_URL deve usar 'postgresql+asyncpg://' ou 'sqlite+aiosqlite://' (driver assíncrono)."
        )

    if url.startswith("sqlite"):
        engine = create_async_engine(url, echo=echo, poolclass=NullPool)

        @event.listens_for(engine.sync_engine, "connect")
        def _sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_async_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        echo=echo,
    )


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

SessionLocal = build_sessionmaker(engine)
