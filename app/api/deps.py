# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import SessionLocal

"""
Dependências reutilizáveis da API.


- `get_db()` injeta `AsyncSession` por requisição (abre/fecha sessão corretamente).
- Ao sair (sucesso, erro ou cancelamento) a sessão é fechada e o que não teve commit é descartado.
"""

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        yield session
